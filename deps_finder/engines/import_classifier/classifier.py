"""Import classifier — regex-based, no parser.

Three independent recognizers run over comment-stripped source:

* runtime: default / namespace / named / side-effect imports, ``export ...
  from`` re-exports, ``require()`` and literal dynamic ``import()``.
* type-only: ``import type ...`` / ``export type ...`` statements and
  ``typeof import()`` type queries.
* mixed: brace lists carrying inline ``type`` qualifiers, e.g.
  ``import { type A, B } from 'pkg'``. The statement is runtime when at least
  one binding lacks the qualifier.

Each recognizer leaves the statements owned by the others alone, so a
statement is classified exactly once.
"""

from __future__ import annotations

import bisect
import re
from collections.abc import Iterator
from pathlib import Path

import structlog

from deps_finder.engines.import_classifier.config import (
    DEFAULT_CLASSIFIER_CONFIG,
    ClassifierConfig,
)
from deps_finder.engines.import_classifier.models import ImportFinding, ImportKind
from deps_finder.engines.import_classifier.normalizer import resolve_package

log = structlog.get_logger("deps_finder.classifier")

# String literals are matched first and kept, so "/*" or "//" inside quotes
# never opens a comment. Quoted strings stop at a line break.
_COMMENT_OR_STRING_RE = re.compile(
    r"""
    (?P<string>
        '(?:\\.|[^'\\\n])*'
      | "(?:\\.|[^"\\\n])*"
      | `(?:\\.|[^`\\])*`
    )
    | (?P<block>/\*.*?\*/)
    | (?<!:)//[^\n]*
    """,
    re.VERBOSE | re.DOTALL,
)

_STATEMENT_RE = re.compile(
    r"""
    (?<![\w$.])(?P<keyword>import|export)\b\s*
    (?:
        (?P<bindings>(?:(?!\b(?:import|export|from)\b)[\w$*\s{},])+)
        \bfrom\s*
    )?
    (?P<quote>['"])(?P<specifier>[^'"\s]+)(?P=quote)
    """,
    re.VERBOSE,
)

_REQUIRE_RE = re.compile(
    r"""(?<![\w$.])require\s*\(\s*(?P<quote>['"`])(?P<specifier>[^'"`\s${}]+)(?P=quote)\s*\)"""
)

_DYNAMIC_IMPORT_RE = re.compile(
    r"""
    (?<![\w$.])(?P<typeof>typeof\s+)?
    import\s*\(\s*(?P<quote>['"`])(?P<specifier>[^'"`\s${}]+)(?P=quote)\s*[,)]
    """,
    re.VERBOSE,
)

_WHOLE_TYPE_RE = re.compile(r"^type\s+[\w${*]")
_INLINE_TYPE_RE = re.compile(r"^type\s+[\w$]")
_TYPE_NAMED_BINDING_RE = re.compile(r"^type\s+as\s+[\w$]+$")
_BRACE_LIST_RE = re.compile(r"^\{(?P<body>[^{}]*)\}$")

# (offset, kind, specifier, statement)
_RawFinding = tuple[int, ImportKind, str, str]


def strip_comments(content: str) -> str:
    """Remove block and line comments, keeping every line break and string."""

    def _replace(m: re.Match[str]) -> str:
        if m.group("string") is not None:
            return m.group("string")
        if m.group("block") is not None:
            return "\n" * m.group("block").count("\n")
        return ""

    return _COMMENT_OR_STRING_RE.sub(_replace, content)


def _collapse(text: str) -> str:
    return " ".join(text.split())


def _bindings(match: re.Match[str]) -> str:
    return (match.group("bindings") or "").strip()


def _is_whole_statement_type(bindings: str) -> bool:
    return bool(_WHOLE_TYPE_RE.match(bindings))


def _brace_body(bindings: str) -> str | None:
    m = _BRACE_LIST_RE.match(bindings)
    return m.group("body") if m else None


def _split_bindings(body: str) -> list[str]:
    return [part.strip() for part in body.split(",") if part.strip()]


def _is_type_binding(part: str) -> bool:
    """``type Foo`` / ``type Foo as Bar`` are type bindings; ``type as t`` is not."""
    return bool(_INLINE_TYPE_RE.match(part)) and not _TYPE_NAMED_BINDING_RE.match(part)


def _has_inline_type(bindings: str) -> bool:
    body = _brace_body(bindings)
    if body is None:
        return False
    return any(_is_type_binding(part) for part in _split_bindings(body))


# ── recognizers ──────────────────────────────────────────────────────────


def _scan_runtime(text: str) -> Iterator[_RawFinding]:
    for m in _STATEMENT_RE.finditer(text):
        bindings = _bindings(m)
        if _is_whole_statement_type(bindings) or _has_inline_type(bindings):
            continue
        yield m.start(), ImportKind.RUNTIME, m.group("specifier"), _collapse(m.group(0))

    for m in _REQUIRE_RE.finditer(text):
        yield m.start(), ImportKind.RUNTIME, m.group("specifier"), _collapse(m.group(0))

    for m in _DYNAMIC_IMPORT_RE.finditer(text):
        if m.group("typeof"):
            continue
        yield m.start(), ImportKind.RUNTIME, m.group("specifier"), _collapse(m.group(0))


def _scan_type_only(text: str) -> Iterator[_RawFinding]:
    for m in _STATEMENT_RE.finditer(text):
        if _is_whole_statement_type(_bindings(m)):
            yield m.start(), ImportKind.TYPE_ONLY, m.group("specifier"), _collapse(m.group(0))

    for m in _DYNAMIC_IMPORT_RE.finditer(text):
        if m.group("typeof"):
            yield m.start(), ImportKind.TYPE_ONLY, m.group("specifier"), _collapse(m.group(0))


def _scan_mixed(text: str) -> Iterator[_RawFinding]:
    for m in _STATEMENT_RE.finditer(text):
        bindings = _bindings(m)
        if not _has_inline_type(bindings):
            continue
        parts = _split_bindings(_brace_body(bindings) or "")
        kind = (
            ImportKind.TYPE_ONLY
            if all(_is_type_binding(part) for part in parts)
            else ImportKind.RUNTIME
        )
        yield m.start(), kind, m.group("specifier"), _collapse(m.group(0))


_RECOGNIZERS = (_scan_runtime, _scan_type_only, _scan_mixed)


# ── public API ───────────────────────────────────────────────────────────


def classify(
    content: str,
    file: str = "<string>",
    config: ClassifierConfig = DEFAULT_CLASSIFIER_CONFIG,
) -> list[ImportFinding]:
    """Extract classified package references from one source file.

    Returns one :class:`ImportFinding` per occurrence, in source order.
    Relative paths, URLs and runtime built-ins are dropped.
    """
    text = strip_comments(content)
    newlines = [i for i, ch in enumerate(text) if ch == "\n"]

    raw: list[_RawFinding] = []
    for recognizer in _RECOGNIZERS:
        raw.extend(recognizer(text))
    raw.sort(key=lambda item: item[0])

    findings: list[ImportFinding] = []
    for offset, kind, specifier, statement in raw:
        package = resolve_package(specifier, config)
        if package is None:
            continue
        findings.append(
            ImportFinding(
                package_name=package,
                kind=kind,
                file=file,
                line=bisect.bisect_left(newlines, offset) + 1,
                statement=statement,
            )
        )
    return findings


def classify_file(
    path: str | Path,
    config: ClassifierConfig = DEFAULT_CLASSIFIER_CONFIG,
) -> list[ImportFinding]:
    """Read and classify a file. Unreadable files contribute no findings."""
    try:
        content = Path(path).read_text(encoding="utf-8", errors="replace")
    except OSError as exc:
        log.warning("classifier.file_unreadable", file=str(path), error=str(exc))
        return []
    return classify(content, file=str(path), config=config)
