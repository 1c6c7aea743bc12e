"""Walk a project for source files and detect build output directories."""

from __future__ import annotations

import json
import os
import re
from pathlib import Path

import structlog

from deps_finder.engines.file_roles.rules import (
    DEFAULT_FILE_ROLE_RULES,
    FileRoleRules,
    should_analyze,
)
from deps_finder.exceptions import SourceRootNotFoundError

log = structlog.get_logger("deps_finder.discovery")

# Never worth descending into.
_PRUNED_DIRS = frozenset({"node_modules", ".git", ".hg", ".svn"})

_BUILD_LIKE_SUFFIXES = ("-static", "-dist", "-build", "-output")

_OUTDIR_FLAG_RE = re.compile(r"--outDir[=\s]+([^\s&;|]+)")

# JSONC: strings are kept, comments dropped, trailing commas removed.
_JSONC_TOKEN_RE = re.compile(r'("(?:\\.|[^"\\])*")|//[^\n]*|/\*.*?\*/', re.DOTALL)
_TRAILING_COMMA_RE = re.compile(r'("(?:\\.|[^"\\])*")|,(\s*[}\]])')


def _strip_jsonc(text: str) -> str:
    text = _JSONC_TOKEN_RE.sub(lambda m: m.group(1) or "", text)
    return _TRAILING_COMMA_RE.sub(lambda m: m.group(1) or m.group(2), text)


def _load_json(path: Path, *, lenient: bool = False) -> dict | None:
    """Load a JSON object, or None when missing/invalid.

    *lenient* accepts comments and trailing commas (tsconfig.json style).
    """
    try:
        text = path.read_text(encoding="utf-8")
    except OSError:
        return None
    if lenient:
        text = _strip_jsonc(text)
    try:
        data = json.loads(text)
    except ValueError:
        log.debug("discovery.invalid_json", file=str(path))
        return None
    return data if isinstance(data, dict) else None


def _dir_entry(value: str) -> str:
    return value.strip().strip("\"'").removeprefix("./").rstrip("/")


def detect_build_directories(project_root: str | Path) -> list[str]:
    """Build output directories declared by tsconfig.json and package.json scripts."""
    root = Path(project_root)
    found: list[str] = []

    pkg = _load_json(root / "package.json")
    scripts = pkg.get("scripts") if pkg else None
    if isinstance(scripts, dict):
        for script in scripts.values():
            if not isinstance(script, str):
                continue
            for m in _OUTDIR_FLAG_RE.finditer(script):
                found.append(_dir_entry(m.group(1)))

    tsconfig = _load_json(root / "tsconfig.json", lenient=True)
    compiler_options = tsconfig.get("compilerOptions") if tsconfig else None
    if isinstance(compiler_options, dict):
        out_dir = compiler_options.get("outDir")
        if isinstance(out_dir, str):
            found.append(_dir_entry(out_dir))

    return list(dict.fromkeys(d for d in found if d))


def detect_by_heuristic(project_root: str | Path) -> list[str]:
    """Top-level directories whose names look like build output."""
    root = Path(project_root)
    try:
        entries = sorted(root.iterdir())
    except OSError:
        return []
    return [
        entry.name
        for entry in entries
        if entry.is_dir() and entry.name.endswith(_BUILD_LIKE_SUFFIXES)
    ]


def find_source_files(
    root: str | Path,
    rules: FileRoleRules = DEFAULT_FILE_ROLE_RULES,
) -> list[Path]:
    """Collect analyzable source files under *root*, sorted.

    Raises :class:`SourceRootNotFoundError` if *root* is not a directory.
    """
    root = Path(root)
    if not root.is_dir():
        raise SourceRootNotFoundError(str(root))

    files: list[Path] = []
    for dirpath, dirnames, filenames in os.walk(root):
        dirnames[:] = [d for d in dirnames if d not in _PRUNED_DIRS]
        for name in filenames:
            path = Path(dirpath) / name
            if should_analyze(path.relative_to(root), rules):
                files.append(path)
    return sorted(files)
