"""Which files are analyzed, and which count as production config."""

from __future__ import annotations

import re
from dataclasses import dataclass, replace
from pathlib import PurePath, PurePosixPath

_CONFIG_EXT = r"(?:js|ts|mjs|cjs|mts|cts)"

# Bundler/framework configs whose imports ship with the application.
PRODUCTION_CONFIG_PATTERNS: tuple[re.Pattern[str], ...] = (
    re.compile(rf"^next\.config\.{_CONFIG_EXT}$"),
    re.compile(rf"^next-[^/]+\.config\.{_CONFIG_EXT}$"),
    re.compile(rf"^webpack\.config\.{_CONFIG_EXT}$"),
    re.compile(rf"^vite\.config\.{_CONFIG_EXT}$"),
    re.compile(rf"^rollup\.config\.{_CONFIG_EXT}$"),
    re.compile(rf"^postcss\.config\.{_CONFIG_EXT}$"),
)

# Test-runner / linter / tooling configs (devDependencies territory).
DEV_CONFIG_PREFIXES: tuple[str, ...] = (
    "jest.config.",
    "vitest.config.",
    "babel.config.",
    "eslint.config.",
    "prettier.config.",
    "tsup.config.",
    "biome.config.",
    "playwright.config.",
    "cypress.config.",
    "tailwind.config.",
    "stylelint.config.",
    "commitlint.config.",
)

SOURCE_EXTENSIONS = frozenset({".ts", ".tsx", ".js", ".jsx", ".mjs", ".cjs", ".mts", ".cts"})

_DECLARATION_SUFFIXES = (".d.ts", ".d.mts", ".d.cts")

EXCLUDED_DIRECTORIES = frozenset(
    {
        "node_modules",
        "dist",
        "build",
        "out",
        "test",
        "tests",
        "__tests__",
        "__mocks__",
        "stories",
        ".storybook",
        "storybook-static",
        "coverage",
        "e2e",
        "cypress",
        "playwright",
        ".next",
        ".nuxt",
        ".turbo",
        ".cache",
        ".vscode",
        ".idea",
        ".git",
    }
)

EXCLUDED_FILENAME_FRAGMENTS: tuple[str, ...] = (
    ".test.",
    ".spec.",
    ".stories.",
    ".story.",
    "testing-library.",
    "test-utils.",
    "setupTests.",
    "jest.setup.",
    "vitest.setup.",
)


@dataclass(frozen=True)
class FileRoleRules:
    """Immutable file classification rules.

    ``extra_excluded_dirs`` holds root-relative directories (e.g. a custom
    ``outDir``) excluded on top of the well-known names.
    """

    source_extensions: frozenset[str] = SOURCE_EXTENSIONS
    production_config_patterns: tuple[re.Pattern[str], ...] = PRODUCTION_CONFIG_PATTERNS
    dev_config_prefixes: tuple[str, ...] = DEV_CONFIG_PREFIXES
    excluded_directories: frozenset[str] = EXCLUDED_DIRECTORIES
    excluded_filename_fragments: tuple[str, ...] = EXCLUDED_FILENAME_FRAGMENTS
    extra_excluded_dirs: tuple[str, ...] = ()

    def with_excluded_dirs(self, dirs: list[str] | tuple[str, ...]) -> FileRoleRules:
        merged = list(self.extra_excluded_dirs)
        for d in dirs:
            cleaned = _clean_dir(d)
            if cleaned and cleaned not in merged:
                merged.append(cleaned)
        return replace(self, extra_excluded_dirs=tuple(merged))


DEFAULT_FILE_ROLE_RULES = FileRoleRules()


def _clean_dir(d: str) -> str:
    cleaned = str(PurePosixPath(d.replace("\\", "/")))
    return "" if cleaned in (".", "/") else cleaned.rstrip("/")


def _as_posix(path: str | PurePath) -> PurePosixPath:
    return PurePosixPath(str(path).replace("\\", "/"))


def is_production_config(
    path: str | PurePath,
    rules: FileRoleRules = DEFAULT_FILE_ROLE_RULES,
) -> bool:
    """Return True if *path* is a bundler/framework config that ships."""
    name = _as_posix(path).name
    return any(p.match(name) for p in rules.production_config_patterns)


def is_dev_config(
    path: str | PurePath,
    rules: FileRoleRules = DEFAULT_FILE_ROLE_RULES,
) -> bool:
    """Return True for test-runner, linter and tooling configs (``jest.config.ts``, ...)."""
    return _as_posix(path).name.startswith(rules.dev_config_prefixes)


def _in_extra_dir(posix: PurePosixPath, rules: FileRoleRules) -> bool:
    text = str(posix)
    return any(
        text == d or text.startswith(d + "/") for d in rules.extra_excluded_dirs
    )


def should_analyze(
    path: str | PurePath,
    rules: FileRoleRules = DEFAULT_FILE_ROLE_RULES,
) -> bool:
    """Return True if the file at *path* (relative to the scan root) is scanned.

    Production configs are always scanned, even inside excluded directories.
    """
    posix = _as_posix(path)
    name = posix.name

    if name.endswith(_DECLARATION_SUFFIXES):
        return False
    if posix.suffix not in rules.source_extensions:
        return False
    if is_production_config(posix, rules):
        return True
    if is_dev_config(posix, rules):
        return False
    if any(part in rules.excluded_directories for part in posix.parts[:-1]):
        return False
    if _in_extra_dir(posix, rules):
        return False
    return not any(fragment in name for fragment in rules.excluded_filename_fragments)
