"""Data models for the dependency analyzer engine."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field

# Packages that are never imported directly; only reported when explicitly used.
DEFAULT_IGNORED_PACKAGES: tuple[str, ...] = ("@types/*", "tslib", "typescript")


class DependencyTier(str, enum.Enum):
    DEPENDENCIES = "dependencies"
    DEV_DEPENDENCIES = "devDependencies"
    PEER_DEPENDENCIES = "peerDependencies"


@dataclass(frozen=True)
class DeclaredDependency:
    """A package declared in one tier of package.json."""

    name: str
    tier: DependencyTier
    version_range: str | None = None


@dataclass(frozen=True)
class ImportLocation:
    file: str
    line: int
    statement: str


@dataclass
class PackageUsage:
    """Every location a package is referenced from, split by import kind."""

    name: str
    runtime_locations: list[ImportLocation] = field(default_factory=list)
    type_only_locations: list[ImportLocation] = field(default_factory=list)

    @property
    def has_runtime(self) -> bool:
        return bool(self.runtime_locations)

    @property
    def has_type_only(self) -> bool:
        return bool(self.type_only_locations)


@dataclass
class MisplacedDependency:
    """A devDependency required by shipping code."""

    package_name: str
    locations: list[ImportLocation]


@dataclass
class UsedPackage:
    name: str
    count: int  # distinct (file, line) references


@dataclass
class IgnoredPackages:
    """Declared packages kept out of the issue lists, by reason."""

    type_only: list[str] = field(default_factory=list)
    by_default: list[str] = field(default_factory=list)
    by_option: list[str] = field(default_factory=list)


@dataclass
class AnalysisResult:
    unused: list[str]
    misplaced: list[MisplacedDependency]
    type_only: list[str]
    ignored: IgnoredPackages
    total_issues: int
    used: list[UsedPackage] = field(default_factory=list)

    @property
    def misplaced_names(self) -> list[str]:
        return [m.package_name for m in self.misplaced]


@dataclass(frozen=True)
class AnalyzerOptions:
    """Analyzer switches.

    ``ignored_packages`` entries are exact names or ``fnmatch`` globs
    (``@storybook/*``).
    """

    check_all: bool = False
    ignored_packages: tuple[str, ...] = ()
    default_ignored: tuple[str, ...] = DEFAULT_IGNORED_PACKAGES
