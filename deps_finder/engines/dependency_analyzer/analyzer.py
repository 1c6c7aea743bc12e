"""Dependency usage analyzer — pure reconciliation, no I/O.

Given the declared dependency tiers and the classified import findings of a
project, compute:

* unused: declared, never referenced.
* type_only: declared, referenced only by type-only imports.
* misplaced: declared in devDependencies and imported at runtime by a file
  that is not a production config.

Runtime usage always wins over type-only usage for the same package.
"""

from __future__ import annotations

import fnmatch
from collections.abc import Callable, Iterable

from deps_finder.engines.dependency_analyzer.models import (
    AnalysisResult,
    AnalyzerOptions,
    DeclaredDependency,
    DependencyTier,
    IgnoredPackages,
    ImportLocation,
    MisplacedDependency,
    PackageUsage,
    UsedPackage,
)
from deps_finder.engines.file_roles.rules import is_production_config as _is_production_config
from deps_finder.engines.import_classifier.models import ImportFinding, ImportKind

_DEFAULT_OPTIONS = AnalyzerOptions()


def collect_usage(findings: Iterable[ImportFinding]) -> dict[str, PackageUsage]:
    """Group findings by package, keeping every location."""
    usage: dict[str, PackageUsage] = {}
    for finding in findings:
        entry = usage.setdefault(finding.package_name, PackageUsage(finding.package_name))
        location = ImportLocation(finding.file, finding.line, finding.statement)
        if finding.kind is ImportKind.RUNTIME:
            entry.runtime_locations.append(location)
        else:
            entry.type_only_locations.append(location)
    return usage


def deduplicate_locations(locations: Iterable[ImportLocation]) -> list[ImportLocation]:
    """Drop repeated ``(file, line)`` pairs (first wins) and sort."""
    seen: dict[tuple[str, int], ImportLocation] = {}
    for loc in locations:
        seen.setdefault((loc.file, loc.line), loc)
    return [seen[key] for key in sorted(seen)]


def _matches_any(name: str, patterns: Iterable[str]) -> bool:
    return any(name == p or fnmatch.fnmatchcase(name, p) for p in patterns)


def _names_in(declared: list[DeclaredDependency], *tiers: DependencyTier) -> set[str]:
    return {d.name for d in declared if d.tier in tiers}


def _find_misplaced(
    declared: list[DeclaredDependency],
    usage: dict[str, PackageUsage],
    is_production_config: Callable[[str], bool],
) -> list[MisplacedDependency]:
    dev_names = _names_in(declared, DependencyTier.DEV_DEPENDENCIES)

    misplaced: list[MisplacedDependency] = []
    for name in sorted(dev_names):
        entry = usage.get(name)
        if entry is None or not entry.has_runtime:
            continue
        locations = deduplicate_locations(
            loc for loc in entry.runtime_locations if not is_production_config(loc.file)
        )
        if locations:
            misplaced.append(MisplacedDependency(package_name=name, locations=locations))
    return misplaced


def _summarize_used(
    declared: list[DeclaredDependency], usage: dict[str, PackageUsage]
) -> list[UsedPackage]:
    used: list[UsedPackage] = []
    for name in {d.name for d in declared}:
        entry = usage.get(name)
        if entry is None:
            continue
        count = len(
            deduplicate_locations(entry.runtime_locations + entry.type_only_locations)
        )
        used.append(UsedPackage(name=name, count=count))
    used.sort(key=lambda u: (-u.count, u.name))
    return used


def analyze(
    declared: Iterable[DeclaredDependency],
    findings: Iterable[ImportFinding],
    options: AnalyzerOptions = _DEFAULT_OPTIONS,
    is_production_config: Callable[[str], bool] = _is_production_config,
) -> AnalysisResult:
    """Reconcile declared dependencies with classified imports.

    Type-only packages are informational: they are listed in ``type_only``
    (and ``ignored.type_only``) but do not count towards ``total_issues``.
    Default-ignored packages (``@types/*`` ...) are only hidden from
    ``unused``; explicitly ignored packages are hidden from every list.
    """
    declared = list(declared)
    usage = collect_usage(findings)

    scope_tiers = [DependencyTier.DEPENDENCIES, DependencyTier.PEER_DEPENDENCIES]
    if options.check_all:
        scope_tiers.append(DependencyTier.DEV_DEPENDENCIES)
    in_scope = sorted(_names_in(declared, *scope_tiers))

    unused = [name for name in in_scope if name not in usage]
    type_only = [
        name
        for name in in_scope
        if name in usage and not usage[name].has_runtime and usage[name].has_type_only
    ]
    misplaced = (
        [] if options.check_all else _find_misplaced(declared, usage, is_production_config)
    )

    def by_option(name: str) -> bool:
        return _matches_any(name, options.ignored_packages)

    reported = set(unused) | set(type_only) | {m.package_name for m in misplaced}
    ignored_by_option = sorted(name for name in reported if by_option(name))

    unused = [name for name in unused if not by_option(name)]
    type_only = [name for name in type_only if not by_option(name)]
    misplaced = [m for m in misplaced if not by_option(m.package_name)]

    ignored_by_default = [
        name for name in unused if _matches_any(name, options.default_ignored)
    ]
    unused = [name for name in unused if name not in ignored_by_default]

    return AnalysisResult(
        unused=unused,
        misplaced=misplaced,
        type_only=type_only,
        ignored=IgnoredPackages(
            type_only=list(type_only),
            by_default=ignored_by_default,
            by_option=ignored_by_option,
        ),
        total_issues=len(unused) + len(misplaced),
        used=_summarize_used(declared, usage),
    )
