"""Dependency analyzer engine — find unused, misplaced and type-only dependencies."""

from deps_finder.engines.dependency_analyzer.analyzer import (
    analyze,
    collect_usage,
    deduplicate_locations,
)
from deps_finder.engines.dependency_analyzer.manifest import (
    declared_dependencies,
    read_manifest,
)
from deps_finder.engines.dependency_analyzer.models import (
    DEFAULT_IGNORED_PACKAGES,
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
from deps_finder.engines.dependency_analyzer.scanner import collect_findings, scan_project

__all__ = [
    "DEFAULT_IGNORED_PACKAGES",
    "AnalysisResult",
    "AnalyzerOptions",
    "DeclaredDependency",
    "DependencyTier",
    "IgnoredPackages",
    "ImportLocation",
    "MisplacedDependency",
    "PackageUsage",
    "UsedPackage",
    "analyze",
    "collect_findings",
    "collect_usage",
    "declared_dependencies",
    "deduplicate_locations",
    "read_manifest",
    "scan_project",
]
