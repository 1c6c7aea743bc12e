"""deps-finder: dependency usage analyzer for JavaScript/TypeScript projects."""

__version__ = "0.1.0"

from deps_finder.engines.dependency_analyzer import (
    AnalysisResult,
    AnalyzerOptions,
    DeclaredDependency,
    DependencyTier,
    analyze,
    scan_project,
)
from deps_finder.engines.file_roles import is_production_config, should_analyze
from deps_finder.engines.import_classifier import (
    ImportFinding,
    ImportKind,
    classify,
    normalize,
)

__all__ = [
    "AnalysisResult",
    "AnalyzerOptions",
    "DeclaredDependency",
    "DependencyTier",
    "ImportFinding",
    "ImportKind",
    "analyze",
    "classify",
    "is_production_config",
    "normalize",
    "scan_project",
    "should_analyze",
]
