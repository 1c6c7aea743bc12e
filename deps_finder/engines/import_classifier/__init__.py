"""Import classifier engine — extract classified package references from source text."""

from deps_finder.engines.import_classifier.classifier import (
    classify,
    classify_file,
    strip_comments,
)
from deps_finder.engines.import_classifier.config import (
    DEFAULT_CLASSIFIER_CONFIG,
    ClassifierConfig,
)
from deps_finder.engines.import_classifier.models import ImportFinding, ImportKind
from deps_finder.engines.import_classifier.normalizer import (
    is_builtin,
    normalize,
    resolve_package,
)

__all__ = [
    "DEFAULT_CLASSIFIER_CONFIG",
    "ClassifierConfig",
    "ImportFinding",
    "ImportKind",
    "classify",
    "classify_file",
    "is_builtin",
    "normalize",
    "resolve_package",
    "strip_comments",
]
