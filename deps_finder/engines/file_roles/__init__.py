"""Decide which files are analyzed and how their imports count."""

from deps_finder.engines.file_roles.discovery import (
    detect_build_directories,
    detect_by_heuristic,
    find_source_files,
)
from deps_finder.engines.file_roles.rules import (
    DEFAULT_FILE_ROLE_RULES,
    FileRoleRules,
    is_dev_config,
    is_production_config,
    should_analyze,
)

__all__ = [
    "DEFAULT_FILE_ROLE_RULES",
    "FileRoleRules",
    "detect_build_directories",
    "detect_by_heuristic",
    "find_source_files",
    "is_dev_config",
    "is_production_config",
    "should_analyze",
]
