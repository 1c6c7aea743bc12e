"""Data models for the import classifier engine."""

from __future__ import annotations

import enum
from dataclasses import dataclass


class ImportKind(str, enum.Enum):
    RUNTIME = "runtime"
    TYPE_ONLY = "type-only"


@dataclass(frozen=True)
class ImportFinding:
    """A single package reference found in a source file."""

    package_name: str
    kind: ImportKind
    file: str
    line: int  # 1-based, line of the statement's first token
    statement: str
