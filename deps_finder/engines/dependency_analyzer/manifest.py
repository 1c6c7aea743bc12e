"""package.json loading and dependency tier extraction."""

from __future__ import annotations

import json
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from deps_finder.engines.dependency_analyzer.models import DeclaredDependency, DependencyTier
from deps_finder.exceptions import (
    ManifestNotFoundError,
    ManifestParseError,
    ManifestReadError,
)


def read_manifest(path: str | Path) -> dict[str, Any]:
    """Load package.json as a dict.

    Raises:
        ManifestNotFoundError: the file does not exist.
        ManifestReadError: the file exists but cannot be read.
        ManifestParseError: invalid JSON, or the top level is not an object.
    """
    path = Path(path)
    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        raise ManifestNotFoundError(str(path)) from None
    except (OSError, UnicodeDecodeError) as exc:
        raise ManifestReadError(str(path), str(exc)) from exc

    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        raise ManifestParseError(str(path), f"line {exc.lineno}: {exc.msg}") from exc

    if not isinstance(data, dict):
        raise ManifestParseError(str(path), "top-level value is not an object")
    return data


def declared_dependencies(manifest: Mapping[str, Any]) -> list[DeclaredDependency]:
    """Flatten the dependency tiers of a parsed manifest.

    Missing or non-object tiers are treated as empty.
    """
    if not isinstance(manifest, Mapping):
        return []

    declared: list[DeclaredDependency] = []
    for tier in DependencyTier:
        section = manifest.get(tier.value)
        if not isinstance(section, Mapping):
            continue
        for name, version in section.items():
            if not isinstance(name, str) or not name:
                continue
            declared.append(
                DeclaredDependency(
                    name=name,
                    tier=tier,
                    version_range=version if isinstance(version, str) else None,
                )
            )
    return declared
