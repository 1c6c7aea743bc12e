"""Module specifier normalization: specifier to installable package name."""

from __future__ import annotations

from deps_finder.engines.import_classifier.config import (
    DEFAULT_CLASSIFIER_CONFIG,
    ClassifierConfig,
)

_NODE_SCHEME = "node:"


def normalize(specifier: str | None) -> str | None:
    """Return the package name a module specifier refers to.

    ``None`` means the specifier is not a package: relative and absolute
    paths, URLs, and malformed scoped names.

        >>> normalize("@babel/core/lib/config")
        '@babel/core'
        >>> normalize("lodash/fp/map")
        'lodash'
    """
    if not specifier:
        return None
    if "://" in specifier:
        return None
    if specifier.startswith((".", "/")):
        return None

    parts = specifier.split("/")
    if specifier.startswith("@"):
        if len(parts) < 2 or len(parts[0]) < 2 or not parts[1]:
            return None
        return f"{parts[0]}/{parts[1]}"

    return parts[0] or None


def is_builtin(name: str, config: ClassifierConfig = DEFAULT_CLASSIFIER_CONFIG) -> bool:
    """Return True for Node.js and Bun modules provided by the runtime.

    Accepts both normalized names (``fs``) and full specifiers
    (``node:fs/promises``).
    """
    if name.startswith(_NODE_SCHEME):
        root = name[len(_NODE_SCHEME) :].split("/")[0]
        return root in config.node_builtins or root in config.node_prefix_only
    if name in config.bun_builtins:
        return True
    return name.split("/")[0] in config.node_builtins


def resolve_package(
    specifier: str | None,
    config: ClassifierConfig = DEFAULT_CLASSIFIER_CONFIG,
) -> str | None:
    """Normalize *specifier* and drop runtime built-ins."""
    name = normalize(specifier)
    if name is None:
        return None
    if is_builtin(name, config):
        return None
    return name
