"""Project scanner — manifest + source discovery + classification + analysis."""

from __future__ import annotations

import asyncio
from collections.abc import Sequence
from functools import partial
from pathlib import Path

import structlog

from deps_finder.engines.dependency_analyzer.analyzer import analyze
from deps_finder.engines.dependency_analyzer.manifest import (
    declared_dependencies,
    read_manifest,
)
from deps_finder.engines.dependency_analyzer.models import AnalysisResult, AnalyzerOptions
from deps_finder.engines.file_roles.discovery import (
    detect_build_directories,
    detect_by_heuristic,
    find_source_files,
)
from deps_finder.engines.file_roles.rules import (
    DEFAULT_FILE_ROLE_RULES,
    FileRoleRules,
    is_production_config,
)
from deps_finder.engines.import_classifier.classifier import classify_file
from deps_finder.engines.import_classifier.config import (
    DEFAULT_CLASSIFIER_CONFIG,
    ClassifierConfig,
)
from deps_finder.engines.import_classifier.models import ImportFinding

log = structlog.get_logger("deps_finder.scanner")

_MAX_CONCURRENCY = 16


async def collect_findings(
    paths: Sequence[Path],
    config: ClassifierConfig = DEFAULT_CLASSIFIER_CONFIG,
    concurrency: int = _MAX_CONCURRENCY,
) -> list[ImportFinding]:
    """Classify files concurrently; findings are returned in *paths* order."""
    sem = asyncio.Semaphore(concurrency)

    async def _classify_one(path: Path) -> list[ImportFinding]:
        async with sem:
            return await asyncio.to_thread(classify_file, path, config)

    results = await asyncio.gather(*(_classify_one(p) for p in paths))
    return [finding for file_findings in results for finding in file_findings]


def _build_dirs_relative_to(root: Path, project_root: Path) -> list[str]:
    """Build output dirs of *project_root*, re-expressed relative to *root*."""
    candidates = detect_build_directories(project_root) + detect_by_heuristic(project_root)
    base = root.resolve()
    relative: list[str] = []
    for candidate in candidates:
        try:
            rel = (project_root / candidate).resolve().relative_to(base)
        except ValueError:
            continue
        relative.append(rel.as_posix())
    return relative


def scan_project(
    root: str | Path,
    manifest_path: str | Path | None = None,
    options: AnalyzerOptions | None = None,
    *,
    rules: FileRoleRules = DEFAULT_FILE_ROLE_RULES,
    config: ClassifierConfig = DEFAULT_CLASSIFIER_CONFIG,
    detect_build_dirs: bool = True,
) -> AnalysisResult:
    """Analyze the sources under *root* against *manifest_path*.

    *manifest_path* defaults to ``<root>/package.json``. Build output
    directories found in tsconfig.json / package.json next to the manifest
    are excluded from the scan.

    Raises :class:`~deps_finder.exceptions.ManifestError` subclasses for an
    unusable manifest and :class:`~deps_finder.exceptions.SourceRootNotFoundError`
    for a missing *root*.
    """
    root = Path(root)
    manifest_path = Path(manifest_path) if manifest_path else root / "package.json"
    options = options or AnalyzerOptions()

    declared = declared_dependencies(read_manifest(manifest_path))

    if detect_build_dirs:
        build_dirs = _build_dirs_relative_to(root, manifest_path.parent)
        if build_dirs:
            log.debug("scanner.build_dirs_excluded", dirs=build_dirs)
            rules = rules.with_excluded_dirs(build_dirs)

    files = find_source_files(root, rules)
    if not files:
        log.warning("scanner.no_source_files", root=str(root))

    findings = asyncio.run(collect_findings(files, config))
    result = analyze(
        declared,
        findings,
        options,
        is_production_config=partial(is_production_config, rules=rules),
    )

    log.info(
        "scanner.completed",
        root=str(root),
        files=len(files),
        findings=len(findings),
        declared=len(declared),
        total_issues=result.total_issues,
    )
    return result
