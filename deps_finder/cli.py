"""CLI entry point: deps-finder.

    deps-finder                          # text report for ./ against ./package.json
    deps-finder --json                   # machine-readable report
    deps-finder --all                    # also check devDependencies for unused
    deps-finder -i eslint,prettier       # ignore packages (globs allowed)
"""

from __future__ import annotations

import os
import sys

import click

from deps_finder.core.logging import setup_logging
from deps_finder.engines.dependency_analyzer.models import AnalyzerOptions
from deps_finder.engines.dependency_analyzer.scanner import scan_project
from deps_finder.exceptions import DepsFinderError
from deps_finder.reporting.console import has_issues, render_text
from deps_finder.reporting.schemas import to_json

# Defaults (overridable via env vars)
_DEFAULT_ROOT = os.environ.get("DEPS_FINDER_ROOT", ".")
_DEFAULT_PACKAGE_JSON = os.environ.get("DEPS_FINDER_PACKAGE_JSON", "package.json")

EXIT_OK = 0
EXIT_ISSUES = 1
EXIT_ERROR = 2

_EPILOG = """\b
Examples:
  deps-finder
  deps-finder -j
  deps-finder --all
  deps-finder --ignore storybook,@storybook/nextjs-vite
  deps-finder -i eslint,prettier --all
"""


def _parse_ignore(values: tuple[str, ...] | list[str]) -> tuple[str, ...]:
    """Split comma-separated ignore values, dropping blanks and duplicates."""
    packages: list[str] = []
    for value in values:
        for item in value.split(","):
            item = item.strip()
            if item and item not in packages:
                packages.append(item)
    return tuple(packages)


def _env_ignores() -> list[str]:
    value = os.environ.get("DEPS_FINDER_IGNORE", "")
    return [value] if value else []


@click.command(
    context_settings={"help_option_names": ["-h", "--help"]},
    epilog=_EPILOG,
)
@click.option("-t", "--text", "output_format", flag_value="text", default=True,
              help="Output as text (default)")
@click.option("-j", "--json", "output_format", flag_value="json", help="Output as JSON")
@click.option("-a", "--all", "check_all", is_flag=True,
              help="Check all dependencies including devDependencies")
@click.option("-i", "--ignore", "ignore", multiple=True, metavar="PACKAGES",
              help="Ignore specific packages (comma-separated, globs allowed)")
@click.option("-r", "--root", default=_DEFAULT_ROOT, show_default=True,
              type=click.Path(file_okay=False), help="Source directory to scan")
@click.option("-p", "--package-json", default=_DEFAULT_PACKAGE_JSON, show_default=True,
              type=click.Path(dir_okay=False), help="Path to package.json")
@click.option("--no-color", is_flag=True, help="Disable colored output")
@click.option("-v", "--verbose", is_flag=True, help="Verbose logging")
def main(
    output_format: str,
    check_all: bool,
    ignore: tuple[str, ...],
    root: str,
    package_json: str,
    no_color: bool,
    verbose: bool,
) -> None:
    """deps-finder: find unused, misplaced and type-only npm dependencies."""
    setup_logging("DEBUG" if verbose else None)

    options = AnalyzerOptions(
        check_all=check_all,
        ignored_packages=_parse_ignore([*_env_ignores(), *ignore]),
    )

    try:
        result = scan_project(root, package_json, options)
    except DepsFinderError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(EXIT_ERROR)

    if output_format == "json":
        click.echo(to_json(result))
    else:
        click.echo(render_text(result, color=not no_color))

    sys.exit(EXIT_ISSUES if has_issues(result) else EXIT_OK)


if __name__ == "__main__":
    main()
