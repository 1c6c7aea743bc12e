"""Human-readable report rendering."""

from __future__ import annotations

import os

import click

from deps_finder.engines.dependency_analyzer.models import (
    AnalysisResult,
    MisplacedDependency,
)

REPORT_TITLE = "Dependency Analysis Report"
UNUSED_TITLE = "Unused Dependencies:"
UNUSED_SUBTITLE = "(declared but not imported in source code)"
MISPLACED_TITLE = "Misplaced Dependencies:"
MISPLACED_SUBTITLE = "(in devDependencies but used in source code)"
TYPE_ONLY_TITLE = "Type-Only Imports:"
TYPE_ONLY_SUBTITLE = "(used only for type definitions)"
TOTAL_ISSUES = "Total Issues:"
NO_ISSUES = "✓ No issues found! All dependencies are properly used."
IGNORED_PACKAGES = "Ignored packages:"
SEPARATOR = "━" * 60


def has_issues(result: AnalysisResult) -> bool:
    return result.total_issues > 0


class _Renderer:
    def __init__(self, color: bool) -> None:
        self._color = color

    def style(self, text: str, fg: str) -> str:
        return click.style(text, fg=fg) if self._color else text

    def separator(self) -> str:
        return self.style(SEPARATOR, "bright_black")

    def issue_section(self, title: str, subtitle: str, items: list[str]) -> list[str]:
        if not items:
            return []
        return [
            "",
            f"{self.style('⚠', 'yellow')}  {self.style(title, 'yellow')}",
            f"  {self.style(subtitle, 'bright_black')}",
            "",
            *(f"  {self.style('•', 'yellow')} {item}" for item in items),
        ]

    def misplaced_section(self, items: list[MisplacedDependency]) -> list[str]:
        if not items:
            return []
        lines = [
            "",
            f"{self.style('⚠', 'yellow')}  {self.style(MISPLACED_TITLE, 'yellow')}",
            f"  {self.style(MISPLACED_SUBTITLE, 'bright_black')}",
            "",
        ]
        for item in items:
            count = len(item.locations)
            usage = "used in 1 file" if count == 1 else f"used in {count} files"
            lines.append(
                f"  {self.style('•', 'yellow')} {item.package_name} "
                f"{self.style(f'({usage})', 'bright_black')}"
            )
            for loc in item.locations:
                lines.append(f"    └─ {_display_path(loc.file)}:{loc.line}")
                lines.append(f"       {self.style(loc.statement, 'bright_black')}")
        return lines

    def type_only_section(self, items: list[str]) -> list[str]:
        if not items:
            return []
        return [
            "",
            f"{self.style('ℹ', 'blue')}  {self.style(TYPE_ONLY_TITLE, 'blue')}",
            f"  {self.style(TYPE_ONLY_SUBTITLE, 'bright_black')}",
            "",
            *(f"  {self.style('○', 'blue')} {item}" for item in items),
        ]

    def ignored_section(self, packages: list[str]) -> list[str]:
        if not packages:
            return []
        return ["", f"ℹ  {IGNORED_PACKAGES} {self.style(', '.join(packages), 'cyan')}"]


def _display_path(path: str) -> str:
    try:
        return os.path.relpath(path)
    except ValueError:
        # Different drive on Windows.
        return path


def render_text(result: AnalysisResult, color: bool = True) -> str:
    """Render *result* as the console report."""
    r = _Renderer(color)
    ignored = result.ignored.by_option + result.ignored.by_default
    header = [
        "",
        r.separator(),
        f"  {r.style(REPORT_TITLE, 'cyan')}",
        r.separator(),
        *r.ignored_section(ignored),
    ]

    if result.total_issues == 0 and not result.type_only:
        lines = [*header, r.separator(), "", f"  {r.style(NO_ISSUES, 'green')}", "", r.separator()]
        return "\n".join(lines)

    lines = [
        *header,
        *r.issue_section(UNUSED_TITLE, UNUSED_SUBTITLE, result.unused),
        *r.misplaced_section(result.misplaced),
        *r.type_only_section(result.type_only),
        "",
        r.separator(),
        f"  {TOTAL_ISSUES} {r.style(str(result.total_issues), 'yellow')}",
        r.separator(),
    ]
    return "\n".join(lines)
