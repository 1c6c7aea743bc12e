"""JSON report schemas."""

from __future__ import annotations

from dataclasses import asdict

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from deps_finder.engines.dependency_analyzer.models import AnalysisResult


class _CamelModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
    )


class LocationSchema(_CamelModel):
    file: str
    line: int
    statement: str


class MisplacedSchema(_CamelModel):
    package_name: str
    locations: list[LocationSchema]


class IgnoredSchema(_CamelModel):
    type_only: list[str]
    by_default: list[str]
    by_option: list[str]


class UsedSchema(_CamelModel):
    name: str
    count: int


class AnalysisReport(_CamelModel):
    unused: list[str]
    misplaced: list[MisplacedSchema]
    type_only: list[str]
    ignored: IgnoredSchema
    total_issues: int
    used: list[UsedSchema]

    @classmethod
    def from_result(cls, result: AnalysisResult) -> AnalysisReport:
        return cls.model_validate(asdict(result))


def to_json(result: AnalysisResult, indent: int = 2) -> str:
    """Serialize *result* with camelCase field names."""
    return AnalysisReport.from_result(result).model_dump_json(by_alias=True, indent=indent)
