# schemas/report.py

from typing import Any, Literal

from pydantic import AliasGenerator, BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

StatusValue = Literal["ok", "warn", "error"]

_REPORT_CONFIG = ConfigDict(
    strict=True,
    frozen=True,
    # exported documents use camelCase keys (recordCount, parseErrors, ...)
    alias_generator=AliasGenerator(serialization_alias=to_camel),
)


class ValidationSummary(BaseModel):
    """
    Overall verdict across all file categories.
    """

    model_config = _REPORT_CONFIG

    status: StatusValue
    message: str
    error_count: int
    warning_count: int


class FileValidationOutput(BaseModel):
    """
    Verdict for a single file category.
    """

    model_config = _REPORT_CONFIG

    status: StatusValue
    issues: tuple[str, ...]
    warnings: tuple[str, ...]
    record_count: int
    column_count: int


class ParsedFileOutput(BaseModel):
    """
    Parsed input embedded in the report so a run can be inspected or exported.
    """

    model_config = _REPORT_CONFIG

    file_name: str
    detected_format: Literal["csv", "json"]
    root_shape: Literal["array", "object-data", "object"] | None
    fields: tuple[str, ...]
    normalised_fields: tuple[str, ...]
    records: tuple[Any, ...]
    raw_records: tuple[Any, ...]
    parse_errors: tuple[str, ...]


class ValidationReport(BaseModel):
    """
    Machine-readable envelope for one validation run.

    Keyed by file category value; `parsed` always holds every category that was
    supplied, even when validation failed.
    """

    model_config = _REPORT_CONFIG

    summary: ValidationSummary
    files: dict[str, FileValidationOutput]
    parsed: dict[str, ParsedFileOutput]
