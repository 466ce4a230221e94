# validation/report.py

import json
import logging
from collections.abc import Iterable, Mapping
from pathlib import Path

from noharm_validator.domain.parsing import ParsedFile
from noharm_validator.schemas import (
    FileCategory,
    FileValidationOutput,
    ParsedFileOutput,
    ValidationReport,
    ValidationSummary,
)

from .models import FileValidation, Status

logger = logging.getLogger(__name__)

DEFAULT_REPORT_NAME = "noharm-validation.json"

_SUMMARY_MESSAGES = {
    Status.OK: "Validation completed without errors.",
    Status.WARN: "Validation completed with warnings.",
    Status.ERROR: "Validation found errors.",
}


def overall_status(statuses: Iterable[Status]) -> Status:
    """
    Combine per-file verdicts: any error wins, then any warning.

    Returns:
        Status: The worst of the given statuses, OK when there are none.
    """
    collected = set(statuses)
    if Status.ERROR in collected:
        return Status.ERROR
    if Status.WARN in collected:
        return Status.WARN
    return Status.OK


def build_validation_report(
    results: Mapping[FileCategory, FileValidation],
    parsed_files: Mapping[FileCategory, ParsedFile],
) -> ValidationReport:
    """
    Convert per-category validation results into a Pydantic ValidationReport.

    Every supplied parsed file is embedded, whatever its status, so the
    report can be inspected or exported on its own.

    Args:
        results: Validation outcome per category.
        parsed_files: Parsed input per supplied category.

    Returns:
        ValidationReport: Machine-readable report envelope.
    """
    status = overall_status(result.status for result in results.values())

    summary = ValidationSummary(
        status=status.value,
        message=_SUMMARY_MESSAGES[status],
        error_count=sum(len(result.issues) for result in results.values()),
        warning_count=sum(len(result.warnings) for result in results.values()),
    )

    return ValidationReport(
        summary=summary,
        files={
            category.value: _convert_result(result)
            for category, result in results.items()
        },
        parsed={
            category.value: _convert_parsed(parsed_files[category])
            for category in FileCategory
            if parsed_files.get(category) is not None
        },
    )


def save_validation_report(
    report: ValidationReport,
    dest: Path | None = None,
) -> Path:
    """
    Write the validation report as JSON with camelCase keys.

    Args:
        report: The validation report to export.
        dest: Target file; defaults to DEFAULT_REPORT_NAME in the working
            directory.

    Returns:
        Path: Path to the written JSON file.
    """
    dest = dest or Path(DEFAULT_REPORT_NAME)
    dest.parent.mkdir(parents=True, exist_ok=True)

    dest.write_text(
        json.dumps(
            report.model_dump(mode="json", by_alias=True),
            indent=2,
            ensure_ascii=False,
        )
        + "\n",
        encoding="utf-8",
    )

    logger.info("Validation report saved to %s", dest)
    return dest


def _convert_result(result: FileValidation) -> FileValidationOutput:
    """
    Convert an internal FileValidation dataclass to its Pydantic output.

    Returns:
        FileValidationOutput: Pydantic-serialisable file verdict.
    """
    return FileValidationOutput(
        status=result.status.value,
        issues=result.issues,
        warnings=result.warnings,
        record_count=result.record_count,
        column_count=result.column_count,
    )


def _convert_parsed(parsed: ParsedFile) -> ParsedFileOutput:
    root = parsed.root_shape.value if parsed.root_shape else None
    return ParsedFileOutput(
        file_name=parsed.file_name,
        detected_format=parsed.detected_format.value,
        root_shape=root,
        fields=parsed.raw_field_names,
        normalised_fields=parsed.normalised_field_names,
        records=parsed.records,
        raw_records=parsed.raw_records,
        parse_errors=parsed.parse_errors,
    )
