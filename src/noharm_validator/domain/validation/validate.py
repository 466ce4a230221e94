# validation/validate.py

import logging
from collections.abc import Mapping

from noharm_validator.domain.parsing import ParsedFile
from noharm_validator.domain.registry import (
    SCHEMA_REGISTRY,
    SchemaRegistry,
    UnifiedSchema,
    ensure_registry,
)
from noharm_validator.schemas import FileCategory, ValidationReport

from .checks import (
    detect_broken_references,
    detect_empty_file,
    detect_key_issues,
    detect_missing_fields,
    detect_nested_values,
    detect_parse_errors,
    detect_shape_issues,
    detect_type_violations,
    detect_unexpected_fields,
)
from .index import ReferenceIndex, build_reference_indexes
from .models import (
    FileValidation,
    IssueLog,
    Status,
    ValidationSettings,
    default_settings,
    derive_status,
)
from .report import build_validation_report

logger = logging.getLogger(__name__)

_NOT_LOADED = "File not loaded."


def validate_parsed(
    parsed_files: Mapping[FileCategory, ParsedFile],
    *,
    registry: SchemaRegistry | None = SCHEMA_REGISTRY,
    settings: ValidationSettings | None = None,
) -> ValidationReport:
    """
    Validate a batch of parsed files and assemble the report.

    Args:
        parsed_files: Parsed input per category; absent categories are
            reported as not loaded.
        registry: Unified schemas to validate against.
        settings: Optional output limits (defaults to standard settings).

    Returns:
        ValidationReport: Per-file verdicts, overall summary and parsed input.

    Raises:
        SchemaRegistryError: If the registry is missing or incomplete.
    """
    results = validate_files(parsed_files, registry=registry, settings=settings)
    report = build_validation_report(results, parsed_files)

    logger.info(
        "Validation complete: status %s, %d issues and %d warnings across %d files",
        report.summary.status,
        report.summary.error_count,
        report.summary.warning_count,
        len(results),
    )

    return report


def validate_files(
    parsed_files: Mapping[FileCategory, ParsedFile],
    *,
    registry: SchemaRegistry | None = SCHEMA_REGISTRY,
    settings: ValidationSettings | None = None,
) -> dict[FileCategory, FileValidation]:
    """
    Run every check on every file category.

    Reference indexes are built once over all supplied files, then each
    category is validated in FileCategory order. Pure: nothing outlives the
    call.

    Args:
        parsed_files: Parsed input per category.
        registry: Unified schemas to validate against.
        settings: Optional output limits.

    Returns:
        dict[FileCategory, FileValidation]: Outcome per category, in order.

    Raises:
        SchemaRegistryError: If the registry is missing or incomplete.
    """
    active_registry = ensure_registry(registry)
    active_settings = settings or default_settings()
    indexes = build_reference_indexes(active_registry, parsed_files)

    return {
        category: validate_file(
            parsed_files.get(category),
            active_registry.schema_for(category),
            indexes,
            active_settings,
        )
        for category in FileCategory
    }


def validate_file(
    parsed: ParsedFile | None,
    schema: UnifiedSchema,
    indexes: Mapping[FileCategory, ReferenceIndex],
    settings: ValidationSettings,
) -> FileValidation:
    """
    Validate one parsed file against its category's unified schema.

    Checks run in a fixed order and feed a bounded issue log, so once the
    issue limit is reached the remaining checks are not evaluated.

    Args:
        parsed: The parsed file, or None if the category was not supplied.
        schema: Unified schema of the category.
        indexes: Reference index per supplied category.
        settings: Output limits.

    Returns:
        FileValidation: Status, issues, warnings and size of the file.
    """
    if parsed is None:
        return FileValidation(status=Status.ERROR, issues=(_NOT_LOADED,), warnings=())

    log = IssueLog(settings.max_issues)
    log.extend(detect_parse_errors(parsed))
    log.extend(detect_shape_issues(parsed))
    warnings = detect_empty_file(parsed)
    log.extend(detect_missing_fields(parsed, schema))
    log.extend(detect_unexpected_fields(parsed, schema))
    log.extend(detect_nested_values(parsed))
    log.extend(detect_type_violations(parsed, schema))
    log.extend(detect_key_issues(parsed, schema, settings))
    log.extend(detect_broken_references(parsed, schema, indexes))

    issues = log.finalise()
    return FileValidation(
        status=derive_status(issues, warnings),
        issues=issues,
        warnings=warnings,
        record_count=parsed.record_count,
        column_count=parsed.column_count,
    )
