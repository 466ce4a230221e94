# checks/coverage.py

from collections.abc import Iterator

from noharm_validator.domain.parsing import ParsedFile, normalise_field, normalise_fields
from noharm_validator.domain.registry import UnifiedSchema


def detect_missing_fields(parsed: ParsedFile, schema: UnifiedSchema) -> Iterator[str]:
    """
    Report required fields absent from the file in one combined issue.

    Comparison is on normalised names; missing fields are listed by their
    declared names.

    Args:
        parsed: The parsed file to inspect.
        schema: Unified schema of the file's category.

    Yields:
        str: At most one issue listing every missing field.
    """
    present = set(parsed.normalised_field_names)
    missing = [name for name in schema.required if normalise_field(name) not in present]

    if missing:
        yield f"Missing fields: {', '.join(missing)}"


def detect_unexpected_fields(
    parsed: ParsedFile,
    schema: UnifiedSchema,
) -> Iterator[str]:
    """
    Report file fields that no source format allows, in one combined issue.

    Args:
        parsed: The parsed file to inspect.
        schema: Unified schema of the file's category.

    Yields:
        str: At most one issue listing every unexpected (normalised) field.
    """
    allowed = set(normalise_fields(schema.allowed))
    unexpected = [name for name in parsed.normalised_field_names if name not in allowed]

    if unexpected:
        yield f"Unexpected fields: {', '.join(unexpected)}"
