# checks/keys.py

from collections.abc import Iterator
from itertools import islice

from noharm_validator.domain.parsing import ParsedFile, normalise_fields
from noharm_validator.domain.registry import UnifiedSchema

from ..index import KEY_SEPARATOR, has_missing_part, key_parts
from ..models import ValidationSettings


def detect_key_issues(
    parsed: ParsedFile,
    schema: UnifiedSchema,
    settings: ValidationSettings,
) -> Iterator[str]:
    """
    Check that every record has a complete, unique natural key.

    A record whose key is blank or holds a missing-value placeholder yields
    one issue. Keys repeated across records are collected and reported in a
    single issue, listing up to `settings.duplicate_sample_limit` of them in
    first-seen order.

    Args:
        parsed: The parsed file to inspect.
        schema: Unified schema of the file's category.
        settings: Limits for the duplicate-key listing.

    Yields:
        str: Empty-key issues in record order, then the duplicate-key issue.
    """
    if not schema.key:
        return

    key_fields = normalise_fields(schema.key)
    key_label = " + ".join(schema.key)
    seen: set[str] = set()
    duplicates: dict[str, None] = {}

    for position, record in enumerate(parsed.records, start=1):
        if not isinstance(record, dict):
            continue

        parts = key_parts(record, key_fields)
        if has_missing_part(parts):
            yield f"Record {position}: required key is empty ({key_label})."
            continue

        composite = KEY_SEPARATOR.join(parts)
        if composite in seen:
            duplicates.setdefault(composite, None)
        seen.add(composite)

    if duplicates:
        samples = islice(duplicates, settings.duplicate_sample_limit)
        yield f"Duplicate keys ({key_label}): {', '.join(samples)}"
