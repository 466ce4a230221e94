# validation/index.py

from collections.abc import Mapping, Sequence

from noharm_validator.domain.parsing import ParsedFile, normalise_fields
from noharm_validator.domain.registry import SchemaRegistry
from noharm_validator.schemas import FileCategory

from .rules import MISSING_VALUE_TOKENS, render_value

# Joins key parts; not expected to occur inside real key values
KEY_SEPARATOR = "|"

ReferenceIndex = frozenset[str]


def key_parts(record: dict, key_fields: Sequence[str]) -> tuple[str, ...]:
    """
    Render the values of a record's key fields, absent fields as empty text.

    Args:
        record: Record keyed by normalised field names.
        key_fields: Normalised key field names.

    Returns:
        tuple[str, ...]: One rendered value per key field.
    """
    return tuple(render_value(record.get(name)) for name in key_fields)


def build_composite_key(record: dict, key_fields: Sequence[str]) -> str:
    """
    Join a record's key values into the string used for lookups.

    Returns:
        str: Key values joined by KEY_SEPARATOR.
    """
    return KEY_SEPARATOR.join(key_parts(record, key_fields))


def is_blank_key(parts: Sequence[str]) -> bool:
    """
    Check whether every part of a key is blank.
    """
    return all(not part.strip() for part in parts)


def has_missing_part(parts: Sequence[str]) -> bool:
    """
    Check whether any key part is blank or a missing-value placeholder.
    """
    return any(
        not part.strip() or part.strip().lower() in MISSING_VALUE_TOKENS
        for part in parts
    )


def build_reference_index(parsed: ParsedFile, key: Sequence[str]) -> ReferenceIndex:
    """
    Collect the composite keys of a file's records.

    Records that are not mappings, or whose key parts are all blank, are left
    out: an empty key can never satisfy a reference.

    Args:
        parsed: The parsed file to index.
        key: Declared (non-normalised) key field names.

    Returns:
        ReferenceIndex: The set of composite keys.
    """
    key_fields = normalise_fields(key)
    return frozenset(
        KEY_SEPARATOR.join(parts)
        for parts in (
            key_parts(record, key_fields)
            for record in parsed.records
            if isinstance(record, dict)
        )
        if not is_blank_key(parts)
    )


def build_reference_indexes(
    registry: SchemaRegistry,
    parsed_files: Mapping[FileCategory, ParsedFile],
) -> dict[FileCategory, ReferenceIndex]:
    """
    Index every supplied category by its own key fields.

    Categories without a parsed file get no index; references against them
    are skipped rather than reported.

    Returns:
        dict[FileCategory, ReferenceIndex]: Index per supplied category.
    """
    return {
        category: build_reference_index(
            parsed_files[category],
            registry.schema_for(category).key,
        )
        for category in FileCategory
        if parsed_files.get(category) is not None
    }
