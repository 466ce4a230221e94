# _utils/normalise.py

from collections.abc import Iterable


def normalise_field(name: object) -> str:
    """
    Normalise a field name for comparison: surrounding whitespace is trimmed
    and the result is lower-cased.

    Normalising an already normalised name returns it unchanged.

    Returns:
        str: The normalised name, or an empty string for a missing name.
    """
    if name is None:
        return ""
    return str(name).strip().lower()


def normalise_fields(names: Iterable[object]) -> tuple[str, ...]:
    """
    Normalise a sequence of field names, keeping order and duplicates.

    Returns:
        tuple[str, ...]: Normalised names, one per input name.
    """
    return tuple(normalise_field(name) for name in names)


def normalise_record(record: object) -> object:
    """
    Re-key a record by normalised field names, leaving values untouched.

    Values that are not mappings are returned as-is so a stray element can
    never break the pipeline.

    Returns:
        object: A new dict keyed by normalised names, or the input unchanged.
    """
    if not isinstance(record, dict):
        return record
    return {normalise_field(key): value for key, value in record.items()}


def collect_field_names(records: Iterable[object]) -> tuple[str, ...]:
    """
    Collect the keys used across records in first-seen order.

    The first pass over the records fixes the order; later records only
    contribute keys not seen before.

    Returns:
        tuple[str, ...]: De-duplicated raw field names.
    """
    seen: dict[str, None] = {}
    for record in records:
        if isinstance(record, dict):
            for key in record:
                seen.setdefault(str(key), None)
    return tuple(seen)
