# checks/values.py

from collections.abc import Callable, Iterator

from noharm_validator.domain.parsing import ParsedFile, normalise_field
from noharm_validator.domain.registry import UnifiedSchema
from noharm_validator.schemas import TypeTag

from ..rules import is_boolean_value, is_date_value, is_number_value

# Acceptance rule and message suffix per type tag
_TYPE_RULES: dict[TypeTag, tuple[Callable[[object], bool], str]] = {
    TypeTag.NUMBER: (is_number_value, "must be a number"),
    TypeTag.DATE: (is_date_value, "must be a valid date/time"),
    TypeTag.BOOLEAN: (is_boolean_value, "must be a boolean"),
}


def detect_nested_values(parsed: ParsedFile) -> Iterator[str]:
    """
    Flag records holding an object or list as a field value.

    Only flat records are accepted; each offending record is reported once.

    Yields:
        str: One issue per offending record.
    """
    for position, record in enumerate(parsed.records, start=1):
        if not isinstance(record, dict):
            continue
        if any(isinstance(value, dict | list) for value in record.values()):
            yield f"Record {position}: values cannot be objects or arrays."


def detect_type_violations(parsed: ParsedFile, schema: UnifiedSchema) -> Iterator[str]:
    """
    Check hinted fields of every record against their type's acceptance rule.

    Records are scanned in order and, within a record, fields in declaration
    order (numbers, then dates, then booleans). Empty and absent values always
    pass: absence is a coverage concern.

    Args:
        parsed: The parsed file to inspect.
        schema: Unified schema of the file's category.

    Yields:
        str: One issue per record and offending field.
    """
    checks = [
        (name, normalise_field(name), *_TYPE_RULES[tag])
        for tag in TypeTag
        for name in schema.type_hints.get(tag, ())
    ]
    if not checks:
        return

    for position, record in enumerate(parsed.records, start=1):
        if not isinstance(record, dict):
            continue
        for name, key, accepts, requirement in checks:
            if not accepts(record.get(key)):
                yield f"Record {position}: {name} {requirement}."
