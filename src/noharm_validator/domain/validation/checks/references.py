# checks/references.py

from collections.abc import Iterator, Mapping

from noharm_validator.domain.parsing import ParsedFile, normalise_field
from noharm_validator.domain.registry import UnifiedSchema
from noharm_validator.schemas import FileCategory

from ..index import ReferenceIndex
from ..rules import is_empty_value, render_value


def detect_broken_references(
    parsed: ParsedFile,
    schema: UnifiedSchema,
    indexes: Mapping[FileCategory, ReferenceIndex],
) -> Iterator[str]:
    """
    Check that cross-reference fields resolve against the referenced file.

    Fields are visited in declaration order, then records in order. Empty
    values are skipped, as are references to a category that has no index
    (its absence is already reported as a load failure).

    Args:
        parsed: The parsed file to inspect.
        schema: Unified schema of the file's category.
        indexes: Reference index per supplied category.

    Yields:
        str: One issue per unresolved value.
    """
    for name, target in schema.refs.items():
        index = indexes.get(target)
        if index is None:
            continue

        key = normalise_field(name)
        for position, record in enumerate(parsed.records, start=1):
            if not isinstance(record, dict):
                continue

            value = record.get(key)
            if is_empty_value(value):
                continue
            if render_value(value) not in index:
                yield (
                    f"Record {position}: {name} ({render_value(value)})"
                    f" does not exist in {target.value}."
                )
