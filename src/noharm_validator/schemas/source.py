# schemas/source.py

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from enum import Enum

from .categories import FileCategory


class TypeTag(Enum):
    """
    Value types a field can be hinted with.

    Declaration order is also the tie-break order when two hints collide.
    """

    NUMBER = "number"
    DATE = "date"
    BOOLEAN = "boolean"


@dataclass(frozen=True)
class SourceFileSchema:
    """
    Declared layout of one file category in one source export format.

    Either `required` or `required_groups` lists the mandatory fields. Groups
    are used when any one of several equivalent field sets applies; for
    validation purposes all grouped fields are flattened together.
    """

    required: tuple[str, ...] = ()
    key: tuple[str, ...] = ()
    type_hints: Mapping[TypeTag, tuple[str, ...]] = field(default_factory=dict)
    refs: Mapping[str, FileCategory] = field(default_factory=dict)
    required_groups: Mapping[str, tuple[str, ...]] | None = None
    allowed: tuple[str, ...] | None = None

    @property
    def required_fields(self) -> tuple[str, ...]:
        """
        Mandatory field names, flattened across groups when groups are declared.

        Returns:
            tuple[str, ...]: Ordered, de-duplicated field names.
        """
        if self.required_groups:
            return ordered_union(*self.required_groups.values())
        return ordered_union(self.required)

    @property
    def allowed_fields(self) -> tuple[str, ...]:
        """
        Field names accepted in the file, always including the required ones.

        Returns:
            tuple[str, ...]: Ordered, de-duplicated field names.
        """
        return ordered_union(self.required_fields, self.allowed or ())


@dataclass(frozen=True)
class SourceFormat:
    """
    One hospital-system export convention with a schema per file category.
    """

    label: str
    files: Mapping[FileCategory, SourceFileSchema]


def ordered_union(*groups: Iterable[str]) -> tuple[str, ...]:
    """
    Merge field name sequences, keeping the first occurrence of each name.

    Returns:
        tuple[str, ...]: Names in first-seen order without duplicates.
    """
    return tuple(dict.fromkeys(name for group in groups for name in group))
