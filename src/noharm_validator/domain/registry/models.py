# registry/models.py

from collections.abc import Mapping
from dataclasses import dataclass

from noharm_validator.schemas import FileCategory, TypeTag


@dataclass(frozen=True)
class UnifiedSchema:
    """
    Target contract for one file category, merged from every source format.

    Attributes:
        required: Fields mandatory in every source format.
        allowed: Fields accepted by at least one source format.
        key: Natural key fields.
        type_hints: Fields expected to hold each value type.
        refs: Fields that must resolve against another category's key.
    """

    required: tuple[str, ...]
    allowed: tuple[str, ...]
    key: tuple[str, ...]
    type_hints: Mapping[TypeTag, tuple[str, ...]]
    refs: Mapping[str, FileCategory]


@dataclass(frozen=True)
class SchemaRegistry:
    """
    Read-only collection of unified schemas, one per file category.
    """

    label: str
    unified: Mapping[FileCategory, UnifiedSchema]

    def schema_for(self, category: FileCategory) -> UnifiedSchema:
        """
        Look up the unified schema of a category.

        Returns:
            UnifiedSchema: The schema declared for `category`.

        Raises:
            KeyError: If the registry holds no schema for `category`.
        """
        return self.unified[category]
