# registry/derive.py

from collections.abc import Mapping, Sequence
from types import MappingProxyType

from noharm_validator.schemas import (
    FileCategory,
    SourceFileSchema,
    TypeTag,
    ordered_union,
)

from .models import UnifiedSchema


def derive_unified_schema(
    left: SourceFileSchema,
    right: SourceFileSchema,
) -> UnifiedSchema:
    """
    Merge the schemas two source formats declare for the same category.

    A field is required only when both sources require it; it is allowed when
    either source allows it. Where the sources disagree, `left` takes
    precedence for key fields and type-hint collisions, while `right` wins on
    cross-reference collisions.

    Args:
        left: Schema of the higher-precedence source format.
        right: Schema of the other source format.

    Returns:
        UnifiedSchema: The merged, immutable schema.
    """
    assert not (left.key and right.key) or left.key == right.key, (
        f"Source formats declare conflicting key fields: {left.key} != {right.key}"
    )

    right_required = set(right.required_fields)
    required = tuple(
        name for name in left.required_fields if name in right_required
    )

    return UnifiedSchema(
        required=required,
        allowed=ordered_union(left.allowed_fields, right.allowed_fields),
        key=left.key or right.key,
        type_hints=merge_type_hints((left.type_hints, right.type_hints)),
        refs=merge_refs((left.refs, right.refs)),
    )


def merge_type_hints(
    hints: Sequence[Mapping[TypeTag, Sequence[str]]],
) -> Mapping[TypeTag, tuple[str, ...]]:
    """
    Union type hints tag by tag, assigning each field to exactly one tag.

    Sources are visited in precedence order and, within a source, tags in
    `TypeTag` declaration order; the first tag a field is seen under is kept.

    Returns:
        Mapping[TypeTag, tuple[str, ...]]: Every tag mapped to its fields in
            first-seen order (empty tuple when no field carries the tag).
    """
    assigned: dict[str, TypeTag] = {}

    for source_hints in hints:
        for tag in TypeTag:
            for name in source_hints.get(tag, ()):
                assigned.setdefault(name, tag)

    return MappingProxyType(
        {
            tag: tuple(name for name, owner in assigned.items() if owner is tag)
            for tag in TypeTag
        },
    )


def merge_refs(
    refs: Sequence[Mapping[str, FileCategory]],
) -> Mapping[str, FileCategory]:
    """
    Union cross-reference declarations, later sources overriding earlier ones.

    Returns:
        Mapping[str, FileCategory]: Field name to referenced category.
    """
    merged: dict[str, FileCategory] = {}
    for source_refs in refs:
        merged.update(source_refs)
    return MappingProxyType(merged)
