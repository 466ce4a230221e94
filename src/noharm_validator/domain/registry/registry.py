# registry/registry.py

from collections.abc import Sequence
from types import MappingProxyType

from noharm_validator.schemas import SOURCE_FORMATS, FileCategory, SourceFormat

from .derive import derive_unified_schema
from .models import SchemaRegistry

UNIFIED_LABEL = "NoHarm"


class SchemaRegistryError(LookupError):
    """
    Raised when validation is attempted without a usable schema registry.

    This is a caller misconfiguration, distinct from any issue found in a file.
    """


def build_schema_registry(
    formats: Sequence[SourceFormat] = SOURCE_FORMATS,
) -> SchemaRegistry:
    """
    Derive the unified schema of every file category from two source formats.

    Args:
        formats: Exactly two source formats, highest precedence first.

    Returns:
        SchemaRegistry: Immutable registry covering every FileCategory.

    Raises:
        ValueError: If `formats` does not hold exactly two source formats.
    """
    if len(formats) != 2:
        raise ValueError(f"Expected two source formats, got {len(formats)}.")

    left, right = formats
    unified = {
        category: derive_unified_schema(
            left.files[category],
            right.files[category],
        )
        for category in FileCategory
    }
    return SchemaRegistry(label=UNIFIED_LABEL, unified=MappingProxyType(unified))


def ensure_registry(registry: SchemaRegistry | None) -> SchemaRegistry:
    """
    Check that a registry is present and declares every file category.

    Returns:
        SchemaRegistry: The same registry, once verified.

    Raises:
        SchemaRegistryError: If the registry is missing or incomplete.
    """
    if registry is None:
        raise SchemaRegistryError("Schema registry is not available.")

    missing = [
        category.value for category in FileCategory if category not in registry.unified
    ]
    if missing:
        raise SchemaRegistryError(
            f"Schema registry has no schema for: {', '.join(missing)}",
        )

    return registry


SCHEMA_REGISTRY = build_schema_registry()
