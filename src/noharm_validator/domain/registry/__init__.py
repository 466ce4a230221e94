# registry/__init__.py

from .derive import derive_unified_schema, merge_refs, merge_type_hints
from .models import SchemaRegistry, UnifiedSchema
from .registry import (
    SCHEMA_REGISTRY,
    UNIFIED_LABEL,
    SchemaRegistryError,
    build_schema_registry,
    ensure_registry,
)

__all__ = [
    "SCHEMA_REGISTRY",
    "UNIFIED_LABEL",
    "SchemaRegistry",
    "SchemaRegistryError",
    "UnifiedSchema",
    "build_schema_registry",
    "derive_unified_schema",
    "ensure_registry",
    "merge_refs",
    "merge_type_hints",
]
