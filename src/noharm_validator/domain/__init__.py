# domain/__init__.py

from .batch import load_parsed_file, validate_batch
from .parsing import ParsedFile, parse_file_text
from .registry import (
    SCHEMA_REGISTRY,
    SchemaRegistry,
    SchemaRegistryError,
    UnifiedSchema,
    build_schema_registry,
)
from .validation import (
    ValidationSettings,
    save_validation_report,
    validate_files,
    validate_parsed,
)

__all__ = [
    "SCHEMA_REGISTRY",
    "ParsedFile",
    "SchemaRegistry",
    "SchemaRegistryError",
    "UnifiedSchema",
    "ValidationSettings",
    "build_schema_registry",
    "load_parsed_file",
    "parse_file_text",
    "save_validation_report",
    "validate_batch",
    "validate_files",
    "validate_parsed",
]
