# noharm_validator/__init__.py

from .domain import (
    SCHEMA_REGISTRY,
    ParsedFile,
    SchemaRegistryError,
    ValidationSettings,
    parse_file_text,
    save_validation_report,
    validate_batch,
    validate_parsed,
)
from .schemas import FILE_TYPES, FileCategory, ValidationReport

__all__ = [
    "FILE_TYPES",
    "SCHEMA_REGISTRY",
    "FileCategory",
    "ParsedFile",
    "SchemaRegistryError",
    "ValidationReport",
    "ValidationSettings",
    "parse_file_text",
    "save_validation_report",
    "validate_batch",
    "validate_parsed",
]
