# schemas/__init__.py

from .categories import FILE_TYPES, FileCategory
from .report import (
    FileValidationOutput,
    ParsedFileOutput,
    ValidationReport,
    ValidationSummary,
)
from .source import SourceFileSchema, SourceFormat, TypeTag, ordered_union
from .sources import MV_FORMAT, SOURCE_FORMATS, TASY_FORMAT

__all__ = [
    # categories
    "FILE_TYPES",
    "FileCategory",
    # report
    "FileValidationOutput",
    "ParsedFileOutput",
    "ValidationReport",
    "ValidationSummary",
    # source schemas
    "SourceFileSchema",
    "SourceFormat",
    "TypeTag",
    "ordered_union",
    # source formats
    "MV_FORMAT",
    "SOURCE_FORMATS",
    "TASY_FORMAT",
]
