# validation/__init__.py

from .index import (
    KEY_SEPARATOR,
    ReferenceIndex,
    build_composite_key,
    build_reference_index,
    build_reference_indexes,
)
from .models import (
    FileValidation,
    IssueLog,
    Status,
    ValidationSettings,
    default_settings,
    derive_status,
)
from .report import (
    DEFAULT_REPORT_NAME,
    build_validation_report,
    overall_status,
    save_validation_report,
)
from .validate import validate_file, validate_files, validate_parsed

__all__ = [
    # index
    "KEY_SEPARATOR",
    "ReferenceIndex",
    "build_composite_key",
    "build_reference_index",
    "build_reference_indexes",
    # models
    "FileValidation",
    "IssueLog",
    "Status",
    "ValidationSettings",
    "default_settings",
    "derive_status",
    # report
    "DEFAULT_REPORT_NAME",
    "build_validation_report",
    "overall_status",
    "save_validation_report",
    # validate
    "validate_file",
    "validate_files",
    "validate_parsed",
]
