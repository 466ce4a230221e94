# checks/__init__.py

from .coverage import detect_missing_fields, detect_unexpected_fields
from .keys import detect_key_issues
from .references import detect_broken_references
from .structure import detect_empty_file, detect_parse_errors, detect_shape_issues
from .values import detect_nested_values, detect_type_violations

__all__ = [
    "detect_broken_references",
    "detect_empty_file",
    "detect_key_issues",
    "detect_missing_fields",
    "detect_nested_values",
    "detect_parse_errors",
    "detect_shape_issues",
    "detect_type_violations",
    "detect_unexpected_fields",
]
