# _utils/__init__.py

from ._csv import DELIMITER_CANDIDATES, CsvTable, guess_delimiter, read_csv
from ._json import JsonDocument, read_json
from .normalise import (
    collect_field_names,
    normalise_field,
    normalise_fields,
    normalise_record,
)

__all__ = [
    "DELIMITER_CANDIDATES",
    "CsvTable",
    "JsonDocument",
    "collect_field_names",
    "guess_delimiter",
    "normalise_field",
    "normalise_fields",
    "normalise_record",
    "read_csv",
    "read_json",
]
