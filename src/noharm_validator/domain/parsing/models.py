# parsing/models.py

from dataclasses import dataclass
from enum import Enum


class FileFormat(Enum):
    """
    Input encodings understood by the parser.

    AUTO is only ever a guess from the file name; a parsed file always reports
    CSV or JSON.
    """

    AUTO = "auto"
    CSV = "csv"
    JSON = "json"


class RootShape(Enum):
    """
    Top-level layout of a JSON document.

    Attributes:
        ARRAY: A list of record objects.
        OBJECT_WITH_DATA: An object whose `data` property is a list of records.
        OBJECT: Anything else; no records can be read from it.
    """

    ARRAY = "array"
    OBJECT_WITH_DATA = "object-data"
    OBJECT = "object"


@dataclass(frozen=True)
class ParsedFile:
    """
    Normalised, schema-agnostic view of one uploaded file.

    Created fresh on every validation run and never cached.
    """

    file_name: str
    detected_format: FileFormat
    root_shape: RootShape | None
    raw_field_names: tuple[str, ...]
    normalised_field_names: tuple[str, ...]
    records: tuple[object, ...]
    raw_records: tuple[object, ...]
    parse_errors: tuple[str, ...]

    @property
    def record_count(self) -> int:
        return len(self.records)

    @property
    def column_count(self) -> int:
        return len(self.normalised_field_names)
