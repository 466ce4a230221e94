# parsing/__init__.py

from ._utils import normalise_field, normalise_fields, normalise_record
from .models import FileFormat, ParsedFile, RootShape
from .parse import decode_text, guess_format, parse_file_text

__all__ = [
    "FileFormat",
    "ParsedFile",
    "RootShape",
    "decode_text",
    "guess_format",
    "normalise_field",
    "normalise_fields",
    "normalise_record",
    "parse_file_text",
]
