# sources/__init__.py

from .mv_schema import MV_FORMAT
from .tasy_schema import TASY_FORMAT

# Merge precedence: earlier formats win key and type-hint tie-breaks
SOURCE_FORMATS = (MV_FORMAT, TASY_FORMAT)

__all__ = [
    "MV_FORMAT",
    "SOURCE_FORMATS",
    "TASY_FORMAT",
]
