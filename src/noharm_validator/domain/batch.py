# domain/batch.py

import asyncio
import logging
from collections.abc import Mapping
from pathlib import Path

from noharm_validator.schemas import FileCategory, ValidationReport

from .parsing import FileFormat, ParsedFile, guess_format, parse_file_text
from .registry import SCHEMA_REGISTRY, SchemaRegistry
from .validation import ValidationSettings, validate_parsed

logger = logging.getLogger(__name__)


async def validate_batch(
    paths: Mapping[FileCategory, Path],
    *,
    registry: SchemaRegistry | None = SCHEMA_REGISTRY,
    settings: ValidationSettings | None = None,
) -> ValidationReport:
    """
    Read, parse and validate one file per category.

    All files are read and parsed concurrently; validation starts once every
    parse has completed. Categories missing from `paths` are reported as not
    loaded, and a file that cannot be read is reported as a parse error on its
    category rather than raised.

    Args:
        paths: File to validate per category.
        registry: Unified schemas to validate against.
        settings: Optional output limits.

    Returns:
        ValidationReport: The full validation report.

    Raises:
        SchemaRegistryError: If the registry is missing or incomplete.
    """
    categories = [category for category in FileCategory if category in paths]

    parsed = await asyncio.gather(
        *(load_parsed_file(paths[category]) for category in categories),
    )

    logger.info("Loaded %d of %d files", len(categories), len(FileCategory))

    return validate_parsed(
        dict(zip(categories, parsed)),
        registry=registry,
        settings=settings,
    )


async def load_parsed_file(path: Path) -> ParsedFile:
    """
    Read a file from disk and parse it.

    Returns:
        ParsedFile: The parsed file, or an empty one carrying the read error.
    """
    try:
        raw = await asyncio.to_thread(path.read_bytes)
    except OSError as error:
        logger.warning("Could not read %s: %s", path, error)
        return _unreadable(path.name, error)

    return await parse_file_text(path.name, raw)


def _unreadable(file_name: str, error: OSError) -> ParsedFile:
    """
    Build an empty ParsedFile recording why the file could not be read.

    Returns:
        ParsedFile: File with no records and a single parse error.
    """
    guessed = guess_format(file_name)
    detected = FileFormat.JSON if guessed is FileFormat.JSON else FileFormat.CSV
    return ParsedFile(
        file_name=file_name,
        detected_format=detected,
        root_shape=None,
        raw_field_names=(),
        normalised_field_names=(),
        records=(),
        raw_records=(),
        parse_errors=(f"Could not read file: {error}",),
    )
