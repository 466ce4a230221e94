# parsing/parse.py

import asyncio
import logging

from ._utils import (
    collect_field_names,
    normalise_fields,
    normalise_record,
    read_csv,
    read_json,
)
from .models import FileFormat, ParsedFile, RootShape

logger = logging.getLogger(__name__)

_UNEXPECTED_JSON_LAYOUT = "JSON is not in the expected format"


async def parse_file_text(file_name: str, raw: str | bytes) -> ParsedFile:
    """
    Parse an uploaded file into a normalised, schema-agnostic record set.

    The format is guessed from the file extension. JSON is tried first for
    `.json` and extension-less or unknown names; for unknown names a failed
    JSON read falls back to CSV. Field names are trimmed and lower-cased, and
    every record is re-keyed accordingly.

    Never raises for malformed input: problems are collected in
    `parse_errors` and a best-effort ParsedFile is returned.

    Args:
        file_name: Original file name, used for format detection.
        raw: File content as text, or bytes to be decoded.

    Returns:
        ParsedFile: The parsed and normalised file.
    """
    text = await asyncio.to_thread(decode_text, raw) if isinstance(raw, bytes) else raw
    text = text.removeprefix("\ufeff")

    guessed = guess_format(file_name)
    detected = guessed
    root: RootShape | None = None
    records: tuple[object, ...] = ()
    fields: tuple[str, ...] = ()
    errors: list[str] = []

    if guessed in (FileFormat.JSON, FileFormat.AUTO):
        try:
            document = read_json(text)
            root = document.root
            if document.records is None:
                raise ValueError(_UNEXPECTED_JSON_LAYOUT)
            records = document.records
            fields = collect_field_names(records)
            detected = FileFormat.JSON
        except (ValueError, RecursionError) as error:
            if guessed is FileFormat.JSON:
                errors.append(f"Could not read file: {error}")
            else:
                root = None

    if detected is not FileFormat.JSON:
        table = read_csv(text)
        logger.debug("Read %s as CSV delimited by %r", file_name, table.delimiter)
        errors.extend(f"CSV: {message}" for message in table.errors)
        records = table.rows
        fields = table.fields
        detected = FileFormat.CSV

    parsed = ParsedFile(
        file_name=file_name,
        detected_format=detected,
        root_shape=root,
        raw_field_names=fields,
        normalised_field_names=normalise_fields(fields),
        records=tuple(normalise_record(record) for record in records),
        raw_records=tuple(records),
        parse_errors=tuple(errors),
    )

    logger.info(
        "Parsed %s as %s: %d records, %d fields",
        file_name,
        detected.value,
        parsed.record_count,
        parsed.column_count,
    )
    if errors:
        logger.warning("Parsing %s reported %d problems", file_name, len(errors))

    return parsed


def guess_format(file_name: str) -> FileFormat:
    """
    Infer the input format from a file name's extension, case-insensitively.

    Returns:
        FileFormat: JSON for `.json`, CSV for `.csv`, AUTO otherwise.
    """
    _, dot, extension = file_name.rpartition(".")
    extension = extension.lower() if dot else ""
    if extension == "json":
        return FileFormat.JSON
    if extension == "csv":
        return FileFormat.CSV
    return FileFormat.AUTO


def decode_text(raw: bytes) -> str:
    """
    Decode file bytes as UTF-8, stripping a byte-order mark.

    Exports from older hospital systems are often Latin-1; bytes that are not
    valid UTF-8 are decoded as Latin-1, which never fails.

    Returns:
        str: The decoded text.
    """
    try:
        return raw.decode("utf-8-sig")
    except UnicodeDecodeError:
        logger.warning("Input is not valid UTF-8, decoding as Latin-1")
        return raw.decode("latin-1")
