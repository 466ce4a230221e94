# checks/structure.py

from collections.abc import Iterator

from noharm_validator.domain.parsing import FileFormat, ParsedFile, RootShape

_SHAPE_MESSAGES = {
    RootShape.OBJECT_WITH_DATA: (
        "JSON root is an object with a data field."
        " The file must be a plain array of records."
    ),
    RootShape.OBJECT: "JSON must be an array of objects (a list of records).",
}


def detect_parse_errors(parsed: ParsedFile) -> Iterator[str]:
    """
    Surface problems captured while parsing, one issue each.
    """
    yield from parsed.parse_errors


def detect_shape_issues(parsed: ParsedFile) -> Iterator[str]:
    """
    Flag JSON documents whose root is not a plain array of records.

    Args:
        parsed: The parsed file to inspect.

    Yields:
        str: At most one issue describing the root layout.
    """
    if parsed.detected_format is not FileFormat.JSON:
        return

    message = _SHAPE_MESSAGES.get(parsed.root_shape)
    if message:
        yield message


def detect_empty_file(parsed: ParsedFile) -> tuple[str, ...]:
    """
    Warn about a file without records.

    An empty file is structurally valid, so this is a warning, not an issue.

    Returns:
        tuple[str, ...]: A single warning, or nothing.
    """
    if parsed.record_count == 0:
        return ("File has no records.",)
    return ()
