# _utils/_csv.py

import csv
import io
from collections.abc import Sequence
from dataclasses import dataclass

# Candidate delimiters, in tie-break order
DELIMITER_CANDIDATES: tuple[str, ...] = (",", ";", "\t", "|")

# Number of non-blank lines inspected when guessing the delimiter
SNIFF_LINE_COUNT = 10


@dataclass(frozen=True)
class CsvTable:
    """
    Header and rows read from delimited text, plus any row-level problems.
    """

    fields: tuple[str, ...]
    rows: tuple[dict[str, str], ...]
    errors: tuple[str, ...]
    delimiter: str


def read_csv(text: str) -> CsvTable:
    """
    Parse delimited text with a header row into string-valued rows.

    The delimiter is guessed from the first lines. Empty lines are skipped, but
    rows of empty cells such as ",," are kept as records. Values are kept
    verbatim, without type coercion. Rows with too few values keep the fields
    they have; surplus values are dropped. Both are reported as errors, as is
    any failure of the csv reader, which ends parsing.

    Returns:
        CsvTable: Header fields, one dict per data row, and error messages.
    """
    delimiter = DELIMITER_CANDIDATES[0]
    fields: tuple[str, ...] = ()
    rows: list[dict[str, str]] = []
    errors: list[str] = []

    try:
        delimiter = guess_delimiter(text)
        reader = csv.reader(io.StringIO(text, newline=""), delimiter=delimiter)
        for row in reader:
            if not row:
                continue
            if not fields:
                fields = tuple(row)
                continue
            rows.append(_build_row(fields, row, len(rows) + 1, errors))
    except csv.Error as error:
        errors.append(str(error))

    return CsvTable(
        fields=fields,
        rows=tuple(rows),
        errors=tuple(errors),
        delimiter=delimiter,
    )


def guess_delimiter(
    text: str,
    candidates: Sequence[str] = DELIMITER_CANDIDATES,
) -> str:
    """
    Pick the delimiter that splits the leading lines most consistently.

    For each candidate the sample lines are split and the variation in field
    count between consecutive lines is summed. Candidates averaging fewer than
    two fields per line are ignored. The lowest variation wins, with ties
    going to the earlier candidate.

    Returns:
        str: The chosen delimiter, or the first candidate if none qualifies.
    """
    sample = [line for line in text.splitlines() if line.strip()][:SNIFF_LINE_COUNT]
    if not sample:
        return candidates[0]

    best: str | None = None
    best_delta: int | None = None

    for candidate in candidates:
        counts = [len(row) for row in csv.reader(sample, delimiter=candidate)]
        average = sum(counts) / len(counts)
        delta = sum(abs(curr - prev) for prev, curr in zip(counts, counts[1:]))

        if average < 2:
            continue
        if best_delta is None or delta < best_delta:
            best, best_delta = candidate, delta

    return best or candidates[0]


def _build_row(
    fields: tuple[str, ...],
    row: list[str],
    position: int,
    errors: list[str],
) -> dict[str, str]:
    """
    Pair a row's values with the header, recording any field-count mismatch.

    Returns:
        dict[str, str]: Field name to raw value for the values present.
    """
    if len(row) < len(fields):
        errors.append(
            f"Too few fields: expected {len(fields)} fields but parsed {len(row)}"
            f" (record {position})",
        )
    elif len(row) > len(fields):
        errors.append(
            f"Too many fields: expected {len(fields)} fields but parsed {len(row)}"
            f" (record {position})",
        )
    return dict(zip(fields, row))
