# validation/rules.py

import math
from datetime import datetime

# Literal key values exporters write for a missing value
MISSING_VALUE_TOKENS = frozenset({"null", "undefined"})

# Accepted boolean spellings, compared trimmed and lower-cased
BOOLEAN_TOKENS = frozenset({"true", "false", "0", "1", "s", "n", "sim", "nao", "não"})

# Regional date layouts accepted on top of ISO-8601
REGIONAL_DATE_FORMATS: tuple[str, ...] = (
    "%d/%m/%Y",
    "%d/%m/%Y %H:%M",
    "%d/%m/%Y %H:%M:%S",
    "%d-%m-%Y",
    "%d-%m-%Y %H:%M:%S",
    "%Y/%m/%d",
    "%Y/%m/%d %H:%M:%S",
)


def render_value(value: object) -> str:
    """
    Render a scalar field value as the text used in keys and messages.

    Booleans render lower-case and integral floats without a fractional part,
    so JSON `10`, JSON `10.0` and CSV `"10"` all render as "10".

    Returns:
        str: The textual form, or an empty string for None.
    """
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and math.isfinite(value) and value.is_integer():
        return str(int(value))
    return str(value)


def is_empty_value(value: object) -> bool:
    """
    Check whether a value counts as absent: None, or blank once rendered.
    """
    return render_value(value).strip() == ""


def is_number_value(value: object) -> bool:
    """
    Check that a value reads as a finite number.

    A comma is accepted as decimal separator. Empty values are accepted.

    Returns:
        bool: True if the value is empty or numeric.
    """
    if is_empty_value(value):
        return True
    if isinstance(value, bool):
        return False

    text = render_value(value).strip().replace(",", ".", 1)
    if "_" in text:
        return False

    try:
        return math.isfinite(float(text))
    except ValueError:
        return False


def is_date_value(value: object) -> bool:
    """
    Check that a value reads as a calendar date or date-time.

    Accepts ISO-8601 text, the regional layouts in REGIONAL_DATE_FORMATS, and
    numbers as epoch timestamps when they fit in a float. Empty values are
    accepted.

    Returns:
        bool: True if the value is empty or a valid date.
    """
    if is_empty_value(value):
        return True
    if isinstance(value, bool):
        return False
    if isinstance(value, int | float):
        try:
            return math.isfinite(value)
        except OverflowError:
            return False

    text = render_value(value).strip()
    if _parse_iso(text) is not None:
        return True
    return any(_parse_with(text, layout) is not None for layout in REGIONAL_DATE_FORMATS)


def is_boolean_value(value: object) -> bool:
    """
    Check that a value is one of the accepted boolean spellings.

    Empty values are accepted.

    Returns:
        bool: True if the value is empty or a recognised boolean.
    """
    if is_empty_value(value):
        return True
    return render_value(value).strip().lower() in BOOLEAN_TOKENS


def _parse_iso(text: str) -> datetime | None:
    """
    Parse an ISO-8601 date or date-time.

    Returns:
        datetime | None: The parsed datetime, or None if malformed.
    """
    try:
        return datetime.fromisoformat(text.replace("Z", "+00:00"))
    except ValueError:
        return None


def _parse_with(text: str, layout: str) -> datetime | None:
    try:
        return datetime.strptime(text, layout)
    except ValueError:
        return None
