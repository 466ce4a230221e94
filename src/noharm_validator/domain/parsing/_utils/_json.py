# _utils/_json.py

import json
from dataclasses import dataclass

from ..models import RootShape


@dataclass(frozen=True)
class JsonDocument:
    """
    Records read from a JSON document together with its root layout.

    `records` is None when the layout is not a recognised record set.
    """

    records: tuple[dict, ...] | None
    root: RootShape


def read_json(text: str) -> JsonDocument:
    """
    Parse JSON text and locate its record list.

    Accepts a top-level list of objects, or an object whose `data` property is
    a list of objects. Any other layout yields no records and the OBJECT shape.

    Returns:
        JsonDocument: The records found and the detected root shape.

    Raises:
        ValueError: If the text is not valid JSON.
    """
    parsed = json.loads(text)

    if _is_record_list(parsed):
        return JsonDocument(records=tuple(parsed), root=RootShape.ARRAY)

    if isinstance(parsed, dict) and _is_record_list(parsed.get("data")):
        return JsonDocument(
            records=tuple(parsed["data"]),
            root=RootShape.OBJECT_WITH_DATA,
        )

    return JsonDocument(records=None, root=RootShape.OBJECT)


def _is_record_list(value: object) -> bool:
    """
    Check whether a value is a list whose elements are all objects.

    Returns:
        bool: True for a list of dicts (including an empty list).
    """
    return isinstance(value, list) and all(isinstance(item, dict) for item in value)
