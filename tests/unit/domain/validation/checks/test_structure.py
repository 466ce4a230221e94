# checks/test_structure.py

from dataclasses import replace

import pytest

from noharm_validator.domain.parsing import FileFormat, RootShape
from noharm_validator.domain.validation.checks import (
    detect_empty_file,
    detect_parse_errors,
    detect_shape_issues,
)

pytestmark = pytest.mark.unit


def test_detect_parse_errors_yields_each_error(make_parsed) -> None:
    """
    ARRANGE: parsed file with two parse errors
    ACT:     detect_parse_errors
    ASSERT:  both surfaced in order
    """
    parsed = make_parsed([], parse_errors=("first", "second"))

    assert list(detect_parse_errors(parsed)) == ["first", "second"]


def test_detect_shape_issues_plain_array_passes(make_parsed) -> None:
    """
    ARRANGE: JSON array root
    ACT:     detect_shape_issues
    ASSERT:  no issue
    """
    assert list(detect_shape_issues(make_parsed([{"A": 1}]))) == []


def test_detect_shape_issues_object_with_data(make_parsed) -> None:
    """
    ARRANGE: JSON root wrapping records under data
    ACT:     detect_shape_issues
    ASSERT:  one issue naming the data field
    """
    parsed = make_parsed([{"A": 1}], root_shape=RootShape.OBJECT_WITH_DATA)

    actual = list(detect_shape_issues(parsed))

    assert len(actual) == 1
    assert "data field" in actual[0]


def test_detect_shape_issues_plain_object(make_parsed) -> None:
    """
    ARRANGE: JSON root that is neither array nor data object
    ACT:     detect_shape_issues
    ASSERT:  array-of-objects issue
    """
    parsed = make_parsed([], root_shape=RootShape.OBJECT)

    assert list(detect_shape_issues(parsed)) == [
        "JSON must be an array of objects (a list of records).",
    ]


def test_detect_shape_issues_ignores_csv(make_parsed) -> None:
    """
    ARRANGE: CSV parsed file
    ACT:     detect_shape_issues
    ASSERT:  no issue
    """
    parsed = replace(
        make_parsed([{"A": "1"}], root_shape=None),
        detected_format=FileFormat.CSV,
    )

    assert list(detect_shape_issues(parsed)) == []


def test_detect_empty_file_warns(make_parsed) -> None:
    """
    ARRANGE: parsed file without records
    ACT:     detect_empty_file
    ASSERT:  single warning
    """
    assert detect_empty_file(make_parsed([])) == ("File has no records.",)


def test_detect_empty_file_silent_with_records(make_parsed) -> None:
    """
    ARRANGE: parsed file with a record
    ACT:     detect_empty_file
    ASSERT:  no warning
    """
    assert detect_empty_file(make_parsed([{"A": 1}])) == ()
