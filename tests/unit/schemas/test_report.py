# schemas/test_report.py

import pytest
from pydantic import ValidationError

from noharm_validator.schemas import (
    FileValidationOutput,
    ParsedFileOutput,
    ValidationReport,
    ValidationSummary,
)

pytestmark = pytest.mark.unit


def _file_output(**overrides: object) -> FileValidationOutput:
    values = {
        "status": "ok",
        "issues": (),
        "warnings": (),
        "record_count": 3,
        "column_count": 2,
    }
    values.update(overrides)
    return FileValidationOutput(**values)


def test_file_output_accepts_valid_data() -> None:
    """
    ARRANGE: valid file verdict values
    ACT:     construct FileValidationOutput
    ASSERT:  record_count matches input
    """
    actual = _file_output()

    assert actual.record_count == 3


def test_file_output_rejects_unknown_status() -> None:
    """
    ARRANGE: status outside ok/warn/error
    ACT:     construct FileValidationOutput
    ASSERT:  raises ValidationError
    """
    with pytest.raises(ValidationError):
        _file_output(status="fine")


def test_file_output_is_strict_about_counts() -> None:
    """
    ARRANGE: record_count given as a string
    ACT:     construct FileValidationOutput
    ASSERT:  raises ValidationError
    """
    with pytest.raises(ValidationError):
        _file_output(record_count="3")


def test_file_output_is_frozen() -> None:
    """
    ARRANGE: valid FileValidationOutput
    ACT:     assign a field
    ASSERT:  raises ValidationError
    """
    output = _file_output()

    with pytest.raises(ValidationError):
        output.status = "error"


def test_report_dumps_camel_case_keys() -> None:
    """
    ARRANGE: report with one file and one parsed input
    ACT:     model_dump by alias
    ASSERT:  recordCount and parseErrors keys present
    """
    report = ValidationReport(
        summary=ValidationSummary(
            status="ok",
            message="done",
            error_count=0,
            warning_count=0,
        ),
        files={"sectors": _file_output()},
        parsed={
            "sectors": ParsedFileOutput(
                file_name="sectors.csv",
                detected_format="csv",
                root_shape=None,
                fields=("NOME",),
                normalised_fields=("nome",),
                records=({"nome": "ICU"},),
                raw_records=({"NOME": "ICU"},),
                parse_errors=(),
            ),
        },
    )

    actual = report.model_dump(mode="json", by_alias=True)

    assert actual["files"]["sectors"]["recordCount"] == 3
    assert actual["parsed"]["sectors"]["parseErrors"] == []
    assert actual["parsed"]["sectors"]["rawRecords"] == [{"NOME": "ICU"}]
    assert actual["summary"]["errorCount"] == 0
