# tests/conftest.py

from collections.abc import Callable, Sequence

import pytest

from noharm_validator.domain.parsing import (
    FileFormat,
    ParsedFile,
    RootShape,
    normalise_fields,
    normalise_record,
)
from noharm_validator.domain.parsing._utils import collect_field_names
from noharm_validator.schemas import FileCategory


def _prescription(presmed: str, **overrides: str) -> dict[str, str]:
    record = {
        "FKSETOR": "10",
        "FKPRESCRICAO": "5000",
        "FKPESSOA": "42",
        "NRATENDIMENTO": "900",
        "DTPRESCRICAO": "2024-03-01 08:00:00",
        "DTVIGENCIA": "2024-03-02",
        "FKPRESMED": presmed,
        "FKUNIDADEMEDIDA": "MG",
        "FKMEDICAMENTO": "100",
        "DOSE": "500",
        "FKFREQUENCIA": "8",
        "VIA": "IV",
        "COMPLEMENTO": "",
        "DTSUSPENSAO": "",
        "ORIGEM": "MV",
        "SLAGRUPAMENTO": "1",
        "SLETAPAS": "1",
        "SLDOSAGEM": "1",
        "SLTIPODOSAGEM": "mg",
        "SLACM": "",
        "HORARIO": "08:00",
        "LEITO": "12B",
        "PRESCRITOR": "Dr. Silva",
        "DTCRIACAO_ORIGEM": "01/03/2024 07:55",
        "CONVENIO": "SUS",
        "PERIODO": "1",
        "PERIODO_TOTAL": "3",
        "ALERGIA": "N",
    }
    record.update(overrides)
    return record


def build_conforming_records() -> dict[FileCategory, list[dict[str, str]]]:
    """
    Build one small, fully conforming record set per category.

    Returns:
        dict[FileCategory, list[dict[str, str]]]: Raw records per category.
    """
    return {
        FileCategory.PRESCRIPTIONS: [
            _prescription("7001"),
            _prescription("7002", DOSE="250,5"),
        ],
        FileCategory.MEDICATIONS: [
            {
                "FKHOSPITAL": "1",
                "FKMEDICAMENTO": "100",
                "NOME": "Dipyrone",
                "NAOPADRONIZADO": "N",
                "FKUNIDADEMEDIDACUSTO": "MG",
                "CUSTO": "1,50",
            },
        ],
        FileCategory.SECTORS: [
            {"FKHOSPITAL": "1", "FKSETOR": "10", "NOME": "ICU"},
        ],
        FileCategory.UNITS: [
            {"FKHOSPITAL": "1", "FKUNIDADEMEDIDA": "MG", "NOME": "Milligram"},
        ],
        FileCategory.FREQUENCY: [
            {"FKHOSPITAL": "1", "FKFREQUENCIA": "8", "NOME": "Every 8 hours"},
        ],
    }


def build_parsed(
    records: Sequence[object],
    *,
    file_name: str = "file.json",
    root_shape: RootShape | None = RootShape.ARRAY,
    parse_errors: Sequence[str] = (),
) -> ParsedFile:
    """
    Build a JSON ParsedFile directly from raw records.

    Returns:
        ParsedFile: Parsed file with normalised fields and records.
    """
    fields = collect_field_names(records)
    return ParsedFile(
        file_name=file_name,
        detected_format=FileFormat.JSON,
        root_shape=root_shape,
        raw_field_names=fields,
        normalised_field_names=normalise_fields(fields),
        records=tuple(normalise_record(record) for record in records),
        raw_records=tuple(records),
        parse_errors=tuple(parse_errors),
    )


@pytest.fixture
def conforming_records() -> dict[FileCategory, list[dict[str, str]]]:
    return build_conforming_records()


@pytest.fixture
def make_parsed() -> Callable[..., ParsedFile]:
    return build_parsed


@pytest.fixture
def conforming_files(
    conforming_records: dict[FileCategory, list[dict[str, str]]],
) -> dict[FileCategory, ParsedFile]:
    return {
        category: build_parsed(records, file_name=f"{category.value}.json")
        for category, records in conforming_records.items()
    }
