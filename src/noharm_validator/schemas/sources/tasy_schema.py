# sources/tasy_schema.py

from ..categories import FileCategory
from ..source import SourceFileSchema, SourceFormat, TypeTag

_PRESCRIPTIONS = SourceFileSchema(
    required=(
        "ORIGEM",
        "NRATENDIMENTO",
        "FKPRESCRICAO",
        "SLAGRUPAMENTO",
        "SLACM",
        "SLETAPAS",
        "SLHORAFASE",
        "SLTEMPOAPLICACAO",
        "SLDOSAGEM",
        "SLTIPODOSAGEM",
        "FKPRESMED",
        "FKPESSOA",
        "FKSETOR",
        "DTPRESCRICAO",
        "DTCRIACAO_ORIGEM",
        "DTATUALIZACAO",
        "DTSUSPENSAO",
        "DTVIGENCIA",
        "HORARIO",
        "FREQUENCIADIA",
        "COMPLEMENTO",
        "FKMEDICAMENTO",
        "DOSE",
        "FKUNIDADEMEDIDA",
        "DS_UNIDADE_MEDIDA",
        "FKFREQUENCIA",
        "VIA",
        "LEITO",
        "PRONTUARIO",
        "PRESCRITOR",
        "ALERGIA",
        "PERIODO",
        "PERIODO_TOTAL",
        "CONVENIO",
    ),
    key=("FKPRESMED",),
    type_hints={
        TypeTag.NUMBER: (
            "NRATENDIMENTO",
            "FKPRESCRICAO",
            "FKPRESMED",
            "FKPESSOA",
            "FKSETOR",
            "FREQUENCIADIA",
            "FKMEDICAMENTO",
            "DOSE",
            "PERIODO",
            "PERIODO_TOTAL",
        ),
        TypeTag.DATE: (
            "DTPRESCRICAO",
            "DTCRIACAO_ORIGEM",
            "DTATUALIZACAO",
            "DTSUSPENSAO",
            "DTVIGENCIA",
        ),
    },
    refs={
        "FKSETOR": FileCategory.SECTORS,
        "FKMEDICAMENTO": FileCategory.MEDICATIONS,
        "FKUNIDADEMEDIDA": FileCategory.UNITS,
        "FKFREQUENCIA": FileCategory.FREQUENCY,
    },
)

_MEDICATIONS = SourceFileSchema(
    required=(
        "FKHOSPITAL",
        "FKMEDICAMENTO",
        "NOME",
        "NAOPADRONIZADO",
        "FKUNIDADEMEDIDACUSTO",
        "CUSTO",
    ),
    key=("FKMEDICAMENTO",),
    type_hints={TypeTag.NUMBER: ("FKHOSPITAL", "FKMEDICAMENTO", "CUSTO")},
)

_SECTORS = SourceFileSchema(
    required=("FKHOSPITAL", "FKSETOR", "NOME"),
    key=("FKSETOR",),
    type_hints={TypeTag.NUMBER: ("FKHOSPITAL", "FKSETOR")},
)

_UNITS = SourceFileSchema(
    required=("FKHOSPITAL", "FKUNIDADEMEDIDA", "NOME"),
    key=("FKUNIDADEMEDIDA",),
    type_hints={TypeTag.NUMBER: ("FKHOSPITAL",)},
)

_FREQUENCY = SourceFileSchema(
    required=("FKHOSPITAL", "FKFREQUENCIA", "NOME"),
    key=("FKFREQUENCIA",),
    type_hints={TypeTag.NUMBER: ("FKHOSPITAL",)},
)

TASY_FORMAT = SourceFormat(
    label="Tasy",
    files={
        FileCategory.PRESCRIPTIONS: _PRESCRIPTIONS,
        FileCategory.MEDICATIONS: _MEDICATIONS,
        FileCategory.SECTORS: _SECTORS,
        FileCategory.UNITS: _UNITS,
        FileCategory.FREQUENCY: _FREQUENCY,
    },
)
