# sources/mv_schema.py

from ..categories import FileCategory
from ..source import SourceFileSchema, SourceFormat, TypeTag

_PRESCRIPTIONS = SourceFileSchema(
    required=(
        "FKHOSPITAL",
        "FKSETOR",
        "FKPRESCRICAO",
        "FKPESSOA",
        "NRATENDIMENTO",
        "DTPRESCRICAO",
        "DTVIGENCIA",
        "FKPRESMED",
        "FKUNIDADEMEDIDA",
        "FKMEDICAMENTO",
        "NOMEMEDICAMENTO",
        "DOSE",
        "FKFREQUENCIA",
        "VIA",
        "COMPLEMENTO",
        "DTSUSPENSAO",
        "ORIGEM",
        "SLAGRUPAMENTO",
        "SLETAPAS",
        "SLDOSAGEM",
        "SLTIPODOSAGEM",
        "SLACM",
        "HORARIO",
        "LEITO",
        "PRESCRITOR",
        "DTCRIACAO_ORIGEM",
        "CONVENIO",
        "PERIODO",
        "PERIODO_TOTAL",
        "ALERGIA",
    ),
    key=("FKPRESMED",),
    type_hints={
        TypeTag.NUMBER: (
            "FKHOSPITAL",
            "FKSETOR",
            "FKPRESCRICAO",
            "FKPESSOA",
            "NRATENDIMENTO",
            "FKPRESMED",
            "DOSE",
            "SLAGRUPAMENTO",
            "SLETAPAS",
            "SLDOSAGEM",
            "PERIODO",
            "PERIODO_TOTAL",
        ),
        TypeTag.DATE: (
            "DTPRESCRICAO",
            "DTVIGENCIA",
            "DTSUSPENSAO",
            "DTCRIACAO_ORIGEM",
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
        "ORIGEM",
        "FKMEDICAMENTO",
        "NOME",
        "NAOPADRONIZADO",
        "FKUNIDADEMEDIDACUSTO",
        "CUSTO_PADRAO",
        "VL_FATOR",
        "CUSTO",
    ),
    key=("FKMEDICAMENTO",),
    type_hints={
        TypeTag.NUMBER: (
            "FKHOSPITAL",
            "FKMEDICAMENTO",
            "CUSTO_PADRAO",
            "VL_FATOR",
            "CUSTO",
        ),
    },
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

MV_FORMAT = SourceFormat(
    label="MV",
    files={
        FileCategory.PRESCRIPTIONS: _PRESCRIPTIONS,
        FileCategory.MEDICATIONS: _MEDICATIONS,
        FileCategory.SECTORS: _SECTORS,
        FileCategory.UNITS: _UNITS,
        FileCategory.FREQUENCY: _FREQUENCY,
    },
)
