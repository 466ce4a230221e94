# schemas/categories.py

from enum import Enum


class FileCategory(Enum):
    """
    The five file roles exchanged with the NoHarm platform.

    Member order is the scan order used for indexing, validation and reporting.

    Attributes:
        PRESCRIPTIONS: Prescription items, referencing the other four files.
        MEDICATIONS: Medication catalogue.
        SECTORS: Hospital sectors.
        UNITS: Measurement units.
        FREQUENCY: Administration frequencies.
    """

    PRESCRIPTIONS = "prescriptions"
    MEDICATIONS = "medications"
    SECTORS = "sectors"
    UNITS = "units"
    FREQUENCY = "frequency"

    @property
    def label(self) -> str:
        """
        Human-readable name of the category.

        Returns:
            str: Display label, e.g. "Prescriptions".
        """
        return _LABELS[self]


_LABELS: dict[FileCategory, str] = {
    FileCategory.PRESCRIPTIONS: "Prescriptions",
    FileCategory.MEDICATIONS: "Medications",
    FileCategory.SECTORS: "Sectors",
    FileCategory.UNITS: "Units",
    FileCategory.FREQUENCY: "Frequency",
}

FILE_TYPES: tuple[tuple[FileCategory, str], ...] = tuple(
    (category, category.label) for category in FileCategory
)
