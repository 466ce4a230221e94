# registry/test_registry.py

import pytest

from noharm_validator.domain.registry import (
    SCHEMA_REGISTRY,
    SchemaRegistry,
    SchemaRegistryError,
    build_schema_registry,
    ensure_registry,
)
from noharm_validator.schemas import MV_FORMAT, FileCategory, TypeTag

pytestmark = pytest.mark.unit


def test_registry_covers_every_category() -> None:
    """
    ARRANGE: module-level registry
    ACT:     list unified categories
    ASSERT:  all five categories present
    """
    assert set(SCHEMA_REGISTRY.unified) == set(FileCategory)


def test_registry_label_is_noharm() -> None:
    """
    ARRANGE: module-level registry
    ACT:     read label
    ASSERT:  label is "NoHarm"
    """
    assert SCHEMA_REGISTRY.label == "NoHarm"


def test_required_subset_of_allowed_for_every_category() -> None:
    """
    ARRANGE: module-level registry
    ACT:     compare required and allowed per category
    ASSERT:  required always within allowed
    """
    for schema in SCHEMA_REGISTRY.unified.values():
        assert set(schema.required) <= set(schema.allowed)


def test_prescriptions_drop_fields_required_by_one_source() -> None:
    """
    ARRANGE: FKHOSPITAL required by MV prescriptions only
    ACT:     read unified prescriptions schema
    ASSERT:  FKHOSPITAL allowed but not required
    """
    schema = SCHEMA_REGISTRY.schema_for(FileCategory.PRESCRIPTIONS)

    assert "FKHOSPITAL" not in schema.required
    assert "FKHOSPITAL" in schema.allowed


def test_prescriptions_allow_tasy_only_fields() -> None:
    """
    ARRANGE: PRONTUARIO declared by Tasy only
    ACT:     read unified prescriptions schema
    ASSERT:  PRONTUARIO allowed
    """
    schema = SCHEMA_REGISTRY.schema_for(FileCategory.PRESCRIPTIONS)

    assert "PRONTUARIO" in schema.allowed


def test_prescriptions_number_hints_union_sources() -> None:
    """
    ARRANGE: FREQUENCIADIA hinted number by Tasy only
    ACT:     read unified type hints
    ASSERT:  FREQUENCIADIA among number fields
    """
    schema = SCHEMA_REGISTRY.schema_for(FileCategory.PRESCRIPTIONS)

    assert "FREQUENCIADIA" in schema.type_hints[TypeTag.NUMBER]


def test_prescriptions_reference_all_other_categories() -> None:
    """
    ARRANGE: unified prescriptions schema
    ACT:     collect referenced categories
    ASSERT:  the four other categories
    """
    schema = SCHEMA_REGISTRY.schema_for(FileCategory.PRESCRIPTIONS)

    assert set(schema.refs.values()) == set(FileCategory) - {
        FileCategory.PRESCRIPTIONS,
    }


def test_unified_mapping_is_read_only() -> None:
    """
    ARRANGE: module-level registry
    ACT:     assign into unified mapping
    ASSERT:  raises TypeError
    """
    with pytest.raises(TypeError):
        SCHEMA_REGISTRY.unified[FileCategory.UNITS] = None


def test_build_schema_registry_requires_two_formats() -> None:
    """
    ARRANGE: a single source format
    ACT:     build_schema_registry
    ASSERT:  raises ValueError
    """
    with pytest.raises(ValueError):
        build_schema_registry((MV_FORMAT,))


def test_ensure_registry_rejects_none() -> None:
    """
    ARRANGE: no registry
    ACT:     ensure_registry
    ASSERT:  raises SchemaRegistryError
    """
    with pytest.raises(SchemaRegistryError):
        ensure_registry(None)


def test_ensure_registry_rejects_incomplete_registry() -> None:
    """
    ARRANGE: registry lacking every category but sectors
    ACT:     ensure_registry
    ASSERT:  raises SchemaRegistryError
    """
    partial = SchemaRegistry(
        label="partial",
        unified={FileCategory.SECTORS: SCHEMA_REGISTRY.schema_for(FileCategory.SECTORS)},
    )

    with pytest.raises(SchemaRegistryError):
        ensure_registry(partial)


def test_schema_registry_error_is_lookup_error() -> None:
    """
    ARRANGE: SchemaRegistryError class
    ACT:     check hierarchy
    ASSERT:  subclass of LookupError
    """
    assert issubclass(SchemaRegistryError, LookupError)
