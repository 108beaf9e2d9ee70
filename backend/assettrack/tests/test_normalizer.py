import pytest

from assettrack.services.normalizer import (
    DEVICE_TYPES,
    TYPE_ALIASES,
    normalize_status,
    normalize_type,
    resolve_type,
    type_metadata,
)


@pytest.mark.parametrize(
    "raw,expected",
    [
        ("router", "Router"),
        ("ROUTER ", "Router"),
        ("mordem", "Modem"),
        ("  Compuetr", "Computer"),
        ("sim card", "SIM Card"),
        ("ups", "UPS"),
    ],
)
def test_known_types_and_aliases(raw, expected):
    assert normalize_type(raw) == expected


def test_blank_type_is_other():
    assert normalize_type("") == normalize_type("   ") == normalize_type(None) == "Other"


def test_unknown_type_capitalizes_first_letter():
    assert normalize_type("  projector ") == "Projector"
    assert normalize_type("smart BOARD") == "Smart board"


def test_every_alias_is_case_insensitive():
    for alias in TYPE_ALIASES:
        assert normalize_type(alias.upper()) == normalize_type(alias)


def test_resolve_type_is_strict():
    assert resolve_type("Laptop") == "Laptop"
    assert resolve_type("mordem") == "Modem"
    assert resolve_type("projector") is None
    assert resolve_type("") is None


def test_status_normalization():
    assert normalize_status("active") == "Active"
    assert normalize_status(" MAINTENANCE ") == "Maintenance"
    assert normalize_status("inactive") == "Inactive"
    assert normalize_status("broken") == "Broken"
    assert normalize_status("") == "Available"


def test_metadata_falls_back_to_generic():
    assert type_metadata("Router") == {"icon": "wifi", "color": "text-indigo-600 bg-indigo-100"}
    assert type_metadata("Projector") == {"icon": "monitor", "color": "text-gray-700 bg-gray-100"}


def test_reference_table_has_unique_labels():
    labels = [t.label for t in DEVICE_TYPES]
    assert len(labels) == len(set(labels))
