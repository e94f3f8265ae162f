"""Tests for state code lookup, place of supply and GSTIN checks."""

from gst_invoice.domain.services.state_codes import (
    is_valid_gstin,
    parse_place_of_supply,
    place_of_supply,
    state_name,
)


def test_province_code_lookup():
    assert state_name("ka") == "Karnataka"
    assert state_name(" MH ") == "Maharashtra"


def test_gst_numeric_code_lookup():
    assert state_name("29") == "Karnataka"
    assert state_name("27") == "Maharashtra"


def test_unknown_code_passes_through():
    assert state_name("Atlantis") == "Atlantis"
    assert state_name(None) == ""


def test_place_of_supply_label():
    assert place_of_supply("KA") == "KA-Karnataka"
    assert place_of_supply("29", "Karnataka") == "29-Karnataka"
    assert place_of_supply(None, "Goa") == "Goa"
    assert place_of_supply(None) is None


def test_parse_place_of_supply():
    assert parse_place_of_supply("27-Maharashtra") == ("27", "Maharashtra")
    assert parse_place_of_supply("tn") == ("TN", "Tamil Nadu")
    assert parse_place_of_supply("Somewhere") == ("", "Somewhere")
    assert parse_place_of_supply("") == ("", "")


def test_gstin_validation():
    assert is_valid_gstin("36AABCU9603R1ZM") is True
    assert is_valid_gstin(" 27aadcb2230m1zp ") is True
    assert is_valid_gstin("36AABCU9603R1Z") is False
    assert is_valid_gstin(None) is False


def test_gstin_rejects_unissued_state_and_holder_type():
    assert is_valid_gstin("99AABCU9603R1ZM") is False
    assert is_valid_gstin("29AABXU9603R1ZM") is False
    assert is_valid_gstin("29AABCU9603R1XM") is False
