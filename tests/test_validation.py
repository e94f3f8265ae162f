"""Tests for line item input validation."""

from decimal import Decimal

import pytest

from gst_invoice.domain.errors import InvalidLineItemError
from gst_invoice.domain.models.invoice import LineItem
from gst_invoice.domain.services.validation import parse_line_item, validate_line_item


def _record(**overrides) -> dict:
    data = {
        "description": "Premium T-Shirt",
        "hsn_code": "6109",
        "quantity": "2",
        "unit": "PCS",
        "rate": "599.00",
        "discount_percent": "0",
        "gst_rate": "18",
    }
    data.update(overrides)
    return data


class TestParseLineItem:

    def test_parses_string_numbers(self):
        item = parse_line_item(_record(rate="1,299.00"))
        assert item.quantity == Decimal("2")
        assert item.rate == Decimal("1299.00")
        assert item.gst_rate == Decimal("18")
        assert item.unit == "PCS"
        assert item.price_includes_tax is False

    def test_blank_hsn_becomes_none(self):
        assert parse_line_item(_record(hsn_code="  ")).hsn_code is None

    def test_hsn_is_upper_cased(self):
        assert parse_line_item(_record(hsn_code="99831a")).hsn_code == "99831A"

    def test_missing_gst_rate_is_an_error(self):
        data = _record()
        del data["gst_rate"]
        with pytest.raises(InvalidLineItemError) as exc_info:
            parse_line_item(data)
        assert exc_info.value.field == "gst_rate"

    def test_none_gst_rate_is_an_error(self):
        with pytest.raises(InvalidLineItemError):
            parse_line_item(_record(gst_rate=None))

    def test_non_numeric_quantity(self):
        with pytest.raises(InvalidLineItemError) as exc_info:
            parse_line_item(_record(quantity="two"), index=0)
        assert exc_info.value.field == "quantity"
        assert exc_info.value.index == 0

    def test_missing_rate_reported_by_model(self):
        data = _record()
        del data["rate"]
        with pytest.raises(InvalidLineItemError) as exc_info:
            parse_line_item(data)
        assert exc_info.value.field == "rate"


class TestValidateLineItem:

    @pytest.mark.parametrize(
        "field, value",
        [
            ("quantity", Decimal("-1")),
            ("rate", Decimal("-0.01")),
            ("discount_percent", Decimal("-5")),
            ("discount_percent", Decimal("100.01")),
            ("gst_rate", Decimal("-18")),
        ],
    )
    def test_out_of_range_values(self, field, value):
        fields = {"quantity": Decimal("1"), "rate": Decimal("10"), "gst_rate": Decimal("5")}
        fields[field] = value
        with pytest.raises(InvalidLineItemError) as exc_info:
            validate_line_item(LineItem(**fields))
        assert exc_info.value.field == field

    @pytest.mark.parametrize("hsn", ["61", "123456789", "61-09"])
    def test_bad_hsn_codes(self, hsn):
        item = LineItem(hsn_code=hsn, quantity=1, rate=10, gst_rate=5)
        with pytest.raises(InvalidLineItemError):
            validate_line_item(item)

    def test_boundaries_are_allowed(self):
        item = LineItem(
            hsn_code="84715000",
            quantity=Decimal("0"),
            rate=Decimal("0"),
            discount_percent=Decimal("100"),
            gst_rate=Decimal("0"),
        )
        assert validate_line_item(item) is item

    def test_error_is_a_value_error(self):
        with pytest.raises(ValueError):
            validate_line_item(LineItem(quantity=-1, rate=1, gst_rate=5))
