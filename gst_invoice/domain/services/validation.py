# gst_invoice/domain/services/validation.py
"""
Input-boundary validation for line items.

The calculators trust their input, so every range check lives here and
fails with InvalidLineItemError. Nothing is defaulted: a missing GST rate
is an error, never an assumed 18%.
"""

from __future__ import annotations

import re
from typing import Any, Mapping, Optional

from pydantic import ValidationError

from gst_invoice.domain.errors import InvalidLineItemError
from gst_invoice.domain.models.invoice import LineItem
from gst_invoice.domain.money import HUNDRED, ZERO, to_decimal

HSN_REGEX = re.compile(r"^[0-9A-Z]{4,8}$")

_NUMERIC_FIELDS = ("quantity", "rate", "discount_percent", "gst_rate")


def validate_line_item(item: LineItem, index: Optional[int] = None) -> LineItem:
    """Check ranges on an already-typed item; returns it unchanged."""
    if item.quantity < ZERO:
        raise InvalidLineItemError(
            f"quantity cannot be negative: {item.quantity}", field="quantity", index=index
        )
    if item.rate < ZERO:
        raise InvalidLineItemError(
            f"rate cannot be negative: {item.rate}", field="rate", index=index
        )
    if not ZERO <= item.discount_percent <= HUNDRED:
        raise InvalidLineItemError(
            f"discount_percent must be between 0 and 100: {item.discount_percent}",
            field="discount_percent",
            index=index,
        )
    if item.gst_rate < ZERO:
        raise InvalidLineItemError(
            f"gst_rate cannot be negative: {item.gst_rate}", field="gst_rate", index=index
        )
    if item.hsn_code and not HSN_REGEX.match(item.hsn_code):
        raise InvalidLineItemError(
            f"hsn_code must be 4-8 letters or digits: {item.hsn_code!r}",
            field="hsn_code",
            index=index,
        )
    return item


def parse_line_item(data: Mapping[str, Any], index: Optional[int] = None) -> LineItem:
    """Build a validated LineItem from a plain mapping (form or API payload).

    Numbers may be given as strings ("1299.00", "1,299.00"); a blank HSN
    code is dropped.
    """
    fields = dict(data)
    for name in _NUMERIC_FIELDS:
        if name in fields:
            fields[name] = _coerce(fields[name], name, index)
    if "gst_rate" not in fields or fields["gst_rate"] is None:
        raise InvalidLineItemError("gst_rate is required", field="gst_rate", index=index)

    hsn = str(fields.get("hsn_code") or "").strip().upper()
    fields["hsn_code"] = hsn or None

    try:
        item = LineItem(**fields)
    except ValidationError as exc:
        error = exc.errors()[0]
        field = ".".join(str(part) for part in error.get("loc", ())) or None
        raise InvalidLineItemError(error.get("msg", str(exc)), field=field, index=index) from exc

    return validate_line_item(item, index=index)


def _coerce(value, name: str, index: Optional[int]):
    if value is None:
        return None
    try:
        return to_decimal(value, field=name)
    except InvalidLineItemError as exc:
        raise InvalidLineItemError(str(exc), field=name, index=index) from None
