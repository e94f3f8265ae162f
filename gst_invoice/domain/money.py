# gst_invoice/domain/money.py
"""
Decimal helpers shared by the calculators and the output payloads.

Amounts are kept at full precision while computing and rounded half-up
to paise only when they leave the engine.
"""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal, InvalidOperation

from gst_invoice.domain.errors import InvalidLineItemError

ZERO = Decimal("0")
HUNDRED = Decimal("100")
PAISE = Decimal("0.01")


def to_decimal(value, field: str | None = None) -> Decimal:
    """Coerce *value* to Decimal.

    Unlike the lenient parsers used for OCR data, garbage is an error here:
    a silently zeroed rate or quantity would produce a wrong invoice.
    """
    if isinstance(value, Decimal):
        result = value
    elif isinstance(value, bool) or value is None:
        raise InvalidLineItemError(f"{field or 'value'} is required", field=field)
    else:
        try:
            result = Decimal(str(value).strip().replace(",", ""))
        except (InvalidOperation, ValueError, TypeError):
            raise InvalidLineItemError(
                f"{field or 'value'} is not a number: {value!r}", field=field
            ) from None
    if not result.is_finite():
        raise InvalidLineItemError(f"{field or 'value'} must be finite", field=field)
    return result


def round_money(value: Decimal) -> Decimal:
    """Round to 2 decimal places, half-up."""
    return Decimal(value).quantize(PAISE, rounding=ROUND_HALF_UP)


def format_money(value: Decimal) -> str:
    """Boundary format: ``Decimal("1299") -> "1299.00"``."""
    rounded = round_money(value)
    if rounded == ZERO:
        rounded = abs(rounded)  # avoid "-0.00"
    return f"{rounded:.2f}"
