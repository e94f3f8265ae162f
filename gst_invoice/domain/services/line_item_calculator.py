# gst_invoice/domain/services/line_item_calculator.py
"""
Per-line GST calculation.

    gross          = quantity × rate
    after_discount = gross − gross × discount% / 100
    exclusive:  taxable = after_discount,                 tax = taxable × gst% / 100
    inclusive:  taxable = after_discount / (1 + gst%/100), tax = after_discount − taxable
    intra-state: CGST = SGST = tax / 2      inter-state: IGST = tax

Inputs are assumed validated (see validation.py); nothing is rounded here.
"""

from __future__ import annotations

from decimal import Decimal

from gst_invoice.domain.models.invoice import LineItem, LineItemResult
from gst_invoice.domain.money import HUNDRED, ZERO

_TWO = Decimal("2")


def calculate_line_item(item: LineItem, is_intra_state: bool) -> LineItemResult:
    gross = item.gross_amount
    discount_amount = gross * item.discount_percent / HUNDRED
    after_discount = gross - discount_amount

    if item.price_includes_tax:
        taxable_value = after_discount / (1 + item.gst_rate / HUNDRED)
        tax_amount = after_discount - taxable_value
    else:
        taxable_value = after_discount
        tax_amount = taxable_value * item.gst_rate / HUNDRED

    if is_intra_state:
        cgst = sgst = tax_amount / _TWO
        igst = ZERO
    else:
        cgst = sgst = ZERO
        igst = tax_amount

    return LineItemResult(
        quantity=item.quantity,
        taxable_value=taxable_value,
        cgst_amount=cgst,
        sgst_amount=sgst,
        igst_amount=igst,
        cess_amount=ZERO,
        line_total=taxable_value + cgst + sgst + igst,
    )
