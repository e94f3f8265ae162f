# gst_invoice/domain/services/discount_allocator.py
"""
Document-level (order/invoice) discount allocation.

The discount never changes an item's tax rate. Instead the invoice-level
taxable value and tax components are all scaled by the same ratio

    ratio = (gross_total − discount) / gross_total

so the totals keep a consistent effective rate. Only the roll-up is
scaled: line results are returned as computed, and a printed line still
shows its pre-discount tax.

A discount larger than the gross total is clamped to it (grand total 0)
and reported with DiscountExceedsTotalWarning; it is never rejected.
"""

from __future__ import annotations

import logging
import warnings
from dataclasses import dataclass
from decimal import Decimal
from typing import Sequence

from gst_invoice.domain.errors import (
    DiscountExceedsTotalWarning,
    InvalidDiscountError,
    InvalidLineItemError,
)
from gst_invoice.domain.models.invoice import InvoiceTotals, LineItemResult
from gst_invoice.domain.money import ZERO, format_money, to_decimal
from gst_invoice.domain.services.invoice_aggregator import aggregate

logger = logging.getLogger("discount_allocator")


@dataclass(frozen=True)
class DiscountAllocation:
    """Result of applying a document discount."""
    adjusted_results: tuple[LineItemResult, ...]
    totals: InvoiceTotals
    requested_discount: Decimal = ZERO
    clamped: bool = False

    @property
    def ratio(self) -> Decimal:
        """Share of the gross total that remains payable (1 when no discount)."""
        if self.totals.gross_total == ZERO:
            return Decimal("1")
        return self.totals.grand_total / self.totals.gross_total


def apply_document_discount(
    line_results: Sequence[LineItemResult],
    discount_amount,
) -> DiscountAllocation:
    """Aggregate *line_results* and spread *discount_amount* across the totals."""
    try:
        requested = to_decimal(discount_amount or 0, field="document_discount")
    except InvalidLineItemError as exc:
        raise InvalidDiscountError(str(exc), field="document_discount") from None
    if requested < ZERO:
        raise InvalidDiscountError(
            f"Document discount cannot be negative: {requested}",
            field="document_discount",
        )

    results = tuple(line_results)
    totals = aggregate(results)
    gross_total = totals.gross_total

    clamped = requested > gross_total
    effective = gross_total if clamped else requested
    if clamped:
        message = (
            f"Document discount {format_money(requested)} exceeds invoice total "
            f"{format_money(gross_total)}; clamped to {format_money(gross_total)}"
        )
        logger.warning(message)
        warnings.warn(message, DiscountExceedsTotalWarning, stacklevel=2)

    if effective == ZERO:
        return DiscountAllocation(results, totals, requested, clamped)

    remaining = gross_total - effective
    if remaining == ZERO:
        # Full discount consumes the whole order
        zeroed = totals.model_copy(
            update={
                "subtotal": ZERO,
                "total_cgst": ZERO,
                "total_sgst": ZERO,
                "total_igst": ZERO,
                "total_cess": ZERO,
                "grand_total": ZERO,
                "discount": gross_total,
            }
        )
        return DiscountAllocation(results, zeroed, requested, clamped)

    ratio = remaining / gross_total
    scaled = totals.model_copy(
        update={
            "subtotal": totals.subtotal * ratio,
            "total_cgst": totals.total_cgst * ratio,
            "total_sgst": totals.total_sgst * ratio,
            "total_igst": totals.total_igst * ratio,
            "total_cess": totals.total_cess * ratio,
            "grand_total": remaining,
            "discount": effective,
        }
    )
    return DiscountAllocation(results, scaled, requested, clamped)
