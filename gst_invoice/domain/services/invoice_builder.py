# gst_invoice/domain/services/invoice_builder.py
"""
Draft invoice assembly.

    validate items -> resolve jurisdiction (once) -> calculate each line
    -> aggregate -> allocate document discount -> Invoice(is_draft=True)

The whole pipeline runs on every call; totals are never patched in place.
There is no clock, numbering or I/O here, so calling it for every
keystroke of a live preview is safe and identical inputs give equal
invoices.
"""

from __future__ import annotations

import logging
from datetime import date
from typing import Optional, Sequence

from gst_invoice.domain.errors import InvalidLineItemError, InvalidPartyError
from gst_invoice.domain.models.invoice import (
    Invoice,
    InvoiceLine,
    InvoiceType,
    LineItem,
    Party,
)
from gst_invoice.domain.money import format_money
from gst_invoice.domain.services.discount_allocator import apply_document_discount
from gst_invoice.domain.services.jurisdiction import resolve_jurisdiction
from gst_invoice.domain.services.line_item_calculator import calculate_line_item
from gst_invoice.domain.services import state_codes
from gst_invoice.domain.services.validation import validate_line_item

logger = logging.getLogger("invoice_builder")


def _check_gstin(party: Party, role: str) -> None:
    if party.gstin and not state_codes.is_valid_gstin(party.gstin):
        raise InvalidPartyError(
            f"{role} GSTIN '{party.gstin}' is not valid", field=f"{role}.gstin"
        )


def build_invoice(
    seller: Party,
    buyer: Party,
    items: Sequence[LineItem],
    document_discount=0,
    *,
    invoice_date: Optional[date] = None,
    reference: Optional[str] = None,
    invoice_type: InvoiceType = InvoiceType.TAX_INVOICE,
    place_of_supply: Optional[str] = None,
) -> Invoice:
    """Build an unnumbered draft invoice.

    An empty *items* list is allowed and yields zero totals, so an editor
    can preview the invoice before any line is entered.

    *place_of_supply* ("29-Karnataka", "KA" or a bare state name) overrides
    the buyer's state for both the label and the CGST/SGST vs IGST decision,
    e.g. goods shipped to an address other than the buyer's.

    Raises:
        InvalidPartyError: seller or buyer GSTIN is malformed.
        InvalidLineItemError: an item fails validation.
        InvalidDiscountError: *document_discount* is negative.
    """
    items = list(items)
    for index, item in enumerate(items):
        if not isinstance(item, LineItem):
            raise InvalidLineItemError(
                f"expected LineItem, got {type(item).__name__}", index=index
            )
        validate_line_item(item, index=index)

    _check_gstin(seller, "seller")
    _check_gstin(buyer, "buyer")

    if place_of_supply:
        supply_code, supply_state = state_codes.parse_place_of_supply(place_of_supply)
    else:
        supply_code, supply_state = buyer.state_code, buyer.state

    jurisdiction = resolve_jurisdiction(seller.state_code, supply_code)
    results = [calculate_line_item(item, jurisdiction.is_intra_state) for item in items]
    allocation = apply_document_discount(results, document_discount)

    notes: list[str] = []
    if not jurisdiction.is_resolved:
        notes.append("State code missing for seller or buyer; IGST applied")
    if allocation.clamped:
        notes.append(
            f"Discount {format_money(allocation.requested_discount)} exceeds invoice "
            f"total; applied {format_money(allocation.totals.discount)}"
        )

    invoice = Invoice(
        invoice_date=invoice_date,
        reference=reference,
        invoice_type=invoice_type,
        seller=seller,
        buyer=buyer,
        place_of_supply=state_codes.place_of_supply(supply_code, supply_state),
        is_intra_state=jurisdiction.is_intra_state,
        lines=tuple(
            InvoiceLine(item=item, result=result)
            for item, result in zip(items, allocation.adjusted_results)
        ),
        totals=allocation.totals,
        document_discount=allocation.requested_discount,
        is_draft=True,
        warnings=tuple(notes),
    )

    logger.info(
        "Draft invoice built: %d items, %s, grand total INR %s",
        invoice.total_items,
        jurisdiction.tax_type,
        format_money(invoice.totals.grand_total),
    )
    return invoice


def rebuild_invoice(invoice: Invoice, **changes) -> Invoice:
    """Re-run the full pipeline with some inputs replaced.

    Accepts ``seller``, ``buyer``, ``items``, ``document_discount``,
    ``invoice_date``, ``reference``, ``invoice_type`` and ``place_of_supply``.
    A place of supply that differs from the buyer's own state is kept as
    an override unless replaced.
    """
    allowed = {
        "seller", "buyer", "items", "document_discount",
        "invoice_date", "reference", "invoice_type", "place_of_supply",
    }
    unknown = set(changes) - allowed
    if unknown:
        raise TypeError(f"Unknown invoice inputs: {sorted(unknown)}")

    buyer_label = state_codes.place_of_supply(invoice.buyer.state_code, invoice.buyer.state)
    override = invoice.place_of_supply if invoice.place_of_supply != buyer_label else None

    inputs = {
        "seller": invoice.seller,
        "buyer": invoice.buyer,
        "items": [line.item for line in invoice.lines],
        "document_discount": invoice.document_discount,
        "invoice_date": invoice.invoice_date,
        "reference": invoice.reference,
        "invoice_type": invoice.invoice_type,
        "place_of_supply": override,
    }
    inputs.update(changes)
    return build_invoice(
        inputs.pop("seller"),
        inputs.pop("buyer"),
        inputs.pop("items"),
        inputs.pop("document_discount"),
        **inputs,
    )
