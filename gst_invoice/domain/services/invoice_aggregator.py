# gst_invoice/domain/services/invoice_aggregator.py

from __future__ import annotations

from typing import Iterable

from gst_invoice.domain.models.invoice import InvoiceTotals, LineItemResult
from gst_invoice.domain.money import ZERO


def aggregate(line_results: Iterable[LineItemResult]) -> InvoiceTotals:
    """Sum line results into pre-discount invoice totals.

    Accumulates in input order. An empty list gives all-zero totals.
    """
    subtotal = cgst = sgst = igst = cess = grand = qty = ZERO

    for result in line_results:
        subtotal += result.taxable_value
        cgst += result.cgst_amount
        sgst += result.sgst_amount
        igst += result.igst_amount
        cess += result.cess_amount
        grand += result.line_total
        qty += result.quantity

    return InvoiceTotals(
        subtotal=subtotal,
        total_cgst=cgst,
        total_sgst=sgst,
        total_igst=igst,
        total_cess=cess,
        grand_total=grand,
        total_qty=qty,
        discount=ZERO,
        gross_total=grand,
    )
