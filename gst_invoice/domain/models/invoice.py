"""
Invoice domain models.

All amounts are Decimal at full precision; ``to_payload()`` rounds them
half-up to paise and renders them as 2-dp strings for renderers and
serializers.
"""

from datetime import date
from decimal import Decimal
from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, computed_field

from gst_invoice.domain.money import ZERO, format_money, round_money
from gst_invoice.domain.services.amount_in_words import amount_in_words


class InvoiceType(str, Enum):
    """Document type printed as the invoice heading."""

    TAX_INVOICE = "tax_invoice"
    BILL_OF_SUPPLY = "bill_of_supply"
    EXPORT = "export"
    CREDIT_NOTE = "credit_note"
    DEBIT_NOTE = "debit_note"

    @property
    def heading(self) -> str:
        return _INVOICE_HEADINGS[self]


_INVOICE_HEADINGS = {
    InvoiceType.TAX_INVOICE: "TAX INVOICE",
    InvoiceType.BILL_OF_SUPPLY: "BILL OF SUPPLY",
    InvoiceType.EXPORT: "EXPORT INVOICE",
    InvoiceType.CREDIT_NOTE: "CREDIT NOTE",
    InvoiceType.DEBIT_NOTE: "DEBIT NOTE",
}


class Party(BaseModel):
    """Seller or buyer as seen by the engine.

    Only ``state_code`` takes part in calculation; the other fields are
    passed through to the rendered invoice.
    """

    model_config = ConfigDict(frozen=True)

    state_code: Optional[str] = None
    state: Optional[str] = None
    name: Optional[str] = None
    gstin: Optional[str] = None
    address: Optional[str] = None


class LineItem(BaseModel):
    """Canonical line item. Every caller maps its own record shape into this."""

    model_config = ConfigDict(frozen=True)

    description: str = ""
    hsn_code: Optional[str] = None
    quantity: Decimal
    unit: str = "UNT"
    rate: Decimal
    discount_percent: Decimal = ZERO
    gst_rate: Decimal
    price_includes_tax: bool = False

    @property
    def gross_amount(self) -> Decimal:
        return self.quantity * self.rate


class LineItemResult(BaseModel):
    """Computed values for one line item."""

    model_config = ConfigDict(frozen=True)

    quantity: Decimal = ZERO
    taxable_value: Decimal = ZERO
    cgst_amount: Decimal = ZERO
    sgst_amount: Decimal = ZERO
    igst_amount: Decimal = ZERO
    cess_amount: Decimal = ZERO
    line_total: Decimal = ZERO

    @property
    def tax_amount(self) -> Decimal:
        return self.cgst_amount + self.sgst_amount + self.igst_amount + self.cess_amount

    def rounded(self) -> "LineItemResult":
        """Copy with every monetary value rounded to paise."""
        return self.model_copy(
            update={
                name: round_money(getattr(self, name))
                for name in _LINE_MONEY_FIELDS
            }
        )

    def to_payload(self) -> dict:
        payload = {name: format_money(getattr(self, name)) for name in _LINE_MONEY_FIELDS}
        payload["quantity"] = str(self.quantity)
        return payload


_LINE_MONEY_FIELDS = (
    "taxable_value",
    "cgst_amount",
    "sgst_amount",
    "igst_amount",
    "cess_amount",
    "line_total",
)


class InvoiceTotals(BaseModel):
    """Invoice-level roll-up. Always rebuilt from the full line list.

    ``gross_total`` is the sum of line totals before the document discount,
    so ``grand_total == gross_total - discount`` holds at full precision.
    """

    model_config = ConfigDict(frozen=True)

    subtotal: Decimal = ZERO
    total_cgst: Decimal = ZERO
    total_sgst: Decimal = ZERO
    total_igst: Decimal = ZERO
    total_cess: Decimal = ZERO
    grand_total: Decimal = ZERO
    total_qty: Decimal = ZERO
    discount: Decimal = ZERO
    gross_total: Decimal = ZERO

    @property
    def total_tax(self) -> Decimal:
        return self.total_cgst + self.total_sgst + self.total_igst + self.total_cess

    def to_payload(self) -> dict:
        payload = {
            name: format_money(getattr(self, name))
            for name in (
                "subtotal",
                "total_cgst",
                "total_sgst",
                "total_igst",
                "total_cess",
                "grand_total",
                "discount",
                "gross_total",
            )
        }
        payload["total_tax"] = format_money(self.total_tax)
        payload["total_qty"] = str(self.total_qty)
        return payload


class InvoiceLine(BaseModel):
    """A line item paired with the values computed from it."""

    model_config = ConfigDict(frozen=True)

    item: LineItem
    result: LineItemResult


class Invoice(BaseModel):
    """Draft invoice produced by the builder.

    ``invoice_number`` stays empty and ``is_draft`` stays True: numbering
    and finalisation belong to the persistence layer.
    """

    model_config = ConfigDict(frozen=True)

    invoice_number: Optional[str] = None
    invoice_date: Optional[date] = None
    reference: Optional[str] = None
    invoice_type: InvoiceType = InvoiceType.TAX_INVOICE
    seller: Party
    buyer: Party
    place_of_supply: Optional[str] = None
    is_intra_state: bool = False
    lines: tuple[InvoiceLine, ...] = ()
    totals: InvoiceTotals = Field(default_factory=InvoiceTotals)
    document_discount: Decimal = ZERO
    is_draft: bool = True
    warnings: tuple[str, ...] = ()

    @computed_field
    @property
    def amount_in_words(self) -> str:
        return amount_in_words(self.totals.grand_total)

    @property
    def total_items(self) -> int:
        return len(self.lines)

    def to_payload(self) -> dict:
        """Plain-data view for renderers: money as 2-dp strings, no markup."""
        return {
            "title": self.invoice_type.heading,
            "invoice_type": self.invoice_type.value,
            "invoice_number": self.invoice_number,
            "invoice_date": self.invoice_date.isoformat() if self.invoice_date else None,
            "reference": self.reference,
            "is_draft": self.is_draft,
            "seller": self.seller.model_dump(),
            "buyer": self.buyer.model_dump(),
            "place_of_supply": self.place_of_supply,
            "is_intra_state": self.is_intra_state,
            "items": [
                {
                    "description": line.item.description,
                    "hsn_code": line.item.hsn_code,
                    "unit": line.item.unit,
                    "rate": format_money(line.item.rate),
                    "discount_percent": str(line.item.discount_percent),
                    "gst_rate": str(line.item.gst_rate),
                    "price_includes_tax": line.item.price_includes_tax,
                    **line.result.to_payload(),
                }
                for line in self.lines
            ],
            "total_items": self.total_items,
            "totals": self.totals.to_payload(),
            "amount_in_words": self.amount_in_words,
            "warnings": list(self.warnings),
        }
