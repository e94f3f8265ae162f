"""
Order domain models, as handed over by the order store (CSV import or
manual entry). Field names follow the store, not the invoice engine;
order_mapper converts them into LineItem.
"""

from datetime import datetime
from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, Field

from gst_invoice.config.settings import settings
from gst_invoice.domain.money import ZERO


class OrderItem(BaseModel):
    """One order line. ``discount`` is an absolute amount, not a percent."""

    name: str
    sku: Optional[str] = None
    hsn_code: Optional[str] = None
    quantity: Decimal = Decimal("1")
    unit_price: Decimal = ZERO
    gst_rate: Optional[Decimal] = None
    discount: Decimal = ZERO


class Order(BaseModel):
    """An imported order with its line items."""

    order_number: str
    order_date: Optional[datetime] = None
    customer_name: Optional[str] = None
    customer_email: Optional[str] = None
    customer_phone: Optional[str] = None
    billing_address: Optional[str] = None
    shipping_address: Optional[str] = None
    shipping_state_code: Optional[str] = None
    shipping_state: Optional[str] = None
    currency: str = Field(default_factory=lambda: settings.CURRENCY)
    discount_total: Decimal = ZERO
    items: list[OrderItem] = Field(default_factory=list)
