# gst_invoice/domain/services/order_mapper.py
"""
Order -> invoice conversion.

Orders store an absolute per-line discount and may lack a GST rate
(products imported without a tax code). Both are resolved here, at the
boundary, so the engine only ever sees canonical LineItems:

  - discount amount  -> discount_percent = discount / gross × 100
  - missing gst_rate -> the caller's explicit ``default_gst_rate``
                        (usually ``settings.DEFAULT_GST_RATE``), or an error
"""

from __future__ import annotations

import logging
from decimal import Decimal
from typing import Optional

from gst_invoice.config.settings import settings
from gst_invoice.domain.errors import InvalidLineItemError
from gst_invoice.domain.models.invoice import Invoice, LineItem, Party
from gst_invoice.domain.models.order import Order, OrderItem
from gst_invoice.domain.money import HUNDRED, ZERO, to_decimal
from gst_invoice.domain.services.invoice_builder import build_invoice
from gst_invoice.domain.services.state_codes import normalize_state_code, state_name
from gst_invoice.domain.services.validation import validate_line_item

logger = logging.getLogger("order_mapper")


def order_item_to_line_item(
    item: OrderItem,
    default_gst_rate: Optional[Decimal] = None,
    unit: Optional[str] = None,
    index: Optional[int] = None,
) -> LineItem:
    gst_rate = item.gst_rate
    if gst_rate is None:
        if default_gst_rate is None:
            raise InvalidLineItemError(
                f"No GST rate for '{item.name}' and no default rate configured",
                field="gst_rate",
                index=index,
            )
        logger.info("Using default GST rate %s%% for '%s'", default_gst_rate, item.name)
        gst_rate = to_decimal(default_gst_rate, field="gst_rate")

    if item.discount < ZERO:
        raise InvalidLineItemError(
            f"discount cannot be negative: {item.discount}", field="discount", index=index
        )

    gross = item.quantity * item.unit_price
    discount_percent = ZERO
    if item.discount > ZERO:
        if gross <= ZERO:
            raise InvalidLineItemError(
                f"discount {item.discount} on a zero-value line", field="discount", index=index
            )
        if item.discount > gross:
            raise InvalidLineItemError(
                f"discount {item.discount} exceeds line amount {gross}",
                field="discount",
                index=index,
            )
        discount_percent = item.discount / gross * HUNDRED

    line = LineItem(
        description=item.name,
        hsn_code=(item.hsn_code or "").strip().upper() or None,
        quantity=item.quantity,
        unit=unit or settings.DEFAULT_UNIT,
        rate=item.unit_price,
        discount_percent=discount_percent,
        gst_rate=gst_rate,
        price_includes_tax=False,
    )
    return validate_line_item(line, index=index)


def buyer_from_order(order: Order) -> Party:
    code = normalize_state_code(order.shipping_state_code)
    return Party(
        state_code=code or None,
        state=order.shipping_state or (state_name(code) if code else None),
        name=order.customer_name,
        address=order.shipping_address or order.billing_address,
    )


def build_invoice_from_order(
    order: Order,
    seller: Party,
    default_gst_rate: Optional[Decimal] = None,
    document_discount=None,
    unit: Optional[str] = None,
) -> Invoice:
    """Draft invoice for an imported order.

    *document_discount* defaults to the order's own ``discount_total``.
    """
    items = [
        order_item_to_line_item(item, default_gst_rate, unit=unit, index=index)
        for index, item in enumerate(order.items)
    ]
    if document_discount is None:
        document_discount = order.discount_total

    return build_invoice(
        seller,
        buyer_from_order(order),
        items,
        document_discount,
        invoice_date=order.order_date.date() if order.order_date else None,
        reference=order.order_number,
    )
