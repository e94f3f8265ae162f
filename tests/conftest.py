"""Shared test fixtures for the GST invoice engine test suite."""

from datetime import datetime
from decimal import Decimal

import pytest

from gst_invoice.domain.models.invoice import LineItem, Party
from gst_invoice.domain.models.order import Order, OrderItem


@pytest.fixture
def seller_ka() -> Party:
    """Seller registered in Karnataka."""
    return Party(
        state_code="KA",
        state="Karnataka",
        name="Maachis Apparel Pvt Ltd",
        gstin="29AABCU9603R1ZM",
        address="12 MG Road, Bengaluru",
    )


@pytest.fixture
def buyer_ka() -> Party:
    return Party(state_code="KA", state="Karnataka", name="John Doe")


@pytest.fixture
def buyer_mh() -> Party:
    return Party(state_code="MH", state="Maharashtra", name="Jane Smith")


@pytest.fixture
def item_18() -> LineItem:
    """10 units @ ₹500, 18% GST, line total 5900.00."""
    return LineItem(
        description="Premium T-Shirt",
        hsn_code="6109",
        quantity=Decimal("10"),
        rate=Decimal("500"),
        gst_rate=Decimal("18"),
    )


@pytest.fixture
def item_18_b() -> LineItem:
    """12 units @ ₹500, 18% GST, line total 7080.00."""
    return LineItem(
        description="Casual Jeans",
        hsn_code="6203",
        quantity=Decimal("12"),
        rate=Decimal("500"),
        gst_rate=Decimal("18"),
    )


@pytest.fixture
def sample_order() -> Order:
    """A two-line Shopify-style order shipped within Karnataka."""
    return Order(
        order_number="ORD-001",
        order_date=datetime(2025, 11, 8, 10, 0, 0),
        customer_name="John Doe",
        customer_email="customer@example.com",
        shipping_address="123 Main Street, Bangalore, 560001",
        shipping_state_code="ka",
        items=[
            OrderItem(
                name="Premium T-Shirt",
                sku="TS-001",
                hsn_code="6109",
                quantity=Decimal("2"),
                unit_price=Decimal("599.00"),
                gst_rate=Decimal("18"),
            ),
            OrderItem(
                name="Casual Jeans",
                sku="JEANS-001",
                hsn_code="6203",
                quantity=Decimal("1"),
                unit_price=Decimal("1299.00"),
                gst_rate=Decimal("12"),
                discount=Decimal("129.90"),
            ),
        ],
    )
