"""Tests for order records and order ids."""
from __future__ import annotations

import re
from dataclasses import FrozenInstanceError
from datetime import datetime

import pytest

from brewcart.domain.cart import CartLine
from brewcart.domain.order import CustomerDetails, Order, OrderLine, format_order_brief, generate_order_id

CUSTOMER = CustomerDetails("Asha Rao", "+91 98450 12345", "asha@example.com", "12 MG Road")


def test_order_id_format_is_zero_padded_local_time() -> None:
    order_id = generate_order_id("BH", now=datetime(2025, 1, 2, 3, 4), rng=lambda low, high: 1000)

    assert order_id == "BH-20250102-0304-1000"


def test_order_id_random_suffix_range() -> None:
    bounds = []

    def rng(low: int, high: int) -> int:
        bounds.append((low, high))
        return high

    assert generate_order_id(now=datetime(2025, 12, 31, 23, 59), rng=rng) == "BH-20251231-2359-9999"
    assert bounds == [(1000, 9999)]


def test_default_order_id_matches_pattern() -> None:
    for _ in range(50):
        order_id = generate_order_id()
        assert re.fullmatch(r"BH-\d{8}-\d{4}-[1-9]\d{3}", order_id)


def test_total_is_subtotal_plus_delivery() -> None:
    order = Order(
        id="BH-20250307-0905-4821",
        created_at=datetime(2025, 3, 7, 9, 5),
        customer=CUSTOMER,
        items=(CartLine("cappuccino", "Cappuccino", 220, "img", 2),),
        subtotal=440,
        delivery=30,
    )

    assert order.total == 470


def test_order_copies_items_at_creation() -> None:
    line = CartLine("brownie", "Retro Brownie", 140, "img", 1)
    order = Order(
        id="BH-20250307-0905-1111",
        created_at=datetime(2025, 3, 7, 9, 5),
        customer=CUSTOMER,
        items=(line,),
        subtotal=140,
        delivery=30,
    )

    line.qty = 9

    assert order.items[0].qty == 1
    with pytest.raises(AttributeError):
        order.subtotal = 0  # type: ignore[misc]


def test_order_lines_are_frozen() -> None:
    order = Order(
        id="BH-20250307-0905-4821",
        created_at=datetime(2025, 3, 7, 9, 5),
        customer=CUSTOMER,
        items=(
            CartLine("cappuccino", "Cappuccino", 220, "img", 2),
            CartLine("brownie", "Retro Brownie", 140, "img", 1),
        ),
        subtotal=580,
        delivery=30,
    )

    assert all(isinstance(line, OrderLine) for line in order.items)
    with pytest.raises(FrozenInstanceError):
        order.items[0].qty = 99  # type: ignore[misc]

    assert order.items[0].qty == 2
    assert sum(line.line_total for line in order.items) == order.subtotal
    assert order.total == 610


def test_serialized_order_uses_storage_field_names() -> None:
    order = Order(
        id="BH-20250307-0905-4821",
        created_at=datetime(2025, 3, 7, 9, 5, 42),
        customer=CUSTOMER,
        items=(CartLine("cappuccino", "Cappuccino", 220, "img", 1),),
        subtotal=220,
        delivery=30,
    )

    data = order.to_dict()

    assert data["createdAt"] == "2025-03-07T09:05:42"
    assert data["total"] == 250
    assert data["customer"]["fullname"] == "Asha Rao"
    assert Order.from_dict(data) == order


def test_brief_lists_items_and_total() -> None:
    order = Order(
        id="BH-20250307-0905-4821",
        created_at=datetime(2025, 3, 7, 9, 5, 42),
        customer=CUSTOMER,
        items=(
            CartLine("cappuccino", "Cappuccino", 220, "img", 2),
            CartLine("brownie", "Retro Brownie", 140, "img", 1),
        ),
        subtotal=580,
        delivery=30,
    )

    assert format_order_brief(order) == (
        "Order: Cappuccino x 2, Retro Brownie x 1 • Total: ₹ 610 • Placed 07/03/2025, 09:05:42"
    )
