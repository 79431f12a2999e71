"""Shared helpers for line totals, quantities and order totals."""
from __future__ import annotations

from collections.abc import Iterable
from typing import Any

Number = int | float


def to_number(value: Any) -> Number:
    """Coerce ``value`` to a number, collapsing integral floats to ``int``.

    Raises ValueError or TypeError for input that is not numeric.
    """
    if isinstance(value, bool):
        return int(value)
    if isinstance(value, int):
        return value
    number = float(str(value).strip()) if isinstance(value, str) else float(value)
    if number != number or number in (float("inf"), float("-inf")):
        raise ValueError(f"Not a finite number: {value!r}")
    return int(number) if number.is_integer() else number


def calc_line_total(price: Number, qty: Number) -> Number:
    return to_number(price * qty)


def calc_items_total(items: Iterable[Any]) -> Number:
    total: Number = 0
    for item in items:
        total += calc_line_total(item.price, item.qty)
    return to_number(total)


def calc_quantity(items: Iterable[Any]) -> Number:
    return to_number(sum((item.qty for item in items), 0))


def calc_total_price(items_total: Number, delivery_fee: Number) -> Number:
    return to_number(items_total + delivery_fee)
