"""Cart line and derived totals."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from brewcart.core.order_math import Number, calc_items_total, calc_quantity, to_number


@dataclass
class CartLine:
    """Single product line in the cart."""

    id: str
    title: str
    price: Number
    image: str
    qty: Number = 0

    @property
    def line_total(self) -> Number:
        return to_number(self.price * self.qty)

    def copy(self) -> CartLine:
        return CartLine(id=self.id, title=self.title, price=self.price, image=self.image, qty=self.qty)

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "title": self.title,
            "price": self.price,
            "qty": self.qty,
            "image": self.image,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any], product_id: str | None = None) -> CartLine:
        return cls(
            id=str(data.get("id") or product_id or ""),
            title=str(data.get("title") or ""),
            price=to_number(data.get("price", 0)),
            image=str(data.get("image") or ""),
            qty=to_number(data.get("qty", 0)),
        )


@dataclass(frozen=True)
class CartTotals:
    """Read-only snapshot of the cart."""

    items: list[CartLine] = field(default_factory=list)
    subtotal: Number = 0
    count: Number = 0

    @classmethod
    def from_lines(cls, lines: list[CartLine]) -> CartTotals:
        items = [line.copy() for line in lines]
        return cls(items=items, subtotal=calc_items_total(items), count=calc_quantity(items))

    @property
    def is_empty(self) -> bool:
        return not self.items
