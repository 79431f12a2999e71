"""Order domain types and order-id generation."""
from __future__ import annotations

import random
from collections.abc import Callable
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any

from brewcart.core.constants import (
    CURRENCY_SYMBOL,
    DEFAULT_ORDER_ID_PREFIX,
    ORDER_ID_RANDOM_MAX,
    ORDER_ID_RANDOM_MIN,
)
from brewcart.core.order_math import Number, to_number
from brewcart.domain.cart import CartLine


@dataclass(frozen=True)
class CustomerDetails:
    fullname: str
    phone: str
    email: str
    address: str

    def to_dict(self) -> dict[str, str]:
        return {
            "fullname": self.fullname,
            "phone": self.phone,
            "email": self.email,
            "address": self.address,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> CustomerDetails:
        return cls(
            fullname=str(data.get("fullname") or ""),
            phone=str(data.get("phone") or ""),
            email=str(data.get("email") or ""),
            address=str(data.get("address") or ""),
        )


@dataclass(frozen=True)
class OrderLine:
    """Immutable copy of a cart line as it was ordered."""

    id: str
    title: str
    price: Number
    image: str
    qty: Number

    @property
    def line_total(self) -> Number:
        return to_number(self.price * self.qty)

    @classmethod
    def from_line(cls, line: CartLine | OrderLine) -> OrderLine:
        return cls(id=line.id, title=line.title, price=line.price, image=line.image, qty=line.qty)

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "title": self.title,
            "price": self.price,
            "qty": self.qty,
            "image": self.image,
        }


@dataclass(frozen=True)
class Order:
    """Completed checkout. Items are copies taken at submission time."""

    id: str
    created_at: datetime
    customer: CustomerDetails
    items: tuple[OrderLine, ...]
    subtotal: Number
    delivery: Number
    total: Number = field(init=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "items", tuple(OrderLine.from_line(line) for line in self.items))
        object.__setattr__(self, "total", to_number(self.subtotal + self.delivery))

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "createdAt": self.created_at.isoformat(),
            "customer": self.customer.to_dict(),
            "items": [line.to_dict() for line in self.items],
            "subtotal": self.subtotal,
            "delivery": self.delivery,
            "total": self.total,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Order:
        return cls(
            id=str(data["id"]),
            created_at=datetime.fromisoformat(str(data["createdAt"]).replace("Z", "+00:00")),
            customer=CustomerDetails.from_dict(data.get("customer") or {}),
            items=tuple(CartLine.from_dict(raw) for raw in data.get("items") or []),
            subtotal=to_number(data.get("subtotal", 0)),
            delivery=to_number(data.get("delivery", 0)),
        )


def generate_order_id(
    prefix: str = DEFAULT_ORDER_ID_PREFIX,
    now: datetime | None = None,
    rng: Callable[[int, int], int] = random.randint,
) -> str:
    """Human-friendly order id: ``PREFIX-YYYYMMDD-HHMM-RRRR`` in local time.

    The random suffix is the only source of uniqueness; two orders placed in
    the same minute can collide.
    """
    now = now or datetime.now()
    suffix = rng(ORDER_ID_RANDOM_MIN, ORDER_ID_RANDOM_MAX)
    return f"{prefix}-{now:%Y%m%d}-{now:%H%M}-{suffix}"


def format_order_brief(order: Order) -> str:
    items = ", ".join(f"{line.title} x {line.qty}" for line in order.items)
    placed = order.created_at.strftime("%d/%m/%Y, %H:%M:%S")
    return f"Order: {items} • Total: {CURRENCY_SYMBOL} {order.total} • Placed {placed}"
