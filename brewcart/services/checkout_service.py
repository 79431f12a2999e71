"""
Checkout workflow - turns the cart (or one quick-buy product) into an order.

Per attempt:
- Summarizing: pick the working item set and compute totals
- Validating: customer fields and a non-empty working set
- Committing: build the order, append it to the log, remember the customer,
  and clear the cart unless the purchase was a quick buy
"""
from __future__ import annotations

import logging
import random
from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any

from pydantic import ValidationError

from brewcart.core.constants import (
    CUSTOMER_FIELDS,
    DEFAULT_DELIVERY_FEE,
    DEFAULT_ORDER_ID_PREFIX,
)
from brewcart.core.exceptions import CheckoutValidationException
from brewcart.core.order_math import Number, calc_items_total, calc_total_price
from brewcart.domain.cart import CartLine
from brewcart.domain.catalog import ProductCatalog
from brewcart.domain.order import Order, generate_order_id
from brewcart.integrations.cart_store import CartStore
from brewcart.repositories.customer_repository import CustomerProfileStore
from brewcart.repositories.order_repository import OrderLog
from brewcart.schemas import CheckoutForm, describe_missing, missing_fields

logger = logging.getLogger(__name__)

EMPTY_ORDER_MESSAGE = "No items in cart. Add items or use Quick Buy from products."


def _local_now() -> datetime:
    return datetime.now().astimezone()


@dataclass(frozen=True)
class CheckoutSummary:
    """Working item set and totals shown on the checkout page."""

    items: tuple[CartLine, ...]
    subtotal: Number
    delivery: Number
    total: Number
    quick_buy_id: str | None = None

    @property
    def is_quick_buy(self) -> bool:
        return self.quick_buy_id is not None

    @property
    def is_empty(self) -> bool:
        return not self.items


@dataclass
class CheckoutResult:
    """Result of a checkout submission."""

    ok: bool
    summary: CheckoutSummary
    order: Order | None = None
    errors: list[str] = field(default_factory=list)

    @property
    def order_id(self) -> str | None:
        return self.order.id if self.order else None

    @property
    def message(self) -> str:
        return " ".join(self.errors)


class CheckoutWorkflow:
    """Single-pass checkout over the cart or a quick-buy product."""

    def __init__(
        self,
        cart: CartStore,
        orders: OrderLog,
        profile: CustomerProfileStore,
        catalog: ProductCatalog,
        delivery_fee: Number = DEFAULT_DELIVERY_FEE,
        order_id_prefix: str = DEFAULT_ORDER_ID_PREFIX,
        clock: Callable[[], datetime] = _local_now,
        rng: Callable[[int, int], int] = random.randint,
    ):
        self.cart = cart
        self.orders = orders
        self.profile = profile
        self.catalog = catalog
        self.delivery_fee = delivery_fee
        self.order_id_prefix = order_id_prefix
        self._clock = clock
        self._rng = rng

    def summarize(self, quick_buy_id: str | None = None) -> CheckoutSummary:
        product = self.catalog.get(quick_buy_id)
        if product is not None:
            items: tuple[CartLine, ...] = (product.as_line(qty=1),)
            mode_id: str | None = product.id
        else:
            if quick_buy_id:
                logger.info("Unknown quick-buy product %r; using cart", quick_buy_id)
            items = tuple(self.cart.totals().items)
            mode_id = None

        subtotal = calc_items_total(items)
        return CheckoutSummary(
            items=items,
            subtotal=subtotal,
            delivery=self.delivery_fee,
            total=calc_total_price(subtotal, self.delivery_fee),
            quick_buy_id=mode_id,
        )

    def _validate(self, fields: Mapping[str, Any], summary: CheckoutSummary) -> CheckoutForm:
        data = {name: str(fields.get(name) or "") for name in CUSTOMER_FIELDS}
        errors: list[str] = []
        form = None
        try:
            form = CheckoutForm(**data)
        except ValidationError as e:
            errors.append(describe_missing(missing_fields(e)))

        if summary.is_empty:
            errors.append(EMPTY_ORDER_MESSAGE)

        if errors or form is None:
            raise CheckoutValidationException(errors)
        return form

    def submit(self, fields: Mapping[str, Any], quick_buy_id: str | None = None) -> CheckoutResult:
        summary = self.summarize(quick_buy_id)

        try:
            form = self._validate(fields, summary)
        except CheckoutValidationException as e:
            logger.info("Checkout rejected: %s", e.message)
            return CheckoutResult(ok=False, summary=summary, errors=e.errors)

        now = self._clock()
        order = Order(
            id=generate_order_id(self.order_id_prefix, now=now, rng=self._rng),
            created_at=now,
            customer=form.to_customer(),
            items=summary.items,
            subtotal=summary.subtotal,
            delivery=summary.delivery,
        )

        self.orders.append(order)
        self.profile.save(order.customer)

        # Quick buy leaves the cart untouched
        if not summary.is_quick_buy:
            self.cart.clear()

        logger.info(
            "Order %s placed: %d line(s), total %s%s",
            order.id,
            len(order.items),
            order.total,
            " (quick buy)" if summary.is_quick_buy else "",
        )
        return CheckoutResult(ok=True, summary=summary, order=order)
