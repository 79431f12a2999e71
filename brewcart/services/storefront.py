"""Command handlers called by the storefront pages."""
from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from brewcart.core.constants import CUSTOMER_FIELDS, MISSING_ORDER_ID
from brewcart.core.exceptions import ProductNotFoundException
from brewcart.core.order_math import Number, to_number
from brewcart.domain.cart import CartLine, CartTotals
from brewcart.domain.catalog import ProductCatalog
from brewcart.domain.order import format_order_brief
from brewcart.integrations.cart_store import CartStore
from brewcart.repositories.customer_repository import CustomerProfileStore
from brewcart.repositories.order_repository import OrderLog
from brewcart.services.checkout_service import CheckoutResult, CheckoutSummary, CheckoutWorkflow

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Confirmation:
    """What the confirmation page shows for an order id."""

    order_id: str
    brief: str
    found: bool


class Storefront:
    """Entry points for UI events; rendering stays with the pages."""

    def __init__(
        self,
        cart: CartStore,
        checkout: CheckoutWorkflow,
        orders: OrderLog,
        profile: CustomerProfileStore,
        catalog: ProductCatalog,
    ):
        self.cart = cart
        self.checkout = checkout
        self.orders = orders
        self.profile = profile
        self.catalog = catalog

    # Cart page and add buttons

    def on_add_requested(self, product_id: str, qty: Any = 1) -> CartLine | None:
        product = self.catalog.get(product_id)
        if product is None:
            raise ProductNotFoundException(product_id)
        return self.cart.add(product.id, product.title, product.price, product.image, qty)

    def on_remove_requested(self, product_id: str) -> bool:
        return self.cart.remove(product_id)

    def on_quantity_changed(self, product_id: str, raw_qty: Any) -> bool:
        """Quantity typed into the cart page; unreadable input counts as zero."""
        try:
            qty = to_number(raw_qty)
        except (TypeError, ValueError):
            qty = 0
        return self.cart.update_qty(product_id, qty)

    def on_quantity_step(self, product_id: str, delta: int) -> bool:
        """Plus/minus buttons on the cart page."""
        current = self.cart.get_qty(product_id)
        if current is None:
            current = 1 if delta < 0 else 0
        return self.cart.update_qty(product_id, max(0, current + delta))

    def cart_count(self) -> Number:
        return self.cart.totals().count

    def cart_view(self) -> CartTotals:
        return self.cart.totals()

    # Checkout and confirmation pages

    def on_checkout_requested(self, quick_buy_id: str | None = None) -> CheckoutSummary:
        return self.checkout.summarize(quick_buy_id)

    def on_submit_requested(
        self, fields: Mapping[str, Any], quick_buy_id: str | None = None
    ) -> CheckoutResult:
        return self.checkout.submit(fields, quick_buy_id)

    def prefill_customer(self) -> dict[str, str]:
        saved = self.profile.load()
        if saved is None:
            return {name: "" for name in CUSTOMER_FIELDS}
        return saved.to_dict()

    def on_confirmation_requested(self, order_id: str | None) -> Confirmation:
        order = self.orders.get(order_id)
        if order is None:
            if order_id:
                logger.info("Confirmation requested for unknown order %s", order_id)
            return Confirmation(order_id=order_id or MISSING_ORDER_ID, brief="", found=False)
        return Confirmation(order_id=order.id, brief=format_order_brief(order), found=True)
