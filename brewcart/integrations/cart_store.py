"""Persisted cart keyed by product id, with change observers."""
from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any

from brewcart.core.constants import CART_ENTRY
from brewcart.core.order_math import Number, to_number
from brewcart.core.storage import KeyValueStorage
from brewcart.domain.cart import CartLine, CartTotals

logger = logging.getLogger(__name__)

CartObserver = Callable[[Number], None]


class CartStore:
    """Sole reader and writer of the persisted cart.

    Every call re-reads storage so that pages loaded independently see each
    other's writes. Concurrent writers are last-write-wins on the whole cart.
    """

    def __init__(self, storage: KeyValueStorage):
        self._storage = storage
        self._key = storage.key(CART_ENTRY)
        self._observers: list[CartObserver] = []

    @property
    def storage_key(self) -> str:
        return self._key

    def subscribe(self, observer: CartObserver) -> Callable[[], None]:
        """Register a "cart changed" observer; returns an unsubscribe callable."""
        self._observers.append(observer)

        def _unsubscribe() -> None:
            if observer in self._observers:
                self._observers.remove(observer)

        return _unsubscribe

    def load(self) -> dict[str, CartLine]:
        payload = self._storage.get_json(self._key, default=None)
        if payload is None:
            return {}
        if not isinstance(payload, dict):
            logger.warning("Stored cart is not a mapping (%s); treating as empty", type(payload).__name__)
            return {}

        cart: dict[str, CartLine] = {}
        for product_id, raw in payload.items():
            if not isinstance(raw, dict):
                logger.warning("Skipping malformed cart line %r", product_id)
                continue
            try:
                line = CartLine.from_dict(raw, product_id=product_id)
            except (TypeError, ValueError) as exc:
                logger.warning("Skipping malformed cart line %r: %s", product_id, exc)
                continue
            if line.qty < 1:
                continue
            line.id = str(product_id)
            cart[line.id] = line
        return cart

    def _save(self, cart: dict[str, CartLine]) -> None:
        if not cart:
            self._storage.delete(self._key)
        else:
            self._storage.set_json(self._key, {pid: line.to_dict() for pid, line in cart.items()})
        self._notify(cart)

    def _notify(self, cart: dict[str, CartLine]) -> None:
        count = to_number(sum((line.qty for line in cart.values()), 0))
        for observer in list(self._observers):
            try:
                observer(count)
            except Exception:
                logger.exception("Cart observer %r failed", observer)

    def add(
        self,
        product_id: str,
        title: str,
        price: Any,
        image: str,
        qty: Any = 1,
    ) -> CartLine | None:
        """Increment the line for ``product_id`` by ``qty``, creating it if needed.

        Returns the updated line, or None if the increment left it below one.
        """
        price = to_number(price)
        qty = to_number(qty)
        cart = self.load()

        line = cart.get(product_id)
        if line is None:
            line = CartLine(id=product_id, title=title, price=price, image=image, qty=0)
            cart[product_id] = line
        line.qty = to_number(line.qty + qty)

        if line.qty < 1:
            logger.info("Cart line %s dropped to %s; removing", product_id, line.qty)
            del cart[product_id]
            self._save(cart)
            return None

        self._save(cart)
        return line.copy()

    def remove(self, product_id: str) -> bool:
        cart = self.load()
        if product_id not in cart:
            return False
        del cart[product_id]
        self._save(cart)
        return True

    def update_qty(self, product_id: str, qty: Any) -> bool:
        """Set an absolute quantity; anything below one removes the line."""
        cart = self.load()
        line = cart.get(product_id)
        if line is None:
            return False

        line.qty = max(0, to_number(qty))
        if line.qty < 1:
            del cart[product_id]
        self._save(cart)
        return True

    def clear(self) -> None:
        self._storage.delete(self._key)
        self._notify({})

    def totals(self) -> CartTotals:
        return CartTotals.from_lines(list(self.load().values()))

    def get_qty(self, product_id: str) -> Number | None:
        line = self.load().get(product_id)
        return line.qty if line else None
