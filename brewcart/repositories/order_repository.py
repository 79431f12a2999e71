"""Append-only order log."""
from __future__ import annotations

import logging

from brewcart.core.constants import ORDERS_ENTRY
from brewcart.core.exceptions import OrderNotFoundException
from brewcart.domain.order import Order
from brewcart.repositories.base import BaseRepository

logger = logging.getLogger(__name__)


class OrderLog(BaseRepository):
    """Orders in submission order. Never truncated or reordered."""

    entry = ORDERS_ENTRY

    def _raw_orders(self) -> list:
        raw = self._read(default=[])
        if not isinstance(raw, list):
            logger.warning("Stored order log is not a list; treating as empty")
            return []
        return raw

    def append(self, order: Order) -> bool:
        """Append ``order``; returns False if the write is not durable."""
        raw = self._raw_orders()
        raw.append(order.to_dict())
        durable = self._write(raw)
        logger.info("Order %s appended to log (%d orders)", order.id, len(raw))
        return durable

    def list_orders(self) -> list[Order]:
        orders = []
        for raw in self._raw_orders():
            try:
                orders.append(Order.from_dict(raw))
            except (KeyError, TypeError, ValueError, AttributeError) as exc:
                logger.warning("Skipping unreadable order record: %s", exc)
        return orders

    def get(self, order_id: str | None) -> Order | None:
        if not order_id:
            return None
        for order in self.list_orders():
            if order.id == order_id:
                return order
        return None

    def require(self, order_id: str) -> Order:
        order = self.get(order_id)
        if order is None:
            raise OrderNotFoundException(order_id)
        return order

    def __len__(self) -> int:
        return len(self._raw_orders())
