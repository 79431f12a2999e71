"""Shared pytest fixtures for cart and checkout tests."""
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime

import pytest
import redis

from brewcart.core.storage import KeyValueStorage
from brewcart.domain.catalog import default_catalog
from brewcart.integrations.cart_store import CartStore
from brewcart.repositories.customer_repository import CustomerProfileStore
from brewcart.repositories.order_repository import OrderLog
from brewcart.services.checkout_service import CheckoutWorkflow
from brewcart.services.storefront import Storefront

FIXED_NOW = datetime(2025, 3, 7, 9, 5, 42)


@dataclass
class FakeRedisClient:
    data: dict[str, str] = field(default_factory=dict)
    set_calls: list[str] = field(default_factory=list)
    fail_writes: bool = False

    def ping(self) -> bool:
        return True

    def get(self, key: str):
        return self.data.get(key)

    def set(self, key: str, value: str) -> bool:
        if self.fail_writes:
            raise redis.ConnectionError("write rejected")
        self.data[key] = value
        self.set_calls.append(key)
        return True

    def delete(self, key: str) -> int:
        if self.fail_writes:
            raise redis.ConnectionError("write rejected")
        existed = 1 if key in self.data else 0
        self.data.pop(key, None)
        return existed


@pytest.fixture
def fake_redis(monkeypatch):
    import brewcart.core.storage as storage_module

    client = FakeRedisClient()
    monkeypatch.setattr(storage_module.redis, "from_url", lambda *args, **kwargs: client)
    return client


@pytest.fixture
def storage(fake_redis) -> KeyValueStorage:
    return KeyValueStorage(redis_url="redis://fake")


@pytest.fixture
def cart(storage) -> CartStore:
    return CartStore(storage)


@pytest.fixture
def orders(storage) -> OrderLog:
    return OrderLog(storage)


@pytest.fixture
def profile(storage) -> CustomerProfileStore:
    return CustomerProfileStore(storage)


@pytest.fixture
def catalog():
    return default_catalog()


@pytest.fixture
def suffixes():
    """Random suffixes handed out in order to generated order ids."""
    return [4821, 1307, 9999, 1000]


@pytest.fixture
def checkout(cart, orders, profile, catalog, suffixes) -> CheckoutWorkflow:
    pending = list(suffixes)
    return CheckoutWorkflow(
        cart,
        orders,
        profile,
        catalog,
        delivery_fee=30,
        order_id_prefix="BH",
        clock=lambda: FIXED_NOW,
        rng=lambda low, high: pending.pop(0),
    )


@pytest.fixture
def storefront(cart, checkout, orders, profile, catalog) -> Storefront:
    return Storefront(cart=cart, checkout=checkout, orders=orders, profile=profile, catalog=catalog)


@pytest.fixture
def customer_fields() -> dict[str, str]:
    return {
        "fullname": "Asha Rao",
        "phone": "+91 98450 12345",
        "email": "asha@example.com",
        "address": "12 MG Road, Bengaluru",
    }


@pytest.fixture
def fixed_now() -> datetime:
    return FIXED_NOW
