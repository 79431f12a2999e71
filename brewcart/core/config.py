"""Environment-driven configuration for the storefront core."""
from __future__ import annotations

import os
from dataclasses import dataclass

from dotenv import load_dotenv

from brewcart.core.constants import (
    DEFAULT_DELIVERY_FEE,
    DEFAULT_ORDER_ID_PREFIX,
    DEFAULT_STORAGE_NAMESPACE,
    DEFAULT_STORAGE_VERSION,
)
from brewcart.core.exceptions import ConfigurationException


@dataclass(slots=True)
class Settings:
    redis_url: str | None
    storage_namespace: str = DEFAULT_STORAGE_NAMESPACE
    storage_version: str = DEFAULT_STORAGE_VERSION
    delivery_fee: int = DEFAULT_DELIVERY_FEE
    order_id_prefix: str = DEFAULT_ORDER_ID_PREFIX
    log_level: str = "INFO"


def _parse_delivery_fee(raw: str | None) -> int:
    if raw is None or not raw.strip():
        return DEFAULT_DELIVERY_FEE
    try:
        fee = int(raw.strip())
    except ValueError as e:
        raise ConfigurationException(f"DELIVERY_FEE must be an integer, got {raw!r}") from e
    if fee < 0:
        raise ConfigurationException(f"DELIVERY_FEE must not be negative, got {fee}")
    return fee


def load_settings() -> Settings:
    """Load environment variables once and expose typed settings."""
    load_dotenv()

    return Settings(
        redis_url=os.getenv("REDIS_URL") or None,
        storage_namespace=os.getenv("STORAGE_NAMESPACE", DEFAULT_STORAGE_NAMESPACE),
        storage_version=os.getenv("STORAGE_VERSION", DEFAULT_STORAGE_VERSION),
        delivery_fee=_parse_delivery_fee(os.getenv("DELIVERY_FEE")),
        order_id_prefix=os.getenv("ORDER_ID_PREFIX", DEFAULT_ORDER_ID_PREFIX),
        log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
    )
