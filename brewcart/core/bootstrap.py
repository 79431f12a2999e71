"""Wire storage, cart, checkout and repositories from configuration."""
from __future__ import annotations

import logging

from brewcart.core.config import Settings, load_settings
from brewcart.core.storage import KeyValueStorage
from brewcart.domain.catalog import ProductCatalog, default_catalog
from brewcart.integrations.cart_store import CartStore
from brewcart.logging_config import setup_logging
from brewcart.repositories.customer_repository import CustomerProfileStore
from brewcart.repositories.order_repository import OrderLog
from brewcart.services.checkout_service import CheckoutWorkflow
from brewcart.services.storefront import Storefront

logger = logging.getLogger(__name__)


def build_storefront(
    settings: Settings | None = None,
    catalog: ProductCatalog | None = None,
    storage: KeyValueStorage | None = None,
) -> Storefront:
    """Create the storefront core for one page load."""
    settings = settings or load_settings()
    setup_logging(settings.log_level)

    storage = storage or KeyValueStorage(
        redis_url=settings.redis_url,
        namespace=settings.storage_namespace,
        version=settings.storage_version,
    )
    if not storage.is_durable:
        logger.warning("Cart and orders will not survive this process (memory storage)")

    catalog = catalog or default_catalog()
    cart = CartStore(storage)
    orders = OrderLog(storage)
    profile = CustomerProfileStore(storage)
    checkout = CheckoutWorkflow(
        cart,
        orders,
        profile,
        catalog,
        delivery_fee=settings.delivery_fee,
        order_id_prefix=settings.order_id_prefix,
    )
    return Storefront(cart=cart, checkout=checkout, orders=orders, profile=profile, catalog=catalog)
