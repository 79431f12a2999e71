"""Repositories over the shared key-value storage."""
from brewcart.repositories.customer_repository import CustomerProfileStore
from brewcart.repositories.order_repository import OrderLog

__all__ = ["CustomerProfileStore", "OrderLog"]
