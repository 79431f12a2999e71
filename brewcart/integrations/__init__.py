"""Integrations package - cart persistence over shared storage."""

from brewcart.integrations.cart_store import CartStore

__all__ = ["CartStore"]
