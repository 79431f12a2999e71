"""Custom exceptions for Brew Cart."""
from __future__ import annotations


class BrewCartException(Exception):
    """Base exception for all Brew Cart errors."""

    def __init__(self, message: str, *args: object) -> None:
        super().__init__(message, *args)
        self.message = message


class ValidationException(BrewCartException):
    """Input validation errors."""

    pass


class CheckoutValidationException(ValidationException):
    """Checkout submission rejected before anything was written."""

    def __init__(self, errors: list[str]) -> None:
        super().__init__(" ".join(errors))
        self.errors = list(errors)


class ProductNotFoundException(BrewCartException):
    """Product not found in catalog."""

    def __init__(self, product_id: str) -> None:
        super().__init__(f"Product with ID {product_id} not found")
        self.product_id = product_id


class OrderNotFoundException(BrewCartException):
    """Order not found in order log."""

    def __init__(self, order_id: str) -> None:
        super().__init__(f"Order with ID {order_id} not found")
        self.order_id = order_id


class ConfigurationException(BrewCartException):
    """Configuration errors."""

    pass
