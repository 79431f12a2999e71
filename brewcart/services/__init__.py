"""Business services orchestrating cart and checkout logic."""

from .checkout_service import CheckoutResult, CheckoutSummary, CheckoutWorkflow
from .storefront import Confirmation, Storefront

__all__ = [
    "CheckoutResult",
    "CheckoutSummary",
    "CheckoutWorkflow",
    "Confirmation",
    "Storefront",
]
