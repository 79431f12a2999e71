"""Domain types for the storefront core."""
from brewcart.domain.cart import CartLine, CartTotals
from brewcart.domain.catalog import Product, ProductCatalog
from brewcart.domain.order import CustomerDetails, Order, OrderLine

__all__ = [
    "CartLine",
    "CartTotals",
    "CustomerDetails",
    "Order",
    "OrderLine",
    "Product",
    "ProductCatalog",
]
