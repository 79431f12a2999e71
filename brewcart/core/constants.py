"""Storefront-wide constants.

Centralizes storage keys and checkout numbers so pages and tests agree on them.
"""

# ============== STORAGE ==============
DEFAULT_STORAGE_NAMESPACE = "brewhome"
DEFAULT_STORAGE_VERSION = "v1"

CART_ENTRY = "cart"
ORDERS_ENTRY = "orders"
# Customer profile is not versioned
CUSTOMER_ENTRY = "customer"

# ============== CHECKOUT ==============
DEFAULT_DELIVERY_FEE = 30
DEFAULT_ORDER_ID_PREFIX = "BH"
ORDER_ID_RANDOM_MIN = 1000
ORDER_ID_RANDOM_MAX = 9999

CUSTOMER_FIELDS = ("fullname", "phone", "email", "address")

# ============== DISPLAY ==============
CURRENCY_SYMBOL = "₹"
MISSING_ORDER_ID = "—"
