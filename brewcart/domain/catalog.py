"""Product reference data supplied to the cart and checkout."""
from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass

from brewcart.core.exceptions import ProductNotFoundException
from brewcart.core.order_math import Number
from brewcart.domain.cart import CartLine


@dataclass(frozen=True)
class Product:
    id: str
    title: str
    price: Number
    image: str

    def as_line(self, qty: Number = 1) -> CartLine:
        return CartLine(id=self.id, title=self.title, price=self.price, image=self.image, qty=qty)


class ProductCatalog:
    """Typed lookup of products by id."""

    def __init__(self, products: Iterable[Product] = ()):
        self._products: dict[str, Product] = {p.id: p for p in products}

    def get(self, product_id: str | None) -> Product | None:
        if not product_id:
            return None
        return self._products.get(product_id)

    def require(self, product_id: str) -> Product:
        product = self.get(product_id)
        if product is None:
            raise ProductNotFoundException(product_id)
        return product

    def __contains__(self, product_id: object) -> bool:
        return product_id in self._products

    def __iter__(self) -> Iterator[Product]:
        return iter(self._products.values())

    def __len__(self) -> int:
        return len(self._products)


_UNSPLASH = "https://images.unsplash.com/photo-{}?q=80&w=900&auto=format&fit=crop&ixlib=rb-4.0.3&s={}"

DEFAULT_PRODUCTS = (
    Product("cappuccino", "Cappuccino", 220, _UNSPLASH.format("1509042239860-f550ce710b93", "3d8f0a8b7a7f")),
    Product("coldbrew", "Cold Brew", 180, _UNSPLASH.format("1508057198894-247b23fe5ade", "5a2f1c1d6c07")),
    Product("instant", "Retro Instant", 120, _UNSPLASH.format("1544025162-d76694265947", "79929d7b8a3a")),
    Product(
        "cheesecake",
        "Classic Cheesecake",
        260,
        _UNSPLASH.format("1541167760496-1628856ab772", "6d4a7b058d0f"),
    ),
    Product("brownie", "Retro Brownie", 140, _UNSPLASH.format("1527515637463-2b1b6b2f2f9e", "9a1c40e3b8a1")),
)


def default_catalog() -> ProductCatalog:
    return ProductCatalog(DEFAULT_PRODUCTS)
