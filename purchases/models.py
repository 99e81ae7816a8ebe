"""Data models for recorded purchases."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date

from .category import Category


@dataclass(frozen=True)
class Product:
    """A purchased product. ``name`` is stored in canonical form."""

    name: str
    price: float
    category: Category


@dataclass(frozen=True)
class Purchase:
    """A product bought in some quantity on a given day."""

    product: Product
    quantity: int
    date: date

    def value(self) -> float:
        """Total spend for this purchase (price * quantity)."""
        return float(self.product.price) * float(self.quantity)


def make_product(name: str, price: float, category: Category | str) -> Product:
    """Build a Product, trimming and lower-casing the name.

    The price is kept as given; sign and finiteness are not checked.
    Category text is parsed with :meth:`Category.parse`.
    """
    if not isinstance(category, Category):
        category = Category.parse(category)
    return Product(name=name.strip().lower(), price=price, category=category)


def make_purchase(product: Product, quantity: int, purchase_date: date) -> Purchase:
    return Purchase(product=product, quantity=quantity, date=purchase_date)
