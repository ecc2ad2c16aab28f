"""Product catalog entry.

A cart never holds the caller's Product object; it keeps its own copy, so
the stock decrement done at checkout stays local to that copy.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from decimal import Decimal, InvalidOperation
from enum import Enum

from shopcart.domain.exceptions import ValidationError
from shopcart.domain.model.value_objects import Money


class Category(Enum):
    ELECTRONICS = "electronics"
    CLOTHING = "clothing"
    FOOD = "food"
    BOOKS = "books"


@dataclass
class Product:
    """A product in the catalog.

    Use ``Product.create()`` when building products from raw input: it
    clamps negative prices to zero.  ``stock_quantity`` is the only
    field that ever changes, and only on a cart's own copy.
    """

    id: str
    name: str
    price: Money
    category: Category
    description: str = ""
    stock_quantity: int = 0

    def __post_init__(self) -> None:
        if not self.id:
            raise ValidationError("Product id is required")
        if not isinstance(self.stock_quantity, int):
            raise ValidationError(
                f"Stock quantity must be an integer, got {type(self.stock_quantity).__name__}"
            )
        if self.stock_quantity < 0:
            raise ValidationError(
                f"Stock quantity cannot be negative, got {self.stock_quantity}"
            )

    @staticmethod
    def create(
        id: str,
        name: str,
        price: str | float | int | Decimal,
        category: Category | str,
        description: str = "",
        stock_quantity: int = 0,
    ) -> Product:
        """Build a product, clamping a negative price to zero."""
        try:
            amount = Decimal(str(price))
        except (InvalidOperation, ValueError) as exc:
            raise ValidationError(f"Invalid price: {price!r}") from exc
        if not amount.is_finite():
            raise ValidationError(f"Invalid price: {price!r}")
        if amount < 0:
            amount = Decimal("0")
        try:
            category = Category(category)
        except ValueError as exc:
            raise ValidationError(f"Unknown category: {category!r}") from exc
        return Product(
            id=id,
            name=name,
            price=Money(amount),
            category=category,
            description=description,
            stock_quantity=stock_quantity,
        )

    @property
    def display_price(self) -> str:
        return str(self.price)

    def copy(self) -> Product:
        return replace(self)

    def deduct_stock(self, quantity: int) -> None:
        """Remove purchased units from stock, never going below zero."""
        self.stock_quantity = max(0, self.stock_quantity - quantity)
