"""CartItem: a product copy paired with a quantity.

CartItem behaves as a value: ``copy()`` duplicates both the quantity and
the embedded product, so changing one copy never shows through another.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from shopcart.domain.exceptions import (
    InsufficientStockError,
    InvalidQuantityError,
    ValidationError,
)
from shopcart.domain.model.product import Product
from shopcart.domain.model.value_objects import Money

logger = logging.getLogger(__name__)


def require_whole_quantity(value: object) -> None:
    """Reject anything that is not a plain int (bools and floats included)."""
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidQuantityError(f"Quantity must be a whole number, got {value!r}")


@dataclass
class CartItem:
    """Invariants:
    - ``quantity`` is never negative
    - ``quantity`` only changes to values within the owned product's stock
    """

    product: Product
    quantity: int = 1

    def __post_init__(self) -> None:
        require_whole_quantity(self.quantity)
        if self.quantity < 0:
            raise InvalidQuantityError(
                f"Quantity cannot be negative, got {self.quantity!r}"
            )

    @property
    def product_id(self) -> str:
        return self.product.id

    @property
    def subtotal(self) -> Money:
        return self.product.price * self.quantity

    def update_quantity(self, new_quantity: int) -> bool:
        """Set the quantity outright.

        Returns False and leaves the quantity unchanged when the new value
        is negative or exceeds the product's stock.
        """
        try:
            require_whole_quantity(new_quantity)
            if new_quantity < 0:
                raise InvalidQuantityError("Quantity cannot be negative")
            self._check_stock(new_quantity)
        except ValidationError as exc:
            logger.warning("%s", exc)
            return False
        self.quantity = new_quantity
        return True

    def increase_quantity(self, amount: int) -> bool:
        """Add ``amount`` units, respecting the product's stock."""
        try:
            require_whole_quantity(amount)
            if amount <= 0:
                raise InvalidQuantityError("Increase amount must be positive")
            self._check_stock(self.quantity + amount)
        except ValidationError as exc:
            logger.warning("%s", exc)
            return False
        self.quantity += amount
        return True

    def copy(self) -> CartItem:
        return CartItem(product=self.product.copy(), quantity=self.quantity)

    def _check_stock(self, requested: int) -> None:
        if requested > self.product.stock_quantity:
            raise InsufficientStockError(
                f"Not enough stock for {self.product.name}. "
                f"Requested: {requested}, available: {self.product.stock_quantity}"
            )

    def __str__(self) -> str:
        return f"{self.product.name} x{self.quantity} = {self.subtotal}"
