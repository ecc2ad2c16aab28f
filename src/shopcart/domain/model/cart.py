"""ShoppingCart: the mutable aggregate customers fill before checkout.

A cart is a shared entity: every handle to the same cart sees the same
items.  The items it holds are private copies (see ``CartItem``).
"""

from __future__ import annotations

import logging

from shopcart.domain.exceptions import (
    InsufficientStockError,
    InvalidQuantityError,
    ValidationError,
)
from shopcart.domain.model.address import Address
from shopcart.domain.model.cart_item import CartItem, require_whole_quantity
from shopcart.domain.model.discount import DiscountPolicy
from shopcart.domain.model.order import Order
from shopcart.domain.model.product import Product
from shopcart.domain.model.value_objects import Money

logger = logging.getLogger(__name__)


class ShoppingCart:
    """Ordered collection of CartItems, at most one per product id.

    Mutators never raise for quantity or stock problems: they log the
    reason, return False and leave the cart as it was.  Operations on a
    product id that is not in the cart are silent no-ops.
    """

    def __init__(self, discount: DiscountPolicy | None = None) -> None:
        self._items: list[CartItem] = []
        self.discount = discount

    # --- Mutations ------------------------------------------------------------

    def add_item(self, product: Product, quantity: int = 1) -> bool:
        """Add ``quantity`` units of ``product``.

        The stock check uses the stock of the product passed in.  When the
        product is already in the cart the existing line is increased
        instead, bounded by the stock of the copy the cart holds.
        """
        try:
            require_whole_quantity(quantity)
            if quantity <= 0:
                raise InvalidQuantityError("Quantity must be > 0")
            if quantity > product.stock_quantity:
                raise InsufficientStockError(
                    f"Not enough stock for {product.name}. "
                    f"Requested: {quantity}, available: {product.stock_quantity}"
                )
        except ValidationError as exc:
            logger.warning("%s", exc)
            return False

        existing = self.get_item(product.id)
        if existing is not None:
            return existing.increase_quantity(quantity)

        self._items.append(CartItem(product=product.copy(), quantity=quantity))
        return True

    def remove_item(self, product_id: str) -> None:
        self._items = [item for item in self._items if item.product_id != product_id]

    def update_item_quantity(self, product_id: str, quantity: int) -> bool:
        """Set a line's quantity; zero or less removes the line."""
        item = self.get_item(product_id)
        if item is None:
            logger.debug("Product '%s' is not in the cart, nothing to update", product_id)
            return False
        try:
            require_whole_quantity(quantity)
        except ValidationError as exc:
            logger.warning("%s", exc)
            return False
        if quantity <= 0:
            self.remove_item(product_id)
            return True
        return item.update_quantity(quantity)

    def clear(self) -> None:
        """Remove every item.  The discount policy stays in place."""
        self._items.clear()

    # --- Queries --------------------------------------------------------------

    @property
    def items(self) -> tuple[CartItem, ...]:
        return tuple(self._items)

    def get_item(self, product_id: str) -> CartItem | None:
        for item in self._items:
            if item.product_id == product_id:
                return item
        return None

    @property
    def subtotal(self) -> Money:
        return Money.total_of([item.subtotal for item in self._items])

    @property
    def discount_amount(self) -> Money:
        if self.discount is None:
            return Money.zero()
        return self.discount.discount_for(self._items)

    @property
    def total(self) -> Money:
        return self.subtotal.minus_or_zero(self.discount_amount)

    @property
    def item_count(self) -> int:
        return sum(item.quantity for item in self._items)

    @property
    def is_empty(self) -> bool:
        return not self._items

    def summary(self) -> str:
        lines = ["Cart Summary"]
        if not self._items:
            lines.append(" (empty)")
            return "\n".join(lines)
        for item in self._items:
            lines.append(f" - {item}")
        lines.append(f"Subtotal: {self.subtotal}")
        lines.append(f"Discount: {self.discount_amount}")
        lines.append(f"Total: {self.total}")
        lines.append(f"Item count: {self.item_count}")
        return "\n".join(lines)

    # --- Checkout -------------------------------------------------------------

    def checkout(self, shipping_address: Address) -> Order:
        """Turn the cart into an Order and empty it.

        Stock is deducted from the cart's own product copies only; the
        caller's catalog records are untouched.
        """
        for item in self._items:
            item.product.deduct_stock(item.quantity)

        order = Order.from_cart(self, shipping_address)
        self.clear()
        logger.info("Checked out order %s (%d items, total %s)",
                    order.id, order.item_count, order.total)
        return order
