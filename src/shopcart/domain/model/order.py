"""Order: an immutable snapshot of a cart taken at checkout."""

from __future__ import annotations

import uuid
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import TYPE_CHECKING

from shopcart.domain.model.address import Address
from shopcart.domain.model.cart_item import CartItem
from shopcart.domain.model.value_objects import Money

if TYPE_CHECKING:
    from shopcart.domain.model.cart import ShoppingCart


@dataclass(frozen=True)
class OrderLine:
    """One purchased line, frozen at checkout.

    ``stock_remaining`` is the stock left on the cart's product copy
    after the purchase was deducted.
    """

    product_id: str
    product_name: str
    unit_price: Money  # locked at checkout
    quantity: int
    stock_remaining: int

    @staticmethod
    def from_item(item: CartItem) -> OrderLine:
        return OrderLine(
            product_id=item.product_id,
            product_name=item.product.name,
            unit_price=item.product.price,
            quantity=item.quantity,
            stock_remaining=item.product.stock_quantity,
        )

    @property
    def subtotal(self) -> Money:
        return self.unit_price * self.quantity

    def __str__(self) -> str:
        return f"{self.product_name} x{self.quantity} = {self.subtotal}"


@dataclass(frozen=True)
class Order:
    """Use ``Order.from_cart()`` to create orders.

    Lines are frozen copies, so neither the originating cart nor anything
    read back from ``items`` can change an order.
    """

    id: str
    items: tuple[OrderLine, ...]
    subtotal: Money
    discount_amount: Money
    total: Money
    timestamp: datetime
    shipping_address: Address

    @staticmethod
    def from_cart(cart: ShoppingCart, shipping_address: Address) -> Order:
        return Order(
            id=str(uuid.uuid4()),
            items=tuple(OrderLine.from_item(item) for item in cart.items),
            subtotal=cart.subtotal,
            discount_amount=cart.discount_amount,
            total=cart.total,
            timestamp=datetime.now(timezone.utc),
            shipping_address=shipping_address,
        )

    @property
    def item_count(self) -> int:
        return sum(line.quantity for line in self.items)

    def summary(self) -> str:
        lines = [
            f"Order {self.id} - {self.timestamp:%Y-%m-%d %H:%M UTC}",
            f"Items ({self.item_count}):",
        ]
        lines.extend(f" * {line}" for line in self.items)
        lines.append(f"Subtotal: {self.subtotal}")
        lines.append(f"Discount: {self.discount_amount}")
        lines.append(f"Total: {self.total}")
        lines.append("Ship to:")
        lines.append(self.shipping_address.formatted)
        return "\n".join(lines)
