"""Customer: keeps the orders a person has placed."""

from __future__ import annotations

import logging
import uuid
from dataclasses import dataclass, field

from shopcart.domain.exceptions import ValidationError
from shopcart.domain.model.order import Order
from shopcart.domain.model.value_objects import Money

logger = logging.getLogger(__name__)


@dataclass
class Customer:
    """Order history is append-only; placing the same order twice
    records it twice."""

    name: str
    email: str
    id: str = field(default_factory=lambda: str(uuid.uuid4()))
    _orders: list[Order] = field(default_factory=list, init=False, repr=False)

    @staticmethod
    def create(name: str, email: str) -> Customer:
        if not name or not name.strip():
            raise ValidationError("Customer name is required")
        return Customer(name=name.strip(), email=email.strip())

    @property
    def order_history(self) -> tuple[Order, ...]:
        return tuple(self._orders)

    def place_order(self, order: Order) -> None:
        self._orders.append(order)
        logger.info("Order %s placed by %s", order.id, self.name)

    @property
    def total_spent(self) -> Money:
        return Money.total_of([order.total for order in self._orders])

    def history_summary(self) -> str:
        if not self._orders:
            return f"{self.name} has no orders yet."
        lines = [f"Order history for {self.name}:"]
        for order in self._orders:
            lines.append(
                f"- {order.id}: {order.total} @ {order.timestamp:%Y-%m-%d %H:%M UTC}"
            )
        return "\n".join(lines)
