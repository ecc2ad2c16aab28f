"""Discount policies.

Each policy is a frozen value computing a discount from a cart's items.
Policies hold no mutable state, so one instance can be shared by any
number of carts.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from typing import Iterable

from shopcart.domain.exceptions import ValidationError
from shopcart.domain.model.cart_item import CartItem
from shopcart.domain.model.value_objects import Money


def _subtotal(items: Iterable[CartItem]) -> Money:
    return Money.total_of([item.subtotal for item in items])


class DiscountPolicy(ABC):

    @abstractmethod
    def discount_for(self, items: Iterable[CartItem]) -> Money:
        """Return the discount earned by ``items``; never above their subtotal."""

    @abstractmethod
    def describe(self) -> str:
        """Short human-readable label, e.g. ``10% off``."""


@dataclass(frozen=True)
class Percentage(DiscountPolicy):
    """``rate`` percent off the subtotal (10 means 10%)."""

    rate: Decimal

    def __post_init__(self) -> None:
        try:
            rate = Decimal(str(self.rate))
        except (InvalidOperation, ValueError) as exc:
            raise ValidationError(f"Invalid percentage: {self.rate!r}") from exc
        if not rate.is_finite():
            raise ValidationError(f"Invalid percentage: {self.rate!r}")
        if not Decimal("0") <= rate <= Decimal("100"):
            raise ValidationError(f"Percentage must be between 0 and 100, got {rate}")
        object.__setattr__(self, "rate", rate)

    def discount_for(self, items: Iterable[CartItem]) -> Money:
        return _subtotal(items).percent(self.rate)

    def describe(self) -> str:
        return f"{self.rate}% off"


@dataclass(frozen=True)
class FixedAmount(DiscountPolicy):
    """A flat amount off, capped at the subtotal."""

    amount: Money

    def __post_init__(self) -> None:
        if not isinstance(self.amount, Money):
            object.__setattr__(self, "amount", Money.of(self.amount))

    def discount_for(self, items: Iterable[CartItem]) -> Money:
        subtotal = _subtotal(items)
        return self.amount if self.amount <= subtotal else subtotal

    def describe(self) -> str:
        return f"{self.amount} off"


@dataclass(frozen=True)
class BuyXGetY(DiscountPolicy):
    """Buy ``buy`` units, get ``get`` units free.

    Units from every line are pooled and sorted by price; each full group
    of ``buy + get`` units frees ``get`` of them, always the cheapest ones
    in the whole cart.
    """

    buy: int
    get: int

    def discount_for(self, items: Iterable[CartItem]) -> Money:
        if self.buy <= 0 or self.get <= 0:
            return Money.zero()

        unit_prices: list[Money] = []
        for item in items:
            unit_prices.extend([item.product.price] * item.quantity)
        unit_prices.sort()

        free_count = (len(unit_prices) // (self.buy + self.get)) * self.get
        return Money.total_of(unit_prices[:free_count])

    def describe(self) -> str:
        return f"buy {self.buy} get {self.get} free"
