"""Data Transfer Objects: plain containers that cross layer boundaries.

DTOs carry data between the CLI and application layers without
exposing domain internals to the outside world.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class CartItemSpec:
    """Input: what the customer asked for (product id + quantity)."""

    product_id: str
    quantity: int


@dataclass(frozen=True)
class CartLineDTO:
    """Output: a single cart or order line as displayed to the user."""

    product_id: str
    product_name: str
    quantity: int
    unit_price: str  # formatted, e.g. "$15.00"
    subtotal: str


@dataclass(frozen=True)
class CartDTO:
    """Output: a cart quote."""

    items: list[CartLineDTO]
    item_count: int
    subtotal: str
    discount: str
    discount_label: str | None
    total: str


@dataclass(frozen=True)
class OrderDTO:
    """Output: a completed order."""

    id: str
    items: list[CartLineDTO]
    item_count: int
    subtotal: str
    discount: str
    total: str
    created_at: str
    shipping_address: str
    customer_name: str | None = None
    customer_total_spent: str | None = None
