"""Abstract repository for the product catalog."""

from __future__ import annotations

from abc import ABC, abstractmethod

from shopcart.domain.model.product import Product


class ProductRepository(ABC):

    @abstractmethod
    def get_by_id(self, product_id: str) -> Product | None:
        """Return a product by its ID, or None if not found."""

    @abstractmethod
    def list_all(self) -> list[Product]:
        """Return all products in the catalog."""

    @abstractmethod
    def save(self, product: Product) -> None:
        """Add or replace a product."""
