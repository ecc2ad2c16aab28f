"""Dict-backed implementation of ProductRepository.

Nothing is written anywhere: the catalog lives as long as the process.
"""

from __future__ import annotations

from shopcart.domain.model.product import Product
from shopcart.domain.repository.product_repository import ProductRepository


class InMemoryProductRepository(ProductRepository):

    def __init__(self, products: list[Product] | None = None) -> None:
        self._store: dict[str, Product] = {}
        for product in products or []:
            self.save(product)

    def get_by_id(self, product_id: str) -> Product | None:
        product = self._store.get(product_id)
        # Hand out copies so callers cannot edit the catalog record.
        return product.copy() if product is not None else None

    def list_all(self) -> list[Product]:
        return [p.copy() for p in self._store.values()]

    def save(self, product: Product) -> None:
        self._store[product.id] = product.copy()
