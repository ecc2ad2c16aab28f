"""Composition root: wires concrete implementations to domain interfaces.

The catalog is seeded from ``SAMPLE_CATALOG`` on every call; there is no
persistent store.
"""

from __future__ import annotations

from shopcart.domain.model.product import Category, Product
from shopcart.infrastructure.persistence.in_memory_product_repository import (
    InMemoryProductRepository,
)

SAMPLE_CATALOG: tuple[tuple[str, str, str, Category, str, int], ...] = (
    ("P001", "MacBook Air M3", "1200.00", Category.ELECTRONICS, "Lightweight and powerful laptop", 5),
    ("P002", "Python Programming Guide", "45.99", Category.BOOKS, "Learn Python step by step", 10),
    ("P003", "Sony WH-1000XM5", "299.99", Category.ELECTRONICS, "Noise cancelling headphones", 3),
    ("P004", "Cotton T-Shirt", "19.50", Category.CLOTHING, "Plain white tee", 25),
    ("P005", "Dark Chocolate", "3.25", Category.FOOD, "70% cocoa bar", 40),
    ("P010", "Sticker", "1.00", Category.BOOKS, "Promo sticker", 10),
    ("P011", "Notebook", "5.00", Category.BOOKS, "Small notebook", 10),
    ("P020", "Limited Edition", "99.99", Category.BOOKS, "Rare", 1),
)


def product_repository() -> InMemoryProductRepository:
    return InMemoryProductRepository(
        [
            Product.create(
                id=pid,
                name=name,
                price=price,
                category=category,
                description=description,
                stock_quantity=stock,
            )
            for pid, name, price, category, description, stock in SAMPLE_CATALOG
        ]
    )
