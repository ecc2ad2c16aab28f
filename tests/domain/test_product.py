"""Unit tests for the Product catalog entry."""

import pytest

from shopcart.domain.exceptions import ValidationError
from shopcart.domain.model.product import Category, Product
from shopcart.domain.model.value_objects import Money


class TestProductCreate:

    def test_happy_path(self):
        p = Product.create("P001", "Laptop", "1200.00", Category.ELECTRONICS, "Fast", 5)
        assert p.price == Money.of("1200.00")
        assert p.category is Category.ELECTRONICS
        assert p.stock_quantity == 5

    def test_negative_price_clamped_to_zero(self):
        p = Product.create("P001", "Freebie", "-3.50", Category.FOOD)
        assert p.price == Money.zero()

    def test_category_from_string(self):
        p = Product.create("P001", "Novel", "9.99", "books")
        assert p.category is Category.BOOKS

    def test_unknown_category_rejected(self):
        with pytest.raises(ValidationError, match="Unknown category"):
            Product.create("P001", "Thing", "1", "toys")

    def test_invalid_price_rejected(self):
        with pytest.raises(ValidationError, match="Invalid price"):
            Product.create("P001", "Thing", "cheap", Category.FOOD)

    @pytest.mark.parametrize("price", ["nan", "Infinity", "-inf"])
    def test_non_finite_price_rejected(self, price):
        with pytest.raises(ValidationError, match="Invalid price"):
            Product.create("P001", "Thing", price, Category.FOOD)

    def test_negative_stock_rejected(self):
        with pytest.raises(ValidationError, match="cannot be negative"):
            Product.create("P001", "Thing", "1", Category.FOOD, stock_quantity=-1)

    def test_display_price(self):
        assert Product.create("P001", "Book", "45.9", Category.BOOKS).display_price == "$45.90"


class TestProductStock:

    def test_copy_is_independent(self):
        original = Product.create("P001", "Book", "10", Category.BOOKS, stock_quantity=4)
        duplicate = original.copy()
        duplicate.deduct_stock(3)
        assert original.stock_quantity == 4
        assert duplicate.stock_quantity == 1

    def test_deduct_stock_clamps_at_zero(self):
        p = Product.create("P001", "Book", "10", Category.BOOKS, stock_quantity=2)
        p.deduct_stock(5)
        assert p.stock_quantity == 0
