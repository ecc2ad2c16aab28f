"""Unit tests for CartItem quantity rules and value semantics."""

import pytest

from shopcart.domain.exceptions import InvalidQuantityError
from shopcart.domain.model.cart_item import CartItem
from shopcart.domain.model.value_objects import Money
from tests.fakes import make_product


def _make_item(qty: int = 1, stock: int = 5, price: str = "15.00") -> CartItem:
    return CartItem(product=make_product(price=price, stock=stock), quantity=qty)


class TestSubtotal:

    def test_subtotal_is_price_times_quantity(self):
        assert _make_item(qty=3, price="15.00").subtotal == Money.of("45.00")

    def test_subtotal_is_exact(self):
        assert _make_item(qty=3, price="0.10").subtotal == Money.of("0.30")

    def test_str(self):
        assert str(_make_item(qty=2, price="1.50")) == "Widget x2 = $3.00"


class TestUpdateQuantity:

    def test_within_stock(self):
        item = _make_item(qty=1, stock=5)
        assert item.update_quantity(5) is True
        assert item.quantity == 5

    def test_zero_allowed(self):
        item = _make_item(qty=2)
        assert item.update_quantity(0) is True
        assert item.quantity == 0

    def test_above_stock_rejected(self):
        item = _make_item(qty=2, stock=5)
        assert item.update_quantity(6) is False
        assert item.quantity == 2

    def test_negative_rejected(self):
        item = _make_item(qty=2)
        assert item.update_quantity(-1) is False
        assert item.quantity == 2

    def test_rejection_is_logged(self, caplog):
        item = _make_item(qty=1, stock=2)
        item.update_quantity(3)
        assert "Not enough stock for Widget" in caplog.text


    @pytest.mark.parametrize("qty", [2.0, True])
    def test_non_integer_rejected(self, qty):
        item = _make_item(qty=1)
        assert item.update_quantity(qty) is False
        assert item.quantity == 1


class TestIncreaseQuantity:

    def test_increase(self):
        item = _make_item(qty=1, stock=5)
        assert item.increase_quantity(2) is True
        assert item.quantity == 3

    def test_non_positive_amount_rejected(self):
        item = _make_item(qty=1)
        assert item.increase_quantity(0) is False
        assert item.increase_quantity(-2) is False
        assert item.quantity == 1

    def test_non_integer_amount_rejected(self):
        item = _make_item(qty=1)
        assert item.increase_quantity(0.5) is False
        assert item.quantity == 1

    def test_total_above_stock_rejected(self):
        item = _make_item(qty=4, stock=5)
        assert item.increase_quantity(2) is False
        assert item.quantity == 4


class TestValueSemantics:

    def test_negative_initial_quantity_rejected(self):
        with pytest.raises(InvalidQuantityError):
            _make_item(qty=-1)

    @pytest.mark.parametrize("qty", [1.5, True])
    def test_non_integer_initial_quantity_rejected(self, qty):
        with pytest.raises(InvalidQuantityError, match="whole number"):
            _make_item(qty=qty)

    def test_copy_does_not_alias_quantity(self):
        item1 = _make_item(qty=1, stock=10)
        item2 = item1.copy()
        item2.update_quantity(5)
        assert item1.quantity == 1
        assert item2.quantity == 5

    def test_copy_does_not_alias_product(self):
        item1 = _make_item(qty=1, stock=10)
        item2 = item1.copy()
        item2.product.deduct_stock(4)
        assert item1.product.stock_quantity == 10
