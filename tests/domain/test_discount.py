"""Unit tests for discount policies."""

from decimal import Decimal

import pytest

from shopcart.domain.exceptions import ValidationError
from shopcart.domain.model.cart_item import CartItem
from shopcart.domain.model.discount import BuyXGetY, FixedAmount, Percentage
from shopcart.domain.model.value_objects import Money
from tests.fakes import make_product


def _line(pid: str, price: str, qty: int) -> CartItem:
    return CartItem(product=make_product(id=pid, name=pid, price=price, stock=100), quantity=qty)


class TestPercentage:

    def test_ten_percent_of_hundred(self):
        assert Percentage(Decimal("10")).discount_for([_line("A", "100.00", 1)]) == Money.of("10.00")

    def test_rate_coerced_from_int_and_str(self):
        assert Percentage(10).rate == Decimal("10")
        assert Percentage("12.5").rate == Decimal("12.5")

    def test_out_of_range_rejected(self):
        with pytest.raises(ValidationError, match="between 0 and 100"):
            Percentage(150)
        with pytest.raises(ValidationError, match="between 0 and 100"):
            Percentage(-5)

    @pytest.mark.parametrize("rate", ["nan", "NaN", "inf", "-Infinity", "ten"])
    def test_non_numeric_rate_rejected(self, rate):
        with pytest.raises(ValidationError):
            Percentage(rate)

    def test_describe(self):
        assert Percentage(10).describe() == "10% off"


class TestFixedAmount:

    def test_below_subtotal(self):
        assert FixedAmount(Money.of("5")).discount_for([_line("A", "20", 1)]) == Money.of("5")

    def test_capped_at_subtotal(self):
        assert FixedAmount(Money.of("500")).discount_for([_line("A", "80.00", 1)]) == Money.of("80.00")

    def test_plain_number_converted_to_money(self):
        policy = FixedAmount(5)
        assert policy.amount == Money.of("5")
        assert policy.discount_for([_line("A", "20", 1)]) == Money.of("5")

    def test_string_amount_converted(self):
        assert FixedAmount("2.50").amount == Money.of("2.50")

    @pytest.mark.parametrize("amount", ["nan", "abc", -5])
    def test_invalid_amount_rejected(self, amount):
        with pytest.raises(ValidationError):
            FixedAmount(amount)

    def test_other_currency_is_a_domain_error(self):
        policy = FixedAmount(Money(Decimal("5"), "EUR"))
        with pytest.raises(ValidationError, match="Cannot combine"):
            policy.discount_for([_line("A", "20", 1)])

    def test_empty_cart(self):
        assert FixedAmount(Money.of("5")).discount_for([]) == Money.zero()


class TestBuyXGetY:

    def test_cheapest_units_are_free_across_products(self):
        items = [_line("Sticker", "1.00", 3), _line("Notebook", "5.00", 2)]
        assert BuyXGetY(buy=2, get=1).discount_for(items) == Money.of("1.00")

    def test_order_of_lines_does_not_matter(self):
        items = [_line("Notebook", "5.00", 2), _line("Sticker", "1.00", 3)]
        assert BuyXGetY(buy=2, get=1).discount_for(items) == Money.of("1.00")

    def test_multiple_groups(self):
        # 6 units -> 2 groups of 3 -> 2 free: the two cheapest (1 + 2)
        items = [_line("A", "1", 1), _line("B", "2", 1), _line("C", "9", 4)]
        assert BuyXGetY(buy=2, get=1).discount_for(items) == Money.of("3")

    def test_incomplete_group_earns_nothing(self):
        assert BuyXGetY(buy=2, get=1).discount_for([_line("A", "4", 2)]) == Money.zero()

    def test_get_more_than_one(self):
        # buy 1 get 2 over 3 units -> 2 cheapest free
        items = [_line("A", "1", 1), _line("B", "2", 1), _line("C", "3", 1)]
        assert BuyXGetY(buy=1, get=2).discount_for(items) == Money.of("3")

    @pytest.mark.parametrize("buy,get", [(0, 1), (2, 0), (-1, 1), (2, -3)])
    def test_non_positive_parameters_yield_zero(self, buy, get):
        assert BuyXGetY(buy=buy, get=get).discount_for([_line("A", "1", 10)]) == Money.zero()

    def test_policies_are_immutable(self):
        policy = BuyXGetY(buy=2, get=1)
        with pytest.raises(AttributeError):
            policy.buy = 3
