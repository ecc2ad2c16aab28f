"""Application service: Quote Cart use case (query).

Builds a throwaway cart from the catalog and reports its totals.
"""

from __future__ import annotations

from shopcart.application.dto import CartDTO, CartItemSpec
from shopcart.application.fill_cart import fill_cart, to_line_dto
from shopcart.domain.model.cart import ShoppingCart
from shopcart.domain.model.discount import DiscountPolicy
from shopcart.domain.repository.product_repository import ProductRepository


class QuoteCartHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(
        self,
        item_specs: list[CartItemSpec],
        discount: DiscountPolicy | None = None,
    ) -> CartDTO:
        cart = ShoppingCart(discount=discount)
        fill_cart(cart, self._product_repo, item_specs)
        return self._to_dto(cart)

    @staticmethod
    def _to_dto(cart: ShoppingCart) -> CartDTO:
        return CartDTO(
            items=[to_line_dto(item) for item in cart.items],
            item_count=cart.item_count,
            subtotal=str(cart.subtotal),
            discount=str(cart.discount_amount),
            discount_label=cart.discount.describe() if cart.discount else None,
            total=str(cart.total),
        )
