"""Application service: Checkout use case.

Fills a cart from the catalog, checks it out and, when a customer is
given, records the order in their history.
"""

from __future__ import annotations

from shopcart.application.dto import CartItemSpec, CartLineDTO, OrderDTO
from shopcart.application.fill_cart import fill_cart
from shopcart.domain.exceptions import ValidationError
from shopcart.domain.model.address import Address
from shopcart.domain.model.cart import ShoppingCart
from shopcart.domain.model.customer import Customer
from shopcart.domain.model.discount import DiscountPolicy
from shopcart.domain.model.order import Order, OrderLine
from shopcart.domain.repository.product_repository import ProductRepository


class CheckoutCartHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(
        self,
        item_specs: list[CartItemSpec],
        shipping_address: Address,
        discount: DiscountPolicy | None = None,
        customer: Customer | None = None,
    ) -> OrderDTO:
        """Steps:
        1. Resolve each product id and add it to a fresh cart.
        2. Check the cart out (snapshots it and empties it).
        3. Append the order to the customer's history, if any.
        """
        if not item_specs:
            raise ValidationError("Cannot check out an empty cart")

        cart = ShoppingCart(discount=discount)
        fill_cart(cart, self._product_repo, item_specs)

        order = cart.checkout(shipping_address)
        if customer is not None:
            customer.place_order(order)

        return self._to_dto(order, customer)

    # --- Mapping --------------------------------------------------------------

    @staticmethod
    def _to_dto(order: Order, customer: Customer | None) -> OrderDTO:
        return OrderDTO(
            id=order.id,
            items=[_line_dto(line) for line in order.items],
            item_count=order.item_count,
            subtotal=str(order.subtotal),
            discount=str(order.discount_amount),
            total=str(order.total),
            created_at=order.timestamp.strftime("%Y-%m-%d %H:%M UTC"),
            shipping_address=order.shipping_address.formatted,
            customer_name=customer.name if customer else None,
            customer_total_spent=str(customer.total_spent) if customer else None,
        )


def _line_dto(line: OrderLine) -> CartLineDTO:
    return CartLineDTO(
        product_id=line.product_id,
        product_name=line.product_name,
        quantity=line.quantity,
        unit_price=str(line.unit_price),
        subtotal=str(line.subtotal),
    )
