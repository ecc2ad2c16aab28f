"""Shared step of the cart use cases: resolve specs and add them to a cart."""

from __future__ import annotations

from shopcart.application.dto import CartItemSpec, CartLineDTO
from shopcart.domain.exceptions import ProductNotFoundError, ValidationError
from shopcart.domain.model.cart import ShoppingCart
from shopcart.domain.model.cart_item import CartItem
from shopcart.domain.repository.product_repository import ProductRepository


def fill_cart(
    cart: ShoppingCart,
    product_repo: ProductRepository,
    item_specs: list[CartItemSpec],
) -> None:
    """Add every spec to ``cart``.

    Unlike ``ShoppingCart.add_item`` this refuses to continue when a line
    is rejected, since the caller asked for that exact content.
    """
    for spec in item_specs:
        product = product_repo.get_by_id(spec.product_id)
        if product is None:
            raise ProductNotFoundError(f"Product not found: '{spec.product_id}'")
        if not cart.add_item(product, spec.quantity):
            raise ValidationError(
                f"Could not add {spec.quantity} x {product.name} to the cart "
                f"({product.stock_quantity} in stock)"
            )


def to_line_dto(item: CartItem) -> CartLineDTO:
    return CartLineDTO(
        product_id=item.product_id,
        product_name=item.product.name,
        quantity=item.quantity,
        unit_price=str(item.product.price),
        subtotal=str(item.subtotal),
    )
