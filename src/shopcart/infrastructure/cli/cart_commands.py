"""CLI commands for carts and checkout."""

from __future__ import annotations

import click

from shopcart.application.checkout_cart import CheckoutCartHandler
from shopcart.application.dto import CartItemSpec, CartLineDTO
from shopcart.application.quote_cart import QuoteCartHandler
from shopcart.domain.exceptions import DomainException
from shopcart.domain.model.address import Address
from shopcart.domain.model.customer import Customer
from shopcart.domain.model.discount import (
    BuyXGetY,
    DiscountPolicy,
    FixedAmount,
    Percentage,
)
from shopcart.domain.model.value_objects import Money
from shopcart.infrastructure.bootstrap import product_repository


def _parse_items(raw: str) -> list[CartItemSpec]:
    """Parse 'P001:3,P002:5' into CartItemSpec list."""
    specs: list[CartItemSpec] = []
    for pair in raw.split(","):
        pair = pair.strip()
        if ":" not in pair:
            raise click.BadParameter(
                f"Invalid item format '{pair}'. Expected 'ProductId:Quantity'."
            )
        product_id, qty_str = pair.rsplit(":", 1)
        try:
            qty = int(qty_str)
        except ValueError:
            raise click.BadParameter(
                f"Invalid quantity '{qty_str}' for product '{product_id}'."
            )
        specs.append(CartItemSpec(product_id=product_id.strip(), quantity=qty))
    return specs


def _parse_discount(raw: str | None) -> DiscountPolicy | None:
    """Parse 'percent:10', 'fixed:5.00' or 'bxgy:2:1'."""
    if not raw:
        return None
    kind, _, args = raw.partition(":")
    parts = args.split(":") if args else []
    try:
        if kind == "percent" and len(parts) == 1:
            return Percentage(parts[0])
        if kind == "fixed" and len(parts) == 1:
            return FixedAmount(Money.of(parts[0]))
        if kind == "bxgy" and len(parts) == 2:
            return BuyXGetY(buy=int(parts[0]), get=int(parts[1]))
    except (DomainException, ValueError) as exc:
        raise click.BadParameter(f"Invalid discount '{raw}': {exc}")
    raise click.BadParameter(
        f"Invalid discount '{raw}'. Expected percent:N, fixed:AMOUNT or bxgy:BUY:GET."
    )


def _display_lines(items: list[CartLineDTO]) -> None:
    click.echo(f"  {'Product':<26} {'Qty':>5} {'Price':>10} {'Subtotal':>10}")
    click.echo(f"  {'-'*53}")
    for item in items:
        click.echo(
            f"  {item.product_name:<26} {item.quantity:>5} {item.unit_price:>10} {item.subtotal:>10}"
        )
    click.echo(f"  {'-'*53}")


@click.command("quote")
@click.option("--items", required=True, help="Items as 'ProductId:Qty,ProductId:Qty'.")
@click.option("--discount", default=None, help="percent:N, fixed:AMOUNT or bxgy:BUY:GET.")
def cart_quote(items: str, discount: str | None) -> None:
    """Show the totals a cart would have."""
    specs = _parse_items(items)
    policy = _parse_discount(discount)

    handler = QuoteCartHandler(product_repo=product_repository())

    try:
        dto = handler.handle(specs, discount=policy)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo("Cart Summary")
    _display_lines(dto.items)
    click.echo(f"  {'Subtotal':<33} {dto.subtotal:>20}")
    label = f"Discount ({dto.discount_label})" if dto.discount_label else "Discount"
    click.echo(f"  {label:<33} {dto.discount:>20}")
    click.echo(f"  {'Total':<33} {dto.total:>20}")
    click.echo(f"  {'Item count':<33} {dto.item_count:>20}")


@click.command("checkout")
@click.option("--items", required=True, help="Items as 'ProductId:Qty,ProductId:Qty'.")
@click.option("--discount", default=None, help="percent:N, fixed:AMOUNT or bxgy:BUY:GET.")
@click.option("--street", required=True, help="Shipping street.")
@click.option("--city", required=True, help="Shipping city.")
@click.option("--zip", "zip_code", required=True, help="Shipping zip code.")
@click.option("--country", required=True, help="Shipping country.")
@click.option("--customer", "customer_name", default=None, help="Customer name.")
@click.option("--email", default="", help="Customer email.")
def cart_checkout(
    items: str,
    discount: str | None,
    street: str,
    city: str,
    zip_code: str,
    country: str,
    customer_name: str | None,
    email: str,
) -> None:
    """Check out a cart and print the resulting order."""
    specs = _parse_items(items)
    policy = _parse_discount(discount)
    address = Address(street=street, city=city, zip_code=zip_code, country=country)

    handler = CheckoutCartHandler(product_repo=product_repository())

    try:
        customer = Customer.create(customer_name, email) if customer_name is not None else None
        dto = handler.handle(specs, address, discount=policy, customer=customer)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Order {dto.id} created")
    click.echo(f"Created:  {dto.created_at}")
    click.echo()
    _display_lines(dto.items)
    click.echo(f"  {'Subtotal':<33} {dto.subtotal:>20}")
    click.echo(f"  {'Discount':<33} {dto.discount:>20}")
    click.echo(f"  {'Order Total':<33} {dto.total:>20}")
    click.echo()
    click.echo("Ship to:")
    click.echo(dto.shipping_address)
    if dto.customer_name is not None:
        click.echo()
        click.echo(f"Placed by {dto.customer_name} (total spent {dto.customer_total_spent})")
