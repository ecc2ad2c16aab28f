import logging

import click

from shopcart.infrastructure.cli.cart_commands import cart_checkout, cart_quote
from shopcart.infrastructure.cli.product_commands import product_list


@click.group()
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    default="WARNING",
    show_default=True,
    help="Diagnostic log verbosity.",
)
def cli(log_level: str) -> None:
    """shopcart: in-memory shopping cart"""
    logging.basicConfig(
        level=log_level.upper(),
        format="%(levelname)s %(name)s: %(message)s",
    )


@cli.group()
def cart() -> None:
    """Build carts and check them out."""


@cli.group()
def product() -> None:
    """Browse the catalog."""


# Register subcommands
cart.add_command(cart_checkout)
cart.add_command(cart_quote)
product.add_command(product_list)
