"""CLI commands for the product catalog."""

from __future__ import annotations

import click

from shopcart.infrastructure.bootstrap import product_repository


@click.command("list")
def product_list() -> None:
    """List all products in the catalog."""
    products = product_repository().list_all()

    if not products:
        click.echo("No products found.")
        return

    click.echo(f"{'ID':<6} {'Name':<26} {'Category':<12} {'Price':>10} {'Stock':>6}")
    click.echo("-" * 64)
    for p in products:
        click.echo(
            f"{p.id:<6} {p.name:<26} {p.category.value:<12} "
            f"{p.display_price:>10} {p.stock_quantity:>6}"
        )
