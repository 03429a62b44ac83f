"""CLI commands for products."""

from __future__ import annotations

from typing import TextIO

import click

from vending.domain.exceptions import DomainException
from vending.domain.model.product import Product
from vending.infrastructure.cli.common import input_option, read_lines


@click.command("sort")
@input_option
def product_sort(source: TextIO) -> None:
    """Print 'name|price|size' products ordered by size, name and price."""
    products: list[Product] = []
    for line in read_lines(source):
        try:
            products.append(Product.parse(line))
        except DomainException as exc:
            raise click.ClickException(str(exc))

    for product in sorted(products):
        click.echo(product)
