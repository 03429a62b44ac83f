"""CLI commands for loading a single slot."""

from __future__ import annotations

from typing import TextIO

import click

from vending.domain.exceptions import DomainException, ParseError, SlotError
from vending.domain.model.product import Product, Size
from vending.domain.model.slot import Slot
from vending.infrastructure.cli.common import input_option, read_lines


def _parse_load(line: str) -> tuple[int, Product] | None:
    """Parse '3, Water|.80|S' into (3, Product); None if malformed."""
    parts = line.split(",", 1)
    if len(parts) != 2:
        return None
    try:
        return int(parts[0]), Product.parse(parts[1].strip())
    except (ValueError, ParseError):
        return None


@click.command("load")
@click.argument("capacity", type=int)
@click.argument("size")
@input_option
def slot_load(capacity: int, size: str, source: TextIO) -> None:
    """Load products into an empty CAPACITY|SIZE slot.

    Each line is 'quantity, name|price|size'.  Prints the slot after every
    successful load, or 'size' / 'item' / 'capacity' when refused.
    """
    try:
        slot = Slot(size=Size.parse(size), capacity=capacity)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(slot)
    for line in read_lines(source):
        parsed = _parse_load(line)
        if parsed is None:
            continue
        quantity, product = parsed
        try:
            slot.load(product, quantity)
        except SlotError as exc:
            click.echo(exc.code)
            continue
        except DomainException:
            continue
        click.echo(slot)
