"""CLI command for computing change against bags of coins."""

from __future__ import annotations

from typing import TextIO

import click

from vending.application.compute_change import ComputeChangeHandler
from vending.domain.exceptions import DomainException
from vending.domain.model.value_objects import Money
from vending.infrastructure.bootstrap import change_strategy
from vending.infrastructure.cli.common import input_option, read_lines


@click.command("change")
@click.argument("strategy")
@click.argument("amount")
@input_option
def change(strategy: str, amount: str, source: TextIO) -> None:
    """Compute AMOUNT of change from each line's coins using STRATEGY.

    STRATEGY is one of high, low, alternating, backtrack (or H, L, A, B).
    Prints the change, 'value' if the coins are worth too little or
    'change' if the strategy finds no exact allocation.
    """
    try:
        handler = ComputeChangeHandler(strategy=change_strategy(strategy))
    except DomainException as exc:
        raise click.ClickException(str(exc))
    try:
        Money.parse(amount)
    except DomainException as exc:
        raise click.BadParameter(str(exc), param_hint="AMOUNT")

    for line in read_lines(source):
        try:
            result = handler.handle(amount=amount, available=line)
        except DomainException as exc:
            click.echo(exc.code)
            continue
        click.echo(result.change if result.ok else result.status)
