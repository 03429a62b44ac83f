"""CLI command running an interactive vending machine session.

Input:
  line 1   slot descriptors, e.g. '10|S, 5|M, 2|L'
  line 2   initial till, e.g. '10 x .10, 5 x .50'
  then     '+ qty, name|price|size'  load products
           '- slot, coins'           buy from a slot
           '?'                       list the non-empty slots
"""

from __future__ import annotations

from typing import TextIO

import click

from vending.application.load_product import LoadProductHandler
from vending.application.show_slots import ShowSlotsHandler
from vending.application.vend_product import VendProductHandler
from vending.domain.exceptions import DomainException, ParseError, VendError
from vending.domain.model.vending_machine import VendingMachine
from vending.infrastructure.bootstrap import build_machine, change_strategy
from vending.infrastructure.cli.common import input_option, read_lines


def _split_pair(params: str) -> tuple[int, str] | None:
    """Parse '<int>, <rest>'; None if malformed."""
    parts = params.split(",", 1)
    if len(parts) != 2:
        return None
    try:
        return int(parts[0]), parts[1].strip()
    except ValueError:
        return None


def _load(machine: VendingMachine, params: str) -> None:
    pair = _split_pair(params)
    if pair is None:
        return
    quantity, product = pair
    try:
        not_loaded = LoadProductHandler(machine).handle(product=product, quantity=quantity)
    except DomainException:
        return
    click.echo(f"+ {not_loaded}")


def _vend(machine: VendingMachine, params: str) -> None:
    pair = _split_pair(params)
    if pair is None:
        return
    slot_index, payment = pair
    try:
        result = VendProductHandler(machine).handle(slot_index=slot_index, payment=payment)
    except ParseError:
        return
    except VendError as exc:
        click.echo(f"- {exc.code}")
        return
    click.echo(f"- {result.change}")


def _query(machine: VendingMachine) -> None:
    for line in ShowSlotsHandler(machine).handle():
        click.echo(f"? {line.index} | {line.product_name} | {line.price}")


@click.command("run")
@click.option(
    "--strategy",
    default=None,
    help="Change strategy (high, low, alternating, backtrack). "
    "Defaults to VENDING_CHANGE_STRATEGY.",
)
@input_option
def machine_run(strategy: str | None, source: TextIO) -> None:
    """Run a vending machine session read line by line."""
    # Both header lines are taken as they are; a blank till line is an empty till.
    descriptors = source.readline()
    till = source.readline()
    if not descriptors or not till:
        return

    try:
        machine = build_machine(descriptors.strip(), till.strip(), change_strategy(strategy))
    except DomainException as exc:
        raise click.ClickException(str(exc))

    for line in read_lines(source):
        command, params = line[0], line[1:].strip()
        if command == "+":
            _load(machine, params)
        elif command == "-":
            _vend(machine, params)
        elif command == "?":
            _query(machine)
