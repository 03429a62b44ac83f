"""CLI commands for amounts and coin bags.

Each command reads lines from stdin (or ``--input``) and prints one
result line per input line.
"""

from __future__ import annotations

import re
from typing import TextIO

import click

from vending.domain.exceptions import DomainException, InsufficientCoinsError, ParseError
from vending.domain.model.coin import Coin
from vending.domain.model.coin_bag import CoinBag
from vending.domain.model.value_objects import Money
from vending.infrastructure.cli.common import input_option, read_lines

_OPERATORS = ("+", "-", "*", "/")


def _evaluate(line: str) -> str:
    """Evaluate 'a + b', 'a - b', 'a * n' or 'a / b'."""
    for op in _OPERATORS:
        if f" {op} " in line:
            break
    else:
        return "invalid"

    left, right = re.split(rf"\s*{re.escape(op)}\s*", line, maxsplit=1)
    try:
        amount = Money.parse(left)
        if op == "+":
            return str(amount + Money.parse(right))
        if op == "-":
            return str(amount - Money.parse(right))
        if op == "*":
            try:
                factor = int(right)
            except ValueError:
                return "invalid"
            return str(amount * factor)
        return str(amount // Money.parse(right))
    except DomainException as exc:
        return exc.code


@click.command("calc")
@input_option
def money_calc(source: TextIO) -> None:
    """Evaluate amount arithmetic, one expression per line."""
    for line in read_lines(source):
        click.echo(_evaluate(line))


@click.command("recognize")
@input_option
def coins_recognize(source: TextIO) -> None:
    """Print the coin matching each amount, or 'invalid'."""
    for line in read_lines(source):
        try:
            click.echo(Coin.parse(line))
        except ParseError:
            click.echo("invalid")


@click.command("ops")
@input_option
def coins_ops(source: TextIO) -> None:
    """Add ('+ bag') or remove ('- bag') coins from a running bag.

    Prints the bag after each operation, or 'value' / 'coins' when a
    removal is not possible.  Malformed lines are skipped.
    """
    current = CoinBag()
    for line in read_lines(source):
        op, operand = line[0], line[1:]
        if op not in "+-":
            continue
        try:
            coins = CoinBag.parse(operand)
        except ParseError:
            continue

        if op == "+":
            current.merge(coins)
        else:
            try:
                current.subtract(coins)
            except InsufficientCoinsError as exc:
                click.echo(exc.code)
                continue
        click.echo(current)
