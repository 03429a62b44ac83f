"""Coin denominations accepted by the machine.

The set is closed: 1, 2, 5, 10, 20, 50 cents and 1, 2 units.  Members are
declared in ascending face value, so iterating ``Coin`` walks the
denominations from the smallest up.
"""

from __future__ import annotations

import re
from enum import Enum
from functools import total_ordering

from vending.domain.exceptions import MalformedAmountError, UnknownCoinError
from vending.domain.model.value_objects import CENTS_PER_UNIT, Money

# "1 unit", "2 cents", "1 unit 50 cents" -- the way Money renders itself.
_DISPLAY_LITERAL = re.compile(r"^(?:(\d+)\s+units?)?\s*(?:(\d+)\s+cents?)?$", re.ASCII)


@total_ordering
class Coin(Enum):
    CENT_1 = 1
    CENT_2 = 2
    CENT_5 = 5
    CENT_10 = 10
    CENT_20 = 20
    CENT_50 = 50
    EURO_1 = 100
    EURO_2 = 200

    @property
    def amount(self) -> Money:
        return Money(self.value)

    def __lt__(self, other: Coin) -> bool:
        if not isinstance(other, Coin):
            return NotImplemented
        return self.value < other.value

    def __str__(self) -> str:
        return str(self.amount)

    @staticmethod
    def from_money(money: Money) -> Coin | None:
        """Return the coin worth exactly *money*, or None."""
        for coin in Coin:
            if coin.value == money.cents:
                return coin
        return None

    @staticmethod
    def parse(text: str) -> Coin:
        """Parse a coin from a decimal literal (``".50"``) or its display form.

        Raises MalformedAmountError if the text is not an amount at all and
        UnknownCoinError if no coin has that face value.
        """
        coin = Coin.from_money(_parse_amount(text))
        if coin is None:
            raise UnknownCoinError(f"Not a coin: {text!r}")
        return coin


def _parse_amount(text: str) -> Money:
    stripped = text.strip()
    try:
        return Money.parse(stripped)
    except MalformedAmountError:
        match = _DISPLAY_LITERAL.match(stripped)
        if match is None or match.group(1) is None and match.group(2) is None:
            raise
        units, cents = (int(group) if group else 0 for group in match.groups())
        return Money(units * CENTS_PER_UNIT + cents)
