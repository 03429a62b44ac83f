"""CoinBag: a multiset of coins (till, payment or change).

Invariants:
- every stored count is strictly positive; a coin whose count drops to
  zero is removed from the mapping immediately
- the total value is never cached, it is recomputed from the counts
"""

from __future__ import annotations

import re
from collections.abc import Iterator, Mapping

from vending.domain.exceptions import (
    InsufficientDenominationError,
    InsufficientValueError,
    NonPositiveQuantityError,
    ParseError,
)
from vending.domain.model.coin import Coin
from vending.domain.model.value_objects import Money

_ENTRY_SEPARATOR = re.compile(r"\s*x\s*")


class CoinBag:

    def __init__(self, counts: Mapping[Coin, int] | None = None) -> None:
        self._counts: dict[Coin, int] = {}
        for coin, quantity in (counts or {}).items():
            self.add(coin, quantity)

    # --- Queries --------------------------------------------------------------

    def quantity_of(self, coin: Coin) -> int:
        return self._counts.get(coin, 0)

    @property
    def is_empty(self) -> bool:
        return not self._counts

    def total_value(self) -> Money:
        return Money(sum(coin.value * count for coin, count in self._counts.items()))

    def contains(self, other: CoinBag) -> bool:
        """True if every coin of *other* is available here in at least that number."""
        return all(self.quantity_of(coin) >= count for coin, count in other)

    def copy(self) -> CoinBag:
        return CoinBag(self._counts)

    # --- Mutations ------------------------------------------------------------

    def add(self, coin: Coin, quantity: int) -> None:
        if quantity <= 0:
            raise NonPositiveQuantityError(
                f"Coin quantity must be positive, got {quantity}"
            )
        self._counts[coin] = self._counts.get(coin, 0) + quantity

    def merge(self, other: CoinBag) -> None:
        """Add every coin of *other* to this bag."""
        for coin, count in other:
            self.add(coin, count)

    def subtract(self, other: CoinBag) -> None:
        """Remove every coin of *other* from this bag.

        Validates before mutating so a failed removal leaves the bag
        untouched:
          1. the total value must cover *other* (InsufficientValueError)
          2. each coin must be present in the requested number
             (InsufficientDenominationError)
        """
        if self.total_value() < other.total_value():
            raise InsufficientValueError(
                f"Cannot remove {other.total_value()} from a bag worth {self.total_value()}"
            )
        for coin, count in other:
            if self.quantity_of(coin) < count:
                raise InsufficientDenominationError(
                    f"Need {count} x {coin}, have {self.quantity_of(coin)}"
                )

        for coin, count in other:
            remaining = self._counts[coin] - count
            if remaining == 0:
                del self._counts[coin]
            else:
                self._counts[coin] = remaining

    def clear(self) -> CoinBag:
        """Remove all coins and return them as a new bag."""
        removed = self.copy()
        self._counts.clear()
        return removed

    # --- Protocols ------------------------------------------------------------

    def __iter__(self) -> Iterator[tuple[Coin, int]]:
        # Iterates over a snapshot; later mutations do not leak into it.
        return iter(sorted(self._counts.items()))

    def __len__(self) -> int:
        return sum(self._counts.values())

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CoinBag):
            return NotImplemented
        return self._counts == other._counts

    __hash__ = None  # type: ignore[assignment]

    def __str__(self) -> str:
        return "<" + ", ".join(f"{count} x {coin}" for coin, count in self) + ">"

    def __repr__(self) -> str:
        return f"CoinBag({str(self)})"

    # --- Factory --------------------------------------------------------------

    @staticmethod
    def parse(text: str) -> CoinBag:
        """Parse ``"10 x .20, 5 x .50, 2 x 1"``.

        The rendered form (``"<2 x 20 cents, 1 x 1 unit>"``) is accepted too,
        so ``CoinBag.parse(str(bag)) == bag``.  Blank text or ``"<>"`` gives
        an empty bag.
        """
        body = text.strip()
        if body.startswith("<") and body.endswith(">"):
            body = body[1:-1]

        bag = CoinBag()
        for entry in body.split(","):
            entry = entry.strip()
            if not entry:
                continue
            tokens = _ENTRY_SEPARATOR.split(entry, maxsplit=1)
            if len(tokens) != 2:
                raise ParseError(f"Invalid entry {entry!r}, expected 'n x value'")
            count_str, coin_str = tokens
            if not (count_str.isascii() and count_str.isdigit()):
                raise ParseError(f"Invalid coin count {count_str!r}")
            count = int(count_str)
            if count <= 0:
                raise ParseError(f"Coin count must be positive, got {count}")
            bag.add(Coin.parse(coin_str), count)
        return bag
