"""Domain service: change-making strategies.

A strategy picks, out of the coins available, a sub-bag worth exactly the
change owed.  Returning None is a normal outcome meaning "this strategy
found no allocation"; for the greedy strategies that does not prove that
none exists.  Only BacktrackingStrategy is complete.

Strategies hold no state and never mutate the bag they are given.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod

from vending.domain.exceptions import ValidationError
from vending.domain.model.coin import Coin
from vending.domain.model.coin_bag import CoinBag
from vending.domain.model.value_objects import Money

logger = logging.getLogger(__name__)

_ASCENDING = tuple(Coin)
_DESCENDING = tuple(reversed(_ASCENDING))


class ChangeStrategy(ABC):

    name: str = ""
    alias: str = ""
    is_complete: bool = False

    def solve(self, target: Money, available: CoinBag) -> CoinBag | None:
        """Return coins from *available* worth exactly *target*, or None."""
        if target.cents == 0:
            return CoinBag()
        if available.total_value() < target:
            logger.debug("%s: %s available, %s needed", self.name, available.total_value(), target)
            return None

        change = self._allocate(target.cents, available)
        if change is None:
            logger.debug("%s: no allocation for %s from %s", self.name, target, available)
        return change

    @abstractmethod
    def _allocate(self, remaining: int, available: CoinBag) -> CoinBag | None:
        """Build the change for *remaining* cents; *available* covers the value."""

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


class _GreedyStrategy(ChangeStrategy):
    """Takes as many coins as fit of each denomination, in a fixed order."""

    order: tuple[Coin, ...] = ()

    def _allocate(self, remaining: int, available: CoinBag) -> CoinBag | None:
        change = CoinBag()
        for coin in self.order:
            if remaining == 0:
                break
            take = min(available.quantity_of(coin), remaining // coin.value)
            if take > 0:
                change.add(coin, take)
                remaining -= take * coin.value
        return change if remaining == 0 else None


class HighFirstGreedyStrategy(_GreedyStrategy):
    """Largest coins first.

    Incomplete: owed 6 with {1 x 5, 3 x 2} it takes the 5 and is stuck,
    although 2 + 2 + 2 works.
    """

    name = "high"
    alias = "H"
    order = _DESCENDING


class LowFirstGreedyStrategy(_GreedyStrategy):
    """Smallest coins first.  Incomplete, and tends to hand out more coins."""

    name = "low"
    alias = "L"
    order = _ASCENDING


class AlternatingGreedyStrategy(ChangeStrategy):
    """Alternates one large coin with one small coin.

    Two cursors walk the denominations from both ends.  Each turn looks at
    the coin under the current cursor (high first): if one is available and
    fits it is taken, otherwise that cursor moves inward.  The turn passes
    to the other cursor either way.  Stops when the change is complete or
    the cursors cross.  Incomplete, like the other greedy strategies.
    """

    name = "alternating"
    alias = "A"

    def _allocate(self, remaining: int, available: CoinBag) -> CoinBag | None:
        change = CoinBag()
        low, high = 0, len(_ASCENDING) - 1
        use_high = True

        while remaining > 0 and low <= high:
            coin = _ASCENDING[high] if use_high else _ASCENDING[low]
            if coin.value <= remaining and available.quantity_of(coin) > change.quantity_of(coin):
                change.add(coin, 1)
                remaining -= coin.value
            elif use_high:
                high -= 1
            else:
                low += 1
            use_high = not use_high

        return change if remaining == 0 else None


class BacktrackingStrategy(ChangeStrategy):
    """Exhaustive search; finds change whenever some allocation exists.

    Denominations are visited from the largest down, one recursion level
    each, so the depth never exceeds the number of denominations.  At each
    level the largest feasible count is tried first.
    """

    name = "backtrack"
    alias = "B"
    is_complete = True

    def _allocate(self, remaining: int, available: CoinBag) -> CoinBag | None:
        stock = [available.quantity_of(coin) for coin in _DESCENDING]
        used = [0] * len(_DESCENDING)
        if not self._search(0, remaining, stock, used):
            return None
        return CoinBag({coin: n for coin, n in zip(_DESCENDING, used) if n > 0})

    def _search(self, index: int, remaining: int, stock: list[int], used: list[int]) -> bool:
        if remaining == 0:
            return True
        if index == len(_DESCENDING):
            return False

        value = _DESCENDING[index].value
        for count in range(min(stock[index], remaining // value), -1, -1):
            used[index] = count
            if self._search(index + 1, remaining - count * value, stock, used):
                return True
        used[index] = 0
        return False


_STRATEGIES: dict[str, ChangeStrategy] = {
    strategy.name: strategy
    for strategy in (
        HighFirstGreedyStrategy(),
        LowFirstGreedyStrategy(),
        AlternatingGreedyStrategy(),
        BacktrackingStrategy(),
    )
}

STRATEGY_NAMES = tuple(_STRATEGIES)


def strategy_for(name: str) -> ChangeStrategy:
    """Look up a strategy by name (``"high"``) or one-letter alias (``"H"``)."""
    key = name.strip().lower()
    for strategy in _STRATEGIES.values():
        if key in (strategy.name, strategy.alias.lower()):
            return strategy
    raise ValidationError(
        f"Unknown change strategy {name!r}, expected one of {', '.join(STRATEGY_NAMES)}"
    )
