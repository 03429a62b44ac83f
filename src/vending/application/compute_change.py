"""Application service: Compute Change use case (query).

Runs a change strategy against a bag of available coins without
touching any machine.
"""

from __future__ import annotations

from vending.application.dto import ChangeResultDTO
from vending.domain.model.coin_bag import CoinBag
from vending.domain.model.value_objects import Money
from vending.domain.service.change_strategies import ChangeStrategy


class ComputeChangeHandler:

    def __init__(self, strategy: ChangeStrategy) -> None:
        self._strategy = strategy

    def handle(self, amount: str, available: str) -> ChangeResultDTO:
        """Compute change for *amount* out of the coins in *available*."""
        target = Money.parse(amount)
        coins = CoinBag.parse(available)

        if coins.total_value() < target:
            return ChangeResultDTO(status="value")

        change = self._strategy.solve(target, coins)
        if change is None:
            return ChangeResultDTO(status="change")
        return ChangeResultDTO(status="ok", change=str(change))
