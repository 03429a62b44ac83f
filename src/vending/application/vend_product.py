"""Application service: Vend Product use case.

Parses the payment and delegates the transaction to the VendingMachine
aggregate, which either completes the sale or leaves every slot and
the till exactly as they were.
"""

from __future__ import annotations

from vending.application.dto import VendResultDTO
from vending.domain.model.coin_bag import CoinBag
from vending.domain.model.vending_machine import VendingMachine


class VendProductHandler:

    def __init__(self, machine: VendingMachine) -> None:
        self._machine = machine

    def handle(self, slot_index: int, payment: str) -> VendResultDTO:
        """Sell one unit from *slot_index*, paid with a coin-bag literal."""
        coins = CoinBag.parse(payment)

        # Capture the name now; the slot forgets its product when emptied.
        product_name = self._product_name(slot_index)
        change = self._machine.vend(slot_index, coins)

        return VendResultDTO(
            slot_index=slot_index,
            product_name=product_name,
            change=str(change),
            change_value=str(change.total_value()),
        )

    def _product_name(self, slot_index: int) -> str:
        for index, slot in self._machine.non_empty_slots():
            if index == slot_index:
                return slot.product.name
        return ""
