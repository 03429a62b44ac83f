"""Application service: Show Slots use case (query)."""

from __future__ import annotations

from vending.application.dto import SlotLineDTO
from vending.domain.model.vending_machine import VendingMachine


class ShowSlotsHandler:

    def __init__(self, machine: VendingMachine) -> None:
        self._machine = machine

    def handle(self) -> list[SlotLineDTO]:
        return [
            SlotLineDTO(
                index=index,
                product_name=slot.product.name,
                price=str(slot.product.price),
                count=slot.count,
                capacity=slot.capacity,
            )
            for index, slot in self._machine.non_empty_slots()
        ]
