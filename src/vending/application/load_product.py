"""Application service: Load Product use case."""

from __future__ import annotations

from vending.domain.model.product import Product
from vending.domain.model.vending_machine import VendingMachine


class LoadProductHandler:

    def __init__(self, machine: VendingMachine) -> None:
        self._machine = machine

    def handle(self, product: str, quantity: int) -> int:
        """Load *quantity* units of a ``name|price|size`` product.

        Returns the number of units that did not fit anywhere.
        """
        return self._machine.load(Product.parse(product), quantity)
