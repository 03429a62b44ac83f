"""VendingMachine aggregate: slots, till and change strategy.

The machine owns its till and slot list outright: both are copied on
construction so no caller can mutate them behind its back.

``vend`` is two-phase (compute-then-commit): every check that can fail,
including the change search, runs before the till or any slot is
touched.  A rejected vend therefore needs no rollback.
"""

from __future__ import annotations

import copy
import logging
from collections.abc import Sequence

from vending.domain.exceptions import (
    ChangeUnavailableError,
    InsufficientCoinsError,
    InsufficientPaymentError,
    NonPositiveQuantityError,
    ProductUnavailableError,
    SlotError,
    SlotOutOfRangeError,
    ValidationError,
)
from vending.domain.model.coin_bag import CoinBag
from vending.domain.model.product import Product
from vending.domain.model.slot import Slot
from vending.domain.model.value_objects import Money
from vending.domain.service.change_strategies import ChangeStrategy

logger = logging.getLogger(__name__)


class VendingMachine:
    """Aggregate root for a single machine.

    Invariants:
    - at least one slot, and no missing slot
    - the strategy is fixed for the lifetime of the machine
    """

    def __init__(
        self,
        slots: Sequence[Slot],
        till: CoinBag,
        strategy: ChangeStrategy,
    ) -> None:
        if not slots:
            raise ValidationError("A vending machine needs at least one slot")
        for index, slot in enumerate(slots):
            if slot is None:
                raise ValidationError(f"Slot {index} is missing")
        self._slots: list[Slot] = list(slots)
        self._till = till.copy()
        self._strategy = strategy

    # --- Queries --------------------------------------------------------------

    @property
    def slot_count(self) -> int:
        return len(self._slots)

    @property
    def till(self) -> CoinBag:
        """A copy of the till; changing it does not affect the machine."""
        return self._till.copy()

    @property
    def till_value(self) -> Money:
        return self._till.total_value()

    @property
    def strategy(self) -> ChangeStrategy:
        return self._strategy

    def non_empty_slots(self) -> list[tuple[int, Slot]]:
        """``(index, slot)`` for every slot holding a product, by index.

        The slots are copies, so dispensing from one does not sell anything.
        """
        return [
            (i, copy.copy(slot)) for i, slot in enumerate(self._slots) if not slot.is_empty
        ]

    # --- Till -----------------------------------------------------------------

    def add_to_till(self, coins: CoinBag) -> None:
        self._till.merge(coins)

    def empty_till(self) -> CoinBag:
        """Take every coin out of the till and return them."""
        removed = self._till.clear()
        logger.info("Till emptied: %s (%s)", removed, removed.total_value())
        return removed

    # --- Operations -----------------------------------------------------------

    def load(self, product: Product, quantity: int) -> int:
        """Load up to *quantity* units, filling slots in index order.

        Slots that do not accept the product or are full are skipped.
        Returns how many units could not be placed (0 when all fit).
        """
        if quantity <= 0:
            raise NonPositiveQuantityError(f"Load quantity must be positive, got {quantity}")

        remaining = quantity
        for slot in self._slots:
            if remaining == 0:
                break
            if not slot.accepts(product) or slot.free_space == 0:
                continue
            batch = min(remaining, slot.free_space)
            slot.load(product, batch)
            remaining -= batch

        logger.debug("Loaded %d of %d x %s", quantity - remaining, quantity, product)
        return remaining

    def vend(self, slot_index: int, payment: CoinBag) -> CoinBag:
        """Sell one unit from *slot_index* paid with *payment*; return the change.

        Phase 1, validate and compute, nothing is mutated:
          slot index, slot not empty, payment covers the price, and change
          found by the strategy in the till pooled with the payment.
        Phase 2, commit: payment into the till, change out of it, one
          unit out of the slot.
        """
        # Phase 1: validate and compute
        if not 0 <= slot_index < len(self._slots):
            raise SlotOutOfRangeError(f"No slot at index {slot_index}")
        slot = self._slots[slot_index]
        if slot.is_empty:
            raise ProductUnavailableError(f"Slot {slot_index} is empty")

        price = slot.product.price
        paid = payment.total_value()
        if paid < price:
            raise InsufficientPaymentError(f"Paid {paid}, price is {price}")

        owed = paid - price
        if owed.cents == 0:
            change = CoinBag()
        else:
            pool = self._till.copy()
            pool.merge(payment)
            change = self._strategy.solve(owed, pool)
            if change is None:
                raise ChangeUnavailableError(f"Cannot return {owed} with {self._strategy.name}")

        # Phase 2: commit
        self._till.merge(payment)
        try:
            self._till.subtract(change)
            product = slot.dispense()
        except (InsufficientCoinsError, SlotError) as exc:
            raise AssertionError(f"Vend commit failed after validation: {exc}") from exc

        logger.debug("Vended %s from slot %d, change %s", product, slot_index, change)
        return change

    def __str__(self) -> str:
        return f"VendingMachine[slots={len(self._slots)}, till={self.till_value}]"
