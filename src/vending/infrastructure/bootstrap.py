"""Composition root: wires settings, strategies and machines together.

This is the only place in the codebase that knows about *all* layers.
"""

from __future__ import annotations

from functools import lru_cache

from vending.domain.exceptions import ParseError, ValidationError
from vending.domain.model.coin_bag import CoinBag
from vending.domain.model.slot import Slot
from vending.domain.model.vending_machine import VendingMachine
from vending.domain.service.change_strategies import ChangeStrategy, strategy_for
from vending.infrastructure.settings import Settings


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()


def change_strategy(name: str | None = None) -> ChangeStrategy:
    """Strategy called *name*, or the configured default."""
    return strategy_for(name or get_settings().change_strategy)


def parse_slots(descriptors: str) -> list[Slot]:
    """Parse ``"10|S, 5|L"``; descriptors that do not parse are skipped."""
    slots: list[Slot] = []
    for descriptor in descriptors.split(","):
        descriptor = descriptor.strip()
        if not descriptor:
            continue
        try:
            slots.append(Slot.parse(descriptor))
        except (ParseError, ValidationError):
            continue
    return slots


def build_machine(
    descriptors: str,
    till: str,
    strategy: ChangeStrategy | None = None,
) -> VendingMachine:
    """Build a machine from slot descriptors and an initial till literal."""
    try:
        coins = CoinBag.parse(till)
    except ParseError:
        coins = CoinBag()
    return VendingMachine(
        slots=parse_slots(descriptors),
        till=coins,
        strategy=strategy or change_strategy(),
    )
