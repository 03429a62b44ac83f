"""Data Transfer Objects: plain containers that cross layer boundaries.

DTOs carry data between the CLI and application layers without
exposing domain internals to the outside world.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ChangeResultDTO:
    """Output: outcome of a change computation.

    ``status`` is ``"ok"``, ``"value"`` (not enough money available) or
    ``"change"`` (the strategy found no allocation).
    """

    status: str
    change: str | None = None  # formatted, e.g. "<1 x 20 cents>"

    @property
    def ok(self) -> bool:
        return self.status == "ok"


@dataclass(frozen=True)
class VendResultDTO:
    """Output: a successful sale."""

    slot_index: int
    product_name: str
    change: str
    change_value: str


@dataclass(frozen=True)
class SlotLineDTO:
    """Output: a non-empty slot as displayed to the user."""

    index: int
    product_name: str
    price: str  # formatted, e.g. "1 unit 20 cents"
    count: int
    capacity: int
