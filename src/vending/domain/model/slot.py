"""Slot: a capacity-bounded bin holding units of a single product.

Each slot has a fixed size class and capacity.  It can hold any number
of units of one product up to its capacity, provided the product fits.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from vending.domain.exceptions import (
    CapacityExceededError,
    NonPositiveQuantityError,
    ParseError,
    ProductMismatchError,
    SizeMismatchError,
    SlotEmptyError,
    ValidationError,
)
from vending.domain.model.product import Product, Size


@dataclass
class Slot:
    """Aggregate for a single product bin.

    Invariants:
    - ``0 <= count <= capacity``
    - ``product is None`` exactly when ``count == 0``
    - a held product always fits: ``size.holds(product.size)``
    """

    size: Size
    capacity: int
    _product: Product | None = field(default=None, init=False, repr=False)
    _count: int = field(default=0, init=False, repr=False)

    def __post_init__(self) -> None:
        if self.capacity <= 0:
            raise ValidationError(f"Slot capacity must be positive, got {self.capacity}")

    # Only load and dispense change what the slot holds.
    @property
    def product(self) -> Product | None:
        return self._product

    @property
    def count(self) -> int:
        return self._count

    @property
    def is_empty(self) -> bool:
        return self.count == 0

    @property
    def free_space(self) -> int:
        return self.capacity - self.count

    def accepts(self, product: Product) -> bool:
        """True if *product* may go in here, ignoring the remaining capacity."""
        if not self.size.holds(product.size):
            return False
        return self.is_empty or self.product == product

    def load(self, product: Product, quantity: int) -> None:
        """Add *quantity* units of *product*.

        Checks run in order size, item, capacity; nothing changes on failure.
        """
        if quantity <= 0:
            raise NonPositiveQuantityError(f"Load quantity must be positive, got {quantity}")
        if not self.size.holds(product.size):
            raise SizeMismatchError(
                f"{product.name} (size {product.size}) does not fit a size {self.size} slot"
            )
        if not self.is_empty and self.product != product:
            raise ProductMismatchError(
                f"Slot already holds {self.product.name}, cannot load {product.name}"
            )
        if self.count + quantity > self.capacity:
            raise CapacityExceededError(
                f"Cannot load {quantity}, only {self.free_space} free of {self.capacity}"
            )

        if self.is_empty:
            self._product = product
        self._count += quantity

    def dispense(self) -> Product:
        """Remove one unit and return its product."""
        if self.is_empty:
            raise SlotEmptyError("Slot is empty")
        product = self._product
        self._count -= 1
        if self._count == 0:
            self._product = None
        return product

    def __str__(self) -> str:
        if self.is_empty:
            return f"<-, {self.size}, 0, {self.capacity}>"
        return f"<{self.product}, {self.size}, {self.count}, {self.capacity}>"

    @staticmethod
    def parse(text: str) -> Slot:
        """Parse a slot descriptor ``"capacity|size"``, e.g. ``"10|M"``."""
        parts = text.split("|")
        if len(parts) != 2:
            raise ParseError(f"Invalid slot {text!r}, expected 'capacity|size'")
        capacity_str = parts[0].strip()
        if not (capacity_str.isascii() and capacity_str.isdigit()):
            raise ParseError(f"Invalid slot capacity {parts[0]!r}")
        size = Size.parse(parts[1])
        try:
            return Slot(size=size, capacity=int(capacity_str))
        except ValidationError as exc:
            raise ParseError(f"Invalid slot {text!r}: {exc}") from exc
