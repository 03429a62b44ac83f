"""Products sold by the machine and the size classes of products and slots."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from functools import total_ordering

from vending.domain.exceptions import ParseError, ValidationError
from vending.domain.model.value_objects import Money


@total_ordering
class Size(Enum):
    """Physical size class, ordered S < M < L."""

    S = "S"
    M = "M"
    L = "L"

    @property
    def rank(self) -> int:
        return list(Size).index(self)

    def holds(self, other: Size) -> bool:
        """True if something of size *other* fits in a container of this size."""
        return self.rank >= other.rank

    def __lt__(self, other: Size) -> bool:
        if not isinstance(other, Size):
            return NotImplemented
        return self.rank < other.rank

    def __str__(self) -> str:
        return self.value

    @staticmethod
    def parse(text: str) -> Size:
        try:
            return Size(text.strip().upper())
        except ValueError:
            raise ParseError(f"Invalid size: {text!r}")


@total_ordering
@dataclass(frozen=True)
class Product:
    """A catalog entry.  Ordered by size, then name, then price."""

    name: str
    price: Money
    size: Size

    def __post_init__(self) -> None:
        if not self.name or not self.name.strip():
            raise ValidationError("Product name is required")

    def __lt__(self, other: Product) -> bool:
        if not isinstance(other, Product):
            return NotImplemented
        return (self.size, self.name, self.price) < (other.size, other.name, other.price)

    def __str__(self) -> str:
        return f"<{self.name}, {self.price}, {self.size}>"

    @staticmethod
    def parse(text: str) -> Product:
        """Parse ``"name|price|size"``, e.g. ``"Water|.80|S"``."""
        parts = text.split("|")
        if len(parts) != 3:
            raise ParseError(f"Invalid product {text!r}, expected 'name|price|size'")

        name = parts[0].strip()
        if not name:
            raise ParseError(f"Product name is blank in {text!r}")
        try:
            price = Money.parse(parts[1])
            size = Size.parse(parts[2])
        except ParseError as exc:
            raise ParseError(f"Invalid product {text!r}: {exc}") from exc

        return Product(name=name, price=price, size=size)
