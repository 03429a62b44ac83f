"""Value Objects shared across the domain.

Value Objects are immutable and compared by value, not identity.
They encapsulate validation so invalid values can never exist.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from vending.domain.exceptions import (
    MalformedAmountError,
    NegativeResultError,
    ValidationError,
)

CENTS_PER_UNIT = 100

_DECIMAL_LITERAL = re.compile(r"^(?:(\d+)(?:\.(\d{0,2}))?|\.(\d{1,2}))$", re.ASCII)


@dataclass(frozen=True, order=True)
class Money:
    """Non-negative monetary amount stored as a whole number of cents.

    There is no floating-point anywhere: amounts are parsed straight
    from their decimal text into an integer count of cents.
    """

    cents: int

    def __post_init__(self) -> None:
        if not isinstance(self.cents, int) or isinstance(self.cents, bool):
            raise ValidationError(
                f"Money cents must be an int, got {type(self.cents).__name__}"
            )
        if self.cents < 0:
            raise ValidationError(f"Money amount cannot be negative, got {self.cents}")

    # --- Derived parts --------------------------------------------------------

    @property
    def units(self) -> int:
        return self.cents // CENTS_PER_UNIT

    @property
    def cents_part(self) -> int:
        return self.cents % CENTS_PER_UNIT

    # --- Arithmetic helpers ---------------------------------------------------

    def __add__(self, other: Money) -> Money:
        return Money(self.cents + other.cents)

    def __sub__(self, other: Money) -> Money:
        if self.cents < other.cents:
            raise NegativeResultError(
                f"Money subtraction would result in a negative amount: {self} - {other}"
            )
        return Money(self.cents - other.cents)

    def __mul__(self, factor: int) -> Money:
        if not isinstance(factor, int):
            raise TypeError(f"Can only multiply Money by int, got {type(factor).__name__}")
        if factor < 0:
            raise NegativeResultError(f"Multiplier cannot be negative, got {factor}")
        return Money(self.cents * factor)

    def __floordiv__(self, divisor: Money) -> int:
        """Largest n such that ``divisor * n <= self``."""
        if divisor.cents == 0:
            raise ValidationError("Division by zero amount")
        return self.cents // divisor.cents

    # --- Display --------------------------------------------------------------

    def __str__(self) -> str:
        units, cents = self.units, self.cents_part
        if units == 0 and cents == 0:
            return "0 cents"
        parts = []
        if units:
            parts.append(f"{units} unit" if units == 1 else f"{units} units")
        if cents:
            parts.append(f"{cents} cent" if cents == 1 else f"{cents} cents")
        return " ".join(parts)

    # --- Factories ------------------------------------------------------------

    @staticmethod
    def of(units: int, cents: int = 0) -> Money:
        """Build an amount from its whole units and cents (0-99)."""
        if units < 0:
            raise ValidationError(f"Units cannot be negative, got {units}")
        if not 0 <= cents < CENTS_PER_UNIT:
            raise ValidationError(f"Cents must be between 0 and 99, got {cents}")
        return Money(units * CENTS_PER_UNIT + cents)

    @staticmethod
    def parse(text: str) -> Money:
        """Parse a decimal literal such as ``"2"``, ``"1.50"`` or ``".05"``.

        Signs, exponents and more than two fractional digits are rejected.
        """
        match = _DECIMAL_LITERAL.match(text.strip())
        if match is None:
            raise MalformedAmountError(f"Invalid money amount: {text!r}")
        whole, fraction, bare_fraction = match.groups()
        if bare_fraction is not None:
            whole, fraction = "0", bare_fraction
        return Money(int(whole) * CENTS_PER_UNIT + int((fraction or "").ljust(2, "0")))


ZERO = Money(0)
