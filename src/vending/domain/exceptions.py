"""Domain-level exceptions.

All business rule violations are expressed as subclasses of DomainException
so the CLI layer can catch them uniformly.  Every concrete error carries a
one-word ``code`` that the line-oriented commands print as a diagnostic.
"""


class DomainException(Exception):
    """Base class for all domain errors."""

    code = "error"

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or self.code)


# --- Malformed input ----------------------------------------------------------


class ParseError(DomainException):
    """Text could not be turned into a domain object."""

    code = "invalid"


class MalformedAmountError(ParseError):
    """Not a non-negative decimal with at most two fractional digits."""


class UnknownCoinError(ParseError):
    """The amount is valid but no coin has that face value."""


# --- Preconditions ------------------------------------------------------------


class ValidationError(DomainException):
    """A business rule or invariant was violated."""

    code = "invalid"


class NonPositiveQuantityError(ValidationError):
    """A quantity that must be strictly positive was zero or negative."""


class NegativeResultError(ValidationError):
    """Money arithmetic would produce a negative amount."""

    code = "negative"


# --- Coin bag insufficiency ---------------------------------------------------


class InsufficientCoinsError(DomainException):
    """Removing coins from a bag is not possible."""


class InsufficientValueError(InsufficientCoinsError):
    """The bag is worth less than what should be removed."""

    code = "value"


class InsufficientDenominationError(InsufficientCoinsError):
    """The bag is worth enough but lacks some of the requested coins."""

    code = "coins"


# --- Slots --------------------------------------------------------------------


class SlotError(DomainException):
    """A slot cannot perform the requested load or dispense."""


class SizeMismatchError(SlotError):
    code = "size"


class ProductMismatchError(SlotError):
    code = "item"


class CapacityExceededError(SlotError):
    code = "capacity"


class SlotEmptyError(SlotError):
    code = "empty"


# --- Vending ------------------------------------------------------------------


class VendError(DomainException):
    """A vend request was rejected; the machine state is untouched."""


class SlotOutOfRangeError(VendError):
    code = "slot"


class ProductUnavailableError(VendError):
    code = "empty"


class InsufficientPaymentError(VendError):
    code = "value"


class ChangeUnavailableError(VendError):
    code = "change"
