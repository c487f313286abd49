"""Value Objects for raw form input.

Value Objects are immutable and compared by value, not identity.
They encapsulate validation so invalid values can never exist.

Each ``parse`` factory takes the raw text typed into the form.  Text that
is not a number at all is treated like zero, so a garbled quantity or
price surfaces as the same "invalid" error as an explicit ``0``.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

from stockroom.domain.exceptions import (
    InvalidPriceError,
    InvalidQuantityError,
    NotANumberError,
)


# Largest count a 64-bit unsigned machine word can hold.
MAX_COUNT = 2**64 - 1


def _parse_count(raw: str | int) -> int | None:
    text = str(raw).strip()
    if not text.isdecimal() or len(text) > len(str(MAX_COUNT)):
        return None
    value = int(text)
    if value > MAX_COUNT:
        return None
    return value


@dataclass(frozen=True)
class Quantity:
    """A positive integer count of units in stock."""

    value: int

    def __post_init__(self) -> None:
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise InvalidQuantityError()
        if self.value < 1:
            raise InvalidQuantityError()

    @staticmethod
    def parse(raw: str | int) -> Quantity:
        """Coerce form input; unparsable text counts as zero and is rejected."""
        value = _parse_count(raw)
        return Quantity(value if value is not None else 0)


@dataclass(frozen=True)
class UnitPrice:
    """A positive, finite price for a single unit."""

    amount: float

    def __post_init__(self) -> None:
        if isinstance(self.amount, bool) or not isinstance(self.amount, (int, float)):
            raise InvalidPriceError()
        if not math.isfinite(self.amount) or self.amount <= 0:
            raise InvalidPriceError()

    @staticmethod
    def parse(raw: str | int | float) -> UnitPrice:
        """Coerce form input; unparsable text counts as 0.0 and is rejected."""
        try:
            amount = float(str(raw).strip())
        except ValueError:
            amount = 0.0
        return UnitPrice(amount)


@dataclass(frozen=True)
class Position:
    """A 1-based index into the inventory list as typed by the user.

    Only the *format* is checked here.  Whether the position addresses
    an existing record depends on the list and is checked by Inventory.
    """

    value: int

    @staticmethod
    def parse(raw: str | int) -> Position:
        value = _parse_count(raw)
        if value is None:
            raise NotANumberError()
        return Position(value)
