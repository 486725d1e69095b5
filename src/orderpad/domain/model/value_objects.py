"""Value Objects shared across the domain.

Value Objects are immutable and compared by value, not identity.
They encapsulate validation so invalid values can never exist.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Iterable

from orderpad.domain.exceptions import InvalidAmount, ValidationError

CURRENCY = "BRL"
CURRENCY_SYMBOL = "R$"

MAX_WHOLE_DIGITS = 12
MAX_QUANTITY_DIGITS = 9

# Up to 12 digits, then optionally "." or "," followed by one or two digits.
_MAJOR_UNITS_RE = re.compile(
    rf"^(\d{{1,{MAX_WHOLE_DIGITS}}})(?:[.,](\d{{1,2}}))?$", re.ASCII
)
# pt-BR display form as written by Money.format(), e.g. "1.234,56".
_GROUPED_RE = re.compile(r"^(\d{1,3}(?:\.\d{3}){1,3}),(\d{2})$", re.ASCII)
_QUANTITY_RE = re.compile(rf"^\d{{1,{MAX_QUANTITY_DIGITS}}}$", re.ASCII)


@dataclass(frozen=True)
class Money:
    """Monetary amount with currency.

    Stored as an integer number of minor units (centavos) so sums and
    products are exact. Formatting never feeds back into arithmetic.
    """

    cents: int
    currency: str = CURRENCY

    def __post_init__(self) -> None:
        if isinstance(self.cents, bool) or not isinstance(self.cents, int):
            raise InvalidAmount(
                f"Money amount must be an int of minor units, got {type(self.cents).__name__}"
            )
        if self.cents < 0:
            raise InvalidAmount(f"Money amount cannot be negative, got {self.cents}")

    # --- Arithmetic helpers ---------------------------------------------------

    def __add__(self, other: Money) -> Money:
        self._assert_same_currency(other)
        return Money(self.cents + other.cents, self.currency)

    def __mul__(self, factor: int) -> Money:
        if isinstance(factor, bool) or not isinstance(factor, int):
            raise TypeError(f"Can only multiply Money by int, got {type(factor).__name__}")
        return Money(self.cents * factor, self.currency)

    def multiply(self, factor: int) -> Money:
        return self * factor

    @property
    def is_zero(self) -> bool:
        return self.cents == 0

    # --- Display --------------------------------------------------------------

    @property
    def major_units(self) -> str:
        """Canonical decimal text, e.g. ``"1234.56"``."""
        return f"{self.cents // 100}.{self.cents % 100:02d}"

    def format(self) -> str:
        """pt-BR display text, e.g. ``"R$ 1.234,56"``."""
        whole = f"{self.cents // 100:,}".replace(",", ".")
        return f"{CURRENCY_SYMBOL} {whole},{self.cents % 100:02d}"

    def __str__(self) -> str:
        return self.format()

    # --- Internal helpers -----------------------------------------------------

    def _assert_same_currency(self, other: Money) -> None:
        if self.currency != other.currency:
            raise ValidationError(
                f"Cannot combine {self.currency} with {other.currency}"
            )

    # --- Factories ------------------------------------------------------------

    @staticmethod
    def zero(currency: str = CURRENCY) -> Money:
        return Money(0, currency)

    @staticmethod
    def from_major_units(text: str) -> Money:
        """Parse decimal text such as ``"12.50"`` or ``"12,50"``.

        The display form (``"R$ 1.234,56"``, symbol optional) is read back
        too. Raises InvalidAmount unless the text is a non-negative decimal
        with at most two fractional digits and at most 12 whole digits.
        """
        match = None
        if isinstance(text, str):
            stripped = text.strip()
            if stripped.startswith(CURRENCY_SYMBOL):
                stripped = stripped[len(CURRENCY_SYMBOL):].lstrip()
            match = _MAJOR_UNITS_RE.match(stripped) or _GROUPED_RE.match(stripped)
        if match is None:
            raise InvalidAmount(f"Invalid money amount: {text!r}", field="unit_price")
        whole, fraction = match.groups()
        cents = int(whole.replace(".", "")) * 100 + int((fraction or "0").ljust(2, "0"))
        return Money(cents)

    @staticmethod
    def sum(amounts: Iterable[Money], currency: str = CURRENCY) -> Money:
        result = Money.zero(currency)
        for amount in amounts:
            result = result + amount
        return result


@dataclass(frozen=True)
class Quantity:
    """A positive integer quantity.

    Enforces the invariant that you cannot order zero or negative items.
    """

    value: int

    def __post_init__(self) -> None:
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise ValidationError(
                f"Quantity must be an integer, got {type(self.value).__name__}",
                field="quantity",
            )
        if self.value <= 0:
            raise ValidationError("Quantity must be positive", field="quantity")

    def incremented(self) -> Quantity:
        return Quantity(self.value + 1)

    def decremented(self) -> Quantity:
        """One less, floored at 1."""
        return Quantity(max(self.value - 1, 1))

    @staticmethod
    def parse(text: str | int) -> Quantity:
        """Read quantity input; blank text means 1."""
        if isinstance(text, int):
            return Quantity(text)
        stripped = text.strip()
        if not stripped:
            return Quantity(1)
        if not _QUANTITY_RE.match(stripped):
            raise ValidationError(f"Invalid quantity: {text!r}", field="quantity")
        return Quantity(int(stripped))

    def __str__(self) -> str:
        return str(self.value)
