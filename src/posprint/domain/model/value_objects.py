"""Value Objects shared across the domain.

Value Objects are immutable and compared by value, not identity.
They encapsulate validation so invalid values can never exist.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation

from posprint.domain.exceptions import ValidationError

DEFAULT_CURRENCY = "€"

_CENTS = Decimal("0.01")


def to_decimal(value: str | float | int | Decimal) -> Decimal:
    """Coerce a raw amount to Decimal without float noise."""
    if isinstance(value, Decimal):
        return value
    try:
        return Decimal(str(value))
    except (InvalidOperation, ValueError) as exc:
        raise ValidationError(f"Invalid amount: {value!r}") from exc


def format_amount(value: str | float | int | Decimal) -> str:
    """Render an amount as ``1.234,50``.

    Two decimals, half-up rounding, ``,`` as decimal separator and ``.``
    as thousands separator. The separators are fixed for every receipt.
    """
    quantized = to_decimal(value).quantize(_CENTS, rounding=ROUND_HALF_UP)
    text = f"{quantized:,.2f}"
    return text.replace(",", "_").replace(".", ",").replace("_", ".")


@dataclass(frozen=True)
class Money:
    """Monetary amount with its currency symbol.

    Uses Decimal to avoid floating-point rounding errors that would be
    unacceptable in financial calculations. Amounts may be negative:
    deposit returns and discount lines are priced below zero.
    """

    amount: Decimal
    currency: str = DEFAULT_CURRENCY

    def __post_init__(self) -> None:
        if not isinstance(self.amount, Decimal):
            raise ValidationError(
                f"Money amount must be a Decimal, got {type(self.amount).__name__}"
            )

    # --- Arithmetic helpers ---------------------------------------------------

    def __mul__(self, factor: int) -> Money:
        if not isinstance(factor, int):
            raise TypeError(f"Can only multiply Money by int, got {type(factor).__name__}")
        return Money(self.amount * factor, self.currency)

    # --- Display --------------------------------------------------------------

    def __str__(self) -> str:
        return f"{self.currency}{format_amount(self.amount)}"

    # --- Factory --------------------------------------------------------------

    @staticmethod
    def of(amount: str | float | int | Decimal, currency: str = DEFAULT_CURRENCY) -> Money:
        """Convenient factory that coerces to Decimal safely."""
        return Money(to_decimal(amount), currency)


@dataclass(frozen=True)
class Quantity:
    """A non-negative integer quantity.

    Zero is accepted: a receipt prints whatever the order recorded.
    """

    value: int

    def __post_init__(self) -> None:
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise ValidationError(
                f"Quantity must be an integer, got {type(self.value).__name__}"
            )
        if self.value < 0:
            raise ValidationError("Quantity cannot be negative")

    def __str__(self) -> str:
        return str(self.value)


MIN_TEXT_SCALE = 1
MAX_TEXT_SCALE = 8


def _clamp_scale(value: int | float) -> int:
    if MIN_TEXT_SCALE <= value <= MAX_TEXT_SCALE:
        return int(value)
    return MIN_TEXT_SCALE


@dataclass(frozen=True)
class TextScale:
    """Character width/height multipliers.

    Anything outside 1..8 falls back to 1 instead of raising; printers
    reject those values and a receipt must still come out.
    """

    width: int = 1
    height: int = 1

    def __post_init__(self) -> None:
        object.__setattr__(self, "width", _clamp_scale(self.width))
        object.__setattr__(self, "height", _clamp_scale(self.height))

    @property
    def is_default(self) -> bool:
        return self.width == 1 and self.height == 1
