"""Fixed-point currency amounts.

Amounts are held as an integer number of cents so that summing thousands of
prices never drifts the way binary floats do.
"""

from dataclasses import dataclass
from decimal import Decimal, InvalidOperation, ROUND_HALF_UP
from typing import Union

from ..errors import InvalidAmountError, AccumulatorOverflowError

# Signed 64-bit ceiling, kept so reports stay portable to fixed-width stores
MAX_CENTS = 2 ** 63 - 1

AmountLike = Union[str, Decimal, int, float]


def check_range(value: int, what: str = 'amount') -> int:
    """Raise AccumulatorOverflowError if value does not fit in 64 bits."""
    if value > MAX_CENTS:
        raise AccumulatorOverflowError(f"{what} exceeds the representable range: {value}")
    return value


@dataclass(frozen=True, order=True)
class Money:
    """A non-negative amount of money in minor units (cents).

    Examples:
        >>> Money.from_decimal("3134.45").to_decimal_string()
        '3134.45'
        >>> Money.from_decimal("0.10") * 10 == Money.from_decimal("1.00")
        True
    """

    cents: int = 0

    def __post_init__(self):
        if isinstance(self.cents, bool) or not isinstance(self.cents, int):
            raise TypeError(f"Money cents must be an int, got {type(self.cents).__name__}")
        if self.cents < 0:
            raise InvalidAmountError(f"Money cannot be negative: {self.cents} cents")
        check_range(self.cents)

    @classmethod
    def zero(cls) -> 'Money':
        return cls(0)

    @classmethod
    def from_decimal(cls, amount: AmountLike) -> 'Money':
        """Convert a decimal amount in whole units to Money.

        The amount is multiplied by 100 and rounded half away from zero.

        Args:
            amount: Decimal string (e.g. "79.90"), Decimal, int or float

        Returns:
            Money instance

        Raises:
            InvalidAmountError: If the amount is negative or not a finite number
            AccumulatorOverflowError: If the amount is too large to represent
        """
        if isinstance(amount, bool):
            raise InvalidAmountError(f"Not a number: {amount!r}")
        try:
            if isinstance(amount, float):
                value = Decimal(str(amount))
            elif isinstance(amount, str):
                value = Decimal(amount.strip())
            else:
                value = Decimal(amount)
        except (InvalidOperation, TypeError, ValueError) as e:
            raise InvalidAmountError(f"Not a number: {amount!r}") from e

        if not value.is_finite():
            raise InvalidAmountError(f"Not a finite number: {amount!r}")
        if value < 0:
            raise InvalidAmountError(f"Amount cannot be negative: {amount!r}")
        if value.adjusted() > 18:
            raise AccumulatorOverflowError(f"Amount exceeds the representable range: {amount!r}")

        cents = (value * 100).quantize(Decimal('1'), rounding=ROUND_HALF_UP)
        return cls(int(cents))

    def __add__(self, other: 'Money') -> 'Money':
        if not isinstance(other, Money):
            return NotImplemented
        return Money(check_range(self.cents + other.cents))

    def __radd__(self, other):
        # Lets sum() start from its default 0
        if other == 0:
            return self
        return NotImplemented

    def __mul__(self, factor: int) -> 'Money':
        if isinstance(factor, bool) or not isinstance(factor, int):
            return NotImplemented
        if factor < 0:
            raise InvalidAmountError(f"Cannot multiply money by a negative factor: {factor}")
        return Money(check_range(self.cents * factor))

    __rmul__ = __mul__

    def to_decimal(self) -> Decimal:
        return Decimal(self.cents).scaleb(-2)

    def to_decimal_string(self) -> str:
        """Render as ``whole.ff`` with exactly two fractional digits."""
        whole, fraction = divmod(self.cents, 100)
        return f"{whole}.{fraction:02d}"

    def __str__(self) -> str:
        return self.to_decimal_string()
