"""Tests for fixed-point money amounts."""
import pytest
from decimal import Decimal

from ..errors import AccumulatorOverflowError, InvalidAmountError
from ..utils.money import MAX_CENTS, Money

def test_from_decimal_round_trips_exactly():
    """Test a decimal string renders back unchanged."""
    assert Money.from_decimal("3134.45").to_decimal_string() == "3134.45"
    assert Money.from_decimal("3134.45").cents == 313445
    assert str(Money.from_decimal("79.90")) == "79.90"

def test_repeated_addition_has_no_drift():
    """Test ten dimes add up to exactly one dollar."""
    total = Money.zero()
    for _ in range(10):
        total = total + Money.from_decimal("0.10")
    assert total == Money.from_decimal("1.00")
    assert sum([Money.from_decimal("0.10")] * 10) == Money.from_decimal("1.00")

def test_from_decimal_accepts_numbers():
    """Test ints, floats and Decimals convert to cents."""
    assert Money.from_decimal(5).cents == 500
    assert Money.from_decimal(0.1).cents == 10
    assert Money.from_decimal(Decimal("12.3")).cents == 1230
    assert Money.from_decimal(" 7.00 ").cents == 700

def test_from_decimal_rounds_half_away_from_zero():
    """Test sub-cent input is rounded to the nearest cent."""
    assert Money.from_decimal("0.125").cents == 13
    assert Money.from_decimal("0.124").cents == 12
    assert Money.from_decimal("2.675").cents == 268
    assert Money.from_decimal(2.675).cents == 268

@pytest.mark.parametrize('amount', ["-1.00", "abc", "", "NaN", "Infinity", True, None])
def test_from_decimal_rejects_invalid_amounts(amount):
    """Test negative and non-numeric amounts are rejected."""
    with pytest.raises(InvalidAmountError):
        Money.from_decimal(amount)

def test_rendering():
    """Test rendering always shows two fractional digits."""
    assert Money(0).to_decimal_string() == "0.00"
    assert Money(5).to_decimal_string() == "0.05"
    assert Money(100).to_decimal_string() == "1.00"
    assert Money(123456789).to_decimal_string() == "1234567.89"
    assert Money(313445).to_decimal() == Decimal("3134.45")

def test_multiplication_is_exact():
    """Test scalar multiplication by a quantity."""
    price = Money.from_decimal("284.95")
    assert price * 11 == Money.from_decimal("3134.45")
    assert 11 * price == price * 11
    assert price * 0 == Money.zero()
    with pytest.raises(InvalidAmountError):
        price * -1

def test_ordering():
    """Test money compares by amount."""
    assert Money.from_decimal("79.90") < Money.from_decimal("3134.45")
    assert max(Money(1), Money(300), Money(20)) == Money(300)

def test_overflow_raises_instead_of_wrapping():
    """Test totals beyond 64 bits raise an error."""
    big = Money(MAX_CENTS)
    with pytest.raises(AccumulatorOverflowError):
        big + Money(1)
    with pytest.raises(AccumulatorOverflowError):
        Money(MAX_CENTS // 2 + 1) * 2
    with pytest.raises(AccumulatorOverflowError):
        Money.from_decimal("1e30")

def test_negative_cents_rejected():
    """Test Money cannot be built from negative cents."""
    with pytest.raises(InvalidAmountError):
        Money(-1)
