from decimal import Decimal

import pytest

from equipment_rental.domain.errors import InvalidMoneyError
from equipment_rental.domain.value_objects.money import Money


@pytest.mark.parametrize("a, b", [(0, 0), (1, 99), (17_500, 2_000), (10**12, 1)])
def test_add_sums_cents(a, b):
    assert Money(a).add(Money(b)).cents == a + b
    assert (Money(a) + Money(b)).cents == a + b


@pytest.mark.parametrize("cents", [-1, -17_500])
def test_negative_amount_is_rejected(cents):
    with pytest.raises(InvalidMoneyError):
        Money(cents)


def test_from_decimal_rejects_negative():
    with pytest.raises(InvalidMoneyError):
        Money.from_decimal("-0.01")


def test_non_integer_cents_rejected():
    with pytest.raises(InvalidMoneyError):
        Money(1.5)  # type: ignore[arg-type]
    with pytest.raises(InvalidMoneyError):
        Money(True)  # type: ignore[arg-type]


def test_from_decimal_accepts_two_places_and_float_noise():
    assert Money.from_decimal("175.00").cents == 17_500
    assert Money.from_decimal(Decimal("0.1") + Decimal("0.2")).cents == 30
    assert Money.from_decimal(0.1 + 0.2).cents == 30
    assert Money.dollars(25).cents == 2_500


def test_from_decimal_rejects_sub_cent_precision():
    with pytest.raises(InvalidMoneyError):
        Money.from_decimal("10.005")


@pytest.mark.parametrize("raw", ["abc", "NaN", "Infinity"])
def test_from_decimal_rejects_non_numeric(raw):
    with pytest.raises(InvalidMoneyError):
        Money.from_decimal(raw)


def test_subtract_below_zero_raises():
    assert Money(500).subtract(Money(200)) == Money(300)
    with pytest.raises(InvalidMoneyError):
        Money(200) - Money(500)


def test_multiply_rounds_half_up():
    assert Money(1_000).multiply(7) == Money(7_000)
    assert Money(5).multiply(Decimal("0.5")) == Money(3)
    assert Money(333).multiply(0.5) == Money(167)
    assert 3 * Money(100) == Money(300)


def test_multiply_by_negative_factor_raises():
    with pytest.raises(InvalidMoneyError):
        Money(100).multiply(-1)


def test_ordering_and_equality():
    assert Money(100) < Money(200)
    assert Money(100) == Money.from_cents(100)
    assert len({Money(100), Money(100), Money(5)}) == 2
    assert Money.zero().is_zero()


def test_display():
    assert Money(17_500).amount == Decimal("175.00")
    assert str(Money(17_500)) == "$175.00"
    assert str(Money(5)) == "$0.05"
