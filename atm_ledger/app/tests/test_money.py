from decimal import Decimal

import pytest

from ..core.errors import InvalidAmountError
from ..core.money import add, format_amount, subtract, to_decimal


@pytest.mark.parametrize(
    "amount, expected",
    [
        (Decimal("250"), "250.00"),
        (Decimal("12.5"), "12.50"),
        (Decimal("0.004"), "0.004"),
        (Decimal("1E+3"), "1000.00"),
        (Decimal("1E+26"), "100000000000000000000000000.00"),
    ],
)
def test_format_amount_keeps_every_digit(amount: Decimal, expected: str) -> None:
    assert format_amount(amount) == expected


def test_floats_convert_through_their_shortest_repr() -> None:
    assert to_decimal(0.1) == Decimal("0.1")
    assert to_decimal(100.0) == Decimal("100.0")


def test_negative_zero_is_normalized() -> None:
    assert format_amount(to_decimal(-0.0)) == "0.00"


def test_arithmetic_is_exact_up_to_34_digits() -> None:
    balance = Decimal("1E+26")

    assert add(balance, Decimal("1")) == Decimal("100000000000000000000000001")
    assert subtract(balance, Decimal("0.01")) == Decimal("99999999999999999999999999.99")


def test_arithmetic_that_would_round_is_rejected() -> None:
    with pytest.raises(InvalidAmountError):
        add(Decimal(10**40), Decimal("1"))
    with pytest.raises(InvalidAmountError):
        subtract(Decimal(10**40), Decimal("0.5"))
