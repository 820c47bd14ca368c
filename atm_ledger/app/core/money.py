from __future__ import annotations

from decimal import (
    Context,
    Decimal,
    DecimalException,
    Inexact,
    InvalidOperation,
    Overflow,
    ROUND_HALF_UP,
    localcontext,
)
from numbers import Real
from typing import Union

from .errors import InvalidAmountError

Amount = Union[int, float, Decimal]

# Balances never round: any sum or difference that needs more digits than
# this traps instead of silently losing precision.
MONEY_CONTEXT = Context(
    prec=34,
    rounding=ROUND_HALF_UP,
    traps=[InvalidOperation, Inexact, Overflow],
)


def to_decimal(value: Amount) -> Decimal:
    """Convert a caller-supplied real number into an exact Decimal.

    Floats go through their shortest repr so ``0.1`` becomes ``Decimal("0.1")``
    rather than the binary expansion.
    """
    if isinstance(value, bool) or not isinstance(value, (Real, Decimal)):
        raise InvalidAmountError(f"Amount must be a real number, got {value!r}")
    try:
        amount = Decimal(str(value)) if isinstance(value, float) else Decimal(value)
    except (InvalidOperation, TypeError, ValueError) as exc:
        raise InvalidAmountError(f"Amount {value!r} is not a valid number") from exc
    if not amount.is_finite():
        raise InvalidAmountError(f"Amount {value!r} is not finite")
    if amount.is_zero():
        amount = amount.copy_abs()
    return amount


def add(balance: Decimal, amount: Decimal) -> Decimal:
    try:
        with localcontext(MONEY_CONTEXT):
            return balance + amount
    except DecimalException as exc:
        raise InvalidAmountError(
            f"Balance would exceed {MONEY_CONTEXT.prec} significant digits"
        ) from exc


def subtract(balance: Decimal, amount: Decimal) -> Decimal:
    return add(balance, amount.copy_negate())


def format_amount(amount: Decimal) -> str:
    """Render with at least two fractional digits, never dropping any."""
    places = max(2, -amount.as_tuple().exponent)
    return f"{amount:.{places}f}"
