"""
Amount Handling Module

Normalises numeric input to Decimal and renders amounts with two decimal
places for transaction history entries and account displays.
"""

from decimal import Context, Decimal, ROUND_HALF_UP, getcontext
from typing import Union

# High precision for intermediate interest arithmetic
getcontext().prec = 28

CENTS = Decimal('0.01')

Numeric = Union[Decimal, int, float, str]


def to_decimal(value: Numeric) -> Decimal:
    """
    Convert a numeric value to Decimal without binary float artefacts

    Floats go through their shortest repr, so 0.1 becomes Decimal('0.1')
    rather than the exact binary expansion.
    """
    if isinstance(value, Decimal):
        return value
    if isinstance(value, bool):
        raise TypeError("Boolean is not a valid amount")
    return Decimal(str(value))


def format_amount(amount: Numeric) -> str:
    """
    Format an amount as fixed two-decimal text, e.g. 1234.5 -> '1234.50'

    Quantizing runs in a local context wide enough for the integer digits,
    so amounts beyond the global precision still format.
    """
    value = to_decimal(amount)
    context = Context(prec=max(getcontext().prec, value.adjusted() + 3))
    return str(value.quantize(CENTS, rounding=ROUND_HALF_UP, context=context))


def format_money(amount: Numeric, symbol: str = "$") -> str:
    """Format an amount with a currency symbol prefix"""
    return f"{symbol}{format_amount(amount)}"
