"""
Money Utilities - Safe Decimal operations for monetary values.

Commerce backends send amounts as decimal strings ("19.99"). These helpers
keep arithmetic in Decimal and convert back to strings at the boundary.
"""
from decimal import Decimal, ROUND_HALF_UP, InvalidOperation
from typing import Iterable, Union

# Default precision for money operations (2 decimal places)
MONEY_PRECISION = Decimal("0.01")

Amount = Union[str, int, float, Decimal, None]


def to_decimal(value: Amount) -> Decimal:
    """
    Convert any value to Decimal safely.
    
    Args:
        value: Value to convert (str, int, float, Decimal, or None)
        
    Returns:
        Decimal representation of the value, or Decimal("0") if None/invalid
    """
    if value is None or value == "":
        return Decimal("0")
    
    if isinstance(value, Decimal):
        return value
    
    try:
        # Convert via string to avoid float precision issues
        if isinstance(value, float):
            return Decimal(str(value))
        return Decimal(value)
    except (InvalidOperation, ValueError, TypeError):
        return Decimal("0")


def round_money(value: Amount) -> Decimal:
    """Round monetary value to cents."""
    return to_decimal(value).quantize(MONEY_PRECISION, rounding=ROUND_HALF_UP)


def multiply(value: Amount, factor: Amount) -> Decimal:
    """Safe multiplication of monetary value by a factor."""
    return to_decimal(value) * to_decimal(factor)


def total(values: Iterable[Amount]) -> Decimal:
    """Sum monetary values."""
    result = Decimal("0")
    for value in values:
        result += to_decimal(value)
    return result


def to_amount_string(value: Amount) -> str:
    """
    Render an amount the way the commerce API does: a plain decimal string.
    
    Zero is rendered as "0" to match the backend's empty cart totals.
    """
    rounded = round_money(value)
    if rounded == 0:
        return "0"
    return f"{rounded:f}"
