"""
Money Utilities - Safe Decimal operations for monetary values.

Avoids float precision issues by using Decimal throughout. Rounding happens
only when a value is formatted for display or serialized for an API response.
"""
from decimal import Decimal, ROUND_HALF_UP, InvalidOperation
from typing import Dict, Union

# Default precision for money operations (2 decimal places)
MONEY_PRECISION = Decimal("0.01")

# Precision for integer currencies (JPY, KRW, etc.)
INTEGER_PRECISION = Decimal("1")

CURRENCY_SYMBOLS: Dict[str, str] = {
    "USD": "$",
    "EUR": "€",
    "GBP": "£",
    "JPY": "¥",
    "KRW": "₩",
    "BRL": "R$",
}

INTEGER_CURRENCIES = {"JPY", "KRW"}

# Currencies whose symbol goes before the amount
PREFIX_CURRENCIES = {"USD", "EUR", "GBP", "BRL"}

Number = Union[str, int, float, Decimal]


def to_decimal(value: Union[Number, None]) -> Decimal:
    """
    Convert any value to Decimal safely.

    Args:
        value: Value to convert (str, int, float, Decimal, or None)

    Returns:
        Decimal representation of the value, or Decimal("0") if None/invalid
    """
    if value is None:
        return Decimal("0")

    if isinstance(value, Decimal):
        return value

    try:
        if isinstance(value, float):
            # Via str to keep 59.99 as 59.99
            return Decimal(str(value))
        return Decimal(value)
    except (InvalidOperation, ValueError, TypeError):
        return Decimal("0")


def parse_decimal(value: Union[Number, None]) -> Decimal:
    """
    Strict variant of to_decimal for untrusted input.

    Raises:
        ValueError: if the value is missing, boolean, not a number, or not finite
    """
    if value is None or isinstance(value, bool):
        raise ValueError(f"not a number: {value!r}")
    try:
        result = Decimal(str(value)) if isinstance(value, float) else Decimal(value)
    except (InvalidOperation, ValueError, TypeError):
        raise ValueError(f"not a number: {value!r}")
    if not result.is_finite():
        raise ValueError(f"not a finite number: {value!r}")
    return result


def round_money(value: Number, to_int: bool = False) -> Decimal:
    """
    Round monetary value to display precision.

    Args:
        value: Value to round
        to_int: If True, round to integer (for JPY, KRW)

    Returns:
        Rounded Decimal value
    """
    decimal_value = to_decimal(value)
    precision = INTEGER_PRECISION if to_int else MONEY_PRECISION
    return decimal_value.quantize(precision, rounding=ROUND_HALF_UP)


def format_money(value: Number, currency: str = "USD") -> str:
    """
    Format monetary value with currency symbol.

    Negative values keep the sign in front of the symbol ("-$5.00").
    """
    decimal_value = to_decimal(value)
    symbol = CURRENCY_SYMBOLS.get(currency, currency)

    sign = "-" if decimal_value < 0 else ""
    magnitude = abs(decimal_value)

    if currency in INTEGER_CURRENCIES:
        formatted = f"{int(round_money(magnitude, to_int=True)):,}"
    else:
        formatted = f"{round_money(magnitude):,.2f}"

    if currency in PREFIX_CURRENCIES:
        return f"{sign}{symbol}{formatted}"
    return f"{sign}{formatted} {symbol}"


def to_float(value: Number) -> float:
    """
    Convert to float rounded to cents for JSON responses.

    Use only at API boundaries, not for internal calculations.
    """
    return float(round_money(value))


def multiply(value: Number, factor: Number) -> Decimal:
    """Safe multiplication of monetary value by a factor."""
    return to_decimal(value) * to_decimal(factor)


def percent(value: Number, percent_value: Number) -> Decimal:
    """Calculate percentage of a monetary value."""
    return multiply(value, to_decimal(percent_value) / Decimal(100))
