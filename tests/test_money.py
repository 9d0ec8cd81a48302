"""Tests for money helpers"""
import pytest
from decimal import Decimal

from storefront.money import format_money, parse_decimal, round_money, to_decimal, to_float


def test_to_decimal_float_keeps_cents():
    assert to_decimal(59.99) == Decimal("59.99")


def test_to_decimal_invalid_is_zero():
    assert to_decimal("abc") == Decimal("0")
    assert to_decimal(None) == Decimal("0")


@pytest.mark.parametrize("value", [None, True, "abc", "NaN", "Infinity", [1]])
def test_parse_decimal_rejects(value):
    with pytest.raises(ValueError):
        parse_decimal(value)


def test_round_money_half_up():
    assert round_money(Decimal("2.005")) == Decimal("2.01")
    assert round_money(Decimal("71.979")) == Decimal("71.98")


def test_format_money():
    assert format_money(Decimal("27.99")) == "$27.99"
    assert format_money(0) == "$0.00"
    assert format_money(Decimal("1234.5")) == "$1,234.50"


def test_format_money_negative():
    assert format_money(Decimal("-5")) == "-$5.00"


def test_format_money_other_currencies():
    assert format_money(Decimal("1500.4"), "JPY") == "1,500 ¥"
    assert format_money(Decimal("10"), "EUR") == "€10.00"


def test_to_float_rounds():
    assert to_float(Decimal("5.999")) == 6.0
