"""Tests for theme preference helpers"""
import pytest

from storefront.theme import DEFAULT_THEME, resolve_theme, toggle_theme


@pytest.mark.parametrize("value,expected", [
    ("dark", "dark"),
    ("LIGHT", "light"),
    (None, DEFAULT_THEME),
    ("neon", DEFAULT_THEME),
])
def test_resolve_theme(value, expected):
    assert resolve_theme(value) == expected


def test_toggle_theme():
    assert toggle_theme("dark") == "light"
    assert toggle_theme("light") == "dark"
    assert toggle_theme(None) == "light"
