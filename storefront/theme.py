"""Dark/light theme preference, persisted in a cookie."""
from typing import Optional

THEME_COOKIE = "gta6_theme"
THEME_DARK = "dark"
THEME_LIGHT = "light"
THEMES = (THEME_DARK, THEME_LIGHT)
DEFAULT_THEME = THEME_DARK

# One year
THEME_COOKIE_MAX_AGE = 365 * 24 * 3600


def resolve_theme(value: Optional[str]) -> str:
    """Theme for a stored value; anything unknown resolves to the default."""
    value = (value or "").strip().lower()
    return value if value in THEMES else DEFAULT_THEME


def toggle_theme(current: Optional[str]) -> str:
    return THEME_LIGHT if resolve_theme(current) == THEME_DARK else THEME_DARK
