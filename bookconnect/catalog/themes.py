"""
Day and night colour palettes.

The page styles read two CSS custom properties, each an RGB triplet.
Switching theme swaps them.
"""

from typing import Any, Dict

from typing_extensions import Literal

Theme = Literal["day", "night"]

THEME_PALETTES: Dict[str, Dict[str, str]] = {
    "day": {"--color-dark": "10, 10, 20", "--color-light": "255, 255, 255"},
    "night": {"--color-dark": "255, 255, 255", "--color-light": "10, 10, 20"},
}


def normalize_theme(value: Any) -> Theme:
    """Map a submitted theme to ``"night"`` or, for anything else, ``"day"``."""
    if isinstance(value, str) and value.strip().lower() == "night":
        return "night"
    return "day"


def palette_for(theme: Any) -> Dict[str, str]:
    return dict(THEME_PALETTES[normalize_theme(theme)])
