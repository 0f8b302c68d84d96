"""Tests for theme normalisation."""

import pytest

from bookconnect.catalog.themes import normalize_theme, palette_for


@pytest.mark.parametrize("value", ["night", "Night", " night "])
def test_night(value):
    assert normalize_theme(value) == "night"


@pytest.mark.parametrize("value", ["day", "", None, "sepia", 3])
def test_everything_else_is_day(value):
    assert normalize_theme(value) == "day"


def test_palettes_swap_colours():
    day, night = palette_for("day"), palette_for("night")

    assert day["--color-dark"] == night["--color-light"]
    assert day["--color-light"] == night["--color-dark"]


def test_palette_is_a_copy():
    palette_for("day")["--color-dark"] = "0, 0, 0"

    assert palette_for("day")["--color-dark"] == "10, 10, 20"
