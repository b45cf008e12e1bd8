"""Built-in clock face color themes."""

from __future__ import annotations

from .models import ClockStyle

DEFAULT_THEME_NAME = "Classic"

THEMES: dict[str, ClockStyle] = {
    "Classic": ClockStyle(),
    "Paper": ClockStyle(
        ring=0xFF2B2B2B,
        hour_hand=0xFF1E1E1E,
        minute_hand=0xFF3A3A3A,
        second_hand=0xFFD1342F,
        dots=0xFF6B6B6B,
        text=0xFF1E1E1E,
        background=0xFFF7F3EA,
    ),
    "Neon Slate": ClockStyle(
        ring=0xFF35D9FF,
        hour_hand=0xFFF4F7FF,
        minute_hand=0xFFA9B5D1,
        second_hand=0xFF8CFFB5,
        dots=0xFF35D9FF,
        text=0xFFF4F7FF,
        background=0xFF131B33,
    ),
    "Solar Drift": ClockStyle(
        ring=0xFFFFB347,
        hour_hand=0xFFFFF7E8,
        minute_hand=0xFFE3CFA8,
        second_hand=0xFFFFD166,
        dots=0xFFFFB347,
        text=0xFFFFF7E8,
        background=0xFF362315,
    ),
}


def list_themes() -> list[str]:
    return sorted(THEMES.keys())


def get_theme(name: str | None) -> ClockStyle:
    if not name:
        return THEMES[DEFAULT_THEME_NAME]
    return THEMES.get(name, THEMES[DEFAULT_THEME_NAME])
