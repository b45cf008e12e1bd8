"""ARGB color parsing and conversion helpers."""

from __future__ import annotations


def parse_color(value: str | int) -> int:
    if isinstance(value, bool):
        raise ValueError(f"Invalid color: {value!r}")
    if isinstance(value, int):
        return value & 0xFFFFFFFF
    if not isinstance(value, str) or not value.startswith("#"):
        raise ValueError(f"Invalid color: {value!r}")

    digits = value[1:]
    if len(digits) == 6:
        digits = "FF" + digits
    if len(digits) != 8:
        raise ValueError(f"Invalid color: {value!r}")
    try:
        return int(digits, 16)
    except ValueError:
        raise ValueError(f"Invalid color: {value!r}") from None


def format_color(argb: int) -> str:
    return f"#{argb & 0xFFFFFFFF:08X}"


def to_rgba(argb: int) -> tuple[int, int, int, int]:
    argb &= 0xFFFFFFFF
    return ((argb >> 16) & 0xFF, (argb >> 8) & 0xFF, argb & 0xFF, (argb >> 24) & 0xFF)
