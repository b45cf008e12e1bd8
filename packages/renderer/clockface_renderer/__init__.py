"""Renderer package for analog clock face composition."""

from .colors import format_color, parse_color, to_rgba
from .compositor import ClockCompositor, TextMetrics
from .geometry import START_ANGLE, viewport_for_size
from .models import Circle, ClockStyle, DrawPrimitive, Line, PaintStyle, Point, Text, TimeSample, ViewportState
from .themes import DEFAULT_THEME_NAME, get_theme, list_themes

try:  # pragma: no cover - optional at import time for test environments
    from .raster import ClockRasterizer
except Exception:  # pragma: no cover
    ClockRasterizer = None  # type: ignore[assignment]

__all__ = [
    "Circle",
    "ClockCompositor",
    "ClockStyle",
    "DEFAULT_THEME_NAME",
    "DrawPrimitive",
    "Line",
    "PaintStyle",
    "Point",
    "START_ANGLE",
    "Text",
    "TextMetrics",
    "TimeSample",
    "ViewportState",
    "format_color",
    "get_theme",
    "list_themes",
    "parse_color",
    "to_rgba",
    "viewport_for_size",
]

if ClockRasterizer is not None:
    __all__.append("ClockRasterizer")
