"""Typed renderer models."""

from __future__ import annotations

from dataclasses import asdict, dataclass, fields
from datetime import datetime
from enum import Enum
from typing import Any, ClassVar, Union

OPAQUE_BLACK = 0xFF000000
TRANSPARENT = 0x00000000


class PaintStyle(str, Enum):
    FILL = "fill"
    STROKE = "stroke"


@dataclass(frozen=True)
class Point:
    x: float
    y: float


@dataclass(frozen=True)
class ClockStyle:
    """Seven resolved ARGB colors, one per face layer."""

    ring: int = OPAQUE_BLACK
    hour_hand: int = OPAQUE_BLACK
    minute_hand: int = OPAQUE_BLACK
    second_hand: int = TRANSPARENT
    dots: int = TRANSPARENT
    text: int = OPAQUE_BLACK
    background: int = TRANSPARENT

    def __post_init__(self) -> None:
        # Signed 32-bit host colors compare equal to their unsigned form.
        for f in fields(self):
            object.__setattr__(self, f.name, int(getattr(self, f.name)) & 0xFFFFFFFF)


@dataclass(frozen=True)
class ViewportState:
    width: int
    height: int
    center: Point
    radius: float

    @classmethod
    def from_size(cls, width: int, height: int) -> ViewportState:
        return cls(
            width=width,
            height=height,
            center=Point(width / 2, height / 2),
            radius=max(0.0, min(width, height) / 2),
        )


@dataclass(frozen=True)
class TimeSample:
    hour: int
    minute: int
    second: int

    @property
    def hour12(self) -> int:
        return self.hour % 12

    @classmethod
    def from_datetime(cls, value: datetime) -> TimeSample:
        return cls(hour=value.hour, minute=value.minute, second=value.second)

    @classmethod
    def now(cls) -> TimeSample:
        return cls.from_datetime(datetime.now())


@dataclass(frozen=True)
class Circle:
    kind: ClassVar[str] = "circle"

    center: Point
    radius: float
    color: int
    paint: PaintStyle
    stroke_width: float = 0.0

    def to_dict(self) -> dict[str, Any]:
        return {"kind": self.kind, **asdict(self), "paint": self.paint.value}


@dataclass(frozen=True)
class Line:
    kind: ClassVar[str] = "line"

    start: Point
    end: Point
    color: int
    stroke_width: float

    def to_dict(self) -> dict[str, Any]:
        return {"kind": self.kind, **asdict(self)}


@dataclass(frozen=True)
class Text:
    kind: ClassVar[str] = "text"

    position: Point
    text: str
    color: int
    size: float
    # Horizontal glyph scale and extra spacing between glyphs in ems.
    scale_x: float = 1.0
    letter_spacing: float = 0.0

    def to_dict(self) -> dict[str, Any]:
        return {"kind": self.kind, **asdict(self)}


DrawPrimitive = Union[Circle, Line, Text]
