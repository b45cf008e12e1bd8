"""Polar geometry for the clock face.

Angles are in radians with 0 pointing along +x and y growing downwards, so
``START_ANGLE`` (-pi/2) is the 12 o'clock direction.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

from .models import Point, ViewportState

START_ANGLE = -math.pi / 2

TICK_COUNT = 60
HOUR_COUNT = 12

DOTS_RADIUS_RATIO = 5 / 6
LABELS_RADIUS_RATIO = 11 / 16
LABEL_TEXT_RATIO = 2 / 7
LABEL_SCALE_X = 0.9
LABEL_LETTER_SPACING = -0.15
RING_WIDTH_DIVISOR = 12
MAJOR_DOT_DIVISOR = 96
MINOR_DOT_DIVISOR = 128


@dataclass(frozen=True)
class HandSpec:
    """Segment from ``tail`` behind the center to ``tip`` ahead of it, in radii."""

    width_divisor: float
    tail: float
    tip: float

    def stroke_width(self, radius: float) -> float:
        return radius / self.width_divisor


HOUR_HAND = HandSpec(width_divisor=15, tail=3 / 14, tip=7 / 14)
MINUTE_HAND = HandSpec(width_divisor=40, tail=2 / 7, tip=5 / 7)
SECOND_HAND = HandSpec(width_divisor=80, tail=1 / 14, tip=5 / 7)
# Counterweight: both ends stay behind the center.
SECOND_HAND_BASE = HandSpec(width_divisor=50, tail=2 / 7, tip=-1 / 14)


def viewport_for_size(width: int, height: int) -> ViewportState:
    return ViewportState.from_size(width, height)


def point_on_circle(center: Point, radius: float, angle: float) -> Point:
    return Point(center.x + radius * math.cos(angle), center.y + radius * math.sin(angle))


def dot_angle(index: int) -> float:
    return index * (math.pi / 30)


def hour_label_angle(hour: int) -> float:
    return START_ANGLE + hour * (math.pi / 6)


def hour_hand_angle(hour: int, minute: int) -> float:
    return math.pi * (hour % 12 + minute / 60) / 6 + START_ANGLE


def minute_hand_angle(minute: int) -> float:
    return math.pi * minute / 30 + START_ANGLE


def second_hand_angle(second: int) -> float:
    return math.pi * second / 30 + START_ANGLE


def hand_segment(center: Point, radius: float, angle: float, tail: float, tip: float) -> tuple[Point, Point]:
    dx = math.cos(angle) * radius
    dy = math.sin(angle) * radius
    start = Point(center.x - dx * tail, center.y - dy * tail)
    end = Point(center.x + dx * tip, center.y + dy * tip)
    return start, end
