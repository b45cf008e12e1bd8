"""Clock face compositor: turns style, viewport, and time into draw primitives."""

from __future__ import annotations

from typing import Callable

from .geometry import (
    DOTS_RADIUS_RATIO,
    HOUR_COUNT,
    HOUR_HAND,
    LABEL_LETTER_SPACING,
    LABEL_SCALE_X,
    LABEL_TEXT_RATIO,
    LABELS_RADIUS_RATIO,
    MAJOR_DOT_DIVISOR,
    MINOR_DOT_DIVISOR,
    MINUTE_HAND,
    RING_WIDTH_DIVISOR,
    SECOND_HAND,
    SECOND_HAND_BASE,
    TICK_COUNT,
    HandSpec,
    dot_angle,
    hand_segment,
    hour_hand_angle,
    hour_label_angle,
    minute_hand_angle,
    point_on_circle,
    second_hand_angle,
)
from .models import Circle, ClockStyle, DrawPrimitive, Line, PaintStyle, Point, Text, TimeSample, ViewportState

# size -> (ascent, descent), both positive distances from the baseline.
TextMetrics = Callable[[float], tuple[float, float]]


def _default_metrics(size: float) -> tuple[float, float]:
    from .raster import font_metrics

    return font_metrics(size)


class ClockCompositor:
    """Emits the face layers back to front: base, ring, dots, labels, hands."""

    def __init__(self, metrics: TextMetrics | None = None) -> None:
        self.metrics = metrics or _default_metrics

    def render(
        self,
        style: ClockStyle,
        viewport: ViewportState,
        time: TimeSample | None = None,
    ) -> list[DrawPrimitive]:
        sample = time if time is not None else TimeSample.now()
        out: list[DrawPrimitive] = []
        out.append(self._base(style, viewport))
        out.append(self._ring(style, viewport))
        out.extend(self._dots(style, viewport))
        out.extend(self._labels(style, viewport))
        out.extend(self._hands(style, viewport, sample))
        return out

    def _base(self, style: ClockStyle, vp: ViewportState) -> Circle:
        return Circle(center=vp.center, radius=vp.radius, color=style.background, paint=PaintStyle.FILL)

    def _ring(self, style: ClockStyle, vp: ViewportState) -> Circle:
        width = vp.radius / RING_WIDTH_DIVISOR
        return Circle(
            center=vp.center,
            radius=vp.radius - width / 2,
            color=style.ring,
            paint=PaintStyle.STROKE,
            stroke_width=width,
        )

    def _dots(self, style: ClockStyle, vp: ViewportState) -> list[Circle]:
        track = vp.radius * DOTS_RADIUS_RATIO
        dots = []
        for i in range(TICK_COUNT):
            size = vp.radius / MAJOR_DOT_DIVISOR if i % 5 == 0 else vp.radius / MINOR_DOT_DIVISOR
            dots.append(
                Circle(
                    center=point_on_circle(vp.center, track, dot_angle(i)),
                    radius=size,
                    color=style.dots,
                    paint=PaintStyle.FILL,
                )
            )
        return dots

    def _labels(self, style: ClockStyle, vp: ViewportState) -> list[Text]:
        size = vp.radius * LABEL_TEXT_RATIO
        track = vp.radius * LABELS_RADIUS_RATIO
        ascent, descent = self.metrics(size)
        # Shift the baseline so the glyph box is centered on the anchor.
        baseline_shift = (ascent - descent) / 2
        labels = []
        for hour in range(1, HOUR_COUNT + 1):
            anchor = point_on_circle(vp.center, track, hour_label_angle(hour))
            labels.append(
                Text(
                    position=Point(anchor.x, anchor.y + baseline_shift),
                    text=str(hour),
                    color=style.text,
                    size=size,
                    scale_x=LABEL_SCALE_X,
                    letter_spacing=LABEL_LETTER_SPACING,
                )
            )
        return labels

    def _hands(self, style: ClockStyle, vp: ViewportState, t: TimeSample) -> list[Line]:
        second_angle = second_hand_angle(t.second)
        return [
            self._hand(vp, HOUR_HAND, hour_hand_angle(t.hour12, t.minute), style.hour_hand),
            self._hand(vp, MINUTE_HAND, minute_hand_angle(t.minute), style.minute_hand),
            self._hand(vp, SECOND_HAND, second_angle, style.second_hand),
            self._hand(vp, SECOND_HAND_BASE, second_angle, style.second_hand),
        ]

    @staticmethod
    def _hand(vp: ViewportState, spec: HandSpec, angle: float, color: int) -> Line:
        start, end = hand_segment(vp.center, vp.radius, angle, spec.tail, spec.tip)
        return Line(start=start, end=end, color=color, stroke_width=spec.stroke_width(vp.radius))
