import math
import sys
import unittest
from pathlib import Path

ROOT = Path(__file__).resolve().parents[2]
sys.path.insert(0, str(ROOT / "packages" / "renderer"))

from clockface_renderer.compositor import ClockCompositor
from clockface_renderer.models import Circle, ClockStyle, Line, PaintStyle, Text, TimeSample, ViewportState

STYLE = ClockStyle(
    ring=0xFF000001,
    hour_hand=0xFF000002,
    minute_hand=0xFF000003,
    second_hand=0xFF000004,
    dots=0xFF000005,
    text=0xFF000006,
    background=0xFF000007,
)


def fixed_metrics(_size):
    return 10.0, 4.0


def _angle(line):
    return math.atan2(line.end.y - line.start.y, line.end.x - line.start.x)


class CompositorTests(unittest.TestCase):
    def setUp(self):
        self.compositor = ClockCompositor(metrics=fixed_metrics)
        self.vp = ViewportState.from_size(400, 300)
        self.r = self.vp.radius

    def render(self, hour=0, minute=0, second=0, vp=None):
        return self.compositor.render(STYLE, vp or self.vp, TimeSample(hour, minute, second))

    def test_layer_order(self):
        out = self.render(10, 8, 30)
        self.assertEqual(len(out), 78)
        kinds = [p.kind for p in out]
        self.assertEqual(kinds[:62], ["circle"] * 62)
        self.assertEqual(kinds[62:74], ["text"] * 12)
        self.assertEqual(kinds[74:], ["line"] * 4)
        colors = [out[0].color, out[1].color, out[2].color, out[62].color] + [p.color for p in out[74:]]
        self.assertEqual(
            colors,
            [STYLE.background, STYLE.ring, STYLE.dots, STYLE.text, STYLE.hour_hand, STYLE.minute_hand, STYLE.second_hand, STYLE.second_hand],
        )

    def test_background_and_ring(self):
        base, ring = self.render()[:2]
        self.assertEqual(base, Circle(center=self.vp.center, radius=self.r, color=STYLE.background, paint=PaintStyle.FILL))
        self.assertEqual(ring.paint, PaintStyle.STROKE)
        self.assertAlmostEqual(ring.stroke_width, self.r / 12)
        self.assertAlmostEqual(ring.radius, self.r - self.r / 24)

    def test_hour_position_dots_are_larger(self):
        dots = self.render()[2:62]
        for i, dot in enumerate(dots):
            expected = self.r / 96 if i % 5 == 0 else self.r / 128
            self.assertAlmostEqual(dot.radius, expected)
            self.assertEqual(dot.paint, PaintStyle.FILL)
            distance = math.hypot(dot.center.x - self.vp.center.x, dot.center.y - self.vp.center.y)
            self.assertAlmostEqual(distance, self.r * 5 / 6)
        self.assertAlmostEqual(dots[0].center.x, self.vp.center.x + self.r * 5 / 6)
        self.assertAlmostEqual(dots[0].center.y, self.vp.center.y)

    def test_labels_spaced_thirty_degrees_with_twelve_on_top(self):
        labels = self.render()[62:74]
        self.assertEqual([t.text for t in labels], [str(i) for i in range(1, 13)])
        shift = (10.0 - 4.0) / 2
        angles = []
        for label in labels:
            self.assertIsInstance(label, Text)
            self.assertAlmostEqual(label.size, self.r * 2 / 7)
            dx = label.position.x - self.vp.center.x
            dy = label.position.y - shift - self.vp.center.y
            self.assertAlmostEqual(math.hypot(dx, dy), self.r * 11 / 16)
            angles.append(math.atan2(dy, dx))
        for a, b in zip(angles, angles[1:]):
            step = (b - a) % (2 * math.pi)
            self.assertAlmostEqual(step, math.pi / 6)
        self.assertAlmostEqual(angles[-1], -math.pi / 2)
        top = min(labels, key=lambda t: t.position.y)
        self.assertEqual(top.text, "12")

    def test_midnight_hands_point_up(self):
        hands = self.render(0, 0, 0)[74:]
        for line in hands[:3]:
            self.assertIsInstance(line, Line)
            self.assertAlmostEqual(_angle(line), -math.pi / 2)
            self.assertAlmostEqual(line.start.x, self.vp.center.x)

    def test_hand_geometry(self):
        hour, minute, thin, base = self.render(0, 0, 0)[74:]
        cy = self.vp.center.y
        self.assertAlmostEqual(hour.stroke_width, self.r / 15)
        self.assertAlmostEqual(hour.start.y, cy + self.r * 3 / 14)
        self.assertAlmostEqual(hour.end.y, cy - self.r * 7 / 14)
        self.assertAlmostEqual(minute.stroke_width, self.r / 40)
        self.assertAlmostEqual(minute.start.y, cy + self.r * 2 / 7)
        self.assertAlmostEqual(minute.end.y, cy - self.r * 5 / 7)
        self.assertAlmostEqual(thin.stroke_width, self.r / 80)
        self.assertAlmostEqual(thin.start.y, cy + self.r / 14)
        self.assertAlmostEqual(thin.end.y, cy - self.r * 5 / 7)
        self.assertAlmostEqual(base.stroke_width, self.r / 50)
        self.assertAlmostEqual(base.start.y, cy + self.r * 2 / 7)
        self.assertAlmostEqual(base.end.y, cy + self.r / 14)

    def test_pm_hour_renders_like_am(self):
        self.assertEqual(self.render(13, 20, 5), self.render(1, 20, 5))
        self.assertEqual(self.render(12, 0, 0), self.render(0, 0, 0))

    def test_hour_hand_includes_minute_fraction(self):
        hour = self.render(3, 30, 0)[74]
        self.assertAlmostEqual(_angle(hour), 3.5 * math.pi / 6 - math.pi / 2)

    def test_zero_radius_is_degenerate_not_an_error(self):
        out = self.render(5, 5, 5, vp=ViewportState.from_size(0, 0))
        self.assertEqual(len(out), 78)
        for p in out:
            if isinstance(p, Circle):
                self.assertEqual(p.radius, 0.0)
            elif isinstance(p, Line):
                self.assertEqual(p.start, p.end)
                self.assertEqual(p.stroke_width, 0.0)

    def test_labels_are_condensed(self):
        for label in self.render()[62:74]:
            self.assertEqual(label.scale_x, 0.9)
            self.assertEqual(label.letter_spacing, -0.15)

    def test_pure_for_same_inputs(self):
        self.assertEqual(self.render(9, 41, 12), self.render(9, 41, 12))

    def test_samples_now_when_time_missing(self):
        out = self.compositor.render(STYLE, self.vp)
        self.assertEqual(len(out), 78)

    def test_primitive_dicts(self):
        out = self.render()
        self.assertEqual(out[0].to_dict()["kind"], "circle")
        self.assertEqual(out[0].to_dict()["paint"], "fill")
        self.assertEqual(out[62].to_dict()["text"], "1")
        self.assertIn("start", out[-1].to_dict())


if __name__ == "__main__":
    unittest.main()
