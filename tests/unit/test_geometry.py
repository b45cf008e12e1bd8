import math
import sys
import unittest
from pathlib import Path

ROOT = Path(__file__).resolve().parents[2]
sys.path.insert(0, str(ROOT / "packages" / "renderer"))

from clockface_renderer.geometry import (
    SECOND_HAND_BASE,
    START_ANGLE,
    dot_angle,
    hand_segment,
    hour_hand_angle,
    hour_label_angle,
    minute_hand_angle,
    point_on_circle,
    second_hand_angle,
    viewport_for_size,
)
from clockface_renderer.models import Point


class ViewportTests(unittest.TestCase):
    def test_radius_is_half_the_shorter_side(self):
        for width, height in [(200, 100), (100, 200), (240, 240), (1, 0), (0, 0), (37, 91)]:
            vp = viewport_for_size(width, height)
            self.assertEqual(vp.radius, min(width, height) / 2)
            self.assertEqual(vp.center, Point(width / 2, height / 2))

    def test_negative_size_gives_zero_radius(self):
        vp = viewport_for_size(-10, 40)
        self.assertEqual(vp.radius, 0.0)
        self.assertGreaterEqual(vp.radius, 0.0)


class AngleTests(unittest.TestCase):
    def test_midnight_points_up(self):
        self.assertAlmostEqual(hour_hand_angle(0, 0), -math.pi / 2)
        self.assertAlmostEqual(minute_hand_angle(0), -math.pi / 2)
        self.assertAlmostEqual(second_hand_angle(0), -math.pi / 2)
        self.assertEqual(START_ANGLE, -math.pi / 2)

    def test_afternoon_matches_morning(self):
        for hour in range(12):
            for minute in (0, 17, 59):
                self.assertAlmostEqual(hour_hand_angle(hour + 12, minute), hour_hand_angle(hour, minute))

    def test_hour_24_wraps_to_midnight(self):
        self.assertAlmostEqual(hour_hand_angle(24, 0), hour_hand_angle(0, 0))

    def test_hour_hand_moves_with_minutes(self):
        angles = [hour_hand_angle(7, m) for m in range(60)]
        for earlier, later in zip(angles, angles[1:]):
            self.assertGreater(later, earlier)
        self.assertLess(angles[-1], hour_hand_angle(8, 0))
        self.assertAlmostEqual(angles[30], hour_hand_angle(7, 0) + math.pi / 12)

    def test_three_oclock_points_right(self):
        self.assertAlmostEqual(hour_hand_angle(3, 0), 0.0)
        self.assertAlmostEqual(minute_hand_angle(15), 0.0)
        self.assertAlmostEqual(second_hand_angle(45), math.pi)

    def test_dot_and_label_angles(self):
        self.assertEqual(dot_angle(0), 0.0)
        self.assertAlmostEqual(dot_angle(15), math.pi / 2)
        self.assertAlmostEqual(hour_label_angle(12), 3 * math.pi / 2)
        self.assertAlmostEqual(hour_label_angle(3), 0.0)


class SegmentTests(unittest.TestCase):
    def test_point_on_circle(self):
        p = point_on_circle(Point(10, 20), 5, 0.0)
        self.assertAlmostEqual(p.x, 15)
        self.assertAlmostEqual(p.y, 20)

    def test_hand_extends_behind_center(self):
        start, end = hand_segment(Point(100, 100), 100, -math.pi / 2, 3 / 14, 7 / 14)
        self.assertAlmostEqual(start.x, 100)
        self.assertAlmostEqual(start.y, 100 + 100 * 3 / 14)
        self.assertAlmostEqual(end.x, 100)
        self.assertAlmostEqual(end.y, 50)

    def test_second_hand_base_stays_behind_center(self):
        start, end = hand_segment(Point(0, 0), 140, -math.pi / 2, SECOND_HAND_BASE.tail, SECOND_HAND_BASE.tip)
        self.assertAlmostEqual(start.y, 40)
        self.assertAlmostEqual(end.y, 10)
        self.assertAlmostEqual(SECOND_HAND_BASE.stroke_width(100), 2.0)


if __name__ == "__main__":
    unittest.main()
