import unittest
import sys
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from talentmatch.core.config.scoring import get_scoring_config
from talentmatch.geometry import (
    apply_snap,
    clamp_to_triangle,
    distance,
    drag_to_weights,
    is_inside_triangle,
    match_preset,
    normalize_weights,
    point_to_weights,
    project_to_segment,
    release_to_weights,
    step_direction,
    step_weights,
    weights_to_point,
)
from talentmatch.schemas import MatchWeights, Point, WeightAxis


def triple(weights):
    return (weights.skills, weights.compensation, weights.culture)


class WeightPointMappingTests(unittest.TestCase):
    def setUp(self):
        self.layout = get_scoring_config().triangle

    def test_weights_to_point_is_convex_combination(self):
        point = weights_to_point(MatchWeights(skills=40, compensation=30, culture=30))
        self.assertAlmostEqual(point.x, 150)
        self.assertAlmostEqual(point.y, 146)

    def test_zero_weights_map_to_centroid(self):
        self.assertEqual(weights_to_point(MatchWeights()), self.layout.centroid)

    def test_vertices_and_centroid(self):
        self.assertEqual(triple(point_to_weights(self.layout.vertices[WeightAxis.SKILLS])), (100, 0, 0))
        self.assertEqual(triple(point_to_weights(self.layout.vertices[WeightAxis.COMPENSATION])), (0, 100, 0))
        self.assertEqual(triple(point_to_weights(self.layout.vertices[WeightAxis.CULTURE])), (0, 0, 100))
        self.assertEqual(triple(point_to_weights(self.layout.centroid)), (33, 33, 34))

    def test_boundary_point_is_well_defined(self):
        midpoint = Point(x=150, y=230)
        self.assertEqual(triple(point_to_weights(midpoint)), (0, 50, 50))

    def test_round_trip_within_tolerance(self):
        for skills in range(0, 101, 5):
            for compensation in range(0, 101 - skills, 5):
                original = MatchWeights(skills=skills, compensation=compensation, culture=100 - skills - compensation)
                with self.subTest(weights=triple(original)):
                    result = point_to_weights(weights_to_point(original))
                    self.assertEqual(result.total, 100)
                    for axis in WeightAxis:
                        self.assertLessEqual(abs(result.get(axis) - original.get(axis)), 2)

    def test_normalize_weights(self):
        self.assertEqual(triple(normalize_weights(MatchWeights(skills=1, compensation=1, culture=2))), (25, 25, 50))
        self.assertEqual(triple(normalize_weights(MatchWeights())), (33, 33, 34))
        # Both leading shares round up; the overflow never leaves a negative third.
        self.assertEqual(
            triple(normalize_weights(MatchWeights(skills=50.5, compensation=49.5, culture=0))),
            (50, 50, 0),
        )


class ContainmentTests(unittest.TestCase):
    def setUp(self):
        self.layout = get_scoring_config().triangle

    def test_inside_and_outside(self):
        self.assertTrue(is_inside_triangle(self.layout.centroid))
        self.assertTrue(is_inside_triangle(self.layout.vertices[WeightAxis.CULTURE]))
        self.assertFalse(is_inside_triangle(Point(x=0, y=0)))
        self.assertFalse(is_inside_triangle(Point(x=150, y=231)))

    def test_inside_point_is_unchanged(self):
        point = Point(x=150, y=150)
        self.assertEqual(clamp_to_triangle(point), point)

    def test_clamp_projects_to_nearest_edge(self):
        self.assertEqual(clamp_to_triangle(Point(x=150, y=300)), Point(x=150, y=230))
        self.assertEqual(clamp_to_triangle(Point(x=150, y=0)), self.layout.vertices[WeightAxis.SKILLS])

    def test_clamped_points_are_inside_and_nearest(self):
        vertices = list(self.layout.vertices.values())
        for point in (Point(x=0, y=0), Point(x=300, y=100), Point(x=-50, y=400), Point(x=400, y=240)):
            with self.subTest(point=point):
                clamped = clamp_to_triangle(point)
                self.assertTrue(is_inside_triangle(clamped))
                for vertex in vertices:
                    self.assertLessEqual(distance(point, clamped), distance(point, vertex) + 1e-9)

    def test_project_to_segment(self):
        start = Point(x=0, y=0)
        end = Point(x=10, y=0)
        self.assertEqual(project_to_segment(Point(x=5, y=5), start, end), Point(x=5, y=0))
        self.assertEqual(project_to_segment(Point(x=-5, y=5), start, end), start)
        self.assertEqual(project_to_segment(Point(x=15, y=-5), start, end), end)
        self.assertEqual(project_to_segment(Point(x=3, y=3), start, start), start)


class SnapTests(unittest.TestCase):
    def setUp(self):
        self.layout = get_scoring_config().triangle

    def test_snap_to_centroid_and_vertex(self):
        self.assertEqual(apply_snap(Point(x=155, y=165)), self.layout.centroid)
        self.assertEqual(apply_snap(Point(x=150, y=35)), self.layout.vertices[WeightAxis.SKILLS])
        far = Point(x=100, y=180)
        self.assertEqual(apply_snap(far), far)

    def test_snap_is_idempotent(self):
        for point in (Point(x=155, y=165), Point(x=270, y=222), Point(x=100, y=180), Point(x=30, y=225)):
            with self.subTest(point=point):
                once = apply_snap(point)
                self.assertEqual(apply_snap(once), once)

    def test_gesture_helpers(self):
        self.assertEqual(triple(release_to_weights(Point(x=152, y=158))), (33, 33, 34))
        self.assertEqual(triple(release_to_weights(Point(x=148, y=5))), (100, 0, 0))
        self.assertEqual(triple(drag_to_weights(Point(x=150, y=0))), (100, 0, 0))
        dragged = drag_to_weights(Point(x=152, y=158))
        self.assertEqual(dragged.total, 100)


class SteppingTests(unittest.TestCase):
    def setUp(self):
        self.weights = MatchWeights(skills=40, compensation=30, culture=30)

    def test_directions(self):
        self.assertEqual(triple(step_direction(self.weights, "up")), (45, 28, 27))
        self.assertEqual(triple(step_direction(self.weights, "down")), (35, 33, 32))
        self.assertEqual(triple(step_direction(self.weights, "left")), (37, 28, 35))
        self.assertEqual(triple(step_direction(self.weights, "right")), (37, 35, 28))

    def test_unknown_direction(self):
        with self.assertRaises(ValueError):
            step_direction(self.weights, "sideways")

    def test_sum_is_always_one_hundred(self):
        weights = self.weights
        for direction in ("up", "up", "right", "left", "down", "right", "right", "up") * 5:
            weights = step_direction(weights, direction)
            self.assertEqual(weights.total, 100)
            self.assertTrue(all(weights.get(axis) >= 0 for axis in WeightAxis))

    def test_saturated_axis(self):
        full = MatchWeights(skills=100)
        self.assertEqual(triple(step_weights(full, WeightAxis.SKILLS, 5)), (100, 0, 0))
        self.assertEqual(triple(step_weights(full, WeightAxis.SKILLS, -5)), (95, 2, 3))
        empty = MatchWeights(compensation=100)
        self.assertEqual(triple(step_weights(empty, WeightAxis.SKILLS, -5)), (0, 100, 0))


class PresetTests(unittest.TestCase):
    def test_active_preset_detection(self):
        self.assertEqual(match_preset(MatchWeights(skills=33, compensation=33, culture=34)), "balanced")
        self.assertEqual(match_preset(MatchWeights(skills=61, compensation=19, culture=20)), "skills_first")
        self.assertEqual(match_preset(MatchWeights(skills=20, compensation=20, culture=60)), "culture_first")
        self.assertIsNone(match_preset(MatchWeights(skills=40, compensation=30, culture=30)))


if __name__ == "__main__":
    unittest.main()
