import unittest
import sys
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from talentmatch.schemas import Dimension, MatchBreakdown, MatchDetail, MatchWeights
from talentmatch.scoring import calculate_weighted_score, invalid_breakdown


def breakdown(overall=70, skills=80, salary=100, culture=60, traits=100):
    return MatchBreakdown(
        overall_score=overall,
        details={
            Dimension.SKILLS: MatchDetail(score=skills, reason="skills"),
            Dimension.SALARY: MatchDetail(score=salary, reason="salary"),
            Dimension.CULTURE: MatchDetail(score=culture, reason="culture"),
            Dimension.TRAITS: MatchDetail(score=traits, reason="traits"),
        },
    )


class WeightedScoreTests(unittest.TestCase):
    def test_all_zero_weights_fall_back_to_overall(self):
        self.assertEqual(calculate_weighted_score(breakdown(), MatchWeights()), 70)

    def test_weighted_three_axis_view(self):
        weights = MatchWeights(skills=40, compensation=30, culture=30)
        # 80 x 0.4 + 100 x 0.3 + ((60 + 100) / 2) x 0.3 = 86
        self.assertEqual(calculate_weighted_score(breakdown(), weights), 86)

    def test_weights_are_proportions(self):
        small = MatchWeights(skills=2, compensation=1, culture=1)
        large = MatchWeights(skills=50, compensation=25, culture=25)
        self.assertEqual(calculate_weighted_score(breakdown(), small), calculate_weighted_score(breakdown(), large))

    def test_single_axis(self):
        self.assertEqual(calculate_weighted_score(breakdown(), MatchWeights(compensation=1)), 100)
        self.assertEqual(calculate_weighted_score(breakdown(), MatchWeights(culture=10)), 80)

    def test_does_not_touch_overall(self):
        original = breakdown()
        calculate_weighted_score(original, MatchWeights(skills=100))
        self.assertEqual(original.overall_score, 70)

    def test_invalid_breakdown_keeps_zero(self):
        self.assertEqual(calculate_weighted_score(invalid_breakdown(), MatchWeights(skills=100)), 0)

    def test_hard_gated_breakdown_keeps_overall(self):
        gated = breakdown(overall=0, skills=100).model_copy(
            update={"deal_breakers": ("Missing required certifications",)}
        )
        self.assertEqual(calculate_weighted_score(gated, MatchWeights(skills=100)), 0)


if __name__ == "__main__":
    unittest.main()
