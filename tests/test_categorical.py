import unittest
import sys
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from talentmatch.schemas import WorkStyleKey
from talentmatch.scoring.categorical import match_categorical, merge_requirements

WEIGHTS = {WorkStyleKey.WORK_INTENSITY: 1.0, WorkStyleKey.WORK_HOURS: 0.6}


class CategoricalMatcherTests(unittest.TestCase):
    def _match(self, candidate, requirements, dealbreakers=()):
        return match_categorical(
            candidate,
            requirements,
            WEIGHTS,
            default_weight=0.5,
            no_requirements_score=50,
            dealbreakers=dealbreakers,
        )

    def test_no_requirements(self):
        result = self._match({WorkStyleKey.WORK_HOURS: "flexible"}, {})
        self.assertEqual(result.score, 50)
        self.assertFalse(result.has_requirements)

    def test_weighted_average(self):
        result = self._match(
            {WorkStyleKey.WORK_INTENSITY: "high", WorkStyleKey.WORK_HOURS: "fixed"},
            {WorkStyleKey.WORK_INTENSITY: "high", WorkStyleKey.WORK_HOURS: "flexible"},
        )
        self.assertAlmostEqual(result.score, 100 / 1.6)
        self.assertEqual(result.matches, ("work_intensity",))
        self.assertEqual(result.mismatches, ("work_hours",))
        self.assertEqual(result.failed_dealbreakers, ())

    def test_missing_candidate_opinion_is_half(self):
        result = self._match(None, {WorkStyleKey.WORK_INTENSITY: "high"})
        self.assertEqual(result.score, 50)

    def test_unknown_key_uses_default_weight(self):
        result = self._match(
            {WorkStyleKey.RISK_TOLERANCE: "low", WorkStyleKey.WORK_INTENSITY: "high"},
            {WorkStyleKey.RISK_TOLERANCE: "high", WorkStyleKey.WORK_INTENSITY: "high"},
        )
        self.assertAlmostEqual(result.score, 100 / 1.5)

    def test_dealbreaker_forces_zero(self):
        result = self._match(
            {WorkStyleKey.WORK_INTENSITY: "high", WorkStyleKey.WORK_HOURS: "fixed"},
            {WorkStyleKey.WORK_INTENSITY: "high", WorkStyleKey.WORK_HOURS: "flexible"},
            dealbreakers=[WorkStyleKey.WORK_HOURS],
        )
        self.assertEqual(result.score, 0)
        self.assertEqual(result.failed_dealbreakers, ("work_hours",))

    def test_merge_prefers_job_values(self):
        merged = merge_requirements(
            {WorkStyleKey.WORK_HOURS: "fixed", WorkStyleKey.WORK_INTENSITY: "steady"},
            {WorkStyleKey.WORK_HOURS: "flexible", WorkStyleKey.WORK_INTENSITY: ""},
        )
        self.assertEqual(
            merged,
            {WorkStyleKey.WORK_HOURS: "flexible", WorkStyleKey.WORK_INTENSITY: "steady"},
        )


if __name__ == "__main__":
    unittest.main()
