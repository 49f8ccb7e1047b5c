import tempfile
import unittest
import sys
from pathlib import Path

import yaml
from pydantic import ValidationError

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from talentmatch.core.config.scoring import (
    BLENDED_DIMENSIONS,
    LinearDecayRule,
    NoOverlapRule,
    ScoringConfigError,
    StepRule,
    TriangleConfig,
    get_scoring_config,
    load_scoring_config,
)
from talentmatch.schemas import Dimension, OverlapPolicy, WeightAxis

DEFAULT_CONFIG_PATH = PROJECT_ROOT / "config" / "scoring.yaml"


class ScoringConfigTests(unittest.TestCase):
    def setUp(self):
        self.raw = yaml.safe_load(DEFAULT_CONFIG_PATH.read_text(encoding="utf-8"))
        self._tmp = tempfile.TemporaryDirectory()
        self.addCleanup(self._tmp.cleanup)

    def _write(self, payload, name="scoring.yaml"):
        path = Path(self._tmp.name) / name
        path.write_text(yaml.safe_dump(payload), encoding="utf-8")
        return path

    def test_loader_and_value_lookup(self):
        config = get_scoring_config()
        self.assertIs(config, get_scoring_config())
        self.assertEqual(config.weight(Dimension.SKILLS), 0.22)
        self.assertEqual(config.weight(Dimension.TRAITS), 0.0)
        self.assertAlmostEqual(sum(config.dimension_weights.values()), 1.0)
        self.assertEqual(set(config.dimension_weights), set(BLENDED_DIMENSIONS))
        self.assertEqual(config.skills.level_score(7), 85)
        self.assertEqual(config.skills.level_score(-9), 10)
        self.assertEqual(config.triangle.default_weights.skills, 40)

    def test_overlap_policies_are_tagged_variants(self):
        rules = get_scoring_config().timezones.overlap_policies
        self.assertIsInstance(rules[OverlapPolicy.ASYNC_FIRST], NoOverlapRule)
        self.assertIsInstance(rules[OverlapPolicy.FULL_OVERLAP], LinearDecayRule)
        self.assertIsInstance(rules[OverlapPolicy.OVERLAP_2_PLUS], StepRule)
        self.assertEqual(rules[OverlapPolicy.OVERLAP_4_PLUS].score(5), 80)

    def test_load_fresh_instance_from_path(self):
        self.raw["triangle"]["step"] = 10
        config = load_scoring_config(self._write(self.raw))
        self.assertEqual(config.triangle.step, 10)
        self.assertIsNot(config, get_scoring_config())

    def test_config_is_immutable(self):
        config = get_scoring_config()
        with self.assertRaises(ValidationError):
            config.blend.certification_share = 0.5

    def test_weights_must_sum_to_one(self):
        self.raw["dimension_weights"]["skills"] = 0.5
        with self.assertRaises(ScoringConfigError) as ctx:
            load_scoring_config(self._write(self.raw))
        self.assertIn("sum to 1.0", str(ctx.exception))

    def test_missing_overlap_rule_rejected(self):
        del self.raw["timezones"]["overlap_policies"]["overlap_2_plus"]
        with self.assertRaises(ScoringConfigError):
            load_scoring_config(self._write(self.raw))

    def test_unknown_rule_kind_rejected(self):
        self.raw["timezones"]["overlap_policies"]["full_overlap"] = {"kind": "exponential"}
        with self.assertRaises(ScoringConfigError):
            load_scoring_config(self._write(self.raw))

    def test_missing_and_malformed_files(self):
        with self.assertRaises(ScoringConfigError) as ctx:
            load_scoring_config(Path(self._tmp.name) / "absent.yaml")
        self.assertIn("absent.yaml", str(ctx.exception))

        broken = Path(self._tmp.name) / "broken.yaml"
        broken.write_text("dimension_weights: [unclosed", encoding="utf-8")
        with self.assertRaises(ScoringConfigError):
            load_scoring_config(broken)

        listing = Path(self._tmp.name) / "list.yaml"
        listing.write_text("- 1\n- 2\n", encoding="utf-8")
        with self.assertRaises(ScoringConfigError):
            load_scoring_config(listing)

    def test_collinear_triangle_rejected(self):
        triangle = dict(self.raw["triangle"])
        triangle["vertices"] = {
            WeightAxis.SKILLS.value: {"x": 0, "y": 0},
            WeightAxis.COMPENSATION.value: {"x": 10, "y": 10},
            WeightAxis.CULTURE.value: {"x": 20, "y": 20},
        }
        with self.assertRaises(ValidationError):
            TriangleConfig.model_validate(triangle)


if __name__ == "__main__":
    unittest.main()
