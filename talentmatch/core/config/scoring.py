from __future__ import annotations

import logging
from pathlib import Path
from typing import Annotated, Literal, Union

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator, model_validator

from talentmatch.schemas.enums import (
    Dimension,
    LanguageProficiency,
    ManagementKey,
    OverlapPolicy,
    TeamKey,
    WeightAxis,
    WorkStyleKey,
)
from talentmatch.schemas.match import MatchWeights, Point

from .settings import settings

logger = logging.getLogger(__name__)

_SCORING_CONFIG_CACHE: ScoringConfig | None = None
_DEFAULT_SCORING_CONFIG_PATH = Path(__file__).resolve().parents[3] / "config" / "scoring.yaml"

# Dimensions that enter the top-level weighted sum.
BLENDED_DIMENSIONS = (
    Dimension.SKILLS,
    Dimension.SENIORITY,
    Dimension.SALARY,
    Dimension.INDUSTRY,
    Dimension.COMPANY_SIZE,
    Dimension.CULTURE,
    Dimension.PERKS,
    Dimension.WORK_MODE,
    Dimension.WORK_STYLE,
    Dimension.TEAM_FIT,
    Dimension.PERFORMANCE,
    Dimension.LANGUAGE,
    Dimension.TIMEZONE,
    Dimension.VISA,
    Dimension.RELOCATION,
    Dimension.MANAGEMENT_FIT,
)


class ScoringConfigError(RuntimeError):
    pass


class _Frozen(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")


class NoOverlapRule(_Frozen):
    kind: Literal["none"] = "none"

    def score(self, diff_hours: float) -> float:
        return 100.0


class LinearDecayRule(_Frozen):
    """Full marks inside the grace window, then a linear drop per hour floored at 0."""

    kind: Literal["linear_decay"] = "linear_decay"
    grace_hours: float = Field(ge=0)
    per_hour: float = Field(ge=0)
    origin_hours: float = Field(default=0, ge=0)

    def score(self, diff_hours: float) -> float:
        if diff_hours <= self.grace_hours:
            return 100.0
        return max(0.0, 100.0 - self.per_hour * (diff_hours - self.origin_hours))


class StepRule(_Frozen):
    kind: Literal["step"] = "step"
    grace_hours: float = Field(ge=0)
    beyond_score: float = Field(ge=0, le=100)

    def score(self, diff_hours: float) -> float:
        if diff_hours <= self.grace_hours:
            return 100.0
        return self.beyond_score


OverlapRule = Annotated[Union[NoOverlapRule, LinearDecayRule, StepRule], Field(discriminator="kind")]


class BlendConfig(_Frozen):
    certification_share: float = Field(ge=0, le=1)
    culture_base: float = Field(ge=0, le=100)
    culture_base_share: float = Field(ge=0, le=1)
    industry_share: float = Field(ge=0, le=1)
    regulatory_share: float = Field(ge=0, le=1)
    role_alignment_share: float = Field(ge=0, le=1)


class SkillsConfig(_Frozen):
    level_diff_scores: dict[int, float]
    missing_skill_score: float = 0
    assessed_level_override_rate: float = Field(ge=0, le=1)
    verified_bonus_rate: float = Field(ge=0, le=1)
    verified_bonus_factor: float = Field(ge=1)
    required_max_points: float = Field(gt=0)
    preferred_max_points: float = Field(gt=0)

    @field_validator("level_diff_scores")
    @classmethod
    def _validate_table(cls, value: dict[int, float]) -> dict[int, float]:
        if 0 not in value:
            raise ValueError("level_diff_scores must define a score for diff 0")
        return value

    def level_score(self, diff: int) -> float:
        lowest = min(self.level_diff_scores)
        highest = max(self.level_diff_scores)
        return self.level_diff_scores[max(lowest, min(highest, diff))]


class ThresholdBonusConfig(_Frozen):
    required_met_base: float
    preferred_bonus: float


class TraitsConfig(_Frozen):
    required_met_base: float
    desired_bonus: float


class LanguagesConfig(_Frozen):
    proficiency_ladder: tuple[LanguageProficiency, ...]
    required_met_base: float
    preferred_bonus: float

    def rank(self, proficiency: LanguageProficiency) -> int:
        return self.proficiency_ladder.index(proficiency)


class IndustryConfig(_Frozen):
    mismatch_score: float
    regulatory_floor: float


class MismatchConfig(_Frozen):
    mismatch_score: float


class VisaConfig(_Frozen):
    sponsorship_gap_score: float


class PerformanceConfig(_Frozen):
    decay_per_point: float = Field(ge=0)
    neutral_score: float = Field(ge=0, le=10)


class VerificationConfig(_Frozen):
    tier_cap: int = Field(ge=0)
    skills_per_tier: float = Field(ge=0)
    traits_per_tier: float = Field(ge=0)
    strong_skill_bonus: float = Field(ge=1)
    strong_skill_agreement: float = Field(ge=0, le=1)
    strong_skill_min_count: int = Field(ge=0)


class TimezonesConfig(_Frozen):
    unknown_score: float = Field(ge=0, le=100)
    offsets: dict[str, float]
    overlap_policies: dict[OverlapPolicy, OverlapRule]

    @model_validator(mode="after")
    def _every_policy_has_a_rule(self) -> TimezonesConfig:
        missing = [policy.value for policy in OverlapPolicy if policy not in self.overlap_policies]
        if missing:
            raise ValueError(f"overlap_policies missing rules for: {', '.join(missing)}")
        return self

    def offset(self, timezone: str | None) -> float | None:
        if not timezone:
            return None
        return self.offsets.get(timezone.strip())


class CategoricalConfig(_Frozen):
    default_key_weight: float = Field(gt=0)
    no_requirements_score: float = Field(ge=0, le=100)
    work_style: dict[WorkStyleKey, float]
    team: dict[TeamKey, float]
    management: dict[ManagementKey, float]


class RoleAlignmentConfig(_Frozen):
    exact: float
    related: float
    none: float


class TriangleConfig(_Frozen):
    vertices: dict[WeightAxis, Point]
    centroid: Point
    center_snap_radius: float = Field(ge=0)
    vertex_snap_radius: float = Field(ge=0)
    step: int = Field(gt=0)
    preset_tolerance: float = Field(ge=0)
    default_weights: MatchWeights
    presets: dict[str, MatchWeights]

    @model_validator(mode="after")
    def _validate_vertices(self) -> TriangleConfig:
        if set(self.vertices) != set(WeightAxis):
            raise ValueError("triangle vertices must define skills, compensation and culture")
        a = self.vertices[WeightAxis.SKILLS]
        b = self.vertices[WeightAxis.COMPENSATION]
        c = self.vertices[WeightAxis.CULTURE]
        if abs((b.x - a.x) * (c.y - a.y) - (c.x - a.x) * (b.y - a.y)) < 1e-9:
            raise ValueError("triangle vertices must not be collinear")
        return self


class ScoringConfig(_Frozen):
    dimension_weights: dict[Dimension, float]
    blend: BlendConfig
    skills: SkillsConfig
    certifications: ThresholdBonusConfig
    languages: LanguagesConfig
    traits: TraitsConfig
    industry: IndustryConfig
    company_size: MismatchConfig
    seniority: MismatchConfig
    visa: VisaConfig
    performance: PerformanceConfig
    verification: VerificationConfig
    timezones: TimezonesConfig
    categorical: CategoricalConfig
    role_alignment: RoleAlignmentConfig
    triangle: TriangleConfig

    @field_validator("dimension_weights")
    @classmethod
    def _validate_weights(cls, value: dict[Dimension, float]) -> dict[Dimension, float]:
        unknown = [dim.value for dim in value if dim not in BLENDED_DIMENSIONS]
        if unknown:
            raise ValueError(f"dimension_weights has non-blended dimensions: {', '.join(unknown)}")
        if any(weight < 0 for weight in value.values()):
            raise ValueError("dimension_weights must be non-negative")
        total = sum(value.values())
        if abs(total - 1.0) > 1e-6:
            raise ValueError(f"dimension_weights must sum to 1.0 (got {total:.6f})")
        return value

    def weight(self, dimension: Dimension) -> float:
        return self.dimension_weights.get(dimension, 0.0)


def _resolve_path(path: str | Path | None) -> Path:
    if path:
        return Path(path)
    if settings.scoring_config_path:
        return Path(settings.scoring_config_path)
    return _DEFAULT_SCORING_CONFIG_PATH


def load_scoring_config(path: str | Path | None = None) -> ScoringConfig:
    """Read and validate a scoring YAML file into a fresh ScoringConfig."""
    config_path = _resolve_path(path)
    if not config_path.exists():
        raise ScoringConfigError(
            f"Scoring config not found at '{config_path}'. "
            "Expected file: config/scoring.yaml"
        )

    try:
        raw = config_path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ScoringConfigError(f"Failed to read scoring config '{config_path}': {exc}") from exc

    try:
        parsed = yaml.safe_load(raw)
    except yaml.YAMLError as exc:
        raise ScoringConfigError(f"Invalid YAML in scoring config '{config_path}': {exc}") from exc

    if not isinstance(parsed, dict):
        raise ScoringConfigError(
            f"Invalid scoring config '{config_path}': expected a top-level mapping."
        )

    try:
        config = ScoringConfig.model_validate(parsed)
    except ValidationError as exc:
        raise ScoringConfigError(f"Invalid scoring config '{config_path}': {exc}") from exc

    logger.info("scoring_config_loaded path=%s", config_path)
    return config


def get_scoring_config() -> ScoringConfig:
    """Process-wide scoring config, loaded on first use."""
    global _SCORING_CONFIG_CACHE

    if _SCORING_CONFIG_CACHE is None:
        _SCORING_CONFIG_CACHE = load_scoring_config()
    return _SCORING_CONFIG_CACHE
