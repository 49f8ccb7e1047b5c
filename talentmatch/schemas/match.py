from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from .enums import Dimension, WeightAxis
from .profiles import PerformanceScores, VerifiedSkillStat

INVALID_DATA_REASON = "Invalid data"


class MatchDetail(BaseModel):
    model_config = ConfigDict(frozen=True)

    score: float = Field(ge=0, le=100)
    reason: str


class MatchBreakdown(BaseModel):
    model_config = ConfigDict(frozen=True)

    overall_score: int = Field(ge=0, le=100)
    details: dict[Dimension, MatchDetail] = Field(default_factory=dict)
    deal_breakers: tuple[str, ...] = ()
    recommendations: tuple[str, ...] = ()

    @property
    def is_invalid(self) -> bool:
        return self.deal_breakers == (INVALID_DATA_REASON,) and not self.details

    def detail_score(self, dimension: Dimension, default: float = 0.0) -> float:
        detail = self.details.get(dimension)
        return detail.score if detail is not None else default


class MatchWeights(BaseModel):
    """User-chosen re-ranking priorities; meaningful only as proportions."""

    model_config = ConfigDict(frozen=True)

    skills: float = Field(default=0, ge=0)
    compensation: float = Field(default=0, ge=0)
    culture: float = Field(default=0, ge=0)

    @property
    def total(self) -> float:
        return self.skills + self.compensation + self.culture

    def get(self, axis: WeightAxis) -> float:
        return float(getattr(self, axis.value))


class VerificationBoost(BaseModel):
    model_config = ConfigDict(frozen=True)

    skills_multiplier: float = Field(default=1.0, ge=1.0)
    traits_multiplier: float = Field(default=1.0, ge=1.0)
    performance_scores: PerformanceScores = Field(default_factory=PerformanceScores)
    verified_skills: tuple[VerifiedSkillStat, ...] = ()

    def stat_for(self, skill_name: str) -> VerifiedSkillStat | None:
        key = skill_name.strip().lower()
        for stat in self.verified_skills:
            if stat.skill.strip().lower() == key:
                return stat
        return None


class Point(BaseModel):
    model_config = ConfigDict(frozen=True)

    x: float
    y: float


class RankedMatch(BaseModel):
    model_config = ConfigDict(frozen=True)

    candidate_id: str | None = None
    job_id: str | None = None
    breakdown: MatchBreakdown
    weighted_score: int
    salary: float | None = None
    error: str | None = None
