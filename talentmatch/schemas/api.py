from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field

from .enums import SortKey, WeightAxis
from .match import MatchBreakdown, MatchWeights, Point, RankedMatch
from .profiles import (
    CandidateProfile,
    CompanyProfile,
    HiringManagerPreferences,
    JobPosting,
    TalentSearchCriteria,
)


class MatchRequest(BaseModel):
    job: JobPosting
    candidate: CandidateProfile
    company: CompanyProfile | None = None
    candidate_cert_ids: list[str] | None = None
    hm_preferences: HiringManagerPreferences | None = None


class CandidateMatchRequest(BaseModel):
    criteria: TalentSearchCriteria
    candidate: CandidateProfile
    company: CompanyProfile | None = None
    candidate_cert_ids: list[str] | None = None
    hm_preferences: HiringManagerPreferences | None = None


class RankCandidatesRequest(BaseModel):
    job: JobPosting
    candidates: list[CandidateProfile] = Field(min_length=1, max_length=500)
    weights: MatchWeights | None = None
    company: CompanyProfile | None = None
    candidate_cert_ids: dict[str, list[str]] | None = None
    hm_preferences: HiringManagerPreferences | None = None
    sort_by: SortKey = "weighted"


class RankResponse(BaseModel):
    weights: MatchWeights
    sort_by: SortKey
    results: list[RankedMatch]


class WeightedScoreRequest(BaseModel):
    breakdown: MatchBreakdown
    weights: MatchWeights


class WeightedScoreResponse(BaseModel):
    score: int


class WeightsToPointRequest(BaseModel):
    weights: MatchWeights


class PointResponse(BaseModel):
    point: Point
    inside: bool


class PointToWeightsRequest(BaseModel):
    point: Point
    snap: bool = False


class WeightsResponse(BaseModel):
    weights: MatchWeights
    preset: str | None = None


class StepWeightsRequest(BaseModel):
    """Either an arrow ``direction`` or an explicit ``axis`` and ``amount``."""

    weights: MatchWeights
    direction: Literal["up", "down", "left", "right"] | None = None
    axis: WeightAxis | None = None
    amount: int = Field(default=0, ge=-100, le=100)


class PresetsResponse(BaseModel):
    presets: dict[str, MatchWeights]
    default: MatchWeights
