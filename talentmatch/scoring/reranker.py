"""Weighted Re-Ranker.

Collapses a breakdown into a skills / compensation / culture view weighted by the
user's own priorities. The result is a sort key only; ``overall_score`` is never
replaced by it.
"""

from __future__ import annotations

from talentmatch.schemas import Dimension, MatchBreakdown, MatchWeights

from .dealbreakers import MISSING_CERTIFICATIONS
from .numbers import clamp_score, round_half_up


def calculate_weighted_score(breakdown: MatchBreakdown, weights: MatchWeights) -> int:
    total = weights.total
    if total <= 0 or not breakdown.details:
        return breakdown.overall_score
    # A hard-gated candidate keeps its evaluated skills detail but must not outrank anyone.
    if MISSING_CERTIFICATIONS in breakdown.deal_breakers:
        return breakdown.overall_score

    skills = breakdown.detail_score(Dimension.SKILLS)
    compensation = breakdown.detail_score(Dimension.SALARY)
    # Raw culture alignment and traits, not the engine's blended culture score.
    culture = (breakdown.detail_score(Dimension.CULTURE) + breakdown.detail_score(Dimension.TRAITS)) / 2

    score = (
        skills * weights.skills / total
        + compensation * weights.compensation / total
        + culture * weights.culture / total
    )
    return round_half_up(clamp_score(score))
