"""Dealbreaker Gate.

Two tiers: the certification hard gate short-circuits the whole breakdown before
blending, while the post-blend dealbreakers only annotate the result.
"""

from __future__ import annotations

from collections.abc import Collection, Mapping, Sequence

from talentmatch.schemas import Dimension, MatchBreakdown, MatchDetail

MISSING_CERTIFICATIONS = "Missing required certifications"

# Dimensions whose zero score is reported as a named dealbreaker after blending.
POST_BLEND_DEALBREAKERS: tuple[tuple[Dimension, str], ...] = (
    (Dimension.SALARY, "Salary expectation exceeds budget"),
    (Dimension.WORK_STYLE, "Work style mismatch on a dealbreaker preference"),
    (Dimension.TEAM_FIT, "Team structure mismatch on a dealbreaker preference"),
    (Dimension.LANGUAGE, "Missing required language"),
)

_NOT_EVALUATED = MatchDetail(score=0, reason="Not evaluated: missing required certifications")


def certification_gate_applies(
    required_certifications: Sequence[str],
    candidate_cert_ids: Collection[str] | None,
    certification_detail: MatchDetail,
) -> bool:
    """True when the job requires certifications, cert data exists and the candidate fails them.

    An empty ``candidate_cert_ids`` counts as data (the candidate holds nothing);
    ``None`` means the data is unavailable and never triggers the gate.
    """
    return bool(required_certifications) and candidate_cert_ids is not None and certification_detail.score == 0


def gated_breakdown(
    evaluated: Mapping[Dimension, MatchDetail],
    dimensions: Collection[Dimension],
) -> MatchBreakdown:
    details = {dimension: evaluated.get(dimension, _NOT_EVALUATED) for dimension in dimensions}
    return MatchBreakdown(
        overall_score=0,
        details=details,
        deal_breakers=(MISSING_CERTIFICATIONS,),
    )


def collect_deal_breakers(details: Mapping[Dimension, MatchDetail]) -> tuple[str, ...]:
    reasons = []
    for dimension, message in POST_BLEND_DEALBREAKERS:
        detail = details.get(dimension)
        if detail is not None and detail.score == 0:
            reasons.append(message)
    return tuple(reasons)
