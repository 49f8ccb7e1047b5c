"""Batch ranking: repeated single-pair scoring plus a sort.

Each pair is scored independently; a failure is logged and recorded as an
invalid breakdown for that pair so the rest of the batch still ranks.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Collection, Mapping, Sequence

from talentmatch.core.config.scoring import ScoringConfig, get_scoring_config
from talentmatch.schemas import (
    CandidateProfile,
    CompanyProfile,
    HiringManagerPreferences,
    JobPosting,
    MatchBreakdown,
    MatchWeights,
    RankedMatch,
)
from talentmatch.schemas.enums import SortKey

from .engine import calculate_match, invalid_breakdown
from .reranker import calculate_weighted_score

logger = logging.getLogger(__name__)


def _salary_key(descending: bool) -> Callable[[RankedMatch], tuple[bool, float]]:
    def key(item: RankedMatch) -> tuple[bool, float]:
        if item.salary is None:
            return (True, 0.0)
        return (False, -item.salary if descending else item.salary)

    return key


_SORT_KEYS: dict[str, Callable[[RankedMatch], object]] = {
    "weighted": lambda item: (-item.weighted_score, -item.breakdown.overall_score),
    "match": lambda item: (-item.breakdown.overall_score, -item.weighted_score),
    "salary_low": _salary_key(descending=False),
    "salary_high": _salary_key(descending=True),
}


def sort_matches(matches: Sequence[RankedMatch], sort_by: SortKey = "weighted") -> list[RankedMatch]:
    try:
        key = _SORT_KEYS[sort_by]
    except KeyError as exc:
        raise ValueError(f"Unsupported sort key: {sort_by}") from exc
    return sorted(matches, key=key)


def _score_pair(
    score: Callable[[], MatchBreakdown],
    *,
    job_id: str | None,
    candidate_id: str | None,
    salary: float | None,
    weights: MatchWeights,
) -> RankedMatch:
    error = None
    try:
        breakdown = score()
    except Exception as exc:
        logger.warning("rank_pair_failed job_id=%s candidate_id=%s: %s", job_id, candidate_id, exc, exc_info=True)
        breakdown = invalid_breakdown()
        error = str(exc) or exc.__class__.__name__

    return RankedMatch(
        candidate_id=candidate_id,
        job_id=job_id,
        breakdown=breakdown,
        weighted_score=calculate_weighted_score(breakdown, weights),
        salary=salary,
        error=error,
    )


def rank_candidates(
    job: JobPosting,
    candidates: Sequence[CandidateProfile],
    weights: MatchWeights | None = None,
    *,
    company: CompanyProfile | None = None,
    candidate_cert_ids: Mapping[str, Collection[str]] | None = None,
    hm_preferences: HiringManagerPreferences | None = None,
    sort_by: SortKey = "weighted",
    config: ScoringConfig | None = None,
) -> list[RankedMatch]:
    """Rank candidates for one job. Salary sorts use each candidate's minimum."""
    config = config or get_scoring_config()
    weights = weights or config.triangle.default_weights
    cert_lookup = candidate_cert_ids or {}

    matches = [
        _score_pair(
            lambda candidate=candidate: calculate_match(
                job,
                candidate,
                company,
                cert_lookup.get(candidate.id) if candidate_cert_ids is not None and candidate.id else None,
                hm_preferences=hm_preferences,
                config=config,
            ),
            job_id=job.id,
            candidate_id=candidate.id,
            salary=candidate.salary_min,
            weights=weights,
        )
        for candidate in candidates
    ]
    logger.info("rank_candidates job_id=%s count=%s sort_by=%s", job.id, len(matches), sort_by)
    return sort_matches(matches, sort_by)


def rank_jobs(
    candidate: CandidateProfile,
    jobs: Sequence[JobPosting],
    weights: MatchWeights | None = None,
    *,
    companies: Mapping[str, CompanyProfile] | None = None,
    candidate_cert_ids: Collection[str] | None = None,
    sort_by: SortKey = "weighted",
    config: ScoringConfig | None = None,
) -> list[RankedMatch]:
    """Rank jobs for one candidate. Salary sorts use each job's maximum."""
    config = config or get_scoring_config()
    weights = weights or config.triangle.default_weights
    company_lookup = companies or {}

    matches = [
        _score_pair(
            lambda job=job: calculate_match(
                job,
                candidate,
                company_lookup.get(job.company_id) if job.company_id else None,
                candidate_cert_ids,
                config=config,
            ),
            job_id=job.id,
            candidate_id=candidate.id,
            salary=job.salary_max,
            weights=weights,
        )
        for job in jobs
    ]
    logger.info("rank_jobs candidate_id=%s count=%s sort_by=%s", candidate.id, len(matches), sort_by)
    return sort_matches(matches, sort_by)
