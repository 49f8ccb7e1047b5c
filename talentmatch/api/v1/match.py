from fastapi import APIRouter, Request

from talentmatch.core.config.scoring import get_scoring_config
from talentmatch.core.rate_limit import rate_limit
from talentmatch.schemas import MatchBreakdown
from talentmatch.schemas.api import (
    CandidateMatchRequest,
    MatchRequest,
    RankCandidatesRequest,
    RankResponse,
)
from talentmatch.scoring import calculate_candidate_match, calculate_match, rank_candidates

router = APIRouter()


@router.post("/match", response_model=MatchBreakdown)
@rate_limit()
def match(request: Request, payload: MatchRequest):
    return calculate_match(
        payload.job,
        payload.candidate,
        payload.company,
        payload.candidate_cert_ids,
        hm_preferences=payload.hm_preferences,
    )


@router.post("/match/candidate", response_model=MatchBreakdown)
@rate_limit()
def match_candidate(request: Request, payload: CandidateMatchRequest):
    return calculate_candidate_match(
        payload.criteria,
        payload.candidate,
        payload.company,
        payload.candidate_cert_ids,
        payload.hm_preferences,
    )


@router.post("/rank/candidates", response_model=RankResponse)
@rate_limit()
def rank(request: Request, payload: RankCandidatesRequest):
    weights = payload.weights or get_scoring_config().triangle.default_weights
    results = rank_candidates(
        payload.job,
        payload.candidates,
        weights,
        company=payload.company,
        candidate_cert_ids=payload.candidate_cert_ids,
        hm_preferences=payload.hm_preferences,
        sort_by=payload.sort_by,
    )
    return RankResponse(weights=weights, sort_by=payload.sort_by, results=results)
