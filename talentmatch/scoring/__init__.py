from .engine import calculate_candidate_match, calculate_match, calculate_role_alignment, invalid_breakdown
from .ranking import rank_candidates, rank_jobs, sort_matches
from .reranker import calculate_weighted_score
from .verification import compute_verification_boost

__all__ = [
    "calculate_candidate_match",
    "calculate_match",
    "calculate_role_alignment",
    "invalid_breakdown",
    "rank_candidates",
    "rank_jobs",
    "sort_matches",
    "calculate_weighted_score",
    "compute_verification_boost",
]
