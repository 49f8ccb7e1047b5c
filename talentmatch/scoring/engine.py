"""Compatibility Engine.

Verification Booster -> Dimension Scorers -> Dealbreaker Gate -> Score Blender,
producing a fresh ``MatchBreakdown`` on every call.
"""

from __future__ import annotations

import logging
from collections.abc import Collection

from talentmatch.core.config.scoring import RoleAlignmentConfig, ScoringConfig, get_scoring_config
from talentmatch.schemas import (
    INVALID_DATA_REASON,
    CandidateProfile,
    CompanyProfile,
    Dimension,
    HiringManagerPreferences,
    JobPosting,
    MatchBreakdown,
    MatchDetail,
    TalentSearchCriteria,
)

from . import dimensions as scorers
from .blender import apply_role_alignment, blend, build_blend_terms
from .dealbreakers import (
    MISSING_CERTIFICATIONS,
    certification_gate_applies,
    collect_deal_breakers,
    gated_breakdown,
)
from .recommendations import build_recommendations
from .verification import compute_verification_boost

logger = logging.getLogger(__name__)

# Every dimension a full breakdown reports, in display order.
REPORTED_DIMENSIONS = tuple(dimension for dimension in Dimension if dimension is not Dimension.ROLE_ALIGNMENT)

_SEARCH_ONLY_FIELDS = {"role_ids", "include_related_roles", "role_families"}


def invalid_breakdown() -> MatchBreakdown:
    return MatchBreakdown(overall_score=0, deal_breakers=(INVALID_DATA_REASON,))


def calculate_match(
    job: JobPosting | None,
    candidate: CandidateProfile | None,
    company: CompanyProfile | None = None,
    candidate_cert_ids: Collection[str] | None = None,
    *,
    hm_preferences: HiringManagerPreferences | None = None,
    config: ScoringConfig | None = None,
) -> MatchBreakdown:
    """Score one candidate against one job.

    ``candidate_cert_ids=None`` means certification data is unavailable; an empty
    collection means the candidate holds no certifications. A missing job or
    candidate yields ``invalid_breakdown()`` instead of raising.
    """
    if job is None or candidate is None:
        logger.info("match_invalid_input job=%s candidate=%s", job is not None, candidate is not None)
        return invalid_breakdown()

    config = config or get_scoring_config()
    boost = compute_verification_boost(candidate.verification_stats, config.verification, config.performance)

    details: dict[Dimension, MatchDetail] = {
        Dimension.SKILLS: scorers.score_skills(job.skills, candidate.skills, boost, config.skills),
        Dimension.CERTIFICATIONS: scorers.score_certifications(
            job.required_certifications,
            job.preferred_certifications,
            candidate_cert_ids,
            config.certifications,
        ),
    }

    if certification_gate_applies(job.required_certifications, candidate_cert_ids, details[Dimension.CERTIFICATIONS]):
        logger.info("match_hard_gate job_id=%s candidate_id=%s", job.id, candidate.id)
        return gated_breakdown(details, REPORTED_DIMENSIONS)

    company_industries = company.industries if company else []
    company_size = company.size_range if company else None
    job_timezone = job.timezone or (company.timezone if company else None)
    work_style_defaults = company.work_style_defaults if company else None
    team_defaults = company.team_defaults if company else None

    details.update(
        {
            Dimension.SENIORITY: scorers.score_seniority(job.seniority, candidate.desired_seniority, config.seniority),
            Dimension.SALARY: scorers.score_salary(candidate.salary_min, job.salary_max),
            Dimension.INDUSTRY: scorers.score_industry(
                candidate.interested_industries, company_industries, config.industry
            ),
            Dimension.REGULATORY: scorers.score_regulatory(
                job.regulatory_domains, candidate.regulatory_experience, config.industry
            ),
            Dimension.COMPANY_SIZE: scorers.score_company_size(
                candidate.preferred_company_size, company_size, config.company_size
            ),
            Dimension.CULTURE: scorers.score_culture_alignment(candidate, company),
            Dimension.PERKS: scorers.score_perks(),
            Dimension.WORK_MODE: scorers.score_work_mode(job.work_mode, candidate.preferred_work_modes),
            Dimension.WORK_STYLE: scorers.score_work_style(
                candidate.work_style_preferences,
                job.work_style_requirements,
                work_style_defaults,
                job.work_style_dealbreakers,
                config.categorical,
            ),
            Dimension.TEAM_FIT: scorers.score_team_fit(
                candidate.team_preferences,
                job.team_requirements,
                team_defaults,
                job.team_dealbreakers,
                config.categorical,
            ),
            Dimension.PERFORMANCE: scorers.score_performance(job.performance_minimums, boost, config.performance),
            Dimension.LANGUAGE: scorers.score_language(
                job.language_requirements, candidate.languages, config.languages
            ),
            Dimension.TIMEZONE: scorers.score_timezone(
                candidate.timezone, job_timezone, job.timezone_overlap, config.timezones
            ),
            Dimension.VISA: scorers.score_visa(candidate, job.offers_visa_sponsorship, config.visa),
            Dimension.RELOCATION: scorers.score_relocation(candidate, job.offers_relocation),
            Dimension.MANAGEMENT_FIT: scorers.score_management_fit(
                candidate.management_preferences, hm_preferences, config.categorical
            ),
            Dimension.TRAITS: scorers.score_traits(
                job.required_traits, job.desired_traits, candidate.character_traits, boost, config.traits
            ),
        }
    )
    for dimension, detail in details.items():
        logger.debug("dimension_scored dimension=%s score=%s reason=%s", dimension.value, detail.score, detail.reason)

    terms = build_blend_terms(
        details,
        config,
        certifications_apply=candidate_cert_ids is not None
        and bool(job.required_certifications or job.preferred_certifications),
        regulatory_applies=bool(job.regulatory_domains),
    )
    overall = blend(terms)
    deal_breakers = collect_deal_breakers(details)

    logger.info(
        "match_scored job_id=%s candidate_id=%s overall=%s deal_breakers=%s",
        job.id,
        candidate.id,
        overall,
        len(deal_breakers),
    )
    return MatchBreakdown(
        overall_score=overall,
        details={dimension: details[dimension] for dimension in REPORTED_DIMENSIONS},
        deal_breakers=deal_breakers,
        recommendations=build_recommendations(job, candidate, candidate_cert_ids, details, config),
    )


def calculate_role_alignment(
    criteria: TalentSearchCriteria,
    candidate: CandidateProfile,
    config: RoleAlignmentConfig,
) -> MatchDetail:
    candidate_roles = candidate.role_ids
    if not candidate_roles:
        return MatchDetail(score=config.none, reason="Candidate has no declared role")

    targets = set(criteria.role_ids)
    if targets.intersection(candidate_roles):
        return MatchDetail(score=config.exact, reason="Exact role match")

    if criteria.include_related_roles:
        families = {criteria.role_families[role] for role in targets if role in criteria.role_families}
        if any(criteria.role_families.get(role) in families for role in candidate_roles):
            return MatchDetail(score=config.related, reason="Related role in the same family")

    return MatchDetail(score=config.none, reason="Role outside the search")


def calculate_candidate_match(
    criteria: TalentSearchCriteria | None,
    candidate: CandidateProfile | None,
    company: CompanyProfile | None = None,
    candidate_cert_ids: Collection[str] | None = None,
    hm_preferences: HiringManagerPreferences | None = None,
    config: ScoringConfig | None = None,
) -> MatchBreakdown:
    """Score a candidate against recruiter search criteria.

    The criteria are adapted into the job-shaped contract; an active role filter
    then blends a role-alignment score into the overall result.
    """
    if criteria is None or candidate is None:
        logger.info("candidate_match_invalid_input criteria=%s candidate=%s", criteria is not None, candidate is not None)
        return invalid_breakdown()

    config = config or get_scoring_config()
    job = JobPosting.model_validate(criteria.model_dump(exclude=_SEARCH_ONLY_FIELDS))
    breakdown = calculate_match(
        job,
        candidate,
        company,
        candidate_cert_ids,
        hm_preferences=hm_preferences,
        config=config,
    )

    if not criteria.role_ids or MISSING_CERTIFICATIONS in breakdown.deal_breakers:
        return breakdown

    role_detail = calculate_role_alignment(criteria, candidate, config.role_alignment)
    overall = apply_role_alignment(breakdown.overall_score, role_detail.score, config.blend)
    logger.info(
        "candidate_match_role_blend candidate_id=%s role_score=%s overall=%s",
        candidate.id,
        role_detail.score,
        overall,
    )
    return MatchBreakdown(
        overall_score=overall,
        details={**breakdown.details, Dimension.ROLE_ALIGNMENT: role_detail},
        deal_breakers=breakdown.deal_breakers,
        recommendations=breakdown.recommendations,
    )
