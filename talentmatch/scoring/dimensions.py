"""Dimension scorers.

Each scorer compares one facet of a candidate with one facet of a job or company
and returns a ``MatchDetail``. Scorers are independent of each other; only the
blender combines them.

Policy: a missing requirement scores 100 (no constraint). Missing candidate data
facing a real requirement degrades to a neutral score instead of zero, except
for the hard gates (required certifications, required languages, required traits).
"""

from __future__ import annotations

from collections.abc import Collection, Mapping, Sequence

from talentmatch.core.config.scoring import (
    CategoricalConfig,
    IndustryConfig,
    LanguagesConfig,
    MismatchConfig,
    PerformanceConfig,
    SkillsConfig,
    ThresholdBonusConfig,
    TimezonesConfig,
    TraitsConfig,
    VisaConfig,
)
from talentmatch.schemas import (
    CandidateProfile,
    CompanyProfile,
    HiringManagerPreferences,
    JobSkillRequirement,
    LanguageRequirement,
    LanguageSkill,
    ManagementKey,
    MatchDetail,
    OverlapPolicy,
    PerformanceAxis,
    Skill,
    TeamKey,
    VerificationBoost,
    WorkStyleKey,
)

from .categorical import CategoricalResult, match_categorical, merge_requirements
from .numbers import clamp_score, round_half_up


def _detail(score: float, reason: str) -> MatchDetail:
    return MatchDetail(score=round_half_up(clamp_score(score)), reason=reason)


def _normalize(value: str) -> str:
    return value.strip().lower()


def _normalized_set(values: Collection[str]) -> set[str]:
    return {_normalize(value) for value in values if value and value.strip()}


def score_skills(
    requirements: Sequence[JobSkillRequirement],
    candidate_skills: Sequence[Skill],
    boost: VerificationBoost,
    config: SkillsConfig,
) -> MatchDetail:
    if not requirements:
        return _detail(100, "No skill requirements")

    by_name = {_normalize(skill.name): skill for skill in candidate_skills}
    earned = 0.0
    possible = 0.0
    matched = 0

    for requirement in requirements:
        max_points = config.required_max_points if requirement.weight == "required" else config.preferred_max_points
        possible += max_points

        skill = by_name.get(_normalize(requirement.name))
        if skill is None:
            per_skill = config.missing_skill_score
        else:
            matched += 1
            stat = boost.stat_for(requirement.name)
            level = skill.level
            if stat is not None and stat.level_agreement_rate >= config.assessed_level_override_rate:
                level = round_half_up(stat.avg_assessed_level)
            per_skill = config.level_score(level - requirement.required_level)
            if stat is not None and stat.level_agreement_rate >= config.verified_bonus_rate:
                per_skill = min(100.0, per_skill * config.verified_bonus_factor)

        earned += per_skill * max_points / 100.0

    score = min(100.0, 100.0 * earned / possible * boost.skills_multiplier)
    return _detail(score, f"{matched}/{len(requirements)} skills matched")


def score_certifications(
    required: Sequence[str],
    preferred: Sequence[str],
    candidate_cert_ids: Collection[str] | None,
    config: ThresholdBonusConfig,
) -> MatchDetail:
    if not required and not preferred:
        return _detail(100, "No certification requirements")
    if candidate_cert_ids is None:
        return _detail(50, "Certification data unavailable")

    held = _normalized_set(candidate_cert_ids)
    missing = [cert for cert in required if _normalize(cert) not in held]
    if missing:
        return _detail(0, f"Missing required certifications: {', '.join(missing)}")

    preferred_met = sum(1 for cert in preferred if _normalize(cert) in held)
    preferred_fraction = preferred_met / len(preferred) if preferred else 1.0

    if required:
        score = config.required_met_base + config.preferred_bonus * preferred_fraction
        return _detail(score, "All required certifications held")
    return _detail(100 * preferred_fraction, f"{preferred_met}/{len(preferred)} preferred certifications held")


def best_proficiency(languages: Sequence[LanguageSkill], config: LanguagesConfig) -> dict[str, int]:
    best: dict[str, int] = {}
    for entry in languages:
        key = _normalize(entry.language)
        best[key] = max(best.get(key, -1), config.rank(entry.proficiency))
    return best


def language_met(requirement: LanguageRequirement, best: Mapping[str, int], config: LanguagesConfig) -> bool:
    rank = best.get(_normalize(requirement.language))
    return rank is not None and rank >= config.rank(requirement.min_proficiency)


def score_language(
    requirements: Sequence[LanguageRequirement],
    candidate_languages: Sequence[LanguageSkill],
    config: LanguagesConfig,
) -> MatchDetail:
    if not requirements:
        return _detail(100, "No language requirements")

    best = best_proficiency(candidate_languages, config)
    required = [req for req in requirements if req.required]
    preferred = [req for req in requirements if not req.required]

    unmet = [req.language for req in required if not language_met(req, best, config)]
    if unmet:
        return _detail(0, f"Missing required language: {', '.join(unmet)}")

    preferred_met = sum(1 for req in preferred if language_met(req, best, config))
    preferred_fraction = preferred_met / len(preferred) if preferred else 1.0
    score = config.required_met_base + config.preferred_bonus * preferred_fraction
    return _detail(score, "Language requirements met")


def score_timezone(
    candidate_timezone: str | None,
    job_timezone: str | None,
    policy: OverlapPolicy | None,
    config: TimezonesConfig,
) -> MatchDetail:
    rule = config.overlap_policies[policy or OverlapPolicy.ASYNC_FIRST]
    if rule.kind == "none":
        return _detail(100, "Async-first collaboration")

    job_offset = config.offset(job_timezone)
    if job_offset is None:
        return _detail(100, "No timezone constraint")
    candidate_offset = config.offset(candidate_timezone)
    if candidate_offset is None:
        return _detail(config.unknown_score, "Candidate timezone unknown")

    diff = abs(candidate_offset - job_offset)
    score = rule.score(diff)
    return _detail(score, f"{diff:g}h timezone difference")


def score_visa(candidate: CandidateProfile, offers_sponsorship: bool, config: VisaConfig) -> MatchDetail:
    if candidate.requires_sponsorship and not offers_sponsorship:
        return _detail(config.sponsorship_gap_score, "Requires visa sponsorship the job does not offer")
    if candidate.requires_sponsorship:
        return _detail(100, "Visa sponsorship available")
    return _detail(100, "No sponsorship needed")


def score_relocation(candidate: CandidateProfile, offers_relocation: bool) -> MatchDetail:
    if candidate.willing_to_relocate and offers_relocation:
        return _detail(100, "Relocation assistance available")
    return _detail(100, "No relocation friction")


def score_industry(
    candidate_industries: Sequence[str],
    company_industries: Sequence[str],
    config: IndustryConfig,
) -> MatchDetail:
    if not company_industries:
        return _detail(100, "No industry restrictions")
    overlap = _normalized_set(candidate_industries) & _normalized_set(company_industries)
    if overlap:
        return _detail(100, "Interested in the company's industry")
    return _detail(config.mismatch_score, "Different industry interests")


def score_regulatory(
    required_domains: Sequence[str],
    candidate_experience: Sequence[str],
    config: IndustryConfig,
) -> MatchDetail:
    required = _normalized_set(required_domains)
    if not required:
        return _detail(100, "No regulatory requirements")
    experience = _normalized_set(candidate_experience)
    if not experience:
        return _detail(config.regulatory_floor, "No regulatory experience")
    overlap = len(required & experience)
    score = config.regulatory_floor + (100 - config.regulatory_floor) * overlap / len(required)
    return _detail(score, f"{overlap}/{len(required)} regulatory domains covered")


def score_company_size(
    preferred_sizes: Sequence[str],
    actual_size: str | None,
    config: MismatchConfig,
) -> MatchDetail:
    if not preferred_sizes or not actual_size:
        return _detail(100, "Flexible on company size")
    if _normalize(actual_size) in _normalized_set(preferred_sizes):
        return _detail(100, "Preferred company size")
    return _detail(config.mismatch_score, "Different size preference")


def score_culture_alignment(candidate: CandidateProfile, company: CompanyProfile | None) -> MatchDetail:
    if company is None:
        return _detail(100, "No company culture data")

    axes = (
        (candidate.preferred_company_focus, company.focus_type),
        (candidate.preferred_mission_orientation, company.mission_orientation),
        (candidate.preferred_work_style, company.work_style),
    )
    compared = 0
    matched = 0
    for preferred, actual in axes:
        if not preferred or not actual:
            continue
        compared += 1
        if _normalize(actual) in _normalized_set(preferred):
            matched += 1

    if compared == 0:
        return _detail(100, "No comparable culture data")
    return _detail(100 * matched / compared, f"{matched}/{compared} culture axes aligned")


def _categorical_reason(result: CategoricalResult, label: str) -> str:
    if not result.has_requirements:
        return f"No {label} requirements specified"
    if result.failed_dealbreakers:
        return f"Dealbreaker mismatch: {result.failed_dealbreakers[0]}"
    parts = []
    if result.matches:
        parts.append(f"Matches: {len(result.matches)}")
    if result.mismatches:
        parts.append(f"Mismatches: {len(result.mismatches)}")
    return ". ".join(parts) if parts else "Partial data"


def score_work_style(
    candidate_preferences: Mapping[WorkStyleKey, str] | None,
    job_requirements: Mapping[WorkStyleKey, str] | None,
    company_defaults: Mapping[WorkStyleKey, str] | None,
    dealbreakers: Collection[WorkStyleKey],
    config: CategoricalConfig,
) -> MatchDetail:
    result = match_categorical(
        candidate_preferences,
        merge_requirements(company_defaults, job_requirements),
        config.work_style,
        default_weight=config.default_key_weight,
        no_requirements_score=config.no_requirements_score,
        dealbreakers=dealbreakers,
    )
    return _detail(result.score, _categorical_reason(result, "work style"))


def score_team_fit(
    candidate_preferences: Mapping[TeamKey, str] | None,
    job_requirements: Mapping[TeamKey, str] | None,
    company_defaults: Mapping[TeamKey, str] | None,
    dealbreakers: Collection[TeamKey],
    config: CategoricalConfig,
) -> MatchDetail:
    result = match_categorical(
        candidate_preferences,
        merge_requirements(company_defaults, job_requirements),
        config.team,
        default_weight=config.default_key_weight,
        no_requirements_score=config.no_requirements_score,
        dealbreakers=dealbreakers,
    )
    return _detail(result.score, _categorical_reason(result, "team"))


def score_management_fit(
    candidate_preferences: Mapping[ManagementKey, str] | None,
    hiring_manager: HiringManagerPreferences | None,
    config: CategoricalConfig,
) -> MatchDetail:
    if hiring_manager is None or not any(hiring_manager.preferences.values()):
        return _detail(100, "No hiring manager preferences")
    result = match_categorical(
        candidate_preferences,
        hiring_manager.preferences,
        config.management,
        default_weight=config.default_key_weight,
        no_requirements_score=100,
        dealbreakers=hiring_manager.dealbreakers,
    )
    return _detail(result.score, _categorical_reason(result, "management"))


def score_performance(
    minimums: Mapping[PerformanceAxis, float],
    boost: VerificationBoost,
    config: PerformanceConfig,
) -> MatchDetail:
    if not minimums:
        return _detail(100, "No performance requirements")

    axis_scores = []
    shortfalls = []
    for axis, required in minimums.items():
        verified = boost.performance_scores.axis(axis)
        gap = max(0.0, required - verified)
        if gap > 0:
            shortfalls.append(axis.value)
        axis_scores.append(max(0.0, 100 - config.decay_per_point * gap))

    score = sum(axis_scores) / len(axis_scores)
    if shortfalls:
        return _detail(score, f"Below verified minimum on: {', '.join(shortfalls)}")
    return _detail(score, "Verified performance meets requirements")


def score_salary(candidate_min: float | None, job_max: float | None) -> MatchDetail:
    if candidate_min is None or job_max is None:
        return _detail(100, "No salary constraint")
    if candidate_min > job_max:
        return _detail(0, "Salary expectation exceeds budget")
    return _detail(100, "Within budget")


def score_work_mode(job_mode: str | None, accepted_modes: Sequence[str]) -> MatchDetail:
    if not job_mode:
        return _detail(100, "No work mode requirement")
    if not accepted_modes:
        return _detail(50, "Work mode preference unknown")
    if job_mode in accepted_modes:
        return _detail(100, "Mode match")
    return _detail(0, f"Work mode mismatch: job is {job_mode}")


def score_seniority(job_seniority: str | None, desired_seniority: Sequence[str], config: MismatchConfig) -> MatchDetail:
    if not job_seniority or not desired_seniority:
        return _detail(100, "Level align")
    if _normalize(job_seniority) in _normalized_set(desired_seniority):
        return _detail(100, "Level align")
    return _detail(config.mismatch_score, "Level misalign")


def score_traits(
    required: Sequence[str],
    desired: Sequence[str],
    candidate_traits: Sequence[str],
    boost: VerificationBoost,
    config: TraitsConfig,
) -> MatchDetail:
    if not required and not desired:
        return _detail(100, "No trait requirements")

    held = _normalized_set(candidate_traits)
    missing = [trait for trait in required if _normalize(trait) not in held]
    if missing:
        return _detail(0, f"Missing required traits: {', '.join(missing[:2])}")

    desired_met = sum(1 for trait in desired if _normalize(trait) in held)
    if desired:
        score = config.required_met_base + config.desired_bonus * desired_met / len(desired)
    else:
        score = 100.0
    return _detail(min(100.0, score * boost.traits_multiplier), "Personality fit")


def score_perks() -> MatchDetail:
    return _detail(100, "Perks not scored")
