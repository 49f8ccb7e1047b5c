from __future__ import annotations

from collections.abc import Collection, Mapping

from talentmatch.core.config.scoring import ScoringConfig
from talentmatch.schemas import CandidateProfile, Dimension, JobPosting, MatchDetail

from .dimensions import best_proficiency, language_met


def build_recommendations(
    job: JobPosting,
    candidate: CandidateProfile,
    candidate_cert_ids: Collection[str] | None,
    details: Mapping[Dimension, MatchDetail],
    config: ScoringConfig,
) -> tuple[str, ...]:
    """Actionable notes for the candidate, derived from the same inputs as the scores."""
    notes: list[str] = []

    levels = {skill.name.strip().lower(): skill.level for skill in candidate.skills}
    for requirement in job.skills:
        level = levels.get(requirement.name.strip().lower())
        if requirement.weight == "preferred" and level is None:
            notes.append(f"Consider learning {requirement.name}")
        elif requirement.weight == "required" and (level or 0) < requirement.required_level:
            notes.append(f"Build {requirement.name} to level {requirement.required_level}")

    if candidate_cert_ids is not None:
        held = {cert.strip().lower() for cert in candidate_cert_ids}
        notes.extend(
            f"Consider earning the {cert} certification"
            for cert in job.preferred_certifications
            if cert.strip().lower() not in held
        )

    salary = details.get(Dimension.SALARY)
    if salary is not None and salary.score == 0 and job.salary_max is not None:
        notes.append(f"Salary expectation is above the role's budget of {job.salary_max:g}")

    best = best_proficiency(candidate.languages, config.languages)
    for requirement in job.language_requirements:
        if not requirement.required and not language_met(requirement, best, config.languages):
            notes.append(f"Improve {requirement.language} to {requirement.min_proficiency.value} level")

    timezone = details.get(Dimension.TIMEZONE)
    if timezone is not None and timezone.score < 100:
        notes.append("Confirm availability for the team's overlapping hours")

    return tuple(notes)
