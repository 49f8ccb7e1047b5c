"""Verification Booster.

Turns a candidate's third-party verification aggregate into the multipliers and
performance vector consumed by the skills, traits and performance scorers.
"""

from __future__ import annotations

from talentmatch.core.config.scoring import PerformanceConfig, VerificationConfig
from talentmatch.schemas import PerformanceScores, VerificationBoost, VerificationStats


def neutral_performance(config: PerformanceConfig) -> PerformanceScores:
    neutral = config.neutral_score
    return PerformanceScores(
        communication=neutral,
        problem_solving=neutral,
        reliability=neutral,
        collaboration=neutral,
    )


def compute_verification_boost(
    stats: VerificationStats | None,
    config: VerificationConfig,
    performance_config: PerformanceConfig,
) -> VerificationBoost:
    """Monotone, saturating bonus in the number of independent verifications.

    No verifications means multipliers of 1.0 and neutral (5/10) performance axes.
    The tier saturates at ``config.tier_cap`` so the bonus stays bounded.
    """
    if stats is None or stats.total_verifications <= 0:
        return VerificationBoost(performance_scores=neutral_performance(performance_config))

    tier = min(stats.total_verifications, config.tier_cap)
    skills_multiplier = 1.0 + config.skills_per_tier * tier
    has_strong_skill = any(
        stat.level_agreement_rate >= config.strong_skill_agreement
        and stat.verification_count >= config.strong_skill_min_count
        for stat in stats.verified_skills
    )
    if has_strong_skill:
        skills_multiplier *= config.strong_skill_bonus
    traits_multiplier = 1.0 + config.traits_per_tier * tier

    return VerificationBoost(
        skills_multiplier=skills_multiplier,
        traits_multiplier=traits_multiplier,
        performance_scores=stats.performance or neutral_performance(performance_config),
        verified_skills=tuple(stats.verified_skills),
    )
