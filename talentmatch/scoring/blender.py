"""Score Blender.

Sub-factor blending (certifications into skills, alignment into culture,
regulatory into industry) runs first; the overall score is then a pure
reduction over ``BlendTerm`` tuples so the formula can be tested on its own.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass

from talentmatch.core.config.scoring import BLENDED_DIMENSIONS, BlendConfig, ScoringConfig
from talentmatch.schemas import Dimension, MatchDetail

from .numbers import clamp_score, round_half_up


@dataclass(frozen=True)
class BlendTerm:
    dimension: Dimension
    score: float
    weight: float

    @property
    def contribution(self) -> float:
        return self.score * self.weight


def blend(terms: Iterable[BlendTerm]) -> int:
    return round_half_up(clamp_score(sum(term.contribution for term in terms)))


def skills_final(skills: float, certifications: float, *, certifications_apply: bool, config: BlendConfig) -> float:
    share = config.certification_share if certifications_apply else 0.0
    return skills * (1 - share) + certifications * share


def culture_final(alignment: float, config: BlendConfig) -> float:
    return config.culture_base * config.culture_base_share + alignment * (1 - config.culture_base_share)


def industry_final(industry: float, regulatory: float, *, regulatory_applies: bool, config: BlendConfig) -> float:
    if not regulatory_applies:
        return industry
    return industry * config.industry_share + regulatory * config.regulatory_share


def build_blend_terms(
    details: Mapping[Dimension, MatchDetail],
    config: ScoringConfig,
    *,
    certifications_apply: bool,
    regulatory_applies: bool,
) -> list[BlendTerm]:
    """Turn raw dimension details into the ordered terms of the top-level weighted sum."""

    def raw(dimension: Dimension) -> float:
        detail = details.get(dimension)
        return detail.score if detail is not None else 100.0

    blended = {dimension: raw(dimension) for dimension in BLENDED_DIMENSIONS}
    blended[Dimension.SKILLS] = skills_final(
        raw(Dimension.SKILLS),
        raw(Dimension.CERTIFICATIONS),
        certifications_apply=certifications_apply,
        config=config.blend,
    )
    blended[Dimension.CULTURE] = culture_final(raw(Dimension.CULTURE), config.blend)
    blended[Dimension.INDUSTRY] = industry_final(
        raw(Dimension.INDUSTRY),
        raw(Dimension.REGULATORY),
        regulatory_applies=regulatory_applies,
        config=config.blend,
    )

    return [BlendTerm(dimension, blended[dimension], config.weight(dimension)) for dimension in BLENDED_DIMENSIONS]


def apply_role_alignment(overall: int, role_alignment: float, config: BlendConfig) -> int:
    share = config.role_alignment_share
    return round_half_up(clamp_score(overall * (1 - share) + role_alignment * share))
