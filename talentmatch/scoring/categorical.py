"""Generic weighted-categorical matcher shared by work style, team fit and management fit."""

from __future__ import annotations

from collections.abc import Collection, Mapping
from dataclasses import dataclass
from enum import Enum
from typing import TypeVar

K = TypeVar("K", bound=Enum)


@dataclass(frozen=True)
class CategoricalResult:
    score: float
    matches: tuple[str, ...] = ()
    mismatches: tuple[str, ...] = ()
    failed_dealbreakers: tuple[str, ...] = ()
    has_requirements: bool = True


def merge_requirements(defaults: Mapping[K, str] | None, overrides: Mapping[K, str] | None) -> dict[K, str]:
    """Company defaults overlaid with job-specific values; the job wins on shared keys."""
    merged: dict[K, str] = {}
    for source in (defaults or {}, overrides or {}):
        for key, value in source.items():
            if value:
                merged[key] = value
    return merged


def match_categorical(
    candidate: Mapping[K, str] | None,
    requirements: Mapping[K, str],
    weights: Mapping[K, float],
    *,
    default_weight: float,
    no_requirements_score: float,
    dealbreakers: Collection[K] = (),
) -> CategoricalResult:
    active = {key: value for key, value in requirements.items() if value}
    if not active:
        return CategoricalResult(score=no_requirements_score, has_requirements=False)

    preferences = candidate or {}
    total_weight = 0.0
    weighted_score = 0.0
    matches: list[str] = []
    mismatches: list[str] = []
    failed: list[str] = []

    for key, required_value in active.items():
        weight = weights.get(key, default_weight)
        total_weight += weight
        candidate_value = preferences.get(key)

        if not candidate_value:
            weighted_score += weight * 50
        elif candidate_value == required_value:
            weighted_score += weight * 100
            matches.append(key.value)
        else:
            mismatches.append(key.value)
            if key in dealbreakers:
                failed.append(key.value)

    score = weighted_score / total_weight if total_weight > 0 else no_requirements_score
    if failed:
        score = 0.0

    return CategoricalResult(
        score=score,
        matches=tuple(matches),
        mismatches=tuple(mismatches),
        failed_dealbreakers=tuple(failed),
    )
