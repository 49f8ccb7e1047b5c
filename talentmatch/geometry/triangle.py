"""Weight-Space Geometry Controller.

Maps a skills / compensation / culture split to a point inside the layout
triangle and back. Weights produced here are integer percentages that always
sum to exactly 100.
"""

from __future__ import annotations

import math
from typing import Literal

from talentmatch.core.config.scoring import TriangleConfig, get_scoring_config
from talentmatch.schemas import MatchWeights, Point, WeightAxis
from talentmatch.scoring.numbers import round_half_up

Direction = Literal["up", "down", "left", "right"]

# Boundary tolerance for the sign test; projections land on edges up to float error.
_EPSILON = 1e-7

_AXES = (WeightAxis.SKILLS, WeightAxis.COMPENSATION, WeightAxis.CULTURE)

_DIRECTIONS: dict[str, tuple[WeightAxis, int]] = {
    "up": (WeightAxis.SKILLS, 1),
    "down": (WeightAxis.SKILLS, -1),
    "left": (WeightAxis.CULTURE, 1),
    "right": (WeightAxis.COMPENSATION, 1),
}


def _layout(layout: TriangleConfig | None) -> TriangleConfig:
    return layout or get_scoring_config().triangle


def _cross(o: Point, a: Point, b: Point) -> float:
    return (a.x - o.x) * (b.y - o.y) - (b.x - o.x) * (a.y - o.y)


def _integer_split(skills: float, compensation: float, culture: float) -> MatchWeights:
    """Round two shares and give the third the remainder so the total is exactly 100."""
    total = skills + compensation + culture
    if total <= 0:
        skills = compensation = culture = 1.0
        total = 3.0
    rounded_skills = round_half_up(100 * skills / total)
    rounded_compensation = round_half_up(100 * compensation / total)
    overflow = rounded_skills + rounded_compensation - 100
    if overflow > 0:
        if rounded_skills >= rounded_compensation:
            rounded_skills -= overflow
        else:
            rounded_compensation -= overflow
    return MatchWeights(
        skills=rounded_skills,
        compensation=rounded_compensation,
        culture=100 - rounded_skills - rounded_compensation,
    )


def presets(layout: TriangleConfig | None = None) -> dict[str, MatchWeights]:
    return dict(_layout(layout).presets)


def normalize_weights(weights: MatchWeights) -> MatchWeights:
    return _integer_split(weights.skills, weights.compensation, weights.culture)


def weights_to_point(weights: MatchWeights, layout: TriangleConfig | None = None) -> Point:
    """Convex combination of the vertices; all-zero weights map to the centroid."""
    layout = _layout(layout)
    total = weights.total
    if total <= 0:
        return layout.centroid

    x = 0.0
    y = 0.0
    for axis in _AXES:
        vertex = layout.vertices[axis]
        share = weights.get(axis) / total
        x += vertex.x * share
        y += vertex.y * share
    return Point(x=x, y=y)


def point_to_weights(point: Point, layout: TriangleConfig | None = None) -> MatchWeights:
    """Barycentric coordinates of ``point`` as integer percentages."""
    layout = _layout(layout)
    a = layout.vertices[WeightAxis.SKILLS]
    b = layout.vertices[WeightAxis.COMPENSATION]
    c = layout.vertices[WeightAxis.CULTURE]

    # Each weight is the area of the sub-triangle opposite its vertex.
    area_skills = abs(_cross(point, b, c))
    area_compensation = abs(_cross(point, c, a))
    area_culture = abs(_cross(point, a, b))
    if area_skills + area_compensation + area_culture <= 0:
        raise ValueError("triangle layout is degenerate")
    return _integer_split(area_skills, area_compensation, area_culture)


def is_inside_triangle(point: Point, layout: TriangleConfig | None = None) -> bool:
    """Closed-triangle test: boundary points count as inside."""
    layout = _layout(layout)
    a = layout.vertices[WeightAxis.SKILLS]
    b = layout.vertices[WeightAxis.COMPENSATION]
    c = layout.vertices[WeightAxis.CULTURE]

    signs = (_cross(point, a, b), _cross(point, b, c), _cross(point, c, a))
    has_negative = any(value < -_EPSILON for value in signs)
    has_positive = any(value > _EPSILON for value in signs)
    return not (has_negative and has_positive)


def distance(a: Point, b: Point) -> float:
    return math.hypot(a.x - b.x, a.y - b.y)


def project_to_segment(point: Point, start: Point, end: Point) -> Point:
    dx = end.x - start.x
    dy = end.y - start.y
    length_squared = dx * dx + dy * dy
    if length_squared == 0:
        return start

    t = ((point.x - start.x) * dx + (point.y - start.y) * dy) / length_squared
    t = max(0.0, min(1.0, t))
    return Point(x=start.x + t * dx, y=start.y + t * dy)


def clamp_to_triangle(point: Point, layout: TriangleConfig | None = None) -> Point:
    """Return ``point`` if inside, otherwise its nearest projection onto the boundary."""
    layout = _layout(layout)
    if is_inside_triangle(point, layout):
        return point

    a = layout.vertices[WeightAxis.SKILLS]
    b = layout.vertices[WeightAxis.COMPENSATION]
    c = layout.vertices[WeightAxis.CULTURE]
    projections = [project_to_segment(point, start, end) for start, end in ((a, b), (b, c), (c, a))]
    return min(projections, key=lambda projected: distance(point, projected))


def apply_snap(point: Point, layout: TriangleConfig | None = None) -> Point:
    """Snap to the centroid, then to a vertex, when close enough; otherwise unchanged."""
    layout = _layout(layout)
    if distance(point, layout.centroid) < layout.center_snap_radius:
        return layout.centroid
    for axis in _AXES:
        vertex = layout.vertices[axis]
        if distance(point, vertex) < layout.vertex_snap_radius:
            return vertex
    return point


def drag_to_weights(point: Point, layout: TriangleConfig | None = None) -> MatchWeights:
    layout = _layout(layout)
    return point_to_weights(clamp_to_triangle(point, layout), layout)


def release_to_weights(point: Point, layout: TriangleConfig | None = None) -> MatchWeights:
    layout = _layout(layout)
    return point_to_weights(apply_snap(clamp_to_triangle(point, layout), layout), layout)


def step_weights(weights: MatchWeights, axis: WeightAxis, amount: int) -> MatchWeights:
    """Move one weight by ``amount`` and redistribute the delta across the other two.

    The other two absorb the change in proportion to their current values; the
    rounding residual goes to the last of them so the total stays exactly 100.
    """
    base = normalize_weights(weights)
    current = int(base.get(axis))
    updated = max(0, min(100, current + amount))
    diff = updated - current

    others = [other for other in _AXES if other is not axis]
    other_total = sum(base.get(other) for other in others)
    values = {axis: updated}

    if other_total == 0:
        remainder = 100 - updated
        values[others[0]] = remainder // 2
        values[others[1]] = remainder - remainder // 2
    else:
        for other in others:
            share = base.get(other) / other_total
            values[other] = max(0, round_half_up(base.get(other) - diff * share))

    residual = 100 - sum(values.values())
    last, first = others[1], others[0]
    values[last] += residual
    if values[last] < 0:
        values[first] += values[last]
        values[last] = 0

    return MatchWeights(**{key.value: value for key, value in values.items()})


def step_direction(
    weights: MatchWeights,
    direction: Direction,
    layout: TriangleConfig | None = None,
) -> MatchWeights:
    """Arrow-key stepping: up/down move skills, left raises culture, right raises compensation."""
    layout = _layout(layout)
    try:
        axis, sign = _DIRECTIONS[direction]
    except KeyError as exc:
        raise ValueError(f"Unsupported direction: {direction}") from exc
    return step_weights(weights, axis, sign * layout.step)


def match_preset(weights: MatchWeights, layout: TriangleConfig | None = None) -> str | None:
    """Name of the first preset within tolerance on every axis, if any."""
    layout = _layout(layout)
    for name, preset in layout.presets.items():
        if all(abs(weights.get(axis) - preset.get(axis)) <= layout.preset_tolerance for axis in _AXES):
            return name
    return None
