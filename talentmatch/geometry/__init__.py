from .triangle import (
    apply_snap,
    clamp_to_triangle,
    distance,
    drag_to_weights,
    is_inside_triangle,
    match_preset,
    normalize_weights,
    point_to_weights,
    presets,
    project_to_segment,
    release_to_weights,
    step_direction,
    step_weights,
    weights_to_point,
)

__all__ = [
    "apply_snap",
    "clamp_to_triangle",
    "distance",
    "drag_to_weights",
    "is_inside_triangle",
    "match_preset",
    "normalize_weights",
    "point_to_weights",
    "presets",
    "project_to_segment",
    "release_to_weights",
    "step_direction",
    "step_weights",
    "weights_to_point",
]
