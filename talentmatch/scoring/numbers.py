from __future__ import annotations

import math


def round_half_up(value: float) -> int:
    # Halves round away from zero for positive scores; epsilon absorbs float drift (98.4999999 -> 98.5).
    return int(math.floor(value + 0.5 + 1e-9))


def clamp_score(value: float, low: float = 0.0, high: float = 100.0) -> float:
    return max(low, min(high, value))
