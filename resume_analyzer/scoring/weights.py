from __future__ import annotations

from typing import Any

from resume_analyzer.core.config.scoring import get_scoring_value


def clamp_int(value: Any, default: int, min_value: int, max_value: int) -> int:
    try:
        parsed = int(float(value))
    except (TypeError, ValueError):
        return default
    return max(min_value, min(max_value, parsed))


def points(path: str, default: int, *, max_value: int = 100) -> int:
    return clamp_int(get_scoring_value(path, default), default=default, min_value=0, max_value=max_value)


def band(name: str, default: tuple[int, int]) -> tuple[int, int]:
    """Half-open ``[low, high)`` band from ``proficiency.bands.<name>``."""
    raw = get_scoring_value(f"proficiency.bands.{name}", list(default))
    if not isinstance(raw, (list, tuple)) or len(raw) != 2:
        return default
    low = clamp_int(raw[0], default=default[0], min_value=0, max_value=100)
    high = clamp_int(raw[1], default=default[1], min_value=0, max_value=101)
    if high <= low:
        return default
    return low, high
