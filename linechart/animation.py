from __future__ import annotations

from linechart.config import Animation


def animation_progress(animation: Animation, elapsed_s: float) -> float:
    """Fraction of the entry animation completed after ``elapsed_s`` seconds."""
    if not animation.enabled or animation.duration <= 0:
        return 1.0
    return max(0.0, min(1.0, float(elapsed_s) / float(animation.duration)))
