from __future__ import annotations

from dataclasses import dataclass
import math
from typing import Literal, Mapping

from linechart.scales import LinearScale


TouchPhase = Literal["began", "moved", "ended", "cancelled"]

_PHASES = frozenset({"began", "moved", "ended", "cancelled"})


@dataclass(frozen=True)
class TouchEvent:
    """Pointer position in view coordinates (origin top-left)."""

    phase: TouchPhase
    x: float
    y: float


@dataclass(frozen=True)
class Selection:
    index: int
    y_values: tuple[float, ...]


def parse_touch_event(event_type: str, payload: object) -> TouchEvent | None:
    """Parse a raw ``touch`` event payload; anything else yields ``None``."""

    if event_type != "touch" or not isinstance(payload, Mapping):
        return None
    phase = payload.get("phase")
    if phase not in _PHASES:
        return None
    x = payload.get("x")
    y = payload.get("y", 0.0)
    if not _is_number(x) or not _is_number(y):
        return None
    return TouchEvent(phase=phase, x=float(x), y=float(y))


def index_for_pointer(x_scale: LinearScale, pointer_x: float, x_inset: float) -> int:
    inverted = x_scale.inverse(float(pointer_x) - float(x_inset))
    return round_half_away(inverted)


def round_half_away(value: float) -> int:
    return int(math.copysign(math.floor(abs(value) + 0.5), value))


def _is_number(value: object) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool) and math.isfinite(value)
