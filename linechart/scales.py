from __future__ import annotations

from dataclasses import dataclass, field
import logging
import math
from typing import NamedTuple, Sequence, overload

import numpy as np


LOGGER = logging.getLogger(__name__)

Interval = tuple[float, float]


class TickPlan(NamedTuple):
    start: float
    stop: float
    step: float

    def values(self) -> np.ndarray:
        """Inclusive stride ``start, start + step, ... <= stop``."""
        if not self.step > 0 or not np.isfinite(self.step):
            return np.asarray([self.start], dtype=np.float64)
        count = int(math.floor((self.stop - self.start) / self.step + 1e-9)) + 1
        ticks = self.start + self.step * np.arange(max(count, 1), dtype=np.float64)
        # Normalize floating-point drift so values like -4.44e-16 become 0.
        ticks[np.isclose(ticks, 0.0, rtol=0.0, atol=self.step * 1e-9)] = 0.0
        return ticks


def scale_extent(domain: Sequence[float]) -> Interval:
    if len(domain) != 2:
        raise ValueError(f"domain must have exactly 2 values, got {len(domain)}")
    lo = float(min(domain))
    hi = float(max(domain))
    if lo < hi:
        return (lo, hi)
    if lo > 0:
        return (0.0, lo)
    if lo < 0:
        return (lo, 0.0)
    return (0.0, 1.0)


def raw_precision(domain: Sequence[float], count: int) -> float:
    span = float(domain[1]) - float(domain[0])
    if not span > 0 or not math.isfinite(span):
        raise ValueError(f"domain span must be finite and > 0, got {span!r}")
    divisions = count if count > 0 else 1
    return 10.0 ** math.floor(math.log10(span / divisions))


def tick_plan(domain: Sequence[float], count: int) -> TickPlan:
    divisions = count if count > 0 else 1
    precision = raw_precision(domain, divisions)
    lo, hi = float(domain[0]), float(domain[1])
    # Round start and stop to the precision grid. The product can land one ulp
    # inside the domain, so clamp to keep the ends covered.
    start = min(math.floor(lo / precision) * precision, lo)
    stop = max(math.ceil(hi / precision) * precision, hi)
    step = math.floor((stop - start) / divisions / precision) * precision
    return TickPlan(start=start, stop=stop, step=step)


def decimals_for_precision(precision: float) -> int:
    if not precision > 0 or not math.isfinite(precision):
        return 0
    decimals = 0
    while precision < 1.0:
        decimals += 1
        precision *= 10.0
    return decimals


def format_tick_label(value: float, decimals: int) -> str:
    out = f"{float(value):.{max(0, int(decimals))}f}"
    if out.lstrip("-").strip("0.") == "":
        # "-0" and "-0.00" read as zero.
        out = out.lstrip("-")
    return out


@dataclass(frozen=True)
class _Bilinear:
    src_lo: float
    factor: float
    dst_lo: float
    dst_span: float

    @classmethod
    def between(cls, src: Interval, dst: Interval) -> "_Bilinear":
        diff = src[1] - src[0]
        factor = 1.0 / diff if diff != 0 else 0.0
        return cls(src_lo=src[0], factor=factor, dst_lo=dst[0], dst_span=dst[1] - dst[0])

    @overload
    def __call__(self, value: float) -> float: ...

    @overload
    def __call__(self, value: np.ndarray) -> np.ndarray: ...

    def __call__(self, value):
        arr = np.asarray(value, dtype=np.float64)
        out = self.dst_lo + self.dst_span * ((arr - self.src_lo) * self.factor)
        if out.ndim == 0:
            return float(out)
        return out


@dataclass(frozen=True)
class LinearScale:
    """Maps a data domain onto an output range and back.

    The domain passes through :func:`scale_extent` on construction, so a
    single-point or all-zero domain still yields a usable mapping. Instances
    are values: build a new one whenever bounds change.
    """

    domain: Interval = (0.0, 1.0)
    range: Interval = (0.0, 1.0)
    _forward: _Bilinear = field(init=False, repr=False, compare=False)
    _inverse: _Bilinear = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        if len(self.range) != 2:
            raise ValueError(f"range must have exactly 2 values, got {len(self.range)}")
        domain = scale_extent(self.domain)
        out_range = (float(self.range[0]), float(self.range[1]))
        object.__setattr__(self, "domain", domain)
        object.__setattr__(self, "range", out_range)
        object.__setattr__(self, "_forward", _Bilinear.between(domain, out_range))
        object.__setattr__(self, "_inverse", _Bilinear.between(out_range, domain))

    @overload
    def forward(self, value: float) -> float: ...

    @overload
    def forward(self, value: np.ndarray) -> np.ndarray: ...

    def forward(self, value):
        return self._forward(value)

    @overload
    def inverse(self, value: float) -> float: ...

    @overload
    def inverse(self, value: np.ndarray) -> np.ndarray: ...

    def inverse(self, value):
        return self._inverse(value)

    def ticks(self, count: int) -> TickPlan:
        plan = tick_plan(self.domain, count)
        LOGGER.debug("tick plan for domain %s count %d: %s", self.domain, count, plan)
        return plan

    def tick_values(self, count: int) -> np.ndarray:
        return self.ticks(count).values()

    def precision(self, count: int) -> float:
        return raw_precision(self.domain, count)

    def decimals(self, count: int) -> int:
        return decimals_for_precision(self.precision(count))
