from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

import numpy as np

from linechart.adapters import coerce_series
from linechart.scales import Interval


@dataclass
class ChartData:
    """Ordered store of the series a chart draws."""

    _series: list[np.ndarray] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self._series)

    def __iter__(self):
        return iter(self._series)

    def __getitem__(self, index: int) -> np.ndarray:
        return self._series[index]

    @property
    def is_empty(self) -> bool:
        return not self._series

    def add_line(self, values: Any) -> np.ndarray:
        arr = coerce_series(values, label=f"line {len(self._series)}")
        arr.setflags(write=False)
        self._series.append(arr)
        return arr

    def clear(self) -> None:
        self._series.clear()

    def y_domain(self) -> Interval:
        if not self._series:
            return (0.0, 1.0)
        seed = float(self._series[0][0])
        lo = min(seed, *(float(np.min(s)) for s in self._series))
        hi = max(seed, *(float(np.max(s)) for s in self._series))
        return (lo, hi)

    def x_domain(self) -> Interval:
        if not self._series:
            return (0.0, 1.0)
        count = self._series[0].size
        return (0.0, float(count - 1) if count > 1 else 1.0)

    def values_at_index(self, index: int) -> list[float]:
        out: list[float] = []
        for series in self._series:
            clamped = min(max(int(index), 0), series.size - 1)
            out.append(float(series[clamped]))
        return out
