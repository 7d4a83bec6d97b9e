from __future__ import annotations

import math
from typing import Sequence

import numpy as np

from linechart.colors import RGBA
from linechart.raster.canvas import draw_pixel


Point = tuple[float, float]


def draw_polyline(
    dst: np.ndarray,
    points: Sequence[Point],
    color: RGBA,
    width: int = 1,
    *,
    stroke_end: float = 1.0,
) -> None:
    """Stroke ``points`` in order, stopping at fraction ``stroke_end`` of the total length."""
    visible = truncate_polyline(points, stroke_end)
    if len(visible) < 2:
        return
    for (xa, ya), (xb, yb) in zip(visible[:-1], visible[1:]):
        _draw_line_segment(dst, _px(xa), _px(ya), _px(xb), _px(yb), color=color, width=width)


def truncate_polyline(points: Sequence[Point], fraction: float) -> list[Point]:
    pts = [(float(x), float(y)) for x, y in points]
    if len(pts) < 2 or fraction >= 1.0:
        return pts
    if fraction <= 0.0:
        return pts[:1]
    lengths = [math.dist(a, b) for a, b in zip(pts[:-1], pts[1:])]
    remaining = sum(lengths) * fraction
    out = [pts[0]]
    for (a, b), seg in zip(zip(pts[:-1], pts[1:]), lengths):
        if seg >= remaining:
            t = remaining / seg if seg > 0 else 0.0
            out.append((a[0] + (b[0] - a[0]) * t, a[1] + (b[1] - a[1]) * t))
            break
        out.append(b)
        remaining -= seg
    return out


def _px(value: float) -> int:
    return int(math.floor(value + 0.5))


def _draw_line_segment(dst: np.ndarray, x0: int, y0: int, x1: int, y1: int, color: RGBA, width: int) -> None:
    dx = abs(x1 - x0)
    sx = 1 if x0 < x1 else -1
    dy = -abs(y1 - y0)
    sy = 1 if y0 < y1 else -1
    err = dx + dy

    while True:
        _stamp(dst, x0, y0, color=color, width=width)
        if x0 == x1 and y0 == y1:
            break
        e2 = 2 * err
        if e2 >= dy:
            err += dy
            x0 += sx
        if e2 <= dx:
            err += dx
            y0 += sy


def _stamp(dst: np.ndarray, x: int, y: int, color: RGBA, width: int) -> None:
    lo = -((width - 1) // 2)
    hi = width // 2
    for yy in range(y + lo, y + hi + 1):
        for xx in range(x + lo, x + hi + 1):
            draw_pixel(dst, xx, yy, color)
