from __future__ import annotations

import math
from typing import Sequence

import numpy as np
from PIL import Image, ImageDraw

from linechart.colors import RGBA
from linechart.raster.canvas import blend_mask


def fill_polygon(dst: np.ndarray, points: Sequence[tuple[float, float]], color: RGBA) -> None:
    if len(points) < 3:
        return
    xs = [float(p[0]) for p in points]
    ys = [float(p[1]) for p in points]
    x0 = int(math.floor(min(xs)))
    y0 = int(math.floor(min(ys)))
    w = int(math.ceil(max(xs))) - x0 + 1
    h = int(math.ceil(max(ys))) - y0 + 1
    image = Image.new("L", (w, h), 0)
    ImageDraw.Draw(image).polygon([(x - x0, y - y0) for x, y in zip(xs, ys)], fill=255)
    blend_mask(dst, x0, y0, np.asarray(image, dtype=np.uint8), color)


def draw_disc(dst: np.ndarray, cx: float, cy: float, diameter: float, color: RGBA) -> None:
    size = max(1, int(round(diameter)))
    image = Image.new("L", (size, size), 0)
    ImageDraw.Draw(image).ellipse((0, 0, size - 1, size - 1), fill=255)
    x0 = int(math.floor(cx - size / 2.0 + 0.5))
    y0 = int(math.floor(cy - size / 2.0 + 0.5))
    blend_mask(dst, x0, y0, np.asarray(image, dtype=np.uint8), color)


def draw_dot(
    dst: np.ndarray,
    cx: float,
    cy: float,
    *,
    outer_diameter: float,
    inner_diameter: float,
    outer_color: RGBA,
    inner_color: RGBA,
) -> None:
    """A filled ring: outer disc in ``outer_color`` with a centered inner disc."""
    draw_disc(dst, cx, cy, outer_diameter, outer_color)
    draw_disc(dst, cx, cy, inner_diameter, inner_color)
