from __future__ import annotations

import colorsys
import re


RGBA = tuple[int, int, int, int]

_HEX_COLOR = re.compile(r"^#[0-9a-fA-F]{6}([0-9a-fA-F]{2})?$")

# category10 colors from d3
CATEGORY10: tuple[str, ...] = (
    "#1f77b4",
    "#ff7f0e",
    "#2ca02c",
    "#d62728",
    "#9467bd",
    "#8c564b",
    "#e377c2",
    "#7f7f7f",
    "#bcbd22",
    "#17becf",
)


def is_hex_color(value: object) -> bool:
    return isinstance(value, str) and _HEX_COLOR.match(value) is not None


def hex_to_rgba(value: str) -> RGBA:
    if not is_hex_color(value):
        raise ValueError(f"color must be a hex color (#RRGGBB or #RRGGBBAA), got {value!r}")
    r = int(value[1:3], 16)
    g = int(value[3:5], 16)
    b = int(value[5:7], 16)
    a = int(value[7:9], 16) if len(value) == 9 else 255
    return (r, g, b, a)


def rgb_int_to_rgba(value: int) -> RGBA:
    return ((value & 0xFF0000) >> 16, (value & 0xFF00) >> 8, value & 0xFF, 255)


def with_alpha(color: RGBA, alpha: float) -> RGBA:
    a = int(round(max(0.0, min(1.0, alpha)) * color[3]))
    return (color[0], color[1], color[2], a)


def lighten(color: RGBA, factor: float = 1.5) -> RGBA:
    h, s, v = colorsys.rgb_to_hsv(color[0] / 255.0, color[1] / 255.0, color[2] / 255.0)
    r, g, b = colorsys.hsv_to_rgb(h, s, min(1.0, v * factor))
    return (int(round(r * 255)), int(round(g * 255)), int(round(b * 255)), color[3])


def series_color(palette: tuple[str, ...], index: int) -> RGBA:
    if not palette:
        raise ValueError("palette must contain at least one color")
    return hex_to_rgba(palette[index % len(palette)])
