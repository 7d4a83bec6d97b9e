from __future__ import annotations

from dataclasses import dataclass, field, fields, is_dataclass
from typing import Any, Mapping

from linechart.colors import CATEGORY10, is_hex_color


@dataclass
class Labels:
    visible: bool = True
    values: tuple[str, ...] = ()


@dataclass
class Grid:
    visible: bool = True
    count: int = 10
    color: str = "#eeeeee"


@dataclass
class Axis:
    visible: bool = True
    color: str = "#607d8b"
    inset: float = 15.0


@dataclass
class Coordinate:
    labels: Labels = field(default_factory=Labels)
    grid: Grid = field(default_factory=Grid)
    axis: Axis = field(default_factory=Axis)


@dataclass
class Animation:
    enabled: bool = True
    duration: float = 1.0


@dataclass
class Dots:
    visible: bool = True
    color: str = "#ffffff"
    inner_radius: float = 8.0
    outer_radius: float = 12.0
    inner_radius_highlighted: float = 8.0
    outer_radius_highlighted: float = 12.0


@dataclass
class ChartConfig:
    """Everything a chart can be told about how to draw itself."""

    area: bool = True
    line_width: int = 2
    animation: Animation = field(default_factory=Animation)
    dots: Dots = field(default_factory=Dots)
    x: Coordinate = field(default_factory=Coordinate)
    y: Coordinate = field(default_factory=Coordinate)
    colors: tuple[str, ...] = CATEGORY10
    background: str = "#00000000"
    font_family: str = "DejaVu Sans"
    font_size_px: float = 10.0

    @property
    def label_height(self) -> float:
        return self.font_size_px * 1.5


def config_from_mapping(overrides: Mapping[str, Any] | None = None) -> ChartConfig:
    """Build a validated :class:`ChartConfig` from nested mappings.

    Unknown keys raise ``ValueError`` so typos in config files fail loudly.
    """

    config = ChartConfig()
    if overrides:
        _apply(config, overrides, path="")
    validate_config(config)
    return config


def validate_config(config: ChartConfig) -> None:
    for name, coord in (("x", config.x), ("y", config.y)):
        _check_whole(f"{name}.grid.count", coord.grid.count)
        if int(coord.grid.count) <= 0:
            raise ValueError(f"`{name}.grid.count` must be > 0")
        if float(coord.axis.inset) < 0:
            raise ValueError(f"`{name}.axis.inset` must be >= 0")
        for key, value in ((f"{name}.grid.color", coord.grid.color), (f"{name}.axis.color", coord.axis.color)):
            if not is_hex_color(value):
                raise ValueError(f"`{key}` must be a hex color (#RRGGBB or #RRGGBBAA)")
        if not all(isinstance(v, str) for v in coord.labels.values):
            raise ValueError(f"`{name}.labels.values` must contain strings")

    _check_whole("line_width", config.line_width)
    if int(config.line_width) <= 0:
        raise ValueError("`line_width` must be > 0")
    if float(config.font_size_px) <= 0:
        raise ValueError("`font_size_px` must be > 0")
    if float(config.animation.duration) < 0:
        raise ValueError("`animation.duration` must be >= 0")
    for key in ("inner_radius", "outer_radius", "inner_radius_highlighted", "outer_radius_highlighted"):
        if float(getattr(config.dots, key)) <= 0:
            raise ValueError(f"`dots.{key}` must be > 0")
    if not is_hex_color(config.dots.color):
        raise ValueError("`dots.color` must be a hex color (#RRGGBB or #RRGGBBAA)")
    if not is_hex_color(config.background):
        raise ValueError("`background` must be a hex color (#RRGGBB or #RRGGBBAA)")
    if not config.colors or not all(is_hex_color(c) for c in config.colors):
        raise ValueError("`colors` must be a non-empty sequence of hex colors")
    if not isinstance(config.font_family, str) or not config.font_family.strip():
        raise ValueError("`font_family` must be a non-empty string")


def _apply(target: Any, overrides: Mapping[str, Any], *, path: str) -> None:
    known = {f.name: f for f in fields(target)}
    for key, value in overrides.items():
        dotted = f"{path}{key}"
        if key not in known:
            raise ValueError(f"Unknown config key: {dotted}")
        current = getattr(target, key)
        if is_dataclass(current):
            if not isinstance(value, Mapping):
                raise ValueError(f"`{dotted}` must be a mapping")
            _apply(current, value, path=f"{dotted}.")
            continue
        if isinstance(current, tuple):
            if isinstance(value, (str, bytes)) or not isinstance(value, (list, tuple)):
                raise ValueError(f"`{dotted}` must be a list")
            value = tuple(value)
        elif isinstance(current, bool):
            if not isinstance(value, bool):
                raise ValueError(f"`{dotted}` must be a boolean")
        elif isinstance(current, (int, float)):
            if isinstance(value, bool) or not isinstance(value, (int, float)):
                raise ValueError(f"`{dotted}` must be a number")
            if isinstance(current, int) and not float(value).is_integer():
                raise ValueError(f"`{dotted}` must be a whole number")
            value = type(current)(value)
        elif isinstance(current, str) and not isinstance(value, str):
            raise ValueError(f"`{dotted}` must be a string")
        setattr(target, key, value)


def _check_whole(key: str, value: Any) -> None:
    if isinstance(value, bool) or not isinstance(value, (int, float)) or not float(value).is_integer():
        raise ValueError(f"`{key}` must be a whole number")
