from __future__ import annotations

from dataclasses import dataclass, field
import logging
import math
from typing import Any, Protocol

import numpy as np

from linechart.animation import animation_progress
from linechart.colors import RGBA, hex_to_rgba, lighten, series_color, with_alpha
from linechart.config import ChartConfig, validate_config
from linechart.dataset import ChartData
from linechart.layout import ChartLayout, LabelBox, Segment, build_x_scale, compute_layout
from linechart.pointer import Selection, TouchEvent, index_for_pointer, parse_touch_event
from linechart.raster import (
    draw_dot,
    draw_hline,
    draw_polyline,
    draw_text_centered,
    draw_vline,
    fill_polygon,
    new_canvas,
)


LOGGER = logging.getLogger(__name__)

AREA_ALPHA = 0.2
LABEL_COLOR: RGBA = (0, 0, 0, 255)


class LineChartDelegate(Protocol):
    def did_select_data_point(self, x: float, y_values: list[float]) -> None: ...


@dataclass
class LineChart:
    """Line chart control rendering into an RGBA numpy frame."""

    width: int
    height: int
    config: ChartConfig = field(default_factory=ChartConfig)
    delegate: LineChartDelegate | None = None

    _data: ChartData = field(default_factory=ChartData, init=False, repr=False)
    _highlighted: int | None = field(default=None, init=False, repr=False)
    _blank_next: bool = field(default=False, init=False, repr=False)

    def __post_init__(self) -> None:
        self._check_size(self.width, self.height)
        validate_config(self.config)

    @staticmethod
    def _check_size(width: int, height: int) -> None:
        if width <= 0 or height <= 0:
            raise ValueError("chart width/height must be > 0")

    @property
    def data(self) -> ChartData:
        return self._data

    @property
    def highlighted_index(self) -> int | None:
        return self._highlighted

    def add_line(self, values: Any) -> None:
        arr = self._data.add_line(values)
        LOGGER.debug("added line %d with %d points", len(self._data) - 1, arr.size)

    def clear(self) -> None:
        """Remove lines, dots, areas and highlight; grid and axes stay."""
        self._data.clear()
        self._highlighted = None

    def clear_all(self) -> None:
        """Remove all data and blank the next rendered frame entirely."""
        self.clear()
        self._blank_next = True

    def resize(self, width: int, height: int) -> None:
        self._check_size(width, height)
        self.width = int(width)
        self.height = int(height)

    def layout(self) -> ChartLayout | None:
        return compute_layout(self._data, self.config, self.width, self.height)

    def render_at(self, elapsed_s: float) -> np.ndarray:
        return self.render(progress=animation_progress(self.config.animation, elapsed_s))

    def render(self, progress: float | None = None) -> np.ndarray:
        canvas = new_canvas(self.width, self.height, hex_to_rgba(self.config.background))
        if self._blank_next:
            self._blank_next = False
            return canvas
        layout = self.layout()
        if layout is None:
            return canvas

        p = 1.0 if progress is None else max(0.0, min(1.0, float(progress)))
        cfg = self.config
        if cfg.x.grid.visible:
            self._draw_segments(canvas, layout.x_grid, hex_to_rgba(cfg.x.grid.color))
        if cfg.y.grid.visible:
            self._draw_segments(canvas, layout.y_grid, hex_to_rgba(cfg.y.grid.color))
        if cfg.x.axis.visible and cfg.y.axis.visible:
            self._draw_segments(canvas, (layout.x_axis,), hex_to_rgba(cfg.x.axis.color))
            self._draw_segments(canvas, (layout.y_axis,), hex_to_rgba(cfg.y.axis.color))
        if cfg.x.labels.visible:
            self._draw_labels(canvas, layout.x_labels)
        if cfg.y.labels.visible:
            self._draw_labels(canvas, layout.y_labels)

        for geometry in layout.series:
            color = series_color(cfg.colors, geometry.index)
            if cfg.area:
                fill_polygon(canvas, geometry.area, with_alpha(color, AREA_ALPHA * p))
            draw_polyline(canvas, geometry.points, color, width=cfg.line_width, stroke_end=p)
            if cfg.dots.visible:
                self._draw_dots(canvas, geometry.points, color, opacity=p)
        return canvas

    def handle_event(self, event_type: str, payload: object) -> Selection | None:
        event = parse_touch_event(event_type, payload)
        if event is None:
            return None
        return self.handle_touch(event)

    def handle_touch(self, event: TouchEvent) -> Selection | None:
        if event.phase not in ("moved", "ended") or self._data.is_empty:
            return None
        x_scale = build_x_scale(self._data, self.config, self.width)
        if x_scale is None:
            return None
        index = index_for_pointer(x_scale, event.x, self.config.x.axis.inset)
        y_values = self._data.values_at_index(index)
        self._highlighted = index
        LOGGER.debug("pointer x=%.1f selected index %d", event.x, index)
        if self.delegate is not None:
            self.delegate.did_select_data_point(float(index), list(y_values))
        return Selection(index=index, y_values=tuple(y_values))

    def _draw_dots(self, canvas: np.ndarray, points: tuple[tuple[float, float], ...], color: RGBA, *, opacity: float) -> None:
        dots = self.config.dots
        base = with_alpha(hex_to_rgba(dots.color), opacity)
        inner = with_alpha(color, opacity)
        highlight = None
        if self._highlighted is not None:
            highlight = min(max(self._highlighted, 0), len(points) - 1)
        for index, (cx, cy) in enumerate(points):
            if index == highlight:
                draw_dot(
                    canvas,
                    cx,
                    cy,
                    outer_diameter=dots.outer_radius_highlighted,
                    inner_diameter=dots.inner_radius_highlighted,
                    outer_color=with_alpha(lighten(color), opacity),
                    inner_color=inner,
                )
                continue
            draw_dot(
                canvas,
                cx,
                cy,
                outer_diameter=dots.outer_radius,
                inner_diameter=dots.inner_radius,
                outer_color=base,
                inner_color=inner,
            )

    def _draw_labels(self, canvas: np.ndarray, labels: tuple[LabelBox, ...]) -> None:
        for label in labels:
            draw_text_centered(
                canvas,
                label.rect,
                label.text,
                LABEL_COLOR,
                font_family=self.config.font_family,
                font_size_px=self.config.font_size_px,
            )

    @staticmethod
    def _draw_segments(canvas: np.ndarray, segments: tuple[Segment, ...], color: RGBA) -> None:
        for seg in segments:
            x0, y0, x1, y1 = (_px(seg.x0), _px(seg.y0), _px(seg.x1), _px(seg.y1))
            if y0 == y1:
                draw_hline(canvas, x0, x1, y0, color)
            elif x0 == x1:
                draw_vline(canvas, x0, y0, y1, color)
            else:
                draw_polyline(canvas, ((seg.x0, seg.y0), (seg.x1, seg.y1)), color)


def _px(value: float) -> int:
    return int(math.floor(value + 0.5))
