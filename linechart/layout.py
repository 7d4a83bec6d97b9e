from __future__ import annotations

from dataclasses import dataclass
import logging

from linechart.config import ChartConfig
from linechart.dataset import ChartData
from linechart.scales import LinearScale, TickPlan, format_tick_label


LOGGER = logging.getLogger(__name__)

Point = tuple[float, float]


@dataclass(frozen=True)
class Segment:
    x0: float
    y0: float
    x1: float
    y1: float


@dataclass(frozen=True)
class LabelBox:
    x: float
    y: float
    width: float
    height: float
    text: str

    @property
    def rect(self) -> tuple[float, float, float, float]:
        return (self.x, self.y, self.width, self.height)


@dataclass(frozen=True)
class SeriesGeometry:
    index: int
    points: tuple[Point, ...]
    area: tuple[Point, ...]


@dataclass(frozen=True)
class ChartLayout:
    """Pixel geometry for one layout pass. Canvas origin is top-left."""

    width: int
    height: int
    x_scale: LinearScale
    y_scale: LinearScale
    x_ticks: TickPlan
    y_ticks: TickPlan
    baseline_y: float
    x_grid: tuple[Segment, ...]
    y_grid: tuple[Segment, ...]
    x_axis: Segment
    y_axis: Segment
    series: tuple[SeriesGeometry, ...]
    x_labels: tuple[LabelBox, ...]
    y_labels: tuple[LabelBox, ...]


def build_x_scale(data: ChartData, config: ChartConfig, width: int) -> LinearScale | None:
    """The x scale alone, for pointer mapping between layout passes."""
    drawing_width = width - float(config.x.axis.inset)
    if drawing_width <= 0:
        return None
    return LinearScale(domain=data.x_domain(), range=(0.0, drawing_width))


def compute_layout(data: ChartData, config: ChartConfig, width: int, height: int) -> ChartLayout | None:
    """Build fresh scales and geometry for the given view size.

    Returns ``None`` when the insets leave no room to draw.
    """
    x_inset = float(config.x.axis.inset)
    y_inset = float(config.y.axis.inset)
    drawing_width = width - x_inset
    drawing_height = height - y_inset
    if drawing_width <= 0 or drawing_height <= 0:
        LOGGER.debug("skipping layout: drawing area %sx%s", drawing_width, drawing_height)
        return None

    y_scale = LinearScale(domain=data.y_domain(), range=(0.0, drawing_height))
    x_scale = LinearScale(domain=data.x_domain(), range=(0.0, drawing_width))
    x_ticks = x_scale.ticks(int(config.x.grid.count))
    y_ticks = y_scale.ticks(int(config.y.grid.count))

    def to_y(value: float) -> float:
        return height - y_scale.forward(value) - y_inset

    def to_x(value: float) -> float:
        return x_scale.forward(value) + x_inset

    baseline_y = to_y(0.0)

    x_grid = tuple(Segment(to_x(t), height - y_inset, to_x(t), 0.0) for t in x_ticks.values().tolist())
    y_grid = tuple(Segment(x_inset, to_y(t), float(width), to_y(t)) for t in y_ticks.values().tolist())

    series: list[SeriesGeometry] = []
    for index, values in enumerate(data):
        points = tuple((to_x(i), to_y(v)) for i, v in enumerate(values.tolist()))
        area = ((x_inset, baseline_y),) + points + ((points[-1][0], baseline_y), (x_inset, baseline_y))
        series.append(SeriesGeometry(index=index, points=points, area=area))

    return ChartLayout(
        width=width,
        height=height,
        x_scale=x_scale,
        y_scale=y_scale,
        x_ticks=x_ticks,
        y_ticks=y_ticks,
        baseline_y=baseline_y,
        x_grid=x_grid,
        y_grid=y_grid,
        x_axis=Segment(x_inset, baseline_y, float(width), baseline_y),
        y_axis=Segment(x_inset, height - y_inset, x_inset, 0.0),
        series=tuple(series),
        x_labels=_x_labels(data, config, x_scale, height),
        y_labels=_y_labels(config, y_scale, y_ticks, height),
    )


def _x_labels(data: ChartData, config: ChartConfig, x_scale: LinearScale, height: int) -> tuple[LabelBox, ...]:
    if data.is_empty:
        return ()
    count = data[0].size
    label_height = config.label_height
    y_inset = float(config.y.axis.inset)
    if y_inset < label_height:
        LOGGER.warning("x-axis labels may be cut off: y inset %.1f < label height %.1f", y_inset, label_height)

    step = x_scale.ticks(count).step
    label_width = x_scale.forward(step)
    names = config.x.labels.values
    x_inset = float(config.x.axis.inset)
    out: list[LabelBox] = []
    for index in range(count):
        text = names[index] if index < len(names) else str(index)
        x = x_scale.forward(float(index)) + x_inset - label_width / 2.0
        out.append(LabelBox(x=x, y=height - y_inset, width=label_width, height=label_height, text=text))
    return tuple(out)


def _y_labels(config: ChartConfig, y_scale: LinearScale, ticks: TickPlan, height: int) -> tuple[LabelBox, ...]:
    decimals = y_scale.decimals(int(config.y.grid.count))
    label_height = config.label_height
    offset = float(config.y.axis.inset) + label_height * 0.5
    out: list[LabelBox] = []
    for value in ticks.values().tolist():
        y = height - y_scale.forward(value) - offset
        if y <= 0:
            break
        out.append(
            LabelBox(
                x=0.0,
                y=y,
                width=float(config.x.axis.inset),
                height=label_height,
                text=format_tick_label(value, decimals),
            )
        )
    return tuple(out)
