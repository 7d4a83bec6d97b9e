from linechart.chart import LineChart, LineChartDelegate
from linechart.config import ChartConfig, config_from_mapping
from linechart.dataset import ChartData
from linechart.errors import ChartDataError
from linechart.layout import ChartLayout, compute_layout
from linechart.pointer import Selection, TouchEvent, parse_touch_event
from linechart.scales import LinearScale, TickPlan, scale_extent, tick_plan

__all__ = [
    "ChartConfig",
    "ChartData",
    "ChartDataError",
    "ChartLayout",
    "LineChart",
    "LineChartDelegate",
    "LinearScale",
    "Selection",
    "TickPlan",
    "TouchEvent",
    "compute_layout",
    "config_from_mapping",
    "parse_touch_event",
    "scale_extent",
    "tick_plan",
]
