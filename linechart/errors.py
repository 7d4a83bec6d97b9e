from __future__ import annotations


class ChartDataError(ValueError):
    """Raised when series data handed to a chart cannot be plotted."""
