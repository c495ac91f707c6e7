"""ASCII chart rendering for metrics visualization.

Turns a time series into a fixed-size grid of block characters. The output
is a column (bar) chart: a cell is filled when the sampled value for its
column reaches the bottom boundary of its row.

Usage:
    from ecsvoyager.utils.charts import render_chart

    chart = render_chart(snapshot.cpu, width=60, height=10, min_value=0, max_value=100)
    for line in chart.lines():
        print(line)
"""

from __future__ import annotations

import math
from collections.abc import Sequence
from dataclasses import dataclass, field

from ecsvoyager.constants.limits import CHART_RANGE_EPSILON
from ecsvoyager.constants.values import (
    CHART_AXIS_CORNER,
    CHART_AXIS_RULE,
    CHART_EMPTY_CHAR,
    CHART_FILL_CHAR,
    SPARKLINE_CHARS,
    STATUS_NO_DATA,
)
from ecsvoyager.models.metrics.chart_series import ChartDatapoint

_LABEL_WIDTH = 7  # "  100.0" prefix before the axis bar


@dataclass(frozen=True)
class RenderedChart:
    """Result of ``render_chart``.

    Attributes:
        rows: ``height`` strings of exactly ``width`` cells, top row first.
        labels: Top-boundary value of each row, formatted; empty when labels
            are disabled.
        axis: Bottom axis rule, empty when labels are disabled.
        placeholder: Set instead of rows when the series is empty.
    """

    rows: tuple[str, ...] = ()
    labels: tuple[str, ...] = ()
    axis: str = ""
    placeholder: str | None = None
    minimum: float = 0.0
    maximum: float = 0.0

    @property
    def is_empty(self) -> bool:
        return self.placeholder is not None

    def lines(self) -> list[str]:
        """Flatten into printable lines (labels, rows, axis)."""
        if self.placeholder is not None:
            return [f"    {self.placeholder}"]
        if not self.labels:
            return [f"  {row}" for row in self.rows]
        out = [f"{label}│ {row}" for label, row in zip(self.labels, self.rows)]
        out.append(f"{' ' * _LABEL_WIDTH}{self.axis}")
        return out


@dataclass(frozen=True)
class _Range:
    minimum: float
    maximum: float
    span: float = field(init=False)

    def __post_init__(self) -> None:
        span = self.maximum - self.minimum
        object.__setattr__(self, "span", 1.0 if abs(span) < CHART_RANGE_EPSILON else span)


def sample_datapoints(values: Sequence[float], target_width: int) -> list[float]:
    """Resample ``values`` to exactly ``target_width`` columns.

    Fewer points than columns are padded by repeating the last value. More
    points are split into ``target_width`` proportional contiguous buckets
    and each bucket is averaged; an empty bucket yields 0.0.
    """
    if target_width <= 0:
        return []
    if not values:
        return [0.0] * target_width

    if len(values) <= target_width:
        return list(values) + [values[-1]] * (target_width - len(values))

    bucket_size = len(values) / target_width
    sampled: list[float] = []
    for i in range(target_width):
        start = int(i * bucket_size)
        end = min(int((i + 1) * bucket_size), len(values))
        bucket = values[start:end]
        sampled.append(sum(bucket) / len(bucket) if bucket else 0.0)
    return sampled


def _value_range(
    values: Sequence[float],
    min_value: float | None,
    max_value: float | None,
) -> _Range:
    low = min_value if min_value is not None else math.floor(min(values))
    high = max_value if max_value is not None else math.ceil(max(values))
    return _Range(float(low), float(high))


def render_chart(
    series: Sequence[ChartDatapoint],
    width: int,
    height: int,
    min_value: float | None = None,
    max_value: float | None = None,
    show_labels: bool = True,
) -> RenderedChart:
    """Render ``series`` as a ``width`` x ``height`` block chart.

    Args:
        series: Datapoints sorted by timestamp. Not re-sorted here.
        width: Number of columns.
        height: Number of rows, excluding the axis.
        min_value: Y-axis floor override. Defaults to floor(min(values)).
        max_value: Y-axis ceiling override. Defaults to ceil(max(values)).
        show_labels: Include per-row labels and the bottom axis rule.

    Raises:
        ValueError: If width or height is less than 1.
    """
    if width < 1 or height < 1:
        raise ValueError(f"Chart size must be positive, got {width}x{height}")

    if not series:
        return RenderedChart(placeholder=STATUS_NO_DATA)

    values = [point.value for point in series]
    value_range = _value_range(values, min_value, max_value)
    sampled = sample_datapoints(values, width)
    step = value_range.span / height

    rows: list[str] = []
    labels: list[str] = []
    for row in range(height):
        row_top = value_range.maximum - row * step
        row_bottom = value_range.maximum - (row + 1) * step
        rows.append(
            "".join(
                CHART_FILL_CHAR if value >= row_bottom else CHART_EMPTY_CHAR
                for value in sampled
            )
        )
        if show_labels:
            labels.append(f"  {row_top:5.1f}")

    axis = f"{CHART_AXIS_CORNER}{CHART_AXIS_RULE * width}" if show_labels else ""
    return RenderedChart(
        rows=tuple(rows),
        labels=tuple(labels),
        axis=axis,
        minimum=value_range.minimum,
        maximum=value_range.maximum,
    )


def render_sparkline(values: Sequence[float], width: int) -> str:
    """One-line trend using eighth-block characters."""
    if width <= 0:
        return ""
    if not values:
        return " " * width

    low, high = min(values), max(values)
    span = high - low
    if abs(span) < CHART_RANGE_EPSILON:
        span = 1.0

    top = len(SPARKLINE_CHARS) - 1
    return "".join(
        SPARKLINE_CHARS[min(top, round((value - low) / span * top))]
        for value in sample_datapoints(values, width)
    )


__all__ = [
    "RenderedChart",
    "render_chart",
    "render_sparkline",
    "sample_datapoints",
]
