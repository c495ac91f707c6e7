"""Line layout of the metrics view.

The presenter styles these lines and the navigation controller bounds the
metrics scroll offset by their count, so both always agree on the height.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import NamedTuple

from ecsvoyager.constants.enums import MetricsTimeRange
from ecsvoyager.constants.values import STATUS_NO_DATA
from ecsvoyager.models.metrics.chart_series import ChartDatapoint, MetricsSnapshot
from ecsvoyager.models.state.app_settings import AppSettings
from ecsvoyager.utils.charts import render_chart, render_sparkline

SPARKLINE_WIDTH = 20


class MetricsLine(NamedTuple):
    """One line of the metrics body.

    ``role`` is one of heading, chart_title, cpu, memory, alarm, reason or
    muted. Alarm lines also carry the alarm state.
    """

    text: str
    role: str
    alarm_state: str | None = None


def _chart_lines(
    title: str, series: Sequence[ChartDatapoint], role: str, settings: AppSettings
) -> list[MetricsLine]:
    values = [point.value for point in series]
    header = title
    if values:
        header = (
            f"{title}  now {values[-1]:.1f}  min {min(values):.1f}  "
            f"max {max(values):.1f}  {render_sparkline(values, SPARKLINE_WIDTH)}"
        )
    chart = render_chart(
        series,
        width=settings.chart_width,
        height=settings.chart_height,
        min_value=0.0,
        max_value=100.0,
    )
    return [MetricsLine(header, "chart_title")] + [
        MetricsLine(line, role) for line in chart.lines()
    ]


def metrics_lines(
    metrics: MetricsSnapshot | None,
    service: str | None,
    time_range: MetricsTimeRange,
    settings: AppSettings,
) -> list[MetricsLine]:
    """Lay out the metrics body before scrolling is applied."""
    if metrics is None:
        return [MetricsLine(f"  {STATUS_NO_DATA}", "muted")]

    lines = [MetricsLine(f"Service: {service}  Range: {time_range.label}", "heading")]
    if settings.show_charts:
        lines.extend(_chart_lines("CPU Utilization (%)", metrics.cpu, "cpu", settings))
        lines.extend(_chart_lines("Memory Utilization (%)", metrics.memory, "memory", settings))
    if settings.show_alarms:
        lines.append(MetricsLine("Alarms", "heading"))
        if not metrics.alarms:
            lines.append(MetricsLine("  No alarms configured", "muted"))
        for alarm in metrics.alarms:
            lines.append(MetricsLine(f"  {alarm.name}: {alarm.state}", "alarm", alarm.state))
            if alarm.state_reason:
                lines.append(MetricsLine(f"    {alarm.state_reason}", "reason"))
    return lines


__all__ = ["MetricsLine", "metrics_lines"]
