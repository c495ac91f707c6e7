"""Metrics models."""

from ecsvoyager.models.metrics.chart_series import (
    AlarmInfo,
    ChartDatapoint,
    ChartSeries,
    MetricsSnapshot,
)

__all__ = ["AlarmInfo", "ChartDatapoint", "ChartSeries", "MetricsSnapshot"]
