"""Time-series and alarm models for the metrics view."""

from __future__ import annotations

from pydantic import BaseModel, Field

from ecsvoyager.constants.enums import MetricsTimeRange


class ChartDatapoint(BaseModel):
    """A single (timestamp, value) sample. Timestamp is epoch seconds."""

    timestamp: int
    value: float


ChartSeries = list[ChartDatapoint]


class AlarmInfo(BaseModel):
    """CloudWatch-style alarm attached to a service."""

    name: str
    state: str  # OK | ALARM | INSUFFICIENT_DATA
    state_reason: str | None = None


class MetricsSnapshot(BaseModel):
    """CPU and memory utilization for one service over a time range."""

    cpu: list[ChartDatapoint] = Field(default_factory=list)
    memory: list[ChartDatapoint] = Field(default_factory=list)
    alarms: list[AlarmInfo] = Field(default_factory=list)
    time_range: MetricsTimeRange = MetricsTimeRange.ONE_HOUR
