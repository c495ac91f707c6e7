"""Inventory parser for the fixture controller - parses YAML records into models."""

from __future__ import annotations

import json
from typing import Any

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from ecsvoyager.errors import TransientProviderError
from ecsvoyager.models.core.resource_info import (
    DescribeResult,
    ServiceRecord,
    TaskDefinitionRecord,
    TaskRecord,
)
from ecsvoyager.models.logs.log_entry import LogEntry
from ecsvoyager.models.metrics.chart_series import AlarmInfo, ChartDatapoint


class InventoryParser:
    """Parses raw inventory mappings into structured records."""

    def _validate(self, model: type[BaseModel], raw: Any, what: str) -> Any:
        try:
            return model.model_validate(raw)
        except PydanticValidationError as exc:
            raise TransientProviderError(f"Malformed {what} in inventory: {exc}") from exc

    def parse_services(self, raw: list[dict[str, Any]] | None) -> list[ServiceRecord]:
        return [self._validate(ServiceRecord, item, "service") for item in raw or []]

    def parse_tasks(self, raw: list[dict[str, Any]] | None) -> list[TaskRecord]:
        tasks = []
        for item in raw or []:
            item = dict(item)
            # Task id defaults to the last ARN segment
            if "task_id" not in item and "task_arn" in item:
                item["task_id"] = str(item["task_arn"]).rsplit("/", 1)[-1]
            tasks.append(self._validate(TaskRecord, item, "task"))
        return tasks

    def parse_task_definitions(
        self, raw: list[dict[str, Any]] | None
    ) -> list[TaskDefinitionRecord]:
        return [
            self._validate(TaskDefinitionRecord, item, "task definition")
            for item in raw or []
        ]

    def parse_log_entries(self, raw: list[dict[str, Any]] | None) -> list[LogEntry]:
        entries = [self._validate(LogEntry, item, "log entry") for item in raw or []]
        return sorted(entries, key=lambda entry: entry.timestamp)

    def parse_series(self, raw: list[Any] | None) -> list[ChartDatapoint]:
        """Accept ``[ts, value]`` pairs or ``{timestamp, value}`` mappings."""
        points = []
        for item in raw or []:
            if isinstance(item, (list, tuple)) and len(item) == 2:
                item = {"timestamp": item[0], "value": item[1]}
            points.append(self._validate(ChartDatapoint, item, "datapoint"))
        return points

    def parse_alarms(self, raw: list[dict[str, Any]] | None) -> list[AlarmInfo]:
        return [self._validate(AlarmInfo, item, "alarm") for item in raw or []]

    @staticmethod
    def build_describe(title: str, payload: dict[str, Any]) -> DescribeResult:
        """Build the formatted and JSON renderings of a resource together."""
        width = max((len(key) for key in payload), default=0)
        formatted_lines = [title, "=" * len(title), ""]
        for key, value in payload.items():
            if isinstance(value, (dict, list)):
                formatted_lines.append(f"{key}:")
                formatted_lines.extend(
                    f"  {line}"
                    for line in json.dumps(value, indent=2, default=str).splitlines()
                )
            else:
                formatted_lines.append(f"{key.ljust(width)} : {value}")
        return DescribeResult(
            title=title,
            formatted="\n".join(formatted_lines),
            json_text=json.dumps(payload, indent=2, default=str),
        )
