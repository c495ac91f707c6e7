"""Fixture controller - serves an ECS inventory from a YAML document.

Lets the dashboard run without cloud access. The document shape is::

    profiles: [default, staging]
    task_definitions:
      - {arn: ..., family: web, revision: 3}
    clusters:
      prod:
        services: [{name: web, status: ACTIVE, launch_type: FARGATE}]
        tasks:
          web: [{task_arn: arn:aws:ecs:...:task/prod/abc123}]
        logs:
          abc123: [{timestamp: 1700000000000, message: "...", source: app}]
        metrics:
          web:
            cpu: [[1700000000, 12.5], ...]
            memory: [[1700000000, 40.0], ...]
            alarms: [{name: web-cpu-high, state: OK}]
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml

from ecsvoyager.constants.enums import MetricsTimeRange
from ecsvoyager.controllers.base.base_controller import DataProvider
from ecsvoyager.controllers.fixture.parsers.inventory_parser import InventoryParser
from ecsvoyager.errors import ResourceNotFound, TransientProviderError
from ecsvoyager.models.core.resource_info import (
    DescribeResult,
    ServiceRecord,
    TaskDefinitionRecord,
    TaskRecord,
)
from ecsvoyager.models.logs.log_entry import LogEntry
from ecsvoyager.models.metrics.chart_series import ChartDatapoint, MetricsSnapshot

logger = logging.getLogger(__name__)


class FixtureController(DataProvider):
    """DataProvider backed by an in-memory inventory document."""

    def __init__(
        self,
        inventory: dict[str, Any] | None = None,
        path: Path | None = None,
    ) -> None:
        self._path = path
        self._inventory: dict[str, Any] | None = inventory
        self._parser = InventoryParser()
        self.profile: str | None = None
        self.region: str | None = None
        self.port_forwarding_sessions: list[str] = []

    @classmethod
    def from_path(cls, path: Path) -> FixtureController:
        return cls(path=path)

    # =========================================================================
    # Inventory access
    # =========================================================================

    def _document(self) -> dict[str, Any]:
        if self._inventory is None:
            self._inventory = self._load()
        return self._inventory

    def _load(self) -> dict[str, Any]:
        if self._path is None:
            return {}
        try:
            raw = yaml.safe_load(self._path.read_text(encoding="utf-8")) or {}
        except (OSError, yaml.YAMLError) as exc:
            raise TransientProviderError(f"Cannot read inventory {self._path}: {exc}") from exc
        if not isinstance(raw, dict):
            raise TransientProviderError(f"Inventory {self._path} is not a mapping")
        logger.info("Loaded inventory from %s", self._path)
        return raw

    def _cluster(self, cluster: str) -> dict[str, Any]:
        clusters = self._document().get("clusters") or {}
        if cluster not in clusters:
            raise ResourceNotFound(f"Cluster not found: {cluster}")
        return clusters[cluster] or {}

    def _service_raw(self, cluster: str, service: str) -> dict[str, Any]:
        for raw in self._cluster(cluster).get("services") or []:
            if raw.get("name") == service:
                return raw
        raise ResourceNotFound(f"Service not found: {service}")

    def _task_raw(self, cluster: str, task_arn: str) -> dict[str, Any]:
        for tasks in (self._cluster(cluster).get("tasks") or {}).values():
            for raw in tasks or []:
                if raw.get("task_arn") == task_arn:
                    return raw
        raise ResourceNotFound(f"Task not found: {task_arn}")

    # =========================================================================
    # Context
    # =========================================================================

    async def list_profiles(self) -> list[str]:
        return list(self._document().get("profiles") or ["default"])

    async def switch_context(self, profile: str | None, region: str | None) -> None:
        if profile is not None:
            if profile not in await self.list_profiles():
                raise ResourceNotFound(f"Profile not found: {profile}")
            self.profile = profile
        if region is not None:
            self.region = region
        logger.info("Switched context to profile=%s region=%s", self.profile, self.region)

    # =========================================================================
    # Inventory
    # =========================================================================

    async def list_clusters(self) -> list[str]:
        return sorted((self._document().get("clusters") or {}).keys())

    async def list_services(self, cluster: str) -> list[ServiceRecord]:
        return self._parser.parse_services(self._cluster(cluster).get("services"))

    async def list_tasks(self, cluster: str, service: str) -> list[TaskRecord]:
        self._service_raw(cluster, service)
        tasks = self._cluster(cluster).get("tasks") or {}
        return self._parser.parse_tasks(tasks.get(service))

    async def list_task_definitions(self) -> list[TaskDefinitionRecord]:
        return self._parser.parse_task_definitions(self._document().get("task_definitions"))

    # =========================================================================
    # Describe
    # =========================================================================

    async def describe_service(self, cluster: str, service: str) -> DescribeResult:
        raw = self._service_raw(cluster, service)
        record = self._parser.parse_services([raw])[0]
        return self._parser.build_describe(f"Service: {record.name}", record.model_dump())

    async def describe_task(self, cluster: str, task_arn: str) -> DescribeResult:
        record = self._parser.parse_tasks([self._task_raw(cluster, task_arn)])[0]
        return self._parser.build_describe(f"Task: {record.task_id}", record.model_dump())

    async def describe_task_definition(self, arn: str) -> DescribeResult:
        for raw in self._document().get("task_definitions") or []:
            if raw.get("arn") == arn:
                return self._parser.build_describe(f"Task Definition: {arn}", dict(raw))
        raise ResourceNotFound(f"Task definition not found: {arn}")

    # =========================================================================
    # Logs and metrics
    # =========================================================================

    async def get_task_logs(self, cluster: str, task_arn: str) -> list[LogEntry]:
        raw_task = self._task_raw(cluster, task_arn)
        task_id = self._parser.parse_tasks([raw_task])[0].task_id
        logs = self._cluster(cluster).get("logs") or {}
        return self._parser.parse_log_entries(logs.get(task_id))

    async def get_service_metrics(
        self,
        cluster: str,
        service: str,
        time_range: MetricsTimeRange,
    ) -> MetricsSnapshot:
        self._service_raw(cluster, service)
        raw = (self._cluster(cluster).get("metrics") or {}).get(service) or {}
        return MetricsSnapshot(
            cpu=self._window(self._parser.parse_series(raw.get("cpu")), time_range),
            memory=self._window(self._parser.parse_series(raw.get("memory")), time_range),
            alarms=self._parser.parse_alarms(raw.get("alarms")),
            time_range=time_range,
        )

    @staticmethod
    def _window(
        points: list[ChartDatapoint], time_range: MetricsTimeRange
    ) -> list[ChartDatapoint]:
        """Keep points within ``time_range`` of the newest sample, sorted."""
        if not points:
            return []
        ordered = sorted(points, key=lambda point: point.timestamp)
        cutoff = ordered[-1].timestamp - time_range.minutes * 60
        return [point for point in ordered if point.timestamp >= cutoff]

    # =========================================================================
    # Mutations
    # =========================================================================

    async def restart_service(self, cluster: str, service: str) -> None:
        raw = self._service_raw(cluster, service)
        raw["pending_count"] = int(raw.get("desired_count", 0))
        logger.info("Restarted service %s/%s", cluster, service)

    async def stop_task(self, cluster: str, task_arn: str) -> None:
        raw = self._task_raw(cluster, task_arn)
        raw["status"] = "STOPPED"
        raw["desired_status"] = "STOPPED"
        logger.info("Stopped task %s", task_arn)

    async def update_service(self, cluster: str, service: str, desired_count: int) -> None:
        raw = self._service_raw(cluster, service)
        raw["desired_count"] = desired_count
        logger.info("Set desired count of %s/%s to %d", cluster, service, desired_count)

    async def start_port_forwarding(
        self,
        cluster: str,
        task_arn: str,
        local_port: int,
        remote_port: int,
    ) -> str:
        raw = self._task_raw(cluster, task_arn)
        task_id = self._parser.parse_tasks([raw])[0].task_id
        session = f"pf-{task_id}-{local_port}-{remote_port}"
        self.port_forwarding_sessions.append(session)
        return session
