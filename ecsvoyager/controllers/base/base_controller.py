"""Base data provider contract for ECS Voyager.

Every call that reaches the cloud (or a stand-in for it) goes through a
``DataProvider``. All methods are async and fallible: implementations raise
``TransientProviderError`` for transport/auth failures and
``ResourceNotFound`` when an entity no longer exists.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from ecsvoyager.constants.enums import MetricsTimeRange
from ecsvoyager.models.core.resource_info import (
    DescribeResult,
    ServiceRecord,
    TaskDefinitionRecord,
    TaskRecord,
)
from ecsvoyager.models.logs.log_entry import LogEntry
from ecsvoyager.models.metrics.chart_series import MetricsSnapshot


class DataProvider(ABC):
    """Async inventory, describe, log, metric and mutation calls."""

    # =========================================================================
    # Context
    # =========================================================================

    @abstractmethod
    async def list_profiles(self) -> list[str]:
        """Return the credential profile names that can be switched to."""
        ...

    @abstractmethod
    async def switch_context(self, profile: str | None, region: str | None) -> None:
        """Point subsequent calls at another profile and/or region."""
        ...

    # =========================================================================
    # Inventory
    # =========================================================================

    @abstractmethod
    async def list_clusters(self) -> list[str]:
        ...

    @abstractmethod
    async def list_services(self, cluster: str) -> list[ServiceRecord]:
        ...

    @abstractmethod
    async def list_tasks(self, cluster: str, service: str) -> list[TaskRecord]:
        ...

    @abstractmethod
    async def list_task_definitions(self) -> list[TaskDefinitionRecord]:
        ...

    # =========================================================================
    # Describe
    # =========================================================================

    @abstractmethod
    async def describe_service(self, cluster: str, service: str) -> DescribeResult:
        ...

    @abstractmethod
    async def describe_task(self, cluster: str, task_arn: str) -> DescribeResult:
        ...

    @abstractmethod
    async def describe_task_definition(self, arn: str) -> DescribeResult:
        ...

    # =========================================================================
    # Logs and metrics
    # =========================================================================

    @abstractmethod
    async def get_task_logs(self, cluster: str, task_arn: str) -> list[LogEntry]:
        """Return log entries sorted ascending by timestamp."""
        ...

    @abstractmethod
    async def get_service_metrics(
        self,
        cluster: str,
        service: str,
        time_range: MetricsTimeRange,
    ) -> MetricsSnapshot:
        ...

    # =========================================================================
    # Mutations
    # =========================================================================

    @abstractmethod
    async def restart_service(self, cluster: str, service: str) -> None:
        """Force a new deployment of the service."""
        ...

    @abstractmethod
    async def stop_task(self, cluster: str, task_arn: str) -> None:
        ...

    @abstractmethod
    async def update_service(self, cluster: str, service: str, desired_count: int) -> None:
        ...

    @abstractmethod
    async def start_port_forwarding(
        self,
        cluster: str,
        task_arn: str,
        local_port: int,
        remote_port: int,
    ) -> str:
        """Start a forwarding session and return its identifier."""
        ...
