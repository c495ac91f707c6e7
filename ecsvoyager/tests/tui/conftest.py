"""Shared fixtures: a small ECS inventory, a fake clock and a controller."""

from __future__ import annotations

import copy
from typing import Any

import pytest

from ecsvoyager.controllers.fixture.controller import FixtureController
from ecsvoyager.controllers.navigation.controller import NavigationController
from ecsvoyager.errors import TransientProviderError
from ecsvoyager.models.state.app_settings import AppSettings

INVENTORY: dict[str, Any] = {
    "profiles": ["default", "staging"],
    "task_definitions": [
        {
            "arn": "arn:aws:ecs:us-east-1:123456789012:task-definition/web:3",
            "family": "web",
            "revision": 3,
            "cpu": "256",
            "memory": "512",
        },
        {
            "arn": "arn:aws:ecs:us-east-1:123456789012:task-definition/api:7",
            "family": "api",
            "revision": 7,
        },
    ],
    "clusters": {
        "prod": {
            "services": [
                {
                    "name": "web",
                    "status": "ACTIVE",
                    "desired_count": 2,
                    "running_count": 2,
                    "launch_type": "FARGATE",
                    "task_definition": "web:3",
                },
                {
                    "name": "api",
                    "status": "ACTIVE",
                    "desired_count": 1,
                    "running_count": 1,
                    "launch_type": "EC2",
                },
                {
                    "name": "worker",
                    "status": "DRAINING",
                    "desired_count": 0,
                    "launch_type": "FARGATE",
                },
            ],
            "tasks": {
                "web": [
                    {"task_arn": "arn:aws:ecs:us-east-1:123456789012:task/prod/web-1"},
                    {
                        "task_arn": "arn:aws:ecs:us-east-1:123456789012:task/prod/web-2",
                        "status": "STOPPED",
                        "desired_status": "STOPPED",
                    },
                ],
                "api": [
                    {"task_arn": "arn:aws:ecs:us-east-1:123456789012:task/prod/api-1"},
                ],
            },
            "logs": {
                "web-1": [
                    {"timestamp": 1700000002000, "message": "ERROR upstream timeout", "source": "app"},
                    {"timestamp": 1700000000000, "message": "INFO server started", "source": "app"},
                    {"timestamp": 1700000001000, "message": "WARN slow request", "source": "proxy"},
                ],
            },
            "metrics": {
                "web": {
                    "cpu": [[1700000000, 10.0], [1700001800, 20.0], [1700003600, 30.0]],
                    "memory": [{"timestamp": 1700000000, "value": 40.0}],
                    "alarms": [
                        {"name": "web-cpu-high", "state": "OK"},
                        {
                            "name": "web-5xx",
                            "state": "ALARM",
                            "state_reason": "Threshold crossed",
                        },
                    ],
                },
            },
        },
        "staging": {
            "services": [],
        },
    },
}


class FakeClock:
    """Monotonic clock under test control."""

    def __init__(self, start: float = 1000.0) -> None:
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


class FlakyProvider(FixtureController):
    """Fixture provider whose calls fail while ``failing`` is set."""

    def __init__(self, inventory: dict[str, Any]) -> None:
        super().__init__(inventory=inventory)
        self.failing = False

    def _document(self) -> dict[str, Any]:
        if self.failing:
            raise TransientProviderError("connection reset")
        return super()._document()


@pytest.fixture
def inventory() -> dict[str, Any]:
    return copy.deepcopy(INVENTORY)


@pytest.fixture
def provider(inventory: dict[str, Any]) -> FlakyProvider:
    return FlakyProvider(inventory)


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def settings(tmp_path) -> AppSettings:
    return AppSettings(export_path=str(tmp_path / "exports"))


@pytest.fixture
def controller(
    provider: FlakyProvider, settings: AppSettings, clock: FakeClock
) -> NavigationController:
    return NavigationController(provider, settings, clock=clock)
