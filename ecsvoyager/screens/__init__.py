"""Screens module for ECS Voyager."""

from ecsvoyager.screens.dashboard import DashboardPresenter, DashboardScreen

__all__ = ["DashboardPresenter", "DashboardScreen"]
