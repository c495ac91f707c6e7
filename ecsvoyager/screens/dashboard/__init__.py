"""Dashboard screen module exports."""

from ecsvoyager.screens.dashboard.dashboard_screen import DashboardScreen, LoopTick
from ecsvoyager.screens.dashboard.presenter import DashboardPresenter

__all__ = [
    "DashboardPresenter",
    "DashboardScreen",
    "LoopTick",
]
