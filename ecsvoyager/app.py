"""Main application class for ECS Voyager."""

from __future__ import annotations

import logging
from pathlib import Path

from textual.app import App
from textual.binding import Binding

from ecsvoyager.constants import APP_TITLE
from ecsvoyager.controllers.base.base_controller import DataProvider
from ecsvoyager.controllers.fixture.controller import FixtureController
from ecsvoyager.controllers.navigation.controller import NavigationController
from ecsvoyager.keyboard.app import APP_BINDINGS
from ecsvoyager.models.state.app_settings import AppSettings, ConfigLoadError
from ecsvoyager.models.state.config_manager import ConfigManager
from ecsvoyager.screens.dashboard.dashboard_screen import DashboardScreen

logger = logging.getLogger(__name__)


class VoyagerApp(App[None]):
    """Main TUI application for ECS Voyager."""

    TITLE = APP_TITLE
    BINDINGS: list[Binding] = APP_BINDINGS

    # Type hint for settings attribute
    settings: AppSettings

    def __init__(
        self,
        config_path: Path | None = None,
        inventory_path: Path | None = None,
        read_only: bool = False,
        provider: DataProvider | None = None,
        settings: AppSettings | None = None,
        *args,
        **kwargs,
    ) -> None:
        super().__init__(*args, **kwargs)
        self.config_path = config_path
        self.inventory_path = inventory_path

        if settings is not None:
            self.settings = settings
        else:
            self._load_settings()

        # Apply CLI overrides if provided
        if inventory_path is not None:
            self.settings.inventory_path = str(inventory_path)
        if read_only:
            self.settings.read_only = True

        self.provider = provider or self._build_provider()
        self.controller = NavigationController(self.provider, self.settings)

    def _load_settings(self) -> None:
        """Load application settings from persistent storage."""
        try:
            self.settings = ConfigManager.load(self.config_path)
        except ConfigLoadError as exc:
            # Use defaults if loading fails
            logger.warning("Falling back to default settings: %s", exc)
            self.settings = AppSettings()

    def _build_provider(self) -> DataProvider:
        raw_path = str(self.settings.inventory_path or "").strip()
        if not raw_path:
            logger.info("No inventory configured; starting with an empty one")
            return FixtureController(inventory={})
        return FixtureController.from_path(Path(raw_path).expanduser())

    def on_mount(self) -> None:
        """Called when app is mounted."""
        self.push_screen(DashboardScreen(self.controller))
