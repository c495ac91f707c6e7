"""Application settings models."""

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ecsvoyager.constants.defaults import (
    AUTO_REFRESH_DEFAULT,
    CHART_HEIGHT_DEFAULT,
    CHART_WIDTH_DEFAULT,
    DEFAULT_VIEW_DEFAULT,
    EXPORT_PATH_DEFAULT,
    LOG_VIEWPORT_HEIGHT_DEFAULT,
    READ_ONLY_DEFAULT,
    REFRESH_INTERVAL_DEFAULT,
    SHOW_ALARMS_DEFAULT,
    SHOW_CHARTS_DEFAULT,
)
from ecsvoyager.constants.enums import View
from ecsvoyager.constants.limits import REFRESH_INTERVAL_MIN

_STARTUP_VIEWS = {
    View.CLUSTER_LIST.value,
    View.SERVICE_LIST.value,
    View.TASK_LIST.value,
    View.TASK_DEFINITION_LIST.value,
}


class AppSettings(BaseModel):
    """Application settings model with validation."""

    model_config = ConfigDict(populate_by_name=True)

    # AWS context
    profile: str | None = None
    region: str | None = None

    # Behavior
    auto_refresh: bool = AUTO_REFRESH_DEFAULT
    refresh_interval: int = Field(default=REFRESH_INTERVAL_DEFAULT, ge=REFRESH_INTERVAL_MIN)
    default_view: str = DEFAULT_VIEW_DEFAULT
    read_only: bool = READ_ONLY_DEFAULT

    # Metrics display
    show_charts: bool = SHOW_CHARTS_DEFAULT
    show_alarms: bool = SHOW_ALARMS_DEFAULT
    chart_width: int = Field(default=CHART_WIDTH_DEFAULT, ge=1)
    chart_height: int = Field(default=CHART_HEIGHT_DEFAULT, ge=1)

    # Logs
    log_viewport_height: int = Field(default=LOG_VIEWPORT_HEIGHT_DEFAULT, ge=1)

    # Paths
    export_path: str = EXPORT_PATH_DEFAULT
    inventory_path: str = ""

    @field_validator("default_view")
    @classmethod
    def _known_startup_view(cls, value: str) -> str:
        if value not in _STARTUP_VIEWS:
            # Unknown names fall back to the cluster list
            return View.CLUSTER_LIST.value
        return value

    @property
    def initial_view(self) -> View:
        return View(self.default_view)


class ConfigError(Exception):
    """Base exception for configuration errors."""


class ConfigLoadError(ConfigError):
    """Raised when settings fail to load."""


class ConfigSaveError(ConfigError):
    """Raised when settings fail to save."""
