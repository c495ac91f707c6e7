"""Controllers module for ECS Voyager.

Data providers and the log viewer. The NavigationController lives in
``ecsvoyager.controllers.navigation`` and is imported from there, since the
dashboard state it drives depends on this package.
"""

from __future__ import annotations

# Base classes
from ecsvoyager.controllers.base import DataProvider

# Fixture inventory provider
from ecsvoyager.controllers.fixture import FixtureController

# Log viewer
from ecsvoyager.controllers.logs import LogStreamView

__all__ = [
    "DataProvider",
    "FixtureController",
    "LogStreamView",
]
