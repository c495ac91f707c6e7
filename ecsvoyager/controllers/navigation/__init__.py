"""Navigation controller - the dashboard state machine."""

from ecsvoyager.controllers.navigation.controller import NavigationController

__all__ = ["NavigationController"]
