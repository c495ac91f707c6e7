"""ECS Voyager - terminal dashboard for ECS clusters, services and tasks."""

from ecsvoyager.constants.values import APP_VERSION

__version__ = APP_VERSION
