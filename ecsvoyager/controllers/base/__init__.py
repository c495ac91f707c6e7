"""Base data provider contract."""

from ecsvoyager.controllers.base.base_controller import DataProvider

__all__ = ["DataProvider"]
