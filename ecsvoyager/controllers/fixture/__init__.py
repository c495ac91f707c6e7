"""Fixture inventory provider."""

from ecsvoyager.controllers.fixture.controller import FixtureController

__all__ = ["FixtureController"]
