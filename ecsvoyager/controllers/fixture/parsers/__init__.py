"""Parsers for inventory documents."""

from ecsvoyager.controllers.fixture.parsers.inventory_parser import InventoryParser

__all__ = ["InventoryParser"]
