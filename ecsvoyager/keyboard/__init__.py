"""Keyboard module.

- app: App-level bindings (APP_BINDINGS)
- commands: key to command resolution per input mode
- dispatcher: applies commands to the NavigationController
"""

from ecsvoyager.keyboard.app import APP_BINDINGS
from ecsvoyager.keyboard.commands import Command, ResolvedCommand, resolve_command
from ecsvoyager.keyboard.dispatcher import dispatch

__all__ = [
    "APP_BINDINGS",
    "Command",
    "ResolvedCommand",
    "dispatch",
    "resolve_command",
]
