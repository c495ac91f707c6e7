"""App-level keyboard bindings.

Dashboard keys are resolved by ``keyboard.commands``; only bindings that
must work regardless of input mode live here.
"""

from textual.binding import Binding

# ============================================================================
# Textual Binding objects for app-level bindings
# ============================================================================

APP_BINDINGS: list[Binding] = [
    Binding("ctrl+c", "quit", "Quit", priority=True),
]

__all__ = [
    "APP_BINDINGS",
]
