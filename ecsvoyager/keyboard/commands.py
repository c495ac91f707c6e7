"""Key-to-command resolution.

Keys are resolved in priority order: an open modal captures everything,
then an active search input, then the normal-mode key map.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from ecsvoyager.constants.enums import ModalKind, SearchMode


class Command(Enum):
    """Abstract commands produced by key presses."""

    NAVIGATE_UP = "navigate_up"
    NAVIGATE_DOWN = "navigate_down"
    CONFIRM = "confirm"
    BACK = "back"
    SWITCH_VIEW = "switch_view"
    REFRESH = "refresh"
    DESCRIBE = "describe"
    VIEW_LOGS = "view_logs"
    VIEW_METRICS = "view_metrics"
    TOGGLE_AUTO_TAIL = "toggle_auto_tail"
    ENTER_SEARCH = "enter_search"
    CYCLE_LOG_LEVEL = "cycle_log_level"
    CYCLE_STATUS_FILTER = "cycle_status_filter"
    CYCLE_LAUNCH_TYPE = "cycle_launch_type"
    CLEAR_FILTERS = "clear_filters"
    TOGGLE_REGEX = "toggle_regex"
    EXPORT_LOGS = "export_logs"
    TOGGLE_JSON = "toggle_json"
    CYCLE_TIME_RANGE = "cycle_time_range"
    EXECUTE_ACTION = "execute_action"
    EDIT_SERVICE = "edit_service"
    PORT_FORWARD = "port_forward"
    PROFILE_SELECTOR = "profile_selector"
    REGION_SELECTOR = "region_selector"
    TOGGLE_HELP = "toggle_help"
    QUIT = "quit"

    SEARCH_INPUT = "search_input"
    SEARCH_BACKSPACE = "search_backspace"
    SEARCH_COMMIT = "search_commit"
    SEARCH_CANCEL = "search_cancel"

    MODAL_UP = "modal_up"
    MODAL_DOWN = "modal_down"
    MODAL_CONFIRM = "modal_confirm"
    MODAL_CLOSE = "modal_close"
    MODAL_INPUT = "modal_input"
    MODAL_BACKSPACE = "modal_backspace"


@dataclass(frozen=True)
class ResolvedCommand:
    """A command plus its argument (typed character or view number)."""

    command: Command
    argument: str | int | None = None


# Special keys by Textual key name
_NORMAL_KEYS: dict[str, Command] = {
    "up": Command.NAVIGATE_UP,
    "down": Command.NAVIGATE_DOWN,
    "enter": Command.CONFIRM,
    "escape": Command.BACK,
}

# Printable keys by character
_NORMAL_CHARS: dict[str, Command] = {
    "k": Command.NAVIGATE_UP,
    "j": Command.NAVIGATE_DOWN,
    "h": Command.BACK,
    "r": Command.REFRESH,
    "d": Command.DESCRIBE,
    "l": Command.VIEW_LOGS,
    "m": Command.VIEW_METRICS,
    "t": Command.TOGGLE_AUTO_TAIL,
    "/": Command.ENTER_SEARCH,
    "f": Command.CYCLE_LOG_LEVEL,
    "F": Command.CYCLE_STATUS_FILTER,
    "L": Command.CYCLE_LAUNCH_TYPE,
    "C": Command.CLEAR_FILTERS,
    "M": Command.TOGGLE_REGEX,
    "e": Command.EXPORT_LOGS,
    "J": Command.TOGGLE_JSON,
    "T": Command.CYCLE_TIME_RANGE,
    "x": Command.EXECUTE_ACTION,
    "E": Command.EDIT_SERVICE,
    "p": Command.PORT_FORWARD,
    "P": Command.PROFILE_SELECTOR,
    "R": Command.REGION_SELECTOR,
    "?": Command.TOGGLE_HELP,
    "q": Command.QUIT,
}

_VIEW_NUMBERS = {"1": 1, "2": 2, "3": 3, "4": 4}

_SELECTOR_KEYS: dict[str, Command] = {
    "up": Command.MODAL_UP,
    "down": Command.MODAL_DOWN,
    "enter": Command.MODAL_CONFIRM,
    "escape": Command.MODAL_CLOSE,
}

_SELECTOR_CHARS: dict[str, Command] = {
    "k": Command.MODAL_UP,
    "j": Command.MODAL_DOWN,
}

_EDITOR_KEYS: dict[str, Command] = {
    "up": Command.MODAL_UP,
    "down": Command.MODAL_DOWN,
    "tab": Command.MODAL_DOWN,
    "shift+tab": Command.MODAL_UP,
    "enter": Command.MODAL_CONFIRM,
    "escape": Command.MODAL_CLOSE,
    "backspace": Command.MODAL_BACKSPACE,
}

_SEARCH_KEYS: dict[str, Command] = {
    "enter": Command.SEARCH_COMMIT,
    "escape": Command.SEARCH_CANCEL,
    "backspace": Command.SEARCH_BACKSPACE,
}


def _printable(character: str | None) -> bool:
    return bool(character) and len(character) == 1 and character.isprintable()


def resolve_command(
    key: str,
    character: str | None,
    modal: ModalKind = ModalKind.NONE,
    search_mode: SearchMode = SearchMode.NONE,
) -> ResolvedCommand | None:
    """Map a key press to a command for the current input mode.

    Args:
        key: Textual key name, e.g. ``"up"`` or ``"j"``.
        character: Printable character of the key, if any.
        modal: Kind of the open modal.
        search_mode: Active search input.

    Returns:
        The resolved command, or None when the key is unbound.
    """
    if modal is not ModalKind.NONE:
        if modal.is_selector:
            command = _SELECTOR_KEYS.get(key) or (
                _SELECTOR_CHARS.get(character) if character else None
            )
            return ResolvedCommand(command) if command else None
        command = _EDITOR_KEYS.get(key)
        if command:
            return ResolvedCommand(command)
        if _printable(character):
            return ResolvedCommand(Command.MODAL_INPUT, character)
        return None

    if search_mode is not SearchMode.NONE:
        command = _SEARCH_KEYS.get(key)
        if command:
            return ResolvedCommand(command)
        if _printable(character):
            return ResolvedCommand(Command.SEARCH_INPUT, character)
        return None

    command = _NORMAL_KEYS.get(key)
    if command:
        return ResolvedCommand(command)
    if not _printable(character):
        return None
    if character in _VIEW_NUMBERS:
        return ResolvedCommand(Command.SWITCH_VIEW, _VIEW_NUMBERS[character])
    command = _NORMAL_CHARS.get(character)
    return ResolvedCommand(command) if command else None


__all__ = ["Command", "ResolvedCommand", "resolve_command"]
