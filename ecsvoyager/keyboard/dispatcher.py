"""Command dispatch - applies resolved commands to the NavigationController.

Failures of user-initiated commands never escape: they end up on the
status line so the dashboard stays interactive.
"""

from __future__ import annotations

import inspect
import logging
from collections.abc import Callable
from typing import Any

from ecsvoyager.constants.enums import ModalKind, View
from ecsvoyager.controllers.navigation.controller import NavigationController
from ecsvoyager.errors import VoyagerError
from ecsvoyager.keyboard.commands import Command, ResolvedCommand

logger = logging.getLogger(__name__)

Handler = Callable[[NavigationController, Any], Any]


def _in_views(*views: View) -> Callable[[Handler], Handler]:
    """Only run the handler while one of ``views`` is active."""

    def decorate(handler: Handler) -> Handler:
        def guarded(controller: NavigationController, argument: Any) -> Any:
            if controller.view in views:
                return handler(controller, argument)
            return None

        return guarded

    return decorate


def _back(controller: NavigationController, _: Any) -> None:
    state = controller.state
    if state.show_help:
        controller.toggle_help()
    elif state.view.is_list and state.filters.query:
        controller.clear_search()
    else:
        controller.back()


def _cycle_status(controller: NavigationController, _: Any) -> None:
    if controller.view is View.SERVICE_LIST:
        controller.cycle_service_status_filter()
    elif controller.view is View.TASK_LIST:
        controller.cycle_task_status_filter()


_LIST_VIEWS = (
    View.CLUSTER_LIST,
    View.SERVICE_LIST,
    View.TASK_LIST,
    View.TASK_DEFINITION_LIST,
)
_DETAIL_VIEWS = (View.RESOURCE_DETAIL, View.TASK_DEFINITION_DETAIL)

_HANDLERS: dict[Command, Handler] = {
    Command.NAVIGATE_UP: lambda c, _: c.select_previous(),
    Command.NAVIGATE_DOWN: lambda c, _: c.select_next(),
    Command.CONFIRM: lambda c, _: c.confirm(),
    Command.BACK: _back,
    Command.SWITCH_VIEW: lambda c, number: c.switch_view(number),
    Command.REFRESH: lambda c, _: c.refresh(),
    Command.DESCRIBE: _in_views(View.SERVICE_LIST, View.TASK_LIST)(
        lambda c, _: c.describe()
    ),
    Command.VIEW_LOGS: lambda c, _: c.view_logs(),
    Command.VIEW_METRICS: lambda c, _: c.view_metrics(),
    Command.TOGGLE_AUTO_TAIL: _in_views(View.LOG_STREAM)(
        lambda c, _: c.toggle_auto_tail()
    ),
    Command.ENTER_SEARCH: lambda c, _: c.begin_search(),
    Command.CYCLE_LOG_LEVEL: _in_views(View.LOG_STREAM)(
        lambda c, _: c.cycle_log_level_filter()
    ),
    Command.CYCLE_STATUS_FILTER: _cycle_status,
    Command.CYCLE_LAUNCH_TYPE: _in_views(View.SERVICE_LIST)(
        lambda c, _: c.cycle_launch_type_filter()
    ),
    Command.CLEAR_FILTERS: _in_views(*_LIST_VIEWS)(lambda c, _: c.clear_filters()),
    Command.TOGGLE_REGEX: _in_views(*_LIST_VIEWS)(lambda c, _: c.toggle_regex_mode()),
    Command.EXPORT_LOGS: _in_views(View.LOG_STREAM)(lambda c, _: c.export_logs()),
    Command.TOGGLE_JSON: _in_views(*_DETAIL_VIEWS)(lambda c, _: c.toggle_json_view()),
    Command.CYCLE_TIME_RANGE: lambda c, _: c.cycle_time_range(),
    Command.EXECUTE_ACTION: _in_views(View.SERVICE_LIST, View.TASK_LIST)(
        lambda c, _: c.execute_action()
    ),
    Command.EDIT_SERVICE: _in_views(View.SERVICE_LIST)(
        lambda c, _: c.open_modal(ModalKind.SERVICE_EDITOR)
    ),
    Command.PORT_FORWARD: _in_views(View.TASK_LIST)(
        lambda c, _: c.open_modal(ModalKind.PORT_FORWARDING_SETUP)
    ),
    Command.PROFILE_SELECTOR: lambda c, _: c.open_modal(ModalKind.PROFILE_SELECTOR),
    Command.REGION_SELECTOR: lambda c, _: c.open_modal(ModalKind.REGION_SELECTOR),
    Command.TOGGLE_HELP: lambda c, _: c.toggle_help(),
    Command.SEARCH_INPUT: lambda c, char: c.update_search(char),
    Command.SEARCH_BACKSPACE: lambda c, _: c.delete_search_char(),
    Command.SEARCH_COMMIT: lambda c, _: c.end_search(),
    Command.SEARCH_CANCEL: lambda c, _: c.cancel_search(),
    Command.MODAL_UP: lambda c, _: c.modal_previous(),
    Command.MODAL_DOWN: lambda c, _: c.modal_next(),
    Command.MODAL_CONFIRM: lambda c, _: c.modal_confirm(),
    Command.MODAL_CLOSE: lambda c, _: c.close_modal(),
    Command.MODAL_INPUT: lambda c, char: c.modal_input(char),
    Command.MODAL_BACKSPACE: lambda c, _: c.modal_delete_char(),
}


async def dispatch(controller: NavigationController, resolved: ResolvedCommand) -> bool:
    """Apply ``resolved`` to ``controller``.

    Returns:
        False when the command asks the application to quit.
    """
    if resolved.command is Command.QUIT:
        return False

    handler = _HANDLERS[resolved.command]
    try:
        result = handler(controller, resolved.argument)
        if inspect.isawaitable(result):
            await result
    except VoyagerError as exc:
        logger.info("%s failed: %s", resolved.command.value, exc)
        controller.report_error(exc)
    except Exception as exc:
        logger.exception("Unexpected failure handling %s", resolved.command.value)
        controller.report_error(exc)
    return True


__all__ = ["dispatch"]
