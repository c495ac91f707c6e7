"""Tests for command dispatch onto the NavigationController."""

from __future__ import annotations

import pytest

from ecsvoyager.constants.enums import ModalKind, View
from ecsvoyager.controllers.navigation.controller import NavigationController
from ecsvoyager.keyboard.commands import Command, ResolvedCommand
from ecsvoyager.keyboard.dispatcher import _HANDLERS, dispatch


async def _press(controller: NavigationController, command: Command, argument=None) -> bool:
    return await dispatch(controller, ResolvedCommand(command, argument))


class TestDispatchTable:
    """Tests for handler coverage."""

    def test_every_command_handled(self) -> None:
        """Test that every command except quit has a handler."""
        assert set(_HANDLERS) == set(Command) - {Command.QUIT}


class TestDispatch:
    """Tests for dispatch."""

    @pytest.mark.asyncio
    async def test_quit(self, controller: NavigationController) -> None:
        """Test that quit stops the application."""
        assert await _press(controller, Command.QUIT) is False

    @pytest.mark.asyncio
    async def test_drill_down_and_back(self, controller: NavigationController) -> None:
        """Test confirm and back through the dispatcher."""
        assert await _press(controller, Command.REFRESH)
        await _press(controller, Command.CONFIRM)
        assert controller.view is View.SERVICE_LIST
        await _press(controller, Command.BACK)
        assert controller.view is View.CLUSTER_LIST

    @pytest.mark.asyncio
    async def test_failure_reported_on_status_line(self, controller, provider) -> None:
        """Test that a user-initiated failure is shown and does not raise."""
        await _press(controller, Command.REFRESH)
        await _press(controller, Command.CONFIRM)
        provider.failing = True

        assert await _press(controller, Command.DESCRIBE) is True
        assert controller.state.status_message == "Error: connection reset"
        assert controller.view is View.SERVICE_LIST
        assert controller.state.loading is False

    @pytest.mark.asyncio
    async def test_validation_error_reported(self, controller: NavigationController) -> None:
        """Test that opening the editor outside the service list is ignored."""
        await _press(controller, Command.EDIT_SERVICE)
        assert controller.state.modal.is_open is False

    @pytest.mark.asyncio
    async def test_invalid_modal_input_reported(self, controller: NavigationController) -> None:
        """Test that a bad editor value ends up on the status line."""
        await _press(controller, Command.REFRESH)
        await _press(controller, Command.CONFIRM)
        await _press(controller, Command.EDIT_SERVICE)
        await _press(controller, Command.MODAL_INPUT, "x")
        await _press(controller, Command.MODAL_CONFIRM)

        assert controller.state.status_message.startswith("Error: Desired count")
        assert controller.state.modal.kind is ModalKind.SERVICE_EDITOR

    @pytest.mark.asyncio
    async def test_escape_clears_query_before_back(self, controller: NavigationController) -> None:
        """Test that escape first drops an applied query."""
        await _press(controller, Command.REFRESH)
        await _press(controller, Command.CONFIRM)
        await _press(controller, Command.ENTER_SEARCH)
        await _press(controller, Command.SEARCH_INPUT, "w")
        await _press(controller, Command.SEARCH_COMMIT)

        await _press(controller, Command.BACK)
        assert controller.view is View.SERVICE_LIST
        assert controller.state.filters.query == ""

        await _press(controller, Command.BACK)
        assert controller.view is View.CLUSTER_LIST

    @pytest.mark.asyncio
    async def test_escape_closes_help(self, controller: NavigationController) -> None:
        """Test that escape closes the help overlay before navigating."""
        await _press(controller, Command.TOGGLE_HELP)
        await _press(controller, Command.BACK)
        assert controller.state.show_help is False

    @pytest.mark.asyncio
    async def test_view_gated_commands(self, controller: NavigationController) -> None:
        """Test that view-specific commands are ignored elsewhere."""
        await _press(controller, Command.TOGGLE_AUTO_TAIL)
        assert controller.logs.auto_tail is True
        await _press(controller, Command.CYCLE_LAUNCH_TYPE)
        assert controller.state.filters.launch_type is None

    @pytest.mark.asyncio
    async def test_status_filter_per_view(self, controller: NavigationController) -> None:
        """Test that F cycles the service or task status filter."""
        await _press(controller, Command.REFRESH)
        await _press(controller, Command.CONFIRM)
        await _press(controller, Command.CYCLE_STATUS_FILTER)
        assert controller.state.filters.service_status == "ACTIVE"

        await _press(controller, Command.CONFIRM)
        await _press(controller, Command.CYCLE_STATUS_FILTER)
        assert controller.state.filters.task_status == "RUNNING"

    @pytest.mark.asyncio
    async def test_switch_view(self, controller: NavigationController) -> None:
        """Test numbered view switching."""
        await _press(controller, Command.SWITCH_VIEW, 4)
        assert controller.view is View.TASK_DEFINITION_LIST
