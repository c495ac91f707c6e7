"""Unit tests for NavigationController modals, view switching and log export."""

from __future__ import annotations

from datetime import datetime

import pytest

from ecsvoyager.constants.enums import ModalKind, View
from ecsvoyager.constants.values import AWS_REGIONS
from ecsvoyager.controllers.navigation.controller import (
    NavigationController,
    parse_int_field,
)
from ecsvoyager.errors import ValidationError


async def _open_services(controller: NavigationController) -> None:
    await controller.refresh()
    await controller.confirm()


async def _open_tasks(controller: NavigationController) -> None:
    await _open_services(controller)
    await controller.confirm()


class TestParseIntField:
    """Tests for parse_int_field."""

    def test_valid(self) -> None:
        """Test that in-range integers parse, surrounding spaces allowed."""
        assert parse_int_field(" 42 ", "Count", 0, 100) == 42

    @pytest.mark.parametrize("raw", ["", "abc", "-1", "1.5", "\u00b2", "\u0663"])
    def test_not_a_number(self, raw: str) -> None:
        """Test that non-numeric input is rejected."""
        with pytest.raises(ValidationError):
            parse_int_field(raw, "Count", 0, 100)

    def test_out_of_range(self) -> None:
        """Test that bounds are enforced."""
        with pytest.raises(ValidationError):
            parse_int_field("101", "Count", 0, 100)
        with pytest.raises(ValidationError):
            parse_int_field("0", "Port", 1, 65535)


class TestSelectorModals:
    """Tests for profile and region selectors."""

    def test_single_modal_slot(self, controller: NavigationController) -> None:
        """Test that opening a modal replaces the open one."""
        controller.open_modal(ModalKind.PROFILE_SELECTOR)
        controller.open_modal(ModalKind.REGION_SELECTOR)
        assert controller.state.modal.kind is ModalKind.REGION_SELECTOR
        assert controller.state.modal.options == list(AWS_REGIONS)

    def test_cursor_wraps(self, controller: NavigationController) -> None:
        """Test that selector navigation wraps around."""
        controller.open_modal(ModalKind.REGION_SELECTOR)
        controller.modal_previous()
        assert controller.state.modal.cursor == len(AWS_REGIONS) - 1
        controller.modal_next()
        assert controller.state.modal.cursor == 0

    def test_close_modal(self, controller: NavigationController) -> None:
        """Test that closing empties the modal slot."""
        controller.open_modal(ModalKind.REGION_SELECTOR)
        controller.close_modal()
        assert controller.state.modal.is_open is False

    @pytest.mark.asyncio
    async def test_region_switch_reloads_clusters(self, controller, provider) -> None:
        """Test that choosing a region switches context and returns to clusters."""
        await _open_services(controller)
        controller.open_modal(ModalKind.REGION_SELECTOR)
        controller.modal_next()
        await controller.modal_confirm()

        assert controller.state.modal.is_open is False
        assert controller.state.region == AWS_REGIONS[1]
        assert provider.region == AWS_REGIONS[1]
        assert controller.view is View.CLUSTER_LIST
        assert controller.state.clusters == ["prod", "staging"]
        assert controller.state.services == []
        assert controller.state.selected_cluster is None

    @pytest.mark.asyncio
    async def test_profile_switch(self, controller, provider) -> None:
        """Test that choosing a profile switches the provider context."""
        await controller.initialize()
        controller.open_modal(ModalKind.PROFILE_SELECTOR)
        assert controller.state.modal.options == ["default", "staging"]
        controller.modal_next()
        await controller.modal_confirm()
        assert controller.state.profile == "staging"
        assert provider.profile == "staging"

    def test_profile_options_without_listing(self, controller: NavigationController) -> None:
        """Test the fallback option before profiles are listed."""
        controller.open_modal(ModalKind.PROFILE_SELECTOR)
        assert controller.state.modal.options == ["default"]


class TestServiceEditor:
    """Tests for the desired-count editor."""

    @pytest.mark.asyncio
    async def test_update_desired_count(self, controller: NavigationController) -> None:
        """Test that a valid count updates the service and closes the modal."""
        await _open_services(controller)
        controller.open_modal(ModalKind.SERVICE_EDITOR)
        assert controller.state.modal.fields == {"desired_count": "2"}

        controller.modal_delete_char()
        controller.modal_input("5")
        await controller.modal_confirm()

        assert controller.state.modal.is_open is False
        assert controller.state.services[0].desired_count == 5

    @pytest.mark.asyncio
    async def test_invalid_count_keeps_modal_open(self, controller: NavigationController) -> None:
        """Test that a non-numeric count raises and leaves the modal open."""
        await _open_services(controller)
        controller.open_modal(ModalKind.SERVICE_EDITOR)
        controller.modal_input("x")
        with pytest.raises(ValidationError):
            await controller.modal_confirm()
        assert controller.state.modal.kind is ModalKind.SERVICE_EDITOR

    @pytest.mark.asyncio
    async def test_count_above_maximum(self, controller: NavigationController) -> None:
        """Test that counts over the limit are rejected."""
        await _open_services(controller)
        controller.open_modal(ModalKind.SERVICE_EDITOR)
        for char in "000":
            controller.modal_input(char)
        with pytest.raises(ValidationError):
            await controller.modal_confirm()

    @pytest.mark.asyncio
    async def test_requires_service_list(self, controller: NavigationController) -> None:
        """Test that the editor needs a selected service."""
        await controller.refresh()
        with pytest.raises(ValidationError):
            controller.open_modal(ModalKind.SERVICE_EDITOR)
        assert controller.state.modal.is_open is False

    @pytest.mark.asyncio
    async def test_read_only_refuses_update(self, controller, settings) -> None:
        """Test that read-only mode refuses the edit."""
        settings.read_only = True
        await _open_services(controller)
        controller.open_modal(ModalKind.SERVICE_EDITOR)
        controller.modal_input("0")
        await controller.modal_confirm()
        assert controller.state.services[0].desired_count == 2
        assert "Read-only" in controller.state.status_message

    @pytest.mark.asyncio
    async def test_edits_service_it_was_opened_on(self, controller, inventory) -> None:
        """Test that a list change under the editor does not retarget the update."""
        await _open_services(controller)
        controller.select_next()
        controller.open_modal(ModalKind.SERVICE_EDITOR)
        assert controller.state.modal.title == "Edit service: api"

        inventory["clusters"]["prod"]["services"].pop(0)
        await controller.refresh()
        assert controller.selected_item().name == "worker"

        while controller.state.modal.fields["desired_count"]:
            controller.modal_delete_char()
        controller.modal_input("9")
        await controller.modal_confirm()

        counts = {s.name: s.desired_count for s in controller.state.services}
        assert counts["api"] == 9
        assert counts["worker"] != 9
        assert controller.state.status_message == "Service api desired count set to 9"

    @pytest.mark.asyncio
    async def test_no_scheduled_refresh_while_open(self, controller, clock) -> None:
        """Test that ticks are skipped while a modal is open."""
        await _open_services(controller)
        controller.open_modal(ModalKind.SERVICE_EDITOR)
        clock.advance(100)
        assert await controller.tick() is False

        controller.close_modal()
        assert await controller.tick() is True


class TestPortForwarding:
    """Tests for the port forwarding modal."""

    @pytest.mark.asyncio
    async def test_start_session(self, controller, provider) -> None:
        """Test that valid ports start a forwarding session."""
        await _open_tasks(controller)
        controller.open_modal(ModalKind.PORT_FORWARDING_SETUP)
        for char in "8080":
            controller.modal_input(char)
        controller.modal_next()
        for char in "80":
            controller.modal_input(char)

        assert controller.state.modal.fields == {"local_port": "8080", "remote_port": "80"}
        await controller.modal_confirm()

        assert provider.port_forwarding_sessions == ["pf-web-1-8080-80"]
        assert "localhost:8080" in controller.state.status_message
        assert controller.state.modal.is_open is False

    @pytest.mark.asyncio
    async def test_forwards_task_it_was_opened_on(self, controller, provider) -> None:
        """Test that moving the list cursor does not change the forwarded task."""
        await _open_tasks(controller)
        controller.open_modal(ModalKind.PORT_FORWARDING_SETUP)
        controller.state.selection = 1
        for char in "8080":
            controller.modal_input(char)
        controller.modal_next()
        for char in "80":
            controller.modal_input(char)
        await controller.modal_confirm()

        assert provider.port_forwarding_sessions == ["pf-web-1-8080-80"]
        assert "-> web-1:80" in controller.state.status_message

    @pytest.mark.asyncio
    async def test_port_out_of_range(self, controller: NavigationController) -> None:
        """Test that ports outside 1-65535 are rejected."""
        await _open_tasks(controller)
        controller.open_modal(ModalKind.PORT_FORWARDING_SETUP)
        for char in "70000":
            controller.modal_input(char)
        controller.modal_next()
        controller.modal_input("1")
        with pytest.raises(ValidationError):
            await controller.modal_confirm()

    @pytest.mark.asyncio
    async def test_field_focus_wraps(self, controller: NavigationController) -> None:
        """Test that field focus cycles through the fields."""
        await _open_tasks(controller)
        controller.open_modal(ModalKind.PORT_FORWARDING_SETUP)
        assert controller.state.modal.focused_field == "local_port"
        controller.modal_previous()
        assert controller.state.modal.focused_field == "remote_port"


class TestSwitchView:
    """Tests for numbered view switching."""

    @pytest.mark.asyncio
    async def test_task_definitions(self, controller: NavigationController) -> None:
        """Test that view 4 loads task definitions and drills into one."""
        await controller.switch_view(4)
        assert controller.view is View.TASK_DEFINITION_LIST
        assert [d.family for d in controller.state.task_definitions] == ["web", "api"]

        await controller.confirm()
        assert controller.view is View.TASK_DEFINITION_DETAIL
        assert "web" in controller.detail_text()

        controller.back()
        assert controller.view is View.TASK_DEFINITION_LIST

    @pytest.mark.asyncio
    async def test_unknown_number_is_noop(self, controller: NavigationController) -> None:
        """Test that unmapped numbers do nothing."""
        await controller.switch_view(9)
        assert controller.view is View.CLUSTER_LIST

    @pytest.mark.asyncio
    async def test_back_from_task_definitions(self, controller: NavigationController) -> None:
        """Test that the task definition list returns to clusters."""
        await controller.switch_view(4)
        controller.back()
        assert controller.view is View.CLUSTER_LIST


class TestExportLogs:
    """Tests for exporting the visible log entries."""

    @pytest.mark.asyncio
    async def test_export(self, controller, settings) -> None:
        """Test that the filtered entries are written and reported."""
        await _open_tasks(controller)
        await controller.view_logs()
        controller.cycle_log_level_filter()

        path = controller.export_logs(now=datetime(2024, 5, 6, 7, 8, 9))

        assert path is not None
        assert path.name == "logs_web-1_20240506_070809.txt"
        assert path.read_text(encoding="utf-8").splitlines() == [
            "[2023-11-14 22:13:22] [app] ERROR upstream timeout",
        ]
        assert "Logs exported to" in controller.state.status_message

    @pytest.mark.asyncio
    async def test_export_failure_sets_status(self, controller, settings, tmp_path) -> None:
        """Test that an unwritable export path is reported, not raised."""
        blocker = tmp_path / "blocker"
        blocker.write_text("not a directory", encoding="utf-8")
        settings.export_path = str(blocker)

        await _open_tasks(controller)
        await controller.view_logs()
        assert controller.export_logs() is None
        assert controller.state.status_message.startswith("Export failed")


class TestToggles:
    """Tests for help and JSON toggles."""

    def test_toggle_help(self, controller: NavigationController) -> None:
        """Test that help toggles on and off."""
        controller.toggle_help()
        assert controller.state.show_help is True
        controller.toggle_help()
        assert controller.state.show_help is False

    def test_json_toggle_ignored_in_lists(self, controller: NavigationController) -> None:
        """Test that the JSON toggle only applies to detail views."""
        controller.toggle_json_view()
        assert controller.state.show_json is False

    def test_report_error(self, controller: NavigationController) -> None:
        """Test that errors are shown with an Error prefix."""
        controller.state.loading = True
        controller.report_error(ValidationError("bad input"))
        assert controller.state.status_message == "Error: bad input"
        assert controller.state.loading is False
