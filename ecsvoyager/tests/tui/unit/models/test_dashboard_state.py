"""Tests for the dashboard state containers."""

from __future__ import annotations

from ecsvoyager.constants.enums import ModalKind, SearchMode, View
from ecsvoyager.models.state.dashboard_state import (
    DashboardState,
    FilterState,
    ModalState,
    RefreshState,
)


class TestFilterState:
    """Tests for FilterState."""

    def test_defaults_inactive(self) -> None:
        """Test that a fresh filter state filters nothing."""
        assert FilterState().has_active_filters is False

    def test_regex_mode_alone_is_not_a_filter(self) -> None:
        """Test that regex mode without a query filters nothing."""
        assert FilterState(regex_mode=True).has_active_filters is False

    def test_clear(self) -> None:
        """Test that clear keeps regex mode."""
        filters = FilterState(query="a", regex_mode=True, launch_type="EC2", task_status="RUNNING")
        filters.clear()
        assert filters == FilterState(regex_mode=True)


class TestModalState:
    """Tests for ModalState."""

    def test_closed_by_default(self) -> None:
        """Test that the default modal slot is empty."""
        modal = ModalState()
        assert modal.kind is ModalKind.NONE
        assert modal.is_open is False
        assert modal.focused_field is None

    def test_focused_field(self) -> None:
        """Test that focus indexes the field names in order."""
        modal = ModalState(kind=ModalKind.PORT_FORWARDING_SETUP, fields={"a": "", "b": ""}, focus=1)
        assert modal.focused_field == "b"


class TestDashboardState:
    """Tests for DashboardState defaults."""

    def test_defaults(self) -> None:
        """Test the initial state."""
        state = DashboardState()
        assert state.view is View.CLUSTER_LIST
        assert state.search_mode is SearchMode.NONE
        assert state.selection == 0
        assert state.loading is False
        assert state.logs.auto_tail is True
        assert state.refresh == RefreshState()

    def test_independent_instances(self) -> None:
        """Test that mutable defaults are not shared."""
        first, second = DashboardState(), DashboardState()
        first.clusters.append("prod")
        assert second.clusters == []
        assert first.logs is not second.logs
