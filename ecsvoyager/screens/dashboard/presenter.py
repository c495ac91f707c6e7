"""Dashboard presenter - formats controller state into Rich renderables."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from typing import Any

from rich.console import Group, RenderableType
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from ecsvoyager.constants.enums import SearchMode, View
from ecsvoyager.constants.values import (
    APP_TITLE,
    NO_SELECTION,
    SPINNER_FRAMES,
    STATUS_NO_DATA,
    STATUS_READY,
)
from ecsvoyager.controllers.navigation.controller import NavigationController
from ecsvoyager.screens.dashboard.config import (
    ALARM_STATE_STYLES,
    CLUSTER_TABLE_COLUMNS,
    HELP_SECTIONS,
    LOG_LEVEL_STYLES,
    SERVICE_TABLE_COLUMNS,
    STATUS_STYLES,
    TASK_DEFINITION_TABLE_COLUMNS,
    TASK_TABLE_COLUMNS,
)
from ecsvoyager.utils.metrics_layout import MetricsLine, metrics_lines

_METRICS_ROLE_STYLES = {
    "heading": "bold",
    "chart_title": "bold",
    "cpu": "green",
    "memory": "cyan",
    "reason": "dim",
    "muted": "dim",
}


def _status_text(value: str) -> Text:
    return Text(value, style=STATUS_STYLES.get(value.upper(), ""))


def _metrics_style(line: MetricsLine) -> str:
    if line.role == "alarm":
        return ALARM_STATE_STYLES.get(line.alarm_state or "", "")
    return _METRICS_ROLE_STYLES.get(line.role, "")


def visible_window(total: int, selection: int, height: int) -> tuple[int, int]:
    """Slice bounds of ``height`` rows that keep ``selection`` visible."""
    if total <= height:
        return 0, total
    start = min(max(0, selection - height + 1), total - height)
    return start, start + height


class DashboardPresenter:
    """Renders the NavigationController state for the dashboard screen."""

    def __init__(self, controller: NavigationController) -> None:
        self._controller = controller
        self._body_renderers: dict[View, Callable[[int], RenderableType]] = {
            View.CLUSTER_LIST: self._render_clusters,
            View.SERVICE_LIST: self._render_services,
            View.TASK_LIST: self._render_tasks,
            View.RESOURCE_DETAIL: self._render_details,
            View.LOG_STREAM: self._render_logs,
            View.METRICS_VIEW: self._render_metrics,
            View.TASK_DEFINITION_LIST: self._render_task_definitions,
            View.TASK_DEFINITION_DETAIL: self._render_details,
        }

    @property
    def body_renderers(self) -> dict[View, Callable[[int], RenderableType]]:
        return self._body_renderers

    def render(self, body_height: int = 20, frame: int = 0) -> RenderableType:
        """Full dashboard: header, body, search/filter bars, status line."""
        state = self._controller.state
        parts: list[RenderableType] = [self.render_header()]

        if state.show_help:
            parts.append(self.render_help())
        else:
            parts.append(self._body_renderers[state.view](max(1, body_height)))

        search_bar = self.render_search_bar()
        if search_bar is not None:
            parts.append(search_bar)
        filter_bar = self.render_filter_bar()
        if filter_bar is not None:
            parts.append(filter_bar)

        modal = self.render_modal()
        if modal is not None:
            parts.append(modal)

        parts.append(self.render_status_line(frame))
        return Group(*parts)

    # =========================================================================
    # Chrome
    # =========================================================================

    def render_header(self) -> Text:
        state = self._controller.state
        header = Text()
        header.append(f" {APP_TITLE} ", style="bold reverse")
        header.append(f"  {state.view.title}", style="bold")

        breadcrumb = [
            part
            for part in (state.selected_cluster, state.selected_service)
            if part
        ]
        if breadcrumb:
            header.append(f"  [{' / '.join(breadcrumb)}]", style="cyan")

        header.append(
            f"  profile: {state.profile or 'default'}  region: {state.region or NO_SELECTION}",
            style="dim",
        )
        if state.refresh.auto_refresh:
            header.append(f"  auto-refresh {state.refresh.interval:.0f}s", style="green")
        if self._controller.settings.read_only:
            header.append("  READ-ONLY", style="bold yellow")
        return header

    def render_search_bar(self) -> Text | None:
        state = self._controller.state
        if state.search_mode is SearchMode.LIST:
            prefix = "Regex" if state.filters.regex_mode else "Search"
            return Text(f"{prefix}: {state.filters.query}_", style="bold")
        if state.search_mode is SearchMode.LOG:
            return Text(f"Log search: {state.logs.text_filter}_", style="bold")
        return None

    def render_filter_bar(self) -> Text | None:
        state = self._controller.state
        filters = state.filters
        parts = []
        if state.view.is_list:
            if filters.query and state.search_mode is SearchMode.NONE:
                parts.append(f"query={filters.query!r}")
            if filters.regex_mode:
                parts.append("regex")
            if state.view is View.SERVICE_LIST:
                if filters.service_status:
                    parts.append(f"status={filters.service_status}")
                if filters.launch_type:
                    parts.append(f"launch={filters.launch_type}")
            if state.view is View.TASK_LIST and filters.task_status:
                parts.append(f"status={filters.task_status}")
        elif state.view is View.LOG_STREAM:
            logs = state.logs
            if logs.level_filter is not None:
                parts.append(f"level={logs.level_filter.value}")
            if logs.text_filter and state.search_mode is SearchMode.NONE:
                parts.append(f"text={logs.text_filter!r}")
            parts.append("auto-tail" if logs.auto_tail else "paused")
        if not parts:
            return None
        return Text(f"Filters: {'  '.join(parts)}", style="magenta")

    def render_status_line(self, frame: int = 0) -> Text:
        state = self._controller.state
        message = state.status_message or STATUS_READY
        if state.loading:
            spinner = SPINNER_FRAMES[frame % len(SPINNER_FRAMES)]
            return Text(f"{spinner} {message}", style="bold yellow")
        style = "bold red" if message.startswith(("Error", "Refresh failed")) else "dim"
        return Text(f"  {message}", style=style)

    # =========================================================================
    # List views
    # =========================================================================

    def _table(
        self,
        columns: Sequence[tuple[str, int]],
        rows: Sequence[Sequence[RenderableType]],
        body_height: int,
    ) -> Table:
        table = Table(expand=True, show_edge=False, header_style="bold")
        for name, width in columns:
            table.add_column(name, min_width=min(width, len(name) + 2), max_width=width, no_wrap=True)

        selection = self._controller.state.selection
        start, end = visible_window(len(rows), selection, max(1, body_height - 2))
        for index in range(start, end):
            table.add_row(*rows[index], style="reverse" if index == selection else None)
        return table

    def _list_or_placeholder(
        self,
        columns: Sequence[tuple[str, int]],
        row_builder: Callable[[Any], Sequence[RenderableType]],
        body_height: int,
    ) -> RenderableType:
        items = self._controller.filtered_items()
        if not items:
            return Text(f"  {STATUS_NO_DATA}", style="dim")
        return self._table(columns, [row_builder(item) for item in items], body_height)

    def _render_clusters(self, body_height: int) -> RenderableType:
        return self._list_or_placeholder(
            CLUSTER_TABLE_COLUMNS, lambda name: (name,), body_height
        )

    def _render_services(self, body_height: int) -> RenderableType:
        return self._list_or_placeholder(
            SERVICE_TABLE_COLUMNS,
            lambda service: (
                service.name,
                _status_text(service.status),
                str(service.desired_count),
                str(service.running_count),
                str(service.pending_count),
                service.launch_type,
                service.task_definition or NO_SELECTION,
            ),
            body_height,
        )

    def _render_tasks(self, body_height: int) -> RenderableType:
        return self._list_or_placeholder(
            TASK_TABLE_COLUMNS,
            lambda task: (
                task.task_id,
                _status_text(task.status),
                task.desired_status,
                task.container_instance,
                task.cpu,
                task.memory,
                task.launch_type,
            ),
            body_height,
        )

    def _render_task_definitions(self, body_height: int) -> RenderableType:
        return self._list_or_placeholder(
            TASK_DEFINITION_TABLE_COLUMNS,
            lambda definition: (
                definition.family,
                str(definition.revision),
                _status_text(definition.status),
                definition.cpu,
                definition.memory,
                definition.arn,
            ),
            body_height,
        )

    # =========================================================================
    # Scrolling views
    # =========================================================================

    def _render_details(self, body_height: int) -> RenderableType:
        state = self._controller.state
        text = self._controller.detail_text()
        if not text:
            return Text(f"  {STATUS_NO_DATA}", style="dim")
        lines = text.splitlines()
        visible = lines[state.detail_scroll:state.detail_scroll + body_height]
        mode = "JSON" if state.show_json else "Formatted"
        return Panel(
            Text("\n".join(visible)),
            title=f"{state.details.title if state.details else ''} ({mode})",
            title_align="left",
        )

    def _render_logs(self, body_height: int) -> RenderableType:
        logs = self._controller.logs
        filtered = logs.filtered()
        if not filtered:
            return Text(f"  {STATUS_NO_DATA}", style="dim")

        start = logs.window_start()
        body = Text()
        for entry in logs.window():
            level = entry.level
            style = LOG_LEVEL_STYLES.get(level.value, "") if level is not None else ""
            body.append(f"[{entry.formatted_timestamp}] ", style="dim")
            body.append(f"[{entry.source}] ", style="blue")
            body.append(entry.message + "\n", style=style)

        end = start + len(logs.window())
        position = f"{start + 1}-{end} of {len(filtered)}"
        tail = "auto-tail" if logs.auto_tail else "paused"
        return Panel(body, title=f"Logs {position} ({tail})", title_align="left")

    def metrics_lines(self) -> list[tuple[str, str]]:
        """Metrics body as (text, style) lines before scrolling is applied."""
        state = self._controller.state
        lines = metrics_lines(
            state.metrics, state.selected_service, state.time_range, self._controller.settings
        )
        return [(line.text, _metrics_style(line)) for line in lines]

    def _render_metrics(self, body_height: int) -> RenderableType:
        scroll = self._controller.state.detail_scroll
        body = Text()
        for text, style in self.metrics_lines()[scroll:scroll + body_height]:
            body.append(text + "\n", style=style)
        return body

    # =========================================================================
    # Overlays
    # =========================================================================

    def render_modal(self) -> Panel | None:
        modal = self._controller.state.modal
        if not modal.is_open:
            return None

        body = Text()
        if modal.kind.is_selector:
            for index, option in enumerate(modal.options):
                marker = ">" if index == modal.cursor else " "
                body.append(
                    f"{marker} {option}\n",
                    style="reverse" if index == modal.cursor else "",
                )
            hint = "j/k move  Enter select  Esc cancel"
        else:
            focused = modal.focused_field
            for name, value in modal.fields.items():
                label = name.replace("_", " ").title()
                cursor = "_" if name == focused else ""
                body.append(f"{label}: ", style="bold" if name == focused else "")
                body.append(f"{value}{cursor}\n")
            hint = "Tab next field  Enter apply  Esc cancel"
        body.append(hint, style="dim")
        return Panel(body, title=modal.title, title_align="left", border_style="yellow")

    def render_help(self) -> Panel:
        table = Table(show_header=False, show_edge=False, box=None)
        table.add_column("Key", style="bold cyan", no_wrap=True)
        table.add_column("Action")
        for section, bindings in HELP_SECTIONS:
            table.add_row(Text(section, style="bold underline"), "")
            for key, action in bindings:
                table.add_row(key, action)
        return Panel(table, title="Help (press ? to close)", title_align="left")


__all__ = ["DashboardPresenter", "visible_window"]
