"""Dashboard screen - hosts the whole ECS dashboard in a single Static."""

from __future__ import annotations

import logging

from textual import events
from textual.app import ComposeResult
from textual.message import Message
from textual.screen import Screen
from textual.widgets import Static

from ecsvoyager.constants.timeouts import LOOP_TICK_INTERVAL
from ecsvoyager.controllers.navigation.controller import NavigationController
from ecsvoyager.errors import VoyagerError
from ecsvoyager.keyboard.commands import resolve_command
from ecsvoyager.keyboard.dispatcher import dispatch
from ecsvoyager.screens.dashboard.config import CHROME_HEIGHT, DASHBOARD_BODY_ID
from ecsvoyager.screens.dashboard.presenter import DashboardPresenter

logger = logging.getLogger(__name__)


class LoopTick(Message):
    """Periodic heartbeat routed through the screen's message queue."""


class DashboardScreen(Screen[None], inherit_bindings=False):
    """Single-screen dashboard driven by a NavigationController.

    Key presses and heartbeat ticks are both handled as messages on this
    screen, so controller state is only touched by one handler at a time.
    """

    DEFAULT_CSS = """
    DashboardScreen {
        background: $background;
    }

    #dashboard-body {
        width: 1fr;
        height: 1fr;
        padding: 0 1;
    }
    """

    def __init__(self, controller: NavigationController) -> None:
        super().__init__()
        self._controller = controller
        self._presenter = DashboardPresenter(controller)
        self._frame = 0

    @property
    def controller(self) -> NavigationController:
        return self._controller

    def compose(self) -> ComposeResult:
        yield Static(id=DASHBOARD_BODY_ID)

    async def on_mount(self) -> None:
        self._apply_viewport()
        self.set_interval(LOOP_TICK_INTERVAL, self._post_tick)
        self.redraw()
        try:
            await self._controller.initialize()
        except VoyagerError as exc:
            logger.warning("Initial load failed: %s", exc)
            self._controller.report_error(exc)
        self.redraw()

    def _post_tick(self) -> None:
        self.post_message(LoopTick())

    def _body_height(self) -> int:
        return max(1, self.size.height - CHROME_HEIGHT)

    def _apply_viewport(self) -> None:
        # Log panel borders take two rows
        self._controller.logs.set_viewport_height(max(1, self._body_height() - 2))

    def on_resize(self, _: events.Resize) -> None:
        self._apply_viewport()
        self.redraw()

    async def on_loop_tick(self, _: LoopTick) -> None:
        self._frame += 1
        refreshed = await self._controller.tick()
        if refreshed or self._controller.state.loading:
            self.redraw()

    async def on_key(self, event: events.Key) -> None:
        state = self._controller.state
        resolved = resolve_command(
            event.key, event.character, state.modal.kind, state.search_mode
        )
        if resolved is None:
            return
        event.stop()
        event.prevent_default()

        keep_running = await dispatch(self._controller, resolved)
        if not keep_running:
            self.app.exit()
            return
        self.redraw()

    def redraw(self) -> None:
        body = self.query_one(f"#{DASHBOARD_BODY_ID}", Static)
        body.update(self._presenter.render(self._body_height(), self._frame))
