"""Full-screen Textual session hosting the wizard."""

from __future__ import annotations

from typing import Optional

from loguru import logger
from textual.events import Key
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.widgets import Static

from ..config import Settings
from ..models import Command, Screen
from ..wizard import WizardState, apply_event, new_session, update
from .logging_bridge import LogBridge
from .views import render_screen
from .workers import CopyWorker

POLL_INTERVAL = 0.1
_NAMED_KEYS = {
    "up",
    "down",
    "left",
    "right",
    "enter",
    "backspace",
    "escape",
    "ctrl+c",
    "ctrl+x",
}


def normalize_key(key: str, character: Optional[str]) -> Optional[str]:
    """Map a Textual key event onto the wizard's key names."""

    if key in _NAMED_KEYS:
        return key
    if character and len(character) == 1 and character.isprintable():
        return character
    return None


class FlatCopyApp(App):
    """Feed key presses to the wizard and re-render after every change."""

    TITLE = "flatcopy"
    CSS = """
    Screen {
        padding: 1 2;
    }
    """
    ENABLE_COMMAND_PALETTE = False
    BINDINGS = [
        Binding("escape", "interrupt('escape')", "Exit", priority=True),
        Binding("ctrl+c", "interrupt('ctrl+c')", "Exit", priority=True, show=False),
    ]

    def __init__(self, settings: Settings | None = None, state: WizardState | None = None) -> None:
        super().__init__()
        self.wizard = state or new_session(settings)
        self._worker: Optional[CopyWorker] = None
        self._log_bridge: Optional[LogBridge] = None

    def compose(self) -> ComposeResult:
        yield Static(id="body")

    def on_mount(self) -> None:
        self._log_bridge = LogBridge()
        self.set_interval(POLL_INTERVAL, self._poll_worker)
        self._render_state()

    def on_unmount(self) -> None:
        if self._log_bridge is not None:
            self._log_bridge.close()
            self._log_bridge = None

    def on_key(self, event: Key) -> None:
        key = normalize_key(event.key, event.character)
        event.stop()
        event.prevent_default()
        if key is None:
            return
        self.wizard, command = update(self.wizard, key)
        self._render_state()
        if command == Command.QUIT:
            self.exit()
        elif command == Command.START_COPY:
            self._start_copy()

    def action_interrupt(self, key: str) -> None:
        self.wizard, _ = update(self.wizard, key)
        self.exit()

    def _start_copy(self) -> None:
        if self._worker is not None and not self._worker.closed.is_set():
            logger.warning("Copy already running; ignoring start request")
            return
        logger.info(
            "Starting copy from {} to {} (dry run: {})",
            self.wizard.config.source_dir,
            self.wizard.config.dest_dir,
            self.wizard.config.dry_run,
        )
        self._worker = CopyWorker(self.wizard.config, delay=self.wizard.dry_run_delay)
        self._worker.start()

    def _poll_worker(self) -> None:
        worker = self._worker
        if worker is None:
            return
        pending = worker.drain()
        for event in pending:
            self.wizard = apply_event(self.wizard, event)
        if pending or self.wizard.screen == Screen.COPYING:
            self._render_state()
        if worker.closed.is_set() and worker.events.empty():
            self._worker = None

    def _render_state(self) -> None:
        lines = self._log_bridge.lines() if self._log_bridge is not None else []
        self.query_one("#body", Static).update(render_screen(self.wizard, lines))


__all__ = ["FlatCopyApp", "normalize_key"]
