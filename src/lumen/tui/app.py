"""Lumen TUI: a single switch panel.

- o / f select and dispatch TurnOn / TurnOff
- u or ctrl+z undoes the last action
- The bulb pushes state changes to the panel through a listener
"""

from __future__ import annotations

import logging

from textual.app import App, ComposeResult
from textual.containers import Vertical
from textual.widgets import Footer, Header, Static

from lumen.config import LumenConfig
from lumen.core.actions import TurnOff, TurnOn
from lumen.core.dispatcher import Dispatcher
from lumen.session import new_dispatcher
from lumen.tui.decorators import safe_action

log = logging.getLogger(__name__)


class LumenApp(App):
    TITLE = "Lumen"
    CSS = """
    #bulb {
        height: 3;
        content-align: center middle;
        text-style: bold;
        border: round $accent;
    }
    #history {
        padding: 1 2;
    }
    """
    BINDINGS = [
        ("q", "quit", "Quit"),
        ("o", "turn_on", "On"),
        ("f", "turn_off", "Off"),
        ("u", "undo", "Undo"),
        ("ctrl+z", "undo", "Undo"),
    ]

    def __init__(self, cfg: LumenConfig | None = None, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.cfg = cfg or LumenConfig()
        self.dispatcher: Dispatcher | None = None

    def compose(self) -> ComposeResult:
        yield Header()
        yield Vertical(
            Static(id="bulb"),
            Static(id="history"),
            id="main",
        )
        yield Footer()

    def on_mount(self) -> None:
        self.dispatcher = new_dispatcher(self.cfg)
        self.dispatcher.target.subscribe(self._on_bulb_changed)
        self._render_panel()

    def on_unmount(self) -> None:
        if self.dispatcher is not None:
            self.dispatcher.target.unsubscribe(self._on_bulb_changed)

    # -------------------------------------------------------------------------
    # Actions
    # -------------------------------------------------------------------------

    @safe_action
    def action_turn_on(self) -> None:
        self.dispatcher.perform(TurnOn())
        self._render_panel()

    @safe_action
    def action_turn_off(self) -> None:
        self.dispatcher.perform(TurnOff())
        self._render_panel()

    @safe_action
    def action_undo(self) -> None:
        action = self.dispatcher.undo_last()
        self.notify(f"Undid {action.name()}")
        self._render_panel()

    # -------------------------------------------------------------------------
    # Rendering
    # -------------------------------------------------------------------------

    def _on_bulb_changed(self, is_on: bool) -> None:
        log.debug("bulb changed: %s", is_on)
        self._render_panel()

    def _render_panel(self) -> None:
        if self.dispatcher is None:
            return

        bulb = self.dispatcher.target
        self.query_one("#bulb", Static).update("💡 ON" if bulb.is_on else "○ OFF")

        history = self.dispatcher.history
        lines = [f"History ({len(history)}/{history.capacity})"]
        if len(history) == 0:
            lines.append("  (empty)")
        for idx, name in enumerate(history.names(), 1):
            lines.append(f"  {idx}. {name}")
        last = history.peek()
        if last is not None:
            lines.append(f"Undo will restore: {'ON' if last.was_on else 'OFF'}")
        self.query_one("#history", Static).update("\n".join(lines))
