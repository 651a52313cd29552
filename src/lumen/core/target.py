"""The switchable device that actions operate on."""

from __future__ import annotations

import logging
from typing import Callable, List

log = logging.getLogger(__name__)

Listener = Callable[[bool], None]


class Bulb:
    """Binary on/off device.

    State changes only through apply_on() / apply_off(). Every change is
    logged and pushed to subscribed listeners. A listener that raises is
    logged and does not stop delivery to the others.
    """

    def __init__(self, is_on: bool = False) -> None:
        self.is_on = is_on
        self._listeners: List[Listener] = []

    def apply_on(self) -> None:
        self._set(True)

    def apply_off(self) -> None:
        self._set(False)

    def subscribe(self, listener: Listener) -> None:
        self._listeners.append(listener)

    def unsubscribe(self, listener: Listener) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    @property
    def state_label(self) -> str:
        return "ON" if self.is_on else "OFF"

    def _set(self, value: bool) -> None:
        self.is_on = value
        log.info("bulb is now %s", self.state_label)
        for listener in list(self._listeners):
            try:
                listener(value)
            except Exception:
                log.exception("bulb listener %r failed", listener)

    def __repr__(self) -> str:
        return f"Bulb(is_on={self.is_on})"
