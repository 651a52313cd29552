"""Dispatcher: runs actions against a bulb and keeps undo history.

Phases are just "idle" (no current action) and "has pending action".
Each history mutation runs together with its bulb effect under one
reentrant lock, so bulb listeners may call back into the dispatcher.
"""

from __future__ import annotations

import logging
import threading
from typing import Optional

from lumen.core.actions import Action
from lumen.core.errors import EmptyHistory, NoActionSelected
from lumen.core.history import DEFAULT_CAPACITY, BoundedHistory, HistoryEntry
from lumen.core.target import Bulb

log = logging.getLogger(__name__)


class Dispatcher:
    def __init__(
        self,
        target: Optional[Bulb] = None,
        capacity: int = DEFAULT_CAPACITY,
    ) -> None:
        self.target = target if target is not None else Bulb()
        self.history = BoundedHistory(capacity)
        self.current_action: Optional[Action] = None
        self._lock = threading.RLock()

    @property
    def has_pending_action(self) -> bool:
        return self.current_action is not None

    def set_action(self, action: Action) -> None:
        """Select the action for the next dispatch(). Does not touch the bulb."""
        self.current_action = action

    def dispatch(self) -> Action:
        """Execute the current action and record it with the prior bulb state."""
        with self._lock:
            action = self.current_action
            if action is None:
                raise NoActionSelected()

            was_on = self.target.is_on
            try:
                action.execute(self.target)
            except Exception:
                self._restore(was_on)
                raise
            evicted = self.history.push(HistoryEntry(action, was_on))

        if evicted is not None:
            log.debug("history full, evicted %s", evicted.name())
        log.debug("dispatched %s", action.name())
        return action

    def perform(self, action: Action) -> Action:
        """set_action() followed by dispatch()."""
        self.set_action(action)
        return self.dispatch()

    def undo_last(self) -> Action:
        """Restore the bulb to its state before the most recent dispatch."""
        with self._lock:
            try:
                entry = self.history.pop()
            except EmptyHistory:
                log.debug("undo requested with empty history")
                raise

            try:
                entry.action.undo(self.target, entry.was_on)
            except Exception:
                # Keep the entry so the undo can be retried
                self.history.push(entry)
                raise

        log.debug("undid %s", entry.name())
        return entry.action

    def _restore(self, was_on: bool) -> None:
        if self.target.is_on == was_on:
            return
        if was_on:
            self.target.apply_on()
        else:
            self.target.apply_off()
