"""Undoable actions.

Actions are frozen dataclasses. Undo is given the state the bulb had
before execute() ran, so an action that changed nothing undoes to nothing.

Surfaces look actions up by word via parse_action(). New words can be
added with register().
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass

from lumen.core.errors import UnknownAction
from lumen.core.target import Bulb


class Action(ABC):
    def name(self) -> str:
        return type(self).__name__

    @abstractmethod
    def execute(self, target: Bulb) -> None: ...

    @abstractmethod
    def undo(self, target: Bulb, was_on: bool) -> None:
        """Put the bulb back to was_on, its state before execute() ran."""


@dataclass(frozen=True)
class TurnOn(Action):
    """Switch the bulb on; undo switches it off unless it was already on."""

    def execute(self, target: Bulb) -> None:
        target.apply_on()

    def undo(self, target: Bulb, was_on: bool) -> None:
        if not was_on:
            target.apply_off()


@dataclass(frozen=True)
class TurnOff(Action):
    """Switch the bulb off; undo switches it on unless it was already off."""

    def execute(self, target: Bulb) -> None:
        target.apply_off()

    def undo(self, target: Bulb, was_on: bool) -> None:
        if was_on:
            target.apply_on()


# =============================================================================
# Word registry
# =============================================================================

_REGISTRY: dict[str, Action] = {}


def register(word: str, action: Action) -> None:
    """Register an action under a lookup word."""
    _REGISTRY[word.strip().lower()] = action


def parse_action(word: str) -> Action:
    """Resolve a word ("on", "off", ...) to its action."""
    action = _REGISTRY.get(word.strip().lower())
    if action is None:
        raise UnknownAction(word)
    return action


def known_words() -> list[str]:
    return sorted(_REGISTRY)


register("on", TurnOn())
register("off", TurnOff())
