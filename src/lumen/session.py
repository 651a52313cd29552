"""Step execution shared by the CLI and the TUI.

A step is one word: an action word ("on", "off"), "undo", or "dispatch"
(re-run the currently selected action).
"""

from __future__ import annotations

from lumen.config import LumenConfig
from lumen.core.actions import known_words, parse_action
from lumen.core.dispatcher import Dispatcher
from lumen.core.target import Bulb

CONTROL_STEPS = ("undo", "dispatch")


def new_dispatcher(cfg: LumenConfig) -> Dispatcher:
    return Dispatcher(Bulb(is_on=cfg.initially_on), capacity=cfg.history_capacity)


def step_words() -> list[str]:
    return known_words() + list(CONTROL_STEPS)


def validate_step(step: str) -> str:
    """Normalize a step word, raising UnknownAction for anything unrecognized."""
    word = step.strip().lower()
    if word not in CONTROL_STEPS:
        parse_action(word)
    return word


def run_step(dispatcher: Dispatcher, step: str) -> str:
    """Run one step and return a human-readable line describing it."""
    word = validate_step(step)

    if word == "undo":
        action = dispatcher.undo_last()
        return f"↶ Undid {action.name()} → bulb {dispatcher.target.state_label}"

    if word == "dispatch":
        action = dispatcher.dispatch()
    else:
        action = dispatcher.perform(parse_action(word))
    return f"✓ {action.name()} → bulb {dispatcher.target.state_label}"


def describe(dispatcher: Dispatcher) -> str:
    names = dispatcher.history.names()
    history = ", ".join(names) if names else "(empty)"
    return (
        f"Bulb: {dispatcher.target.state_label}\n"
        f"History ({len(names)}/{dispatcher.history.capacity}): {history}"
    )


__all__ = [
    "CONTROL_STEPS",
    "describe",
    "new_dispatcher",
    "run_step",
    "step_words",
    "validate_step",
]
