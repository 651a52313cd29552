"""Core: bulb, actions, bounded history and the dispatcher."""

from lumen.core.actions import Action, TurnOff, TurnOn, parse_action
from lumen.core.dispatcher import Dispatcher
from lumen.core.errors import (
    ConfigError,
    EmptyHistory,
    LumenError,
    NoActionSelected,
    UnknownAction,
)
from lumen.core.history import DEFAULT_CAPACITY, BoundedHistory, HistoryEntry
from lumen.core.target import Bulb

__all__ = [
    "Action",
    "BoundedHistory",
    "Bulb",
    "ConfigError",
    "DEFAULT_CAPACITY",
    "Dispatcher",
    "EmptyHistory",
    "HistoryEntry",
    "LumenError",
    "NoActionSelected",
    "TurnOff",
    "TurnOn",
    "UnknownAction",
    "parse_action",
]
