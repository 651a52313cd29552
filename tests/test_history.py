"""Tests for the bounded undo history."""

import pytest

from lumen.core.actions import TurnOff, TurnOn
from lumen.core.errors import EmptyHistory
from lumen.core.history import DEFAULT_CAPACITY, BoundedHistory, HistoryEntry


def _on(was_on=False):
    return HistoryEntry(TurnOn(), was_on)


def _off(was_on=True):
    return HistoryEntry(TurnOff(), was_on)


def test_default_capacity_is_ten():
    assert DEFAULT_CAPACITY == 10
    assert BoundedHistory().capacity == 10


def test_invalid_capacity():
    with pytest.raises(ValueError):
        BoundedHistory(0)


def test_push_and_pop_are_lifo():
    history = BoundedHistory()
    history.push(_on())
    history.push(_off())
    assert history.names() == ["TurnOn", "TurnOff"]
    assert history.peek() == _off()
    assert history.pop() == _off()
    assert history.pop() == _on()
    assert len(history) == 0
    assert history.peek() is None


def test_entry_keeps_prior_state():
    history = BoundedHistory()
    history.push(_on(was_on=True))
    entry = history.pop()
    assert entry.action == TurnOn()
    assert entry.was_on is True
    assert entry.name() == "TurnOn"


def test_pop_empty_raises():
    with pytest.raises(EmptyHistory):
        BoundedHistory().pop()


def test_evicts_oldest_when_full():
    history = BoundedHistory(capacity=3)
    assert history.push(_on()) is None
    assert history.push(_off()) is None
    assert history.push(_off(was_on=False)) is None

    evicted = history.push(_on(was_on=True))
    assert evicted == _on()
    assert len(history) == 3
    assert history.names() == ["TurnOff", "TurnOff", "TurnOn"]
    assert [e.was_on for e in history] == [True, False, True]
