"""TUI tests: drive the switch panel with key presses."""

import asyncio

from lumen.config import LumenConfig
from lumen.tui.app import LumenApp


def test_keys_dispatch_and_undo():
    async def run():
        app = LumenApp(LumenConfig())
        async with app.run_test() as pilot:
            await pilot.pause()
            d = app.dispatcher
            assert d is not None
            assert d.target.is_on is False

            await pilot.press("o")
            await pilot.pause()
            assert d.target.is_on is True
            assert d.history.names() == ["TurnOn"]

            await pilot.press("f")
            await pilot.pause()
            assert d.target.is_on is False
            assert d.history.names() == ["TurnOn", "TurnOff"]

            await pilot.press("u")
            await pilot.pause()
            assert d.target.is_on is True
            assert d.history.names() == ["TurnOn"]

            await pilot.press("ctrl+z")
            await pilot.pause()
            assert d.target.is_on is False
            assert d.history.names() == []

    asyncio.run(run())


def test_undo_on_empty_history_keeps_running():
    async def run():
        app = LumenApp(LumenConfig(initially_on=True))
        async with app.run_test() as pilot:
            await pilot.pause()
            await pilot.press("u")
            await pilot.pause()
            assert app.is_running
            assert app.dispatcher.target.is_on is True
            assert len(app.dispatcher.history) == 0

    asyncio.run(run())


def test_capacity_from_config():
    async def run():
        app = LumenApp(LumenConfig(history_capacity=2))
        async with app.run_test() as pilot:
            await pilot.pause()
            for key in ("o", "f", "o"):
                await pilot.press(key)
            await pilot.pause()
            assert app.dispatcher.history.names() == ["TurnOff", "TurnOn"]

    asyncio.run(run())


def test_undo_restores_state_before_redundant_action():
    async def run():
        app = LumenApp(LumenConfig(initially_on=True))
        async with app.run_test() as pilot:
            await pilot.pause()
            await pilot.press("o")
            await pilot.pause()
            assert app.dispatcher.history.peek().was_on is True

            await pilot.press("u")
            await pilot.pause()
            assert app.dispatcher.target.is_on is True

    asyncio.run(run())
