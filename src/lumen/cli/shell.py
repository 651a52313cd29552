"""Line-oriented session: lumen shell

Reads one step per line from stdin. Blank lines and '#' comments are
skipped. Extra words: 'state', 'history', 'quit'.

Errors are reported and the loop continues; the exit code is 1 if any
step failed.
"""

from __future__ import annotations

import sys

import typer

from lumen.core.errors import LumenError, UnknownAction
from lumen.session import describe, new_dispatcher, run_step, step_words


def register(app: typer.Typer) -> None:
    @app.command()
    def shell(ctx: typer.Context) -> None:
        """Read steps from stdin and run them against one bulb."""
        dispatcher = new_dispatcher(ctx.obj)
        failed = 0

        for lineno, line in enumerate(sys.stdin, 1):
            word = line.split("#", 1)[0].strip().lower()
            if not word:
                continue
            if word in ("quit", "exit"):
                break
            if word == "state":
                print(f"Bulb: {dispatcher.target.state_label}")
                continue
            if word == "history":
                print(describe(dispatcher))
                continue

            try:
                print(run_step(dispatcher, word))
            except UnknownAction as e:
                failed += 1
                print(f"Error (line {lineno}): {e}; expected one of: {', '.join(step_words())}")
            except LumenError as e:
                failed += 1
                print(f"Error (line {lineno}): {e}")

        if failed:
            raise typer.Exit(1)
