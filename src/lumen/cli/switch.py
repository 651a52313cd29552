"""Switch commands: lumen on|off|undo|run"""

from typing import List

import typer

from lumen.core.errors import LumenError, UnknownAction
from lumen.session import describe, new_dispatcher, run_step, step_words, validate_step


def _run_one(ctx: typer.Context, step: str) -> None:
    dispatcher = new_dispatcher(ctx.obj)
    try:
        print(run_step(dispatcher, step))
    except LumenError as e:
        print(f"Error: {e}")
        raise typer.Exit(1)


def register(app: typer.Typer):
    @app.command()
    def on(ctx: typer.Context):
        """Turn the bulb on."""
        _run_one(ctx, "on")

    @app.command()
    def off(ctx: typer.Context):
        """Turn the bulb off."""
        _run_one(ctx, "off")

    @app.command()
    def undo(ctx: typer.Context):
        """Undo the last action (fails: history starts empty)."""
        _run_one(ctx, "undo")

    @app.command()
    def run(
        ctx: typer.Context,
        steps: List[str] = typer.Argument(
            ..., help="Steps to run in order: on, off, undo, dispatch"
        ),
    ):
        """Run a sequence of steps against one bulb and print the result."""
        for step in steps:
            try:
                validate_step(step)
            except UnknownAction as e:
                print(f"Error: {e}")
                print(f"Valid steps: {', '.join(step_words())}")
                raise typer.Exit(2)

        dispatcher = new_dispatcher(ctx.obj)
        for idx, step in enumerate(steps, 1):
            try:
                print(run_step(dispatcher, step))
            except LumenError as e:
                print(f"Error at step {idx} ({step}): {e}")
                print(describe(dispatcher))
                raise typer.Exit(1)

        print(describe(dispatcher))
