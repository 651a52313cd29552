"""Main CLI application wiring for Lumen.

  lumen on
  lumen run on off undo
  lumen shell < steps.txt
  lumen tui

Nothing is persisted: every invocation starts with a fresh bulb and
an empty history.
"""

from pathlib import Path
from typing import Optional

import typer

from lumen.config import configure_logging, load_config
from lumen.core.errors import ConfigError

app = typer.Typer(add_completion=False, help="Lumen — undoable light switch")


@app.callback()
def main(
    ctx: typer.Context,
    config: Optional[Path] = typer.Option(
        None, "--config", help="Path to a lumen.yml config file"
    ),
):
    """Lumen CLI."""
    try:
        cfg = load_config(config)
    except ConfigError as e:
        print(f"Error: {e}")
        raise typer.Exit(1)

    configure_logging(cfg)
    ctx.obj = cfg


# =============================================================================
# Commands
# =============================================================================

from lumen.cli import switch as switch_cmd
from lumen.cli import shell as shell_cmd

switch_cmd.register(app)
shell_cmd.register(app)


@app.command()
def tui(ctx: typer.Context):
    """Launch the Lumen TUI."""
    from lumen.tui.app import LumenApp

    LumenApp(ctx.obj).run()
