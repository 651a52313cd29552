"""
Lumen CLI entrypoint.

Executed via:
  python -m lumen
"""

from lumen.cli.app import app

if __name__ == "__main__":
    app()
