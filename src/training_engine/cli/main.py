"""
CLI entry point using Typer.

Provides commands for the training parameter engine:
- synthesize: Build the enhanced profile from an onboarding file
- context: Show the full program-generator context
- ratios: Strength-ratio weak point analysis
- landmarks: Individualized MEV / MAV / MRV
- injuries: Injury note parsing
- progression: Week-by-week periodization targets
- load: Adaptive load recommendation
- deload: Deload decision
- fatigue: Cumulative fatigue over sessions
"""

import logging
from typing import Annotated

import typer
from rich.logging import RichHandler

from . import views
from .app import app

# Import command modules so their @app.command() decorators register
from .commands import analysis, planning, profile  # noqa: F401


@app.callback()
def main(
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Log engine decisions to stderr"),
    ] = False,
) -> None:
    """
    Evidence-informed training parameters for program generation.
    """
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=views.err_console, show_path=False)],
        force=True,
    )


if __name__ == "__main__":
    app()
