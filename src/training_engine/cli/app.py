"""Shared Typer app object and shared option types."""

from pathlib import Path
from typing import Annotated

import typer

# Shared --json option type used across commands
JsonOption = Annotated[
    bool,
    typer.Option("--json", "-j", help="Output as JSON for machine processing"),
]

ProfileArgument = Annotated[
    Path,
    typer.Argument(help="Onboarding profile file (.yaml, .yml or .json)"),
]

app = typer.Typer(
    name="training-engine",
    help="Evidence-informed training parameters: volume landmarks, weak points, "
    "autoregulation and periodization.",
    no_args_is_help=True,
)
