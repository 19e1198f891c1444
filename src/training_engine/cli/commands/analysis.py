"""Analysis commands: ratios, landmarks, injuries."""

from typing import Annotated, Optional

import typer

from ...core.models import StrengthProfile, VolumeParameters
from ...core.volume import calculate_all_muscle_landmarks, calculate_individual_volume_landmarks
from ...core.weak_points import analyze_strength_ratios, parse_injury_text
from ...io.serializers import to_jsonable
from .. import views
from ..app import JsonOption, app


@app.command()
def ratios(
    squat: Annotated[float, typer.Option("--squat", help="Squat 1RM")],
    bench: Annotated[float, typer.Option("--bench", help="Bench press 1RM")],
    deadlift: Annotated[float, typer.Option("--deadlift", help="Deadlift 1RM")],
    overhead: Annotated[float, typer.Option("--overhead", help="Overhead press 1RM")],
    json_out: JsonOption = False,
) -> None:
    """
    Compare strength ratios against standards and suggest corrective work.
    """
    result = analyze_strength_ratios(
        StrengthProfile(
            squat_1rm=squat,
            bench_1rm=bench,
            deadlift_1rm=deadlift,
            overhead_press_1rm=overhead,
        )
    )

    if json_out:
        views.print_json(to_jsonable(result))
        return

    views.console.print(views.format_weak_points(result))


@app.command()
def landmarks(
    training_age: Annotated[
        float, typer.Option("--training-age", "-a", help="Training age in years")
    ],
    recovery: Annotated[
        float, typer.Option("--recovery", "-r", help="Recovery capacity, 1-10")
    ],
    stress: Annotated[float, typer.Option("--stress", "-s", help="Life stress, 1-10")],
    tolerance: Annotated[
        float, typer.Option("--tolerance", "-t", help="Volume tolerance multiplier")
    ] = 1.0,
    muscle_group: Annotated[
        Optional[str],
        typer.Option("--muscle", "-m", help="Single muscle group (default: all)"),
    ] = None,
    json_out: JsonOption = False,
) -> None:
    """
    Show individualized MEV / MAV / MRV weekly set landmarks.
    """
    params = VolumeParameters(
        training_age=training_age,
        recovery_capacity=recovery,
        stress_level=stress,
        volume_tolerance=tolerance,
    )

    if muscle_group is not None:
        single = calculate_individual_volume_landmarks(params, muscle_group)
        if single is None:
            views.print_error(f"Unknown muscle group: {muscle_group!r}")
            raise typer.Exit(1)
        result = {muscle_group.lower(): single}
    else:
        result = calculate_all_muscle_landmarks(params)

    if json_out:
        views.print_json(to_jsonable(result))
        return

    views.console.print(views.format_landmarks_table(result))


@app.command()
def injuries(
    text: Annotated[str, typer.Argument(help="Free-text injury / limitation notes")],
    json_out: JsonOption = False,
) -> None:
    """
    Find injured body regions and the movements to avoid.
    """
    result = parse_injury_text(text)

    if json_out:
        views.print_json(to_jsonable(result))
        return

    views.console.print(views.format_injuries(result))
