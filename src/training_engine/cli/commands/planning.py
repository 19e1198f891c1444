"""Planning commands: progression, load, deload, fatigue."""

from typing import Annotated, Optional

import typer

from ...core.autoregulation import (
    analyze_rpe_trend,
    calculate_adaptive_load,
    determine_deload_need,
    track_cumulative_fatigue,
)
from ...core.config import DEFAULT_FATIGUE_THRESHOLD, DEFAULT_SLEEP_QUALITY, PERIODIZATION_MODELS
from ...core.models import RecoveryProfile, SessionFeedback
from ...core.periodization import (
    generate_phase_progression,
    get_model,
    model_duration_weeks,
    project_model_adaptation,
)
from ...io.serializers import to_jsonable
from .. import views
from ..app import JsonOption, app


def _recovery_profile(recovery_rate: float, fatigue_threshold: float) -> RecoveryProfile:
    return RecoveryProfile(
        fatigue_threshold=fatigue_threshold,
        recovery_rate=recovery_rate,
        sleep_quality=DEFAULT_SLEEP_QUALITY,
    )


@app.command()
def progression(
    model: Annotated[
        str,
        typer.Argument(help=f"Model name: {', '.join(PERIODIZATION_MODELS)}"),
    ],
    base_sets: Annotated[
        float, typer.Option("--base-sets", "-b", help="Baseline weekly sets (e.g. the MAV)")
    ] = 16,
    current_1rm: Annotated[
        Optional[float],
        typer.Option("--current-1rm", help="Current 1RM for an end-of-model projection"),
    ] = None,
    json_out: JsonOption = False,
) -> None:
    """
    Show week-by-week volume and intensity targets for a periodization model.
    """
    phases = get_model(model)
    if phases is None:
        views.print_error(f"Unknown model: {model!r}")
        views.print_info(f"Available: {', '.join(PERIODIZATION_MODELS)}")
        raise typer.Exit(1)

    weeks_by_phase = {phase.name: generate_phase_progression(phase, base_sets) for phase in phases}
    projected = project_model_adaptation(current_1rm, phases) if current_1rm is not None else None

    if json_out:
        views.print_json({
            "model": model,
            "total_weeks": model_duration_weeks(phases),
            "phases": to_jsonable(weeks_by_phase),
            "projected_1rm": projected,
        })
        return

    for phase_name, weeks in weeks_by_phase.items():
        views.console.print(views.format_progression_table(phase_name, weeks))
    views.print_info(f"Total: {model_duration_weeks(phases)} weeks (deloads excluded)")
    if projected is not None:
        views.print_info(f"Projected 1RM: {current_1rm:g} -> {projected:g}")


@app.command()
def load(
    base_weight: Annotated[float, typer.Argument(help="Planned weight")],
    week: Annotated[int, typer.Option("--week", "-w", help="Week in mesocycle, 1-based")],
    rpe: Annotated[float, typer.Option("--rpe", help="RPE of the last session, 0-10")],
    recovery_rate: Annotated[
        float, typer.Option("--recovery-rate", help="Recovery rate (1.0 = average)")
    ] = 1.0,
    unit: Annotated[str, typer.Option("--unit", "-u", help="kg or lbs")] = "kg",
    json_out: JsonOption = False,
) -> None:
    """
    Adjust a planned load for mesocycle fatigue and last-session RPE.
    """
    recommendation = calculate_adaptive_load(
        base_weight,
        week,
        _recovery_profile(recovery_rate, DEFAULT_FATIGUE_THRESHOLD),
        SessionFeedback(last_session_rpe=rpe),
        unit=unit,
    )

    if json_out:
        views.print_json(to_jsonable(recommendation))
        return

    views.console.print(views.format_load_recommendation(recommendation, unit))


@app.command()
def deload(
    fatigue: Annotated[float, typer.Option("--fatigue", "-f", help="Cumulative fatigue")],
    threshold: Annotated[
        float, typer.Option("--threshold", "-t", help="Fatigue threshold")
    ] = DEFAULT_FATIGUE_THRESHOLD,
    trend: Annotated[
        Optional[str],
        typer.Option("--trend", help="RPE trend: increasing, decreasing or stable"),
    ] = None,
    rpe_history: Annotated[
        Optional[str],
        typer.Option("--rpe-history", help="Comma-separated RPEs, oldest first (e.g. 7,8,8.5)"),
    ] = None,
    json_out: JsonOption = False,
) -> None:
    """
    Decide whether a deload is due from fatigue and the RPE trend.
    """
    if trend is not None and rpe_history is not None:
        views.print_error("Use either --trend or --rpe-history, not both")
        raise typer.Exit(1)

    if rpe_history is not None:
        try:
            history = [float(x) for x in rpe_history.split(",") if x.strip()]
        except ValueError:
            views.print_error(f"Invalid RPE history: {rpe_history!r}")
            raise typer.Exit(1)
        rpe_trend = analyze_rpe_trend(history)
    else:
        rpe_trend = trend or "stable"
        if rpe_trend not in ("increasing", "decreasing", "stable"):
            views.print_error(f"Invalid trend: {rpe_trend!r}")
            raise typer.Exit(1)

    recommendation = determine_deload_need(fatigue, threshold, rpe_trend)  # type: ignore[arg-type]

    if json_out:
        views.print_json(to_jsonable(recommendation))
        return

    views.console.print(views.format_deload(recommendation))


@app.command()
def fatigue(
    sessions: Annotated[
        str, typer.Argument(help="Comma-separated session fatigue scores, oldest first")
    ],
    recovery_rate: Annotated[
        float, typer.Option("--recovery-rate", help="Recovery rate (1.0 = average)")
    ] = 1.0,
    start: Annotated[float, typer.Option("--start", help="Fatigue carried in")] = 0.0,
) -> None:
    """
    Accumulate fatigue over a series of sessions.
    """
    try:
        scores = [float(x) for x in sessions.split(",") if x.strip()]
    except ValueError:
        views.print_error(f"Invalid session scores: {sessions!r}")
        raise typer.Exit(1)

    total = start
    for score in scores:
        total = track_cumulative_fatigue(total, score, recovery_rate)
        views.console.print(f"+{score:g} -> {total:.2f}")
