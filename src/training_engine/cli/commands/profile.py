"""Profile commands: synthesize, context."""

import typer

from ...core.synthesis import build_program_context, synthesize
from ...io.serializers import (
    ValidationError,
    enhanced_profile_to_dict,
    load_user_profile,
    to_jsonable,
)
from .. import views
from ..app import JsonOption, ProfileArgument, app


@app.command(name="synthesize")
def synthesize_profile(
    profile_path: ProfileArgument,
    json_out: JsonOption = False,
) -> None:
    """
    Build the enhanced profile (parameters, landmarks, defaults) for one user.
    """
    try:
        profile = load_user_profile(profile_path)
    except (FileNotFoundError, ValidationError) as e:
        views.print_error(str(e))
        raise typer.Exit(1)

    enhanced = synthesize(profile)

    if json_out:
        views.print_json(enhanced_profile_to_dict(enhanced))
        return

    views.console.print(views.format_enhanced_profile(enhanced))
    views.console.print()
    views.console.print(views.format_landmarks_table(enhanced.volume_landmarks))


@app.command()
def context(
    profile_path: ProfileArgument,
    json_out: JsonOption = False,
) -> None:
    """
    Show everything handed to the program generator: profile, strength
    analysis, periodization model and autoregulation notes.
    """
    try:
        profile = load_user_profile(profile_path)
    except (FileNotFoundError, ValidationError) as e:
        views.print_error(str(e))
        raise typer.Exit(1)

    program_context = build_program_context(profile)

    if json_out:
        data = to_jsonable(program_context)
        data["enhanced_profile"] = enhanced_profile_to_dict(program_context.enhanced_profile)
        views.print_json(data)
        return

    views.console.print(views.format_enhanced_profile(program_context.enhanced_profile))
    views.console.print()

    if program_context.strength_analysis is not None:
        views.console.print(views.format_weak_points(program_context.strength_analysis))
    else:
        views.print_info("Strength analysis skipped: all four 1RM estimates are needed.")
    views.console.print()

    if program_context.contraindications:
        views.print_warning("Avoid: " + ", ".join(program_context.contraindications))

    views.print_info(f"Periodization model: {program_context.periodization_model}")
    for phase_name, weeks in program_context.phase_progressions.items():
        views.console.print(views.format_progression_table(phase_name, weeks))

    views.console.print()
    views.console.print(program_context.autoregulation_notes)
