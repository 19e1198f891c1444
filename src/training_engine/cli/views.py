"""
CLI view formatters using Rich for pretty console output.

Handles table formatting and display of engine results.
"""

import json
import math
from typing import Any

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from ..core.models import (
    DeloadRecommendation,
    EnhancedUserProfile,
    InjuryParseResult,
    LoadRecommendation,
    VolumeLandmarks,
    WeakPointAnalysisResult,
    WeeklyProgression,
)

console = Console()
err_console = Console(stderr=True)


def _fmt_number(value: float) -> str:
    """Compact number cell; nan / inf shown as-is."""
    if isinstance(value, float) and not math.isfinite(value):
        return str(value)
    return f"{value:g}"


def format_landmarks_table(landmarks: dict[str, VolumeLandmarks]) -> Table:
    """
    Create a Rich table of weekly set landmarks.

    Args:
        landmarks: Muscle group -> VolumeLandmarks

    Returns:
        Rich Table object
    """
    table = Table(title="Volume Landmarks (sets/week)")

    table.add_column("Muscle group", style="cyan")
    table.add_column("MEV", justify="right")
    table.add_column("MAV", justify="right", style="bold")
    table.add_column("MRV", justify="right")

    for group, lm in landmarks.items():
        table.add_row(group, _fmt_number(lm.mev), _fmt_number(lm.mav), _fmt_number(lm.mrv))

    return table


def format_enhanced_profile(enhanced: EnhancedUserProfile) -> str:
    """
    Format the inferred parameters and defaults as a text block.

    Args:
        enhanced: Synthesized profile

    Returns:
        Formatted string
    """
    vp = enhanced.volume_parameters
    rp = enhanced.recovery_profile
    history = enhanced.training_history
    weak_points = enhanced.weak_point_analysis.weak_points

    lines = [
        "Enhanced profile",
        f"- Training age: {vp.training_age:g} years ({history.total_training_time:g} months)",
        f"- Recovery capacity: {vp.recovery_capacity}/10",
        f"- Stress level: {vp.stress_level}/10",
        f"- Volume tolerance: {vp.volume_tolerance:g}",
        f"- Fatigue threshold: {rp.fatigue_threshold:g}, recovery rate {rp.recovery_rate:g}",
        f"- Reported limitations: {', '.join(weak_points) if weak_points else 'none'}",
        f"- Periodization: {enhanced.periodization_model.type}, "
        f"{len(enhanced.periodization_model.phases)} phases",
    ]
    return "\n".join(lines)


def format_weak_points(result: WeakPointAnalysisResult) -> str:
    """Format a strength-ratio analysis as a text block."""
    lines = ["Strength ratio analysis"]
    if not result.issues:
        lines.append("- No imbalances below the minimum standards.")
    for issue in result.issues:
        lines.append(
            f"- {issue.ratio_name}: {_fmt_number(issue.your_ratio)} "
            f"(minimum {issue.standard_minimum:g}, {issue.severity} severity)"
        )
    if result.correction_exercises:
        lines.append(f"- Corrective work: {', '.join(result.correction_exercises)}")
    lines.append(f"- Reassess in {result.reassessment_period_weeks} weeks")
    return "\n".join(lines)


def format_injuries(result: InjuryParseResult) -> str:
    """Format injury parsing output as a text block."""
    if not result.identified_areas:
        return "No injured areas identified."
    lines = [f"Identified areas: {', '.join(result.identified_areas)}", "Avoid:"]
    lines.extend(f"- {movement}" for movement in result.contraindications)
    return "\n".join(lines)


def format_progression_table(title: str, weeks: list[WeeklyProgression]) -> Table:
    """
    Create a Rich table of week-by-week phase targets.

    Args:
        title: Table title (phase name)
        weeks: WeeklyProgression entries

    Returns:
        Rich Table object
    """
    table = Table(title=title)

    table.add_column("Week", justify="right", style="dim", width=4)
    table.add_column("Sets", justify="right", style="bold")
    table.add_column("%1RM", justify="right", style="magenta")
    table.add_column("Focus")

    for week in weeks:
        table.add_row(
            str(week.week_in_phase),
            _fmt_number(week.target_volume_sets),
            _fmt_number(week.target_intensity_percent),
            week.focus,
        )

    return table


def format_load_recommendation(rec: LoadRecommendation, unit: str = "kg") -> str:
    """Format a load recommendation with its reasoning."""
    lines = [
        f"Recommended weight: {_fmt_number(rec.recommended_weight)} {unit} "
        f"({rec.percentage_change:+.1f}%)"
    ]
    lines.extend(f"- {reason}" for reason in rec.reasoning)
    return "\n".join(lines)


def format_deload(rec: DeloadRecommendation) -> str:
    """Format a deload recommendation."""
    if not rec.is_needed:
        return f"No deload needed. {rec.reason}"
    return (
        f"Deload recommended: {rec.type} -{rec.reduction_percentage}% "
        f"for {rec.duration_days} days.\n{rec.reason}"
    )


def print_json(data: Any) -> None:
    """Print JSON to stdout (not through Rich, so it stays machine-readable)."""
    print(json.dumps(data, indent=2))


def print_error(message: str) -> None:
    """Print an error message; the text is escaped, not parsed as markup."""
    console.print(f"[red]Error: {escape(message)}[/red]")


def print_warning(message: str) -> None:
    """Print a warning message."""
    console.print(f"[yellow]Warning: {escape(message)}[/yellow]")


def print_info(message: str) -> None:
    """Print an info message."""
    console.print(f"[blue]{escape(message)}[/blue]")
