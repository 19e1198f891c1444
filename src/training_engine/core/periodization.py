"""
Periodization planning for the training parameter engine.

Provides fixed periodization models (see config.PERIODIZATION_MODELS),
deterministic week-by-week progressions within a phase, deload sizing
after a phase, and rough 1RM projections per adaptation.
"""

import logging
from collections.abc import Sequence

from .config import (
    ACTIVE_DELOAD_DAYS,
    ACTIVE_DELOAD_TIERS,
    ACTIVE_DELOAD_TOP,
    ADAPTATION_GAINS,
    LINEAR_VOLUME_DROP,
    PASSIVE_DELOAD_DAYS,
    PASSIVE_DELOAD_FATIGUE_RATIO,
    PASSIVE_DELOAD_RECOVERY_RATE,
    PEAKING_DELOAD_BONUS,
    PERIODIZATION_MODELS,
    RAMPING_VOLUME_SPAN,
    RAMPING_VOLUME_START,
)
from .models import (
    DetailedDeloadProtocol,
    PeriodizationPhase,
    RecoveryProfile,
    WeeklyProgression,
)
from .numeric import round_half_up, round_to_decimals, safe_divide

logger = logging.getLogger(__name__)


def _week_fraction(week: int, duration_weeks: int) -> float:
    """Position of a week within a phase: 0.0 at week 1, 1.0 at the last week."""
    return (week - 1) / ((duration_weeks - 1) or 1)


def _target_volume(phase: PeriodizationPhase, week: int, base_volume_sets: float) -> float:
    """
    Weekly set target before rounding.

    - stable:  base every week
    - ramping: 80% + 30% * week/n of base (90% -> 110% over three weeks)
    - linear:  tapers from base to 90% of base as intensity climbs
    """
    if phase.volume_progression == "stable":
        return base_volume_sets
    if phase.volume_progression == "ramping":
        return base_volume_sets * (
            RAMPING_VOLUME_START + RAMPING_VOLUME_SPAN * (week / phase.duration_weeks)
        )
    return base_volume_sets * (1 - LINEAR_VOLUME_DROP * _week_fraction(week, phase.duration_weeks))


def generate_phase_progression(
    phase: PeriodizationPhase,
    base_volume_sets: float,
) -> list[WeeklyProgression]:
    """
    Week-by-week targets for one phase.

    Intensity interpolates linearly from intensity_range[0] in week 1 to
    intensity_range[1] in the final week; a one-week phase stays at the
    start value.

    Args:
        phase: Phase to expand
        base_volume_sets: Baseline weekly sets (typically the MAV)

    Returns:
        One WeeklyProgression per week of the phase
    """
    start_intensity, end_intensity = phase.intensity_range
    progression: list[WeeklyProgression] = []

    for week in range(1, phase.duration_weeks + 1):
        intensity = round_to_decimals(
            start_intensity
            + (end_intensity - start_intensity) * _week_fraction(week, phase.duration_weeks),
            1,
        )
        progression.append(
            WeeklyProgression(
                week_in_phase=week,
                target_volume_sets=round_half_up(_target_volume(phase, week, base_volume_sets)),
                target_intensity_percent=intensity,
                focus=f"Focus on {phase.primary_adaptation} at {intensity:g}% intensity.",
            )
        )

    return progression


def _active_deload_reductions(recovery_rate: float) -> tuple[int, int]:
    """(volume %, intensity %) for an active deload; poorer recovery cuts deeper."""
    for bound, reductions in ACTIVE_DELOAD_TIERS:
        if recovery_rate < bound:
            return reductions
    return ACTIVE_DELOAD_TOP


def calculate_optimal_deload(
    cumulative_fatigue: float,
    recovery_profile: RecoveryProfile,
    last_phase: PeriodizationPhase,
) -> DetailedDeloadProtocol:
    """
    Size the deload that follows a phase.

    Passive (complete rest) when fatigue exceeds 120% of threshold or the
    recovery rate is below 0.8; otherwise an active week whose reductions
    grow for poorer recovery and after a peaking phase.

    Args:
        cumulative_fatigue: Current fatigue score
        recovery_profile: Individual recovery profile
        last_phase: The phase just completed

    Returns:
        DetailedDeloadProtocol
    """
    fatigue_ratio = safe_divide(cumulative_fatigue, recovery_profile.fatigue_threshold)

    if (
        fatigue_ratio > PASSIVE_DELOAD_FATIGUE_RATIO
        or recovery_profile.recovery_rate < PASSIVE_DELOAD_RECOVERY_RATE
    ):
        return DetailedDeloadProtocol(
            type="passive",
            duration_days=PASSIVE_DELOAD_DAYS,
            volume_reduction_percent=100,
            intensity_reduction_percent=100,
            specialization_focus="Complete rest and recovery.",
        )

    volume_reduction, intensity_reduction = _active_deload_reductions(
        recovery_profile.recovery_rate
    )

    if last_phase.primary_adaptation == "peaking":
        # Peaking leaves residual neural fatigue
        volume_reduction = min(100, volume_reduction + PEAKING_DELOAD_BONUS)
        intensity_reduction = min(100, intensity_reduction + PEAKING_DELOAD_BONUS)

    return DetailedDeloadProtocol(
        type="active",
        duration_days=ACTIVE_DELOAD_DAYS,
        volume_reduction_percent=volume_reduction,
        intensity_reduction_percent=intensity_reduction,
        specialization_focus="Technique refinement with light loads.",
    )


def project_adaptation(current_1rm: float, phase: PeriodizationPhase) -> float:
    """
    Rough 1RM after completing a phase.

    Hypertrophy +1%, strength +2.5%, peaking +3%, recovery unchanged.
    Rounded to 1 decimal.
    """
    gain = ADAPTATION_GAINS.get(phase.primary_adaptation, 1.0)
    return round_to_decimals(current_1rm * gain, 1)


def project_model_adaptation(current_1rm: float, phases: Sequence[PeriodizationPhase]) -> float:
    """Chain project_adaptation() across consecutive phases."""
    projected = current_1rm
    for phase in phases:
        projected = project_adaptation(projected, phase)
    return projected


def model_duration_weeks(phases: Sequence[PeriodizationPhase]) -> int:
    """Total weeks of a model, deloads excluded."""
    return sum(phase.duration_weeks for phase in phases)


def select_periodization_model(
    experience_level: str | None,
    primary_goal: str | None,
) -> str:
    """
    Pick a catalog model name from the goal and experience.

    Strength / powerlifting goals -> strength_focused; muscle gain /
    hypertrophy -> hypertrophy_focused; general fitness or beginners ->
    general_fitness; anything else -> hypertrophy_focused.
    """
    goal = (primary_goal or "").lower()
    experience = (experience_level or "beginner").strip().lower()

    if "strength" in goal or "powerlifting" in goal:
        name = "strength_focused"
    elif "muscle" in goal or "hypertrophy" in goal:
        name = "hypertrophy_focused"
    elif "general fitness" in goal or experience == "beginner":
        name = "general_fitness"
    else:
        name = "hypertrophy_focused"

    logger.debug("Selected periodization model %s (goal=%r, experience=%r)", name, goal, experience)
    return name


def get_model(name: str) -> tuple[PeriodizationPhase, ...] | None:
    """Phases of a catalog model, or None for an unknown name."""
    return PERIODIZATION_MODELS.get(name)
