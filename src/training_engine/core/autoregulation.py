"""
Autoregulation rules: fatigue accumulation, RPE trends, adaptive loads
and deload triggers.

Each function is independent and pure.  Fatigue and RPE are combined
only by the caller, e.g. determine_deload_need(track_cumulative_fatigue(...),
threshold, analyze_rpe_trend(history)).
"""

import math
from collections.abc import Sequence

from .config import (
    DELOAD_DURATION_DAYS,
    FATIGUE_DECAY_RATE,
    INTENSITY_DELOAD_REDUCTION,
    LOAD_ROUNDING_INCREMENT,
    RPE_HIGH_LOAD_FACTOR,
    RPE_HIGH_THRESHOLD,
    RPE_LOW_LOAD_FACTOR,
    RPE_LOW_THRESHOLD,
    RPE_SCALE_MAX,
    RPE_SCALE_MIN,
    RPE_TREND_MIN_POINTS,
    RPE_TREND_THRESHOLD,
    VOLUME_DELOAD_REDUCTION,
    WEEKLY_FATIGUE_DISCOUNT,
)
from .models import (
    DeloadRecommendation,
    LoadRecommendation,
    RecoveryProfile,
    RPEProfile,
    RPETrend,
    SessionFeedback,
)
from .numeric import round_to_increment, safe_divide


def track_cumulative_fatigue(
    cumulative_fatigue: float,
    new_session_fatigue: float,
    recovery_rate: float,
) -> float:
    """
    Decay prior fatigue and add the latest session's fatigue.

        decayed = prior * (1 - 0.3 * (1 / recovery_rate))
        total   = decayed + new

    No floor is applied: a recovery rate below 0.3 makes the decay factor
    negative.

    Args:
        cumulative_fatigue: Fatigue carried in
        new_session_fatigue: Fatigue from the latest session
        recovery_rate: Individual recovery coefficient (1.0 = average)

    Returns:
        Updated cumulative fatigue
    """
    decay = FATIGUE_DECAY_RATE * safe_divide(1.0, recovery_rate)
    decayed = cumulative_fatigue * (1 - decay)
    return decayed + new_session_fatigue


def analyze_rpe_trend(rpe_history: Sequence[float]) -> RPETrend:
    """
    Classify an RPE series (oldest first) by its first-to-last change.

    Fewer than three points, or a change of at most one RPE point, is
    "stable".
    """
    if len(rpe_history) < RPE_TREND_MIN_POINTS:
        return "stable"

    first = rpe_history[0]
    last = rpe_history[-1]

    if last > first + RPE_TREND_THRESHOLD:
        return "increasing"
    if last < first - RPE_TREND_THRESHOLD:
        return "decreasing"
    return "stable"


def calculate_adaptive_load(
    base_weight: float,
    week_in_mesocycle: int,
    recovery_profile: RecoveryProfile,
    session_feedback: SessionFeedback,
    unit: str = "kg",
) -> LoadRecommendation:
    """
    Adjust a planned load for mesocycle fatigue and last-session RPE.

    Two multiplicative adjustments:
    1. Proactive: (week - 1) * 5% discount, scaled by 1 / recovery_rate.
    2. Reactive: RPE > 8.5 -> -5%, RPE < 7.5 -> +3%, otherwise unchanged.

    Args:
        base_weight: Planned weight
        week_in_mesocycle: Current week, 1-based
        recovery_profile: Individual recovery profile
        session_feedback: Feedback from the previous session
        unit: Weight unit used in the reasoning text

    Returns:
        LoadRecommendation rounded to the nearest 2.5 unit, with the
        adjustments listed in the order they were applied
    """
    adjusted = base_weight
    reasoning = [f"Base weight set to {base_weight:g}{unit}."]

    fatigue_rate = safe_divide(1.0, recovery_profile.recovery_rate)
    fatigue_reduction = (week_in_mesocycle - 1) * WEEKLY_FATIGUE_DISCOUNT * fatigue_rate
    if fatigue_reduction > 0:
        adjusted *= 1 - fatigue_reduction
        if math.isfinite(fatigue_reduction):
            reasoning.append(
                f"Applied a {fatigue_reduction * 100:.1f}% fatigue reduction "
                f"for week {week_in_mesocycle}."
            )
        else:
            reasoning.append(
                f"Applied an unbounded fatigue reduction for week {week_in_mesocycle} "
                f"(recovery rate {recovery_profile.recovery_rate:g})."
            )

    rpe = session_feedback.last_session_rpe
    if rpe > RPE_HIGH_THRESHOLD:
        adjusted *= RPE_HIGH_LOAD_FACTOR
        reasoning.append(f"Reduced load by 5% due to high RPE ({rpe:g}) in the last session.")
    elif rpe < RPE_LOW_THRESHOLD:
        adjusted *= RPE_LOW_LOAD_FACTOR
        reasoning.append(f"Increased load by 3% due to low RPE ({rpe:g}) in the last session.")
    else:
        reasoning.append(
            f"Maintained load as last session RPE ({rpe:g}) was within the target range."
        )

    percentage_change = safe_divide(adjusted - base_weight, base_weight) * 100

    return LoadRecommendation(
        recommended_weight=round_to_increment(adjusted, LOAD_ROUNDING_INCREMENT),
        percentage_change=percentage_change,
        reasoning=tuple(reasoning),
    )


def determine_deload_need(
    cumulative_fatigue: float,
    fatigue_threshold: float,
    rpe_trend: RPETrend = "stable",
) -> DeloadRecommendation:
    """
    Decide whether a deload is due.

    Deload triggers, in priority order:
    1. Cumulative fatigue strictly above threshold -> volume deload
    2. Increasing RPE trend -> intensity deload

    Args:
        cumulative_fatigue: Current fatigue score
        fatigue_threshold: Individual fatigue threshold
        rpe_trend: RPE trend of a primary lift

    Returns:
        DeloadRecommendation
    """
    if cumulative_fatigue > fatigue_threshold:
        return DeloadRecommendation(
            is_needed=True,
            reason=(
                f"Cumulative fatigue ({cumulative_fatigue:.0f}) has exceeded "
                f"your threshold of {fatigue_threshold:g}."
            ),
            type="volume",
            duration_days=DELOAD_DURATION_DAYS,
            reduction_percentage=VOLUME_DELOAD_REDUCTION,
        )

    if rpe_trend == "increasing":
        return DeloadRecommendation(
            is_needed=True,
            reason=(
                "RPE for a primary exercise has been consistently increasing, "
                "indicating a need for recovery."
            ),
            type="intensity",
            duration_days=DELOAD_DURATION_DAYS,
            reduction_percentage=INTENSITY_DELOAD_REDUCTION,
        )

    return DeloadRecommendation(
        is_needed=False,
        reason=(
            f"Fatigue level ({cumulative_fatigue:.0f}) is within tolerance "
            f"({fatigue_threshold:g})."
        ),
    )


def adjust_rpe_target(
    rpe_profile: RPEProfile,
    focus: str,
    readiness: str = "feeling_good",
) -> tuple[float, float] | None:
    """
    Shift a session RPE target range by the athlete's readiness.

    Args:
        rpe_profile: Profile holding targets and readiness rules
        focus: Session focus, e.g. "hypertrophy" or "strength"
        readiness: "ready_to_go", "feeling_good" or "sore_tired";
            anything else leaves the range unchanged

    Returns:
        Adjusted (low, high) range clamped to the 0-10 RPE scale, or
        None when the profile has no target for this focus
    """
    target = rpe_profile.session_rpe_targets.get(focus)
    if target is None:
        return None

    rules = rpe_profile.autoregulation_rules
    deltas = {
        "ready_to_go": rules.ready_to_go,
        "feeling_good": rules.feeling_good,
        "sore_tired": rules.sore_tired,
    }
    delta = deltas.get(readiness, 0)

    low, high = target
    return (
        min(RPE_SCALE_MAX, max(RPE_SCALE_MIN, low + delta)),
        min(RPE_SCALE_MAX, max(RPE_SCALE_MIN, high + delta)),
    )
