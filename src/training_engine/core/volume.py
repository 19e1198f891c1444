"""
Individualized volume landmarks (MEV / MAV / MRV).

Base weekly set volumes per muscle group are scaled by a single product
of multipliers derived from VolumeParameters:

    landmark = round(base * age_mult * recovery_mult * stress_mult * tolerance)

The same product scales all three landmarks, so their ordering survives
whenever the product is non-negative.
"""

from .config import (
    MUSCLE_GROUP_BASE_VOLUMES,
    RECOVERY_CAPACITY_TIERS,
    RECOVERY_CAPACITY_TOP,
    STRESS_LEVEL_TIERS,
    STRESS_LEVEL_TOP,
    TRAINING_AGE_CAP_YEARS,
    TRAINING_AGE_MAX_BONUS,
    tier_at_most,
)
from .models import VolumeLandmarks, VolumeParameters
from .numeric import round_half_up


def training_age_multiplier(training_age: float) -> float:
    """
    Linear volume bonus for experience, capped at two years.

        mult = 1.0 + min(age, 2) / 2 * 0.8

    Args:
        training_age: Training experience in years

    Returns:
        1.0 for a novice up to 1.8 at two or more years
    """
    effective_age = min(training_age, TRAINING_AGE_CAP_YEARS)
    return 1.0 + (effective_age / TRAINING_AGE_CAP_YEARS) * TRAINING_AGE_MAX_BONUS


def recovery_capacity_multiplier(recovery_capacity: float) -> float:
    """Low (<=3) 0.7, moderate (4-7) 1.0, high (>=8) 1.3."""
    return tier_at_most(recovery_capacity, RECOVERY_CAPACITY_TIERS, RECOVERY_CAPACITY_TOP)


def stress_level_multiplier(stress_level: float) -> float:
    """Higher life stress leaves less room for training volume."""
    return tier_at_most(stress_level, STRESS_LEVEL_TIERS, STRESS_LEVEL_TOP)


def volume_multiplier(params: VolumeParameters) -> float:
    """Combined multiplier applied to every base landmark."""
    return (
        training_age_multiplier(params.training_age)
        * recovery_capacity_multiplier(params.recovery_capacity)
        * stress_level_multiplier(params.stress_level)
        * params.volume_tolerance
    )


def calculate_individual_volume_landmarks(
    params: VolumeParameters,
    muscle_group: str,
) -> VolumeLandmarks | None:
    """
    Individualized landmarks for one muscle group.

    Args:
        params: User's volume parameters
        muscle_group: Muscle group name, case-insensitive

    Returns:
        Adjusted VolumeLandmarks, or None for an unknown muscle group
    """
    base = MUSCLE_GROUP_BASE_VOLUMES.get(muscle_group.lower())
    if base is None:
        return None

    multiplier = volume_multiplier(params)

    return VolumeLandmarks(
        mev=round_half_up(base.mev * multiplier),
        mav=round_half_up(base.mav * multiplier),
        mrv=round_half_up(base.mrv * multiplier),
    )


def calculate_all_muscle_landmarks(params: VolumeParameters) -> dict[str, VolumeLandmarks]:
    """
    Individualized landmarks for all nine muscle groups.

    Args:
        params: User's volume parameters

    Returns:
        Dict of muscle group -> VolumeLandmarks, in base-table order
    """
    landmarks: dict[str, VolumeLandmarks] = {}
    for muscle_group in MUSCLE_GROUP_BASE_VOLUMES:
        adjusted = calculate_individual_volume_landmarks(params, muscle_group)
        if adjusted is not None:
            landmarks[muscle_group] = adjusted
    return landmarks
