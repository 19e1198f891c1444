"""
Configuration constants for the training parameter engine.

All lookup tables and tiered thresholds are centralized here so the
branching in the engine modules stays table-driven and easy to tune.
Breakpoint tables are ordered tuples of ``(bound, value)`` pairs and are
resolved with :func:`tier_at_most` / :func:`tier_at_least`.
"""

from types import MappingProxyType
from typing import Final, Mapping, TypeVar

from .models import PeriodizationPhase, VolumeLandmarks

T = TypeVar("T")

# =============================================================================
# VOLUME LANDMARKS (sets per week)
# =============================================================================

MUSCLE_GROUP_BASE_VOLUMES: Final[Mapping[str, VolumeLandmarks]] = MappingProxyType({
    "chest": VolumeLandmarks(mev=8, mav=18, mrv=26),
    "back": VolumeLandmarks(mev=10, mav=20, mrv=30),
    "shoulders": VolumeLandmarks(mev=8, mav=16, mrv=24),
    "arms": VolumeLandmarks(mev=6, mav=14, mrv=22),
    "quads": VolumeLandmarks(mev=8, mav=16, mrv=24),
    "hamstrings": VolumeLandmarks(mev=6, mav=12, mrv=18),
    "glutes": VolumeLandmarks(mev=6, mav=12, mrv=18),
    "calves": VolumeLandmarks(mev=8, mav=16, mrv=25),
    "abs": VolumeLandmarks(mev=0, mav=16, mrv=25),
})

TRAINING_AGE_CAP_YEARS: Final[float] = 2.0  # No extra volume beyond 2 years
TRAINING_AGE_MAX_BONUS: Final[float] = 0.8  # Multiplier reaches 1.8 at the cap

# (capacity <= bound) -> multiplier
RECOVERY_CAPACITY_TIERS: Final[tuple[tuple[float, float], ...]] = (
    (3, 0.7),  # Low
    (7, 1.0),  # Moderate
)
RECOVERY_CAPACITY_TOP: Final[float] = 1.3  # High

# (stress <= bound) -> multiplier
STRESS_LEVEL_TIERS: Final[tuple[tuple[float, float], ...]] = (
    (2, 1.1),  # Very low
    (4, 1.0),  # Low
    (6, 0.9),  # Moderate
    (8, 0.7),  # High
)
STRESS_LEVEL_TOP: Final[float] = 0.6  # Very high

# =============================================================================
# STRENGTH RATIOS AND WEAK POINTS
# =============================================================================

WEAK_HORIZONTAL_PRESS: Final[str] = "weak_horizontal_press"
WEAK_POSTERIOR_CHAIN: Final[str] = "weak_posterior_chain"
WEAK_VERTICAL_PRESS: Final[str] = "weak_vertical_press"

# name -> (numerator lift, denominator lift, minimum, optimal, category)
STRENGTH_RATIO_STANDARDS: Final[tuple[tuple[str, str, str, float, float, str], ...]] = (
    ("bench_to_deadlift", "bench_1rm", "deadlift_1rm", 0.60, 0.80, WEAK_HORIZONTAL_PRESS),
    ("squat_to_deadlift", "squat_1rm", "deadlift_1rm", 0.75, 0.90, WEAK_POSTERIOR_CHAIN),
    ("overhead_to_bench", "overhead_press_1rm", "bench_1rm", 0.60, 0.75, WEAK_VERTICAL_PRESS),
)

# (ratio < fraction * minimum) -> severity, checked in order
SEVERITY_BANDS: Final[tuple[tuple[float, str], ...]] = (
    (0.9, "High"),
    (1.0, "Moderate"),
)

WEAK_POINT_PROTOCOLS: Final[Mapping[str, tuple[str, ...]]] = MappingProxyType({
    WEAK_POSTERIOR_CHAIN: (
        "Romanian Deadlifts",
        "Good Mornings",
        "Glute-Ham Raises",
        "Hip Thrusts",
    ),
    WEAK_HORIZONTAL_PRESS: (
        "Dumbbell Bench Press",
        "Incline Barbell Press",
        "Weighted Dips",
        "Push-ups (Weighted or Variations)",
    ),
    WEAK_VERTICAL_PRESS: (
        "Seated Dumbbell Press",
        "Arnold Press",
        "Lateral Raises",
        "Close-Grip Bench Press",
    ),
})

REASSESSMENT_WEEKS_HIGH: Final[int] = 8
REASSESSMENT_WEEKS_MODERATE: Final[int] = 12
REASSESSMENT_WEEKS_DEFAULT: Final[int] = 16

# region -> (keyword pattern, contraindicated movements); matched with \b...\b
INJURY_REGIONS: Final[tuple[tuple[str, str, tuple[str, ...]], ...]] = (
    (
        "Knees",
        r"knees?|patella|patellar|acl|mcl|meniscus",
        ("High-impact plyometrics", "Deep squats if painful"),
    ),
    (
        "Lower Back",
        r"back|spine|spinal|discs?|lumbar|sciatica",
        ("Heavy deadlifts from floor", "Barbell back squats"),
    ),
    (
        "Shoulders",
        r"shoulders?|rotator cuff|labrum|impingement",
        ("Overhead pressing", "Behind-the-neck movements"),
    ),
    (
        "Hips",
        r"hips?|groin",
        ("Deep loaded hip flexion", "Wide-stance squats"),
    ),
    (
        "Elbows",
        r"elbows?|epicondylitis",
        ("Skull crushers", "Straight-bar curls"),
    ),
    (
        "Wrists",
        r"wrists?|carpal",
        ("Front rack positions", "Straight-bar pressing with extended wrists"),
    ),
    (
        "Ankles",
        r"ankles?|achilles",
        ("Box jumps and bounding", "Heavy standing calf raises"),
    ),
    (
        "Neck",
        r"neck|cervical",
        ("Behind-the-neck movements", "Heavy barbell shrugs"),
    ),
)

# =============================================================================
# AUTOREGULATION
# =============================================================================

FATIGUE_DECAY_RATE: Final[float] = 0.30  # Base fraction of fatigue shed per step
RPE_TREND_MIN_POINTS: Final[int] = 3
RPE_TREND_THRESHOLD: Final[float] = 1.0  # First-to-last change needed for a trend

WEEKLY_FATIGUE_DISCOUNT: Final[float] = 0.05  # Load discount per mesocycle week
RPE_HIGH_THRESHOLD: Final[float] = 8.5  # Above: reduce load
RPE_LOW_THRESHOLD: Final[float] = 7.5  # Below: increase load
RPE_HIGH_LOAD_FACTOR: Final[float] = 0.95
RPE_LOW_LOAD_FACTOR: Final[float] = 1.03
LOAD_ROUNDING_INCREMENT: Final[float] = 2.5

VOLUME_DELOAD_REDUCTION: Final[int] = 50
INTENSITY_DELOAD_REDUCTION: Final[int] = 20
DELOAD_DURATION_DAYS: Final[int] = 7

RPE_SCALE_MIN: Final[float] = 0.0
RPE_SCALE_MAX: Final[float] = 10.0

# =============================================================================
# PERIODIZATION
# =============================================================================

PERIODIZATION_MODELS: Final[Mapping[str, tuple[PeriodizationPhase, ...]]] = MappingProxyType({
    # Long accumulation, then intensification and a short realization block.
    "hypertrophy_focused": (
        PeriodizationPhase("Volume Accumulation", 3, (65.0, 80.0), "ramping", "hypertrophy"),
        PeriodizationPhase("Intensification", 2, (80.0, 90.0), "stable", "strength"),
        PeriodizationPhase("Realization", 1, (90.0, 95.0), "linear", "peaking"),
    ),
    # Base volume, a longer heavy block, then a true peak.
    "strength_focused": (
        PeriodizationPhase("Base Volume", 2, (70.0, 85.0), "stable", "hypertrophy"),
        PeriodizationPhase("Strength Intensification", 3, (85.0, 95.0), "ramping", "strength"),
        PeriodizationPhase("Peaking", 1, (95.0, 102.5), "linear", "peaking"),
    ),
    "general_fitness": (
        PeriodizationPhase("Linear Progression Block", 4, (75.0, 85.0), "linear", "strength"),
    ),
})

RAMPING_VOLUME_START: Final[float] = 0.8  # Fraction of base before week 1 ramp
RAMPING_VOLUME_SPAN: Final[float] = 0.3  # Ends at 110% of base
LINEAR_VOLUME_DROP: Final[float] = 0.1  # Ends at 90% of base

PASSIVE_DELOAD_FATIGUE_RATIO: Final[float] = 1.2
PASSIVE_DELOAD_RECOVERY_RATE: Final[float] = 0.8
PASSIVE_DELOAD_DAYS: Final[int] = 3
ACTIVE_DELOAD_DAYS: Final[int] = 7
PEAKING_DELOAD_BONUS: Final[int] = 10  # Extra reduction points after peaking

# (recovery_rate < bound) -> (volume reduction %, intensity reduction %)
ACTIVE_DELOAD_TIERS: Final[tuple[tuple[float, tuple[int, int]], ...]] = (
    (1.0, (60, 45)),  # Below-average recovery
    (1.2, (50, 40)),  # Average recovery
)
ACTIVE_DELOAD_TOP: Final[tuple[int, int]] = (40, 30)  # Good recovery

ADAPTATION_GAINS: Final[Mapping[str, float]] = MappingProxyType({
    "hypertrophy": 1.01,  # Size first, little strength expression
    "strength": 1.025,
    "peaking": 1.03,
    "recovery": 1.0,
})

# =============================================================================
# PROFILE INFERENCE
# =============================================================================

TRAINING_AGE_BY_EXPERIENCE: Final[Mapping[str, float]] = MappingProxyType({
    "beginner": 0.25,  # ~3 months
    "intermediate": 1.25,  # ~15 months
    "advanced": 3.0,  # ~36 months
})
DEFAULT_EXPERIENCE: Final[str] = "beginner"

# (days >= bound) -> recovery points
FREQUENCY_RECOVERY_POINTS: Final[tuple[tuple[float, int], ...]] = ((6, 3), (4, 2))
FREQUENCY_RECOVERY_FLOOR: Final[int] = 1

# normalized duration bucket -> recovery points
DURATION_RECOVERY_POINTS: Final[Mapping[str, int]] = MappingProxyType({
    "60-75": 3,
    "75+": 3,
    "45-60": 2,
})
DURATION_RECOVERY_FLOOR: Final[int] = 1

# (score >= bound) -> recovery capacity
RECOVERY_SCORE_TIERS: Final[tuple[tuple[float, int], ...]] = ((5, 9), (3, 6))
RECOVERY_SCORE_FLOOR: Final[int] = 3

# (days >= bound) -> stress level
FREQUENCY_STRESS_TIERS: Final[tuple[tuple[float, int], ...]] = ((6, 3), (4, 6))
FREQUENCY_STRESS_FLOOR: Final[int] = 8

DEFAULT_VOLUME_TOLERANCE: Final[float] = 1.0
MONTHS_PER_YEAR: Final[int] = 12

# =============================================================================
# FIXED PROFILE DEFAULTS
# =============================================================================

DEFAULT_FATIGUE_THRESHOLD: Final[float] = 7
DEFAULT_RECOVERY_RATE: Final[float] = 1.0
DEFAULT_SLEEP_QUALITY: Final[float] = 7
DEFAULT_RECOVERY_MODALITIES: Final[tuple[str, ...]] = ("Stretching", "Hydration")

SESSION_RPE_TARGETS: Final[Mapping[str, tuple[float, float]]] = MappingProxyType({
    "hypertrophy": (7.0, 9.0),
    "strength": (8.0, 10.0),
})

DEFAULT_OCCUPATION: Final[str] = "sedentary"
DEFAULT_SLEEP_HOURS: Final[float] = 7
DEFAULT_NUTRITION_ADHERENCE: Final[int] = 5

DELOAD_FREQUENCY_WEEKS: Final[int] = 4


def tier_at_most(value: float, tiers: tuple[tuple[float, T], ...], top: T) -> T:
    """
    Resolve an ascending ``value <= bound`` breakpoint table.

    Returns ``top`` when no bound matches (including NaN input).
    """
    for bound, result in tiers:
        if value <= bound:
            return result
    return top


def tier_at_least(value: float, tiers: tuple[tuple[float, T], ...], floor: T) -> T:
    """
    Resolve a descending ``value >= bound`` breakpoint table.

    Returns ``floor`` when no bound matches.
    """
    for bound, result in tiers:
        if value >= bound:
            return result
    return floor
