"""
Profile synthesis: onboarding profile -> EnhancedUserProfile.

Translates qualitative onboarding answers into quantitative training
parameters and assembles them with fixed, evidence-based defaults.  The
result is the context handed to the program generator.

Pure composition: no I/O, no clock, no randomness.  The same UserProfile
always yields an equal EnhancedUserProfile.
"""

import logging
import re
from dataclasses import dataclass, field

from .config import (
    DEFAULT_EXPERIENCE,
    DEFAULT_FATIGUE_THRESHOLD,
    DEFAULT_NUTRITION_ADHERENCE,
    DEFAULT_OCCUPATION,
    DEFAULT_RECOVERY_MODALITIES,
    DEFAULT_RECOVERY_RATE,
    DEFAULT_SLEEP_HOURS,
    DEFAULT_SLEEP_QUALITY,
    DEFAULT_VOLUME_TOLERANCE,
    DELOAD_FREQUENCY_WEEKS,
    DURATION_RECOVERY_FLOOR,
    DURATION_RECOVERY_POINTS,
    FREQUENCY_RECOVERY_FLOOR,
    FREQUENCY_RECOVERY_POINTS,
    FREQUENCY_STRESS_FLOOR,
    FREQUENCY_STRESS_TIERS,
    MONTHS_PER_YEAR,
    PERIODIZATION_MODELS,
    RECOVERY_SCORE_FLOOR,
    RECOVERY_SCORE_TIERS,
    SESSION_RPE_TARGETS,
    TRAINING_AGE_BY_EXPERIENCE,
    VOLUME_DELOAD_REDUCTION,
    tier_at_least,
)
from .models import (
    AutoregulationRules,
    DeloadSchedule,
    EnhancedUserProfile,
    InjuryParseResult,
    LifestyleFactors,
    ModelPhase,
    PeriodizationModel,
    RecoveryProfile,
    RPEProfile,
    TrainingHistory,
    UserProfile,
    VolumeParameters,
    WeakPointAnalysisResult,
    WeakPointSummary,
    WeeklyProgression,
)
from .periodization import generate_phase_progression, select_periodization_model
from .volume import calculate_all_muscle_landmarks
from .weak_points import analyze_strength_ratios, parse_injury_text, strength_profile_from_user

logger = logging.getLogger(__name__)

_DURATION_UNITS = re.compile(r"\s*(minutes|minute|mins|min)\s*$")


# ---------------------------------------------------------------------------
# Parameter inference
# ---------------------------------------------------------------------------


def infer_training_age(experience_level: str | None) -> float:
    """
    Training age in years from the experience bucket.

    Missing or unrecognized levels count as beginner.
    """
    key = (experience_level or DEFAULT_EXPERIENCE).strip().lower()
    return TRAINING_AGE_BY_EXPERIENCE.get(key, TRAINING_AGE_BY_EXPERIENCE[DEFAULT_EXPERIENCE])


def _duration_bucket(session_duration: str | None) -> str:
    """Normalize "60–75 minutes" / "60-75 min" to "60-75"."""
    if not session_duration:
        return ""
    text = session_duration.strip().lower().replace("–", "-").replace(" ", "")
    return _DURATION_UNITS.sub("", text)


def infer_recovery_capacity(
    training_frequency_days: int | None,
    session_duration: str | None,
) -> int:
    """
    Recovery capacity (1-10) from training frequency and session length.

    Frequency points: >=6 days 3, >=4 days 2, otherwise 1.
    Duration points: 60-75 or 75+ min 3, 45-60 min 2, otherwise 1.
    Score >=5 -> 9 (high), >=3 -> 6 (moderate), else 3 (low).
    """
    frequency_points = tier_at_least(
        training_frequency_days or 0, FREQUENCY_RECOVERY_POINTS, FREQUENCY_RECOVERY_FLOOR
    )
    duration_points = DURATION_RECOVERY_POINTS.get(
        _duration_bucket(session_duration), DURATION_RECOVERY_FLOOR
    )
    return tier_at_least(
        frequency_points + duration_points, RECOVERY_SCORE_TIERS, RECOVERY_SCORE_FLOOR
    )


def infer_stress_level(training_frequency_days: int | None) -> int:
    """
    Life stress (1-10) from training frequency.

    A schedule that fits many sessions suggests a lifestyle with spare
    recovery resources: >=6 days 3, >=4 days 6, otherwise 8.
    """
    return tier_at_least(
        training_frequency_days or 0, FREQUENCY_STRESS_TIERS, FREQUENCY_STRESS_FLOOR
    )


def infer_volume_parameters(profile: UserProfile) -> VolumeParameters:
    """
    VolumeParameters from onboarding answers.

    Volume tolerance stays at the 1.0 baseline; no onboarding answer
    individualizes it yet.
    """
    return VolumeParameters(
        training_age=infer_training_age(profile.experience_level),
        recovery_capacity=infer_recovery_capacity(
            profile.training_frequency_days, profile.session_duration
        ),
        stress_level=infer_stress_level(profile.training_frequency_days),
        volume_tolerance=DEFAULT_VOLUME_TOLERANCE,
    )


def parse_injury_limitations(profile: UserProfile) -> InjuryParseResult:
    """Injury regions and contraindications from the profile's notes."""
    return parse_injury_text(profile.injuries_limitations)


# ---------------------------------------------------------------------------
# Fixed defaults
# ---------------------------------------------------------------------------


def default_recovery_profile() -> RecoveryProfile:
    return RecoveryProfile(
        fatigue_threshold=DEFAULT_FATIGUE_THRESHOLD,
        recovery_rate=DEFAULT_RECOVERY_RATE,
        sleep_quality=DEFAULT_SLEEP_QUALITY,
        recovery_modalities=DEFAULT_RECOVERY_MODALITIES,
    )


def default_rpe_profile() -> RPEProfile:
    return RPEProfile(
        session_rpe_targets=dict(SESSION_RPE_TARGETS),
        autoregulation_rules=AutoregulationRules(ready_to_go=1, feeling_good=0, sore_tired=-1),
    )


def default_periodization_model() -> PeriodizationModel:
    return PeriodizationModel(
        type="linear",
        phases=(
            ModelPhase(
                name="Hypertrophy Accumulation",
                duration_weeks=4,
                focus="hypertrophy",
                intensity_range=(60.0, 75.0),
                volume_multiplier=1.0,
            ),
            ModelPhase(
                name="Strength Intensification",
                duration_weeks=4,
                focus="strength",
                intensity_range=(75.0, 85.0),
                volume_multiplier=0.9,
            ),
        ),
        deload_protocol=DeloadSchedule(
            frequency_weeks=DELOAD_FREQUENCY_WEEKS,
            type="volume",
            reduction_percentage=VOLUME_DELOAD_REDUCTION,
        ),
    )


def default_lifestyle_factors() -> LifestyleFactors:
    return LifestyleFactors(
        occupation_type=DEFAULT_OCCUPATION,
        average_sleep_hours=DEFAULT_SLEEP_HOURS,
        stress_management=(),
        nutrition_adherence=DEFAULT_NUTRITION_ADHERENCE,
    )


def _peak_performances(profile: UserProfile) -> dict[str, float]:
    """1RM estimates the user supplied, keyed by lift."""
    estimates = {
        "squat": profile.squat_1rm_estimate,
        "bench_press": profile.bench_press_1rm_estimate,
        "deadlift": profile.deadlift_1rm_estimate,
        "overhead_press": profile.overhead_press_1rm_estimate,
    }
    return {lift: value for lift, value in estimates.items() if value is not None}


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def synthesize(profile: UserProfile) -> EnhancedUserProfile:
    """
    Build the complete enhanced profile for one user.

    Args:
        profile: Onboarding profile

    Returns:
        EnhancedUserProfile with inferred parameters, individualized
        landmarks for all nine muscle groups and the fixed defaults
    """
    volume_parameters = infer_volume_parameters(profile)
    injuries = parse_injury_limitations(profile)

    logger.debug(
        "Synthesizing profile: training_age=%s recovery=%s stress=%s injuries=%s",
        volume_parameters.training_age,
        volume_parameters.recovery_capacity,
        volume_parameters.stress_level,
        list(injuries.identified_areas),
    )

    return EnhancedUserProfile(
        profile=profile,
        volume_parameters=volume_parameters,
        volume_landmarks=calculate_all_muscle_landmarks(volume_parameters),
        weak_point_analysis=WeakPointSummary(weak_points=injuries.identified_areas),
        recovery_profile=default_recovery_profile(),
        rpe_profile=default_rpe_profile(),
        periodization_model=default_periodization_model(),
        training_history=TrainingHistory(
            total_training_time=volume_parameters.training_age * MONTHS_PER_YEAR,
            injury_history=injuries.identified_areas,
            peak_performances=_peak_performances(profile),
        ),
        lifestyle_factors=default_lifestyle_factors(),
    )


@dataclass(frozen=True)
class ProgramContext:
    """
    Everything the program generator receives for one user.

    strength_analysis is None unless all four 1RM estimates were given.
    """

    enhanced_profile: EnhancedUserProfile
    strength_analysis: WeakPointAnalysisResult | None
    periodization_model: str
    phase_progressions: dict[str, list[WeeklyProgression]] = field(default_factory=dict)
    contraindications: tuple[str, ...] = ()
    autoregulation_notes: str = ""


def build_autoregulation_notes(
    rpe_profile: RPEProfile,
    recovery_profile: RecoveryProfile,
) -> str:
    """Plain-text RPE and readiness guidance for the program generator."""
    lines = ["RPE Target Ranges:"]
    for focus, (low, high) in rpe_profile.session_rpe_targets.items():
        lines.append(f"- {focus.capitalize()}: {low:g}-{high:g} RPE")

    rules = rpe_profile.autoregulation_rules
    lines.extend(
        [
            "",
            "Daily Adjustments:",
            f"- Ready to go: {rules.ready_to_go:+g} RPE",
            f"- Feeling good: {rules.feeling_good:+g} RPE",
            f"- Sore/tired: {rules.sore_tired:+g} RPE",
            "",
            f"Recovery Capacity: {recovery_profile.recovery_rate:g}/2.0 (1.0 = average)",
            f"Fatigue Threshold: {recovery_profile.fatigue_threshold:g}/10",
        ]
    )
    return "\n".join(lines)


def build_program_context(profile: UserProfile) -> ProgramContext:
    """
    Synthesize the profile and attach the model-level planning data.

    Week-by-week progressions use the chest MAV as the base weekly volume.

    Args:
        profile: Onboarding profile

    Returns:
        ProgramContext
    """
    enhanced = synthesize(profile)

    strength_profile = strength_profile_from_user(profile)
    strength_analysis = (
        analyze_strength_ratios(strength_profile) if strength_profile is not None else None
    )

    model_name = select_periodization_model(profile.experience_level, profile.primary_goal)
    base_sets = enhanced.volume_landmarks["chest"].mav
    progressions = {
        phase.name: generate_phase_progression(phase, base_sets)
        for phase in PERIODIZATION_MODELS[model_name]
    }

    return ProgramContext(
        enhanced_profile=enhanced,
        strength_analysis=strength_analysis,
        periodization_model=model_name,
        phase_progressions=progressions,
        contraindications=parse_injury_limitations(profile).contraindications,
        autoregulation_notes=build_autoregulation_notes(
            enhanced.rpe_profile, enhanced.recovery_profile
        ),
    )
