"""
Data models for the training parameter engine.

All records are frozen dataclasses: value objects with no identity that
are created fresh by each computation.  Sequences are stored as tuples so
that input records stay hashable and can be used as cache keys.

Field values are deliberately not validated here; the onboarding layer
that produces a UserProfile has already checked its shape, and degenerate
numbers are allowed to flow through the formulas.
"""

from dataclasses import dataclass, field
from typing import Any, Literal

WeightUnit = Literal["kg", "lbs"]
Severity = Literal["High", "Moderate"]
RPETrend = Literal["increasing", "decreasing", "stable"]
VolumeProgression = Literal["linear", "ramping", "stable"]
Adaptation = Literal["hypertrophy", "strength", "peaking", "recovery"]


@dataclass(frozen=True)
class UserProfile:
    """
    Onboarding profile as delivered by the onboarding collaborator.

    Every field is optional; missing values fall back to documented
    defaults during synthesis rather than raising.
    """

    experience_level: str | None = None  # "beginner" | "intermediate" | "advanced"
    training_frequency_days: int | None = None  # days per week, 1-7
    session_duration: str | None = None  # bucket, e.g. "60-75 minutes"
    equipment: tuple[str, ...] = ()
    exercise_preferences: str | None = None
    injuries_limitations: str | None = None
    squat_1rm_estimate: float | None = None
    bench_press_1rm_estimate: float | None = None
    deadlift_1rm_estimate: float | None = None
    overhead_press_1rm_estimate: float | None = None
    weight_unit: WeightUnit = "kg"
    primary_goal: str | None = None


@dataclass(frozen=True)
class VolumeParameters:
    """Individual multipliers that scale the base volume landmarks."""

    training_age: float  # years
    recovery_capacity: float  # 1-10
    stress_level: float  # 1-10, higher is more stress
    volume_tolerance: float = 1.0


@dataclass(frozen=True)
class VolumeLandmarks:
    """
    Weekly set landmarks for one muscle group.

    mev <= mav <= mrv whenever the multipliers are non-negative.
    """

    mev: int  # Minimum Effective Volume
    mav: int  # Maximum Adaptive Volume
    mrv: int  # Maximum Recoverable Volume


@dataclass(frozen=True)
class StrengthProfile:
    """One-rep max estimates for the four main lifts."""

    squat_1rm: float
    bench_1rm: float
    deadlift_1rm: float
    overhead_press_1rm: float


@dataclass(frozen=True)
class RatioIssue:
    """A strength ratio that fell below its standard minimum."""

    ratio_name: str
    your_ratio: float  # rounded to 2 decimals
    standard_minimum: float
    severity: Severity
    explanation: str


@dataclass(frozen=True)
class WeakPointAnalysisResult:
    """Outcome of the strength-ratio analysis."""

    issues: tuple[RatioIssue, ...]
    primary_weak_points: tuple[str, ...]
    correction_exercises: tuple[str, ...]
    reassessment_period_weeks: int


@dataclass(frozen=True)
class InjuryParseResult:
    """Body regions and restricted movements found in free-text notes."""

    identified_areas: tuple[str, ...] = ()
    contraindications: tuple[str, ...] = ()


@dataclass(frozen=True)
class RecoveryProfile:
    fatigue_threshold: float
    recovery_rate: float  # 1.0 = average
    sleep_quality: float
    recovery_modalities: tuple[str, ...] = ()


@dataclass(frozen=True)
class SessionFeedback:
    """How the previous session of an exercise went."""

    last_session_rpe: float  # 0-10
    total_volume: float = 0.0
    notes: str | None = None


@dataclass(frozen=True)
class LoadRecommendation:
    recommended_weight: float  # nearest 2.5 unit
    percentage_change: float  # relative to the base weight
    reasoning: tuple[str, ...]


@dataclass(frozen=True)
class DeloadRecommendation:
    """
    Whether to deload and how.

    type, duration_days and reduction_percentage are None when no deload
    is needed.
    """

    is_needed: bool
    reason: str
    type: Literal["volume", "intensity"] | None = None
    duration_days: int | None = None
    reduction_percentage: int | None = None


@dataclass(frozen=True)
class PeriodizationPhase:
    """One block of a periodization model."""

    name: str
    duration_weeks: int
    intensity_range: tuple[float, float]  # %1RM, ascending
    volume_progression: VolumeProgression
    primary_adaptation: Adaptation


@dataclass(frozen=True)
class WeeklyProgression:
    week_in_phase: int  # 1-indexed
    target_volume_sets: int
    target_intensity_percent: float  # 1 decimal
    focus: str


@dataclass(frozen=True)
class DetailedDeloadProtocol:
    type: Literal["active", "passive"]
    duration_days: int
    volume_reduction_percent: int
    intensity_reduction_percent: int
    specialization_focus: str


# ---------------------------------------------------------------------------
# Enhanced profile sections
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class WeakPointSummary:
    """
    Weak point section of the enhanced profile.

    weak_points holds the body regions found in the injury notes, not the
    strength-ratio categories (see DESIGN.md, open questions).
    """

    weak_points: tuple[str, ...] = ()
    strength_ratios: dict[str, float] = field(default_factory=dict)
    correction_exercises: dict[str, tuple[str, ...]] = field(default_factory=dict)


@dataclass(frozen=True)
class AutoregulationRules:
    """RPE target deltas keyed by how the athlete feels before a session."""

    ready_to_go: float = 1
    feeling_good: float = 0
    sore_tired: float = -1


@dataclass(frozen=True)
class RPEProfile:
    session_rpe_targets: dict[str, tuple[float, float]]
    autoregulation_rules: AutoregulationRules = field(default_factory=AutoregulationRules)


@dataclass(frozen=True)
class ModelPhase:
    """A phase of the profile's default periodization model."""

    name: str
    duration_weeks: int
    focus: str
    intensity_range: tuple[float, float]
    volume_multiplier: float


@dataclass(frozen=True)
class DeloadSchedule:
    frequency_weeks: int
    type: Literal["volume", "intensity", "complete"]
    reduction_percentage: int


@dataclass(frozen=True)
class PeriodizationModel:
    type: str
    phases: tuple[ModelPhase, ...]
    deload_protocol: DeloadSchedule
    adaptation_targets: dict[str, dict[str, float]] = field(default_factory=dict)


@dataclass(frozen=True)
class TrainingHistory:
    total_training_time: float  # months
    injury_history: tuple[str, ...] = ()
    peak_performances: dict[str, float] = field(default_factory=dict)
    training_response_profile: dict[str, str] = field(default_factory=dict)


@dataclass(frozen=True)
class LifestyleFactors:
    occupation_type: Literal["sedentary", "active", "physical"] = "sedentary"
    average_sleep_hours: float = 7
    stress_management: tuple[str, ...] = ()
    nutrition_adherence: int = 5  # 1-10


@dataclass(frozen=True)
class EnhancedUserProfile:
    """
    The onboarding profile plus every derived training parameter.

    Attribute access falls through to the source profile, so
    ``enhanced.experience_level`` reads the original onboarding field.
    """

    profile: UserProfile
    volume_parameters: VolumeParameters
    volume_landmarks: dict[str, VolumeLandmarks]
    weak_point_analysis: WeakPointSummary
    recovery_profile: RecoveryProfile
    rpe_profile: RPEProfile
    periodization_model: PeriodizationModel
    training_history: TrainingHistory
    lifestyle_factors: LifestyleFactors

    def __getattr__(self, name: str) -> Any:
        # Only called when normal lookup fails; guard against recursion
        # before ``profile`` is set (e.g. during unpickling).
        if name == "profile":
            raise AttributeError(name)
        return getattr(self.profile, name)
