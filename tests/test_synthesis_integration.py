"""
Integration tests for profile synthesis.

Each test runs the full pipeline: UserProfile -> synthesize /
build_program_context.  Hand-computed expected values are included in
comments.

Profile matrix exercised across scenarios:
  experience: beginner, intermediate, advanced, missing, unrecognized
  days/week : missing, 3, 4, 6
  duration  : missing, 30-45, 45-60, 60-75, 75+
"""

import pytest

from training_engine.core.models import (
    LifestyleFactors,
    UserProfile,
    VolumeLandmarks,
    VolumeParameters,
)
from training_engine.core.synthesis import (
    build_program_context,
    infer_volume_parameters,
    synthesize,
)


# ===========================================================================
# Helpers
# ===========================================================================

def _make_profile(
    experience: str | None = "intermediate",
    days: int | None = 4,
    duration: str | None = "60-75 minutes",
    injuries: str | None = None,
    goal: str | None = None,
    lifts: tuple[float, float, float, float] | None = None,
) -> UserProfile:
    squat, bench, deadlift, overhead = lifts or (None, None, None, None)
    return UserProfile(
        experience_level=experience,
        training_frequency_days=days,
        session_duration=duration,
        equipment=("barbell", "dumbbells"),
        injuries_limitations=injuries,
        squat_1rm_estimate=squat,
        bench_press_1rm_estimate=bench,
        deadlift_1rm_estimate=deadlift,
        overhead_press_1rm_estimate=overhead,
        primary_goal=goal,
    )


# ===========================================================================
# Parameter inference
# ===========================================================================

class TestVolumeParameterInference:
    """
    Recovery points: frequency (>=6: 3, >=4: 2, else 1) + duration
    (60-75 / 75+: 3, 45-60: 2, else 1); total >=5 -> 9, >=3 -> 6, else 3.
    Stress from frequency: >=6 -> 3, >=4 -> 6, else 8.
    """

    def test_intermediate_four_days_sixty_to_seventy_five(self):
        """age 1.25; recovery 2 + 3 = 5 -> 9; stress 6"""
        params = infer_volume_parameters(_make_profile())
        assert params == VolumeParameters(
            training_age=1.25, recovery_capacity=9, stress_level=6, volume_tolerance=1.0
        )

    def test_duration_formatting_variants(self):
        for duration in ("60–75 minutes", "60-75 min", " 60 - 75 ", "60-75"):
            params = infer_volume_parameters(_make_profile(duration=duration))
            assert params.recovery_capacity == 9, duration

    def test_advanced_six_days_long_sessions(self):
        """age 3.0; recovery 3 + 3 = 6 -> 9; stress 3"""
        params = infer_volume_parameters(_make_profile("advanced", 6, "75+ minutes"))
        assert (params.training_age, params.recovery_capacity, params.stress_level) == (3.0, 9, 3)

    def test_beginner_three_days_short_sessions(self):
        """age 0.25; recovery 1 + 1 = 2 -> 3; stress 8"""
        params = infer_volume_parameters(_make_profile("beginner", 3, "30-45 minutes"))
        assert (params.training_age, params.recovery_capacity, params.stress_level) == (0.25, 3, 8)

    def test_moderate_recovery(self):
        """recovery 2 + 2 = 4 -> 6"""
        params = infer_volume_parameters(_make_profile(days=4, duration="45-60 minutes"))
        assert params.recovery_capacity == 6

    def test_missing_fields_fall_back_to_defaults(self):
        """beginner age; recovery 1 + 1 -> 3; stress 8"""
        params = infer_volume_parameters(UserProfile())
        assert params == VolumeParameters(0.25, 3, 8, 1.0)

    def test_unrecognized_experience_is_beginner(self):
        assert infer_volume_parameters(_make_profile("expert")).training_age == 0.25

    def test_volume_tolerance_is_fixed(self):
        for profile in (UserProfile(), _make_profile("advanced", 6, "75+ minutes")):
            assert infer_volume_parameters(profile).volume_tolerance == 1.0


# ===========================================================================
# synthesize()
# ===========================================================================

class TestSynthesize:
    """Assembled EnhancedUserProfile."""

    def test_parameters_match_direct_inference(self):
        profile = _make_profile(injuries="left knee")
        assert synthesize(profile).volume_parameters == infer_volume_parameters(profile)

    @pytest.mark.parametrize("experience", ["beginner", "intermediate", "advanced", None])
    def test_training_time_is_age_in_months(self, experience):
        enhanced = synthesize(_make_profile(experience))
        history = enhanced.training_history
        assert history.total_training_time == enhanced.volume_parameters.training_age * 12

    def test_intermediate_training_time(self):
        assert synthesize(_make_profile()).training_history.total_training_time == 15.0

    def test_landmarks_for_all_nine_groups(self):
        """multiplier 1.5 * 1.3 * 0.9 = 1.755; chest 8/18/26 -> 14/32/46"""
        enhanced = synthesize(_make_profile())
        assert len(enhanced.volume_landmarks) == 9
        assert enhanced.volume_landmarks["chest"] == VolumeLandmarks(14, 32, 46)

    def test_default_beginner_landmarks(self):
        """multiplier 1.1 * 0.7 * 0.7 = 0.539; chest -> 4/10/14"""
        enhanced = synthesize(UserProfile())
        assert enhanced.volume_landmarks["chest"] == VolumeLandmarks(4, 10, 14)

    def test_weak_points_come_from_injury_notes(self):
        enhanced = synthesize(
            _make_profile(injuries="Lower back tightness", lifts=(80, 90, 110, 60))
        )
        assert enhanced.weak_point_analysis.weak_points == ("Lower Back",)
        assert enhanced.training_history.injury_history == ("Lower Back",)

    def test_no_injuries(self):
        enhanced = synthesize(_make_profile())
        assert enhanced.weak_point_analysis.weak_points == ()
        assert enhanced.training_history.injury_history == ()

    def test_fixed_defaults(self):
        enhanced = synthesize(_make_profile())

        rp = enhanced.recovery_profile
        assert (rp.fatigue_threshold, rp.recovery_rate, rp.sleep_quality) == (7, 1.0, 7)

        rpe = enhanced.rpe_profile
        assert rpe.session_rpe_targets == {"hypertrophy": (7.0, 9.0), "strength": (8.0, 10.0)}
        rules = rpe.autoregulation_rules
        assert (rules.ready_to_go, rules.feeling_good, rules.sore_tired) == (1, 0, -1)

        model = enhanced.periodization_model
        assert model.type == "linear"
        assert len(model.phases) > 0

        assert enhanced.lifestyle_factors == LifestyleFactors(
            occupation_type="sedentary", average_sleep_hours=7, nutrition_adherence=5
        )

    def test_peak_performances_from_estimates(self):
        enhanced = synthesize(_make_profile(lifts=(140, 100, 180, 60)))
        assert enhanced.training_history.peak_performances == {
            "squat": 140,
            "bench_press": 100,
            "deadlift": 180,
            "overhead_press": 60,
        }
        assert synthesize(UserProfile()).training_history.peak_performances == {}

    def test_onboarding_fields_readable_on_enhanced(self):
        enhanced = synthesize(_make_profile())
        assert enhanced.experience_level == "intermediate"
        assert enhanced.training_frequency_days == 4
        assert enhanced.equipment == ("barbell", "dumbbells")

    def test_deterministic(self):
        profile = _make_profile(injuries="shoulder", lifts=(100, 80, 140, 50))
        assert synthesize(profile) == synthesize(profile)
        same = _make_profile(injuries="shoulder", lifts=(100, 80, 140, 50))
        assert synthesize(profile) == synthesize(same)


# ===========================================================================
# build_program_context()
# ===========================================================================

class TestProgramContext:
    """Everything handed to the program generator."""

    def test_full_context(self):
        profile = _make_profile(
            injuries="sore wrist", goal="Get stronger: strength", lifts=(80, 90, 110, 60)
        )
        context = build_program_context(profile)

        assert context.periodization_model == "strength_focused"
        assert list(context.phase_progressions) == [
            "Base Volume",
            "Strength Intensification",
            "Peaking",
        ]
        # Base sets = chest MAV (32), stable for the base phase
        assert [w.target_volume_sets for w in context.phase_progressions["Base Volume"]] == [32, 32]

        assert context.strength_analysis is not None
        assert "weak_posterior_chain" in context.strength_analysis.primary_weak_points
        assert "Front rack positions" in context.contraindications

    def test_partial_lifts_skip_strength_analysis(self):
        profile = UserProfile(experience_level="advanced", squat_1rm_estimate=150)
        assert build_program_context(profile).strength_analysis is None

    def test_beginner_without_goal_gets_general_fitness(self):
        context = build_program_context(UserProfile())
        assert context.periodization_model == "general_fitness"
        assert list(context.phase_progressions) == ["Linear Progression Block"]

    def test_autoregulation_notes(self):
        notes = build_program_context(_make_profile()).autoregulation_notes
        assert "- Hypertrophy: 7-9 RPE" in notes
        assert "- Strength: 8-10 RPE" in notes
        assert "- Ready to go: +1 RPE" in notes
        assert "- Sore/tired: -1 RPE" in notes
        assert "Fatigue Threshold: 7/10" in notes
