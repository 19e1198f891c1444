"""
Training parameter engine.

Pure computations that turn an onboarding profile into volume landmarks,
weak point corrections, autoregulation recommendations and periodization
progressions.
"""

from .autoregulation import (
    analyze_rpe_trend,
    calculate_adaptive_load,
    determine_deload_need,
    track_cumulative_fatigue,
)
from .config import PERIODIZATION_MODELS
from .periodization import (
    calculate_optimal_deload,
    generate_phase_progression,
    project_adaptation,
)
from .synthesis import build_program_context, infer_volume_parameters, synthesize
from .volume import calculate_all_muscle_landmarks, calculate_individual_volume_landmarks
from .weak_points import (
    analyze_strength_ratios,
    calculate_reassessment_period,
    parse_injury_text,
)

__all__ = [
    "PERIODIZATION_MODELS",
    "analyze_rpe_trend",
    "analyze_strength_ratios",
    "build_program_context",
    "calculate_adaptive_load",
    "calculate_all_muscle_landmarks",
    "calculate_individual_volume_landmarks",
    "calculate_optimal_deload",
    "calculate_reassessment_period",
    "determine_deload_need",
    "generate_phase_progression",
    "infer_volume_parameters",
    "parse_injury_text",
    "project_adaptation",
    "synthesize",
    "track_cumulative_fatigue",
]
