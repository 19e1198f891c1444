"""
YAML / JSON serialization for training engine models.

Handles conversion between onboarding records (files or dicts) and
UserProfile, and between result dataclasses and JSON-compatible dicts.
The onboarding collaborator normally validates profiles; this module only
checks the structural shape it needs to build a UserProfile.
"""

import json
import math
from dataclasses import fields, is_dataclass
from pathlib import Path
from typing import Any

import yaml

from ..core.models import EnhancedUserProfile, UserProfile


class ValidationError(Exception):
    """Raised when data validation fails."""

    pass


# UserProfile field -> accepted keys (snake_case first, then onboarding camelCase)
_PROFILE_KEYS: dict[str, tuple[str, ...]] = {
    "experience_level": ("experience_level", "experienceLevel"),
    "training_frequency_days": ("training_frequency_days", "trainingFrequencyDays"),
    "session_duration": ("session_duration", "sessionDuration"),
    "equipment": ("equipment",),
    "exercise_preferences": ("exercise_preferences", "exercisePreferences"),
    "injuries_limitations": ("injuries_limitations", "injuriesLimitations"),
    "squat_1rm_estimate": ("squat_1rm_estimate", "squat1RMEstimate"),
    "bench_press_1rm_estimate": ("bench_press_1rm_estimate", "benchPress1RMEstimate"),
    "deadlift_1rm_estimate": ("deadlift_1rm_estimate", "deadlift1RMEstimate"),
    "overhead_press_1rm_estimate": ("overhead_press_1rm_estimate", "overheadPress1RMEstimate"),
    "weight_unit": ("weight_unit", "weightUnit"),
    "primary_goal": ("primary_goal", "primaryGoal", "fitness_goals"),
}

_NUMERIC_FIELDS = (
    "squat_1rm_estimate",
    "bench_press_1rm_estimate",
    "deadlift_1rm_estimate",
    "overhead_press_1rm_estimate",
)
_TEXT_FIELDS = (
    "experience_level",
    "session_duration",
    "exercise_preferences",
    "injuries_limitations",
    "primary_goal",
)


def _lookup(data: dict[str, Any], keys: tuple[str, ...]) -> Any:
    for key in keys:
        if key in data:
            return data[key]
    return None


def validate_optional_number(value: Any, name: str) -> float | None:
    """
    Validate an optional numeric field.

    Raises:
        ValidationError: If value is present but not a number
    """
    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValidationError(f"{name} must be a number, got {value!r}")
    return float(value)


def validate_optional_text(value: Any, name: str) -> str | None:
    """
    Validate an optional text field.

    Raises:
        ValidationError: If value is present but not a string
    """
    if value is None:
        return None
    if not isinstance(value, str):
        raise ValidationError(f"{name} must be a string, got {value!r}")
    return value


def dict_to_user_profile(data: dict[str, Any]) -> UserProfile:
    """
    Convert an onboarding dict to UserProfile.

    Accepts snake_case keys or the onboarding form's camelCase keys.
    Missing fields stay None so synthesis applies its defaults.

    Args:
        data: Dict representation

    Returns:
        UserProfile instance

    Raises:
        ValidationError: If a present field has the wrong type
    """
    if not isinstance(data, dict):
        raise ValidationError(f"Profile must be a mapping, got {type(data).__name__}")

    values = {name: _lookup(data, keys) for name, keys in _PROFILE_KEYS.items()}

    for name in _TEXT_FIELDS:
        values[name] = validate_optional_text(values[name], name)
    for name in _NUMERIC_FIELDS:
        values[name] = validate_optional_number(values[name], name)

    frequency = values["training_frequency_days"]
    if frequency is not None:
        if isinstance(frequency, bool) or not isinstance(frequency, int):
            raise ValidationError(
                f"training_frequency_days must be an integer, got {frequency!r}"
            )

    equipment = values["equipment"] or []
    if not isinstance(equipment, list) or not all(isinstance(e, str) for e in equipment):
        raise ValidationError(f"equipment must be a list of strings, got {equipment!r}")

    weight_unit = values["weight_unit"] or "kg"
    if weight_unit not in ("kg", "lbs"):
        raise ValidationError(f"Invalid weight_unit: {weight_unit!r}. Must be 'kg' or 'lbs'")

    return UserProfile(
        experience_level=values["experience_level"],
        training_frequency_days=frequency,
        session_duration=values["session_duration"],
        equipment=tuple(equipment),
        exercise_preferences=values["exercise_preferences"],
        injuries_limitations=values["injuries_limitations"],
        squat_1rm_estimate=values["squat_1rm_estimate"],
        bench_press_1rm_estimate=values["bench_press_1rm_estimate"],
        deadlift_1rm_estimate=values["deadlift_1rm_estimate"],
        overhead_press_1rm_estimate=values["overhead_press_1rm_estimate"],
        weight_unit=weight_unit,
        primary_goal=values["primary_goal"],
    )


def load_user_profile(path: Path) -> UserProfile:
    """
    Read a UserProfile from a YAML or JSON file.

    Args:
        path: .yaml, .yml or .json file

    Returns:
        UserProfile instance

    Raises:
        FileNotFoundError: If the file does not exist
        ValidationError: If the path is not a readable UTF-8 file, cannot
            be parsed, or has the wrong shape
    """
    if not path.exists():
        raise FileNotFoundError(f"Profile file not found: {path}")
    if not path.is_file():
        raise ValidationError(f"Profile path is not a file: {path}")

    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise ValidationError(f"Could not read {path}: {e}") from e

    try:
        if path.suffix.lower() == ".json":
            data = json.loads(text)
        else:
            data = yaml.safe_load(text)
    except (json.JSONDecodeError, yaml.YAMLError) as e:
        raise ValidationError(f"Could not parse {path}: {e}") from e

    return dict_to_user_profile(data or {})


def to_jsonable(obj: Any) -> Any:
    """
    Recursively convert dataclasses, tuples and mappings to JSON types.

    nan and inf become None so the output is strict JSON.
    """
    if is_dataclass(obj) and not isinstance(obj, type):
        return {f.name: to_jsonable(getattr(obj, f.name)) for f in fields(obj)}
    if isinstance(obj, dict):
        return {str(k): to_jsonable(v) for k, v in obj.items()}
    if isinstance(obj, (list, tuple)):
        return [to_jsonable(v) for v in obj]
    if isinstance(obj, float) and not math.isfinite(obj):
        return None
    return obj


def enhanced_profile_to_dict(enhanced: EnhancedUserProfile) -> dict[str, Any]:
    """
    Convert EnhancedUserProfile to a flat JSON-compatible dict.

    The onboarding fields sit at the top level next to the derived
    sections, matching the shape the program generator consumes.

    Args:
        enhanced: EnhancedUserProfile to convert

    Returns:
        Dict representation
    """
    d: dict[str, Any] = to_jsonable(enhanced.profile)
    for f in fields(enhanced):
        if f.name == "profile":
            continue
        d[f.name] = to_jsonable(getattr(enhanced, f.name))
    return d
