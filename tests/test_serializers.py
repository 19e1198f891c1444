"""Tests for onboarding profile loading and JSON conversion."""

import json
import math

import pytest

from training_engine.core.models import UserProfile, VolumeLandmarks
from training_engine.core.synthesis import synthesize
from training_engine.io.serializers import (
    ValidationError,
    dict_to_user_profile,
    enhanced_profile_to_dict,
    load_user_profile,
    to_jsonable,
)


class TestDictToUserProfile:
    def test_snake_case_keys(self):
        profile = dict_to_user_profile({
            "experience_level": "advanced",
            "training_frequency_days": 5,
            "session_duration": "75+ minutes",
            "equipment": ["barbell"],
            "squat_1rm_estimate": 180,
        })
        assert profile.experience_level == "advanced"
        assert profile.training_frequency_days == 5
        assert profile.equipment == ("barbell",)
        assert profile.squat_1rm_estimate == 180.0
        assert profile.weight_unit == "kg"

    def test_camel_case_keys(self):
        profile = dict_to_user_profile({
            "experienceLevel": "intermediate",
            "trainingFrequencyDays": 4,
            "injuriesLimitations": "knee",
            "benchPress1RMEstimate": 100,
            "weightUnit": "lbs",
        })
        assert profile.experience_level == "intermediate"
        assert profile.injuries_limitations == "knee"
        assert profile.bench_press_1rm_estimate == 100.0
        assert profile.weight_unit == "lbs"

    def test_empty_dict_gives_all_defaults(self):
        assert dict_to_user_profile({}) == UserProfile()

    @pytest.mark.parametrize(
        "data",
        [
            {"weight_unit": "stone"},
            {"training_frequency_days": "four"},
            {"training_frequency_days": True},
            {"squat_1rm_estimate": "heavy"},
            {"equipment": "barbell"},
            {"experience_level": 3},
        ],
    )
    def test_wrong_shapes_rejected(self, data):
        with pytest.raises(ValidationError):
            dict_to_user_profile(data)

    def test_non_mapping_rejected(self):
        with pytest.raises(ValidationError):
            dict_to_user_profile(["beginner"])  # type: ignore[arg-type]


class TestLoadUserProfile:
    def test_yaml(self, tmp_path):
        path = tmp_path / "profile.yaml"
        path.write_text(
            "experience_level: intermediate\n"
            "training_frequency_days: 4\n"
            "session_duration: 60-75 minutes\n"
            "equipment: [barbell, rack]\n"
        )
        profile = load_user_profile(path)
        assert profile.session_duration == "60-75 minutes"
        assert profile.equipment == ("barbell", "rack")

    def test_json(self, tmp_path):
        path = tmp_path / "profile.json"
        path.write_text(json.dumps({"experienceLevel": "beginner", "trainingFrequencyDays": 3}))
        profile = load_user_profile(path)
        assert profile.experience_level == "beginner"
        assert profile.training_frequency_days == 3

    def test_empty_yaml_is_default_profile(self, tmp_path):
        path = tmp_path / "profile.yaml"
        path.write_text("")
        assert load_user_profile(path) == UserProfile()

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_user_profile(tmp_path / "missing.yaml")

    def test_malformed_json(self, tmp_path):
        path = tmp_path / "profile.json"
        path.write_text("{not json")
        with pytest.raises(ValidationError):
            load_user_profile(path)

    def test_invalid_utf8_rejected(self, tmp_path):
        path = tmp_path / "profile.yaml"
        path.write_bytes(b"experience_level: \xff\xfe\n")
        with pytest.raises(ValidationError):
            load_user_profile(path)

    def test_directory_rejected(self, tmp_path):
        with pytest.raises(ValidationError, match="not a file"):
            load_user_profile(tmp_path)


class TestJsonConversion:
    def test_nan_and_inf_become_null(self):
        assert to_jsonable({"a": math.nan, "b": math.inf, "c": 1.5}) == {
            "a": None,
            "b": None,
            "c": 1.5,
        }

    def test_dataclasses_and_tuples(self):
        assert to_jsonable((VolumeLandmarks(1, 2, 3),)) == [{"mev": 1, "mav": 2, "mrv": 3}]

    def test_enhanced_profile_is_flat(self):
        enhanced = synthesize(UserProfile(experience_level="intermediate", training_frequency_days=4))
        data = enhanced_profile_to_dict(enhanced)

        assert data["experience_level"] == "intermediate"
        assert "profile" not in data
        assert data["volume_parameters"]["training_age"] == 1.25
        assert set(data["volume_landmarks"]["chest"]) == {"mev", "mav", "mrv"}
        assert data["rpe_profile"]["session_rpe_targets"]["hypertrophy"] == [7.0, 9.0]
        # Round-trips through strict JSON
        json.loads(json.dumps(data, allow_nan=False))
