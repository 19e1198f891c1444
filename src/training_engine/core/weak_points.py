"""
Weak point detection: strength-ratio imbalances and injury notes.

Two independent analyses:
- analyze_strength_ratios() compares lift ratios against fixed standards
  and prescribes corrective exercises.
- parse_injury_text() extracts body regions and movement restrictions
  from free text with word-boundary keyword matching.
"""

import re

from .config import (
    INJURY_REGIONS,
    REASSESSMENT_WEEKS_DEFAULT,
    REASSESSMENT_WEEKS_HIGH,
    REASSESSMENT_WEEKS_MODERATE,
    SEVERITY_BANDS,
    STRENGTH_RATIO_STANDARDS,
    WEAK_POINT_PROTOCOLS,
)
from .models import (
    InjuryParseResult,
    RatioIssue,
    Severity,
    StrengthProfile,
    UserProfile,
    WeakPointAnalysisResult,
)
from .numeric import round_to_decimals, safe_divide

_INJURY_PATTERNS: tuple[tuple[str, re.Pattern[str], tuple[str, ...]], ...] = tuple(
    (area, re.compile(rf"\b(?:{keywords})\b", re.IGNORECASE), contraindications)
    for area, keywords, contraindications in INJURY_REGIONS
)


def _dedupe(items) -> tuple[str, ...]:
    """Drop repeats, keeping first-seen order."""
    return tuple(dict.fromkeys(items))


def strength_ratios(profile: StrengthProfile) -> dict[str, float]:
    """
    Raw strength ratios keyed by ratio name.

    Zero denominators are not guarded: the ratio is inf or nan.
    """
    return {
        name: safe_divide(getattr(profile, numerator), getattr(profile, denominator))
        for name, numerator, denominator, _minimum, _optimal, _category in STRENGTH_RATIO_STANDARDS
    }


def classify_ratio(ratio: float, minimum: float) -> Severity | None:
    """
    Severity of a ratio relative to its standard minimum.

    Below 90% of the minimum is High, below the minimum is Moderate,
    anything else (including nan) is not an issue.
    """
    for fraction, severity in SEVERITY_BANDS:
        if ratio < minimum * fraction:
            return severity  # type: ignore[return-value]
    return None


def generate_correction_exercises(weak_point_types) -> tuple[str, ...]:
    """
    Corrective exercises for a set of weak point categories.

    Args:
        weak_point_types: Category tags, e.g. "weak_posterior_chain"

    Returns:
        Deduplicated exercise names in protocol order
    """
    return _dedupe(
        exercise
        for weak_point in weak_point_types
        for exercise in WEAK_POINT_PROTOCOLS.get(weak_point, ())
    )


def calculate_reassessment_period(severities) -> int:
    """
    Weeks until ratios should be re-tested.

    Severe imbalances get a short focused block before re-testing.

    Args:
        severities: Severity labels of the detected issues

    Returns:
        8 if any High, 12 if any Moderate, otherwise 16
    """
    severities = list(severities)
    if "High" in severities:
        return REASSESSMENT_WEEKS_HIGH
    if "Moderate" in severities:
        return REASSESSMENT_WEEKS_MODERATE
    return REASSESSMENT_WEEKS_DEFAULT


def analyze_strength_ratios(profile: StrengthProfile) -> WeakPointAnalysisResult:
    """
    Find strength-ratio imbalances and build a corrective protocol.

    Args:
        profile: 1RM estimates for squat, bench, deadlift and overhead press

    Returns:
        WeakPointAnalysisResult with issues, categories, exercises and
        the reassessment period
    """
    ratios = strength_ratios(profile)
    issues: list[RatioIssue] = []
    categories: list[str] = []

    for name, _num, _den, minimum, _optimal, category in STRENGTH_RATIO_STANDARDS:
        ratio = ratios[name]
        severity = classify_ratio(ratio, minimum)
        if severity is None:
            continue
        issues.append(
            RatioIssue(
                ratio_name=name,
                your_ratio=round_to_decimals(ratio, 2),
                standard_minimum=minimum,
                severity=severity,
                explanation=(
                    f"Your {name} ratio is below the minimum standard of {minimum:.2f}, "
                    "suggesting a potential imbalance."
                ),
            )
        )
        categories.append(category)

    primary = _dedupe(categories)

    return WeakPointAnalysisResult(
        issues=tuple(issues),
        primary_weak_points=primary,
        correction_exercises=generate_correction_exercises(primary),
        reassessment_period_weeks=calculate_reassessment_period(i.severity for i in issues),
    )


def strength_profile_from_user(profile: UserProfile) -> StrengthProfile | None:
    """
    StrengthProfile from onboarding 1RM estimates.

    Returns None unless all four estimates are present and non-zero,
    since a partial profile would produce meaningless ratios.
    """
    estimates = (
        profile.squat_1rm_estimate,
        profile.bench_press_1rm_estimate,
        profile.deadlift_1rm_estimate,
        profile.overhead_press_1rm_estimate,
    )
    if not all(estimates):
        return None
    squat, bench, deadlift, overhead = estimates
    return StrengthProfile(
        squat_1rm=squat,  # type: ignore[arg-type]
        bench_1rm=bench,  # type: ignore[arg-type]
        deadlift_1rm=deadlift,  # type: ignore[arg-type]
        overhead_press_1rm=overhead,  # type: ignore[arg-type]
    )


def parse_injury_text(text: str | None) -> InjuryParseResult:
    """
    Identify injured body regions and contraindicated movements.

    Matching is case-insensitive on whole words, so "backup" does not
    count as a back issue.

    Args:
        text: Free-text injury / limitation notes, may be None

    Returns:
        InjuryParseResult; empty when text is None, empty or irrelevant
    """
    if not text:
        return InjuryParseResult()

    areas: list[str] = []
    contraindications: list[str] = []

    for area, pattern, restricted in _INJURY_PATTERNS:
        if pattern.search(text):
            areas.append(area)
            contraindications.extend(restricted)

    return InjuryParseResult(
        identified_areas=_dedupe(areas),
        contraindications=_dedupe(contraindications),
    )
