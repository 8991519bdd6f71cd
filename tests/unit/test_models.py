"""
Unit tests for the tracking domain models.

These tests verify the value objects on their own, without parsing
or formulas.

Testing philosophy:
- Test behavior, not implementation
- Each test should have a clear "given/when/then" structure
- Use descriptive names that explain what we're testing
- Prefer real objects over mocks where practical
"""

from dataclasses import FrozenInstanceError
from datetime import timedelta

import pytest

from src.core.tracking.models import (
    ActivityKind,
    ActivityRecord,
    ActivityReport,
    FormatError,
    MalformedInputError,
    UnknownActivityError,
    UserProfile,
)


# ---------------------------------------------------------------------------
# ActivityKind Tests
# ---------------------------------------------------------------------------

class TestActivityKind:
    """Tests for label lookup."""

    @pytest.mark.parametrize("label", ["walking", "Walking", "WALKING"])
    def test_english_walking_labels_ignore_case(self, label):
        assert ActivityKind.from_label(label) is ActivityKind.WALKING

    @pytest.mark.parametrize("label", ["running", "RuNnInG"])
    def test_english_running_labels_ignore_case(self, label):
        assert ActivityKind.from_label(label) is ActivityKind.RUNNING

    def test_localized_labels_resolve(self):
        """Logs written in Russian use their own words for the activities."""
        assert ActivityKind.from_label("Ходьба") is ActivityKind.WALKING
        assert ActivityKind.from_label("БЕГ") is ActivityKind.RUNNING

    def test_unknown_label_is_rejected(self):
        with pytest.raises(UnknownActivityError, match="flying"):
            ActivityKind.from_label("flying")

    def test_unknown_activity_is_malformed_input(self):
        """Callers can catch a single error category."""
        assert issubclass(UnknownActivityError, MalformedInputError)
        assert issubclass(FormatError, MalformedInputError)
        assert issubclass(MalformedInputError, ValueError)


# ---------------------------------------------------------------------------
# UserProfile Tests
# ---------------------------------------------------------------------------

class TestUserProfile:
    """Tests for the UserProfile value object."""

    def test_valid_profile(self):
        profile = UserProfile(weight_kg=70.0, height_m=1.75)
        assert profile.weight_kg == 70.0
        assert profile.height_m == 1.75

    @pytest.mark.parametrize("weight", [0, -70.0])
    def test_rejects_non_positive_weight(self, weight):
        with pytest.raises(FormatError, match="Weight"):
            UserProfile(weight_kg=weight, height_m=1.75)

    @pytest.mark.parametrize("height", [0, -1.75])
    def test_rejects_non_positive_height(self, height):
        with pytest.raises(FormatError, match="Height"):
            UserProfile(weight_kg=70.0, height_m=height)

    def test_profile_is_immutable(self):
        profile = UserProfile(weight_kg=70.0, height_m=1.75)
        with pytest.raises(FrozenInstanceError):
            profile.weight_kg = 80.0


# ---------------------------------------------------------------------------
# ActivityRecord Tests
# ---------------------------------------------------------------------------

class TestActivityRecord:
    """Tests for the ActivityRecord value object."""

    def test_duration_conversions(self):
        """Hours and minutes are derived from the stored timedelta."""
        record = ActivityRecord(steps=1000, duration=timedelta(hours=1, minutes=30))

        assert record.duration_hours == 1.5
        assert record.duration_minutes == 90.0

    def test_daily_record_has_no_kind(self):
        record = ActivityRecord(steps=1000, duration=timedelta(minutes=10))
        assert record.activity_kind is None
        assert record.label is None

    @pytest.mark.parametrize("steps", [0, -1])
    def test_rejects_non_positive_steps(self, steps):
        with pytest.raises(FormatError, match="Step count"):
            ActivityRecord(steps=steps, duration=timedelta(minutes=10))

    @pytest.mark.parametrize("duration", [timedelta(0), timedelta(minutes=-5)])
    def test_rejects_non_positive_duration(self, duration):
        with pytest.raises(FormatError, match="Duration"):
            ActivityRecord(steps=1000, duration=duration)

    def test_equal_records_compare_equal(self):
        """Records are values: same fields, same record."""
        a = ActivityRecord(1000, timedelta(hours=1), ActivityKind.RUNNING, "running")
        b = ActivityRecord(1000, timedelta(hours=1), ActivityKind.RUNNING, "running")
        assert a == b


class TestActivityReport:
    """Tests for the derived report."""

    def test_report_is_immutable(self):
        report = ActivityReport(
            activity_kind=ActivityKind.WALKING,
            label="walking",
            duration_hours=1.0,
            distance_km=0.79,
            mean_speed_kmh=0.79,
            calories_burned=27.56,
        )
        with pytest.raises(FrozenInstanceError):
            report.calories_burned = 0.0
