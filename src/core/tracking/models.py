"""
Domain models for step and training tracking.

These models represent the core business concepts. They have no dependencies
on external frameworks, storage, or transport. Records are values: once a
line of input has been parsed into one, it never changes.
"""

from dataclasses import dataclass
from datetime import timedelta
from enum import Enum
from typing import Optional


class MalformedInputError(ValueError):
    """Raised when an activity record or user profile cannot be used."""
    pass


class FormatError(MalformedInputError):
    """Raised when a field is missing, unparsable, or out of range."""
    pass


class UnknownActivityError(MalformedInputError):
    """Raised when an activity label does not name a known activity."""
    pass


class ActivityKind(Enum):
    """The kinds of activity we know a calorie formula for."""
    WALKING = "walking"
    RUNNING = "running"

    @classmethod
    def from_label(cls, label: str) -> "ActivityKind":
        """
        Resolve a user-supplied label, ignoring case.

        Labels come from activity logs written in more than one language,
        so the lookup goes through ACTIVITY_LABELS rather than the enum values.
        """
        kind = ACTIVITY_LABELS.get(label.casefold())
        if kind is None:
            raise UnknownActivityError(f"Unknown activity type: {label!r}")
        return kind


# Keys must be casefolded.
ACTIVITY_LABELS: dict[str, ActivityKind] = {
    "walking": ActivityKind.WALKING,
    "running": ActivityKind.RUNNING,
    "ходьба": ActivityKind.WALKING,
    "бег": ActivityKind.RUNNING,
}


@dataclass(frozen=True)
class UserProfile:
    """
    Body measurements needed for distance and calorie estimates.

    Passed alongside every record; nothing about the user is stored.
    """
    weight_kg: float
    height_m: float

    def __post_init__(self) -> None:
        if self.weight_kg <= 0:
            raise FormatError("Weight must be > 0")
        if self.height_m <= 0:
            raise FormatError("Height must be > 0")


@dataclass(frozen=True)
class ActivityRecord:
    """
    A single parsed line of activity input.

    activity_kind is None for daily step records, which carry no label.
    label keeps the text exactly as the user wrote it, for reporting.
    """
    steps: int
    duration: timedelta
    activity_kind: Optional[ActivityKind] = None
    label: Optional[str] = None

    def __post_init__(self) -> None:
        if self.steps <= 0:
            raise FormatError("Step count must be > 0")
        if self.duration <= timedelta(0):
            raise FormatError("Duration must be > 0")

    @property
    def duration_hours(self) -> float:
        return self.duration.total_seconds() / 3600

    @property
    def duration_minutes(self) -> float:
        return self.duration.total_seconds() / 60


@dataclass(frozen=True)
class ActivityReport:
    """Everything we derive from one training record."""
    activity_kind: ActivityKind
    label: str
    duration_hours: float
    distance_km: float
    mean_speed_kmh: float
    calories_burned: float


@dataclass(frozen=True)
class DailyReport:
    """
    Everything we derive from one day's step record.

    Daily records have no activity label and are always treated as walking.
    """
    steps: int
    duration_hours: float
    distance_km: float
    calories_burned: float
