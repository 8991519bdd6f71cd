"""
Step and training tracking logic.

Contains the domain models, the record parser, the metric formulas,
and the summary entry points built on top of them.
"""

from .calculator import (
    build_daily_report,
    build_report,
    daily_distance_km,
    distance_km,
    mean_speed_kmh,
    running_calories,
    stride_length,
    walking_calories,
)
from .durations import DurationError, parse_duration
from .models import (
    ActivityKind,
    ActivityRecord,
    ActivityReport,
    DailyReport,
    FormatError,
    MalformedInputError,
    UnknownActivityError,
    UserProfile,
)
from .parser import RecordLayout, RecordParser
from .summary import (
    ErrorPolicy,
    daily_summary,
    format_daily_report,
    format_training_report,
    training_summary,
)

__all__ = [
    "ActivityKind",
    "ActivityRecord",
    "ActivityReport",
    "DailyReport",
    "DurationError",
    "ErrorPolicy",
    "FormatError",
    "MalformedInputError",
    "RecordLayout",
    "RecordParser",
    "UnknownActivityError",
    "UserProfile",
    "build_daily_report",
    "build_report",
    "daily_distance_km",
    "daily_summary",
    "distance_km",
    "format_daily_report",
    "format_training_report",
    "mean_speed_kmh",
    "parse_duration",
    "running_calories",
    "stride_length",
    "training_summary",
    "walking_calories",
]
