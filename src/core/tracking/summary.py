"""
Human-readable activity summaries.

These are the entry points callers use: hand over a raw input line plus
the user's weight and height, get back a formatted multi-line report.

Malformed input is handled according to an ErrorPolicy. By default the
typed error propagates to the caller. ErrorPolicy.LOG instead logs the
problem and returns an empty string, for callers that only ever display
the result.
"""

import logging
from enum import Enum
from typing import Optional

from ...config.settings import get_settings
from .calculator import build_daily_report, build_report
from .models import ActivityReport, DailyReport, MalformedInputError, UserProfile
from .parser import DAILY_PARSER, TRAINING_PARSER

logger = logging.getLogger(__name__)


DAILY_TEMPLATE = (
    "Steps: {steps}.\n"
    "Distance: {distance_km:.2f} km.\n"
    "Calories burned: {calories:.2f} kcal.\n"
)

TRAINING_TEMPLATE = (
    "Activity: {label}\n"
    "Duration: {duration_hours:.2f} h.\n"
    "Distance: {distance_km:.2f} km.\n"
    "Speed: {mean_speed_kmh:.2f} km/h\n"
    "Calories burned: {calories:.2f}\n"
)


class ErrorPolicy(Enum):
    """What a summary does with malformed input."""
    RAISE = "raise"
    LOG = "log"


def format_daily_report(report: DailyReport) -> str:
    return DAILY_TEMPLATE.format(
        steps=report.steps,
        distance_km=report.distance_km,
        calories=report.calories_burned,
    )


def format_training_report(report: ActivityReport) -> str:
    return TRAINING_TEMPLATE.format(
        label=report.label,
        duration_hours=report.duration_hours,
        distance_km=report.distance_km,
        mean_speed_kmh=report.mean_speed_kmh,
        calories=report.calories_burned,
    )


def daily_summary(
    raw: str,
    weight_kg: float,
    height_m: float,
    on_error: Optional[ErrorPolicy] = None,
) -> str:
    """
    Summarize a day's steps from a "<steps>,<duration>" line.

    Example:
        >>> print(daily_summary("1000,1h0m0s", 70, 1.75), end="")
        Steps: 1000.
        Distance: 0.65 km.
        Calories burned: 27.56 kcal.
    """
    policy = _resolve_policy(on_error)
    try:
        record = DAILY_PARSER.parse(raw)
        report = build_daily_report(record, UserProfile(weight_kg, height_m))
    except MalformedInputError as e:
        return _handle_error("daily", raw, e, policy)

    logger.debug(
        "Daily summary built",
        extra={"steps": report.steps, "distance_km": report.distance_km},
    )
    return format_daily_report(report)


def training_summary(
    raw: str,
    weight_kg: float,
    height_m: float,
    on_error: Optional[ErrorPolicy] = None,
) -> str:
    """Summarize one training session from a "<steps>,<activity>,<duration>" line."""
    policy = _resolve_policy(on_error)
    try:
        record = TRAINING_PARSER.parse(raw)
        report = build_report(record, UserProfile(weight_kg, height_m))
    except MalformedInputError as e:
        return _handle_error("training", raw, e, policy)

    logger.debug(
        "Training summary built",
        extra={
            "activity": report.activity_kind.value,
            "distance_km": report.distance_km,
        },
    )
    return format_training_report(report)


def _resolve_policy(on_error: Optional[ErrorPolicy]) -> ErrorPolicy:
    if on_error is not None:
        return on_error
    return ErrorPolicy(get_settings().error_policy)


def _handle_error(
    summary_kind: str,
    raw: str,
    error: MalformedInputError,
    policy: ErrorPolicy,
) -> str:
    if policy is ErrorPolicy.RAISE:
        raise error

    logger.warning(
        "Could not build %s summary: %s",
        summary_kind,
        error,
        extra={"raw_input": raw, "error_type": type(error).__name__},
    )
    return ""
