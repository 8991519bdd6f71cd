"""
Distance, speed and calorie formulas.

Everything here is a pure function of its arguments. Distances are
estimated from step count: the daily step counter assumes a fixed step
length, while training records derive stride length from the user's height.
Walking is modelled as a fixed fraction of the running expenditure for
the same inputs.
"""

from datetime import timedelta
from typing import Callable

from .models import (
    ActivityKind,
    ActivityRecord,
    ActivityReport,
    DailyReport,
    FormatError,
    UnknownActivityError,
    UserProfile,
)


STEP_LENGTH_M = 0.65               # average step length, daily counter
M_IN_KM = 1000
MIN_IN_H = 60
STRIDE_LENGTH_COEFFICIENT = 0.45   # stride length as a fraction of height
WALKING_CALORIES_COEFFICIENT = 0.5


def stride_length(height_m: float) -> float:
    """Estimated length of one step, in metres."""
    return height_m * STRIDE_LENGTH_COEFFICIENT


def distance_km(steps: int, height_m: float) -> float:
    return stride_length(height_m) * steps / M_IN_KM


def daily_distance_km(steps: int) -> float:
    """Distance for the daily counter, which ignores the user's height."""
    return steps * STEP_LENGTH_M / M_IN_KM


def mean_speed_kmh(steps: int, height_m: float, duration: timedelta) -> float:
    """Mean speed over the activity, or 0 for an empty duration."""
    if duration <= timedelta(0):
        return 0.0
    hours = duration.total_seconds() / 3600
    return distance_km(steps, height_m) / hours


def running_calories(
    steps: int,
    weight_kg: float,
    height_m: float,
    duration: timedelta,
) -> float:
    """
    Calories burned running.

    Inputs are validated before any arithmetic. A non-positive speed
    after validation means the formulas disagree with each other and is
    reported rather than silently producing zero.
    """
    if steps <= 0:
        raise FormatError("Steps must be > 0")
    if weight_kg <= 0:
        raise FormatError("Weight must be > 0")
    if height_m <= 0:
        raise FormatError("Height must be > 0")
    if duration <= timedelta(0):
        raise FormatError("Duration must be > 0")

    speed = mean_speed_kmh(steps, height_m, duration)
    if speed <= 0:
        raise FormatError("Error in calculating average speed")

    minutes = duration.total_seconds() / 60
    return weight_kg * speed * minutes / MIN_IN_H


def walking_calories(
    steps: int,
    weight_kg: float,
    height_m: float,
    duration: timedelta,
) -> float:
    """Calories burned walking: a fixed share of the running figure."""
    return running_calories(steps, weight_kg, height_m, duration) * WALKING_CALORIES_COEFFICIENT


CALORIE_FORMULAS: dict[ActivityKind, Callable[[int, float, float, timedelta], float]] = {
    ActivityKind.WALKING: walking_calories,
    ActivityKind.RUNNING: running_calories,
}


def build_report(record: ActivityRecord, profile: UserProfile) -> ActivityReport:
    """Derive distance, speed and calories for a training record."""
    formula = CALORIE_FORMULAS.get(record.activity_kind)
    if formula is None:
        raise UnknownActivityError(
            f"No calorie formula for activity {record.label or record.activity_kind!r}"
        )

    calories = formula(record.steps, profile.weight_kg, profile.height_m, record.duration)

    return ActivityReport(
        activity_kind=record.activity_kind,
        label=record.label or record.activity_kind.value,
        duration_hours=record.duration_hours,
        distance_km=distance_km(record.steps, profile.height_m),
        mean_speed_kmh=mean_speed_kmh(record.steps, profile.height_m, record.duration),
        calories_burned=calories,
    )


def build_daily_report(record: ActivityRecord, profile: UserProfile) -> DailyReport:
    """Derive distance and calories for a day's steps, counted as walking."""
    calories = walking_calories(
        record.steps, profile.weight_kg, profile.height_m, record.duration
    )

    return DailyReport(
        steps=record.steps,
        duration_hours=record.duration_hours,
        distance_km=daily_distance_km(record.steps),
        calories_burned=calories,
    )
