"""
Parsing of comma-separated activity lines.

Two layouts share one parser:
- DAILY:    "<steps>,<duration>"          e.g. "678,0h50m00s"
- TRAINING: "<steps>,<label>,<duration>"  e.g. "678,running,0h50m00s"

The parser either returns a fully validated ActivityRecord or raises;
it never hands back a partially filled record.
"""

import re
from datetime import timedelta
from enum import Enum

from .durations import DurationError, parse_duration
from .models import ActivityKind, ActivityRecord, FormatError


_STEPS = re.compile(r"[+-]?[0-9]+")
_MAX_STEPS = 2**63 - 1


class RecordLayout(Enum):
    """Which fields a line carries, in order."""
    DAILY = "daily"
    TRAINING = "training"

    @property
    def field_count(self) -> int:
        return 3 if self.has_label else 2

    @property
    def has_label(self) -> bool:
        return self is RecordLayout.TRAINING


class RecordParser:
    """
    Turns raw input lines into ActivityRecords for a given layout.

    Stateless beyond its layout, so one instance can be shared freely.
    """

    def __init__(self, layout: RecordLayout) -> None:
        self._layout = layout

    @property
    def layout(self) -> RecordLayout:
        return self._layout

    def parse(self, raw: str) -> ActivityRecord:
        fields = raw.split(",")
        if len(fields) != self._layout.field_count:
            raise FormatError(
                f"Expected {self._layout.field_count} comma-separated values, "
                f"got {len(fields)}"
            )

        steps = self._parse_steps(fields[0])

        kind = None
        label = None
        if self._layout.has_label:
            label = fields[1]
            if not label:
                raise FormatError("Activity type is not defined")
            kind = ActivityKind.from_label(label)

        duration = self._parse_duration(fields[-1])

        return ActivityRecord(
            steps=steps,
            duration=duration,
            activity_kind=kind,
            label=label,
        )

    def _parse_steps(self, text: str) -> int:
        # int() alone would also accept whitespace and digit separators
        if not _STEPS.fullmatch(text):
            raise FormatError(f"Step count is not an integer: {text!r}")
        steps = int(text)
        if not -_MAX_STEPS - 1 <= steps <= _MAX_STEPS:
            raise FormatError(f"Step count out of range: {text!r}")
        if steps <= 0:
            raise FormatError("Step count must be > 0")
        return steps

    def _parse_duration(self, text: str) -> timedelta:
        try:
            duration = parse_duration(text)
        except DurationError as e:
            raise FormatError(f"Invalid duration: {e}") from e
        if duration.total_seconds() <= 0:
            raise FormatError("Duration must be > 0")
        return duration


DAILY_PARSER = RecordParser(RecordLayout.DAILY)
TRAINING_PARSER = RecordParser(RecordLayout.TRAINING)
