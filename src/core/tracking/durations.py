"""
Parsing of compact time spans such as "3h50m" or "0h50m00s".

A span is an optional sign followed by one or more <number><unit> tokens.
Numbers may carry a fractional part ("1.5h", ".5m"). Recognized units are
h, m, s, ms, us (or µs) and ns. A bare "0" means zero.
"""

import re
from datetime import timedelta
from decimal import Decimal


class DurationError(ValueError):
    """Raised when a time span cannot be parsed."""
    pass


# Longer units first so "ms" is not read as "m" followed by junk.
_TOKEN = re.compile(r"([0-9]+\.?[0-9]*|\.[0-9]+)(ns|us|µs|μs|ms|h|m|s)")

# Spans are limited to a signed 64-bit count of nanoseconds (about 2562047h).
_MAX_NANOSECONDS = 2**63 - 1

_NANOSECONDS_PER_UNIT = {
    "ns": 1,
    "us": 1_000,
    "µs": 1_000,
    "μs": 1_000,
    "ms": 1_000_000,
    "s": 1_000_000_000,
    "m": 60 * 1_000_000_000,
    "h": 3600 * 1_000_000_000,
}


def parse_duration(text: str) -> timedelta:
    """
    Parse a compact time span into a timedelta.

    Precision below a microsecond is truncated, since timedelta
    cannot represent it; a nonzero span shorter than that counts as one
    microsecond. Fractions of a nanosecond are dropped.

    Example:
        >>> parse_duration("3h50m")
        datetime.timedelta(seconds=13800)
    """
    body = text
    negative = False
    if body[:1] in ("-", "+"):
        negative = body[0] == "-"
        body = body[1:]

    if body == "0":
        return timedelta(0)
    if not body:
        raise DurationError(f"Invalid duration {text!r}")

    total_ns = Decimal(0)
    pos = 0
    while pos < len(body):
        match = _TOKEN.match(body, pos)
        if match is None:
            raise DurationError(f"Invalid duration {text!r}")
        number, unit = match.groups()
        total_ns += Decimal(number) * _NANOSECONDS_PER_UNIT[unit]
        pos = match.end()

    nanoseconds = int(total_ns)
    limit = _MAX_NANOSECONDS + 1 if negative else _MAX_NANOSECONDS
    if nanoseconds > limit:
        raise DurationError(f"Duration out of range {text!r}")

    # Nonzero spans below one microsecond round up to one.
    microseconds = nanoseconds // 1_000
    if nanoseconds and not microseconds:
        microseconds = 1
    if negative:
        microseconds = -microseconds

    return timedelta(microseconds=microseconds)
