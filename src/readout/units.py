"""Unit tables shared by the duration, number and rate formatters."""

from enum import Enum

# Time units, in milliseconds
MONTH = 2629800000  # 30.4375 days
WEEK = 604800000
DAY = 86400000
HOUR = 3600000
MINUTE = 60000
SECOND = 1000
MILLISECOND = 1
MICROSECOND = 0.001
NANOSECOND = 0.000001

TIME_UNITS = (
    ("month", MONTH),
    ("week", WEEK),
    ("day", DAY),
    ("hour", HOUR),
    ("minute", MINUTE),
    ("second", SECOND),
    ("millisecond", MILLISECOND),
    ("microsecond", MICROSECOND),
    ("nanosecond", NANOSECOND),
)

# Precision token -> (singular, plural, abbreviation)
DURATION_LABELS = {
    "years": ("year", "years", "yr"),
    "weeks": ("week", "weeks", "wk"),
    "days": ("day", "days", "d"),
    "hours": ("hour", "hours", "hr"),
    "minutes": ("minute", "minutes", "min"),
    "seconds": ("second", "seconds", "s"),
    "milliseconds": ("millisecond", "milliseconds", "ms"),
}

# Steps used for exact durations; months vary in length so they are skipped
DURATION_STEPS = (
    ("weeks", WEEK),
    ("days", DAY),
    ("hours", HOUR),
    ("minutes", MINUTE),
    ("seconds", SECOND),
)

# Largest first
ABBREVIATION_STEPS = (
    (1_000_000_000, "b"),
    (1_000_000, "m"),
    (1_000, "k"),
)

# Short compact notation, as rendered for en-US
COMPACT_STEPS = (
    (12, "T"),
    (9, "B"),
    (6, "M"),
    (3, "K"),
)


class RateUnit(str, Enum):
    PER_SECOND = "1/second"
    PER_MINUTE = "1/minute"
    PER_HOUR = "1/hour"


RATE_UNIT_LABELS = {
    RateUnit.PER_SECOND: "/s",
    RateUnit.PER_MINUTE: "/min",
    RateUnit.PER_HOUR: "/hr",
}
