"""Duration formatting: exact human phrases and H:MM:SS clocks."""

import math

from readout.formatting.locale import to_number
from readout.i18n import t, tn
from readout.units import (
    DAY,
    DURATION_LABELS,
    DURATION_STEPS,
    HOUR,
    MINUTE,
    MONTH,
    SECOND,
    WEEK,
)

# Clock fields, right to left: seconds, minutes, hours, days, weeks, months
CLOCK_PROGRESSION = (MONTH, WEEK, DAY, HOUR, MINUTE, SECOND)


def _to_milliseconds(seconds: float) -> int:
    """Round seconds to whole milliseconds, halves away from zero."""
    ms = math.floor(abs(seconds) * 1000 + 0.5)
    return -ms if seconds < 0 else ms


def _divide(value: int, size: int) -> tuple[int, int]:
    """Quotient truncated toward zero, remainder carrying the sign of value."""
    quotient = abs(value) // size
    if value < 0:
        quotient = -quotient
    return quotient, value - quotient * size


def _label(quantity: int, token: str, abbreviation: bool) -> str:
    singular, plural, abbr = DURATION_LABELS[token]
    if abbreviation:
        return f"{quantity}{t(abbr)}"
    return f"{quantity} {tn(singular, plural, abs(quantity))}"


def get_exact_duration(
    seconds: float, abbreviation: bool = False, precision: str = "milliseconds"
) -> str:
    """Return a human readable exact duration, e.g. '1 hour 25 minutes 15 seconds'.

    The phrase stops at the precision unit: precision='minutes' turns 3915s
    into '1 hour 5 minutes'. A nonzero value smaller than the precision unit
    still renders that unit ('0 minutes'). Negative durations carry the sign
    on every segment.
    """
    remaining = _to_milliseconds(seconds)
    segments = []
    stopped = False

    for token, size in DURATION_STEPS:
        if abs(remaining) >= size or (remaining and token == precision):
            quotient, remaining = _divide(remaining, size)
            segments.append(_label(quotient, token, abbreviation))
        if token == precision:
            stopped = True
            break

    if not stopped and remaining:
        segments.append(_label(remaining, "milliseconds", abbreviation))

    if segments:
        return " ".join(segments)

    singular, plural, abbr = DURATION_LABELS.get(precision, DURATION_LABELS["milliseconds"])
    return f"0{t(abbr)}" if abbreviation else f"0 {tn(singular, plural, 0)}"


def format_seconds_to_clock(seconds: float, pad_all: bool = True) -> str:
    """Format seconds as 'H:MM:SS', 'MM:SS' or 'M:SS', with '.mmm' when nonzero.

    Hours are never padded; pad_all=False leaves minutes unpadded too. The
    sign of negative input is dropped.
    """
    if seconds == 0 or not math.isfinite(seconds):
        return "00:00" if pad_all else "0:00"

    ms_value = _to_milliseconds(abs(seconds))
    hours, rest = _divide(ms_value, HOUR)
    minutes, rest = _divide(rest, MINUTE)
    secs, milliseconds = _divide(rest, SECOND)

    if hours:
        # hours are never padded, even with pad_all: "1:05:15"
        parts = [str(hours), f"{minutes:02d}", f"{secs:02d}"]
    else:
        parts = [f"{minutes:02d}" if pad_all else str(minutes), f"{secs:02d}"]

    clock = ":".join(parts)
    return f"{clock}.{milliseconds:03d}" if milliseconds else clock


def _clock_field(text: str) -> float:
    value = to_number(text)
    return 0 if math.isnan(value) else value


def parse_clock_to_seconds(clock: str) -> float:
    """Parse '[[H:]M:]S[.mmm]' back into seconds. Never raises.

    Unparsable fields count as zero. Up to six colon-separated fields are
    read, right to left as seconds, minutes, hours, days, weeks, months.
    """
    rest, *fraction = clock.split(".")
    milliseconds = fraction[0] if fraction else ""
    parts = rest.split(":")[-len(CLOCK_PROGRESSION) :]
    progression = CLOCK_PROGRESSION[-len(parts) :]

    seconds = 0.0
    for part, size in zip(parts, progression):
        seconds += _clock_field(part) * (size / 1000)
    return seconds + _clock_field(milliseconds) / 1000
