"""Human-readable formatting for durations, counts, percentages and rates."""

from readout.formatting import (
    format_abbreviated_number,
    format_abbreviated_number_with_dynamic_precision,
    format_float,
    format_number_with_dynamic_decimal_points,
    format_percentage,
    format_rate,
    format_seconds_to_clock,
    format_span_operation,
    get_exact_duration,
    parse_clock_to_seconds,
    user_display_name,
)
from readout.units import RateUnit

__version__ = "0.1.0"

__all__ = [
    "get_exact_duration",
    "format_seconds_to_clock",
    "parse_clock_to_seconds",
    "format_float",
    "format_abbreviated_number",
    "format_abbreviated_number_with_dynamic_precision",
    "format_number_with_dynamic_decimal_points",
    "format_percentage",
    "format_rate",
    "user_display_name",
    "format_span_operation",
    "RateUnit",
]
