"""Formatters for durations, numbers, percentages and rates."""

from readout.formatting.duration import (
    format_seconds_to_clock,
    get_exact_duration,
    parse_clock_to_seconds,
)
from readout.formatting.labels import format_span_operation, user_display_name
from readout.formatting.numbers import (
    format_abbreviated_number,
    format_abbreviated_number_with_dynamic_precision,
    format_float,
    format_number_with_dynamic_decimal_points,
)
from readout.formatting.rates import format_percentage, format_rate, rate_unit_label

__all__ = [
    # Durations
    "get_exact_duration",
    "format_seconds_to_clock",
    "parse_clock_to_seconds",
    # Numbers
    "format_float",
    "format_abbreviated_number",
    "format_abbreviated_number_with_dynamic_precision",
    "format_number_with_dynamic_decimal_points",
    # Rates
    "format_percentage",
    "format_rate",
    "rate_unit_label",
    # Labels
    "user_display_name",
    "format_span_operation",
]
