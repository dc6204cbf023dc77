"""Percentage and per-unit rate formatting."""

import math
from decimal import Decimal
from typing import Optional, Union

from readout.config.settings import get_setting
from readout.formatting.locale import (
    plain_number_str,
    quantize,
    to_compact_string,
    to_locale_string,
)
from readout.units import RATE_UNIT_LABELS, RateUnit


def _round(value: float, places: int) -> float:
    """Round half up at places decimals."""
    return float(quantize(Decimal(repr(float(value))), -places))


def format_percentage(
    value: float, places: Optional[int] = None, minimum_value: float = 0
) -> str:
    """Format a value between 0 and 1 as a percentage, e.g. 0.1234 -> '12.34%'.

    Values at or below minimum_value render as '<{minimum_value * 100}%'.
    """
    if value == 0:
        return "0%"
    if not math.isfinite(value):
        return f"{to_locale_string(value)}%"

    if places is None:
        places = get_setting("percentage", "places", 2)

    if abs(value) <= minimum_value:
        return f"<{plain_number_str(minimum_value * 100)}%"

    return f"{to_locale_string(_round(value * 100, places), maximum_fraction_digits=places)}%"


def rate_unit_label(unit: Union[RateUnit, str]) -> str:
    """Suffix for a rate unit, e.g. '/s'. Configured labels take priority."""
    unit = RateUnit(unit)
    labels = get_setting("rate", "labels") or {}
    return labels.get(unit.value, RATE_UNIT_LABELS[unit])


def format_rate(
    value: float,
    unit: Union[RateUnit, str] = RateUnit.PER_SECOND,
    minimum_value: float = 0,
    significant_digits: Optional[int] = None,
) -> str:
    """Format a rate in compact notation with a unit suffix, e.g. '1.23K/s'.

    There is no localized compact per-unit form, so the label is appended as
    is and never translated.
    """
    label = rate_unit_label(unit)

    if value == 0:
        return f"0{label}"

    if significant_digits is None:
        significant_digits = get_setting("rate", "significant_digits", 3)

    if value <= minimum_value:
        return f"<{plain_number_str(minimum_value)}{label}"

    return f"{to_compact_string(value, significant_digits)}{label}"
