"""Number abbreviation (1000 -> 1k) and decimal trimming."""

import math
from decimal import Decimal
from typing import Optional, Union

from readout.formatting.locale import round_significant, to_locale_string, to_number
from readout.units import ABBREVIATION_STEPS

Number = Union[int, float]


def format_float(number: float, places: int) -> float:
    """Cut number down to places decimals.

    This truncates toward zero rather than rounding: format_float(1.239, 2)
    is 1.23 and format_float(-1.239, 2) is -1.23.
    """
    if not math.isfinite(number):
        return number
    multiplier = 10**places
    return int(number * multiplier) / multiplier


def _trim_to_precision(value: int, digits: int) -> str:
    return str(int(round_significant(Decimal(value), digits)))


def format_abbreviated_number(
    number: Union[Number, str],
    maximum_significant_digits: Optional[int] = None,
    include_decimals: bool = False,
) -> str:
    """Format a number with an abbreviation, e.g. 1000 -> '1k', 1500 -> '1.5k'.

    Args:
        number: Number or numeric string. Strings are coerced with
            to_number(), so 'abc' renders as 'NaN'.
        maximum_significant_digits: Significant digits to keep.
        include_decimals: Keep non-zero decimals even for large quotients,
            e.g. 12_345 -> '12.3k' instead of '12k'.

    Returns:
        Abbreviated string with a k/m/b suffix, or the grouped number when
        below 1000.
    """
    number = to_number(number)
    if not math.isfinite(number):
        return to_locale_string(number)

    prefix = "-" if number < 0 else ""
    magnitude = abs(number)

    for threshold, suffix in ABBREVIATION_STEPS:
        short_value = math.floor(magnitude / threshold)
        if short_value <= 0:
            continue

        fits_bound = magnitude % threshold == 0
        if not include_decimals and (short_value > 10 or fits_bound):
            if maximum_significant_digits is None:
                return f"{prefix}{short_value}{suffix}"
            formatted = _trim_to_precision(short_value, maximum_significant_digits)
            return f"{prefix}{formatted}{suffix}"

        formatted = to_locale_string(
            format_float(magnitude / threshold, maximum_significant_digits or 1),
            maximum_significant_digits=maximum_significant_digits,
        )
        return f"{prefix}{formatted}{suffix}"

    return to_locale_string(number, maximum_significant_digits=maximum_significant_digits)


def format_abbreviated_number_with_dynamic_precision(value: Union[Number, str]) -> str:
    """Abbreviate with about two decimals, no forced trailing zeros.

    e.g. 1000 -> '1k', 1234 -> '1.23k'
    """
    number = to_number(value)
    if number == 0:
        return "0"
    if not math.isfinite(number):
        return to_locale_string(number)

    log10 = math.log10(abs(number))
    num_of_digits = 1 if log10 < 0 else math.floor(log10) + 1

    max_step = ABBREVIATION_STEPS[0][0]

    # Past the largest step the digit count comes from the quotient, otherwise
    # from the digits modulo 3 (the zeroes between steps)
    if number > max_step:
        num_of_formatted_digits = math.floor(math.log10(number / max_step))
    else:
        remainder = num_of_digits % 3
        num_of_formatted_digits = max(3 if remainder == 0 else remainder, 0)

    return format_abbreviated_number(value, num_of_formatted_digits + 2, True)


def format_number_with_dynamic_decimal_points(value: float, max_fraction_digits: int = 2) -> str:
    """Round to max_fraction_digits without forcing trailing zeros.

    Small values keep their first significant digit: 0.0001234 -> '0.00012'.
    """
    if value == 0 or not math.isfinite(value):
        return to_locale_string(value)

    exponent = math.floor(math.log10(abs(value)))
    maximum_fraction_digits = max_fraction_digits if exponent >= 0 else abs(exponent) + 1
    return to_locale_string(value, maximum_fraction_digits=maximum_fraction_digits)
