"""Number-to-string primitives mirroring an en-US host's number formatting.

Rounding is half away from zero. Floats are converted through their
shortest repr so that 1.005 rounds as written.
"""

import math
from decimal import ROUND_HALF_UP, Decimal, localcontext
from typing import Any, Optional

from readout.units import COMPACT_STEPS

_FLOAT_ONLY_SPELLINGS = ("inf", "+inf", "-inf", "infinity", "+infinity", "-infinity", "nan")


def _decimal(value: float) -> Decimal:
    return Decimal(repr(float(value)))


def round_significant(value: Decimal, digits: int) -> Decimal:
    """Round to a count of significant digits."""
    if not value:
        return value
    return quantize(value, value.adjusted() - digits + 1)


def quantize(value: Decimal, exponent: int) -> Decimal:
    """Round half up to a multiple of 10**exponent.

    Precision grows with the value, so 1e40 quantized to whole units keeps
    all 41 digits instead of overflowing the default 28-digit context.
    """
    with localcontext() as ctx:
        ctx.prec = max(value.adjusted() - exponent + 2, ctx.prec)
        return value.quantize(Decimal(1).scaleb(exponent), rounding=ROUND_HALF_UP)


def _strip_fraction_zeros(text: str) -> str:
    if "." not in text:
        return text
    return text.rstrip("0").rstrip(".")


def _non_finite(value: float) -> Optional[str]:
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "-∞" if value < 0 else "∞"
    return None


def to_locale_string(
    value: float,
    maximum_significant_digits: Optional[int] = None,
    maximum_fraction_digits: int = 3,
) -> str:
    """Group thousands and trim the fraction, e.g. 1234.5 -> "1,234.5".

    maximum_significant_digits wins over maximum_fraction_digits when both
    are given. Trailing fraction zeros are always dropped.
    """
    special = _non_finite(value)
    if special is not None:
        return special

    d = _decimal(value)
    if maximum_significant_digits:
        d = round_significant(d, maximum_significant_digits)
    else:
        d = quantize(d, -maximum_fraction_digits)
    text = _strip_fraction_zeros(f"{d:,f}")
    return "0" if text == "-0" else text


def to_compact_string(value: float, significant_digits: int) -> str:
    """Short compact notation with a fixed count of significant digits.

    e.g. 1234 -> '1.23K', 12 -> '12.0', 999_999 -> '1.00M'
    """
    special = _non_finite(value)
    if special is not None:
        return special

    sign = "-" if value < 0 else ""
    magnitude = round_significant(abs(_decimal(value)), significant_digits)
    suffix = ""
    for exponent, step_suffix in COMPACT_STEPS:
        if magnitude >= Decimal(1).scaleb(exponent):
            magnitude = magnitude.scaleb(-exponent)
            suffix = step_suffix
            break
    if magnitude:
        magnitude = quantize(magnitude, min(magnitude.adjusted() - significant_digits + 1, 0))
    return f"{sign}{magnitude:f}{suffix}"


def plain_number_str(value: float) -> str:
    """Shortest plain rendering: 1.0 -> '1', 0.5 -> '0.5'."""
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "-Infinity" if value < 0 else "Infinity"
    if float(value).is_integer() and abs(value) < 1e21:
        return str(int(value))
    return repr(float(value))


def to_number(value: Any) -> float:
    """Lenient numeric coercion: '' -> 0, ' 12 ' -> 12, 'abc' -> NaN."""
    if isinstance(value, bool):
        return float(value)
    if isinstance(value, (int, float)):
        return value
    if value is None:
        return 0.0
    text = str(value).strip()
    if not text:
        return 0.0
    if text in ("Infinity", "+Infinity", "-Infinity"):
        return -math.inf if text.startswith("-") else math.inf
    if "_" in text or text.lower() in _FLOAT_ONLY_SPELLINGS:
        # float() would accept these
        return math.nan
    try:
        return float(text)
    except ValueError:
        return math.nan
