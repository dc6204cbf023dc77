"""Tests for readout.formatting.numbers."""

import math

from readout.formatting.numbers import (
    format_abbreviated_number,
    format_abbreviated_number_with_dynamic_precision,
    format_float,
    format_number_with_dynamic_decimal_points,
)


class TestFormatFloat:
    def test_truncates_instead_of_rounding(self):
        assert format_float(1.239, 2) == 1.23

    def test_truncates_toward_zero(self):
        assert format_float(-1.239, 2) == -1.23

    def test_zero_places(self):
        assert format_float(5.9, 0) == 5

    def test_non_finite_passthrough(self):
        assert math.isnan(format_float(math.nan, 2))
        assert format_float(math.inf, 2) == math.inf


class TestFormatAbbreviatedNumber:
    def test_exact_thousand(self):
        assert format_abbreviated_number(1000) == "1k"

    def test_negative(self):
        assert format_abbreviated_number(-500000) == "-500k"
        assert format_abbreviated_number(-1500) == "-1.5k"

    def test_small_quotient_keeps_one_decimal(self):
        assert format_abbreviated_number(1500) == "1.5k"
        assert format_abbreviated_number(1234) == "1.2k"
        assert format_abbreviated_number(10_500) == "10.5k"

    def test_large_quotient_drops_decimals(self):
        assert format_abbreviated_number(15_000) == "15k"
        assert format_abbreviated_number(123_456) == "123k"

    def test_include_decimals(self):
        assert format_abbreviated_number(1234, None, True) == "1.2k"
        assert format_abbreviated_number(12_345, None, True) == "12.3k"
        assert format_abbreviated_number(12_345_678, include_decimals=True) == "12.3m"

    def test_significant_digits_on_short_value(self):
        assert format_abbreviated_number(12_345, 2) == "12k"
        assert format_abbreviated_number(12_345, 1) == "10k"
        assert format_abbreviated_number(123_456, 2) == "120k"

    def test_millions_and_billions(self):
        assert format_abbreviated_number(1_000_000) == "1m"
        assert format_abbreviated_number(2_500_000_000) == "2.5b"
        assert format_abbreviated_number(1_000_000_000_000) == "1000b"

    def test_below_thousand(self):
        assert format_abbreviated_number(999) == "999"
        assert format_abbreviated_number(0) == "0"
        assert format_abbreviated_number(12.5) == "12.5"

    def test_numeric_string(self):
        assert format_abbreviated_number("2000") == "2k"

    def test_non_numeric_string_is_nan(self):
        assert format_abbreviated_number("abc") == "NaN"

    def test_infinity(self):
        assert format_abbreviated_number(math.inf) == "∞"


class TestFormatAbbreviatedNumberWithDynamicPrecision:
    def test_zero(self):
        assert format_abbreviated_number_with_dynamic_precision(0) == "0"

    def test_exact_thousand(self):
        assert format_abbreviated_number_with_dynamic_precision(1000) == "1k"

    def test_two_decimals(self):
        assert format_abbreviated_number_with_dynamic_precision(1234) == "1.23k"
        assert format_abbreviated_number_with_dynamic_precision(-1234) == "-1.23k"

    def test_no_trailing_zeros(self):
        assert format_abbreviated_number_with_dynamic_precision(15_000) == "15k"
        assert format_abbreviated_number_with_dynamic_precision(1_500_000) == "1.5m"

    def test_below_thousand(self):
        assert format_abbreviated_number_with_dynamic_precision(999) == "999"
        assert format_abbreviated_number_with_dynamic_precision(0.5) == "0.5"

    def test_above_largest_step(self):
        assert format_abbreviated_number_with_dynamic_precision(2_000_000_000) == "2b"

    def test_numeric_string(self):
        assert format_abbreviated_number_with_dynamic_precision("1000") == "1k"

    def test_non_numeric_string(self):
        assert format_abbreviated_number_with_dynamic_precision("abc") == "NaN"


class TestFormatNumberWithDynamicDecimalPoints:
    def test_zero(self):
        assert format_number_with_dynamic_decimal_points(0) == "0"

    def test_non_finite(self):
        assert format_number_with_dynamic_decimal_points(math.inf) == "∞"
        assert format_number_with_dynamic_decimal_points(math.nan) == "NaN"

    def test_large_value_grouped_and_rounded(self):
        assert format_number_with_dynamic_decimal_points(1234.5678) == "1,234.57"

    def test_no_trailing_zeros(self):
        assert format_number_with_dynamic_decimal_points(1.5) == "1.5"

    def test_small_value_keeps_significant_digit(self):
        assert format_number_with_dynamic_decimal_points(0.0001234) == "0.00012"
        assert format_number_with_dynamic_decimal_points(-0.0001234) == "-0.00012"
        assert format_number_with_dynamic_decimal_points(0.123) == "0.12"

    def test_custom_max_fraction_digits(self):
        assert format_number_with_dynamic_decimal_points(1.23456, 3) == "1.235"

    def test_values_past_default_decimal_precision(self):
        assert format_number_with_dynamic_decimal_points(1e26) == "100" + ",000" * 8
        assert format_number_with_dynamic_decimal_points(1e30) == "1" + ",000" * 10
        assert format_number_with_dynamic_decimal_points(-1e30) == "-1" + ",000" * 10
