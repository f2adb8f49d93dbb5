"""
Tests for strmech/numbers/parser.py

The parser is exercised through the national presets and through
NumberStrSearchParams for window, delimiter and remainder handling.
"""

import pytest

from strmech.exceptions import InvalidArgumentError, InvalidSpecError, NumberParseError
from strmech.model.enums import (
    CharSearchTerminationType,
    NumericSignValueType,
    NumericValueType,
    NumSignSymbolPosition,
)
from strmech.numbers.decimal_separator import DecimalSeparatorSpec
from strmech.numbers.negative_sign import NegNumSearchSpecCollection
from strmech.numbers.parser import (
    NumberStrSearchParams,
    parse_french_number_str,
    parse_german_number_str,
    parse_number_str,
    parse_us_number_str,
)


class TestUnitedStates:
    @pytest.mark.parametrize(
        "text, expected",
        [
            ("1234.56", "1234.56"),
            ("$ 1,234.56", "1234.56"),
            ("-1,234", "-1234"),
            ("Total: (1,234.50)", "-1234.50"),
            ("  007 ", "7"),
            (".5", "0.5"),
        ],
    )
    def test_values(self, text: str, expected: str) -> None:
        kernel, _ = parse_us_number_str(text)
        assert kernel.pure_number_str() == expected

    def test_parenthesis_result_details(self) -> None:
        kernel, results = parse_us_number_str("Total: (1,234.50)")

        assert kernel.is_negative()
        assert results.found_negative_sign
        assert results.negative_sign_position is NumSignSymbolPosition.BEFORE_AND_AFTER
        assert results.number_sign is NumericSignValueType.NEGATIVE
        assert results.value_type is NumericValueType.FLOATING_POINT
        assert results.found_decimal_separator
        assert results.termination_type is CharSearchTerminationType.FOUND_SEARCH_TARGET
        assert results.termination_index == 16
        assert results.first_digit_index == 8
        assert results.last_digit_index == 15

    def test_unmatched_parenthesis_is_positive(self) -> None:
        kernel, results = parse_us_number_str("(1234")
        assert kernel.pure_number_str() == "1234"
        assert not results.found_negative_sign
        assert results.termination_type is CharSearchTerminationType.END_OF_TARGET_STRING

    def test_trailing_minus_is_not_negative(self) -> None:
        kernel, _ = parse_us_number_str("12-")
        assert kernel.number_sign is NumericSignValueType.POSITIVE

    def test_zero_values(self) -> None:
        kernel, results = parse_us_number_str("-0.00")
        assert kernel.number_sign is NumericSignValueType.ZERO
        assert kernel.pure_number_str() == "0.00"
        assert results.number_sign is NumericSignValueType.ZERO
        assert not results.found_non_zero_digits

    def test_integer_value_type(self) -> None:
        _, results = parse_us_number_str("42")
        assert results.value_type is NumericValueType.INTEGER
        assert results.termination_type is CharSearchTerminationType.END_OF_TARGET_STRING
        assert results.termination_index == 2

    def test_second_decimal_separator_ignored(self) -> None:
        kernel, _ = parse_us_number_str("1.2.3")
        assert kernel.pure_number_str() == "1.23"

    def test_no_digits(self) -> None:
        with pytest.raises(NumberParseError):
            parse_us_number_str("no digits")


class TestEuropean:
    def test_german_leading_and_trailing_minus(self) -> None:
        assert parse_german_number_str("-1.234,56")[0].pure_number_str() == "-1234.56"
        kernel, results = parse_german_number_str("1.234,56- EUR")
        assert kernel.pure_number_str() == "-1234.56"
        assert results.negative_sign_position is NumSignSymbolPosition.AFTER
        assert results.termination_type is CharSearchTerminationType.FOUND_SEARCH_TARGET

    def test_french(self) -> None:
        kernel, _ = parse_french_number_str("-1 234,56 €")
        assert kernel.pure_number_str() == "-1234.56"


class TestSearchParams:
    def test_termination_delimiter(self) -> None:
        kernel, results = parse_us_number_str("12.5;99", [";"])
        assert kernel.pure_number_str() == "12.5"
        assert results.termination_type is CharSearchTerminationType.TERMINATION_DELIMITERS
        assert results.termination_index == 4

    def test_delimiter_before_digits_is_skipped(self) -> None:
        kernel, _ = parse_us_number_str(";12;", [";"])
        assert kernel.pure_number_str() == "12"

    def test_search_length_limit(self) -> None:
        params = NumberStrSearchParams(target="12345", search_length=3)
        kernel, results = parse_number_str(params)
        assert kernel.pure_number_str() == "123"
        assert results.termination_type is CharSearchTerminationType.SEARCH_LENGTH_LIMIT
        assert results.termination_index == 3

    def test_start_index_and_remainder(self) -> None:
        params = NumberStrSearchParams(
            target="a=1; b=22; c=333",
            start_index=5,
            termination_delimiters=[";"],
            request_remainder=True,
        )
        kernel, results = parse_number_str(params)
        assert kernel.to_int() == 22
        assert results.remainder == "; c=333"

    def test_remainder_after_trailing_sign(self) -> None:
        params = NumberStrSearchParams(target="(12) rest", request_remainder=True)
        kernel, results = parse_number_str(params)
        assert kernel.pure_number_str() == "-12"
        assert results.termination_type is CharSearchTerminationType.FOUND_SEARCH_TARGET
        assert results.termination_index == 3
        assert results.remainder == " rest"

    def test_custom_specs(self) -> None:
        specs = NegNumSearchSpecCollection()
        specs.add_trailing(" CR")
        params = NumberStrSearchParams(
            target="1'234:50 CR",
            negative_sign_specs=specs,
            decimal_separator=DecimalSeparatorSpec.new(":"),
        )
        kernel, _ = parse_number_str(params)
        assert kernel.pure_number_str() == "-1234.50"

    def test_params_are_reusable(self) -> None:
        params = NumberStrSearchParams(target="(5)")
        first, _ = parse_number_str(params)
        second, _ = parse_number_str(params)
        assert first.equal(second)
        assert not params.negative_sign_specs[1].found_leading_sign

    def test_empty_negative_specs_allowed(self) -> None:
        params = NumberStrSearchParams(target="-5", negative_sign_specs=NegNumSearchSpecCollection())
        kernel, _ = parse_number_str(params)
        assert kernel.pure_number_str() == "5"

    @pytest.mark.parametrize(
        "kwargs",
        [
            {"target": ""},
            {"target": "12", "start_index": 2},
            {"target": "12", "search_length": 0},
            {"target": "12", "search_length": -5},
            {"target": "12", "termination_delimiters": [""]},
        ],
    )
    def test_invalid_params(self, kwargs: dict) -> None:
        with pytest.raises(InvalidArgumentError):
            parse_number_str(NumberStrSearchParams(**kwargs))

    def test_invalid_decimal_separator(self) -> None:
        params = NumberStrSearchParams(target="12", decimal_separator=DecimalSeparatorSpec())
        with pytest.raises(InvalidSpecError):
            parse_number_str(params)

    def test_results_to_dict(self) -> None:
        _, results = parse_us_number_str("-3")
        data = results.to_dict()
        assert data["number_sign"] == "Negative"
        assert data["negative_sign_position"] == "Before"
        assert data["value_type"] == "Integer"
