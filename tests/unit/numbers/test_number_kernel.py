"""Tests for strmech/numbers/kernel.py"""

from decimal import Decimal
from unittest import mock

import pytest

from strmech.exceptions import InvalidArgumentError, InvalidSpecError
from strmech.model.enums import NumberRoundingType, NumericSignValueType, NumericValueType
from strmech.numbers.kernel import NumberStrKernel


def _kernel(text: str) -> NumberStrKernel:
    return NumberStrKernel.new_from_decimal(Decimal(text))


class TestConstructors:
    def test_new_zero(self) -> None:
        kernel = NumberStrKernel.new_zero(2)
        assert kernel.pure_number_str() == "0.00"
        assert kernel.number_sign is NumericSignValueType.ZERO
        with pytest.raises(InvalidArgumentError):
            NumberStrKernel.new_zero(-1)

    def test_new_from_digits_normalises(self) -> None:
        kernel = NumberStrKernel.new_from_digits("000123", "450", NumericSignValueType.NEGATIVE)
        assert kernel.integer_digits == "123"
        assert kernel.fractional_digits == "450"
        assert kernel.pure_number_str() == "-123.450"

    def test_zero_digits_get_zero_sign(self) -> None:
        kernel = NumberStrKernel.new_from_digits("000", "", NumericSignValueType.NEGATIVE)
        assert kernel.number_sign is NumericSignValueType.ZERO
        assert kernel.pure_number_str() == "0"

    def test_new_from_digits_rejects_bad_input(self) -> None:
        with pytest.raises(InvalidArgumentError):
            NumberStrKernel.new_from_digits("12a")
        with pytest.raises(InvalidArgumentError):
            NumberStrKernel.new_from_digits("12", "", NumericSignValueType.NONE)
        with pytest.raises(TypeError):
            NumberStrKernel.new_from_digits(12)  # type: ignore[arg-type]

    def test_new_from_int(self) -> None:
        assert NumberStrKernel.new_from_int(-42).pure_number_str() == "-42"
        assert NumberStrKernel.new_from_int(0).is_zero()
        with pytest.raises(TypeError):
            NumberStrKernel.new_from_int(True)

    def test_new_from_float_uses_shortest_repr(self) -> None:
        assert NumberStrKernel.new_from_float(0.1).pure_number_str() == "0.1"
        assert NumberStrKernel.new_from_float(-1234.5).pure_number_str() == "-1234.5"

    def test_new_from_decimal(self) -> None:
        assert _kernel("-0.0012").pure_number_str() == "-0.0012"
        assert _kernel("1E+3").pure_number_str() == "1000"
        with pytest.raises(InvalidArgumentError):
            NumberStrKernel.new_from_decimal(Decimal("NaN"))


class TestConversions:
    def test_value_type(self) -> None:
        assert _kernel("12").numeric_value_type() is NumericValueType.INTEGER
        assert _kernel("1.2").numeric_value_type() is NumericValueType.FLOATING_POINT

    def test_to_decimal_int_float(self) -> None:
        kernel = _kernel("-12.75")
        assert kernel.to_decimal() == Decimal("-12.75")
        assert kernel.to_int() == -12
        assert kernel.to_float() == -12.75
        assert str(kernel) == "-12.75"

    def test_validate_sign_consistency(self) -> None:
        kernel = NumberStrKernel(integer_digits="5", number_sign=NumericSignValueType.ZERO)
        with pytest.raises(InvalidSpecError):
            kernel.validate()
        assert not NumberStrKernel(integer_digits="").is_valid()
        assert NumberStrKernel().is_valid()


class TestRounding:
    @pytest.mark.parametrize(
        "rounding, value, expected",
        [
            (NumberRoundingType.HALF_AWAY_FROM_ZERO, "2.5", "3"),
            (NumberRoundingType.HALF_AWAY_FROM_ZERO, "-2.5", "-3"),
            (NumberRoundingType.HALF_TOWARDS_ZERO, "2.5", "2"),
            (NumberRoundingType.HALF_TOWARDS_ZERO, "-2.5", "-2"),
            (NumberRoundingType.HALF_TOWARDS_ZERO, "2.6", "3"),
            (NumberRoundingType.HALF_UP_WITH_NEG_NUMS, "2.5", "3"),
            (NumberRoundingType.HALF_UP_WITH_NEG_NUMS, "-2.5", "-2"),
            (NumberRoundingType.HALF_DOWN_WITH_NEG_NUMS, "2.5", "2"),
            (NumberRoundingType.HALF_DOWN_WITH_NEG_NUMS, "-2.5", "-3"),
            (NumberRoundingType.HALF_TO_EVEN, "2.5", "2"),
            (NumberRoundingType.HALF_TO_EVEN, "3.5", "4"),
            (NumberRoundingType.HALF_TO_ODD, "2.5", "3"),
            (NumberRoundingType.HALF_TO_ODD, "3.5", "3"),
            (NumberRoundingType.HALF_TO_ODD, "-2.5", "-3"),
            (NumberRoundingType.HALF_TO_ODD, "2.4", "2"),
            (NumberRoundingType.FLOOR, "-2.1", "-3"),
            (NumberRoundingType.FLOOR, "2.9", "2"),
            (NumberRoundingType.CEILING, "2.1", "3"),
            (NumberRoundingType.CEILING, "-2.9", "-2"),
            (NumberRoundingType.TRUNCATE, "-2.9", "-2"),
        ],
    )
    def test_rounding_modes_to_integer(self, rounding: NumberRoundingType, value: str, expected: str) -> None:
        assert _kernel(value).round(rounding, 0).pure_number_str() == expected

    def test_rounding_fraction_digits(self) -> None:
        kernel = _kernel("1234.5678")
        assert kernel.round(NumberRoundingType.HALF_AWAY_FROM_ZERO, 2).pure_number_str() == "1234.57"
        assert kernel.round(NumberRoundingType.TRUNCATE, 3).pure_number_str() == "1234.567"

    def test_rounding_pads_fraction(self) -> None:
        assert _kernel("1.5").round(NumberRoundingType.HALF_TO_EVEN, 3).pure_number_str() == "1.500"

    def test_rounding_to_zero_drops_sign(self) -> None:
        rounded = _kernel("-0.4").round(NumberRoundingType.HALF_AWAY_FROM_ZERO, 0)
        assert rounded.pure_number_str() == "0"
        assert rounded.number_sign is NumericSignValueType.ZERO

    def test_no_rounding_returns_copy(self) -> None:
        kernel = _kernel("1.23456")
        rounded = kernel.round(NumberRoundingType.NO_ROUNDING, 2)
        assert rounded.equal(kernel)
        assert rounded is not kernel

    def test_randomly_chooses_neighbour_on_tie(self) -> None:
        kernel = _kernel("2.5")
        with mock.patch("strmech.numbers.kernel.random.choice", side_effect=lambda options: options[1]):
            assert kernel.round(NumberRoundingType.RANDOMLY, 0).pure_number_str() == "3"
        with mock.patch("strmech.numbers.kernel.random.choice", side_effect=lambda options: options[0]):
            assert kernel.round(NumberRoundingType.RANDOMLY, 0).pure_number_str() == "2"

    def test_randomly_without_tie_is_deterministic(self) -> None:
        assert _kernel("2.7").round(NumberRoundingType.RANDOMLY, 0).pure_number_str() == "3"

    def test_invalid_rounding_arguments(self) -> None:
        with pytest.raises(InvalidArgumentError):
            _kernel("1.5").round(NumberRoundingType.HALF_TO_EVEN, -1)
        with pytest.raises(TypeError):
            _kernel("1.5").round("HalfToEven", 1)  # type: ignore[arg-type]


class TestCopySerialize:
    def test_equal_is_digit_exact(self) -> None:
        assert not _kernel("1.50").equal(_kernel("1.5"))
        assert _kernel("1.5").equal(_kernel("1.5"))

    def test_dict_round_trip(self) -> None:
        kernel = _kernel("-98.76")
        data = kernel.to_dict()
        assert data == {"integer_digits": "98", "fractional_digits": "76", "number_sign": "Negative"}
        assert NumberStrKernel.from_dict(data).equal(kernel)

    def test_copy_is_independent(self) -> None:
        kernel = _kernel("5")
        copied = kernel.copy()
        copied.integer_digits = "6"
        assert kernel.integer_digits == "5"
