"""
numbers/kernel.py

(Краткое RU: Ядро числовой строки: цифры целой и дробной части плюс знак числа.
Округление, преобразование в Decimal/int/float и форматирование.)

EN: NumberStrKernel holds a number as plain digit strings and a sign value.
The parser produces kernels; NumStrFormatSpec renders them. Arithmetic is
delegated to ``decimal`` so no precision is lost between parse and format.
"""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from decimal import (
    ROUND_CEILING,
    ROUND_DOWN,
    ROUND_FLOOR,
    ROUND_HALF_DOWN,
    ROUND_HALF_EVEN,
    ROUND_HALF_UP,
    ROUND_UP,
    Decimal,
    InvalidOperation,
    localcontext,
)
from typing import TYPE_CHECKING, Any, Dict, Final

from ..exceptions import InvalidArgumentError, InvalidSpecError
from ..model.enums import NumberRoundingType, NumericSignValueType, NumericValueType

if TYPE_CHECKING:
    from .formatting import NumStrFormatSpec

logger: Final = logging.getLogger(__name__)

MAX_ROUNDING_DIGITS: Final[int] = 1_000

# Rounding modes that map directly onto decimal; sign-aware ones are resolved in _quantize
_DIRECT_MODES: Final[Dict[NumberRoundingType, str]] = {
    NumberRoundingType.HALF_AWAY_FROM_ZERO: ROUND_HALF_UP,
    NumberRoundingType.HALF_TOWARDS_ZERO: ROUND_HALF_DOWN,
    NumberRoundingType.HALF_TO_EVEN: ROUND_HALF_EVEN,
    NumberRoundingType.FLOOR: ROUND_FLOOR,
    NumberRoundingType.CEILING: ROUND_CEILING,
    NumberRoundingType.TRUNCATE: ROUND_DOWN,
}


def _is_digits(text: str) -> bool:
    return all("0" <= char <= "9" for char in text)


@dataclass(slots=True)
class NumberStrKernel:
    """
    Number stored as digit strings.

    Attributes:
        integer_digits: digits left of the decimal separator, never empty.
        fractional_digits: digits right of the separator, may be empty.
        number_sign: NEGATIVE, ZERO or POSITIVE. ZERO iff every digit is "0".
    """

    integer_digits: str = "0"
    fractional_digits: str = ""
    number_sign: NumericSignValueType = NumericSignValueType.ZERO

    # --- constructors ---

    @staticmethod
    def new_zero(fractional_digits: int = 0) -> "NumberStrKernel":
        if fractional_digits < 0:
            raise InvalidArgumentError(f"fractional_digits must be >= 0, got {fractional_digits}")
        return NumberStrKernel(fractional_digits="0" * fractional_digits)

    @staticmethod
    def new_from_digits(
        integer_digits: str,
        fractional_digits: str = "",
        number_sign: NumericSignValueType = NumericSignValueType.POSITIVE,
    ) -> "NumberStrKernel":
        """
        Build a kernel from digit strings.

        Leading integer zeros are dropped (one is kept). A zero value always
        gets the ZERO sign; a non-zero value with the ZERO sign becomes POSITIVE.
        """
        if not isinstance(integer_digits, str) or not isinstance(fractional_digits, str):
            raise TypeError("integer_digits and fractional_digits must be str")
        if not _is_digits(integer_digits) or not _is_digits(fractional_digits):
            raise InvalidArgumentError(
                f"Digit strings contain non-numeric characters: {integer_digits!r}.{fractional_digits!r}"
            )
        if not isinstance(number_sign, NumericSignValueType) or not number_sign.is_valid():
            raise InvalidArgumentError(f"Invalid number sign: {number_sign!r}")
        kernel = NumberStrKernel(
            integer_digits=integer_digits,
            fractional_digits=fractional_digits,
            number_sign=number_sign,
        )
        kernel._normalise()
        return kernel

    @staticmethod
    def new_from_int(value: int) -> "NumberStrKernel":
        if isinstance(value, bool) or not isinstance(value, int):
            raise TypeError(f"value must be int, got {type(value).__name__}")
        sign = NumericSignValueType.NEGATIVE if value < 0 else NumericSignValueType.POSITIVE
        return NumberStrKernel.new_from_digits(str(abs(value)), "", sign)

    @staticmethod
    def new_from_decimal(value: Decimal) -> "NumberStrKernel":
        if not isinstance(value, Decimal):
            raise TypeError(f"value must be Decimal, got {type(value).__name__}")
        if not value.is_finite():
            raise InvalidArgumentError(f"Cannot build a number string from {value}")
        text = format(abs(value), "f")
        integer, _, fraction = text.partition(".")
        sign = NumericSignValueType.NEGATIVE if value.is_signed() else NumericSignValueType.POSITIVE
        return NumberStrKernel.new_from_digits(integer, fraction, sign)

    @staticmethod
    def new_from_float(value: float) -> "NumberStrKernel":
        """Use the shortest repr of value, so 0.1 becomes "0.1" and not its binary expansion."""
        if not isinstance(value, (float, int)) or isinstance(value, bool):
            raise TypeError(f"value must be float, got {type(value).__name__}")
        return NumberStrKernel.new_from_decimal(Decimal(repr(float(value))))

    # --- state ---

    def _normalise(self) -> None:
        self.integer_digits = self.integer_digits.lstrip("0") or "0"
        if self.is_zero():
            self.number_sign = NumericSignValueType.ZERO
        elif self.number_sign is NumericSignValueType.ZERO:
            self.number_sign = NumericSignValueType.POSITIVE

    def is_zero(self) -> bool:
        return not self.integer_digits.strip("0") and not self.fractional_digits.strip("0")

    def is_negative(self) -> bool:
        return self.number_sign is NumericSignValueType.NEGATIVE

    def numeric_value_type(self) -> NumericValueType:
        if self.fractional_digits:
            return NumericValueType.FLOATING_POINT
        return NumericValueType.INTEGER

    def validate(self) -> None:
        if not self.integer_digits:
            raise InvalidSpecError("Integer digits are empty")
        if not _is_digits(self.integer_digits) or not _is_digits(self.fractional_digits):
            raise InvalidSpecError("Kernel digits contain non-numeric characters")
        if not isinstance(self.number_sign, NumericSignValueType) or not self.number_sign.is_valid():
            raise InvalidSpecError(f"Invalid number sign: {self.number_sign!r}")
        if self.is_zero() != (self.number_sign is NumericSignValueType.ZERO):
            raise InvalidSpecError(
                f"Number sign {self.number_sign.display_name} does not match value {self.pure_number_str()}"
            )

    def is_valid(self) -> bool:
        try:
            self.validate()
        except InvalidSpecError:
            return False
        return True

    # --- conversions ---

    def pure_number_str(self) -> str:
        """Digits with a leading "-" when negative and "." before the fraction, e.g. "-1234.56"."""
        text = self.integer_digits
        if self.fractional_digits:
            text = f"{text}.{self.fractional_digits}"
        if self.is_negative():
            text = "-" + text
        return text

    def to_decimal(self) -> Decimal:
        return Decimal(self.pure_number_str())

    def to_int(self) -> int:
        """Integer value with the fraction truncated."""
        value = int(self.integer_digits)
        return -value if self.is_negative() else value

    def to_float(self) -> float:
        return float(self.to_decimal())

    # --- rounding ---

    def round(self, rounding_type: NumberRoundingType, fractional_digits: int) -> "NumberStrKernel":
        """
        Return a new kernel rounded to fractional_digits places.

        The result always carries exactly fractional_digits fraction digits
        (padding with zeros if needed). NONE and NO_ROUNDING return a copy.

        Raises:
            InvalidArgumentError: for a negative or excessive digit count.
        """
        if not isinstance(rounding_type, NumberRoundingType):
            raise TypeError(f"rounding_type must be NumberRoundingType, got {type(rounding_type).__name__}")
        if rounding_type in (NumberRoundingType.NONE, NumberRoundingType.NO_ROUNDING):
            return self.copy()
        if fractional_digits < 0 or fractional_digits > MAX_ROUNDING_DIGITS:
            raise InvalidArgumentError(
                f"fractional_digits must be 0..{MAX_ROUNDING_DIGITS}, got {fractional_digits}"
            )

        value = self.to_decimal()
        with localcontext() as ctx:
            ctx.prec = max(28, len(self.integer_digits) + fractional_digits + 4)
            try:
                rounded = self._quantize(value, rounding_type, fractional_digits)
            except InvalidOperation as exc:
                raise InvalidArgumentError(f"Cannot round {self.pure_number_str()}", cause=exc) from exc

        text = format(abs(rounded), "f")
        integer, _, fraction = text.partition(".")
        sign = NumericSignValueType.NEGATIVE if self.is_negative() else NumericSignValueType.POSITIVE
        result = NumberStrKernel.new_from_digits(integer, fraction, sign)
        logger.debug(
            "Rounded %s -> %s (%s, %d digits)",
            self.pure_number_str(),
            result.pure_number_str(),
            rounding_type.display_name,
            fractional_digits,
        )
        return result

    @staticmethod
    def _quantize(value: Decimal, rounding_type: NumberRoundingType, digits: int) -> Decimal:
        unit = Decimal(1).scaleb(-digits)
        negative = value.is_signed()

        if rounding_type in _DIRECT_MODES:
            return value.quantize(unit, rounding=_DIRECT_MODES[rounding_type])
        if rounding_type is NumberRoundingType.HALF_UP_WITH_NEG_NUMS:
            return value.quantize(unit, rounding=ROUND_HALF_DOWN if negative else ROUND_HALF_UP)
        if rounding_type is NumberRoundingType.HALF_DOWN_WITH_NEG_NUMS:
            return value.quantize(unit, rounding=ROUND_HALF_UP if negative else ROUND_HALF_DOWN)

        down = value.quantize(unit, rounding=ROUND_DOWN)
        up = value.quantize(unit, rounding=ROUND_UP)
        is_tie = down != up and abs(value - down) * 2 == unit
        if not is_tie:
            return value.quantize(unit, rounding=ROUND_HALF_UP)
        if rounding_type is NumberRoundingType.HALF_TO_ODD:
            last_digit = int(abs(down).scaleb(digits)) % 10
            return down if last_digit % 2 == 1 else up
        if rounding_type is NumberRoundingType.RANDOMLY:
            return random.choice((down, up))
        raise InvalidArgumentError(f"Unsupported rounding type: {rounding_type.display_name}")

    # --- formatting ---

    def format(self, spec: "NumStrFormatSpec") -> str:
        return spec.format(self)

    # --- copy / compare / serialize ---

    def copy(self) -> "NumberStrKernel":
        return NumberStrKernel(
            integer_digits=self.integer_digits,
            fractional_digits=self.fractional_digits,
            number_sign=self.number_sign,
        )

    def equal(self, other: "NumberStrKernel") -> bool:
        """Digit-for-digit equality; "1.50" and "1.5" are not equal."""
        return (
            self.integer_digits == other.integer_digits
            and self.fractional_digits == other.fractional_digits
            and self.number_sign is other.number_sign
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "integer_digits": self.integer_digits,
            "fractional_digits": self.fractional_digits,
            "number_sign": self.number_sign.display_name,
        }

    @staticmethod
    def from_dict(data: Dict[str, Any]) -> "NumberStrKernel":
        if not isinstance(data, dict):
            raise TypeError(f"Expected dict, got {type(data).__name__}")
        return NumberStrKernel.new_from_digits(
            str(data.get("integer_digits", "0")),
            str(data.get("fractional_digits", "")),
            NumericSignValueType.parse(data.get("number_sign", "Positive")),
        )

    def __str__(self) -> str:
        return self.pure_number_str()


__all__ = ["NumberStrKernel", "MAX_ROUNDING_DIGITS"]
