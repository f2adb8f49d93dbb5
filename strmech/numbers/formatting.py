"""
numbers/formatting.py

(Краткое RU: Форматирование чисел: разделители, знаки, валюта, ширина поля и округление.)

EN: Number string format specification.

A NumStrFormatSpec turns a NumberStrKernel into display text in layers:

1. round the kernel (optional);
2. digits with integer separators and the decimal separator;
3. the innermost symbol pair: the currency symbols when they sit inside the
   number sign, otherwise the sign symbols;
4. the outer symbol pair;
5. padding to the number field.

A symbol pair marked ``OUTSIDE_NUM_FIELD`` is applied after padding. Once
one pair is outside the field every pair wrapped around it is too.

Examples (US presets):
    1234.5   -> "1,234.5"
    -1234.5  -> "($1,234.50)"    (currency preset)
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from decimal import Decimal
from typing import Any, Dict, Final, List, Optional, Tuple, Union

from ..exceptions import InvalidArgumentError, InvalidSpecError
from ..model.enums import CurrencyNumSignRelativePosition, NumberFieldSymbolPosition, NumberRoundingType, TextJustify
from ..strings.justify import justify_text_in_field
from .decimal_separator import DecimalSeparatorSpec
from .integer_separator import IntegerSeparatorSpec
from .kernel import MAX_ROUNDING_DIGITS, NumberStrKernel
from .negative_sign import NegNumSearchSpecCollection
from .parser import NumberStrSearchParams, parse_number_str

logger: Final = logging.getLogger(__name__)

MAX_NUMBER_FIELD_LENGTH: Final[int] = 1_000_000

NumberLike = Union[NumberStrKernel, int, float, Decimal, str]


@dataclass(slots=True)
class NumberSignSymbolSpec:
    """Symbols shown around a number for one sign value (negative, positive or zero)."""

    leading_symbols: str = ""
    trailing_symbols: str = ""
    field_position: NumberFieldSymbolPosition = NumberFieldSymbolPosition.INSIDE_NUM_FIELD

    @staticmethod
    def new_leading(
        symbols: str, field_position: NumberFieldSymbolPosition = NumberFieldSymbolPosition.INSIDE_NUM_FIELD
    ) -> "NumberSignSymbolSpec":
        spec = NumberSignSymbolSpec(leading_symbols=symbols, field_position=field_position)
        spec.validate()
        return spec

    @staticmethod
    def new_trailing(
        symbols: str, field_position: NumberFieldSymbolPosition = NumberFieldSymbolPosition.INSIDE_NUM_FIELD
    ) -> "NumberSignSymbolSpec":
        spec = NumberSignSymbolSpec(trailing_symbols=symbols, field_position=field_position)
        spec.validate()
        return spec

    @staticmethod
    def new_leading_and_trailing(
        leading: str,
        trailing: str,
        field_position: NumberFieldSymbolPosition = NumberFieldSymbolPosition.INSIDE_NUM_FIELD,
    ) -> "NumberSignSymbolSpec":
        spec = NumberSignSymbolSpec(leading_symbols=leading, trailing_symbols=trailing, field_position=field_position)
        spec.validate()
        return spec

    def is_empty(self) -> bool:
        return not self.leading_symbols and not self.trailing_symbols

    def is_outside_field(self) -> bool:
        return self.field_position is NumberFieldSymbolPosition.OUTSIDE_NUM_FIELD

    def wrap(self, text: str) -> str:
        return f"{self.leading_symbols}{text}{self.trailing_symbols}"

    def validate(self) -> None:
        if not isinstance(self.leading_symbols, str) or not isinstance(self.trailing_symbols, str):
            raise InvalidSpecError("Sign symbols must be str")
        if any(char.isdigit() for char in self.leading_symbols + self.trailing_symbols):
            raise InvalidSpecError(
                f"Sign symbols contain numeric digits: {self.leading_symbols!r} / {self.trailing_symbols!r}"
            )
        if not isinstance(self.field_position, NumberFieldSymbolPosition) or not self.field_position.is_valid():
            raise InvalidSpecError(f"Invalid number field symbol position: {self.field_position!r}")

    def copy(self) -> "NumberSignSymbolSpec":
        return NumberSignSymbolSpec(self.leading_symbols, self.trailing_symbols, self.field_position)

    def equal(self, other: "NumberSignSymbolSpec") -> bool:
        return self.to_dict() == other.to_dict()

    def to_dict(self) -> Dict[str, Any]:
        return {
            "leading_symbols": self.leading_symbols,
            "trailing_symbols": self.trailing_symbols,
            "field_position": self.field_position.display_name,
        }


@dataclass(slots=True)
class CurrencySymbolSpec:
    """Currency symbols; ``sign_relative_position`` decides "$-1" (outside) vs "-$1" (inside)."""

    leading_symbols: str = ""
    trailing_symbols: str = ""
    sign_relative_position: CurrencyNumSignRelativePosition = CurrencyNumSignRelativePosition.INSIDE_NUM_SIGN
    field_position: NumberFieldSymbolPosition = NumberFieldSymbolPosition.INSIDE_NUM_FIELD

    def is_inside_sign(self) -> bool:
        return self.sign_relative_position is CurrencyNumSignRelativePosition.INSIDE_NUM_SIGN

    def is_outside_field(self) -> bool:
        return self.field_position is NumberFieldSymbolPosition.OUTSIDE_NUM_FIELD

    def wrap(self, text: str) -> str:
        return f"{self.leading_symbols}{text}{self.trailing_symbols}"

    def validate(self) -> None:
        if not self.leading_symbols and not self.trailing_symbols:
            raise InvalidSpecError("Currency spec has neither leading nor trailing symbols")
        if any(char.isdigit() for char in self.leading_symbols + self.trailing_symbols):
            raise InvalidSpecError("Currency symbols contain numeric digits")
        if (
            not isinstance(self.sign_relative_position, CurrencyNumSignRelativePosition)
            or not self.sign_relative_position.is_valid()
        ):
            raise InvalidSpecError(f"Invalid currency sign position: {self.sign_relative_position!r}")
        if not isinstance(self.field_position, NumberFieldSymbolPosition) or not self.field_position.is_valid():
            raise InvalidSpecError(f"Invalid number field symbol position: {self.field_position!r}")

    def copy(self) -> "CurrencySymbolSpec":
        return CurrencySymbolSpec(
            self.leading_symbols, self.trailing_symbols, self.sign_relative_position, self.field_position
        )

    def equal(self, other: "CurrencySymbolSpec") -> bool:
        return self.to_dict() == other.to_dict()

    def to_dict(self) -> Dict[str, Any]:
        return {
            "leading_symbols": self.leading_symbols,
            "trailing_symbols": self.trailing_symbols,
            "sign_relative_position": self.sign_relative_position.display_name,
            "field_position": self.field_position.display_name,
        }


@dataclass(slots=True)
class NumberFieldSpec:
    """Field width and justification; field_length -1 disables padding."""

    field_length: int = -1
    justification: TextJustify = TextJustify.RIGHT

    def validate(self) -> None:
        if self.field_length != -1 and not 1 <= self.field_length <= MAX_NUMBER_FIELD_LENGTH:
            raise InvalidSpecError(
                f"Number field length must be -1 or 1..{MAX_NUMBER_FIELD_LENGTH}, got {self.field_length}"
            )
        if not isinstance(self.justification, TextJustify) or not self.justification.is_valid():
            raise InvalidSpecError(f"Invalid number field justification: {self.justification!r}")

    def pad(self, text: str) -> str:
        if self.field_length == -1:
            return text
        return justify_text_in_field(text, self.field_length, self.justification)

    def copy(self) -> "NumberFieldSpec":
        return NumberFieldSpec(self.field_length, self.justification)

    def equal(self, other: "NumberFieldSpec") -> bool:
        return self.field_length == other.field_length and self.justification is other.justification

    def to_dict(self) -> Dict[str, Any]:
        return {"field_length": self.field_length, "justification": self.justification.display_name}


@dataclass(slots=True)
class NumStrFormatSpec:
    decimal_separator: DecimalSeparatorSpec = field(default_factory=DecimalSeparatorSpec.new_united_states)
    integer_separator: IntegerSeparatorSpec = field(default_factory=IntegerSeparatorSpec.new_united_states)
    negative_sign: NumberSignSymbolSpec = field(default_factory=lambda: NumberSignSymbolSpec(leading_symbols="-"))
    positive_sign: NumberSignSymbolSpec = field(default_factory=NumberSignSymbolSpec)
    zero_sign: NumberSignSymbolSpec = field(default_factory=NumberSignSymbolSpec)
    currency: Optional[CurrencySymbolSpec] = None
    number_field: NumberFieldSpec = field(default_factory=NumberFieldSpec)
    rounding_type: NumberRoundingType = NumberRoundingType.NO_ROUNDING
    rounding_digits: int = 0
    # negative sign styles recognised when formatting number strings; None derives them from negative_sign
    negative_sign_search: Optional[NegNumSearchSpecCollection] = None

    # --- presets ---

    @staticmethod
    def new_united_states(
        field_length: int = -1, justification: TextJustify = TextJustify.RIGHT
    ) -> "NumStrFormatSpec":
        """Formats as "1,234.56" and "-1,234.56"."""
        spec = NumStrFormatSpec(
            number_field=NumberFieldSpec(field_length, justification),
            negative_sign_search=NegNumSearchSpecCollection.new_united_states(),
        )
        spec.validate()
        return spec

    @staticmethod
    def new_united_states_currency(
        field_length: int = -1, justification: TextJustify = TextJustify.RIGHT
    ) -> "NumStrFormatSpec":
        """Accounting style: "$1,234.56" / "($1,234.56)", always two decimals."""
        spec = NumStrFormatSpec(
            negative_sign=NumberSignSymbolSpec(leading_symbols="(", trailing_symbols=")"),
            currency=CurrencySymbolSpec(leading_symbols="$"),
            number_field=NumberFieldSpec(field_length, justification),
            rounding_type=NumberRoundingType.HALF_AWAY_FROM_ZERO,
            rounding_digits=2,
            negative_sign_search=NegNumSearchSpecCollection.new_united_states(),
        )
        spec.validate()
        return spec

    @staticmethod
    def new_german(field_length: int = -1, justification: TextJustify = TextJustify.RIGHT) -> "NumStrFormatSpec":
        """Formats as "1.234,56" and "-1.234,56"."""
        spec = NumStrFormatSpec(
            decimal_separator=DecimalSeparatorSpec.new_european(),
            integer_separator=IntegerSeparatorSpec.new_german(),
            number_field=NumberFieldSpec(field_length, justification),
            negative_sign_search=NegNumSearchSpecCollection.new_german(),
        )
        spec.validate()
        return spec

    @staticmethod
    def new_french(field_length: int = -1, justification: TextJustify = TextJustify.RIGHT) -> "NumStrFormatSpec":
        """Formats as "1 234,56" and "-1 234,56"."""
        spec = NumStrFormatSpec(
            decimal_separator=DecimalSeparatorSpec.new_european(),
            integer_separator=IntegerSeparatorSpec.new_french(),
            number_field=NumberFieldSpec(field_length, justification),
            negative_sign_search=NegNumSearchSpecCollection.new_french(),
        )
        spec.validate()
        return spec

    @staticmethod
    def new_signed_plain(
        field_length: int = -1, justification: TextJustify = TextJustify.RIGHT
    ) -> "NumStrFormatSpec":
        """No grouping, explicit "+" for positive values: "+1234.56" / "-1234.56" / "0"."""
        spec = NumStrFormatSpec(
            integer_separator=IntegerSeparatorSpec.new_no_separation(),
            positive_sign=NumberSignSymbolSpec(leading_symbols="+"),
            number_field=NumberFieldSpec(field_length, justification),
            negative_sign_search=NegNumSearchSpecCollection.new_united_states(),
        )
        spec.validate()
        return spec

    # --- behaviour ---

    def sign_spec_for(self, kernel: NumberStrKernel) -> NumberSignSymbolSpec:
        if kernel.is_zero():
            return self.zero_sign
        if kernel.is_negative():
            return self.negative_sign
        return self.positive_sign

    def negative_sign_search_specs(self) -> NegNumSearchSpecCollection:
        """
        Negative sign styles recognised in number strings given to format_number.

        Without an explicit ``negative_sign_search`` collection, this spec's own
        negative symbols are searched first, then the US "-" and "(...)" styles.
        """
        if self.negative_sign_search is not None:
            return self.negative_sign_search.copy()
        collection = NegNumSearchSpecCollection()
        leading = self.negative_sign.leading_symbols
        trailing = self.negative_sign.trailing_symbols
        if leading and trailing:
            collection.add_leading_and_trailing(leading, trailing)
        elif leading:
            collection.add_leading(leading)
        elif trailing:
            collection.add_trailing(trailing)
        known = {(spec.leading_symbols.text, spec.trailing_symbols.text) for spec in collection}
        for spec in NegNumSearchSpecCollection.new_united_states():
            if (spec.leading_symbols.text, spec.trailing_symbols.text) not in known:
                collection.add_spec(spec)
        return collection

    def _symbol_layers(self, sign: NumberSignSymbolSpec) -> List[Tuple[bool, Any]]:
        layers: List[Tuple[bool, Any]] = [(sign.is_outside_field(), sign)]
        if self.currency is not None:
            currency_layer = (self.currency.is_outside_field(), self.currency)
            if self.currency.is_inside_sign():
                layers.insert(0, currency_layer)
            else:
                layers.append(currency_layer)
        return layers

    def format(self, kernel: NumberStrKernel) -> str:
        """
        Render kernel as display text.

        Raises:
            InvalidSpecError: if this spec or the kernel is invalid.
        """
        self.validate()
        kernel.validate()
        value = kernel.round(self.rounding_type, self.rounding_digits)

        text = self.integer_separator.apply(value.integer_digits)
        if value.fractional_digits:
            text = f"{text}{self.decimal_separator.text}{value.fractional_digits}"

        padded = False
        for outside_field, layer in self._symbol_layers(self.sign_spec_for(value)):
            if outside_field and not padded:
                text = self.number_field.pad(text)
                padded = True
            text = layer.wrap(text)
        if not padded:
            text = self.number_field.pad(text)
        return text

    def validate(self) -> None:
        self.decimal_separator.validate()
        self.integer_separator.validate()
        if self.decimal_separator.text == self.integer_separator.separator_chars and not (
            self.integer_separator.is_separation_off()
        ):
            raise InvalidSpecError(
                f"Decimal and integer separators are both {self.decimal_separator.text!r}"
            )
        self.negative_sign.validate()
        self.positive_sign.validate()
        self.zero_sign.validate()
        if self.currency is not None:
            self.currency.validate()
        self.number_field.validate()
        if not isinstance(self.rounding_type, NumberRoundingType) or not self.rounding_type.is_valid():
            raise InvalidSpecError(f"Invalid rounding type: {self.rounding_type!r}")
        if not 0 <= self.rounding_digits <= MAX_ROUNDING_DIGITS:
            raise InvalidSpecError(f"Rounding digits must be 0..{MAX_ROUNDING_DIGITS}, got {self.rounding_digits}")
        if self.negative_sign_search is not None:
            if not isinstance(self.negative_sign_search, NegNumSearchSpecCollection):
                raise InvalidSpecError("negative_sign_search must be a NegNumSearchSpecCollection")
            self.negative_sign_search.validate()

    def is_valid(self) -> bool:
        try:
            self.validate()
        except InvalidSpecError:
            return False
        return True

    def copy(self) -> "NumStrFormatSpec":
        return NumStrFormatSpec(
            decimal_separator=self.decimal_separator.copy(),
            integer_separator=self.integer_separator.copy(),
            negative_sign=self.negative_sign.copy(),
            positive_sign=self.positive_sign.copy(),
            zero_sign=self.zero_sign.copy(),
            currency=None if self.currency is None else self.currency.copy(),
            number_field=self.number_field.copy(),
            rounding_type=self.rounding_type,
            rounding_digits=self.rounding_digits,
            negative_sign_search=None if self.negative_sign_search is None else self.negative_sign_search.copy(),
        )

    def equal(self, other: "NumStrFormatSpec") -> bool:
        return self.to_dict() == other.to_dict()

    def to_dict(self) -> Dict[str, Any]:
        return {
            "decimal_separator": self.decimal_separator.to_dict(),
            "integer_separator": self.integer_separator.to_dict(),
            "negative_sign": self.negative_sign.to_dict(),
            "positive_sign": self.positive_sign.to_dict(),
            "zero_sign": self.zero_sign.to_dict(),
            "currency": None if self.currency is None else self.currency.to_dict(),
            "number_field": self.number_field.to_dict(),
            "rounding_type": self.rounding_type.display_name,
            "rounding_digits": self.rounding_digits,
            "negative_sign_search": None
            if self.negative_sign_search is None
            else [
                {
                    "position": spec.position.display_name,
                    "leading_symbols": spec.leading_symbols.text,
                    "trailing_symbols": spec.trailing_symbols.text,
                }
                for spec in self.negative_sign_search
            ],
        }


def _to_kernel(
    value: NumberLike, spec: NumStrFormatSpec, negative_sign_specs: Optional[NegNumSearchSpecCollection]
) -> NumberStrKernel:
    if isinstance(value, NumberStrKernel):
        return value
    if isinstance(value, bool):
        raise TypeError("bool is not a number value")
    if isinstance(value, int):
        return NumberStrKernel.new_from_int(value)
    if isinstance(value, float):
        return NumberStrKernel.new_from_float(value)
    if isinstance(value, Decimal):
        return NumberStrKernel.new_from_decimal(value)
    if isinstance(value, str):
        kernel, _ = parse_number_str(
            NumberStrSearchParams(
                target=value,
                negative_sign_specs=(
                    spec.negative_sign_search_specs() if negative_sign_specs is None else negative_sign_specs
                ),
                decimal_separator=spec.decimal_separator.copy(),
            )
        )
        return kernel
    raise TypeError(f"Unsupported number value type: {type(value).__name__}")


def format_number(
    value: NumberLike,
    spec: Optional[NumStrFormatSpec] = None,
    negative_sign_specs: Optional[NegNumSearchSpecCollection] = None,
) -> str:
    """
    Format an int, float, Decimal, number string or kernel.

    String input is parsed with the decimal separator of the format spec and
    with negative_sign_specs, or else spec.negative_sign_search_specs(), so a
    German "1.234,56-" keeps its sign under NumStrFormatSpec.new_german().

    Example:
        >>> format_number(-1234.5, NumStrFormatSpec.new_united_states_currency())
        '($1,234.50)'
    """
    if spec is None:
        spec = NumStrFormatSpec.new_united_states()
    if not isinstance(spec, NumStrFormatSpec):
        raise InvalidArgumentError(f"spec must be NumStrFormatSpec, got {type(spec).__name__}")
    if negative_sign_specs is not None and not isinstance(negative_sign_specs, NegNumSearchSpecCollection):
        raise InvalidArgumentError(
            f"negative_sign_specs must be NegNumSearchSpecCollection, got {type(negative_sign_specs).__name__}"
        )
    return spec.format(_to_kernel(value, spec, negative_sign_specs))


__all__ = [
    "CurrencySymbolSpec",
    "MAX_NUMBER_FIELD_LENGTH",
    "NumberFieldSpec",
    "NumberSignSymbolSpec",
    "NumStrFormatSpec",
    "format_number",
]
