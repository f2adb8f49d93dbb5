"""
numbers

Разбор и форматирование числовых строк с учётом национальных соглашений.

- Поиск знака минуса в любой позиции: "-123", "123-", "(123)".
- Десятичный разделитель и разделители групп разрядов (тысячи, индийская и китайская системы).
- NumberStrKernel: число в виде строк цифр, округление через decimal.

Public API:
    - NegativeNumberSearchSpec, NegNumSearchSpecCollection: поиск знака минуса
    - DecimalSeparatorSpec, IntegerSeparatorSpec: разделители
    - NumberStrKernel: ядро числа
    - NumberStrSearchParams, parse_number_str: разбор строки
    - NumStrFormatSpec, format_number: форматирование

Примеры:
    >>> from strmech.numbers import parse_us_number_str, NumStrFormatSpec
    >>> kernel, _ = parse_us_number_str("(1,234.5)")
    >>> kernel.format(NumStrFormatSpec.new_german())
    '-1.234,5'
"""

from .decimal_separator import DecimalSeparatorSpec
from .formatting import (
    CurrencySymbolSpec,
    NumberFieldSpec,
    NumberSignSymbolSpec,
    NumStrFormatSpec,
    format_number,
)
from .integer_separator import IntegerSeparatorSpec
from .kernel import NumberStrKernel
from .negative_sign import NegativeNumberSearchSpec, NegNumSearchSpecCollection
from .parser import (
    NumberStrSearchParams,
    parse_french_number_str,
    parse_german_number_str,
    parse_number_str,
    parse_us_number_str,
)

__all__ = [
    "CurrencySymbolSpec",
    "DecimalSeparatorSpec",
    "IntegerSeparatorSpec",
    "NegativeNumberSearchSpec",
    "NegNumSearchSpecCollection",
    "NumberFieldSpec",
    "NumberSignSymbolSpec",
    "NumberStrKernel",
    "NumberStrSearchParams",
    "NumStrFormatSpec",
    "format_number",
    "parse_french_number_str",
    "parse_german_number_str",
    "parse_number_str",
    "parse_us_number_str",
]
