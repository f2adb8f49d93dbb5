"""
Result DTOs returned by the string extraction and number-string search routines.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any, Dict

from .enums import (
    CharSearchTerminationType,
    DataFieldTrailingDelimiterType,
    NumericSignValueType,
    NumericValueType,
    NumSignSymbolPosition,
)


@dataclass(slots=True)
class DataFieldProfile:
    """Describes one data field located inside a target string."""

    target_str: str = ""
    target_str_length: int = 0
    target_str_start_index: int = 0
    leading_keyword_delimiter: str = ""
    leading_keyword_delimiter_index: int = -1
    data_field_str: str = ""
    data_field_index: int = -1
    data_field_length: int = 0
    trailing_delimiter: str = ""
    trailing_delimiter_type: DataFieldTrailingDelimiterType = DataFieldTrailingDelimiterType.NONE
    comment_delimiter: str = ""
    comment_delimiter_index: int = -1
    end_of_line_delimiter: str = ""
    end_of_line_delimiter_index: int = -1
    target_str_last_good_index: int = -1
    next_target_str_index: int = -1

    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        data["trailing_delimiter_type"] = self.trailing_delimiter_type.display_name
        return data


@dataclass(slots=True)
class NumStrProfile:
    """Numeric digits (and kept sign/separator chars) extracted from a target string."""

    target_str: str = ""
    target_str_start_index: int = 0
    num_str: str = ""
    first_num_char_index: int = -1
    num_str_len: int = 0
    leading_sign_char: str = ""
    leading_sign_index: int = -1
    next_target_str_index: int = -1


@dataclass(slots=True)
class NegNumSearchResult:
    """Outcome of one negative-sign search step at a given target index."""

    found_negative_sign: bool = False
    found_on_previous_search: bool = False
    position: NumSignSymbolPosition = NumSignSymbolPosition.NONE
    secondary_position: NumSignSymbolPosition = NumSignSymbolPosition.NONE
    index: int = -1
    symbols: str = ""


@dataclass(slots=True)
class NumberStrSearchResults:
    """Summary of a number-string parse pass."""

    found_numeric_digits: bool = False
    found_non_zero_digits: bool = False
    found_decimal_separator: bool = False
    found_negative_sign: bool = False
    negative_sign_position: NumSignSymbolPosition = NumSignSymbolPosition.NONE
    number_sign: NumericSignValueType = NumericSignValueType.ZERO
    value_type: NumericValueType = NumericValueType.NONE
    termination_type: CharSearchTerminationType = CharSearchTerminationType.NONE
    termination_index: int = -1
    first_digit_index: int = -1
    last_digit_index: int = -1
    remainder: str = ""

    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        for key in ("negative_sign_position", "number_sign", "value_type", "termination_type"):
            data[key] = getattr(self, key).display_name
        return data


__all__ = [
    "DataFieldProfile",
    "NumStrProfile",
    "NegNumSearchResult",
    "NumberStrSearchResults",
]
