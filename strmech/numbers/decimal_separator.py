"""
numbers/decimal_separator.py

(Краткое RU: Спецификация десятичного разделителя.)

EN: Decimal separator spec ("." in the US, "," in most of Europe). Like the
negative sign specs it carries per-pass processing flags: only the first
separator found in a number string is significant.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, Final, Sequence

from ..exceptions import InvalidArgumentError, InvalidSpecError
from ..model.rune_array import RuneArrayDto

logger: Final = logging.getLogger(__name__)


@dataclass(slots=True)
class DecimalSeparatorSpec:
    separator_chars: RuneArrayDto = field(default_factory=RuneArrayDto)
    found_decimal_separator: bool = False
    found_index: int = -1

    @staticmethod
    def new(separator: str) -> "DecimalSeparatorSpec":
        if not isinstance(separator, str):
            raise TypeError(f"separator must be str, got {type(separator).__name__}")
        if not separator:
            raise InvalidArgumentError("Decimal separator is an empty string")
        return DecimalSeparatorSpec(separator_chars=RuneArrayDto.new(separator))

    @staticmethod
    def new_united_states() -> "DecimalSeparatorSpec":
        return DecimalSeparatorSpec.new(".")

    @staticmethod
    def new_european() -> "DecimalSeparatorSpec":
        return DecimalSeparatorSpec.new(",")

    @property
    def text(self) -> str:
        return self.separator_chars.text

    def empty_processing_flags(self) -> None:
        self.found_decimal_separator = False
        self.found_index = -1

    def search(self, target: Sequence[str], index: int) -> bool:
        """Record and report a separator match at index. Returns False once one was found."""
        if self.found_decimal_separator:
            return False
        if self.separator_chars.matches_at(target, index):
            self.found_decimal_separator = True
            self.found_index = index
            return True
        return False

    def validate(self) -> None:
        if self.separator_chars.is_empty():
            raise InvalidSpecError("Decimal separator characters are empty")
        self.separator_chars.validate()
        if any(char.isdigit() for char in self.separator_chars.chars):
            raise InvalidSpecError(f"Decimal separator {self.text!r} contains numeric digits")

    def is_valid(self) -> bool:
        try:
            self.validate()
        except InvalidSpecError:
            return False
        return True

    def copy(self) -> "DecimalSeparatorSpec":
        return DecimalSeparatorSpec(
            separator_chars=self.separator_chars.copy(),
            found_decimal_separator=self.found_decimal_separator,
            found_index=self.found_index,
        )

    def equal(self, other: "DecimalSeparatorSpec") -> bool:
        return self.separator_chars.equal(other.separator_chars)

    def to_dict(self) -> Dict[str, Any]:
        return {"separator_chars": self.text}

    @staticmethod
    def from_dict(data: Dict[str, Any]) -> "DecimalSeparatorSpec":
        return DecimalSeparatorSpec.new(data["separator_chars"])

    def __str__(self) -> str:
        return self.text


__all__ = ["DecimalSeparatorSpec"]
