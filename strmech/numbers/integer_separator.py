"""
numbers/integer_separator.py

(Краткое RU: Спецификация разделителей групп разрядов целой части числа.)

EN: Integer separator spec, a.k.a. "thousands separator". Describes the
separator characters and the grouping sequence used to split integer digits:

- United States:   1,000,000,000      ("," groups of 3)
- Germany:         1.000.000.000      ("." groups of 3)
- France:          1 000 000 000      (" " groups of 3)
- India:           6,78,90,00,00,00,00,000   ("," groups of 3, then 2)
- China:           6,7890,0000,0000,0000     ("," groups of 4)

Grouping sequences apply from the right-most digit. Each entry is used once;
after the last entry the final group size repeats, or the sequence starts
over when ``restart_grouping_sequence`` is set.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, Final, List, Sequence

from ..exceptions import InvalidArgumentError, InvalidSpecError
from ..model.enums import IntegerGroupingType

logger: Final = logging.getLogger(__name__)

MAX_GROUP_SIZE: Final[int] = 1_000_000


@dataclass(slots=True)
class IntegerSeparatorSpec:
    separator_chars: str = ""
    grouping_sequence: List[int] = field(default_factory=list)
    restart_grouping_sequence: bool = False
    turn_off_separation: bool = False

    # --- constructors ---

    @staticmethod
    def new(
        separator_chars: str,
        grouping_sequence: Sequence[int],
        restart_grouping_sequence: bool = False,
    ) -> "IntegerSeparatorSpec":
        spec = IntegerSeparatorSpec(
            separator_chars=separator_chars,
            grouping_sequence=list(grouping_sequence),
            restart_grouping_sequence=restart_grouping_sequence,
        )
        spec.validate()
        return spec

    @staticmethod
    def new_thousands(separator_chars: str = ",") -> "IntegerSeparatorSpec":
        return IntegerSeparatorSpec.new(separator_chars, [3])

    @staticmethod
    def new_india_numbering(separator_chars: str = ",") -> "IntegerSeparatorSpec":
        return IntegerSeparatorSpec.new(separator_chars, [3, 2])

    @staticmethod
    def new_chinese_numbering(separator_chars: str = ",") -> "IntegerSeparatorSpec":
        return IntegerSeparatorSpec.new(separator_chars, [4])

    @staticmethod
    def new_united_states() -> "IntegerSeparatorSpec":
        return IntegerSeparatorSpec.new_thousands(",")

    @staticmethod
    def new_german() -> "IntegerSeparatorSpec":
        return IntegerSeparatorSpec.new_thousands(".")

    @staticmethod
    def new_french() -> "IntegerSeparatorSpec":
        return IntegerSeparatorSpec.new_thousands(" ")

    @staticmethod
    def new_no_separation() -> "IntegerSeparatorSpec":
        return IntegerSeparatorSpec(turn_off_separation=True)

    @staticmethod
    def new_grouping_type(grouping: IntegerGroupingType, separator_chars: str = ",") -> "IntegerSeparatorSpec":
        if not isinstance(grouping, IntegerGroupingType):
            raise TypeError(f"grouping must be IntegerGroupingType, got {type(grouping).__name__}")
        if not grouping.is_valid():
            raise InvalidArgumentError("Integer grouping type 'None' cannot build a separator spec")
        return IntegerSeparatorSpec.new(separator_chars, grouping.grouping_sequence)

    # --- behaviour ---

    def is_separation_off(self) -> bool:
        return self.turn_off_separation or not self.separator_chars

    def turn_on(self) -> None:
        self.turn_off_separation = False

    def turn_off(self) -> None:
        self.turn_off_separation = True

    def apply(self, digits: str) -> str:
        """
        Insert separators into a string of integer digits.

        The number sign is never part of the input or the output.

        Example:
            >>> IntegerSeparatorSpec.new_united_states().apply("123456789012345")
            '123,456,789,012,345'

        Raises:
            InvalidArgumentError: if digits contains anything other than 0-9.
        """
        if not isinstance(digits, str):
            raise TypeError(f"digits must be str, got {type(digits).__name__}")
        if self.is_separation_off():
            return digits
        if any(not ("0" <= char <= "9") for char in digits):
            raise InvalidArgumentError(f"Integer digits contain non-numeric characters: {digits!r}")
        self.validate()

        groups: List[str] = []
        end = len(digits)
        seq_idx = 0
        last_seq_idx = len(self.grouping_sequence) - 1
        while end > 0:
            size = self.grouping_sequence[seq_idx]
            start = max(0, end - size)
            groups.append(digits[start:end])
            end = start
            if seq_idx < last_seq_idx:
                seq_idx += 1
            elif self.restart_grouping_sequence:
                seq_idx = 0
        return self.separator_chars.join(reversed(groups))

    def validate(self) -> None:
        if self.turn_off_separation:
            return
        if not isinstance(self.separator_chars, str):
            raise InvalidSpecError(f"separator_chars must be str, got {type(self.separator_chars).__name__}")
        if not self.separator_chars:
            return
        if any(char.isdigit() for char in self.separator_chars):
            raise InvalidSpecError(f"Integer separator {self.separator_chars!r} contains numeric digits")
        if not self.grouping_sequence:
            raise InvalidSpecError("Integer grouping sequence is empty")
        for i, size in enumerate(self.grouping_sequence):
            if not isinstance(size, int) or size < 1 or size > MAX_GROUP_SIZE:
                raise InvalidSpecError(f"grouping_sequence[{i}] must be 1..{MAX_GROUP_SIZE}, got {size!r}")

    def is_valid(self) -> bool:
        try:
            self.validate()
        except InvalidSpecError:
            return False
        return True

    def copy(self) -> "IntegerSeparatorSpec":
        return IntegerSeparatorSpec(
            separator_chars=self.separator_chars,
            grouping_sequence=list(self.grouping_sequence),
            restart_grouping_sequence=self.restart_grouping_sequence,
            turn_off_separation=self.turn_off_separation,
        )

    def equal(self, other: "IntegerSeparatorSpec") -> bool:
        return self.to_dict() == other.to_dict()

    def to_dict(self) -> Dict[str, Any]:
        return {
            "separator_chars": self.separator_chars,
            "grouping_sequence": list(self.grouping_sequence),
            "restart_grouping_sequence": self.restart_grouping_sequence,
            "turn_off_separation": self.turn_off_separation,
        }

    @staticmethod
    def from_dict(data: Dict[str, Any]) -> "IntegerSeparatorSpec":
        spec = IntegerSeparatorSpec(
            separator_chars=data.get("separator_chars", ""),
            grouping_sequence=list(data.get("grouping_sequence", [])),
            restart_grouping_sequence=bool(data.get("restart_grouping_sequence", False)),
            turn_off_separation=bool(data.get("turn_off_separation", False)),
        )
        spec.validate()
        return spec

    def __str__(self) -> str:
        if self.is_separation_off():
            return "IntegerSeparatorSpec(off)"
        groups = ",".join(str(size) for size in self.grouping_sequence)
        return f"IntegerSeparatorSpec(separator={self.separator_chars!r}, grouping=[{groups}])"


__all__ = ["IntegerSeparatorSpec", "MAX_GROUP_SIZE"]
