"""
model/enums.py

(Краткое RU: Перечисления strmech с целочисленными кодами и двунаправленным поиском имя <-> код.)

EN: Integer-backed enumerations used across strmech (text justification, file
open modes, number sign positions, rounding, search termination ...).

Every enumeration derives from CodedEnum, which implements the shared pattern once:

- bidirectional lookup, display name <-> code, case-sensitive or not;
- a validity predicate, every member except NONE is valid;
- a "return NONE if invalid" fallback.

Members are declared as ``NAME = (code, "DisplayName", *aliases)``.
"""

from __future__ import annotations

import logging
import os
from enum import Enum
from typing import Dict, Final, Literal, Type, TypeVar

from ..exceptions import EnumParseError

logger: Final = logging.getLogger(__name__)

E = TypeVar("E", bound="CodedEnum")


class CodedEnum(int, Enum):
    """Base for integer-coded enums carrying a display name and parse aliases."""

    def __new__(cls, code: int, display_name: str, *aliases: str) -> "CodedEnum":
        obj = int.__new__(cls, code)
        obj._value_ = code
        obj._display_name = display_name
        obj._aliases = aliases
        return obj

    @property
    def code(self) -> int:
        return int(self.value)

    @property
    def display_name(self) -> str:
        return self._display_name

    def __str__(self) -> str:
        return self._display_name

    def is_valid(self) -> bool:
        return self.name != "NONE"

    def or_none(self: E) -> E:
        return self if self.is_valid() else type(self).none()

    @classmethod
    def none(cls: Type[E]) -> E:
        return cls["NONE"]

    @classmethod
    def _lookup_table(cls: Type[E], case_sensitive: bool) -> Dict[str, E]:
        table: Dict[str, E] = {}
        for member in cls:
            for key in (member.display_name, member.name, *member._aliases):
                table[key if case_sensitive else key.lower()] = member
        return table

    @classmethod
    def parse(cls: Type[E], text: str, case_sensitive: bool = True) -> E:
        """
        Parse a display name, member name or alias into an enum member.

        Raises:
            TypeError: if text is not a str.
            EnumParseError: if text is empty or does not match any member.
        """
        if not isinstance(text, str):
            raise TypeError(f"{cls.__name__}.parse expects str, got {type(text).__name__}")
        key = text.strip()
        if not key:
            raise EnumParseError(f"{cls.__name__}: cannot parse an empty string")
        table = cls._lookup_table(case_sensitive)
        member = table.get(key if case_sensitive else key.lower())
        if member is None:
            logger.debug("%s.parse: no match for %r (case_sensitive=%s)", cls.__name__, text, case_sensitive)
            raise EnumParseError(f"{cls.__name__}: invalid value {text!r}")
        return member

    @classmethod
    def from_code(cls: Type[E], code: int) -> E:
        try:
            return cls(code)
        except ValueError as exc:
            raise EnumParseError(f"{cls.__name__}: unknown code {code!r}", cause=exc) from exc


def return_none_if_invalid(enum_cls: Type[E], code: int) -> E:
    """Map an unknown or invalid code onto the NONE member of enum_cls."""
    try:
        member = enum_cls(code)
    except ValueError:
        return enum_cls.none()
    return member.or_none()


# === TEXT ===


class TextJustify(CodedEnum):
    NONE = (0, "None")
    LEFT = (1, "Left")
    RIGHT = (2, "Right")
    CENTER = (3, "Center", "Centered")

    def localized_name(self, lang: Literal["ru", "en"] = "ru") -> str:
        names_ru = {
            TextJustify.NONE: "Нет",
            TextJustify.LEFT: "По левому краю",
            TextJustify.RIGHT: "По правому краю",
            TextJustify.CENTER: "По центру",
        }
        return names_ru[self] if lang == "ru" else self.display_name


class TextFieldType(CodedEnum):
    NONE = (0, "None")
    LABEL = (1, "Label")
    DATE_TIME = (2, "DateTime")
    FILLER = (3, "Filler")
    SPACER = (4, "Spacer")
    BLANK_LINE = (5, "BlankLine")
    SOLID_LINE = (6, "SolidLine")


class CharSearchTerminationType(CodedEnum):
    NONE = (0, "None")
    PROCESS_ERROR = (1, "ProcessError")
    END_OF_TARGET_STRING = (2, "EndOfTargetString")
    SEARCH_LENGTH_LIMIT = (3, "SearchLengthLimit")
    TERMINATION_DELIMITERS = (4, "TerminationDelimiters")
    FOUND_SEARCH_TARGET = (5, "FoundSearchTarget")


class DataFieldTrailingDelimiterType(CodedEnum):
    NONE = (0, "None", "Unknown")
    END_OF_FIELD = (1, "EndOfField")
    COMMENT = (2, "Comment")
    END_OF_LINE = (3, "EndOfLine")
    END_OF_STRING = (4, "EndOfString")


# === FILES ===


class FileOpenType(CodedEnum):
    NONE = (-1, "None", "TypeNone")
    READ_ONLY = (0, "ReadOnly", "TypeReadOnly")
    WRITE_ONLY = (1, "WriteOnly", "TypeWriteOnly")
    READ_WRITE = (2, "ReadWrite", "TypeReadWrite")

    @property
    def os_flag(self) -> int:
        mapping = {
            FileOpenType.READ_ONLY: os.O_RDONLY,
            FileOpenType.WRITE_ONLY: os.O_WRONLY,
            FileOpenType.READ_WRITE: os.O_RDWR,
        }
        return mapping.get(self, 0)


class FileOpenMode(CodedEnum):
    NONE = (0, "None", "ModeNone")
    APPEND = (1, "Append", "ModeAppend")
    CREATE = (2, "Create", "ModeCreate")
    EXCLUSIVE = (3, "Exclusive", "ModeExclusive")
    SYNC = (4, "Sync", "ModeSync")
    TRUNCATE = (5, "Truncate", "ModeTruncate")

    @property
    def os_flag(self) -> int:
        mapping = {
            FileOpenMode.APPEND: "O_APPEND",
            FileOpenMode.CREATE: "O_CREAT",
            FileOpenMode.EXCLUSIVE: "O_EXCL",
            FileOpenMode.SYNC: "O_SYNC",
            FileOpenMode.TRUNCATE: "O_TRUNC",
        }
        flag_name = mapping.get(self)
        if flag_name is None:
            return 0
        # O_SYNC is absent on Windows
        return int(getattr(os, flag_name, 0))


# === NUMBERS ===


class NumSignSymbolPosition(CodedEnum):
    NONE = (0, "None")
    BEFORE = (1, "Before")
    AFTER = (2, "After")
    BEFORE_AND_AFTER = (3, "BeforeAndAfter")


class NumericValueType(CodedEnum):
    NONE = (0, "None")
    FLOATING_POINT = (1, "FloatingPoint")
    INTEGER = (2, "Integer")


class NumericSignValueType(CodedEnum):
    NONE = (-2, "None")
    NEGATIVE = (-1, "Negative")
    ZERO = (0, "Zero")
    POSITIVE = (1, "Positive")


class IntegerGroupingType(CodedEnum):
    NONE = (0, "None")
    THOUSANDS = (1, "Thousands")
    INDIA_NUMBERING = (2, "IndiaNumbering")
    CHINESE_NUMBERING = (3, "ChineseNumbering")

    @property
    def grouping_sequence(self) -> tuple[int, ...]:
        mapping = {
            IntegerGroupingType.THOUSANDS: (3,),
            IntegerGroupingType.INDIA_NUMBERING: (3, 2),
            IntegerGroupingType.CHINESE_NUMBERING: (4,),
        }
        return mapping.get(self, ())


class NumberRoundingType(CodedEnum):
    NONE = (0, "None")
    NO_ROUNDING = (1, "NoRounding")
    HALF_UP_WITH_NEG_NUMS = (2, "HalfUpWithNegNums")
    HALF_DOWN_WITH_NEG_NUMS = (3, "HalfDownWithNegNums")
    HALF_AWAY_FROM_ZERO = (4, "HalfAwayFromZero")
    HALF_TOWARDS_ZERO = (5, "HalfTowardsZero")
    HALF_TO_EVEN = (6, "HalfToEven")
    HALF_TO_ODD = (7, "HalfToOdd")
    RANDOMLY = (8, "Randomly")
    FLOOR = (9, "Floor")
    CEILING = (10, "Ceiling")
    TRUNCATE = (11, "Truncate")


class NumSignSymbolDisplayMode(CodedEnum):
    NONE = (0, "None")
    EXPLICIT = (1, "Explicit")
    IMPLICIT = (2, "Implicit")


class NumberFieldSymbolPosition(CodedEnum):
    NONE = (0, "None")
    INSIDE_NUM_FIELD = (1, "InsideNumField")
    OUTSIDE_NUM_FIELD = (2, "OutsideNumField")


class CurrencyNumSignRelativePosition(CodedEnum):
    NONE = (0, "None")
    OUTSIDE_NUM_SIGN = (1, "OutsideNumSign")
    INSIDE_NUM_SIGN = (2, "InsideNumSign")


class NumericSymbolClass(CodedEnum):
    NONE = (0, "None")
    NUMBER_SIGN = (1, "NumberSign")
    CURRENCY_SIGN = (2, "CurrencySign")
    INTEGER_SEPARATOR = (3, "IntegerSeparator")
    DECIMAL_SEPARATOR = (4, "DecimalSeparator")


class NumericSymbolLocation(CodedEnum):
    NONE = (0, "None")
    BEFORE = (1, "Before")
    INTERIOR = (2, "Interior")
    AFTER = (3, "After")
    BEFORE_AND_AFTER = (4, "BeforeAndAfter")


DEFAULT_TEXT_JUSTIFY: Final[TextJustify] = TextJustify.LEFT
DEFAULT_ROUNDING_TYPE: Final[NumberRoundingType] = NumberRoundingType.HALF_AWAY_FROM_ZERO
DEFAULT_INTEGER_GROUPING: Final[IntegerGroupingType] = IntegerGroupingType.THOUSANDS


__all__ = [
    "CodedEnum",
    "return_none_if_invalid",
    "TextJustify",
    "TextFieldType",
    "CharSearchTerminationType",
    "DataFieldTrailingDelimiterType",
    "FileOpenType",
    "FileOpenMode",
    "NumSignSymbolPosition",
    "NumericValueType",
    "NumericSignValueType",
    "IntegerGroupingType",
    "NumberRoundingType",
    "NumSignSymbolDisplayMode",
    "NumberFieldSymbolPosition",
    "CurrencyNumSignRelativePosition",
    "NumericSymbolClass",
    "NumericSymbolLocation",
    "DEFAULT_TEXT_JUSTIFY",
    "DEFAULT_ROUNDING_TYPE",
    "DEFAULT_INTEGER_GROUPING",
]
