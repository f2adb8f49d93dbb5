"""
text/fields.py

(Краткое RU: Спецификации текстовых полей: метка, пробелы, заполнитель, дата/время.)

EN: Text field specs. A field renders a fixed piece of a text line; line specs
(see text.lines) concatenate fields. Every field validates its own limits
and renders through ``formatted_text``.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass, field, replace
from datetime import datetime
from typing import Any, ClassVar, Dict, Final

from ..exceptions import InvalidSpecError
from ..model.enums import TextFieldType, TextJustify
from ..strings.justify import justify_text_in_field

logger: Final = logging.getLogger(__name__)

MAX_FIELD_LENGTH: Final[int] = 1_000_000
DEFAULT_DATE_TIME_FORMAT: Final[str] = "%Y-%m-%d %H:%M:%S.%f"


def _check_field_len(field_len: int, minimum: int, label: str) -> None:
    if not isinstance(field_len, int) or isinstance(field_len, bool):
        raise InvalidSpecError(f"{label} must be int, got {type(field_len).__name__}")
    if field_len < minimum or field_len > MAX_FIELD_LENGTH:
        raise InvalidSpecError(f"{label} must be {minimum}..{MAX_FIELD_LENGTH}, got {field_len}")


def _check_justification(justification: TextJustify) -> None:
    if not isinstance(justification, TextJustify) or not justification.is_valid():
        raise InvalidSpecError(f"Invalid text justification: {justification!r}")


class TextFieldSpec(ABC):
    """Base class of text fields."""

    __slots__ = ()

    field_type: ClassVar[TextFieldType] = TextFieldType.NONE

    @abstractmethod
    def validate(self) -> None:
        """Raise InvalidSpecError if the field cannot be rendered."""
        ...

    @abstractmethod
    def _render(self) -> str: ...

    def formatted_text(self) -> str:
        self.validate()
        return self._render()

    def formatted_length(self) -> int:
        return len(self.formatted_text())

    def is_valid(self) -> bool:
        try:
            self.validate()
        except InvalidSpecError:
            return False
        return True

    def copy(self) -> "TextFieldSpec":
        return replace(self)  # type: ignore[type-var]

    def equal(self, other: "TextFieldSpec") -> bool:
        return type(self) is type(other) and self == other

    def __str__(self) -> str:
        return self.formatted_text()


@dataclass(slots=True)
class TextFieldSpecLabel(TextFieldSpec):
    """
    Text placed in a field of field_len characters.

    field_len -1 makes the field exactly as long as the text. Text longer
    than field_len is never truncated.
    """

    text: str = ""
    field_len: int = -1
    justification: TextJustify = TextJustify.LEFT

    field_type: ClassVar[TextFieldType] = TextFieldType.LABEL

    def validate(self) -> None:
        if not isinstance(self.text, str):
            raise InvalidSpecError(f"Label text must be str, got {type(self.text).__name__}")
        if len(self.text) > MAX_FIELD_LENGTH:
            raise InvalidSpecError(f"Label text length {len(self.text)} exceeds {MAX_FIELD_LENGTH}")
        if self.field_len != -1:
            _check_field_len(self.field_len, 1, "Label field length")
        if not self.text and self.field_len == -1:
            raise InvalidSpecError("Label text is empty and field length is -1")
        if "\n" in self.text:
            raise InvalidSpecError("Label text contains a new line character")
        _check_justification(self.justification)

    def _render(self) -> str:
        field_len = len(self.text) if self.field_len == -1 else self.field_len
        return justify_text_in_field(self.text, field_len, self.justification)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "field_type": self.field_type.display_name,
            "text": self.text,
            "field_len": self.field_len,
            "justification": self.justification.display_name,
        }


@dataclass(slots=True)
class TextFieldSpecSpacer(TextFieldSpec):
    """field_len spaces; zero renders an empty string."""

    field_len: int = 1

    field_type: ClassVar[TextFieldType] = TextFieldType.SPACER

    def validate(self) -> None:
        _check_field_len(self.field_len, 0, "Spacer field length")

    def _render(self) -> str:
        return " " * self.field_len


@dataclass(slots=True)
class TextFieldSpecFiller(TextFieldSpec):
    """filler_chars repeated repeat_count times, e.g. ("-*", 3) -> "-*-*-*"."""

    filler_chars: str = " "
    repeat_count: int = 1

    field_type: ClassVar[TextFieldType] = TextFieldType.FILLER

    def validate(self) -> None:
        if not isinstance(self.filler_chars, str) or not self.filler_chars:
            raise InvalidSpecError("Filler characters are empty")
        if "\n" in self.filler_chars:
            raise InvalidSpecError("Filler characters contain a new line character")
        _check_field_len(self.repeat_count, 1, "Filler repeat count")
        if len(self.filler_chars) * self.repeat_count > MAX_FIELD_LENGTH:
            raise InvalidSpecError(f"Filler field would exceed {MAX_FIELD_LENGTH} characters")

    def _render(self) -> str:
        return self.filler_chars * self.repeat_count


@dataclass(slots=True)
class TextFieldSpecDateTime(TextFieldSpec):
    """A datetime rendered with strftime and placed like a label."""

    value: datetime = field(default_factory=datetime.now)
    time_format: str = DEFAULT_DATE_TIME_FORMAT
    field_len: int = -1
    justification: TextJustify = TextJustify.LEFT

    field_type: ClassVar[TextFieldType] = TextFieldType.DATE_TIME

    def validate(self) -> None:
        if not isinstance(self.value, datetime):
            raise InvalidSpecError(f"Date time value must be datetime, got {type(self.value).__name__}")
        if not isinstance(self.time_format, str) or not self.time_format:
            raise InvalidSpecError("Date time format is empty")
        if self.field_len != -1:
            _check_field_len(self.field_len, 1, "Date time field length")
        _check_justification(self.justification)

    def _render(self) -> str:
        text = self.value.strftime(self.time_format)
        label = TextFieldSpecLabel(text=text, field_len=self.field_len, justification=self.justification)
        return label.formatted_text()


__all__ = [
    "DEFAULT_DATE_TIME_FORMAT",
    "MAX_FIELD_LENGTH",
    "TextFieldSpec",
    "TextFieldSpecDateTime",
    "TextFieldSpecFiller",
    "TextFieldSpecLabel",
    "TextFieldSpecSpacer",
]
