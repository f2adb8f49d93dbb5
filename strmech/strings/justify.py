"""
strings/justify.py

(Краткое RU: Выравнивание, центрирование и заполнение строк в полях фиксированной длины.)

EN: Padding helpers that place a text inside a fixed-length field: left/right
justification, centering, single-character strings and word wrapping.

Field lengths and text lengths are counted in characters (code points).
"""

from __future__ import annotations

import logging
from typing import Final, List

from ..exceptions import InvalidArgumentError
from ..model.enums import TextJustify

logger: Final = logging.getLogger(__name__)

MIN_LINE_LENGTH: Final[int] = 5


def _require_text(text: str, operation: str) -> None:
    if not isinstance(text, str):
        raise TypeError(f"{operation}: text must be str, got {type(text).__name__}")
    if not text or text.strip(" ") == "":
        raise InvalidArgumentError(f"{operation}: text is empty or consists entirely of spaces")


def _split_center_pad(text_len: int, field_len: int) -> tuple[int, int]:
    total = field_len - text_len
    left = total // 2
    return left, total - left


def center_in_str(text: str, field_len: int) -> str:
    """Center text in a field of field_len spaces; the right pad takes the odd space."""
    _require_text(text, "center_in_str")
    if len(text) > field_len:
        raise InvalidArgumentError(
            f"center_in_str: text length {len(text)} exceeds field length {field_len}"
        )
    left, right = _split_center_pad(len(text), field_len)
    return " " * left + text + " " * right


def center_in_str_left(text: str, field_len: int) -> str:
    """Return the left pad plus text, without trailing pad."""
    return pad_left_to_center(text, field_len) + text


def pad_left_to_center(text: str, field_len: int) -> str:
    """Return only the run of spaces needed to center text in field_len."""
    _require_text(text, "pad_left_to_center")
    if len(text) > field_len:
        raise InvalidArgumentError(
            f"pad_left_to_center: text length {len(text)} exceeds field length {field_len}"
        )
    left, _ = _split_center_pad(len(text), field_len)
    return " " * left


def left_justify(text: str, field_len: int) -> str:
    _require_text(text, "left_justify")
    if field_len < len(text):
        raise InvalidArgumentError(
            f"left_justify: field length {field_len} is less than text length {len(text)}"
        )
    return text + " " * (field_len - len(text))


def right_justify(text: str, field_len: int) -> str:
    _require_text(text, "right_justify")
    if field_len < len(text):
        raise InvalidArgumentError(
            f"right_justify: field length {field_len} is less than text length {len(text)}"
        )
    return " " * (field_len - len(text)) + text


def justify_text_in_field(text: str, field_len: int, justify: TextJustify) -> str:
    """
    Place text in a field of field_len characters according to justify.

    Rules:
        - justify must be a valid TextJustify (not NONE);
        - field_len < 1 returns text unchanged, unless text is empty (error);
        - empty text with field_len > 0 yields field_len spaces;
        - text at least as long as the field is returned unchanged.

    Raises:
        InvalidArgumentError: on an invalid justification or empty text with no field.
    """
    if not isinstance(text, str):
        raise TypeError(f"justify_text_in_field: text must be str, got {type(text).__name__}")
    if not isinstance(justify, TextJustify) or not justify.is_valid():
        raise InvalidArgumentError(f"justify_text_in_field: invalid text justification {justify!r}")

    text_len = len(text)
    if field_len < 1:
        if text_len == 0:
            raise InvalidArgumentError("justify_text_in_field: text is empty and field length < 1")
        return text
    if text_len == 0:
        return " " * field_len
    if text_len >= field_len:
        return text

    if justify is TextJustify.LEFT:
        return text + " " * (field_len - text_len)
    if justify is TextJustify.RIGHT:
        return " " * (field_len - text_len) + text
    left, right = _split_center_pad(text_len, field_len)
    return " " * left + text + " " * right


def make_single_char_string(char: str, count: int) -> str:
    if not isinstance(char, str) or len(char) != 1 or char == "\x00":
        raise InvalidArgumentError(f"make_single_char_string: invalid character {char!r}")
    if count < 1:
        raise InvalidArgumentError(f"make_single_char_string: count must be >= 1, got {count}")
    return char * count


def _hyphenate(word: str, line_length: int) -> List[str]:
    chunk = line_length - 1
    pieces = [word[i : i + chunk] + "-" for i in range(0, len(word) - line_length, chunk)]
    consumed = sum(len(p) - 1 for p in pieces)
    pieces.append(word[consumed:])
    return pieces


def break_text_at_line_length(text: str, line_length: int, delimiter: str = "\n") -> str:
    """
    Word-wrap text into lines of at most line_length characters.

    Each output line is terminated by delimiter. Words longer than a line are
    split and hyphenated. Text made only of spaces yields a single delimiter.
    """
    if not isinstance(text, str) or not text:
        raise InvalidArgumentError("break_text_at_line_length: text is empty")
    if line_length < MIN_LINE_LENGTH:
        raise InvalidArgumentError(
            f"break_text_at_line_length: line length must be >= {MIN_LINE_LENGTH}, got {line_length}"
        )
    if not delimiter:
        raise InvalidArgumentError("break_text_at_line_length: delimiter is empty")

    words = text.split()
    if not words:
        return delimiter

    lines: List[str] = []
    current = ""
    for word in words:
        if len(word) > line_length:
            if current:
                lines.append(current)
                current = ""
            pieces = _hyphenate(word, line_length)
            lines.extend(pieces[:-1])
            current = pieces[-1]
            continue
        candidate = f"{current} {word}" if current else word
        if len(candidate) <= line_length:
            current = candidate
        else:
            lines.append(current)
            current = word
    if current:
        lines.append(current)

    logger.debug("break_text_at_line_length: %d chars -> %d lines", len(text), len(lines))
    return "".join(line + delimiter for line in lines)


__all__ = [
    "MIN_LINE_LENGTH",
    "center_in_str",
    "center_in_str_left",
    "pad_left_to_center",
    "left_justify",
    "right_justify",
    "justify_text_in_field",
    "make_single_char_string",
    "break_text_at_line_length",
]
