"""
strings/chars.py

(Краткое RU: Посимвольные операции: поиск, удаление, замена, обрезка и преобразование
непечатаемых символов.)

EN: Character-level string helpers. Functions that take a "max count" style
argument follow one convention: -1 (or < 1 where noted) means unlimited,
0 is rejected where it would make the call a no-op.
"""

from __future__ import annotations

import logging
import re
from typing import Final, Iterable, List, Optional, Sequence, Tuple

from ..exceptions import InvalidArgumentError

logger: Final = logging.getLogger(__name__)

NON_PRINTABLE_NAMES: Final[dict[str, str]] = {
    "\x00": "[NULL]",
    "\x01": "[SOH]",
    "\x02": "[STX]",
    "\x03": "[ETX]",
    "\x04": "[EOT]",
    "\x05": "[ENQ]",
    "\x06": "[ACK]",
    "\a": "\\a",
    "\b": "\\b",
    "\t": "\\t",
    "\n": "\\n",
    "\v": "\\v",
    "\f": "\\f",
    "\r": "\\r",
    "\x0e": "[SO]",
    "\x0f": "[SI]",
    "\\": "\\\\",
}

SPACE_NAME: Final[str] = "[SPACE]"
EMPTY_NAME: Final[str] = "[EMPTY]"


def convert_non_printable_chars(text: str, convert_space: bool = False) -> str:
    """
    Replace control characters with readable names, e.g. "\\n" -> "\\\\n", 0x00 -> "[NULL]".

    Empty input returns "[EMPTY]".
    """
    if not text:
        return EMPTY_NAME
    out: List[str] = []
    for char in text:
        if char == " " and convert_space:
            out.append(SPACE_NAME)
        else:
            out.append(NON_PRINTABLE_NAMES.get(char, char))
    return "".join(out)


def convert_printable_chars(text: str) -> str:
    """Reverse of convert_non_printable_chars."""
    if not text:
        raise InvalidArgumentError("convert_printable_chars: text is empty")
    reverse = {name: char for char, name in NON_PRINTABLE_NAMES.items()}
    reverse[SPACE_NAME] = " "
    # Longest names first so "\\\\" is not split into two "\\" prefixes
    pattern = re.compile("|".join(re.escape(name) for name in sorted(reverse, key=len, reverse=True)))
    return pattern.sub(lambda m: reverse[m.group(0)], text)


def is_empty_or_whitespace(text: str) -> bool:
    """True when text is empty or made only of space characters."""
    return all(char == " " for char in text)


def does_last_char_exist(text: str, char: str) -> bool:
    return bool(text) and text[-1] == char


def _check_range(text: str, start: int, end: int, operation: str) -> None:
    if not text:
        raise InvalidArgumentError(f"{operation}: text is empty")
    if start < 0:
        raise InvalidArgumentError(f"{operation}: start index {start} is less than zero")
    if end < 0:
        raise InvalidArgumentError(f"{operation}: end index {end} is less than zero")
    if end >= len(text):
        raise InvalidArgumentError(f"{operation}: end index {end} is beyond text length {len(text)}")
    if start > end:
        raise InvalidArgumentError(f"{operation}: start index {start} is greater than end index {end}")


def find_first_non_space_char(text: str, start: int, end: int) -> int:
    _check_range(text, start, end, "find_first_non_space_char")
    for idx in range(start, end + 1):
        if text[idx] != " ":
            return idx
    return -1


def find_last_non_space_char(text: str, start: int, end: int) -> int:
    _check_range(text, start, end, "find_last_non_space_char")
    for idx in range(end, start - 1, -1):
        if text[idx] != " ":
            return idx
    return -1


def find_last_space(text: str, start: int, end: int) -> int:
    _check_range(text, start, end, "find_last_space")
    for idx in range(end, start - 1, -1):
        if text[idx] == " ":
            return idx
    return -1


def find_last_word(text: str, start: int, end: int) -> Tuple[int, int, bool, bool]:
    """
    Locate the last word in text[start:end + 1].

    Returns:
        (begin_index, end_index, is_all_one_word, is_all_spaces). When the range
        holds only spaces both indexes are -1. When the range is one word the
        indexes are start and end.
    """
    _check_range(text, start, end, "find_last_word")
    segment = text[start : end + 1]
    if is_empty_or_whitespace(segment):
        return -1, -1, False, True
    if " " not in segment:
        return start, end, True, False

    word_end = find_last_non_space_char(text, start, end)
    word_begin = start
    for idx in range(word_end, start - 1, -1):
        if text[idx] == " ":
            word_begin = idx + 1
            break
    return word_begin, word_end, False, False


def find_regex_index(text: str, pattern: str) -> Optional[Tuple[int, int]]:
    """Return (start, end) of the first regex match, end exclusive, or None."""
    if not pattern:
        raise InvalidArgumentError("find_regex_index: pattern is empty")
    match = re.search(pattern, text)
    if match is None:
        return None
    return match.start(), match.end()


def get_valid_chars(target: str, valid: str) -> str:
    """Keep only the characters of target that appear in valid."""
    if not target:
        raise InvalidArgumentError("get_valid_chars: target is empty")
    if not valid:
        raise InvalidArgumentError("get_valid_chars: valid character set is empty")
    allowed = set(valid)
    return "".join(char for char in target if char in allowed)


def get_valid_bytes(target: bytes, valid: bytes) -> bytes:
    if not target:
        raise InvalidArgumentError("get_valid_bytes: target is empty")
    if not valid:
        raise InvalidArgumentError("get_valid_bytes: valid byte set is empty")
    allowed = set(valid)
    return bytes(b for b in target if b in allowed)


def _change_first_letter(text: str, upper: bool) -> str:
    for idx, char in enumerate(text):
        if char == " ":
            continue
        if char.isascii() and char.isalpha():
            changed = char.upper() if upper else char.lower()
            return text[:idx] + changed + text[idx + 1 :]
        return text
    return text


def lower_case_first_letter(text: str) -> str:
    """Lower-case the first non-space character when it is an ASCII letter."""
    return _change_first_letter(text, upper=False)


def upper_case_first_letter(text: str) -> str:
    """Upper-case the first non-space character when it is an ASCII letter."""
    return _change_first_letter(text, upper=True)


def _check_max(max_count: int, operation: str) -> None:
    if max_count == 0:
        raise InvalidArgumentError(f"{operation}: maximum count of zero would change nothing")
    if max_count < -1:
        raise InvalidArgumentError(f"{operation}: maximum count must be -1 or >= 1, got {max_count}")


def remove_string_char(text: str, char: str, max_deletions: int = -1) -> Tuple[str, int]:
    """Delete up to max_deletions occurrences of char (-1 = all). Returns (text, count)."""
    if not text:
        raise InvalidArgumentError("remove_string_char: text is empty")
    if not char or len(char) != 1:
        raise InvalidArgumentError(f"remove_string_char: invalid character {char!r}")
    _check_max(max_deletions, "remove_string_char")
    total = text.count(char)
    count = total if max_deletions == -1 else min(total, max_deletions)
    return text.replace(char, "", count), count


def replace_substring(text: str, target: str, replacement: str, max_count: int = -1) -> Tuple[str, int]:
    """Replace target with replacement up to max_count times (< 1 = all). Returns (text, count)."""
    if not text:
        raise InvalidArgumentError("replace_substring: text is empty")
    if not target:
        raise InvalidArgumentError("replace_substring: target substring is empty")
    total = text.count(target)
    count = total if max_count < 1 else min(total, max_count)
    return text.replace(target, replacement, count), count


def remove_substring(text: str, substring: str, max_count: int = -1) -> Tuple[str, int]:
    if not substring:
        raise InvalidArgumentError("remove_substring: substring is empty")
    return replace_substring(text, substring, "", max_count)


def replace_chars(text: str, pairs: Iterable[Tuple[str, str]]) -> str:
    """
    Replace characters per (old, new) pairs in a single pass.

    An empty new value deletes the character.
    """
    if not text:
        raise InvalidArgumentError("replace_chars: text is empty")
    mapping: dict[str, str] = {}
    for old, new in pairs:
        if not old or len(old) != 1:
            raise InvalidArgumentError(f"replace_chars: invalid source character {old!r}")
        mapping[old] = new
    if not mapping:
        raise InvalidArgumentError("replace_chars: replacement pairs are empty")
    return "".join(mapping.get(char, char) for char in text)


def replace_string_char(text: str, old: str, new: str, max_replacements: int = -1) -> Tuple[str, int]:
    if not text:
        raise InvalidArgumentError("replace_string_char: text is empty")
    if not old or len(old) != 1 or not new or len(new) != 1:
        raise InvalidArgumentError("replace_string_char: old and new must be single characters")
    _check_max(max_replacements, "replace_string_char")
    total = text.count(old)
    count = total if max_replacements == -1 else min(total, max_replacements)
    return text.replace(old, new, count), count


def swap_char(text: str, old: str, new: str, max_count: int = -1) -> str:
    """Swap occurrences of old for new; max_count < 1 means unlimited."""
    if not old or len(old) != 1 or not new or len(new) != 1:
        raise InvalidArgumentError("swap_char: old and new must be single characters")
    if max_count < 1:
        return text.replace(old, new)
    return text.replace(old, new, max_count)


def _sorted_bad(bad_strs: Sequence[str]) -> List[str]:
    cleaned = [s for s in bad_strs if s]
    if not cleaned:
        raise InvalidArgumentError("bad character list is empty")
    return sorted(cleaned, key=len, reverse=True)


def strip_bad_chars(text: str, bad_strs: Sequence[str]) -> Tuple[str, int]:
    """Remove every occurrence of the bad strings, longest first. Returns (text, len)."""
    cleaned = text
    for bad in _sorted_bad(bad_strs):
        cleaned = cleaned.replace(bad, "")
    return cleaned, len(cleaned)


def strip_leading_chars(text: str, bad_strs: Sequence[str]) -> Tuple[str, int]:
    ordered = _sorted_bad(bad_strs)
    cleaned = text
    stripped = True
    while stripped and cleaned:
        stripped = False
        for bad in ordered:
            if cleaned.startswith(bad):
                cleaned = cleaned[len(bad) :]
                stripped = True
                break
    return cleaned, len(cleaned)


def strip_trailing_chars(text: str, bad_strs: Sequence[str]) -> Tuple[str, int]:
    ordered = _sorted_bad(bad_strs)
    cleaned = text
    stripped = True
    while stripped and cleaned:
        stripped = False
        for bad in ordered:
            if cleaned.endswith(bad):
                cleaned = cleaned[: -len(bad)]
                stripped = True
                break
    return cleaned, len(cleaned)


def trim_multiple_chars(text: str, char: str) -> str:
    """Collapse runs of char to a single char and trim char from both ends."""
    if not text:
        raise InvalidArgumentError("trim_multiple_chars: text is empty")
    if not char or len(char) != 1:
        raise InvalidArgumentError(f"trim_multiple_chars: invalid character {char!r}")
    collapsed = re.sub(f"{re.escape(char)}{{2,}}", char, text)
    return collapsed.strip(char)


def trim_string_ends(text: str, char: str) -> str:
    if not text:
        raise InvalidArgumentError("trim_string_ends: text is empty")
    if not char or len(char) != 1:
        raise InvalidArgumentError(f"trim_string_ends: invalid character {char!r}")
    return text.strip(char)


__all__ = [
    "NON_PRINTABLE_NAMES",
    "convert_non_printable_chars",
    "convert_printable_chars",
    "is_empty_or_whitespace",
    "does_last_char_exist",
    "find_first_non_space_char",
    "find_last_non_space_char",
    "find_last_space",
    "find_last_word",
    "find_regex_index",
    "get_valid_chars",
    "get_valid_bytes",
    "lower_case_first_letter",
    "upper_case_first_letter",
    "remove_string_char",
    "remove_substring",
    "replace_substring",
    "replace_chars",
    "replace_string_char",
    "swap_char",
    "strip_bad_chars",
    "strip_leading_chars",
    "strip_trailing_chars",
    "trim_multiple_chars",
    "trim_string_ends",
]
