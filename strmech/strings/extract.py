"""
strings/extract.py

(Краткое RU: Извлечение полей данных и числовых цифр из строк.)

EN: Field extraction from delimited text lines (key/value records, comments,
end-of-line markers) and numeric digit extraction from free text.
"""

from __future__ import annotations

import logging
from typing import Final, List, Optional, Sequence, Tuple

from ..exceptions import InvalidArgumentError
from ..model.enums import DataFieldTrailingDelimiterType
from ..model.profiles import DataFieldProfile, NumStrProfile

logger: Final = logging.getLogger(__name__)

_SIGN_CHARS: Final[str] = "+-"


def _earliest(text: str, start: int, delimiters: Sequence[str], label: str) -> Tuple[int, str]:
    """Return (absolute index, delimiter) of the earliest delimiter at or after start, or (-1, "")."""
    valid = [d for d in delimiters if d]
    if not valid:
        raise InvalidArgumentError(f"extract_data_field: {label} contains only empty strings")
    best_idx, best_value = -1, ""
    for delimiter in valid:
        idx = text.find(delimiter, start)
        if idx != -1 and (best_idx == -1 or idx < best_idx):
            best_idx, best_value = idx, delimiter
    return best_idx, best_value


def _match_prefix(text: str, index: int, candidates: Sequence[str]) -> Optional[str]:
    for candidate in candidates:
        if candidate and text.startswith(candidate, index):
            return candidate
    return None


def extract_data_field(
    target: str,
    leading_keyword_delimiters: Sequence[str],
    start_index: int,
    leading_field_separators: Sequence[str],
    trailing_field_separators: Sequence[str],
    comment_delimiters: Sequence[str] = (),
    end_of_line_delimiters: Sequence[str] = (),
) -> DataFieldProfile:
    """
    Extract one data field from target beginning the search at start_index.

    The usable part of target ends before the earliest end-of-line delimiter
    and, within that, before the earliest comment delimiter. When keyword
    delimiters are given the field must follow one of them; otherwise an empty
    profile is returned. Leading field separators are skipped; the field ends at
    the first trailing field separator or at the end of the usable text.

    Example:
        >>> p = extract_data_field("Name: John Doe # comment\\n", ["Name:"], 0, [" "], ["\\t"], ["#"], ["\\n"])
        >>> p.data_field_str
        'John Doe '
    """
    profile = DataFieldProfile(
        target_str=target,
        target_str_length=len(target),
        target_str_start_index=start_index,
    )

    if not target:
        raise InvalidArgumentError("extract_data_field: target string is empty")
    if start_index < 0 or start_index >= len(target):
        raise InvalidArgumentError(
            f"extract_data_field: start index {start_index} is outside 0..{len(target) - 1}"
        )
    if not any(leading_field_separators):
        raise InvalidArgumentError("extract_data_field: leading field separators are empty")
    if not any(trailing_field_separators):
        raise InvalidArgumentError("extract_data_field: trailing field separators are empty")

    last_good = len(target) - 1

    if end_of_line_delimiters:
        eol_idx, eol_value = _earliest(target, start_index, end_of_line_delimiters, "end of line delimiters")
        if eol_idx > -1:
            profile.end_of_line_delimiter = eol_value
            profile.end_of_line_delimiter_index = eol_idx
            if eol_idx - 1 < last_good:
                profile.trailing_delimiter = eol_value
                profile.trailing_delimiter_type = DataFieldTrailingDelimiterType.END_OF_LINE
                last_good = eol_idx - 1

    if start_index > last_good:
        profile.target_str_last_good_index = last_good
        return profile

    if comment_delimiters:
        comment_idx, comment_value = _earliest(target, start_index, comment_delimiters, "comment delimiters")
        if comment_idx > -1:
            profile.comment_delimiter = comment_value
            profile.comment_delimiter_index = comment_idx
            if comment_idx - 1 < last_good:
                profile.trailing_delimiter = comment_value
                profile.trailing_delimiter_type = DataFieldTrailingDelimiterType.COMMENT
                last_good = comment_idx - 1

    profile.target_str_last_good_index = last_good
    if start_index > last_good:
        return profile

    idx = start_index
    if leading_keyword_delimiters:
        kw_idx, kw_value = _earliest(target, start_index, leading_keyword_delimiters, "keyword delimiters")
        if kw_idx == -1 or kw_idx >= last_good:
            return profile
        profile.leading_keyword_delimiter = kw_value
        profile.leading_keyword_delimiter_index = kw_idx
        idx = kw_idx + len(kw_value)

    field_chars: List[str] = []
    first_field_idx = -1
    while idx <= last_good:
        if first_field_idx == -1:
            leading = _match_prefix(target, idx, leading_field_separators)
            if leading is not None:
                idx += len(leading)
                continue
        else:
            trailing = _match_prefix(target, idx, trailing_field_separators)
            if trailing is not None:
                profile.trailing_delimiter = trailing
                profile.trailing_delimiter_type = DataFieldTrailingDelimiterType.END_OF_FIELD
                break
        if first_field_idx == -1:
            first_field_idx = idx
        field_chars.append(target[idx])
        idx += 1

    if not field_chars:
        return profile

    if profile.trailing_delimiter_type is DataFieldTrailingDelimiterType.NONE:
        profile.trailing_delimiter_type = DataFieldTrailingDelimiterType.END_OF_STRING

    profile.data_field_str = "".join(field_chars)
    profile.data_field_length = len(field_chars)
    profile.data_field_index = first_field_idx
    next_idx = first_field_idx + len(field_chars)
    profile.next_target_str_index = -1 if next_idx > last_good else next_idx
    logger.debug(
        "extract_data_field: field=%r index=%d trailing=%s",
        profile.data_field_str,
        profile.data_field_index,
        profile.trailing_delimiter_type.display_name,
    )
    return profile


def _without_digits(chars: str) -> List[str]:
    return [c for c in chars if not ("0" <= c <= "9")]


def extract_numeric_digits(
    target: str,
    start_index: int = 0,
    keep_leading: str = "",
    keep_interior: str = "",
    keep_trailing: str = "",
) -> NumStrProfile:
    """
    Extract the first run of numeric digits in target.

    Args:
        keep_leading: chars preserved immediately before the first digit, each
            at most once; only one of "+" and "-" is kept.
        keep_interior: chars preserved between digits, only when followed by a digit.
        keep_trailing: chars preserved once each after the last digit.

    Example:
        >>> extract_numeric_digits("Price: $-1,234.56 USD", 0, "$-", ",.", "").num_str
        '$-1,234.56'
    """
    profile = NumStrProfile(target_str=target, target_str_start_index=start_index)
    if not target:
        raise InvalidArgumentError("extract_numeric_digits: target string is empty")
    if start_index < 0 or start_index >= len(target):
        raise InvalidArgumentError(
            f"extract_numeric_digits: start index {start_index} is outside 0..{len(target) - 1}"
        )

    leading_pool = _without_digits(keep_leading)
    interior = set(_without_digits(keep_interior))
    trailing_pool = _without_digits(keep_trailing)

    first_digit = next((i for i in range(start_index, len(target)) if target[i].isdigit() and target[i].isascii()), -1)
    if first_digit == -1:
        return profile

    leading: List[str] = []
    first_char_idx = -1
    leading_sign = ""
    for idx in range(first_digit - 1, start_index - 1, -1):
        char = target[idx]
        if char not in leading_pool:
            break
        leading.append(char)
        first_char_idx = idx
        leading_pool.remove(char)
        if char in _SIGN_CHARS:
            leading_sign = char
            opposite = "+" if char == "-" else "-"
            leading_pool = [c for c in leading_pool if c != opposite]

    captured = list(reversed(leading))
    leading_sign_index = captured.index(leading_sign) if leading_sign else -1

    in_digits = True
    idx = first_digit
    while idx < len(target):
        char = target[idx]
        if in_digits:
            if "0" <= char <= "9":
                captured.append(char)
                idx += 1
                continue
            next_is_digit = idx + 1 < len(target) and "0" <= target[idx + 1] <= "9"
            if char in interior and next_is_digit:
                captured.append(char)
                idx += 1
                continue
            in_digits = False
        if char in trailing_pool:
            captured.append(char)
            trailing_pool.remove(char)
            idx += 1
            continue
        break

    profile.num_str = "".join(captured)
    profile.first_num_char_index = first_char_idx if first_char_idx > -1 else first_digit
    profile.num_str_len = len(profile.num_str)
    profile.leading_sign_char = leading_sign
    profile.leading_sign_index = leading_sign_index
    next_idx = profile.first_num_char_index + profile.num_str_len
    profile.next_target_str_index = next_idx if next_idx < len(target) else -1
    return profile


__all__ = ["extract_data_field", "extract_numeric_digits"]
