"""
strings

Операции над строками: выравнивание в поле, перенос по длине строки,
посимвольный поиск и замена, извлечение полей данных и числовых цифр.

Public API:
    - justify: center_in_str, left_justify, right_justify, justify_text_in_field,
      break_text_at_line_length
    - chars: find_*, replace_*, strip_*, trim_*, convert_*_chars
    - extract: extract_data_field, extract_numeric_digits
"""

from .chars import (
    convert_non_printable_chars,
    convert_printable_chars,
    find_last_word,
    replace_substring,
    strip_bad_chars,
    trim_multiple_chars,
)
from .extract import extract_data_field, extract_numeric_digits
from .justify import (
    break_text_at_line_length,
    center_in_str,
    justify_text_in_field,
    left_justify,
    make_single_char_string,
    right_justify,
)

__all__ = [
    "break_text_at_line_length",
    "center_in_str",
    "convert_non_printable_chars",
    "convert_printable_chars",
    "extract_data_field",
    "extract_numeric_digits",
    "find_last_word",
    "justify_text_in_field",
    "left_justify",
    "make_single_char_string",
    "replace_substring",
    "right_justify",
    "strip_bad_chars",
    "trim_multiple_chars",
]
