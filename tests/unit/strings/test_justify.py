"""Tests for strmech/strings/justify.py"""

import pytest

from strmech.exceptions import InvalidArgumentError
from strmech.model.enums import TextJustify
from strmech.strings.justify import (
    break_text_at_line_length,
    center_in_str,
    center_in_str_left,
    justify_text_in_field,
    left_justify,
    make_single_char_string,
    pad_left_to_center,
    right_justify,
)


class TestCenter:
    def test_center_even_padding(self) -> None:
        assert center_in_str("abc", 7) == "  abc  "

    def test_center_odd_padding_goes_right(self) -> None:
        assert center_in_str("ab", 5) == " ab  "

    def test_center_exact_fit(self) -> None:
        assert center_in_str("abc", 3) == "abc"

    def test_center_text_too_long(self) -> None:
        with pytest.raises(InvalidArgumentError):
            center_in_str("abcdef", 3)

    @pytest.mark.parametrize("text", ["", "    "])
    def test_center_rejects_blank_text(self, text: str) -> None:
        with pytest.raises(InvalidArgumentError):
            center_in_str(text, 10)

    def test_pad_left_to_center(self) -> None:
        assert pad_left_to_center("Hi", 7) == "  "
        assert center_in_str_left("Hi", 7) == "  Hi"


class TestLeftRight:
    def test_left_justify(self) -> None:
        assert left_justify("Name", 8) == "Name    "

    def test_right_justify(self) -> None:
        assert right_justify("42", 5) == "   42"

    def test_field_shorter_than_text(self) -> None:
        with pytest.raises(InvalidArgumentError):
            left_justify("toolong", 3)
        with pytest.raises(InvalidArgumentError):
            right_justify("toolong", 3)

    def test_non_string_text(self) -> None:
        with pytest.raises(TypeError):
            left_justify(123, 5)  # type: ignore[arg-type]


class TestJustifyTextInField:
    @pytest.mark.parametrize(
        "justify, expected",
        [
            (TextJustify.LEFT, "abc   "),
            (TextJustify.RIGHT, "   abc"),
            (TextJustify.CENTER, " abc  "),
        ],
    )
    def test_justifications(self, justify: TextJustify, expected: str) -> None:
        assert justify_text_in_field("abc", 6, justify) == expected

    def test_no_field_returns_text(self) -> None:
        assert justify_text_in_field("abc", -1, TextJustify.LEFT) == "abc"
        assert justify_text_in_field("abc", 0, TextJustify.RIGHT) == "abc"

    def test_text_longer_than_field_is_not_truncated(self) -> None:
        assert justify_text_in_field("abcdef", 3, TextJustify.CENTER) == "abcdef"

    def test_empty_text_yields_spaces(self) -> None:
        assert justify_text_in_field("", 4, TextJustify.LEFT) == "    "

    def test_whitespace_text_is_padded(self) -> None:
        assert justify_text_in_field("  ", 4, TextJustify.RIGHT) == "    "

    def test_empty_text_without_field(self) -> None:
        with pytest.raises(InvalidArgumentError):
            justify_text_in_field("", -1, TextJustify.LEFT)

    def test_invalid_justification(self) -> None:
        with pytest.raises(InvalidArgumentError):
            justify_text_in_field("abc", 6, TextJustify.NONE)
        with pytest.raises(InvalidArgumentError):
            justify_text_in_field("abc", 6, "Left")  # type: ignore[arg-type]


class TestSingleCharString:
    def test_repeat(self) -> None:
        assert make_single_char_string("=", 4) == "===="

    @pytest.mark.parametrize("char, count", [("", 3), ("ab", 3), ("\x00", 3), ("=", 0)])
    def test_invalid(self, char: str, count: int) -> None:
        with pytest.raises(InvalidArgumentError):
            make_single_char_string(char, count)


class TestBreakText:
    def test_greedy_wrap(self) -> None:
        text = "The quick brown fox jumps over the lazy dog"
        assert break_text_at_line_length(text, 10) == "The quick\nbrown fox\njumps over\nthe lazy\ndog\n"

    def test_custom_delimiter(self) -> None:
        assert break_text_at_line_length("one two three", 8, "|") == "one two|three|"

    def test_long_word_is_hyphenated(self) -> None:
        assert break_text_at_line_length("abcdefghijkl", 5) == "abcd-\nefgh-\nijkl\n"

    def test_whitespace_only_returns_delimiter(self) -> None:
        assert break_text_at_line_length("      ", 5) == "\n"

    def test_every_line_fits(self) -> None:
        text = "Lorem ipsum dolor sit amet consectetur adipiscing elit sed do eiusmod"
        for line in break_text_at_line_length(text, 12).splitlines():
            assert len(line) <= 12

    @pytest.mark.parametrize("text, length, delimiter", [("", 10, "\n"), ("abc", 4, "\n"), ("abc", 10, "")])
    def test_invalid_arguments(self, text: str, length: int, delimiter: str) -> None:
        with pytest.raises(InvalidArgumentError):
            break_text_at_line_length(text, length, delimiter)
