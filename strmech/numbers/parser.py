"""
numbers/parser.py

(Краткое RU: Разбор числовых строк в NumberStrKernel за один проход с учётом
национальных знаков минуса, десятичного разделителя и символов-терминаторов.)

EN: Single-pass number string parser.

Characters that are neither digits nor recognised symbols are skipped, so
"$ 1,234.56" parses the same as "1234.56" under US conventions. The scan
stops at the end of the search window, at a termination delimiter (only once
a digit has been seen), or right after a trailing negative sign.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Final, List, Optional, Sequence, Tuple

from ..exceptions import InvalidArgumentError, NumberParseError, StrMechError
from ..model.enums import CharSearchTerminationType, NumericSignValueType, NumericValueType, NumSignSymbolPosition
from ..model.profiles import NumberStrSearchResults
from .decimal_separator import DecimalSeparatorSpec
from .kernel import NumberStrKernel
from .negative_sign import NegNumSearchSpecCollection

logger: Final = logging.getLogger(__name__)

_STOPPING_SIGN_POSITIONS: Final = (NumSignSymbolPosition.AFTER, NumSignSymbolPosition.BEFORE_AND_AFTER)


@dataclass(slots=True)
class NumberStrSearchParams:
    """
    Input for parse_number_str.

    search_length of -1 searches to the end of target. Specs are copied
    before parsing, so one params instance can be reused.
    """

    target: str
    start_index: int = 0
    search_length: int = -1
    negative_sign_specs: NegNumSearchSpecCollection = field(
        default_factory=NegNumSearchSpecCollection.new_united_states
    )
    decimal_separator: DecimalSeparatorSpec = field(default_factory=DecimalSeparatorSpec.new_united_states)
    termination_delimiters: List[str] = field(default_factory=list)
    request_remainder: bool = False

    def search_end(self) -> int:
        """Exclusive index where the scan window ends."""
        if self.search_length == -1:
            return len(self.target)
        return min(len(self.target), self.start_index + self.search_length)

    def validate(self) -> None:
        if not isinstance(self.target, str):
            raise TypeError(f"target must be str, got {type(self.target).__name__}")
        if not self.target:
            raise InvalidArgumentError("Number string search target is empty")
        if self.start_index < 0 or self.start_index >= len(self.target):
            raise InvalidArgumentError(
                f"Start index {self.start_index} is outside 0..{len(self.target) - 1}"
            )
        if self.search_length == 0 or self.search_length < -1:
            raise InvalidArgumentError(f"Search length must be -1 or >= 1, got {self.search_length}")
        if any(not delimiter for delimiter in self.termination_delimiters):
            raise InvalidArgumentError("Termination delimiters contain an empty string")
        self.decimal_separator.validate()
        if len(self.negative_sign_specs) > 0:
            self.negative_sign_specs.validate()


def _match_delimiter(target: str, index: int, delimiters: Sequence[str]) -> Optional[str]:
    for delimiter in delimiters:
        if target.startswith(delimiter, index):
            return delimiter
    return None


def _is_digit(char: str) -> bool:
    return "0" <= char <= "9"


def parse_number_str(params: NumberStrSearchParams) -> Tuple[NumberStrKernel, NumberStrSearchResults]:
    """
    Parse the first number found in params.target.

    Returns:
        (kernel, search results). The results describe what was found and why
        the scan stopped.

    Raises:
        InvalidArgumentError: on invalid params.
        NumberParseError: when the window holds no numeric digits.

    Example:
        >>> kernel, _ = parse_us_number_str("Total: (1,234.50)")
        >>> kernel.pure_number_str()
        '-1234.50'
    """
    params.validate()

    target = params.target
    neg_specs = params.negative_sign_specs.copy()
    neg_specs.empty_processing_flags()
    dec_spec = params.decimal_separator.copy()
    dec_spec.empty_processing_flags()
    separator_len = len(dec_spec.separator_chars)

    end = params.search_end()
    results = NumberStrSearchResults()
    integer_digits: List[str] = []
    fraction_digits: List[str] = []
    stopped = False

    idx = params.start_index
    while idx < end:
        char = target[idx]

        if _is_digit(char):
            if not results.found_numeric_digits:
                results.found_numeric_digits = True
                results.first_digit_index = idx
            results.last_digit_index = idx
            if char != "0":
                results.found_non_zero_digits = True
                if results.number_sign is NumericSignValueType.ZERO:
                    results.number_sign = NumericSignValueType.POSITIVE
            if results.found_decimal_separator:
                fraction_digits.append(char)
            else:
                integer_digits.append(char)
            idx += 1
            continue

        if results.found_numeric_digits:
            delimiter = _match_delimiter(target, idx, params.termination_delimiters)
            if delimiter is not None:
                results.termination_type = CharSearchTerminationType.TERMINATION_DELIMITERS
                results.termination_index = idx
                stopped = True
                break

        if not results.found_negative_sign and len(neg_specs) > 0:
            sign = neg_specs.search(target, idx, results.found_numeric_digits)
            if sign.found_negative_sign:
                results.found_negative_sign = True
                results.negative_sign_position = sign.position
                results.number_sign = NumericSignValueType.NEGATIVE
                idx = sign.index + len(sign.symbols)
                if sign.position in _STOPPING_SIGN_POSITIONS:
                    results.termination_type = CharSearchTerminationType.FOUND_SEARCH_TARGET
                    results.termination_index = sign.index
                    stopped = True
                    break
                continue

        if not results.found_decimal_separator:
            if results.found_numeric_digits:
                if dec_spec.search(target, idx):
                    results.found_decimal_separator = True
                    idx += separator_len
                    continue
            else:
                next_idx = idx + separator_len
                if next_idx < end and _is_digit(target[next_idx]) and dec_spec.search(target, idx):
                    results.found_decimal_separator = True
                    results.found_numeric_digits = True
                    results.first_digit_index = next_idx
                    integer_digits.append("0")
                    idx = next_idx
                    continue

        idx += 1

    if not stopped:
        results.termination_index = idx
        if end < len(target):
            results.termination_type = CharSearchTerminationType.SEARCH_LENGTH_LIMIT
        else:
            results.termination_type = CharSearchTerminationType.END_OF_TARGET_STRING

    if not results.found_numeric_digits:
        raise NumberParseError(f"No numeric digits found in {target[params.start_index:end]!r}")

    if fraction_digits and not integer_digits:
        integer_digits.append("0")
    results.value_type = NumericValueType.FLOATING_POINT if fraction_digits else NumericValueType.INTEGER
    if not results.found_non_zero_digits:
        results.number_sign = NumericSignValueType.ZERO

    # the remainder starts at a termination delimiter, or just past a trailing negative sign
    if params.request_remainder and idx < len(target):
        results.remainder = target[idx:]

    sign = results.number_sign
    try:
        kernel = NumberStrKernel.new_from_digits("".join(integer_digits), "".join(fraction_digits), sign)
    except StrMechError as exc:
        raise NumberParseError(f"Cannot build number from {target!r}", cause=exc) from exc

    logger.debug(
        "Parsed %r -> %s (%s, %s)",
        target,
        kernel.pure_number_str(),
        results.value_type.display_name,
        results.termination_type.display_name,
    )
    return kernel, results


def _parse_with(
    text: str,
    negative_sign_specs: NegNumSearchSpecCollection,
    decimal_separator: DecimalSeparatorSpec,
    termination_delimiters: Sequence[str],
) -> Tuple[NumberStrKernel, NumberStrSearchResults]:
    return parse_number_str(
        NumberStrSearchParams(
            target=text,
            negative_sign_specs=negative_sign_specs,
            decimal_separator=decimal_separator,
            termination_delimiters=list(termination_delimiters),
        )
    )


def parse_us_number_str(
    text: str, termination_delimiters: Sequence[str] = ()
) -> Tuple[NumberStrKernel, NumberStrSearchResults]:
    """Parse with "." decimals and "-" / "(...)" negative signs."""
    return _parse_with(
        text,
        NegNumSearchSpecCollection.new_united_states(),
        DecimalSeparatorSpec.new_united_states(),
        termination_delimiters,
    )


def parse_german_number_str(
    text: str, termination_delimiters: Sequence[str] = ()
) -> Tuple[NumberStrKernel, NumberStrSearchResults]:
    """Parse with "," decimals and leading or trailing "-"."""
    return _parse_with(
        text,
        NegNumSearchSpecCollection.new_german(),
        DecimalSeparatorSpec.new_european(),
        termination_delimiters,
    )


def parse_french_number_str(
    text: str, termination_delimiters: Sequence[str] = ()
) -> Tuple[NumberStrKernel, NumberStrSearchResults]:
    return _parse_with(
        text,
        NegNumSearchSpecCollection.new_french(),
        DecimalSeparatorSpec.new_european(),
        termination_delimiters,
    )


__all__ = [
    "NumberStrSearchParams",
    "parse_number_str",
    "parse_us_number_str",
    "parse_german_number_str",
    "parse_french_number_str",
]
