"""
numbers/negative_sign.py

(Краткое RU: Спецификация поиска символов отрицательного знака в числовых строках.)

EN: Negative number sign search specs. A spec describes which character
sequence(s) mark a negative value and where they sit relative to the digits:

- Before:          "-123"    leading symbols only
- After:           "123-"    trailing symbols only
- BeforeAndAfter:  "(123)"   both; the value is negative only when both match

The number-string parser calls ``search`` once per scanned character, passing
whether the first numeric digit has already been seen. NegativeNumberSearchSpec keeps
processing flags between calls, so one spec instance serves one parse pass;
call ``empty_processing_flags`` before reusing it.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, Final, Iterator, List, Optional, Sequence

from ..exceptions import InvalidArgumentError, InvalidSpecError, SearchError
from ..model.enums import NumSignSymbolPosition
from ..model.profiles import NegNumSearchResult
from ..model.rune_array import RuneArrayDto

logger: Final = logging.getLogger(__name__)


def _symbols(text: str, label: str) -> RuneArrayDto:
    if not isinstance(text, str):
        raise TypeError(f"{label} must be str, got {type(text).__name__}")
    if not text:
        raise InvalidArgumentError(f"{label} is an empty string")
    return RuneArrayDto.new(text)


@dataclass(slots=True)
class NegativeNumberSearchSpec:
    """Search configuration plus per-pass state for one negative sign style."""

    position: NumSignSymbolPosition = NumSignSymbolPosition.NONE
    leading_symbols: RuneArrayDto = field(default_factory=RuneArrayDto)
    trailing_symbols: RuneArrayDto = field(default_factory=RuneArrayDto)

    # processing flags
    found_first_numeric_digit: bool = False
    found_neg_num_sign: bool = False
    found_leading_sign: bool = False
    found_leading_sign_index: int = -1
    found_trailing_sign: bool = False
    found_trailing_sign_index: int = -1

    @staticmethod
    def new_leading(leading: str) -> "NegativeNumberSearchSpec":
        return NegativeNumberSearchSpec(
            position=NumSignSymbolPosition.BEFORE,
            leading_symbols=_symbols(leading, "leading negative sign symbols"),
        )

    @staticmethod
    def new_trailing(trailing: str) -> "NegativeNumberSearchSpec":
        return NegativeNumberSearchSpec(
            position=NumSignSymbolPosition.AFTER,
            trailing_symbols=_symbols(trailing, "trailing negative sign symbols"),
        )

    @staticmethod
    def new_leading_and_trailing(leading: str, trailing: str) -> "NegativeNumberSearchSpec":
        return NegativeNumberSearchSpec(
            position=NumSignSymbolPosition.BEFORE_AND_AFTER,
            leading_symbols=_symbols(leading, "leading negative sign symbols"),
            trailing_symbols=_symbols(trailing, "trailing negative sign symbols"),
        )

    # --- state ---

    def empty(self) -> None:
        self.position = NumSignSymbolPosition.NONE
        self.leading_symbols = RuneArrayDto()
        self.trailing_symbols = RuneArrayDto()
        self.empty_processing_flags()

    def empty_processing_flags(self) -> None:
        self.found_first_numeric_digit = False
        self.found_neg_num_sign = False
        self.found_leading_sign = False
        self.found_leading_sign_index = -1
        self.found_trailing_sign = False
        self.found_trailing_sign_index = -1

    def validate(self) -> None:
        if not isinstance(self.position, NumSignSymbolPosition) or not self.position.is_valid():
            raise InvalidSpecError(f"Negative sign position is invalid: {self.position!r}")
        needs_leading = self.position in (NumSignSymbolPosition.BEFORE, NumSignSymbolPosition.BEFORE_AND_AFTER)
        needs_trailing = self.position in (NumSignSymbolPosition.AFTER, NumSignSymbolPosition.BEFORE_AND_AFTER)
        if needs_leading and self.leading_symbols.is_empty():
            raise InvalidSpecError(f"Position {self.position.display_name} requires leading symbols")
        if needs_trailing and self.trailing_symbols.is_empty():
            raise InvalidSpecError(f"Position {self.position.display_name} requires trailing symbols")
        if not needs_leading and not self.leading_symbols.is_empty():
            raise InvalidSpecError(f"Position {self.position.display_name} does not allow leading symbols")
        if not needs_trailing and not self.trailing_symbols.is_empty():
            raise InvalidSpecError(f"Position {self.position.display_name} does not allow trailing symbols")
        self.leading_symbols.validate()
        self.trailing_symbols.validate()

    def is_valid(self) -> bool:
        try:
            self.validate()
        except InvalidSpecError:
            return False
        return True

    # --- search ---

    def search(self, target: Sequence[str], index: int, found_first_digit: bool) -> NegNumSearchResult:
        """
        Test whether this spec's sign symbols match target at index.

        Returns a NegNumSearchResult. ``found_negative_sign`` is True only on
        the call that completes the match; later calls report
        ``found_on_previous_search`` instead.
        """
        self.validate()
        if index < 0 or index >= len(target):
            raise InvalidArgumentError(f"Search index {index} is outside target of length {len(target)}")

        if found_first_digit:
            self.found_first_numeric_digit = True

        if self.position is NumSignSymbolPosition.BEFORE:
            return self._search_before(target, index, found_first_digit)
        if self.position is NumSignSymbolPosition.AFTER:
            return self._search_after(target, index, found_first_digit)
        return self._search_before_and_after(target, index, found_first_digit)

    def _search_before(self, target: Sequence[str], index: int, found_first_digit: bool) -> NegNumSearchResult:
        result = NegNumSearchResult()
        if found_first_digit:
            return result
        if self.found_leading_sign:
            result.found_on_previous_search = True
            result.position = NumSignSymbolPosition.BEFORE
            result.index = self.found_leading_sign_index
            result.symbols = self.leading_symbols.text
            return result
        if self.leading_symbols.matches_at(target, index):
            self.found_neg_num_sign = True
            self.found_leading_sign = True
            self.found_leading_sign_index = index
            result.found_negative_sign = True
            result.position = NumSignSymbolPosition.BEFORE
            result.index = index
            result.symbols = self.leading_symbols.text
        return result

    def _search_after(self, target: Sequence[str], index: int, found_first_digit: bool) -> NegNumSearchResult:
        result = NegNumSearchResult()
        if not found_first_digit:
            return result
        if self.found_trailing_sign:
            result.found_on_previous_search = True
            result.position = NumSignSymbolPosition.AFTER
            result.index = self.found_trailing_sign_index
            result.symbols = self.trailing_symbols.text
            return result
        if self.trailing_symbols.matches_at(target, index):
            self.found_neg_num_sign = True
            self.found_trailing_sign = True
            self.found_trailing_sign_index = index
            result.found_negative_sign = True
            result.position = NumSignSymbolPosition.AFTER
            result.index = index
            result.symbols = self.trailing_symbols.text
        return result

    def _search_before_and_after(
        self, target: Sequence[str], index: int, found_first_digit: bool
    ) -> NegNumSearchResult:
        result = NegNumSearchResult()

        if not found_first_digit:
            if self.found_leading_sign:
                result.found_on_previous_search = True
                result.position = NumSignSymbolPosition.BEFORE_AND_AFTER
                result.secondary_position = NumSignSymbolPosition.BEFORE
                result.index = self.found_leading_sign_index
                return result
            if self.leading_symbols.matches_at(target, index):
                # half of the pair; the sign is not negative until the trailing symbols match
                self.found_leading_sign = True
                self.found_leading_sign_index = index
                result.position = NumSignSymbolPosition.BEFORE_AND_AFTER
                result.secondary_position = NumSignSymbolPosition.BEFORE
                result.index = index
                result.symbols = self.leading_symbols.text
            return result

        if not self.found_leading_sign:
            return result

        if self.found_trailing_sign:
            result.found_on_previous_search = True
            result.position = NumSignSymbolPosition.BEFORE_AND_AFTER
            result.secondary_position = NumSignSymbolPosition.AFTER
            result.index = self.found_trailing_sign_index
            return result

        if self.trailing_symbols.matches_at(target, index):
            self.found_neg_num_sign = True
            self.found_trailing_sign = True
            self.found_trailing_sign_index = index
            result.found_negative_sign = True
            result.position = NumSignSymbolPosition.BEFORE_AND_AFTER
            result.secondary_position = NumSignSymbolPosition.AFTER
            result.index = index
            result.symbols = self.trailing_symbols.text
        return result

    # --- copy / compare / serialize ---

    def copy(self) -> "NegativeNumberSearchSpec":
        return NegativeNumberSearchSpec(
            position=self.position,
            leading_symbols=self.leading_symbols.copy(),
            trailing_symbols=self.trailing_symbols.copy(),
            found_first_numeric_digit=self.found_first_numeric_digit,
            found_neg_num_sign=self.found_neg_num_sign,
            found_leading_sign=self.found_leading_sign,
            found_leading_sign_index=self.found_leading_sign_index,
            found_trailing_sign=self.found_trailing_sign,
            found_trailing_sign_index=self.found_trailing_sign_index,
        )

    def equal(self, other: "NegativeNumberSearchSpec") -> bool:
        """Compare configuration and processing flags."""
        return self.to_dict() == other.to_dict()

    def to_dict(self) -> Dict[str, Any]:
        return {
            "position": self.position.display_name,
            "leading_symbols": self.leading_symbols.text,
            "trailing_symbols": self.trailing_symbols.text,
            "found_first_numeric_digit": self.found_first_numeric_digit,
            "found_neg_num_sign": self.found_neg_num_sign,
            "found_leading_sign": self.found_leading_sign,
            "found_leading_sign_index": self.found_leading_sign_index,
            "found_trailing_sign": self.found_trailing_sign,
            "found_trailing_sign_index": self.found_trailing_sign_index,
        }

    @staticmethod
    def from_dict(data: Dict[str, Any]) -> "NegativeNumberSearchSpec":
        if not isinstance(data, dict):
            raise TypeError(f"Expected dict, got {type(data).__name__}")
        return NegativeNumberSearchSpec(
            position=NumSignSymbolPosition.parse(data.get("position", "None")),
            leading_symbols=RuneArrayDto.new(data.get("leading_symbols", "")),
            trailing_symbols=RuneArrayDto.new(data.get("trailing_symbols", "")),
            found_first_numeric_digit=bool(data.get("found_first_numeric_digit", False)),
            found_neg_num_sign=bool(data.get("found_neg_num_sign", False)),
            found_leading_sign=bool(data.get("found_leading_sign", False)),
            found_leading_sign_index=int(data.get("found_leading_sign_index", -1)),
            found_trailing_sign=bool(data.get("found_trailing_sign", False)),
            found_trailing_sign_index=int(data.get("found_trailing_sign_index", -1)),
        )

    def parameter_listing(self) -> str:
        """Multi-line, human readable dump of configuration and flags."""
        title = "NegativeNumberSearchSpec Parameters"
        rows = [(key, self._listing_value(value)) for key, value in self.to_dict().items()]
        width = max(len(key) for key, _ in rows)
        lines = [title, "-" * len(title)]
        lines.extend(f"{key.ljust(width)} : {value}" for key, value in rows)
        return "\n".join(lines) + "\n"

    @staticmethod
    def _listing_value(value: Any) -> str:
        if isinstance(value, str):
            return f"'{value}'" if value else "(empty)"
        return str(value)

    def __repr__(self) -> str:
        return (
            f"NegativeNumberSearchSpec(position={self.position.display_name}, "
            f"leading={self.leading_symbols.text!r}, trailing={self.trailing_symbols.text!r})"
        )


class NegNumSearchSpecCollection:
    """Ordered set of negative sign specs searched as a group; first match wins."""

    def __init__(self, specs: Optional[Sequence[NegativeNumberSearchSpec]] = None) -> None:
        self._specs: List[NegativeNumberSearchSpec] = []
        for spec in specs or []:
            self.add_spec(spec)

    @staticmethod
    def new_united_states() -> "NegNumSearchSpecCollection":
        """US conventions: "-123" and "(123)"."""
        collection = NegNumSearchSpecCollection()
        collection.add_leading("-")
        collection.add_leading_and_trailing("(", ")")
        return collection

    @staticmethod
    def new_german() -> "NegNumSearchSpecCollection":
        """German conventions: "-123" and "123-"."""
        collection = NegNumSearchSpecCollection()
        collection.add_leading("-")
        collection.add_trailing("-")
        return collection

    @staticmethod
    def new_french() -> "NegNumSearchSpecCollection":
        collection = NegNumSearchSpecCollection()
        collection.add_leading("-")
        return collection

    def add_spec(self, spec: NegativeNumberSearchSpec) -> None:
        spec.validate()
        self._specs.append(spec.copy())

    def add_leading(self, leading: str) -> None:
        self._specs.append(NegativeNumberSearchSpec.new_leading(leading))

    def add_trailing(self, trailing: str) -> None:
        self._specs.append(NegativeNumberSearchSpec.new_trailing(trailing))

    def add_leading_and_trailing(self, leading: str, trailing: str) -> None:
        self._specs.append(NegativeNumberSearchSpec.new_leading_and_trailing(leading, trailing))

    def empty(self) -> None:
        self._specs.clear()

    def empty_processing_flags(self) -> None:
        for spec in self._specs:
            spec.empty_processing_flags()

    def search(self, target: Sequence[str], index: int, found_first_digit: bool) -> NegNumSearchResult:
        """
        Run every spec at index and return the first result that completes a match.

        Raises:
            SearchError: if the collection holds no specs.
        """
        if not self._specs:
            raise SearchError("Negative number search spec collection is empty")
        last = NegNumSearchResult()
        for spec in self._specs:
            last = spec.search(target, index, found_first_digit)
            if last.found_negative_sign:
                logger.debug(
                    "Negative sign %r found at index %d (%s)",
                    last.symbols,
                    last.index,
                    last.position.display_name,
                )
                return last
        return NegNumSearchResult()

    def validate(self) -> None:
        if not self._specs:
            raise InvalidSpecError("Negative number search spec collection is empty")
        for spec in self._specs:
            spec.validate()

    def is_valid(self) -> bool:
        try:
            self.validate()
        except InvalidSpecError:
            return False
        return True

    def copy(self) -> "NegNumSearchSpecCollection":
        copied = NegNumSearchSpecCollection()
        copied._specs = [spec.copy() for spec in self._specs]
        return copied

    def equal(self, other: "NegNumSearchSpecCollection") -> bool:
        return len(self) == len(other) and all(a.equal(b) for a, b in zip(self, other))

    def __getitem__(self, index: int) -> NegativeNumberSearchSpec:
        return self._specs[index]

    def __len__(self) -> int:
        return len(self._specs)

    def __iter__(self) -> Iterator[NegativeNumberSearchSpec]:
        return iter(self._specs)

    def __repr__(self) -> str:
        return f"NegNumSearchSpecCollection({self._specs!r})"


__all__ = ["NegativeNumberSearchSpec", "NegNumSearchSpecCollection"]
