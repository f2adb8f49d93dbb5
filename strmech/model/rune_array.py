"""
Массив символов (RuneArrayDto) и упорядоченная коллекция таких массивов.

Character array DTO used by the number-string search specs: negative sign
symbols, decimal separators and termination delimiters are all short
character sequences matched in place against a target text.

Module: strmech/model/rune_array.py
Project: strmech
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, Final, Iterable, Iterator, List, Optional, Sequence

from ..exceptions import InvalidArgumentError, InvalidSpecError

logger: Final = logging.getLogger(__name__)


@dataclass(slots=True)
class RuneArrayDto:
    """Sequence of single characters matched as a unit against a target string."""

    chars: List[str] = field(default_factory=list)

    @staticmethod
    def new(text: str) -> "RuneArrayDto":
        if not isinstance(text, str):
            raise TypeError(f"RuneArrayDto text must be str, got {type(text).__name__}")
        return RuneArrayDto(chars=list(text))

    @property
    def text(self) -> str:
        return "".join(self.chars)

    def is_empty(self) -> bool:
        return not self.chars

    def matches_at(self, target: Sequence[str], index: int) -> bool:
        """True when the whole sequence occurs in target starting at index."""
        size = len(self.chars)
        if size == 0 or index < 0 or index + size > len(target):
            return False
        for offset, char in enumerate(self.chars):
            if target[index + offset] != char:
                return False
        return True

    def search_for(self, target: Sequence[str], start: int = 0) -> int:
        """Return the first index >= start where the sequence matches, or -1."""
        if start < 0:
            raise InvalidArgumentError(f"start index must be >= 0, got {start}")
        last_start = len(target) - len(self.chars)
        for idx in range(start, last_start + 1):
            if self.matches_at(target, idx):
                return idx
        return -1

    def validate(self) -> None:
        if not isinstance(self.chars, list):
            raise InvalidSpecError(f"chars must be list, got {type(self.chars).__name__}")
        for i, char in enumerate(self.chars):
            if not isinstance(char, str) or len(char) != 1:
                raise InvalidSpecError(f"chars[{i}] must be a single character, got {char!r}")

    def copy(self) -> "RuneArrayDto":
        return RuneArrayDto(chars=list(self.chars))

    def equal(self, other: "RuneArrayDto") -> bool:
        return self.chars == other.chars

    def to_dict(self) -> Dict[str, Any]:
        return {"chars": self.text}

    @staticmethod
    def from_dict(data: Dict[str, Any]) -> "RuneArrayDto":
        return RuneArrayDto.new(data.get("chars", ""))

    def __len__(self) -> int:
        return len(self.chars)

    def __repr__(self) -> str:
        return f"RuneArrayDto({self.text!r})"


class RuneArrayCollection:
    """Ordered collection of RuneArrayDto, e.g. a list of termination delimiters."""

    def __init__(self, items: Optional[Iterable[RuneArrayDto]] = None) -> None:
        self._items: List[RuneArrayDto] = [item.copy() for item in items or []]

    @staticmethod
    def new_from_strings(texts: Iterable[str]) -> "RuneArrayCollection":
        collection = RuneArrayCollection()
        for text in texts:
            collection.add(text)
        return collection

    def add(self, text: str) -> None:
        if not text:
            raise InvalidArgumentError("Cannot add an empty character sequence")
        self._items.append(RuneArrayDto.new(text))

    def add_dto(self, dto: RuneArrayDto) -> None:
        if dto.is_empty():
            raise InvalidArgumentError("Cannot add an empty character sequence")
        self._items.append(dto.copy())

    def find_first_match(self, target: Sequence[str], index: int) -> Optional[RuneArrayDto]:
        """Return the longest member matching target at index, or None."""
        best: Optional[RuneArrayDto] = None
        for item in self._items:
            if item.matches_at(target, index) and (best is None or len(item) > len(best)):
                best = item
        return best

    def texts(self) -> List[str]:
        return [item.text for item in self._items]

    def copy(self) -> "RuneArrayCollection":
        return RuneArrayCollection(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[RuneArrayDto]:
        return iter(self._items)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, RuneArrayCollection):
            return NotImplemented
        return self.texts() == other.texts()

    def __repr__(self) -> str:
        return f"RuneArrayCollection({self.texts()!r})"


__all__ = ["RuneArrayDto", "RuneArrayCollection"]
