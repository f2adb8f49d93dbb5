# -*- coding: utf-8 -*-
"""
RU: Иерархия исключений strmech. Узкие подклассы позволяют вызывающему коду
точно обрабатывать ошибки аргументов, спецификаций, разбора чисел и потоков.

EN: Exception hierarchy for strmech. Argument and spec errors also derive from
ValueError, stream errors from OSError, so callers that only know the built-in
types keep working.
"""

from __future__ import annotations

from typing import Optional


class StrMechError(Exception):
    """Base exception for all strmech failures."""

    def __init__(self, message: str = "", *, cause: Optional[BaseException] = None) -> None:
        super().__init__(message)
        self.__cause__ = cause


# Arguments
class InvalidArgumentError(StrMechError, ValueError):
    """Raised when a call argument is empty, negative or out of range."""


class EnumParseError(InvalidArgumentError):
    """Raised when enum text or an enum code is not recognised."""


# Specs / DTOs
class InvalidSpecError(StrMechError, ValueError):
    """Raised by validate() when a spec or DTO holds inconsistent data."""


# Numbers
class NumberParseError(StrMechError, ValueError):
    """Raised when no numeric value can be extracted from a number string."""


class SearchError(StrMechError):
    """Raised when a search is requested over an empty spec collection."""


# Streams
class StreamIOError(StrMechError, OSError):
    """Raised on read/write adapter failures (closed stream, OS error)."""


__all__ = [
    "StrMechError",
    "InvalidArgumentError",
    "EnumParseError",
    "InvalidSpecError",
    "NumberParseError",
    "SearchError",
    "StreamIOError",
]
