"""Tests for strmech/exceptions.py"""

import pytest

from strmech.exceptions import (
    EnumParseError,
    InvalidArgumentError,
    InvalidSpecError,
    NumberParseError,
    SearchError,
    StrMechError,
    StreamIOError,
)


@pytest.mark.parametrize(
    "exc_cls",
    [InvalidArgumentError, EnumParseError, InvalidSpecError, NumberParseError, SearchError, StreamIOError],
)
def test_all_errors_derive_from_base(exc_cls: type) -> None:
    assert issubclass(exc_cls, StrMechError)


def test_builtin_compatibility() -> None:
    assert issubclass(InvalidArgumentError, ValueError)
    assert issubclass(InvalidSpecError, ValueError)
    assert issubclass(NumberParseError, ValueError)
    assert issubclass(EnumParseError, InvalidArgumentError)
    assert issubclass(StreamIOError, OSError)


def test_cause_is_chained() -> None:
    root = KeyError("missing")
    err = InvalidSpecError("bad spec", cause=root)
    assert str(err) == "bad spec"
    assert err.__cause__ is root


def test_stream_error_message() -> None:
    with pytest.raises(OSError, match="closed"):
        raise StreamIOError("reader is closed")
