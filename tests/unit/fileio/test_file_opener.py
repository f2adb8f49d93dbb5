"""Tests for strmech/fileio/opener.py"""

import os
from pathlib import Path

import pytest

from strmech.exceptions import InvalidArgumentError, StreamIOError
from strmech.fileio.opener import compose_open_flags, open_file
from strmech.model.enums import FileOpenMode, FileOpenType


class TestComposeOpenFlags:
    def test_read_only(self) -> None:
        flags = compose_open_flags(FileOpenType.READ_ONLY)
        assert flags & (os.O_WRONLY | os.O_RDWR) == 0

    def test_write_create_truncate(self) -> None:
        flags = compose_open_flags(FileOpenType.WRITE_ONLY, [FileOpenMode.CREATE, FileOpenMode.TRUNCATE])
        assert flags & os.O_WRONLY
        assert flags & os.O_CREAT
        assert flags & os.O_TRUNC

    def test_mode_none_alone_is_allowed(self) -> None:
        assert compose_open_flags(FileOpenType.READ_WRITE, [FileOpenMode.NONE]) & os.O_RDWR

    @pytest.mark.parametrize(
        "open_type, modes",
        [
            (FileOpenType.NONE, []),
            (FileOpenType.READ_ONLY, [FileOpenMode.APPEND]),
            (FileOpenType.READ_ONLY, [FileOpenMode.TRUNCATE]),
            (FileOpenType.WRITE_ONLY, [FileOpenMode.NONE, FileOpenMode.CREATE]),
            (FileOpenType.WRITE_ONLY, ["Create"]),
        ],
    )
    def test_invalid_combinations(self, open_type: FileOpenType, modes: list) -> None:
        with pytest.raises(InvalidArgumentError):
            compose_open_flags(open_type, modes)


class TestOpenFile:
    def test_create_write_and_read(self, tmp_path: Path) -> None:
        path = tmp_path / "out.bin"
        with open_file(path, FileOpenType.WRITE_ONLY, [FileOpenMode.CREATE, FileOpenMode.TRUNCATE]) as stream:
            stream.write(b"abc")
        with open_file(path) as stream:
            assert stream.read() == b"abc"

    def test_append(self, tmp_path: Path) -> None:
        path = tmp_path / "log.txt"
        path.write_bytes(b"one\n")
        with open_file(path, FileOpenType.WRITE_ONLY, [FileOpenMode.APPEND]) as stream:
            stream.write(b"two\n")
        assert path.read_bytes() == b"one\ntwo\n"

    def test_exclusive_create_fails_on_existing_file(self, tmp_path: Path) -> None:
        path = tmp_path / "exists.txt"
        path.write_bytes(b"x")
        with pytest.raises(StreamIOError):
            open_file(path, FileOpenType.WRITE_ONLY, [FileOpenMode.CREATE, FileOpenMode.EXCLUSIVE])

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(StreamIOError) as exc_info:
            open_file(tmp_path / "missing.txt")
        assert isinstance(exc_info.value.__cause__, FileNotFoundError)

    def test_empty_path(self) -> None:
        with pytest.raises(InvalidArgumentError):
            open_file("  ")
