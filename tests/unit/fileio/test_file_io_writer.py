"""Tests for strmech/fileio/writer.py"""

import io
from decimal import Decimal
from pathlib import Path
from unittest import mock

import pytest

from strmech.exceptions import InvalidArgumentError, StreamIOError
from strmech.fileio.reader import FileIoReader
from strmech.fileio.writer import FileIoWriter
from strmech.numbers.kernel import NumberStrKernel


def _writer() -> tuple[FileIoWriter, io.BytesIO]:
    stream = io.BytesIO()
    return FileIoWriter.new_stream(stream, owns_stream=False), stream


class TestWrite:
    def test_write_bytes_in_chunks(self) -> None:
        stream = io.BytesIO()
        writer = FileIoWriter(stream, default_buffer_size=3, owns_stream=False)
        assert writer.write(b"abcdefgh") == 8
        assert stream.getvalue() == b"abcdefgh"

    def test_write_rejects_text(self) -> None:
        writer, _ = _writer()
        with pytest.raises(TypeError):
            writer.write("text")  # type: ignore[arg-type]

    def test_set_default_buffer_size(self) -> None:
        stream = mock.MagicMock(spec=io.BytesIO)
        stream.write.side_effect = lambda chunk: len(chunk)
        writer = FileIoWriter(stream, owns_stream=False)
        writer.set_default_buffer_size(2)
        assert writer.default_buffer_size == 2
        assert writer.write(b"abcde") == 5
        assert [bytes(c.args[0]) for c in stream.write.call_args_list] == [b"ab", b"cd", b"e"]
        with pytest.raises(InvalidArgumentError):
            writer.set_default_buffer_size(0)


class TestWriteTextOrNumbers:
    def test_list_with_terminator(self) -> None:
        writer, stream = _writer()
        count = writer.write_text_or_numbers(["Line 1", "Line 2"], line_terminator="\n")
        assert count == 14
        assert stream.getvalue() == b"Line 1\nLine 2\n"

    def test_numbers_and_booleans(self) -> None:
        writer, stream = _writer()
        kernel = NumberStrKernel.new_from_digits("12", "50")
        writer.write_text_or_numbers([42, -1.5, Decimal("3.10"), True, kernel, b"raw"], line_terminator=",")
        assert stream.getvalue() == b"42,-1.5,3.10,true,12.50,raw,"

    def test_single_value_and_end_of_text(self) -> None:
        writer, stream = _writer()
        assert writer.write_text_or_numbers("done", end_of_text="\x1a") == 5
        assert stream.getvalue() == b"done\x1a"

    def test_encoding(self) -> None:
        stream = io.BytesIO()
        writer = FileIoWriter.new_stream(stream, encoding="cp1251", owns_stream=False)
        writer.write_text_or_numbers("Привет")
        assert stream.getvalue() == "Привет".encode("cp1251")

    def test_empty_sequence(self) -> None:
        writer, _ = _writer()
        with pytest.raises(InvalidArgumentError):
            writer.write_text_or_numbers([])

    def test_unsupported_value(self) -> None:
        writer, _ = _writer()
        with pytest.raises(InvalidArgumentError):
            writer.write_text_or_numbers({"a": 1})

    def test_auto_close(self) -> None:
        writer, stream = _writer()
        writer.write_text_or_numbers("x", auto_close=True)
        assert writer.closed
        assert stream.getvalue() == b"x"


class TestFiles:
    def test_truncate_then_append(self, tmp_path: Path) -> None:
        path = tmp_path / "report.txt"
        with FileIoWriter.new_path(path) as writer:
            writer.write_text_or_numbers(["a", "b"], line_terminator="\n")
        with FileIoWriter.new_path(path, truncate=False) as writer:
            writer.write_text_or_numbers("c", line_terminator="\n")

        with FileIoReader.new_path(path) as reader:
            assert reader.read_all_text_lines() == (["a", "b", "c"], 6)

        with FileIoWriter.new_path(path) as writer:
            writer.write_text_or_numbers("z")
        assert path.read_bytes() == b"z"

    def test_path_in_missing_directory(self, tmp_path: Path) -> None:
        with pytest.raises(StreamIOError):
            FileIoWriter.new_path(tmp_path / "nope" / "file.txt")


class TestLifecycle:
    def test_closed_writer_refuses_calls(self) -> None:
        writer, _ = _writer()
        writer.close()
        writer.close()
        with pytest.raises(StreamIOError, match="closed"):
            writer.write(b"x")
        with pytest.raises(StreamIOError):
            writer.flush()

    def test_owned_stream_closed(self) -> None:
        stream = io.BytesIO()
        FileIoWriter.new_stream(stream).close()
        assert stream.closed

    def test_seek_and_overwrite(self) -> None:
        writer, stream = _writer()
        writer.write(b"hello")
        writer.seek(0)
        writer.write(b"J")
        assert stream.getvalue() == b"Jello"

    def test_repr(self, tmp_path: Path) -> None:
        writer = FileIoWriter.new_path(tmp_path / "r.txt")
        assert repr(writer).endswith("open)")
        writer.close()
        assert repr(writer).endswith("closed)")
