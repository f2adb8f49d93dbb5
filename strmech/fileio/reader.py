"""
fileio/reader.py

(Краткое RU: Адаптер чтения байтового потока: чтение блоками, в строку, построчно.)

EN: FileIoReader wraps a readable binary stream (a file opened by path or any
caller-supplied stream). OS failures surface as StreamIOError; the adapter
refuses all calls once closed.
"""

from __future__ import annotations

import io
import logging
import re
from typing import BinaryIO, Final, List, Optional, Sequence, Tuple

from ..exceptions import InvalidArgumentError, StreamIOError
from ..model.enums import FileOpenType
from .opener import PathLike, open_file

logger: Final = logging.getLogger(__name__)

DEFAULT_BUFFER_SIZE: Final[int] = 4096
DEFAULT_LINE_DELIMITERS: Final[Tuple[str, ...]] = ("\r\n", "\n")


class FileIoReader:
    """
    Readable byte stream adapter.

    Example:
        >>> with FileIoReader.new_path("notes.txt") as reader:
        ...     lines, num_bytes = reader.read_all_text_lines()
    """

    def __init__(
        self,
        stream: BinaryIO,
        default_buffer_size: int = DEFAULT_BUFFER_SIZE,
        encoding: str = "utf-8",
        owns_stream: bool = True,
    ) -> None:
        if stream is None:
            raise InvalidArgumentError("Reader stream is None")
        if default_buffer_size < 1:
            raise InvalidArgumentError(f"Buffer size must be >= 1, got {default_buffer_size}")
        self._stream: Optional[BinaryIO] = stream
        self._buffer_size = default_buffer_size
        self._encoding = encoding
        self._owns_stream = owns_stream
        self._path: Optional[str] = None

    # --- constructors ---

    @classmethod
    def new_path(
        cls, path: PathLike, default_buffer_size: int = DEFAULT_BUFFER_SIZE, encoding: str = "utf-8"
    ) -> "FileIoReader":
        reader = cls(open_file(path, FileOpenType.READ_ONLY), default_buffer_size, encoding)
        reader._path = str(path)
        return reader

    @classmethod
    def new_stream(
        cls,
        stream: BinaryIO,
        default_buffer_size: int = DEFAULT_BUFFER_SIZE,
        encoding: str = "utf-8",
        owns_stream: bool = True,
    ) -> "FileIoReader":
        """Wrap an existing stream; with owns_stream=False close() leaves it open."""
        return cls(stream, default_buffer_size, encoding, owns_stream)

    # --- properties ---

    @property
    def path(self) -> Optional[str]:
        return self._path

    @property
    def default_buffer_size(self) -> int:
        return self._buffer_size

    @property
    def closed(self) -> bool:
        return self._stream is None

    def set_default_buffer_size(self, size: int) -> None:
        if size < 1:
            raise InvalidArgumentError(f"Buffer size must be >= 1, got {size}")
        self._buffer_size = size

    def _require_stream(self) -> BinaryIO:
        if self._stream is None:
            raise StreamIOError("FileIoReader is closed")
        return self._stream

    # --- reading ---

    def read(self, size: int = -1) -> bytes:
        """Read up to size bytes; -1 reads one default-size buffer. Returns b"" at EOF."""
        stream = self._require_stream()
        if size == 0 or size < -1:
            raise InvalidArgumentError(f"Read size must be -1 or >= 1, got {size}")
        try:
            return stream.read(self._buffer_size if size == -1 else size)
        except OSError as exc:
            raise StreamIOError(f"Read failed: {exc}", cause=exc) from exc

    def _read_all_bytes(self) -> bytes:
        chunks: List[bytes] = []
        while True:
            chunk = self.read()
            if not chunk:
                break
            chunks.append(chunk)
        return b"".join(chunks)

    def _decode(self, data: bytes) -> str:
        try:
            return data.decode(self._encoding)
        except UnicodeDecodeError as exc:
            raise StreamIOError(f"Cannot decode stream as {self._encoding}", cause=exc) from exc

    def read_all_to_string(self, auto_close: bool = False) -> str:
        try:
            return self._decode(self._read_all_bytes())
        finally:
            if auto_close:
                self.close()

    def read_bytes_to_string(self, num_bytes: int) -> str:
        """Read at most num_bytes bytes and decode them."""
        if num_bytes < 1:
            raise InvalidArgumentError(f"Number of bytes must be >= 1, got {num_bytes}")
        chunks: List[bytes] = []
        remaining = num_bytes
        while remaining > 0:
            chunk = self.read(min(remaining, self._buffer_size))
            if not chunk:
                break
            chunks.append(chunk)
            remaining -= len(chunk)
        return self._decode(b"".join(chunks))

    def read_all_text_lines(
        self,
        delimiters: Sequence[str] = DEFAULT_LINE_DELIMITERS,
        max_lines: int = -1,
        auto_close: bool = False,
    ) -> Tuple[List[str], int]:
        """
        Read the remaining stream and split it into lines.

        Delimiters are removed from the returned lines; the empty piece after a
        final delimiter is not a line. max_lines -1 returns every line.

        Returns:
            (lines, bytes_read) where bytes_read counts every byte consumed,
            delimiters included.
        """
        if not delimiters or any(not d for d in delimiters):
            raise InvalidArgumentError("Line delimiters are empty")
        if max_lines == 0 or max_lines < -1:
            raise InvalidArgumentError(f"max_lines must be -1 or >= 1, got {max_lines}")
        try:
            data = self._read_all_bytes()
        finally:
            if auto_close:
                self.close()

        text = self._decode(data)
        pattern = "|".join(re.escape(d) for d in sorted(delimiters, key=len, reverse=True))
        lines = re.split(pattern, text)
        if lines and lines[-1] == "":
            lines.pop()
        if max_lines != -1:
            lines = lines[:max_lines]
        logger.debug("read_all_text_lines: %d lines, %d bytes", len(lines), len(data))
        return lines, len(data)

    def seek(self, offset: int, whence: int = io.SEEK_SET) -> int:
        stream = self._require_stream()
        try:
            return stream.seek(offset, whence)
        except (OSError, ValueError) as exc:
            raise StreamIOError(f"Seek failed: {exc}", cause=exc) from exc

    # --- lifecycle ---

    def close(self) -> None:
        """Close the underlying stream. Closing twice is allowed."""
        if self._stream is None:
            return
        stream, self._stream = self._stream, None
        if not self._owns_stream:
            return
        try:
            stream.close()
        except OSError as exc:
            raise StreamIOError(f"Close failed: {exc}", cause=exc) from exc

    def __enter__(self) -> "FileIoReader":
        self._require_stream()
        return self

    def __exit__(self, exc_type: object, exc: object, tb: object) -> None:
        self.close()

    def __repr__(self) -> str:
        state = "closed" if self.closed else "open"
        return f"FileIoReader(path={self._path!r}, {state})"


__all__ = ["DEFAULT_BUFFER_SIZE", "DEFAULT_LINE_DELIMITERS", "FileIoReader"]
