"""
fileio/writer.py

(Краткое RU: Адаптер записи байтового потока: байты, текст, числа и списки строк.)

EN: FileIoWriter wraps a writable binary stream. ``write_text_or_numbers``
accepts text, bytes, numbers (including NumberStrKernel) and sequences of
those, writing each item followed by the requested line terminator.
"""

from __future__ import annotations

import io
import logging
from decimal import Decimal
from typing import Any, BinaryIO, Final, Optional

from ..exceptions import InvalidArgumentError, StreamIOError
from ..model.enums import FileOpenMode, FileOpenType
from ..numbers.kernel import NumberStrKernel
from .opener import PathLike, open_file
from .reader import DEFAULT_BUFFER_SIZE

logger: Final = logging.getLogger(__name__)


class FileIoWriter:
    """
    Writable byte stream adapter.

    Example:
        >>> with FileIoWriter.new_path("report.txt") as writer:
        ...     writer.write_text_or_numbers(["Line 1", "Line 2"], line_terminator="\\n")
        14
    """

    def __init__(
        self,
        stream: BinaryIO,
        default_buffer_size: int = DEFAULT_BUFFER_SIZE,
        encoding: str = "utf-8",
        owns_stream: bool = True,
    ) -> None:
        if stream is None:
            raise InvalidArgumentError("Writer stream is None")
        if default_buffer_size < 1:
            raise InvalidArgumentError(f"Buffer size must be >= 1, got {default_buffer_size}")
        self._stream: Optional[BinaryIO] = stream
        self._buffer_size = default_buffer_size
        self._encoding = encoding
        self._owns_stream = owns_stream
        self._path: Optional[str] = None

    @classmethod
    def new_path(
        cls,
        path: PathLike,
        truncate: bool = True,
        default_buffer_size: int = DEFAULT_BUFFER_SIZE,
        encoding: str = "utf-8",
    ) -> "FileIoWriter":
        """Create path if missing; truncate it, or append when truncate is False."""
        modes = [FileOpenMode.CREATE, FileOpenMode.TRUNCATE if truncate else FileOpenMode.APPEND]
        writer = cls(open_file(path, FileOpenType.WRITE_ONLY, modes), default_buffer_size, encoding)
        writer._path = str(path)
        return writer

    @classmethod
    def new_stream(
        cls,
        stream: BinaryIO,
        default_buffer_size: int = DEFAULT_BUFFER_SIZE,
        encoding: str = "utf-8",
        owns_stream: bool = True,
    ) -> "FileIoWriter":
        return cls(stream, default_buffer_size, encoding, owns_stream)

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
        """Largest chunk handed to the stream per write call."""
        if size < 1:
            raise InvalidArgumentError(f"Buffer size must be >= 1, got {size}")
        self._buffer_size = size

    def _require_stream(self) -> BinaryIO:
        if self._stream is None:
            raise StreamIOError("FileIoWriter is closed")
        return self._stream

    def write(self, data: bytes) -> int:
        """Write all of data; returns the number of bytes written."""
        if not isinstance(data, (bytes, bytearray, memoryview)):
            raise TypeError(f"data must be bytes, got {type(data).__name__}")
        stream = self._require_stream()
        view = memoryview(data)
        written = 0
        try:
            while written < len(view):
                chunk = view[written : written + self._buffer_size]
                count = stream.write(chunk)
                # Raw streams may report short writes; None means non-blocking with nothing written
                written += len(chunk) if count is None else count
        except OSError as exc:
            raise StreamIOError(f"Write failed after {written} bytes: {exc}", cause=exc) from exc
        return written

    def _to_text(self, value: Any) -> str:
        if isinstance(value, str):
            return value
        if isinstance(value, bool):
            return str(value).lower()
        if isinstance(value, NumberStrKernel):
            return value.pure_number_str()
        if isinstance(value, (int, float, Decimal)):
            return str(value)
        raise InvalidArgumentError(f"Unsupported value type for writing: {type(value).__name__}")

    def write_text_or_numbers(
        self,
        value: Any,
        line_terminator: str = "",
        end_of_text: str = "",
        auto_close: bool = False,
    ) -> int:
        """
        Write text, bytes, numbers or a list/tuple of them.

        line_terminator follows every item; end_of_text is written once at the
        end. Returns the total number of bytes written.
        """
        try:
            items = list(value) if isinstance(value, (list, tuple)) else [value]
            if not items:
                raise InvalidArgumentError("Nothing to write: value is an empty sequence")
            total = 0
            terminator = line_terminator.encode(self._encoding)
            for item in items:
                if isinstance(item, (bytes, bytearray)):
                    payload = bytes(item)
                else:
                    payload = self._to_text(item).encode(self._encoding)
                total += self.write(payload + terminator)
            if end_of_text:
                total += self.write(end_of_text.encode(self._encoding))
            return total
        finally:
            if auto_close:
                self.close()

    def flush(self) -> None:
        stream = self._require_stream()
        try:
            stream.flush()
        except OSError as exc:
            raise StreamIOError(f"Flush failed: {exc}", cause=exc) from exc

    def seek(self, offset: int, whence: int = io.SEEK_SET) -> int:
        stream = self._require_stream()
        try:
            return stream.seek(offset, whence)
        except (OSError, ValueError) as exc:
            raise StreamIOError(f"Seek failed: {exc}", cause=exc) from exc

    def close(self) -> None:
        """Flush and close the underlying stream. Closing twice is allowed."""
        if self._stream is None:
            return
        stream, self._stream = self._stream, None
        try:
            stream.flush()
            if self._owns_stream:
                stream.close()
        except OSError as exc:
            raise StreamIOError(f"Close failed: {exc}", cause=exc) from exc
        logger.debug("FileIoWriter closed (%s)", self._path or "stream")

    def __enter__(self) -> "FileIoWriter":
        self._require_stream()
        return self

    def __exit__(self, exc_type: object, exc: object, tb: object) -> None:
        self.close()

    def __repr__(self) -> str:
        state = "closed" if self.closed else "open"
        return f"FileIoWriter(path={self._path!r}, {state})"


__all__ = ["FileIoWriter"]
