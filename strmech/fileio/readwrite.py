"""
fileio/readwrite.py

(Краткое RU: Пара «читатель + писатель»: копирование входного потока в выходной
блоками, раздельные seek и размеры буферов, совместное закрытие.)

EN: FileIoReadWrite couples a FileIoReader with a FileIoWriter. The usual job
is ``read_write_all``: copy everything left in the reader to the writer, one
reader buffer at a time.
"""

from __future__ import annotations

import io
import logging
from typing import BinaryIO, Final, Optional

from ..exceptions import InvalidArgumentError, StreamIOError
from .opener import PathLike
from .reader import DEFAULT_BUFFER_SIZE, FileIoReader
from .writer import FileIoWriter

logger: Final = logging.getLogger(__name__)


class FileIoReadWrite:
    """
    Reader and writer used together.

    Example:
        >>> with FileIoReadWrite.new_paths("in.txt", "out.txt") as rw:
        ...     rw.read_write_all()
        1024
    """

    def __init__(self, reader: FileIoReader, writer: FileIoWriter) -> None:
        if not isinstance(reader, FileIoReader):
            raise InvalidArgumentError(f"Expected FileIoReader, got {type(reader).__name__}")
        if not isinstance(writer, FileIoWriter):
            raise InvalidArgumentError(f"Expected FileIoWriter, got {type(writer).__name__}")
        self._reader: Optional[FileIoReader] = reader
        self._writer: Optional[FileIoWriter] = writer

    @classmethod
    def new_paths(
        cls,
        reader_path: PathLike,
        writer_path: PathLike,
        truncate: bool = True,
        default_buffer_size: int = DEFAULT_BUFFER_SIZE,
        encoding: str = "utf-8",
    ) -> "FileIoReadWrite":
        """Open reader_path for reading and writer_path for writing (created if missing)."""
        reader = FileIoReader.new_path(reader_path, default_buffer_size, encoding)
        try:
            writer = FileIoWriter.new_path(writer_path, truncate, default_buffer_size, encoding)
        except (InvalidArgumentError, StreamIOError):
            reader.close()
            raise
        return cls(reader, writer)

    @classmethod
    def new_streams(
        cls,
        reader_stream: BinaryIO,
        writer_stream: BinaryIO,
        default_buffer_size: int = DEFAULT_BUFFER_SIZE,
        encoding: str = "utf-8",
        owns_streams: bool = True,
    ) -> "FileIoReadWrite":
        return cls(
            FileIoReader.new_stream(reader_stream, default_buffer_size, encoding, owns_streams),
            FileIoWriter.new_stream(writer_stream, default_buffer_size, encoding, owns_streams),
        )

    @property
    def reader(self) -> FileIoReader:
        if self._reader is None:
            raise StreamIOError("FileIoReadWrite reader is closed")
        return self._reader

    @property
    def writer(self) -> FileIoWriter:
        if self._writer is None:
            raise StreamIOError("FileIoReadWrite writer is closed")
        return self._writer

    @property
    def closed(self) -> bool:
        return self._reader is None and self._writer is None

    # --- reading / writing ---

    def read(self, size: int = -1) -> bytes:
        return self.reader.read(size)

    def write(self, data: bytes) -> int:
        return self.writer.write(data)

    def read_write_all(self, auto_close: bool = False) -> int:
        """
        Copy the rest of the reader into the writer.

        Returns:
            Number of bytes written.

        Raises:
            StreamIOError: on a read or write failure, or if either side is closed.
        """
        total = 0
        try:
            reader, writer = self.reader, self.writer
            while True:
                chunk = reader.read()
                if not chunk:
                    break
                total += writer.write(chunk)
            writer.flush()
        finally:
            if auto_close:
                self.close()
        logger.debug("read_write_all copied %d bytes", total)
        return total

    # --- positioning / buffers ---

    def seek_reader(self, offset: int, whence: int = io.SEEK_SET) -> int:
        return self.reader.seek(offset, whence)

    def seek_writer(self, offset: int, whence: int = io.SEEK_SET) -> int:
        return self.writer.seek(offset, whence)

    def set_default_reader_buffer_size(self, size: int) -> None:
        self.reader.set_default_buffer_size(size)

    def set_default_writer_buffer_size(self, size: int) -> None:
        self.writer.set_default_buffer_size(size)

    # --- closing ---

    def close_reader(self) -> None:
        if self._reader is None:
            return
        reader, self._reader = self._reader, None
        reader.close()

    def close_writer(self) -> None:
        if self._writer is None:
            return
        writer, self._writer = self._writer, None
        writer.close()

    def close(self) -> None:
        """Close the writer, then the reader. The reader is closed even if the writer fails."""
        try:
            self.close_writer()
        finally:
            self.close_reader()

    def __enter__(self) -> "FileIoReadWrite":
        if self._reader is None or self._writer is None:
            raise StreamIOError("FileIoReadWrite is closed")
        return self

    def __exit__(self, exc_type: object, exc: object, tb: object) -> None:
        self.close()

    def __repr__(self) -> str:
        return f"FileIoReadWrite(reader={self._reader!r}, writer={self._writer!r})"


__all__ = ["FileIoReadWrite"]
