"""
fileio/opener.py

(Краткое RU: Открытие файлов по типу доступа и набору режимов через os.open.)

EN: Opens binary file objects from FileOpenType + FileOpenMode flags.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import BinaryIO, Final, Iterable, Union

from ..exceptions import InvalidArgumentError, StreamIOError
from ..model.enums import FileOpenMode, FileOpenType

logger: Final = logging.getLogger(__name__)

DEFAULT_FILE_PERMISSIONS: Final[int] = 0o644

PathLike = Union[str, "os.PathLike[str]"]


def _file_mode(open_type: FileOpenType, modes: frozenset[FileOpenMode]) -> str:
    if open_type is FileOpenType.READ_ONLY:
        return "rb"
    if open_type is FileOpenType.WRITE_ONLY:
        return "ab" if FileOpenMode.APPEND in modes else "wb"
    return "a+b" if FileOpenMode.APPEND in modes else "r+b"


def compose_open_flags(open_type: FileOpenType, modes: Iterable[FileOpenMode] = ()) -> int:
    """
    Combine the access type and modes into os.open flags.

    Raises:
        InvalidArgumentError: for FileOpenType.NONE, NONE mixed with other
            modes, or a write mode requested with READ_ONLY access.
    """
    if not isinstance(open_type, FileOpenType) or not open_type.is_valid():
        raise InvalidArgumentError(f"Invalid file open type: {open_type!r}")
    mode_set = frozenset(modes)
    for mode in mode_set:
        if not isinstance(mode, FileOpenMode):
            raise InvalidArgumentError(f"Invalid file open mode: {mode!r}")
    if FileOpenMode.NONE in mode_set and len(mode_set) > 1:
        raise InvalidArgumentError("FileOpenMode.NONE cannot be combined with other modes")
    if open_type is FileOpenType.READ_ONLY and mode_set & {
        FileOpenMode.APPEND,
        FileOpenMode.TRUNCATE,
    }:
        raise InvalidArgumentError("Append and truncate modes require write access")

    flags = open_type.os_flag | getattr(os, "O_BINARY", 0)
    for mode in mode_set:
        flags |= mode.os_flag
    return flags


def open_file(
    path: PathLike,
    open_type: FileOpenType = FileOpenType.READ_ONLY,
    modes: Iterable[FileOpenMode] = (),
) -> BinaryIO:
    """
    Open path as a binary file object.

    Example:
        >>> f = open_file("out.txt", FileOpenType.WRITE_ONLY, [FileOpenMode.CREATE, FileOpenMode.TRUNCATE])

    Raises:
        InvalidArgumentError: on an empty path or invalid flags.
        StreamIOError: when the operating system refuses the open.
    """
    if not str(path).strip():
        raise InvalidArgumentError("File path is empty")
    mode_set = frozenset(modes)
    flags = compose_open_flags(open_type, mode_set)
    try:
        fd = os.open(Path(path), flags, DEFAULT_FILE_PERMISSIONS)
    except OSError as exc:
        raise StreamIOError(f"Cannot open {str(path)!r}: {exc.strerror}", cause=exc) from exc
    try:
        stream = os.fdopen(fd, _file_mode(open_type, mode_set))
    except OSError as exc:
        os.close(fd)
        raise StreamIOError(f"Cannot open {str(path)!r}: {exc}", cause=exc) from exc
    logger.debug("Opened %s (%s, flags=%#x)", path, open_type.display_name, flags)
    return stream  # type: ignore[return-value]


__all__ = ["DEFAULT_FILE_PERMISSIONS", "compose_open_flags", "open_file"]
