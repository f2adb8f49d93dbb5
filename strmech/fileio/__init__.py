"""
fileio

Адаптеры чтения и записи байтовых потоков поверх файлов или произвольных потоков.

Public API:
    - open_file: открытие файла по FileOpenType и набору FileOpenMode
    - FileIoReader: чтение блоками, в строку, построчно
    - FileIoWriter: запись байтов, текста, чисел и списков строк
    - FileIoReadWrite: пара читатель и писатель, копирование потока целиком
"""

from .opener import compose_open_flags, open_file
from .reader import FileIoReader
from .readwrite import FileIoReadWrite
from .writer import FileIoWriter

__all__ = ["FileIoReadWrite", "FileIoReader", "FileIoWriter", "compose_open_flags", "open_file"]
