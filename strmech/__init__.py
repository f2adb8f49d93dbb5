"""
Пакет strmech
=============

Библиотека утилит для работы со строками и форматирования числовых строк.

Этот пакет предоставляет:
    - Перечисления с двунаправленным поиском имя <-> код
    - Выравнивание, центрирование и заполнение текста в полях фиксированной длины
    - Поиск символов отрицательного знака в числовых строках
    - Разбор и форматирование числовых строк (разделители групп разрядов, округление)
    - Спецификации текстовых полей и строк для генерации отчётов
    - Адаптеры чтения/записи потоков байтов

Пример базового использования:
    >>> from strmech import NumStrFormatSpec, parse_us_number_str, get_logger
    >>>
    >>> logger = get_logger(__name__)
    >>> kernel, _ = parse_us_number_str("(1234567.891)")
    >>> kernel.format(NumStrFormatSpec.new_united_states())
    '-1,234,567.891'

Пример построения отчёта:
    >>> from strmech import TextLineSpecLinesCollection, TextLineSpecTitleMarquee
    >>>
    >>> marquee = TextLineSpecTitleMarquee.new_marquee(["Monthly Report"], line_len=40)
    >>> print(marquee.formatted_text())

Конфигурация:
    >>> from strmech import load_config
    >>> config = load_config()
    >>> config["default_decimal_separator"]
    '.'

Автор: strmech Development Team
Версия: 0.1.0
Лицензия: MIT
Python: 3.11+
"""

import json
import logging
import logging.handlers
import os
import sys
from pathlib import Path
from typing import Any, Dict, Optional

# =============================================================================
# МЕТАДАННЫЕ ВЕРСИИ
# =============================================================================

__version__ = "0.1.0"
__author__ = "strmech Development Team"
__description__ = "String manipulation and number string formatting utilities"
__license__ = "MIT"
__python_requires__ = ">=3.11"

VERSION_MAJOR = 0
VERSION_MINOR = 1
VERSION_PATCH = 0

if sys.version_info < (3, 11):
    raise RuntimeError(
        f"strmech требует Python 3.11 или выше. "
        f"Текущая версия: {sys.version_info.major}."
        f"{sys.version_info.minor}.{sys.version_info.micro}"
    )

# =============================================================================
# КОНФИГУРАЦИЯ ЛОГИРОВАНИЯ
# =============================================================================

PACKAGE_LOGGER_NAME = "strmech"


def _setup_logging() -> None:
    """
    Инициализировать общепакетную конфигурацию логирования.

    Настраивает логгер пакета "strmech" с:
    - Консольным обработчиком (stderr) для WARNING и выше
    - Ротирующим файловым обработчиком, если задана переменная STRMECH_LOG_FILE

    Уровень логирования задаётся переменной окружения STRMECH_LOG_LEVEL:
    DEBUG, INFO, WARNING, ERROR, CRITICAL.

    Функция идемпотентна - повторные вызовы не имеют эффекта.
    """
    log_level_str = os.environ.get("STRMECH_LOG_LEVEL", "INFO").upper()

    log_level_map = {
        "DEBUG": logging.DEBUG,
        "INFO": logging.INFO,
        "WARNING": logging.WARNING,
        "ERROR": logging.ERROR,
        "CRITICAL": logging.CRITICAL,
    }
    log_level = log_level_map.get(log_level_str, logging.INFO)

    package_logger = logging.getLogger(PACKAGE_LOGGER_NAME)
    if package_logger.handlers:
        return

    package_logger.setLevel(log_level)

    formatter = logging.Formatter(
        fmt=("[%(asctime)s] %(levelname)-8s " "[%(name)s.%(funcName)s:%(lineno)d] %(message)s"),
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(logging.WARNING)
    console_handler.setFormatter(formatter)
    package_logger.addHandler(console_handler)

    # Файловый журнал только по явному запросу
    log_file = os.environ.get("STRMECH_LOG_FILE")
    if log_file:
        try:
            log_path = Path(log_file)
            log_path.parent.mkdir(parents=True, exist_ok=True)
            file_handler = logging.handlers.RotatingFileHandler(
                filename=log_path,
                maxBytes=10 * 1024 * 1024,  # 10 МБ
                backupCount=5,
                encoding="utf-8",
            )
            file_handler.setLevel(log_level)
            file_handler.setFormatter(formatter)
            package_logger.addHandler(file_handler)
        except OSError as e:
            package_logger.warning(
                f"Не удалось инициализировать файловое логирование: {e}. "
                f"Используется только консоль."
            )

    package_logger.propagate = False


def get_logger(module_name: str) -> logging.Logger:
    """
    Получить логгер для указанного модуля в пространстве имён 'strmech'.

    Аргументы:
        module_name: Имя модуля, обычно `__name__`.

    Возвращает:
        Экземпляр logging.Logger с именем 'strmech.<module_name>'.

    Пример:
        >>> logger = get_logger("report_builder")
        >>> logger.name
        'strmech.report_builder'
    """
    if module_name.startswith(PACKAGE_LOGGER_NAME):
        return logging.getLogger(module_name)
    if module_name == "__main__":
        return logging.getLogger(f"{PACKAGE_LOGGER_NAME}.main")
    clean_name = module_name.lstrip(".")
    return logging.getLogger(f"{PACKAGE_LOGGER_NAME}.{clean_name}")


_setup_logging()

# =============================================================================
# УПРАВЛЕНИЕ КОНФИГУРАЦИЕЙ
# =============================================================================

_DEFAULT_CONFIG: Dict[str, Any] = {
    "log_level": "INFO",
    "default_new_line": "\n",
    "default_decimal_separator": ".",
    "default_integer_separator": ",",
    "default_integer_grouping": [3],
    "default_reader_buffer_size": 4096,
    "max_field_length": 1_000_000,
    "default_time_format": "%Y-%m-%d %H:%M:%S.%f",
}


def load_config(config_path: Optional[Path] = None) -> Dict[str, Any]:
    """
    Загрузить конфигурацию из strmech.json или использовать значения по умолчанию.

    Если файл отсутствует, содержит недопустимый JSON или не является
    JSON-объектом, возвращается конфигурация по умолчанию, а в лог
    записывается предупреждение.

    Ключи конфигурации:
        - log_level: str - Уровень логирования
        - default_new_line: str - Символы конца строки для текстовых спецификаций
        - default_decimal_separator: str - Десятичный разделитель
        - default_integer_separator: str - Разделитель групп разрядов
        - default_integer_grouping: list[int] - Последовательность группировки
        - default_reader_buffer_size: int - Размер буфера чтения потоков
        - max_field_length: int - Максимальная длина текстового поля
        - default_time_format: str - Формат strftime для полей даты/времени

    Аргументы:
        config_path: Путь к файлу конфигурации. Если None, ищется
                     'strmech.json' в текущем каталоге.

    Возвращает:
        Словарь со всеми ключами по умолчанию, переопределёнными
        пользовательскими значениями.
    """
    logger = get_logger(__name__)

    if config_path is None:
        config_path = Path("strmech.json")

    config = dict(_DEFAULT_CONFIG)

    if not config_path.exists():
        logger.info(f"Файл конфигурации {config_path} не найден. Используются значения по умолчанию.")
        return config

    try:
        with open(config_path, "r", encoding="utf-8") as f:
            user_config = json.load(f)

        if not isinstance(user_config, dict):
            raise ValueError(
                f"Файл конфигурации должен содержать JSON-объект, "
                f"получен {type(user_config).__name__}"
            )

        config.update(user_config)
        logger.info(f"Конфигурация загружена из {config_path}")
        logger.debug(f"Конфигурация: {config}")

    except json.JSONDecodeError as e:
        logger.warning(
            f"Не удалось разобрать {config_path}: Недопустимый JSON "
            f"в строке {e.lineno}, столбце {e.colno}. "
            f"Используется конфигурация по умолчанию."
        )
        config = dict(_DEFAULT_CONFIG)
    except OSError as e:
        logger.warning(f"Не удалось прочитать {config_path}: {e}. Используется конфигурация по умолчанию.")
    except ValueError as e:
        logger.warning(f"Недопустимый формат конфигурации: {e}. Используется конфигурация по умолчанию.")

    return config


# =============================================================================
# ПУБЛИЧНЫЙ API
# =============================================================================

from .exceptions import (  # noqa: E402
    EnumParseError,
    InvalidArgumentError,
    InvalidSpecError,
    NumberParseError,
    SearchError,
    StrMechError,
    StreamIOError,
)
from .model.enums import (  # noqa: E402
    CharSearchTerminationType,
    CurrencyNumSignRelativePosition,
    DataFieldTrailingDelimiterType,
    FileOpenMode,
    FileOpenType,
    IntegerGroupingType,
    NumberFieldSymbolPosition,
    NumberRoundingType,
    NumericSignValueType,
    NumericSymbolClass,
    NumericSymbolLocation,
    NumericValueType,
    NumSignSymbolDisplayMode,
    NumSignSymbolPosition,
    TextFieldType,
    TextJustify,
)
from .model.rune_array import RuneArrayCollection, RuneArrayDto  # noqa: E402
from .numbers.decimal_separator import DecimalSeparatorSpec  # noqa: E402
from .numbers.formatting import (  # noqa: E402
    CurrencySymbolSpec,
    NumberFieldSpec,
    NumberSignSymbolSpec,
    NumStrFormatSpec,
    format_number,
)
from .numbers.integer_separator import IntegerSeparatorSpec  # noqa: E402
from .numbers.kernel import NumberStrKernel  # noqa: E402
from .numbers.negative_sign import (  # noqa: E402
    NegativeNumberSearchSpec,
    NegNumSearchSpecCollection,
)
from .numbers.parser import (  # noqa: E402
    NumberStrSearchParams,
    parse_french_number_str,
    parse_german_number_str,
    parse_number_str,
    parse_us_number_str,
)
from .strings.justify import (  # noqa: E402
    center_in_str,
    justify_text_in_field,
    left_justify,
    right_justify,
)
from .text.fields import (  # noqa: E402
    TextFieldSpecDateTime,
    TextFieldSpecFiller,
    TextFieldSpecLabel,
    TextFieldSpecSpacer,
)
from .text.lines import (  # noqa: E402
    TextLineSpecAverageTime,
    TextLineSpecBlankLines,
    TextLineSpecLinesCollection,
    TextLineSpecPlainText,
    TextLineSpecSolidLine,
    TextLineSpecStandardLine,
    TextLineSpecTimerLines,
    TextLineSpecTitleMarquee,
)
from .fileio import FileIoReader, FileIoReadWrite, FileIoWriter, open_file  # noqa: E402

__all__ = [
    # Метаданные версии
    "__version__",
    "__author__",
    "__description__",
    "__license__",
    "__python_requires__",
    "VERSION_MAJOR",
    "VERSION_MINOR",
    "VERSION_PATCH",
    # Утилиты
    "get_logger",
    "load_config",
    # Исключения
    "StrMechError",
    "InvalidArgumentError",
    "EnumParseError",
    "InvalidSpecError",
    "NumberParseError",
    "SearchError",
    "StreamIOError",
    # Перечисления
    "CharSearchTerminationType",
    "CurrencyNumSignRelativePosition",
    "DataFieldTrailingDelimiterType",
    "FileOpenMode",
    "FileOpenType",
    "IntegerGroupingType",
    "NumberFieldSymbolPosition",
    "NumberRoundingType",
    "NumericSignValueType",
    "NumericSymbolClass",
    "NumericSymbolLocation",
    "NumericValueType",
    "NumSignSymbolDisplayMode",
    "NumSignSymbolPosition",
    "TextFieldType",
    "TextJustify",
    # Модели
    "RuneArrayDto",
    "RuneArrayCollection",
    # Числовые строки
    "DecimalSeparatorSpec",
    "IntegerSeparatorSpec",
    "NegativeNumberSearchSpec",
    "NegNumSearchSpecCollection",
    "NumberStrKernel",
    "NumberStrSearchParams",
    "parse_number_str",
    "parse_us_number_str",
    "parse_german_number_str",
    "parse_french_number_str",
    "CurrencySymbolSpec",
    "NumberFieldSpec",
    "NumberSignSymbolSpec",
    "NumStrFormatSpec",
    "format_number",
    # Строки
    "center_in_str",
    "justify_text_in_field",
    "left_justify",
    "right_justify",
    # Текстовые спецификации
    "TextFieldSpecDateTime",
    "TextFieldSpecFiller",
    "TextFieldSpecLabel",
    "TextFieldSpecSpacer",
    "TextLineSpecAverageTime",
    "TextLineSpecBlankLines",
    "TextLineSpecLinesCollection",
    "TextLineSpecPlainText",
    "TextLineSpecSolidLine",
    "TextLineSpecStandardLine",
    "TextLineSpecTimerLines",
    "TextLineSpecTitleMarquee",
    # Потоки
    "FileIoReader",
    "FileIoReadWrite",
    "FileIoWriter",
    "open_file",
]
