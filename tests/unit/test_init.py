"""
Модульные тесты для strmech/__init__.py
Тестирует метаданные пакета, конфигурацию, логирование и публичный API.
"""

import json
import logging
import logging.handlers
import re
import tempfile
from pathlib import Path

import pytest

import strmech


class TestVersionMetadata:
    """Тестирование метаданных версии и констант."""

    def test_version_format(self) -> None:
        """Проверить, что __version__ следует семантическому версионированию."""
        assert re.match(r"^\d+\.\d+\.\d+$", strmech.__version__)

    def test_version_components(self) -> None:
        """Проверить, что компоненты версии соответствуют __version__."""
        expected = f"{strmech.VERSION_MAJOR}.{strmech.VERSION_MINOR}.{strmech.VERSION_PATCH}"
        assert strmech.__version__ == expected

    def test_metadata_attributes(self) -> None:
        """Проверить, что все атрибуты метаданных являются непустыми строками."""
        for attr in ("__author__", "__description__", "__license__", "__python_requires__"):
            value = getattr(strmech, attr)
            assert isinstance(value, str) and value, f"{attr} должен быть непустой строкой"


class TestPublicAPI:
    """Тестирование публичного API пакета."""

    def test_all_exports_exist(self) -> None:
        """Проверить, что все имена из __all__ существуют."""
        for name in strmech.__all__:
            assert hasattr(strmech, name), f"Экспортируемое имя '{name}' отсутствует"

    def test_no_duplicate_exports(self) -> None:
        assert len(strmech.__all__) == len(set(strmech.__all__))

    def test_core_entry_points_exported(self) -> None:
        """Проверить, что основные точки входа доступны с верхнего уровня."""
        for name in (
            "get_logger",
            "load_config",
            "parse_us_number_str",
            "format_number",
            "justify_text_in_field",
            "TextLineSpecLinesCollection",
            "FileIoReader",
            "FileIoWriter",
        ):
            assert name in strmech.__all__

    def test_top_level_round_trip(self) -> None:
        """Разбор и форматирование через публичный API верхнего уровня."""
        kernel, _ = strmech.parse_us_number_str("(1234567.891)")
        assert kernel.format(strmech.NumStrFormatSpec.new_united_states()) == "-1,234,567.891"


class TestLogging:
    """Тестирование конфигурации логирования."""

    def test_get_logger_name_format(self) -> None:
        logger = strmech.get_logger("report_builder")
        assert isinstance(logger, logging.Logger)
        assert logger.name == "strmech.report_builder"

    def test_get_logger_with_qualified_name(self) -> None:
        assert strmech.get_logger("strmech.numbers.parser").name == "strmech.numbers.parser"

    def test_get_logger_with_main(self) -> None:
        assert strmech.get_logger("__main__").name == "strmech.main"

    def test_get_logger_with_dots(self) -> None:
        assert strmech.get_logger(".text.lines").name == "strmech.text.lines"

    def test_package_logger_has_handlers(self) -> None:
        """Логгер пакета имеет как минимум консольный обработчик и не передаёт записи выше."""
        package_logger = logging.getLogger(strmech.PACKAGE_LOGGER_NAME)
        assert len(package_logger.handlers) >= 1
        assert package_logger.propagate is False

    def test_log_level_and_file_from_environment(
        self, monkeypatch: pytest.MonkeyPatch, tmp_path: Path
    ) -> None:
        """Уровень и файл журнала задаются переменными окружения."""
        log_file = tmp_path / "logs" / "strmech.log"
        monkeypatch.setenv("STRMECH_LOG_LEVEL", "DEBUG")
        monkeypatch.setenv("STRMECH_LOG_FILE", str(log_file))

        package_logger = logging.getLogger(strmech.PACKAGE_LOGGER_NAME)
        saved_handlers = package_logger.handlers[:]
        saved_level = package_logger.level
        for handler in saved_handlers:
            package_logger.removeHandler(handler)
        try:
            strmech._setup_logging()
            assert package_logger.level == logging.DEBUG
            assert log_file.parent.is_dir()
            assert any(isinstance(h, logging.handlers.RotatingFileHandler) for h in package_logger.handlers)
        finally:
            for handler in package_logger.handlers[:]:
                package_logger.removeHandler(handler)
                handler.close()
            for handler in saved_handlers:
                package_logger.addHandler(handler)
            package_logger.setLevel(saved_level)

    def test_setup_logging_is_idempotent(self) -> None:
        package_logger = logging.getLogger(strmech.PACKAGE_LOGGER_NAME)
        before = len(package_logger.handlers)
        strmech._setup_logging()
        assert len(package_logger.handlers) == before


class TestConfiguration:
    """Тестирование управления конфигурацией."""

    def test_load_config_defaults(self) -> None:
        """Отсутствующий файл даёт конфигурацию по умолчанию."""
        with tempfile.TemporaryDirectory() as tmpdir:
            config = strmech.load_config(Path(tmpdir) / "missing.json")
        assert config == strmech._DEFAULT_CONFIG
        assert config is not strmech._DEFAULT_CONFIG

    def test_load_config_from_file(self, tmp_path: Path) -> None:
        config_path = tmp_path / "strmech.json"
        config_path.write_text(
            json.dumps({"default_decimal_separator": ",", "custom_key": 1}), encoding="utf-8"
        )

        config = strmech.load_config(config_path)

        assert config["default_decimal_separator"] == ","
        assert config["custom_key"] == 1
        assert config["default_integer_separator"] == ","
        assert config["default_reader_buffer_size"] == 4096

    def test_load_config_invalid_json(self, tmp_path: Path, caplog: pytest.LogCaptureFixture) -> None:
        """Недопустимый JSON: конфигурация по умолчанию и предупреждение в журнале."""
        config_path = tmp_path / "broken.json"
        config_path.write_text("{invalid json", encoding="utf-8")
        package_logger = logging.getLogger(strmech.PACKAGE_LOGGER_NAME)
        package_logger.addHandler(caplog.handler)
        try:
            config = strmech.load_config(config_path)
        finally:
            package_logger.removeHandler(caplog.handler)

        assert config == strmech._DEFAULT_CONFIG
        assert any(record.levelno == logging.WARNING for record in caplog.records)

    def test_load_config_non_dict_json(self, tmp_path: Path) -> None:
        config_path = tmp_path / "list.json"
        config_path.write_text(json.dumps(["not", "a", "dict"]), encoding="utf-8")

        config = strmech.load_config(config_path)

        assert config == strmech._DEFAULT_CONFIG

    def test_default_config_not_mutated(self, tmp_path: Path) -> None:
        config_path = tmp_path / "strmech.json"
        config_path.write_text(json.dumps({"log_level": "DEBUG"}), encoding="utf-8")

        strmech.load_config(config_path)

        assert strmech._DEFAULT_CONFIG["log_level"] == "INFO"


class TestDocumentation:
    """Тестирование наличия документации."""

    def test_module_has_docstring(self) -> None:
        assert strmech.__doc__ and len(strmech.__doc__) > 100

    def test_public_functions_have_docstrings(self) -> None:
        assert strmech.get_logger.__doc__
        assert strmech.load_config.__doc__
