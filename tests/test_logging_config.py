"""
Tests for the package logger setup.
"""
import logging

import pytest

from hypercube_playground.logging_config import (
    CONSOLE_HANDLER_NAME,
    FILE_HANDLER_NAME,
    LEVEL_ENV_VAR,
    LOGGER_NAME,
    resolve_level,
    setup_logging,
)


@pytest.fixture
def package_logger():
    logger = logging.getLogger(LOGGER_NAME)
    before = list(logger.handlers)
    level = logger.level
    yield logger
    for handler in list(logger.handlers):
        if handler not in before:
            logger.removeHandler(handler)
            handler.close()
    logger.setLevel(level)


def handler_names(logger):
    return [h.get_name() for h in logger.handlers]


class TestSetupLogging:

    def test_repeated_setup_does_not_duplicate_handlers(self, package_logger):
        setup_logging()
        logger = setup_logging(level=logging.DEBUG)
        assert logger is package_logger
        assert logger.level == logging.DEBUG
        assert handler_names(logger).count(CONSOLE_HANDLER_NAME) == 1

    def test_foreign_handlers_survive_reruns(self, package_logger):
        """A handler someone else attached stays through every rerun."""
        foreign = logging.NullHandler()
        package_logger.addHandler(foreign)

        for _ in range(3):
            setup_logging()

        assert foreign in package_logger.handlers
        assert handler_names(package_logger).count(CONSOLE_HANDLER_NAME) == 1

    def test_file_handler(self, package_logger, tmp_path):
        log_file = tmp_path / "run.log"
        logger = setup_logging(level=logging.INFO, log_file=str(log_file))
        logging.getLogger(f"{LOGGER_NAME}.engine").info("hello from the engine")
        for handler in logger.handlers:
            handler.flush()
        assert "hello from the engine" in log_file.read_text(encoding="utf-8")

    def test_rerun_without_file_closes_file_handler(self, package_logger, tmp_path):
        logger = setup_logging(log_file=str(tmp_path / "run.log"))
        file_handler = next(h for h in logger.handlers if h.get_name() == FILE_HANDLER_NAME)

        setup_logging()

        assert FILE_HANDLER_NAME not in handler_names(logger)
        assert file_handler.stream is None


class TestResolveLevel:

    @pytest.mark.parametrize("value, expected", [
        (logging.WARNING, logging.WARNING),
        ("debug", logging.DEBUG),
        (" Error ", logging.ERROR),
        ("15", 15),
    ])
    def test_names_and_numbers(self, value, expected):
        assert resolve_level(value) == expected

    def test_environment_default(self, monkeypatch):
        monkeypatch.setenv(LEVEL_ENV_VAR, "warning")
        assert resolve_level(None) == logging.WARNING

    def test_info_without_environment(self, monkeypatch):
        monkeypatch.delenv(LEVEL_ENV_VAR, raising=False)
        assert resolve_level(None) == logging.INFO

    def test_unknown_name_rejected(self):
        with pytest.raises(ValueError):
            resolve_level("chatty")

    def test_setup_reads_environment(self, package_logger, monkeypatch):
        monkeypatch.setenv(LEVEL_ENV_VAR, "DEBUG")
        assert setup_logging().level == logging.DEBUG
