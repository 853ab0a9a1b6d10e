"""Tests for logging setup and the shapers' debug logging."""

import io
import logging

import pytest

from knitshaper.logging_config import LOGGER_NAME, setup_logging
from knitshaper.shaping.crew_neck import calculate_crew_neck
from knitshaper.shaping.straight import calculate_straight_line


@pytest.fixture
def package_logger():
    logger = logging.getLogger(LOGGER_NAME)
    saved_level = logger.level
    saved_handlers = list(logger.handlers)
    yield logger
    for handler in logger.handlers:
        if handler not in saved_handlers:
            handler.close()
    logger.handlers[:] = saved_handlers
    logger.setLevel(saved_level)


class TestSetupLogging:
    def test_attaches_console_handler(self, package_logger):
        logger = setup_logging(logging.DEBUG)
        assert logger is package_logger
        assert logger.level == logging.DEBUG
        assert len(logger.handlers) == 1

    def test_repeat_setup_does_not_duplicate_handlers(self, package_logger):
        setup_logging()
        setup_logging()
        assert len(package_logger.handlers) == 1

    def test_log_file(self, package_logger, tmp_path):
        log_file = tmp_path / "knitshaper.log"
        setup_logging(logging.INFO, log_file=str(log_file))
        assert len(package_logger.handlers) == 2
        logging.getLogger("knitshaper.test").info("hello")
        for handler in package_logger.handlers:
            handler.flush()
        assert "hello" in log_file.read_text()

    def test_level_name_and_stream(self, package_logger):
        stream = io.StringIO()
        setup_logging("DEBUG", stream=stream)
        assert package_logger.level == logging.DEBUG
        calculate_straight_line(10, 21)
        assert "case=exact" in stream.getvalue()

    def test_library_is_silent_by_default(self):
        """Importing the package only attaches a NullHandler."""
        import knitshaper

        handlers = logging.getLogger(knitshaper.__name__).handlers
        assert any(isinstance(h, logging.NullHandler) for h in handlers)


class TestShaperLogging:
    def test_straight_line_logs_case(self, caplog):
        caplog.set_level(logging.DEBUG, logger=LOGGER_NAME)
        calculate_straight_line(50, 26)
        assert "case=overflow" in caplog.text

    def test_straight_line_logs_rejection(self, caplog):
        caplog.set_level(logging.DEBUG, logger=LOGGER_NAME)
        calculate_straight_line(0, 26)
        assert "rejecting stitches=0 rows=26" in caplog.text

    def test_crew_neck_logs_partition(self, caplog):
        caplog.set_level(logging.DEBUG, logger=LOGGER_NAME)
        calculate_crew_neck(12)
        assert "cast_off=4 every_row=4 eor=4" in caplog.text
