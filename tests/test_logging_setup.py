"""
Tests for the app-wide logging setup.
"""

import io
import logging

import pytest

from paynote import logging_setup


@pytest.fixture
def fresh_app_logger(monkeypatch):
    """Run configure_logging as if the app had just started."""
    app_logger = logging.getLogger(logging_setup.APP_LOGGER_NAME)
    saved = (list(app_logger.handlers), app_logger.level, app_logger.propagate)
    monkeypatch.setattr(logging_setup, "_configured", False)
    app_logger.handlers = []
    yield app_logger
    app_logger.handlers, level, app_logger.propagate = saved
    app_logger.setLevel(level)


class TestLogging:

    @pytest.mark.parametrize("value, expected", [
        (logging.DEBUG, logging.DEBUG),
        ("debug", logging.DEBUG),
        (" WARNING ", logging.WARNING),
        ("30", 30),
        ("chatty", logging.INFO),
        (None, logging.INFO),
    ])
    def test_level_resolution(self, value, expected):
        assert logging_setup._resolve_level(value) == expected

    def test_module_loggers_write_through_app_handler(self, fresh_app_logger):
        stream = io.StringIO()
        logging_setup.configure_logging("INFO", stream=stream)

        logging_setup.get_logger("paynote.services.example").info("note saved")

        assert "note saved" in stream.getvalue()
        assert "[paynote.services.example]" in stream.getvalue()

    def test_second_configure_is_ignored(self, fresh_app_logger):
        logging_setup.configure_logging("INFO", stream=io.StringIO())
        logging_setup.configure_logging("DEBUG", stream=io.StringIO())

        assert len(fresh_app_logger.handlers) == 1
        assert fresh_app_logger.level == logging.INFO
