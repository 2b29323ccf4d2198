"""
Unit Tests for logging setup
"""

import logging

from config.logging_config import LOG_LEVEL_ENV, ROOT_LOGGER_NAMES, setup_logging


class TestSetupLogging:

    def test_handlers_not_duplicated(self):
        setup_logging("DEBUG")
        setup_logging("DEBUG")
        for name in ROOT_LOGGER_NAMES:
            assert len(logging.getLogger(name).handlers) == 1

    def test_level_from_environment(self, monkeypatch):
        monkeypatch.setenv(LOG_LEVEL_ENV, "INFO")
        setup_logging()
        assert logging.getLogger("core").level == logging.INFO

    def test_unknown_level_falls_back_to_warning(self):
        setup_logging("chatty")
        assert logging.getLogger("core").level == logging.WARNING
