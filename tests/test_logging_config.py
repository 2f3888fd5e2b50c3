# tests/test_logging_config.py

"""Tests for the per-session logging configuration."""

import logging
import unittest

from src.config.logging_config import LOGGER_NAME, setup_logging


class TestLoggingConfig(unittest.TestCase):
    """Verify logging setup behaviour."""

    def setUp(self) -> None:
        logging.getLogger(LOGGER_NAME).handlers.clear()

    def test_setup_creates_log_file(self) -> None:
        log_path = setup_logging()
        self.assertTrue(log_path.exists())

    def test_log_file_naming_convention(self) -> None:
        log_path = setup_logging()
        self.assertRegex(log_path.name, r"^session_\d{8}_\d{6}\.log$")

    def test_file_and_console_levels(self) -> None:
        setup_logging(console_level=logging.ERROR)
        root_logger = logging.getLogger(LOGGER_NAME)
        file_handlers = [
            h for h in root_logger.handlers
            if isinstance(h, logging.FileHandler)
        ]
        stream_handlers = [
            h for h in root_logger.handlers
            if isinstance(h, logging.StreamHandler)
            and not isinstance(h, logging.FileHandler)
        ]
        self.assertEqual(file_handlers[0].level, logging.DEBUG)
        self.assertEqual(stream_handlers[0].level, logging.ERROR)

    def test_repeated_calls_no_duplicate_handlers(self) -> None:
        setup_logging()
        count_before = len(logging.getLogger(LOGGER_NAME).handlers)
        setup_logging()
        self.assertEqual(
            len(logging.getLogger(LOGGER_NAME).handlers), count_before
        )

    def test_module_loggers_propagate_to_file(self) -> None:
        log_path = setup_logging()
        logging.getLogger("storefront.cart").info("cart message")
        for handler in logging.getLogger(LOGGER_NAME).handlers:
            handler.flush()
        self.assertIn("cart message", log_path.read_text(encoding="utf-8"))

    def test_log_file_inside_logs_dir(self) -> None:
        log_path = setup_logging()
        self.assertEqual(log_path.parent.name, "logs")


if __name__ == "__main__":
    unittest.main()
