"""Tests for logging configuration."""

import logging
import os
import unittest
from unittest.mock import patch

from src.utils.logging import configure_logging


class TestConfigureLogging(unittest.TestCase):
    """Tests for configure_logging."""

    def setUp(self) -> None:
        """Restore root logger state after each test."""
        root = logging.getLogger()
        handlers, level = list(root.handlers), root.level

        def restore() -> None:
            root.handlers[:] = handlers
            root.setLevel(level)

        self.addCleanup(restore)

    @patch.dict(os.environ, {"LOG_LEVEL": "DEBUG"})
    def test_single_stdout_handler(self) -> None:
        """Test that exactly one handler is installed at the configured level."""
        configure_logging()
        configure_logging()

        root = logging.getLogger()
        self.assertEqual(len(root.handlers), 1)
        self.assertEqual(root.level, logging.DEBUG)

    @patch.dict(os.environ, {"LOG_LEVEL": "LOUD"})
    def test_invalid_level_raises(self) -> None:
        """Test that an unknown level name is rejected."""
        with self.assertRaises(ValueError):
            configure_logging()

    @patch.dict(os.environ, {"LOG_LEVEL": "INFO", "LOG_UVICORN_ACCESS": "false"})
    def test_uvicorn_access_quiet_by_default(self) -> None:
        """Test that per-request access logs are suppressed."""
        configure_logging()

        self.assertEqual(logging.getLogger("uvicorn.access").level, logging.WARNING)

    @patch.dict(os.environ, {"LOG_LEVEL": "INFO", "LOG_SQL": "true"})
    def test_sql_logging_toggle(self) -> None:
        """Test that LOG_SQL turns on SQL statement logging."""
        configure_logging()

        self.assertEqual(logging.getLogger("sqlalchemy.engine").level, logging.INFO)


if __name__ == "__main__":
    unittest.main()
