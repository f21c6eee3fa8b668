"""Tests for the logging setup."""

import logging
import os
import tempfile
import unittest

from basejump_pkg.logging_config import (
    ROOT_LOGGER_NAME,
    StructuredFormatter,
    get_logger,
    setup_logging,
)


class TestSetupLogging(unittest.TestCase):
    """Test handler wiring and levels."""

    def tearDown(self):
        setup_logging()

    def test_default_is_stderr_only(self):
        logger = setup_logging()
        self.assertEqual(logger.level, logging.WARNING)
        self.assertEqual(len(logger.handlers), 1)
        self.assertEqual(logger.handlers[0].level, logging.NOTSET)

    def test_log_file_takes_records_off_stderr(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = os.path.join(tmp, "basejump.log")
            logger = setup_logging("DEBUG", path)
            console, file_handler = logger.handlers
            self.assertEqual(console.level, logging.ERROR)
            self.assertIsInstance(file_handler, logging.FileHandler)

            get_logger("session").debug("Input base set to %d", 16)
            setup_logging()  # closes the file handler

            with open(path, encoding="utf-8") as handle:
                content = handle.read()
            self.assertIn("[DEBUG] basejump.session: Input base set to 16", content)

    def test_repeated_setup_replaces_handlers(self):
        setup_logging()
        logger = setup_logging("INFO")
        self.assertEqual(len(logger.handlers), 1)
        self.assertEqual(logger.level, logging.INFO)

    def test_unknown_level_falls_back_to_warning(self):
        self.assertEqual(setup_logging("LOUD").level, logging.WARNING)


class TestFormatter(unittest.TestCase):
    """Test the structured record format."""

    def test_format(self):
        record = logging.LogRecord(
            "basejump.cli", logging.INFO, __file__, 1, "Evaluated %s", ("1+1",), None
        )
        line = StructuredFormatter().format(record)
        self.assertTrue(line.endswith(" [INFO] basejump.cli: Evaluated 1+1"))

    def test_logger_names(self):
        self.assertEqual(get_logger("evaluator").name, f"{ROOT_LOGGER_NAME}.evaluator")


if __name__ == "__main__":
    unittest.main()
