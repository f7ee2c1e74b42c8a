#!/usr/bin/env python3
"""
Configuration Unit Tests

Tests for ParkingSettings and logging setup.
"""

import os
import logging
import unittest
from unittest.mock import patch

from unit.helpers import T0  # noqa: F401  (puts src on the path)

from pydantic import ValidationError

from alkeparking.config import ParkingSettings, setup_logging, LOG_FORMAT


class TestParkingSettings(unittest.TestCase):
    """Unit tests for ParkingSettings"""

    @patch.dict(os.environ, {}, clear=True)
    def test_defaults(self):
        settings = ParkingSettings(_env_file=None)

        self.assertEqual(settings.capacity, 20)
        self.assertEqual(settings.free_minutes, 120)
        self.assertEqual(settings.block_minutes, 15)
        self.assertEqual(settings.block_fee, 5)
        self.assertAlmostEqual(settings.discount_rate, 0.15)
        self.assertEqual(settings.log_level, "INFO")

    @patch.dict(os.environ, {
        "ALKEPARKING_CAPACITY": "5",
        "ALKEPARKING_DISCOUNT_RATE": "0.2",
        "ALKEPARKING_LOG_LEVEL": "debug",
    }, clear=True)
    def test_reads_environment(self):
        settings = ParkingSettings(_env_file=None)

        self.assertEqual(settings.capacity, 5)
        self.assertAlmostEqual(settings.discount_rate, 0.2)
        self.assertEqual(settings.log_level, "DEBUG")

    @patch.dict(os.environ, {}, clear=True)
    def test_invalid_values(self):
        with self.assertRaises(ValidationError):
            ParkingSettings(_env_file=None, capacity=0)
        with self.assertRaises(ValidationError):
            ParkingSettings(_env_file=None, discount_rate=1.5)
        with self.assertRaises(ValidationError):
            ParkingSettings(_env_file=None, block_minutes=0)
        with self.assertRaises(ValidationError):
            ParkingSettings(_env_file=None, log_level="LOUD")


class TestSetupLogging(unittest.TestCase):
    """Unit tests for setup_logging"""

    @patch('alkeparking.config.logging.basicConfig')
    def test_configures_root_logger(self, mock_logging_config):
        logger = setup_logging("DEBUG")

        mock_logging_config.assert_called_once()
        kwargs = mock_logging_config.call_args.kwargs
        self.assertEqual(kwargs["level"], "DEBUG")
        self.assertEqual(kwargs["format"], LOG_FORMAT)
        self.assertIsInstance(logger, logging.Logger)
        self.assertEqual(logger.name, "alkeparking")

    @patch.dict(os.environ, {"ALKEPARKING_LOG_LEVEL": "warning"}, clear=True)
    @patch('alkeparking.config.logging.basicConfig')
    def test_level_from_settings(self, mock_logging_config):
        setup_logging()
        self.assertEqual(mock_logging_config.call_args.kwargs["level"], "WARNING")


if __name__ == '__main__':
    unittest.main()
