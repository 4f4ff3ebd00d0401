"""
Unit tests for AppConfig.
"""

import os
import unittest
from unittest.mock import patch

from pydantic import ValidationError

from config import AppConfig, get_config


class TestAppConfig(unittest.TestCase):
    """Test cases for AppConfig."""

    def test_default_configuration(self):
        """Test default configuration values."""
        config = AppConfig(_env_file=None)

        self.assertEqual(config.flask_host, "127.0.0.1")
        self.assertEqual(config.flask_port, 8000)
        self.assertEqual(config.incident_config_path, "setting.hcl")
        self.assertEqual(config.templates_dir, "templates")
        self.assertEqual(config.assets_dir, "assets")
        self.assertIsNone(config.display_timezone)
        self.assertEqual(config.log_file, "logs/app.log")
        self.assertFalse(config.https_enabled)

    def test_environment_overrides(self):
        """Test values are read from the environment."""
        env = {
            'FLASK_PORT': '9090',
            'DISPLAY_TIMEZONE': 'Asia/Tokyo',
            'INCIDENT_CONFIG_PATH': '/etc/gomenasai/setting.hcl',
            'HTTPS_ENABLED': 'yes',
        }
        with patch.dict(os.environ, env):
            config = AppConfig(_env_file=None)

        self.assertEqual(config.flask_port, 9090)
        self.assertEqual(config.display_timezone, 'Asia/Tokyo')
        self.assertEqual(config.incident_config_path, '/etc/gomenasai/setting.hcl')
        self.assertTrue(config.https_enabled)

    def test_testing_flag_from_conftest(self):
        """Test TESTING=true set by conftest is honoured."""
        self.assertTrue(AppConfig(_env_file=None).testing)

    def test_log_level_normalised(self):
        self.assertEqual(AppConfig(log_level='debug').log_level, 'DEBUG')

    def test_unknown_log_level(self):
        with self.assertRaises(ValidationError):
            AppConfig(log_level='chatty')

    def test_unknown_timezone(self):
        with self.assertRaises(ValidationError):
            AppConfig(display_timezone='Mars/Olympus_Mons')

    def test_empty_timezone_means_local(self):
        self.assertIsNone(AppConfig(display_timezone='').display_timezone)

    def test_get_config_is_singleton(self):
        self.assertIs(get_config(), get_config())


if __name__ == '__main__':
    unittest.main()
