import os
import unittest
from pathlib import Path
from unittest import mock

from src.settings import env_flag, resolve_log_path


class SettingsTest(unittest.TestCase):
    def test_relative_log_path_is_under_working_directory(self):
        with mock.patch.dict(os.environ, {"WEATHER_LOG_PATH": "logs/app.log"}):
            self.assertEqual(resolve_log_path(), Path.cwd() / "logs" / "app.log")

    def test_absolute_log_path_kept(self):
        absolute = Path.cwd().anchor + "var/log/weather.log"
        with mock.patch.dict(os.environ, {"WEATHER_LOG_PATH": absolute}):
            self.assertEqual(resolve_log_path(), Path(absolute))

    def test_empty_log_path_disables_file(self):
        with mock.patch.dict(os.environ, {"WEATHER_LOG_PATH": ""}):
            self.assertIsNone(resolve_log_path())

    def test_env_flag(self):
        with mock.patch.dict(os.environ, {"GEOLOCATION_ENABLED": "Yes"}):
            self.assertTrue(env_flag("GEOLOCATION_ENABLED", "0"))
        with mock.patch.dict(os.environ, {"GEOLOCATION_ENABLED": "off"}):
            self.assertFalse(env_flag("GEOLOCATION_ENABLED", "1"))


if __name__ == "__main__":
    unittest.main()
