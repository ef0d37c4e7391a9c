import os
import tempfile
import unittest
from pathlib import Path
from unittest import mock

from lottogame import config as config_module
from lottogame.config import LottoSettings, load_from_environment


class SettingsTests(unittest.TestCase):
    def setUp(self) -> None:
        config_module.load_settings.cache_clear()

    def tearDown(self) -> None:
        config_module.load_settings.cache_clear()

    @mock.patch.dict(os.environ, {}, clear=True)
    def test_defaults(self) -> None:
        settings = load_from_environment()

        self.assertEqual(settings, LottoSettings())
        self.assertEqual(settings.log_level, "WARNING")
        self.assertEqual(settings.attempts_factor, 100)
        self.assertIsNone(settings.presets_file)
        self.assertEqual(settings.window_title, "Lotto Game")

    @mock.patch.dict(
        os.environ,
        {
            "LOTTO_LOG_LEVEL": "info",
            "LOTTO_ATTEMPTS_FACTOR": "25",
            "LOTTO_PRESETS_FILE": "/tmp/presets.json",
            "LOTTO_WINDOW_TITLE": "Kolektura",
        },
        clear=True,
    )
    def test_reads_environment(self) -> None:
        settings = load_from_environment()

        self.assertEqual(settings.log_level, "INFO")
        self.assertEqual(settings.effective_log_level, "INFO")
        self.assertEqual(settings.attempts_factor, 25)
        self.assertEqual(settings.presets_file, "/tmp/presets.json")
        self.assertEqual(settings.window_title, "Kolektura")

    @mock.patch.dict(os.environ, {"LOTTO_VERBOSE": "yes"}, clear=True)
    def test_verbose_forces_debug(self) -> None:
        settings = load_from_environment()
        self.assertTrue(settings.verbose)
        self.assertEqual(settings.effective_log_level, "DEBUG")

    def test_invalid_attempts_factor(self) -> None:
        for value in ("many", "0", "-3"):
            with self.subTest(value=value):
                with mock.patch.dict(os.environ, {"LOTTO_ATTEMPTS_FACTOR": value}, clear=True):
                    with self.assertRaises(RuntimeError) as ctx:
                        load_from_environment()
                    self.assertIn("LOTTO_ATTEMPTS_FACTOR", str(ctx.exception))

    def test_log_level_must_be_a_level_name(self) -> None:
        for value in ("BASIC_FORMAT", "loud", "root"):
            with self.subTest(value=value):
                with mock.patch.dict(os.environ, {"LOTTO_LOG_LEVEL": value}, clear=True):
                    with self.assertRaises(RuntimeError) as ctx:
                        load_from_environment()
                    self.assertIn("LOTTO_LOG_LEVEL", str(ctx.exception))

    @mock.patch.dict(os.environ, {"LOTTO_LOG_LEVEL": " debug "}, clear=True)
    def test_log_level_is_normalized(self) -> None:
        self.assertEqual(load_from_environment().log_level, "DEBUG")

    def test_copy_overrides_fields(self) -> None:
        settings = LottoSettings().copy(attempts_factor=5)
        self.assertEqual(settings.attempts_factor, 5)
        self.assertEqual(settings.log_level, "WARNING")

    @mock.patch.dict(os.environ, {}, clear=True)
    def test_load_settings_reads_dotenv_file(self) -> None:
        with tempfile.TemporaryDirectory() as tmpdir:
            env_path = Path(tmpdir) / ".env"
            env_path.write_text("LOTTO_ATTEMPTS_FACTOR=7\nLOTTO_VERBOSE=1\n", encoding="utf-8")

            settings = config_module.load_settings(str(env_path))

        self.assertEqual(settings.attempts_factor, 7)
        self.assertTrue(settings.verbose)


if __name__ == "__main__":
    unittest.main()
