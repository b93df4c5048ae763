import tempfile
import textwrap
import unittest
from pathlib import Path
from unittest.mock import patch

from app_config import (
    AppConfig,
    AppConfigurationError,
    load_app_config,
    resolve_config_path,
)


def _write_text(path: Path, content: str) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")


class AppConfigLoadingTests(unittest.TestCase):
    def test_load_app_config_reads_all_sections(self) -> None:
        with tempfile.TemporaryDirectory() as temp_dir:
            root = Path(temp_dir)
            config_path = root / "config.toml"
            _write_text(
                config_path,
                textwrap.dedent(
                    """
                    [timer]
                    focus_minutes = 50
                    short_break_minutes = 10
                    long_break_minutes = 20
                    long_break_interval = 3
                    duration_step_minutes = 10

                    [notifications]
                    enabled = false
                    notify_on_skip = "yes"
                    app_name = "Focus"

                    [ui]
                    tick_seconds = 2
                    terminal_bell = false

                    [logging]
                    level = "debug"
                    file = "logs/pomodoro.log"
                    """
                ).strip(),
            )

            app_config = load_app_config(str(config_path))

            self.assertEqual(str(config_path), app_config.source_file)
            self.assertEqual(50, app_config.timer.focus_minutes)
            self.assertEqual(10, app_config.timer.short_break_minutes)
            self.assertEqual(20, app_config.timer.long_break_minutes)
            self.assertEqual(3, app_config.timer.long_break_interval)
            self.assertEqual(10, app_config.timer.duration_step_minutes)
            self.assertFalse(app_config.notifications.enabled)
            self.assertTrue(app_config.notifications.notify_on_skip)
            self.assertEqual("Focus", app_config.notifications.app_name)
            self.assertEqual(2, app_config.ui.tick_seconds)
            self.assertFalse(app_config.ui.terminal_bell)
            self.assertEqual("DEBUG", app_config.logging.level)
            self.assertEqual(
                str((root / "logs/pomodoro.log").resolve()),
                app_config.logging.file,
            )

    def test_missing_sections_use_defaults(self) -> None:
        with tempfile.TemporaryDirectory() as temp_dir:
            config_path = Path(temp_dir) / "config.toml"
            _write_text(config_path, "[timer]\nfocus_minutes = 30\n")

            app_config = load_app_config(str(config_path))

            self.assertEqual(30, app_config.timer.focus_minutes)
            self.assertEqual(5, app_config.timer.short_break_minutes)
            self.assertTrue(app_config.notifications.enabled)
            self.assertEqual(1, app_config.ui.tick_seconds)
            self.assertEqual("", app_config.logging.file)

    def test_rejects_invalid_values(self) -> None:
        cases = {
            "[timer]\nfocus_minutes = 0\n": "timer.focus_minutes",
            "[timer]\nfocus_minutes = 500\n": "timer.focus_minutes",
            "[timer]\nlong_break_interval = 40\n": "timer.long_break_interval",
            "[timer]\nshort_break_minutes = true\n": "timer.short_break_minutes",
            "[notifications]\nenabled = \"maybe\"\n": "notifications.enabled",
            "[ui]\ntick_seconds = 0\n": "ui.tick_seconds",
            "[logging]\nlevel = \"LOUD\"\n": "logging.level",
            "timer = 3\n": "[timer]",
        }
        with tempfile.TemporaryDirectory() as temp_dir:
            config_path = Path(temp_dir) / "config.toml"
            for content, field in cases.items():
                with self.subTest(field=field):
                    _write_text(config_path, content)
                    with self.assertRaises(AppConfigurationError) as context:
                        load_app_config(str(config_path))
                    self.assertIn(field, str(context.exception))

    def test_rejects_malformed_toml(self) -> None:
        with tempfile.TemporaryDirectory() as temp_dir:
            config_path = Path(temp_dir) / "config.toml"
            _write_text(config_path, "[timer\nfocus_minutes = ")

            with self.assertRaises(AppConfigurationError):
                load_app_config(str(config_path))

    def test_missing_explicit_file_is_an_error(self) -> None:
        with tempfile.TemporaryDirectory() as temp_dir:
            with self.assertRaises(AppConfigurationError):
                load_app_config(str(Path(temp_dir) / "absent.toml"))

    def test_missing_default_file_yields_defaults(self) -> None:
        with tempfile.TemporaryDirectory() as cwd_dir:
            with patch("app_config.Path.cwd", return_value=Path(cwd_dir)):
                app_config = load_app_config(environ={})

        self.assertEqual(AppConfig(), app_config)

    def test_env_var_selects_config_file(self) -> None:
        with tempfile.TemporaryDirectory() as temp_dir:
            config_path = Path(temp_dir) / "custom.toml"
            _write_text(config_path, "[timer]\nlong_break_interval = 2\n")
            environ = {"POMODORO_CONFIG_FILE": str(config_path)}

            path, explicit = resolve_config_path(environ=environ)
            app_config = load_app_config(environ=environ)

        self.assertEqual(config_path, path)
        self.assertTrue(explicit)
        self.assertEqual(2, app_config.timer.long_break_interval)

    def test_cli_path_takes_precedence_over_env(self) -> None:
        path, explicit = resolve_config_path(
            "/tmp/cli.toml",
            environ={"POMODORO_CONFIG_FILE": "/tmp/env.toml"},
        )
        self.assertEqual(Path("/tmp/cli.toml"), path)
        self.assertTrue(explicit)


if __name__ == "__main__":
    unittest.main()
