import logging
import unittest

from textual.widgets import Digits, Static

from app_config_schema import AppConfig, UISettings
from pomodoro import Phase, SettingField
from runtime import Tab
from tui import PomodoroApp


def _make_app() -> PomodoroApp:
    return PomodoroApp(AppConfig(ui=UISettings(terminal_bell=False)))


class PomodoroAppTests(unittest.IsolatedAsyncioTestCase):
    async def test_starts_with_injected_logger(self) -> None:
        app = PomodoroApp(AppConfig(), logger=logging.getLogger("test"))
        with self.assertLogs("test", level="INFO") as logs:
            async with app.run_test() as pilot:
                await pilot.pause()
                self.assertTrue(app.is_running)

        self.assertIn("Timer view ready", "\n".join(logs.output))

    async def test_space_starts_and_ticks_count_down(self) -> None:
        app = _make_app()
        async with app.run_test() as pilot:
            app.tick_timer.pause()
            await pilot.press("space")
            app._on_tick()
            await pilot.pause()

            snapshot = app.controller.snapshot().clock
            self.assertTrue(snapshot.running)
            self.assertEqual(25 * 60 - 1, snapshot.remaining_seconds)
            self.assertEqual("24:59", app.query_one("#clock", Digits).value)

    async def test_phase_keys_and_skip(self) -> None:
        app = _make_app()
        async with app.run_test() as pilot:
            await pilot.press("3")
            self.assertEqual(Phase.LONG_BREAK, app.controller.snapshot().clock.phase)
            await pilot.press("1", "n")
            snapshot = app.controller.snapshot().clock
            self.assertEqual(Phase.SHORT_BREAK, snapshot.phase)
            self.assertEqual(1, snapshot.completed_focus_count)

    async def test_settings_tab_adjusts_focus(self) -> None:
        app = _make_app()
        async with app.run_test() as pilot:
            await pilot.press("tab")
            self.assertEqual(Tab.SETTINGS, app.controller.active_tab)
            self.assertFalse(app.query_one("#timer-view").display)

            await pilot.press("right", "right", "j", "h")
            settings = app.controller.snapshot().settings
            self.assertEqual(35, settings.focus_minutes)
            self.assertEqual(1, settings.short_break_minutes)
            self.assertEqual(
                SettingField.SHORT_BREAK_MINUTES,
                app.controller.selected_setting,
            )
            row = app.query_one("#setting-short-break-minutes", Static)
            self.assertTrue(row.has_class("-selected"))

            await pilot.press("tab")
            self.assertEqual(35 * 60, app.controller.snapshot().clock.remaining_seconds)

    async def test_upper_case_letters_act_like_lower_case(self) -> None:
        app = _make_app()
        async with app.run_test() as pilot:
            await pilot.press("N")
            self.assertEqual(Phase.SHORT_BREAK, app.controller.snapshot().clock.phase)
            await pilot.press("tab", "L")
            self.assertEqual(30, app.controller.snapshot().settings.focus_minutes)

    async def test_q_exits(self) -> None:
        app = _make_app()
        async with app.run_test() as pilot:
            await pilot.press("q")
            await pilot.pause()
        self.assertFalse(app.is_running)


if __name__ == "__main__":
    unittest.main()
