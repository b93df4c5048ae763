import unittest

from pomodoro import ClockSnapshot, Phase, PhaseTransition, SettingField
from runtime.messages import (
    completion_body,
    cycle_progress_text,
    format_duration,
    setting_value_text,
    status_label,
)


class MessagesTests(unittest.TestCase):
    def test_format_duration(self) -> None:
        self.assertEqual("25:00", format_duration(25 * 60))
        self.assertEqual("00:59", format_duration(59))
        self.assertEqual("180:00", format_duration(180 * 60))
        self.assertEqual("00:00", format_duration(-3))

    def test_status_label(self) -> None:
        self.assertEqual("RUNNING", status_label(True))
        self.assertEqual("PAUSED", status_label(False))

    def test_cycle_progress_text(self) -> None:
        snapshot = ClockSnapshot(
            phase=Phase.FOCUS,
            remaining_seconds=60,
            duration_seconds=60,
            running=False,
            completed_focus_count=2,
            long_break_interval=4,
        )
        self.assertEqual("Pomodoros Completed: 2/4", cycle_progress_text(snapshot))

    def test_setting_value_text(self) -> None:
        self.assertEqual("< 05 min >", setting_value_text(SettingField.SHORT_BREAK_MINUTES, 5))
        self.assertEqual("< 4 sessions >", setting_value_text(SettingField.LONG_BREAK_INTERVAL, 4))

    def test_long_break_body_mentions_reward(self) -> None:
        transition = PhaseTransition(
            previous=Phase.FOCUS,
            current=Phase.LONG_BREAK,
            completed_focus_count=0,
        )
        body = completion_body(transition, 15 * 60)
        self.assertTrue(body.startswith("Starting LONG BREAK (15:00)."))
        self.assertIn("long break", body)


if __name__ == "__main__":
    unittest.main()
