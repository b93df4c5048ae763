import logging
import unittest

from notify import NotificationError
from pomodoro import Phase, PhaseTransition
from runtime.ticks import TickDependencies, TickProcessor


class _NotifierStub:
    def __init__(self, error: Exception | None = None):
        self.messages: list[tuple[str, str]] = []
        self._error = error

    def notify(self, title: str, message: str) -> None:
        if self._error is not None:
            raise self._error
        self.messages.append((title, message))


def _transition(*, automatic: bool = True, current: Phase = Phase.SHORT_BREAK) -> PhaseTransition:
    return PhaseTransition(
        previous=Phase.FOCUS,
        current=current,
        completed_focus_count=0 if current is Phase.LONG_BREAK else 1,
        automatic=automatic,
    )


class TickStateFlowTests(unittest.TestCase):
    def test_automatic_transition_notifies_with_next_phase(self) -> None:
        notifier = _NotifierStub()
        hooks: list[PhaseTransition] = []
        processor = TickProcessor(
            TickDependencies(
                notifier=notifier,
                logger=logging.getLogger("test"),
                on_transition=hooks.append,
            )
        )

        notified = processor.handle_transition(_transition(), 5 * 60)

        self.assertTrue(notified)
        self.assertEqual(1, len(hooks))
        self.assertEqual(
            [("Focus Session finished", "Starting SHORT BREAK (05:00).")],
            notifier.messages,
        )

    def test_manual_transition_is_silent_unless_configured(self) -> None:
        notifier = _NotifierStub()
        silent = TickProcessor(
            TickDependencies(notifier=notifier, logger=logging.getLogger("test"))
        )
        loud = TickProcessor(
            TickDependencies(
                notifier=notifier,
                logger=logging.getLogger("test"),
                notify_on_skip=True,
            )
        )

        self.assertFalse(silent.handle_transition(_transition(automatic=False), 300))
        self.assertEqual([], notifier.messages)
        self.assertTrue(loud.handle_transition(_transition(automatic=False), 300))
        self.assertEqual("Focus Session skipped", notifier.messages[0][0])

    def test_notification_failure_is_logged_not_raised(self) -> None:
        processor = TickProcessor(
            TickDependencies(
                notifier=_NotifierStub(NotificationError("no backend")),
                logger=logging.getLogger("test"),
            )
        )

        with self.assertLogs("test", level="ERROR") as logs:
            processor.handle_transition(_transition(current=Phase.LONG_BREAK), 15 * 60)

        self.assertIn("no backend", "\n".join(logs.output))

    def test_missing_notifier_still_runs_hook(self) -> None:
        hooks: list[PhaseTransition] = []
        processor = TickProcessor(
            TickDependencies(
                notifier=None,
                logger=logging.getLogger("test"),
                on_transition=hooks.append,
            )
        )
        self.assertTrue(processor.handle_transition(_transition(), 300))
        self.assertEqual(1, len(hooks))


if __name__ == "__main__":
    unittest.main()
