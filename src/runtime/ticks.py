"""Transition handlers that log phase changes and dispatch desktop notifications."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Optional, Protocol

from notify import NotificationError
from pomodoro import PhaseTransition

from .messages import completion_body, completion_title


class NotifierLike(Protocol):
    def notify(self, title: str, message: str) -> None:
        ...


@dataclass(frozen=True)
class TickDependencies:
    """Dependencies required for processing phase transitions."""
    notifier: Optional[NotifierLike]
    logger: logging.Logger
    notify_on_skip: bool = False
    on_transition: Optional[Callable[[PhaseTransition], None]] = None


class TickProcessor:
    """Handles transition side effects; never mutates clock or settings."""
    def __init__(self, dependencies: TickDependencies):
        self._dependencies = dependencies

    def should_notify(self, transition: PhaseTransition) -> bool:
        return transition.automatic or self._dependencies.notify_on_skip

    def handle_transition(self, transition: PhaseTransition, duration_seconds: int) -> bool:
        """Process one transition; return True when the user was notified."""
        deps = self._dependencies
        deps.logger.info(
            "Now in %s (%s): completed focus sessions=%s",
            transition.current.value,
            "automatic" if transition.automatic else "manual",
            transition.completed_focus_count,
        )
        if not self.should_notify(transition):
            return False

        if deps.on_transition:
            deps.on_transition(transition)
        if deps.notifier:
            try:
                deps.notifier.notify(
                    completion_title(transition),
                    completion_body(transition, duration_seconds),
                )
            except NotificationError as error:
                deps.logger.error("Desktop notification failed: %s", error)
        return True
