"""Tick-driven phase clock for the Focus / Short Break / Long Break cycle."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from .constants import DEFAULT_TICK_SECONDS
from .cycle import Phase, next_in_cycle
from .settings import SettingsStore


@dataclass(frozen=True)
class ClockSnapshot:
    """Immutable clock state exposed to the controller and the terminal view."""
    phase: Phase
    remaining_seconds: int
    duration_seconds: int
    running: bool
    completed_focus_count: int
    long_break_interval: int

    @property
    def elapsed_seconds(self) -> int:
        return max(0, self.duration_seconds - self.remaining_seconds)

    @property
    def progress(self) -> float:
        if self.duration_seconds <= 0:
            return 0.0
        return min(1.0, max(0.0, self.elapsed_seconds / self.duration_seconds))


@dataclass(frozen=True)
class PhaseTransition:
    """Phase change produced by an automatic rollover or a manual skip."""
    previous: Phase
    current: Phase
    completed_focus_count: int
    automatic: bool = True


class PhaseClock:
    """Countdown state machine advanced one quantum per `tick()` call.

    The clock owns the current phase, the remaining time, the running flag
    and the number of Focus phases finished since the last Long Break.
    Durations are always read from the `SettingsStore` when a phase is
    (re)entered, so settings changes apply on the next reset or transition.
    """

    def __init__(
        self,
        settings: SettingsStore,
        *,
        phase: Phase = Phase.FOCUS,
        tick_seconds: int = DEFAULT_TICK_SECONDS,
        logger: Optional[logging.Logger] = None,
    ):
        if tick_seconds <= 0:
            raise ValueError("tick_seconds must be greater than zero")

        self._settings = settings
        self._tick_seconds = int(tick_seconds)
        self._logger = logger or logging.getLogger("pomodoro.clock")

        self._phase = phase
        self._remaining_seconds = settings.duration_for(phase)
        self._running = False
        self._completed_focus_count = 0

    @property
    def phase(self) -> Phase:
        return self._phase

    @property
    def remaining_seconds(self) -> int:
        return self._remaining_seconds

    @property
    def running(self) -> bool:
        return self._running

    @property
    def completed_focus_count(self) -> int:
        return self._completed_focus_count

    @property
    def duration_seconds(self) -> int:
        return self._settings.duration_for(self._phase)

    def snapshot(self) -> ClockSnapshot:
        return ClockSnapshot(
            phase=self._phase,
            remaining_seconds=self._remaining_seconds,
            duration_seconds=self.duration_seconds,
            running=self._running,
            completed_focus_count=self._completed_focus_count,
            long_break_interval=self._settings.long_break_interval,
        )

    def tick(self) -> Optional[PhaseTransition]:
        """Advance one quantum; return a transition when the phase ran out."""
        if not self._running:
            return None

        if self._remaining_seconds > 0:
            self._remaining_seconds = max(0, self._remaining_seconds - self._tick_seconds)
        if self._remaining_seconds > 0:
            return None
        return self._rollover(automatic=True)

    def toggle_running(self) -> bool:
        self._running = not self._running
        self._logger.debug(
            "Clock %s: phase=%s remaining=%ss",
            "resumed" if self._running else "paused",
            self._phase.value,
            self._remaining_seconds,
        )
        return self._running

    def reset(self) -> None:
        self._remaining_seconds = self._settings.duration_for(self._phase)
        self._running = False
        self._logger.debug(
            "Clock reset: phase=%s duration=%ss",
            self._phase.value,
            self._remaining_seconds,
        )

    def skip_to_next(self) -> PhaseTransition:
        """Apply the cycle rule immediately, keeping the running flag as is."""
        return self._rollover(automatic=False)

    def select_phase(self, target: Phase) -> None:
        """Jump to `target` with its full duration, stopped; the counter is untouched."""
        self._phase = target
        self._remaining_seconds = self._settings.duration_for(target)
        self._running = False
        self._logger.debug(
            "Phase selected: phase=%s duration=%ss",
            target.value,
            self._remaining_seconds,
        )

    def _rollover(self, *, automatic: bool) -> PhaseTransition:
        previous = self._phase
        self._phase, self._completed_focus_count = next_in_cycle(
            previous,
            self._completed_focus_count,
            self._settings.long_break_interval,
        )
        self._remaining_seconds = self._settings.duration_for(self._phase)
        self._logger.info(
            "Phase %s: %s -> %s (completed=%s)",
            "completed" if automatic else "skipped",
            previous.value,
            self._phase.value,
            self._completed_focus_count,
        )
        return PhaseTransition(
            previous=previous,
            current=self._phase,
            completed_focus_count=self._completed_focus_count,
            automatic=automatic,
        )
