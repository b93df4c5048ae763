"""Phase enum and the pure Pomodoro cycle rule."""

from __future__ import annotations

from enum import Enum

from .constants import (
    PHASE_COLOR_FOCUS,
    PHASE_COLOR_LONG_BREAK,
    PHASE_COLOR_SHORT_BREAK,
    PHASE_LABEL_FOCUS,
    PHASE_LABEL_LONG_BREAK,
    PHASE_LABEL_SHORT_BREAK,
)


class Phase(Enum):
    """Work/rest phase of the Pomodoro cycle."""

    FOCUS = "focus"
    SHORT_BREAK = "short_break"
    LONG_BREAK = "long_break"

    @property
    def label(self) -> str:
        return _PHASE_LABELS[self]

    @property
    def color(self) -> str:
        return _PHASE_COLORS[self]


_PHASE_LABELS: dict[Phase, str] = {
    Phase.FOCUS: PHASE_LABEL_FOCUS,
    Phase.SHORT_BREAK: PHASE_LABEL_SHORT_BREAK,
    Phase.LONG_BREAK: PHASE_LABEL_LONG_BREAK,
}

_PHASE_COLORS: dict[Phase, str] = {
    Phase.FOCUS: PHASE_COLOR_FOCUS,
    Phase.SHORT_BREAK: PHASE_COLOR_SHORT_BREAK,
    Phase.LONG_BREAK: PHASE_COLOR_LONG_BREAK,
}


def next_in_cycle(
    phase: Phase,
    completed_focus_count: int,
    long_break_interval: int,
) -> tuple[Phase, int]:
    """Return the phase following `phase` and the updated focus counter.

    A finished Focus increments the counter; once the new count reaches
    `long_break_interval` a Long Break follows and the counter starts over.
    The interval can shrink mid-cycle, so a count past it also qualifies.
    Both break kinds lead back to Focus, a Long Break with a zeroed counter.
    """
    if long_break_interval < 1:
        raise ValueError("long_break_interval must be at least 1")

    if phase is Phase.FOCUS:
        count = completed_focus_count + 1
        if count >= long_break_interval:
            return Phase.LONG_BREAK, 0
        return Phase.SHORT_BREAK, count
    if phase is Phase.SHORT_BREAK:
        return Phase.FOCUS, completed_focus_count
    return Phase.FOCUS, 0
