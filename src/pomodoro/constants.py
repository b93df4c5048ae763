"""Default durations, bounds, and display constants for the phase clock."""

from __future__ import annotations

SECONDS_PER_MINUTE = 60
DEFAULT_TICK_SECONDS = 1

DEFAULT_FOCUS_MINUTES = 25
DEFAULT_SHORT_BREAK_MINUTES = 5
DEFAULT_LONG_BREAK_MINUTES = 15
DEFAULT_LONG_BREAK_INTERVAL = 4

DEFAULT_DURATION_STEP_MINUTES = 5
DEFAULT_INTERVAL_STEP = 1

MIN_DURATION_MINUTES = 1
MAX_FOCUS_MINUTES = 180
MAX_BREAK_MINUTES = 60
MIN_LONG_BREAK_INTERVAL = 1
MAX_LONG_BREAK_INTERVAL = 12

PHASE_LABEL_FOCUS = "FOCUS SESSION"
PHASE_LABEL_SHORT_BREAK = "SHORT BREAK"
PHASE_LABEL_LONG_BREAK = "LONG BREAK"

PHASE_COLOR_FOCUS = "red"
PHASE_COLOR_SHORT_BREAK = "green"
PHASE_COLOR_LONG_BREAK = "blue"
