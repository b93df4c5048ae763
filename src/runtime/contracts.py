"""Protocols describing runtime-facing config capabilities."""

from __future__ import annotations

from typing import Protocol


class TimerSettingsLike(Protocol):
    """Subset of `[timer]` settings required to build the controller."""
    focus_minutes: int
    short_break_minutes: int
    long_break_minutes: int
    long_break_interval: int
    duration_step_minutes: int
    max_focus_minutes: int
    max_break_minutes: int
