"""Bounded container for the tunable phase durations and long-break interval."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Mapping, Optional

from .constants import (
    DEFAULT_DURATION_STEP_MINUTES,
    DEFAULT_FOCUS_MINUTES,
    DEFAULT_INTERVAL_STEP,
    DEFAULT_LONG_BREAK_INTERVAL,
    DEFAULT_LONG_BREAK_MINUTES,
    DEFAULT_SHORT_BREAK_MINUTES,
    MAX_BREAK_MINUTES,
    MAX_FOCUS_MINUTES,
    MAX_LONG_BREAK_INTERVAL,
    MIN_DURATION_MINUTES,
    MIN_LONG_BREAK_INTERVAL,
    SECONDS_PER_MINUTE,
)
from .cycle import Phase


class SettingField(Enum):
    """Tunable values exposed in the settings view."""

    FOCUS_MINUTES = "focus_minutes"
    SHORT_BREAK_MINUTES = "short_break_minutes"
    LONG_BREAK_MINUTES = "long_break_minutes"
    LONG_BREAK_INTERVAL = "long_break_interval"

    @property
    def is_duration(self) -> bool:
        return self is not SettingField.LONG_BREAK_INTERVAL


SETTING_FIELD_ORDER: tuple[SettingField, ...] = (
    SettingField.FOCUS_MINUTES,
    SettingField.SHORT_BREAK_MINUTES,
    SettingField.LONG_BREAK_MINUTES,
    SettingField.LONG_BREAK_INTERVAL,
)

PHASE_DURATION_FIELDS: dict[Phase, SettingField] = {
    Phase.FOCUS: SettingField.FOCUS_MINUTES,
    Phase.SHORT_BREAK: SettingField.SHORT_BREAK_MINUTES,
    Phase.LONG_BREAK: SettingField.LONG_BREAK_MINUTES,
}

DEFAULT_VALUES: dict[SettingField, int] = {
    SettingField.FOCUS_MINUTES: DEFAULT_FOCUS_MINUTES,
    SettingField.SHORT_BREAK_MINUTES: DEFAULT_SHORT_BREAK_MINUTES,
    SettingField.LONG_BREAK_MINUTES: DEFAULT_LONG_BREAK_MINUTES,
    SettingField.LONG_BREAK_INTERVAL: DEFAULT_LONG_BREAK_INTERVAL,
}

DEFAULT_BOUNDS: dict[SettingField, tuple[int, int]] = {
    SettingField.FOCUS_MINUTES: (MIN_DURATION_MINUTES, MAX_FOCUS_MINUTES),
    SettingField.SHORT_BREAK_MINUTES: (MIN_DURATION_MINUTES, MAX_BREAK_MINUTES),
    SettingField.LONG_BREAK_MINUTES: (MIN_DURATION_MINUTES, MAX_BREAK_MINUTES),
    SettingField.LONG_BREAK_INTERVAL: (MIN_LONG_BREAK_INTERVAL, MAX_LONG_BREAK_INTERVAL),
}


@dataclass(frozen=True)
class SettingsSnapshot:
    """Read-only view of every setting, handed to renderers."""
    focus_minutes: int
    short_break_minutes: int
    long_break_minutes: int
    long_break_interval: int

    def value(self, field: SettingField) -> int:
        return getattr(self, field.value)


class SettingsStore:
    """Holds the phase durations and long-break interval within fixed bounds.

    Adjustments saturate at the bounds instead of failing, so every value
    stays valid no matter how often a key is pressed.
    """

    def __init__(
        self,
        *,
        values: Optional[Mapping[SettingField, int]] = None,
        bounds: Optional[Mapping[SettingField, tuple[int, int]]] = None,
        duration_step: int = DEFAULT_DURATION_STEP_MINUTES,
        interval_step: int = DEFAULT_INTERVAL_STEP,
        logger: Optional[logging.Logger] = None,
    ):
        if duration_step < 1 or interval_step < 1:
            raise ValueError("adjustment steps must be at least 1")

        self._bounds: dict[SettingField, tuple[int, int]] = dict(DEFAULT_BOUNDS)
        if bounds:
            self._bounds.update(bounds)
        for field, (low, high) in self._bounds.items():
            if low < 1 or low > high:
                raise ValueError(
                    f"invalid bounds for {field.value}: [{low}, {high}]"
                )

        self._duration_step = int(duration_step)
        self._interval_step = int(interval_step)
        self._logger = logger or logging.getLogger("pomodoro.settings")

        self._values: dict[SettingField, int] = {}
        initial = dict(DEFAULT_VALUES)
        if values:
            initial.update(values)
        for field in SETTING_FIELD_ORDER:
            self._values[field] = self._clamp(field, int(initial[field]))

    @property
    def focus_minutes(self) -> int:
        return self._values[SettingField.FOCUS_MINUTES]

    @property
    def short_break_minutes(self) -> int:
        return self._values[SettingField.SHORT_BREAK_MINUTES]

    @property
    def long_break_minutes(self) -> int:
        return self._values[SettingField.LONG_BREAK_MINUTES]

    @property
    def long_break_interval(self) -> int:
        return self._values[SettingField.LONG_BREAK_INTERVAL]

    def value(self, field: SettingField) -> int:
        return self._values[field]

    def bounds(self, field: SettingField) -> tuple[int, int]:
        return self._bounds[field]

    def default_step(self, field: SettingField) -> int:
        return self._duration_step if field.is_duration else self._interval_step

    def increase(self, field: SettingField, step: Optional[int] = None) -> int:
        amount = self.default_step(field) if step is None else abs(int(step))
        return self.adjust(field, amount)

    def decrease(self, field: SettingField, step: Optional[int] = None) -> int:
        amount = self.default_step(field) if step is None else abs(int(step))
        return self.adjust(field, -amount)

    def adjust(self, field: SettingField, delta: int) -> int:
        """Shift `field` by `delta`, saturating at its bounds; return the new value."""
        previous = self._values[field]
        updated = self._clamp(field, previous + int(delta))
        if updated != previous:
            self._values[field] = updated
            self._logger.debug("Setting %s: %s -> %s", field.value, previous, updated)
        return updated

    def duration_for(self, phase: Phase) -> int:
        """Return the configured length of `phase` in seconds."""
        return self._values[PHASE_DURATION_FIELDS[phase]] * SECONDS_PER_MINUTE

    def snapshot(self) -> SettingsSnapshot:
        return SettingsSnapshot(
            focus_minutes=self.focus_minutes,
            short_break_minutes=self.short_break_minutes,
            long_break_minutes=self.long_break_minutes,
            long_break_interval=self.long_break_interval,
        )

    def _clamp(self, field: SettingField, value: int) -> int:
        low, high = self._bounds[field]
        return max(low, min(high, value))
