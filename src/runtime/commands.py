"""Discrete commands accepted by the runtime controller."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union

from pomodoro import Phase, SettingField


class Direction(Enum):
    """Adjustment or selection direction; the value is the sign."""

    UP = 1
    DOWN = -1


class Tab(Enum):
    """Focus areas of the terminal application."""

    TIMER = "timer"
    SETTINGS = "settings"


@dataclass(frozen=True)
class ToggleRunning:
    pass


@dataclass(frozen=True)
class Reset:
    pass


@dataclass(frozen=True)
class SkipNext:
    pass


@dataclass(frozen=True)
class SelectPhase:
    phase: Phase


@dataclass(frozen=True)
class AdjustSetting:
    """Raise or lower a setting; `field=None` targets the selected row."""
    direction: Direction
    field: Optional[SettingField] = None


@dataclass(frozen=True)
class MoveSettingSelection:
    direction: Direction


@dataclass(frozen=True)
class SwitchFocusArea:
    pass


@dataclass(frozen=True)
class Quit:
    pass


TimerCommand = Union[ToggleRunning, Reset, SkipNext, SelectPhase]
SettingsCommand = Union[AdjustSetting, MoveSettingSelection]
Command = Union[TimerCommand, SettingsCommand, SwitchFocusArea, Quit]

TIMER_COMMANDS: tuple[type, ...] = (ToggleRunning, Reset, SkipNext, SelectPhase)
SETTINGS_COMMANDS: tuple[type, ...] = (AdjustSetting, MoveSettingSelection)
