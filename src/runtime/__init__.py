"""Runtime controller exports."""

from .commands import (
    AdjustSetting,
    Command,
    Direction,
    MoveSettingSelection,
    Quit,
    Reset,
    SelectPhase,
    SkipNext,
    SwitchFocusArea,
    Tab,
    ToggleRunning,
)
from .controller import ControllerSnapshot, PomodoroController, build_controller
from .keymap import command_for_key
from .ticks import TickDependencies, TickProcessor

__all__ = [
    "AdjustSetting",
    "Command",
    "ControllerSnapshot",
    "Direction",
    "MoveSettingSelection",
    "PomodoroController",
    "Quit",
    "Reset",
    "SelectPhase",
    "SkipNext",
    "SwitchFocusArea",
    "Tab",
    "TickDependencies",
    "TickProcessor",
    "ToggleRunning",
    "build_controller",
    "command_for_key",
]
