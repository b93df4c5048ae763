"""Key-to-command mapping for the terminal application."""

from __future__ import annotations

from typing import Optional

from pomodoro import Phase

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

GLOBAL_KEYS: dict[str, Command] = {
    "q": Quit(),
    "tab": SwitchFocusArea(),
}

TIMER_KEYS: dict[str, Command] = {
    "space": ToggleRunning(),
    "r": Reset(),
    "n": SkipNext(),
    "1": SelectPhase(Phase.FOCUS),
    "2": SelectPhase(Phase.SHORT_BREAK),
    "3": SelectPhase(Phase.LONG_BREAK),
}

SETTINGS_KEYS: dict[str, Command] = {
    "up": MoveSettingSelection(Direction.UP),
    "k": MoveSettingSelection(Direction.UP),
    "down": MoveSettingSelection(Direction.DOWN),
    "j": MoveSettingSelection(Direction.DOWN),
    "left": AdjustSetting(Direction.DOWN),
    "h": AdjustSetting(Direction.DOWN),
    "right": AdjustSetting(Direction.UP),
    "l": AdjustSetting(Direction.UP),
}

_TAB_KEYS: dict[Tab, dict[str, Command]] = {
    Tab.TIMER: TIMER_KEYS,
    Tab.SETTINGS: SETTINGS_KEYS,
}


def command_for_key(key: str, tab: Tab) -> Optional[Command]:
    """Return the command bound to `key` in `tab`, or None when unbound."""
    normalized = _normalize_key(key)
    if normalized in GLOBAL_KEYS:
        return GLOBAL_KEYS[normalized]
    return _TAB_KEYS[tab].get(normalized)


def _normalize_key(key: str) -> str:
    if key == " ":
        return "space"
    if len(key) == 1:
        return key.lower()
    return key
