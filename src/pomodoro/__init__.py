from .clock import ClockSnapshot, PhaseClock, PhaseTransition
from .cycle import Phase, next_in_cycle
from .settings import (
    SETTING_FIELD_ORDER,
    SettingField,
    SettingsSnapshot,
    SettingsStore,
)

__all__ = [
    "ClockSnapshot",
    "Phase",
    "PhaseClock",
    "PhaseTransition",
    "SETTING_FIELD_ORDER",
    "SettingField",
    "SettingsSnapshot",
    "SettingsStore",
    "next_in_cycle",
]
