"""Controller that serializes ticks and user commands into the phase clock."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Optional

from pomodoro import (
    SETTING_FIELD_ORDER,
    ClockSnapshot,
    PhaseClock,
    PhaseTransition,
    SettingField,
    SettingsSnapshot,
    SettingsStore,
)
from pomodoro.constants import DEFAULT_TICK_SECONDS, MIN_DURATION_MINUTES

from .commands import (
    SETTINGS_COMMANDS,
    TIMER_COMMANDS,
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
from .contracts import TimerSettingsLike
from .ticks import NotifierLike, TickDependencies, TickProcessor


@dataclass(frozen=True)
class ControllerSnapshot:
    """Everything a renderer needs for one redraw."""
    clock: ClockSnapshot
    settings: SettingsSnapshot
    active_tab: Tab
    selected_setting: SettingField


class PomodoroController:
    """Owns the clock, the settings and the view state.

    Every mutation enters through `handle_tick()` or `dispatch()`, so at most
    one state transition is in flight when callers share one event loop.
    """

    def __init__(
        self,
        *,
        clock: PhaseClock,
        settings: SettingsStore,
        tick_processor: TickProcessor,
        logger: Optional[logging.Logger] = None,
    ):
        self._clock = clock
        self._settings = settings
        self._tick_processor = tick_processor
        self._logger = logger or logging.getLogger("runtime")

        self._active_tab = Tab.TIMER
        self._selected_setting = SETTING_FIELD_ORDER[0]

    @property
    def active_tab(self) -> Tab:
        return self._active_tab

    @property
    def selected_setting(self) -> SettingField:
        return self._selected_setting

    def snapshot(self) -> ControllerSnapshot:
        return ControllerSnapshot(
            clock=self._clock.snapshot(),
            settings=self._settings.snapshot(),
            active_tab=self._active_tab,
            selected_setting=self._selected_setting,
        )

    def handle_tick(self) -> Optional[PhaseTransition]:
        transition = self._clock.tick()
        if transition is not None:
            self._publish_transition(transition)
        return transition

    def dispatch(self, command: Command) -> bool:
        """Apply `command`; return False when the application should exit."""
        if isinstance(command, Quit):
            self._logger.info("Quit requested")
            return False
        if isinstance(command, SwitchFocusArea):
            self._active_tab = Tab.SETTINGS if self._active_tab is Tab.TIMER else Tab.TIMER
            return True

        if isinstance(command, TIMER_COMMANDS):
            if self._active_tab is Tab.TIMER:
                self._apply_timer_command(command)
            return True
        if isinstance(command, SETTINGS_COMMANDS):
            if self._active_tab is Tab.SETTINGS:
                self._apply_settings_command(command)
            return True

        self._logger.warning("Unsupported command: %r", command)
        return True

    def _apply_timer_command(self, command: Command) -> None:
        if isinstance(command, ToggleRunning):
            self._clock.toggle_running()
        elif isinstance(command, Reset):
            self._clock.reset()
        elif isinstance(command, SkipNext):
            self._publish_transition(self._clock.skip_to_next())
        elif isinstance(command, SelectPhase):
            self._clock.select_phase(command.phase)

    def _apply_settings_command(self, command: Command) -> None:
        if isinstance(command, MoveSettingSelection):
            self._move_selection(command.direction)
        elif isinstance(command, AdjustSetting):
            self._adjust_setting(command.field or self._selected_setting, command.direction)

    def _move_selection(self, direction: Direction) -> None:
        index = SETTING_FIELD_ORDER.index(self._selected_setting)
        # Rows are drawn top to bottom, so UP selects the previous row.
        index = (index - direction.value) % len(SETTING_FIELD_ORDER)
        self._selected_setting = SETTING_FIELD_ORDER[index]

    def _adjust_setting(self, field: SettingField, direction: Direction) -> None:
        previous = self._settings.value(field)
        if direction is Direction.UP:
            updated = self._settings.increase(field)
        else:
            updated = self._settings.decrease(field)
        if updated == previous:
            return

        self._logger.info("Setting %s changed: %s -> %s", field.value, previous, updated)
        if field.is_duration:
            self._clock.reset()

    def _publish_transition(self, transition: PhaseTransition) -> None:
        self._tick_processor.handle_transition(transition, self._clock.duration_seconds)


def build_controller(
    timer: TimerSettingsLike,
    *,
    notifier: Optional[NotifierLike],
    notify_on_skip: bool = False,
    on_transition: Optional[Callable[[PhaseTransition], None]] = None,
    tick_seconds: int = DEFAULT_TICK_SECONDS,
    logger: Optional[logging.Logger] = None,
) -> PomodoroController:
    """Wire a settings store, clock and tick processor from `[timer]` settings."""
    runtime_logger = logger or logging.getLogger("runtime")
    settings = SettingsStore(
        values={
            SettingField.FOCUS_MINUTES: timer.focus_minutes,
            SettingField.SHORT_BREAK_MINUTES: timer.short_break_minutes,
            SettingField.LONG_BREAK_MINUTES: timer.long_break_minutes,
            SettingField.LONG_BREAK_INTERVAL: timer.long_break_interval,
        },
        bounds={
            SettingField.FOCUS_MINUTES: (MIN_DURATION_MINUTES, timer.max_focus_minutes),
            SettingField.SHORT_BREAK_MINUTES: (MIN_DURATION_MINUTES, timer.max_break_minutes),
            SettingField.LONG_BREAK_MINUTES: (MIN_DURATION_MINUTES, timer.max_break_minutes),
        },
        duration_step=timer.duration_step_minutes,
    )
    tick_processor = TickProcessor(
        TickDependencies(
            notifier=notifier,
            logger=runtime_logger,
            notify_on_skip=notify_on_skip,
            on_transition=on_transition,
        )
    )
    return PomodoroController(
        clock=PhaseClock(settings, tick_seconds=tick_seconds),
        settings=settings,
        tick_processor=tick_processor,
        logger=runtime_logger,
    )
