"""Textual front end: renders controller snapshots and forwards key presses."""

from __future__ import annotations

import logging
from typing import Optional

from rich.text import Text
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Center, Vertical
from textual.timer import Timer
from textual.widgets import Digits, ProgressBar, Static

from app_config_schema import AppConfig
from pomodoro import SETTING_FIELD_ORDER, PhaseTransition, SettingField
from runtime import ControllerSnapshot, PomodoroController, Tab, build_controller, command_for_key
from runtime.messages import (
    FOOTER_TEXT,
    SETTING_LABELS,
    cycle_progress_text,
    format_duration,
    setting_value_text,
    status_label,
)
from runtime.ticks import NotifierLike

SETTINGS_TAB_COLOR = "cyan"

_LETTER_KEYS: tuple[str, ...] = ("q", "r", "n", "h", "j", "k", "l")

_BOUND_KEYS: tuple[str, ...] = (
    "tab", "space", "1", "2", "3", "up", "down", "left", "right",
    *_LETTER_KEYS,
    *(key.upper() for key in _LETTER_KEYS),
)


def _setting_row_id(field: SettingField) -> str:
    return f"setting-{field.value.replace('_', '-')}"


class PomodoroApp(App):
    """Terminal Pomodoro timer with a Timer tab and a Settings tab."""

    TITLE = "Pomodoro"

    CSS = """
    Screen {
        layout: vertical;
    }

    #tabs {
        height: 2;
        padding: 0 1;
        border-bottom: solid $panel;
    }

    #timer-view, #settings-view {
        height: 1fr;
        align: center middle;
    }

    #phase, #status, #cycle {
        width: 100%;
        text-align: center;
    }

    #status, #cycle {
        color: $text-muted;
    }

    #clock {
        width: auto;
        margin: 2 0;
    }

    #gauge {
        width: auto;
        margin-bottom: 1;
    }

    #settings-view {
        border: round cyan;
        border-title-color: cyan;
    }

    .setting-row {
        width: 100%;
        text-align: center;
        padding: 1 0;
    }

    .setting-row.-selected {
        background: $panel;
        color: yellow;
        text-style: bold;
    }

    #footer {
        height: 1;
        width: 100%;
        text-align: center;
        color: $text-muted;
    }
    """

    BINDINGS = [
        Binding(key, f"command_key('{key}')", show=False, priority=True)
        for key in _BOUND_KEYS
    ]

    def __init__(
        self,
        config: Optional[AppConfig] = None,
        *,
        notifier: Optional[NotifierLike] = None,
        logger: Optional[logging.Logger] = None,
    ):
        super().__init__()
        self._config = config or AppConfig()
        self._app_logger = logger or logging.getLogger("pomodoro_app")
        self.tick_timer: Optional[Timer] = None
        self.controller: PomodoroController = build_controller(
            self._config.timer,
            notifier=notifier,
            notify_on_skip=self._config.notifications.notify_on_skip,
            on_transition=self._on_phase_transition,
            tick_seconds=self._config.ui.tick_seconds,
            logger=logging.getLogger("runtime"),
        )

    def compose(self) -> ComposeResult:
        yield Static(id="tabs")
        with Vertical(id="timer-view"):
            yield Static(id="phase")
            yield Static(id="status")
            with Center():
                yield Digits("00:00", id="clock")
            with Center():
                yield ProgressBar(total=100, show_eta=False, id="gauge")
            yield Static(id="cycle")
        with Vertical(id="settings-view"):
            for field in SETTING_FIELD_ORDER:
                yield Static(id=_setting_row_id(field), classes="setting-row")
        yield Static(id="footer")

    def on_mount(self) -> None:
        self.query_one("#settings-view").border_title = " Configuration "
        self.tick_timer = self.set_interval(self._config.ui.tick_seconds, self._on_tick)
        self._app_logger.info("Timer view ready, ticking every %ss", self._config.ui.tick_seconds)
        self.refresh_view()

    def action_command_key(self, key: str) -> None:
        command = command_for_key(key, self.controller.active_tab)
        if command is None:
            return
        if not self.controller.dispatch(command):
            self.exit()
            return
        self.refresh_view()

    def refresh_view(self) -> None:
        snapshot = self.controller.snapshot()
        self._render_tabs(snapshot)
        timer_view = self.query_one("#timer-view")
        settings_view = self.query_one("#settings-view")
        timer_view.display = snapshot.active_tab is Tab.TIMER
        settings_view.display = snapshot.active_tab is Tab.SETTINGS
        if snapshot.active_tab is Tab.TIMER:
            self._render_timer(snapshot)
        else:
            self._render_settings(snapshot)
        self.query_one("#footer", Static).update(FOOTER_TEXT[snapshot.active_tab])

    def _on_tick(self) -> None:
        self.controller.handle_tick()
        self.refresh_view()

    def _on_phase_transition(self, transition: PhaseTransition) -> None:
        if self._config.ui.terminal_bell:
            self.bell()

    def _render_tabs(self, snapshot: ControllerSnapshot) -> None:
        highlight = (
            snapshot.clock.phase.color
            if snapshot.active_tab is Tab.TIMER
            else SETTINGS_TAB_COLOR
        )
        tabs = Text()
        for tab, title in ((Tab.TIMER, " Timer "), (Tab.SETTINGS, " Settings ")):
            style = f"bold {highlight}" if tab is snapshot.active_tab else "dim"
            tabs.append(title, style=style)
            tabs.append(" ")
        self.query_one("#tabs", Static).update(tabs)

    def _render_timer(self, snapshot: ControllerSnapshot) -> None:
        clock = snapshot.clock
        color = clock.phase.color
        self.query_one("#phase", Static).update(Text(clock.phase.label, style=f"bold {color}"))
        self.query_one("#status", Static).update(f"[ {status_label(clock.running)} ]")

        digits = self.query_one("#clock", Digits)
        digits.update(format_duration(clock.remaining_seconds))
        digits.styles.color = color if clock.running else "white"

        self.query_one("#gauge", ProgressBar).update(progress=round(clock.progress * 100))
        self.query_one("#cycle", Static).update(cycle_progress_text(clock))

    def _render_settings(self, snapshot: ControllerSnapshot) -> None:
        for field in SETTING_FIELD_ORDER:
            row = self.query_one(f"#{_setting_row_id(field)}", Static)
            value = snapshot.settings.value(field)
            row.update(f"{SETTING_LABELS[field]}   {setting_value_text(field, value)}")
            row.set_class(field is snapshot.selected_setting, "-selected")
