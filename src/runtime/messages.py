"""Status, help, and notification text builders for the timer views."""

from __future__ import annotations

from pomodoro import ClockSnapshot, Phase, PhaseTransition, SettingField

from .commands import Tab

STATUS_RUNNING = "RUNNING"
STATUS_PAUSED = "PAUSED"

SETTING_LABELS: dict[SettingField, str] = {
    SettingField.FOCUS_MINUTES: "Focus Duration",
    SettingField.SHORT_BREAK_MINUTES: "Short Break Duration",
    SettingField.LONG_BREAK_MINUTES: "Long Break Duration",
    SettingField.LONG_BREAK_INTERVAL: "Long Break Interval",
}

FOOTER_TEXT: dict[Tab, str] = {
    Tab.TIMER: (
        "Controls: [Space] Toggle | [R] Reset | [N] Next Phase | "
        "[1/2/3] Set Phase | [Tab] Settings | [Q] Quit"
    ),
    Tab.SETTINGS: (
        "Controls: [Up/Down] Select | [Left/Right] Adjust | "
        "[Tab] Back to Timer | [Q] Quit"
    ),
}


def format_duration(seconds: int) -> str:
    """Format a duration in seconds as `MM:SS`."""
    minutes, remainder = divmod(max(0, int(seconds)), 60)
    return f"{minutes:02d}:{remainder:02d}"


def status_label(running: bool) -> str:
    return STATUS_RUNNING if running else STATUS_PAUSED


def cycle_progress_text(snapshot: ClockSnapshot) -> str:
    return (
        f"Pomodoros Completed: {snapshot.completed_focus_count}"
        f"/{snapshot.long_break_interval}"
    )


def setting_value_text(field: SettingField, value: int) -> str:
    if field.is_duration:
        return f"< {value:02d} min >"
    return f"< {value} sessions >"


def completion_title(transition: PhaseTransition) -> str:
    if transition.automatic:
        return f"{_phase_name(transition.previous)} finished"
    return f"{_phase_name(transition.previous)} skipped"


def completion_body(transition: PhaseTransition, duration_seconds: int) -> str:
    """Return the notification body announcing the phase that starts now."""
    body = f"Starting {transition.current.label} ({format_duration(duration_seconds)})."
    if transition.current is Phase.LONG_BREAK:
        body += " Nice work, you earned a long break."
    return body


def _phase_name(phase: Phase) -> str:
    return phase.label.title()
