"""Dataclass schema objects used by runtime configuration loading."""

from __future__ import annotations

from dataclasses import dataclass, field

from pomodoro.constants import (
    DEFAULT_DURATION_STEP_MINUTES,
    DEFAULT_FOCUS_MINUTES,
    DEFAULT_LONG_BREAK_INTERVAL,
    DEFAULT_LONG_BREAK_MINUTES,
    DEFAULT_SHORT_BREAK_MINUTES,
    MAX_BREAK_MINUTES,
    MAX_FOCUS_MINUTES,
)

DEFAULT_CONFIG_FILE = "config.toml"
CONFIG_FILE_ENV_VAR = "POMODORO_CONFIG_FILE"


class AppConfigurationError(Exception):
    """Raised when application configuration fails."""


@dataclass(frozen=True)
class TimerSettings:
    """Startup durations and adjustment limits from `[timer]`."""
    focus_minutes: int = DEFAULT_FOCUS_MINUTES
    short_break_minutes: int = DEFAULT_SHORT_BREAK_MINUTES
    long_break_minutes: int = DEFAULT_LONG_BREAK_MINUTES
    long_break_interval: int = DEFAULT_LONG_BREAK_INTERVAL
    duration_step_minutes: int = DEFAULT_DURATION_STEP_MINUTES
    max_focus_minutes: int = MAX_FOCUS_MINUTES
    max_break_minutes: int = MAX_BREAK_MINUTES


@dataclass(frozen=True)
class NotificationSettings:
    """Desktop notification settings from `[notifications]`."""
    enabled: bool = True
    notify_on_skip: bool = False
    app_name: str = "Pomodoro"
    timeout_seconds: int = 10


@dataclass(frozen=True)
class UISettings:
    """Terminal application settings from `[ui]`."""
    tick_seconds: int = 1
    terminal_bell: bool = True


@dataclass(frozen=True)
class LoggingSettings:
    """Log level and optional log file from `[logging]`."""
    level: str = "INFO"
    file: str = ""


@dataclass(frozen=True)
class AppConfig:
    """Complete typed runtime configuration loaded from `config.toml`."""
    timer: TimerSettings = field(default_factory=TimerSettings)
    notifications: NotificationSettings = field(default_factory=NotificationSettings)
    ui: UISettings = field(default_factory=UISettings)
    logging: LoggingSettings = field(default_factory=LoggingSettings)
    source_file: str = ""
