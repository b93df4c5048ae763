"""Typed parser for config.toml sections into immutable app settings."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Mapping

from app_config_schema import (
    AppConfig,
    AppConfigurationError,
    LoggingSettings,
    NotificationSettings,
    TimerSettings,
    UISettings,
)
from pomodoro.constants import MAX_LONG_BREAK_INTERVAL

_ALLOWED_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


def parse_app_config(
    raw: Mapping[str, Any],
    *,
    base_dir: Path,
    source_file: str,
) -> AppConfig:
    """Parse raw TOML mappings into strongly typed application settings."""
    timer = _parse_timer_settings(_section(raw, "timer"))
    notifications = _parse_notification_settings(_section(raw, "notifications"))
    ui = _parse_ui_settings(_section(raw, "ui"))
    logging_settings = _parse_logging_settings(_section(raw, "logging"), base_dir=base_dir)

    return AppConfig(
        timer=timer,
        notifications=notifications,
        ui=ui,
        logging=logging_settings,
        source_file=source_file,
    )


def _parse_timer_settings(section: Mapping[str, Any]) -> TimerSettings:
    defaults = TimerSettings()
    max_focus = _as_positive_int(
        section.get("max_focus_minutes", defaults.max_focus_minutes),
        "timer.max_focus_minutes",
    )
    max_break = _as_positive_int(
        section.get("max_break_minutes", defaults.max_break_minutes),
        "timer.max_break_minutes",
    )
    settings = TimerSettings(
        focus_minutes=_as_positive_int(
            section.get("focus_minutes", defaults.focus_minutes),
            "timer.focus_minutes",
        ),
        short_break_minutes=_as_positive_int(
            section.get("short_break_minutes", defaults.short_break_minutes),
            "timer.short_break_minutes",
        ),
        long_break_minutes=_as_positive_int(
            section.get("long_break_minutes", defaults.long_break_minutes),
            "timer.long_break_minutes",
        ),
        long_break_interval=_as_positive_int(
            section.get("long_break_interval", defaults.long_break_interval),
            "timer.long_break_interval",
        ),
        duration_step_minutes=_as_positive_int(
            section.get("duration_step_minutes", defaults.duration_step_minutes),
            "timer.duration_step_minutes",
        ),
        max_focus_minutes=max_focus,
        max_break_minutes=max_break,
    )

    _require_at_most(settings.focus_minutes, max_focus, "timer.focus_minutes")
    _require_at_most(settings.short_break_minutes, max_break, "timer.short_break_minutes")
    _require_at_most(settings.long_break_minutes, max_break, "timer.long_break_minutes")
    _require_at_most(
        settings.long_break_interval,
        MAX_LONG_BREAK_INTERVAL,
        "timer.long_break_interval",
    )
    return settings


def _parse_notification_settings(section: Mapping[str, Any]) -> NotificationSettings:
    defaults = NotificationSettings()
    return NotificationSettings(
        enabled=_as_bool(section.get("enabled", defaults.enabled), "notifications.enabled"),
        notify_on_skip=_as_bool(
            section.get("notify_on_skip", defaults.notify_on_skip),
            "notifications.notify_on_skip",
        ),
        app_name=(
            _as_str(section.get("app_name", defaults.app_name), "notifications.app_name")
            or defaults.app_name
        ),
        timeout_seconds=_as_positive_int(
            section.get("timeout_seconds", defaults.timeout_seconds),
            "notifications.timeout_seconds",
        ),
    )


def _parse_ui_settings(section: Mapping[str, Any]) -> UISettings:
    defaults = UISettings()
    return UISettings(
        tick_seconds=_as_positive_int(
            section.get("tick_seconds", defaults.tick_seconds),
            "ui.tick_seconds",
        ),
        terminal_bell=_as_bool(
            section.get("terminal_bell", defaults.terminal_bell),
            "ui.terminal_bell",
        ),
    )


def _parse_logging_settings(
    section: Mapping[str, Any],
    *,
    base_dir: Path,
) -> LoggingSettings:
    level = _as_str(section.get("level", "INFO"), "logging.level").upper() or "INFO"
    if level not in _ALLOWED_LOG_LEVELS:
        allowed = ", ".join(sorted(_ALLOWED_LOG_LEVELS))
        raise AppConfigurationError(f"logging.level must be one of: {allowed}.")
    log_file = _as_str(section.get("file", ""), "logging.file")
    return LoggingSettings(
        level=level,
        file=_resolve_path(base_dir, log_file),
    )


def _section(root: Mapping[str, Any], name: str) -> Mapping[str, Any]:
    raw = root.get(name, {})
    if raw is None:
        return {}
    if not isinstance(raw, Mapping):
        raise AppConfigurationError(f"[{name}] must be a table.")
    return raw


def _as_str(value: Any, field: str) -> str:
    if value is None:
        return ""
    if isinstance(value, str):
        return value.strip()
    raise AppConfigurationError(f"{field} must be a string.")


def _as_bool(value: Any, field: str) -> bool:
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        lowered = value.strip().lower()
        if lowered in ("true", "1", "yes", "on"):
            return True
        if lowered in ("false", "0", "no", "off"):
            return False
    raise AppConfigurationError(f"{field} must be a boolean.")


def _as_int(value: Any, field: str) -> int:
    if isinstance(value, bool):
        raise AppConfigurationError(f"{field} must be an integer.")
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        try:
            return int(value.strip())
        except ValueError as error:
            raise AppConfigurationError(f"{field} must be an integer.") from error
    raise AppConfigurationError(f"{field} must be an integer.")


def _as_positive_int(value: Any, field: str) -> int:
    number = _as_int(value, field)
    if number < 1:
        raise AppConfigurationError(f"{field} must be at least 1.")
    return number


def _require_at_most(value: int, limit: int, field: str) -> None:
    if value > limit:
        raise AppConfigurationError(f"{field} must not exceed {limit}.")


def _resolve_path(base_dir: Path, raw: str) -> str:
    if not raw:
        return ""
    path = Path(raw).expanduser()
    if not path.is_absolute():
        path = (base_dir / path).resolve()
    return str(path)
