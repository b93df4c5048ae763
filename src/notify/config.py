"""Configuration model for desktop notifications."""

from dataclasses import dataclass


class NotifierConfigurationError(Exception):
    """Raised when notification configuration is invalid."""


@dataclass(frozen=True)
class NotifierConfig:
    """Validated desktop notification settings."""
    enabled: bool = True
    app_name: str = "Pomodoro"
    timeout_seconds: int = 10

    def __post_init__(self) -> None:
        if not self.app_name.strip():
            raise NotifierConfigurationError("Notification app_name cannot be empty")
        if self.timeout_seconds <= 0:
            raise NotifierConfigurationError(
                f"Notification timeout_seconds must be positive, got: {self.timeout_seconds}"
            )

    @classmethod
    def from_settings(cls, settings) -> "NotifierConfig":
        app_name = (getattr(settings, "app_name", "") or "").strip() or "Pomodoro"
        return cls(
            enabled=bool(settings.enabled),
            app_name=app_name,
            timeout_seconds=int(settings.timeout_seconds),
        )
