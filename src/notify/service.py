"""Desktop notification delivery backed by plyer."""

import logging
from typing import Optional

from plyer import notification

from .config import NotifierConfig


class NotificationError(Exception):
    """Raised when a desktop notification cannot be delivered."""

    pass


class DesktopNotifier:
    """Shows phase-change notifications through the platform notifier."""
    def __init__(
        self,
        config: Optional[NotifierConfig] = None,
        logger: Optional[logging.Logger] = None,
    ):
        self._config = config or NotifierConfig()
        self._logger = logger or logging.getLogger(__name__)

    @property
    def enabled(self) -> bool:
        return self._config.enabled

    def notify(self, title: str, message: str) -> None:
        if not self.enabled:
            self._logger.debug("Notifications disabled, dropping: %s", title)
            return

        try:
            notification.notify(
                title=title,
                message=message,
                app_name=self._config.app_name,
                timeout=self._config.timeout_seconds,
            )
        except Exception as error:
            raise NotificationError(f"Desktop notification failed: {error}") from error
        self._logger.debug("Notification sent: %s", title)
