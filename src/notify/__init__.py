"""Public exports for desktop notification components."""

from .config import NotifierConfig, NotifierConfigurationError
from .service import DesktopNotifier, NotificationError

__all__ = [
    "DesktopNotifier",
    "NotificationError",
    "NotifierConfig",
    "NotifierConfigurationError",
]
