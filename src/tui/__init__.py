"""Terminal application exports."""

from .app import PomodoroApp

__all__ = ["PomodoroApp"]
