"""Ports - interfaces/protocols for notification targets."""

from .observer import Observer
from .reminder_strategy import ReminderStrategy

__all__ = [
    "Observer",
    "ReminderStrategy",
]
