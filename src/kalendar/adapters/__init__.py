"""Adapters - console and email implementations of ports."""

from .console_observer import ConsoleObserver
from .email_observer import EmailObserver
from .strategies import DefaultReminder, PrioritizedReminder, STRATEGIES, build_strategy

__all__ = [
    "ConsoleObserver",
    "EmailObserver",
    "DefaultReminder",
    "PrioritizedReminder",
    "STRATEGIES",
    "build_strategy",
]
