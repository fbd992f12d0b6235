"""Reminder replay through a swappable strategy."""

import logging
from typing import TYPE_CHECKING, Iterable

from .records import Reminder

if TYPE_CHECKING:
    from kalendar.ports.reminder_strategy import ReminderStrategy

logger = logging.getLogger(__name__)


class ReminderScheduler:
    """Holds one active reminder strategy and replays reminders through it."""

    def __init__(self, strategy: "ReminderStrategy"):
        self._strategy = strategy

    @property
    def strategy(self) -> "ReminderStrategy":
        return self._strategy

    def set_reminder_strategy(self, strategy: "ReminderStrategy") -> None:
        """Replace the active strategy. Only later runs are affected."""
        logger.debug(f"Switching reminder strategy to {type(strategy).__name__}")
        self._strategy = strategy

    def run_reminders(self, reminders: Iterable[Reminder]) -> None:
        """Apply the active strategy to each reminder, in order."""
        strategy = self._strategy
        for reminder in reminders:
            strategy.remind(reminder)
