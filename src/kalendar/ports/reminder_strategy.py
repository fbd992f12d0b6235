"""Reminder strategy interface."""

from typing import Protocol

from kalendar.core.records import Reminder


class ReminderStrategy(Protocol):
    """Interface for rendering a reminder when the scheduler replays it."""

    def remind(self, reminder: Reminder) -> None:
        """Render or dispatch a single reminder."""
        ...
