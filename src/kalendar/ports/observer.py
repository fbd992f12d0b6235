"""Reminder observer interface."""

from typing import Protocol

from kalendar.core.records import Reminder


class Observer(Protocol):
    """Interface for anything notified when a reminder is added to a calendar."""

    def update(self, reminder: Reminder) -> None:
        """Handle a newly added reminder."""
        ...
