"""Calendar aggregate - stores events and reminders, notifies observers."""

import logging
from typing import TYPE_CHECKING

from .dates import Date
from .records import Event, Reminder, filter_by_date

if TYPE_CHECKING:
    from kalendar.ports.observer import Observer

logger = logging.getLogger(__name__)


class Calendar:
    """
    In-memory store of events and reminders.

    Every added reminder is pushed synchronously to the registered observers,
    in registration order. Observers are held by reference; registering the
    same observer twice means it is notified twice.
    """

    def __init__(self):
        self._observers: list["Observer"] = []
        self._events: list[Event] = []
        self._reminders: list[Reminder] = []

    @property
    def observers(self) -> tuple["Observer", ...]:
        return tuple(self._observers)

    def add_observer(self, observer: "Observer") -> None:
        self._observers.append(observer)

    def remove_observer(self, observer: "Observer") -> None:
        """Unregister every entry for this observer. Unknown observers are ignored."""
        self._observers = [o for o in self._observers if o is not observer]

    def add_event(self, event: Event) -> None:
        self._events.append(event)
        logger.debug(f"Added event {event.format()}")

    def add_reminder(self, reminder: Reminder) -> None:
        """Store the reminder, then notify observers."""
        self._reminders.append(reminder)
        logger.debug(f"Added reminder {reminder.format()}")
        self._notify(reminder)

    def get_reminders_by_date(self, target: Date) -> list[Reminder]:
        return filter_by_date(self._reminders, target)

    def get_events_by_date(self, target: Date) -> list[Event]:
        return filter_by_date(self._events, target)

    def get_all_reminders(self) -> list[Reminder]:
        return list(self._reminders)

    def get_all_events(self) -> list[Event]:
        return list(self._events)

    def _notify(self, reminder: Reminder) -> None:
        # Registry changes made by an observer apply from the next reminder on
        for observer in list(self._observers):
            try:
                observer.update(reminder)
            except Exception as e:
                logger.error(f"Observer {observer!r} failed on {reminder.format()}: {e}")
