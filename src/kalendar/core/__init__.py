"""Functional core - calendar domain logic with no I/O."""

from .dates import Date
from .records import Event, Reminder, filter_by_date
from .calendar import Calendar
from .scheduler import ReminderScheduler

__all__ = [
    # Values
    "Date",
    "Event",
    "Reminder",
    "filter_by_date",
    # Calendar
    "Calendar",
    # Scheduling
    "ReminderScheduler",
]
