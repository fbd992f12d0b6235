"""Event and reminder records."""

from dataclasses import dataclass
from typing import Iterable, Protocol, TypeVar

from .dates import Date


@dataclass(frozen=True)
class Event:
    """A dated calendar event."""

    date: Date
    description: str

    def format(self) -> str:
        return f"{self.description} ({self.date})"


@dataclass(frozen=True)
class Reminder:
    """A dated reminder message."""

    date: Date
    message: str

    def format(self) -> str:
        return f"{self.message} ({self.date})"


class _Dated(Protocol):
    @property
    def date(self) -> Date: ...


T = TypeVar("T", bound=_Dated)


def filter_by_date(items: Iterable[T], target: Date) -> list[T]:
    """
    Return the items dated on target, in their original order.

    Pure function - no I/O.
    """
    return [item for item in items if item.date == target]
