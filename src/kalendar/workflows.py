"""Wiring layer between configuration and the calendar core."""

from typing import TextIO

from .adapters import ConsoleObserver, EmailObserver, build_strategy
from .config import Config
from .core import Calendar, ReminderScheduler
from .ports import Observer


def build_observers(config: Config, stream: TextIO | None = None) -> list[Observer]:
    """Create the observers named in config, in order, all writing to stream."""
    observers: list[Observer] = []
    for name in config.observers:
        match name:
            case "console":
                observers.append(ConsoleObserver(stream=stream))
            case "email":
                observers.append(EmailObserver(recipient=config.email_recipient, stream=stream))
            case _:
                raise ValueError(f"Unknown observer {name!r} (expected console or email)")
    return observers


def build_calendar(config: Config, stream: TextIO | None = None) -> Calendar:
    """Create an empty calendar with the configured observers registered."""
    calendar = Calendar()
    for observer in build_observers(config, stream):
        calendar.add_observer(observer)
    return calendar


def build_scheduler(
    config: Config,
    strategy_name: str | None = None,
    stream: TextIO | None = None,
) -> ReminderScheduler:
    """Create a scheduler using strategy_name, or the configured strategy."""
    return ReminderScheduler(build_strategy(strategy_name or config.reminder_strategy, stream=stream))
