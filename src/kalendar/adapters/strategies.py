"""Reminder strategy adapters."""

from typing import TextIO

import click

from kalendar.core.records import Reminder


class DefaultReminder:
    """
    Plain reminder line.

    Implements ReminderStrategy protocol.
    """

    prefix = "Reminder"

    def __init__(self, stream: TextIO | None = None):
        self.stream = stream

    def render(self, reminder: Reminder) -> str:
        return f"{self.prefix}: {reminder.format()}"

    def remind(self, reminder: Reminder) -> None:
        click.echo(self.render(reminder), file=self.stream)


class PrioritizedReminder(DefaultReminder):
    """Reminder line marked as important."""

    prefix = "[Important] Reminder"


STRATEGIES: dict[str, type[DefaultReminder]] = {
    "default": DefaultReminder,
    "prioritized": PrioritizedReminder,
}


def build_strategy(name: str, stream: TextIO | None = None) -> DefaultReminder:
    """Create a reminder strategy by its registered name."""
    try:
        strategy_cls = STRATEGIES[name.strip().lower()]
    except KeyError:
        known = ", ".join(sorted(STRATEGIES))
        raise ValueError(f"Unknown reminder strategy {name!r} (expected one of: {known})")
    return strategy_cls(stream=stream)
