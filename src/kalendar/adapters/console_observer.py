"""Console observer adapter."""

from typing import TextIO

import click

from kalendar.core.records import Reminder


class ConsoleObserver:
    """
    Prints each new reminder to the console.

    Implements Observer protocol.
    """

    def __init__(self, stream: TextIO | None = None):
        self.stream = stream

    def update(self, reminder: Reminder) -> None:
        click.echo(f"Console notification: {reminder.format()}", file=self.stream)
