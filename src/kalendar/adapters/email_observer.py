"""Email observer adapter (stub - nothing is actually sent)."""

import logging
from typing import TextIO

import click

from kalendar.core.records import Reminder

logger = logging.getLogger(__name__)


class EmailObserver:
    """
    Renders the email that would be sent for each new reminder.

    Implements Observer protocol. Delivery is not implemented; the message is
    echoed to the console instead.
    """

    def __init__(self, recipient: str = "", stream: TextIO | None = None):
        self.recipient = recipient
        self.stream = stream

    def update(self, reminder: Reminder) -> None:
        target = f" to {self.recipient}" if self.recipient else ""
        click.echo(f"Sending email{target}: {reminder.format()}", file=self.stream)
        logger.debug(f"Email delivery not implemented, skipped sending{target}")
