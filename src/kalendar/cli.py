"""Kalendar CLI."""

import json
import logging
import sys

import click

from .adapters import STRATEGIES
from .config import load_config
from .core import Date, Event, Reminder
from .workflows import build_calendar, build_scheduler


def _parse_date(text: str) -> Date:
    try:
        return Date.parse(text)
    except ValueError as e:
        raise click.BadParameter(str(e))


def _parse_date_option(ctx, param, value):
    if value is None:
        return None
    return _parse_date(value)


def _parse_dated_pairs(ctx, param, value) -> list[tuple[Date, str]]:
    return [(_parse_date(raw_date), text) for raw_date, text in value]


@click.group()
@click.version_option(package_name="kalendar")
def main():
    """Kalendar - calendar with reminder notifications."""
    pass


@main.command()
def strategies():
    """List available reminder strategies."""
    for name in STRATEGIES:
        click.echo(name)


@main.command()
@click.option(
    "--event",
    "events",
    nargs=2,
    multiple=True,
    metavar="DATE TEXT",
    callback=_parse_dated_pairs,
    help="Add an event (date as d/m/yyyy)",
)
@click.option(
    "--reminder",
    "reminders",
    nargs=2,
    multiple=True,
    metavar="DATE TEXT",
    callback=_parse_dated_pairs,
    help="Add a reminder (date as d/m/yyyy)",
)
@click.option("--on", "on_date", callback=_parse_date_option, metavar="DATE", help="Show items on a date")
@click.option("--strategy", type=click.Choice(list(STRATEGIES)), help="Override the configured strategy")
@click.option("--replay/--no-replay", default=True, help="Replay all reminders through the strategy")
@click.option("--json", "as_json", is_flag=True, help="Output the --on listing as JSON (other output goes to stderr)")
@click.option("--debug", is_flag=True, help="Enable debug logging")
def run(events, reminders, on_date, strategy, replay, as_json, debug):
    """Build a calendar in memory and run its reminders."""
    if debug:
        logging.basicConfig(
            format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            level=logging.DEBUG,
        )

    # Keep stdout pure JSON; notifications and replay lines go to stderr
    stream = sys.stderr if as_json else None

    config = load_config()
    try:
        calendar = build_calendar(config, stream)
        scheduler = build_scheduler(config, strategy, stream)
    except ValueError as e:
        click.echo(f"Configuration error: {e}", err=True)
        sys.exit(1)

    for event_date, description in events:
        calendar.add_event(Event(event_date, description))
    for reminder_date, message in reminders:
        calendar.add_reminder(Reminder(reminder_date, message))

    if on_date is not None:
        day_events = calendar.get_events_by_date(on_date)
        day_reminders = calendar.get_reminders_by_date(on_date)
        if as_json:
            click.echo(
                json.dumps(
                    {
                        "date": on_date.format(),
                        "events": [e.description for e in day_events],
                        "reminders": [r.message for r in day_reminders],
                    },
                    indent=2,
                    ensure_ascii=False,
                )
            )
        else:
            click.echo(f"Events on {on_date}:")
            for event in day_events:
                click.echo(f" - {event.description}")
            click.echo(f"Reminders on {on_date}:")
            for reminder in day_reminders:
                click.echo(f" - {reminder.message}")

    if replay:
        scheduler.run_reminders(calendar.get_all_reminders())
