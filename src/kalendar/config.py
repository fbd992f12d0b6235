"""Configuration management for Kalendar."""

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path

logger = logging.getLogger(__name__)

KALENDAR_HOME = Path(os.environ.get("KALENDAR_HOME", Path.home() / "kalendar"))
CONFIG_FILE = KALENDAR_HOME / "config" / "kalendar.conf"


@dataclass
class Config:
    """Kalendar configuration."""

    observers: list[str] = field(default_factory=lambda: ["console", "email"])
    email_recipient: str = ""
    reminder_strategy: str = "default"


def _unquote(value: str) -> str:
    """Strip quotes, or an inline comment from unquoted values."""
    if value[:1] in ('"', "'"):
        quote = value[0]
        end_quote = value.find(quote, 1)
        if end_quote != -1:
            return value[1:end_quote]
        return value[1:]
    if "#" in value:
        return value.split("#")[0].strip()
    return value


def load_config(path: Path | None = None) -> Config:
    """Load configuration from kalendar.conf file."""
    config = Config()
    path = path or CONFIG_FILE

    if not path.exists():
        return config

    for line in path.read_text().splitlines():
        line = line.strip()
        if not line or line.startswith("#"):
            continue

        if "=" not in line:
            continue

        key, _, value = line.partition("=")
        key = key.strip().lower()
        value = _unquote(value.strip())

        match key:
            case "observers":
                config.observers = [o.strip().lower() for o in value.split(",") if o.strip()]
            case "email_recipient":
                config.email_recipient = value
            case "reminder_strategy":
                config.reminder_strategy = value.lower()
            case _:
                logger.warning(f"Ignoring unknown config key: {key}")

    return config
