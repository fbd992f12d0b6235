"""Kalendar - in-process calendar with reminder notifications."""

__version__ = "0.1.0"
