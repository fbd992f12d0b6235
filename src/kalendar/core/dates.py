"""Calendar day value type."""

import re
from dataclasses import dataclass
from datetime import date as _date
from functools import total_ordering

_DATE_PATTERN = re.compile(r"([0-9]+)/([0-9]+)/([0-9]+)")


@total_ordering
@dataclass(frozen=True)
class Date:
    """
    A calendar day.

    Ordered by (year, month, day). Field values are not validated, so
    Date(40, 13, 2024) is a perfectly good Date as far as this type is concerned.
    """

    day: int
    month: int
    year: int

    def key(self) -> tuple[int, int, int]:
        return (self.year, self.month, self.day)

    def __lt__(self, other: "Date") -> bool:
        if not isinstance(other, Date):
            return NotImplemented
        return self.key() < other.key()

    def format(self) -> str:
        """Format as d/m/yyyy."""
        return f"{self.day}/{self.month}/{self.year}"

    def __str__(self) -> str:
        return self.format()

    @classmethod
    def parse(cls, text: str) -> "Date":
        """
        Parse a d/m/yyyy string.

        Only the shape is checked: three runs of ASCII digits separated by slashes.
        """
        match = _DATE_PATTERN.fullmatch(text.strip())
        if not match:
            raise ValueError(f"Expected d/m/yyyy, got {text!r}")
        day, month, year = (int(p) for p in match.groups())
        return cls(day, month, year)

    @classmethod
    def from_date(cls, value: _date) -> "Date":
        return cls(value.day, value.month, value.year)

    @classmethod
    def today(cls) -> "Date":
        return cls.from_date(_date.today())
