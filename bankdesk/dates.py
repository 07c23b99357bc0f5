"""Calendar checks and the date, year and clock records stored with accounts."""

from __future__ import annotations

import functools
from dataclasses import dataclass, field
from datetime import datetime
from typing import BinaryIO, Optional, Union

from bankdesk.storage import read_bool, read_int, write_bool, write_int

_THIRTY_ONE = {1, 3, 5, 7, 8, 10, 12}
_THIRTY = {4, 6, 9, 11}


def is_leap_year(year: int) -> bool:
    """Gregorian leap-year rule."""
    if year % 4 != 0:
        return False
    if year % 100 != 0:
        return True
    return year % 400 == 0


def month_days(month: int, year: int) -> int:
    """Number of days in ``month`` of ``year``; 0 for a month that does not exist."""
    if month in _THIRTY_ONE:
        return 31
    if month in _THIRTY:
        return 30
    if month == 2:
        return 29 if is_leap_year(year) else 28
    return 0


def is_valid_day(day: int, days_in_month: int) -> bool:
    """True when ``day`` falls within a month of ``days_in_month`` days."""
    return 1 <= day <= days_in_month


@dataclass
class Clock:
    """Time of day in hours, minutes and seconds."""

    hour: int = 0
    minute: int = 0
    second: int = 0

    def write(self, stream: BinaryIO) -> None:
        """Write the three fields as 32-bit integers."""
        for value in (self.hour, self.minute, self.second):
            write_int(stream, value)

    @classmethod
    def read(cls, stream: BinaryIO) -> "Clock":
        """Read a clock written by :meth:`write`."""
        return cls(read_int(stream), read_int(stream), read_int(stream))


@dataclass
class Year:
    """A calendar year together with whether it is a leap year."""

    year: int = 0
    leap_year: Optional[bool] = None

    def __post_init__(self) -> None:
        if self.leap_year is None:
            self.leap_year = is_leap_year(self.year)

    def write(self, stream: BinaryIO) -> None:
        """Write the year as a 32-bit integer followed by the leap flag byte."""
        write_int(stream, self.year)
        write_bool(stream, bool(self.leap_year))

    @classmethod
    def read(cls, stream: BinaryIO) -> "Year":
        """Read a year written by :meth:`write`."""
        year = read_int(stream)
        return cls(year, read_bool(stream))


@functools.total_ordering
@dataclass(eq=False)
class Date:
    """A calendar date with a time of day; compared by day only."""

    year: Union[Year, int] = 0
    month: int = 0
    day: int = 0
    time: Clock = field(default_factory=Clock)
    days_in_month: Optional[int] = None

    def __post_init__(self) -> None:
        if not isinstance(self.year, Year):
            self.year = Year(self.year)
        if self.days_in_month is None:
            self.days_in_month = month_days(self.month, self.year.year)

    def _key(self) -> tuple[int, int, int]:
        return (self.year.year, self.month, self.day)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Date):
            return NotImplemented
        return self._key() == other._key()

    def __lt__(self, other: "Date") -> bool:
        if not isinstance(other, Date):
            return NotImplemented
        return self._key() < other._key()

    def __hash__(self) -> int:
        return hash(self._key())

    @classmethod
    def today(cls) -> "Date":
        """The current local date and time."""
        now = datetime.now()
        return cls(
            Year(now.year),
            now.month,
            now.day,
            time=Clock(now.hour, now.minute, now.second),
        )

    def describe(self) -> str:
        """Two lines with the date and the time."""
        return (
            f"Fecha: {self.day}/{self.month}/{self.year.year}\n"
            f"Hora: {self.time.hour}:{self.time.minute}:{self.time.second}\n"
        )

    def write(self, stream: BinaryIO) -> None:
        """Write day, month, year, days in month and time."""
        write_int(stream, self.day)
        write_int(stream, self.month)
        self.year.write(stream)
        write_int(stream, self.days_in_month or 0)
        self.time.write(stream)

    @classmethod
    def read(cls, stream: BinaryIO) -> "Date":
        """Read a date written by :meth:`write`."""
        day = read_int(stream)
        month = read_int(stream)
        year = Year.read(stream)
        days = read_int(stream)
        time = Clock.read(stream)
        return cls(year, month, day, time=time, days_in_month=days)