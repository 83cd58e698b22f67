"""Calendar dates with day arithmetic on the proleptic Gregorian calendar."""

from __future__ import annotations

_MONTH_DAYS = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)


def _is_leap(year: int) -> bool:
    return year % 400 == 0 or (year % 4 == 0 and year % 100 != 0)


def days_in_month(year: int, month: int) -> int:
    """Return the number of days in ``month`` of ``year``."""
    if not 1 <= month <= 12:
        raise ValueError(f"month must be in 1..12, got {month}")
    days = _MONTH_DAYS[month - 1]
    if month == 2 and _is_leap(year):
        days += 1
    return days


class Date:
    """A mutable year/month/day triple supporting day arithmetic."""

    __slots__ = ("year", "month", "day")

    def __init__(self, year: int = 2025, month: int = 1, day: int = 8) -> None:
        self.year = year
        self.month = month
        self.day = day

    def _key(self) -> tuple[int, int, int]:
        return (self.year, self.month, self.day)

    def _copy(self) -> Date:
        return Date(self.year, self.month, self.day)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Date):
            return NotImplemented
        return self._key() == other._key()

    __hash__ = None  # type: ignore[assignment]

    def __lt__(self, other: Date) -> bool:
        if not isinstance(other, Date):
            return NotImplemented
        return self._key() < other._key()

    def __le__(self, other: Date) -> bool:
        if not isinstance(other, Date):
            return NotImplemented
        return self._key() <= other._key()

    def __gt__(self, other: Date) -> bool:
        if not isinstance(other, Date):
            return NotImplemented
        return self._key() > other._key()

    def __ge__(self, other: Date) -> bool:
        if not isinstance(other, Date):
            return NotImplemented
        return self._key() >= other._key()

    def __iadd__(self, days: int) -> Date:
        if not isinstance(days, int):
            return NotImplemented
        if days < 0:
            return self.__isub__(-days)
        self.day += days
        while self.day > days_in_month(self.year, self.month):
            self.day -= days_in_month(self.year, self.month)
            self.month += 1
            if self.month == 13:
                self.year += 1
                self.month = 1
        return self

    def __isub__(self, days: int) -> Date:
        if not isinstance(days, int):
            return NotImplemented
        if days < 0:
            return self.__iadd__(-days)
        self.day -= days
        while self.day <= 0:
            self.month -= 1
            if self.month == 0:
                self.month = 12
                self.year -= 1
            self.day += days_in_month(self.year, self.month)
        return self

    def __add__(self, days: int) -> Date:
        if not isinstance(days, int):
            return NotImplemented
        result = self._copy()
        result += days
        return result

    def __sub__(self, days: int) -> Date:
        if not isinstance(days, int):
            return NotImplemented
        result = self._copy()
        result -= days
        return result

    def increment(self) -> Date:
        """Advance this date by one day and return it."""
        self += 1
        return self

    def decrement(self) -> Date:
        """Move this date back by one day and return it."""
        self -= 1
        return self

    def __str__(self) -> str:
        return f"{self.year}.{self.month}.{self.day}"

    def __repr__(self) -> str:
        return f"Date({self.year}, {self.month}, {self.day})"


def parse_date(text: str) -> Date:
    """Parse three whitespace-separated integers: year, month, day."""
    parts = text.split()
    if len(parts) != 3:
        raise ValueError(f"expected 'year month day', got {text!r}")
    try:
        year, month, day = (int(part) for part in parts)
    except ValueError as exc:
        raise ValueError(f"expected integers in {text!r}") from exc
    return Date(year, month, day)