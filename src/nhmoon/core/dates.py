"""
nhmoon.core.dates
-----------------
Proleptic Gregorian date arithmetic over years -9999..9999.

The linear day count ("ordinal") used throughout the package is the
Julian Day Number: 2000-01-01 is JDN 2451545. Python floor division keeps
the Fliegel-Van Flandern formulas exact for negative years as well, so no
special casing of the era boundary is needed (year 0 is a leap year).
"""

from __future__ import annotations

import re

from .errors import InvalidDateError, OutOfRangeError
from .types import CalendarDate

MIN_YEAR = -9999
MAX_YEAR = 9999

_MONTH_DAYS = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)

_YMD_RE = re.compile(r"^([+-]?)(\d{4,})-(\d{2})-(\d{2})$")


def is_leap_year(year: int) -> bool:
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


def days_in_month(year: int, month: int) -> int:
    if not 1 <= month <= 12:
        raise InvalidDateError(f"month {month} is not in 1..12")
    if month == 2 and is_leap_year(year):
        return 29
    return _MONTH_DAYS[month - 1]


def check_ymd(year: int, month: int, day: int) -> None:
    """Raise InvalidDateError unless (year, month, day) is a supported date."""
    if not MIN_YEAR <= year <= MAX_YEAR:
        raise InvalidDateError(f"year {year} is outside {MIN_YEAR}..{MAX_YEAR}")
    dim = days_in_month(year, month)
    if not 1 <= day <= dim:
        raise InvalidDateError(f"day {day} is not in 1..{dim} for {year}-{month:02d}")


def make_date(year: int, month: int, day: int) -> CalendarDate:
    return CalendarDate(year, month, day)


MIN_DATE = CalendarDate(MIN_YEAR, 1, 1)
MAX_DATE = CalendarDate(MAX_YEAR, 12, 31)


def to_ordinal(d: CalendarDate) -> int:
    """Convert a calendar date to its Julian Day Number."""
    a = (14 - d.month) // 12
    y2 = d.year + 4800 - a
    m2 = d.month + 12 * a - 3
    return d.day + (153 * m2 + 2) // 5 + 365 * y2 + y2 // 4 - y2 // 100 + y2 // 400 - 32045


MIN_ORDINAL = to_ordinal(MIN_DATE)
MAX_ORDINAL = to_ordinal(MAX_DATE)


def from_ordinal(o: int) -> CalendarDate:
    """Inverse of to_ordinal, defined on [MIN_ORDINAL, MAX_ORDINAL]."""
    if not MIN_ORDINAL <= o <= MAX_ORDINAL:
        raise OutOfRangeError(f"ordinal {o} is outside {MIN_ORDINAL}..{MAX_ORDINAL}")
    a = o + 32044
    b = (4 * a + 3) // 146097
    c = a - (146097 * b) // 4
    d = (4 * c + 3) // 1461
    e = c - (1461 * d) // 4
    m = (5 * e + 2) // 153
    day = e - (153 * m + 2) // 5 + 1
    month = m + 3 - 12 * (m // 10)
    year = 100 * b + d - 4800 + (m // 10)
    return CalendarDate(year, month, day)


def clamp_ordinal(o: int) -> int:
    return max(MIN_ORDINAL, min(MAX_ORDINAL, o))


def add_days(d: CalendarDate, n: int) -> CalendarDate:
    """Shift a date by n days. Leaving the supported range is an error, not a clamp."""
    return from_ordinal(to_ordinal(d) + n)


def weekday(d: CalendarDate) -> int:
    """0=Sun..6=Sat (JDN 0 was a Monday)."""
    return (to_ordinal(d) + 1) % 7


def day_of_year(d: CalendarDate) -> int:
    return to_ordinal(d) - to_ordinal(CalendarDate(d.year, 1, 1)) + 1


def is_last_day_of_month(d: CalendarDate) -> bool:
    return d.day == days_in_month(d.year, d.month)


def parse_ymd(s: str) -> CalendarDate:
    """
    Parse [+|-]YYYY-MM-DD. The year has at least four digits; negative
    years need an explicit '-'. Out-of-range values raise InvalidDateError.
    """
    m = _YMD_RE.match(s.strip())
    if m is None:
        raise InvalidDateError(f"malformed date {s!r}; expected [-]YYYY-MM-DD")
    sign, y, mo, d = m.groups()
    year = -int(y) if sign == "-" else int(y)
    return make_date(year, int(mo), int(d))


def format_ymd(d: CalendarDate) -> str:
    sign = "-" if d.year < 0 else ""
    return f"{sign}{abs(d.year):04d}-{d.month:02d}-{d.day:02d}"
