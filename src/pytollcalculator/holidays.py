"""Toll-free calendar dates: weekends, public holidays and July."""

from __future__ import annotations

from collections.abc import Callable
from datetime import MAXYEAR, MINYEAR, date, timedelta

from .const import (
    ASCENSION_DAY_OFFSET,
    EASTER_MONDAY_OFFSET,
    FIXED_HOLIDAYS,
    GOOD_FRIDAY_OFFSET,
    MIDSUMMER_SEARCH_START,
    PENTECOST_OFFSET,
    TOLL_FREE_MONTH,
)
from .exceptions import ValidationError
from .util import as_date

HolidayLookup = Callable[[int], frozenset[date]]

_FRIDAY = 4
_SATURDAY = 5


def _validate_year(year: int) -> int:
    if isinstance(year, bool) or not isinstance(year, int):
        raise ValidationError("Year must be an integer.")
    if not MINYEAR <= year <= MAXYEAR:
        raise ValidationError(f"Year must be between {MINYEAR} and {MAXYEAR}.")
    return year


def easter_sunday(year: int) -> date:
    """Return Easter Sunday using the anonymous Gregorian algorithm."""
    _validate_year(year)
    a = year % 19
    b, c = divmod(year, 100)
    d, e = divmod(b, 4)
    f = (b + 8) // 25
    g = (b - f + 1) // 3
    h = (19 * a + b - d - g + 15) % 30
    i, k = divmod(c, 4)
    l = (32 + 2 * e + 2 * i - h - k) % 7
    m = (a + 11 * h + 22 * l) // 451
    month, day = divmod(h + l - 7 * m + 114, 31)
    return date(year, month, day + 1)


def midsummer_eve(year: int) -> date:
    """Return the first Friday on or after June 19."""
    _validate_year(year)
    start = date(year, *MIDSUMMER_SEARCH_START)
    return start + timedelta(days=(_FRIDAY + 7 - start.weekday()) % 7)


def holiday_set(year: int) -> frozenset[date]:
    """Return every non-weekend toll-free date of ``year``."""
    _validate_year(year)
    dates = {date(year, month, day) for month, day in FIXED_HOLIDAYS}

    easter = easter_sunday(year)
    for offset in (
        GOOD_FRIDAY_OFFSET,
        0,
        EASTER_MONDAY_OFFSET,
        ASCENSION_DAY_OFFSET,
        PENTECOST_OFFSET,
    ):
        dates.add(easter + timedelta(days=offset))

    eve = midsummer_eve(year)
    dates.add(eve)
    dates.add(eve + timedelta(days=1))

    dates.update(date(year, TOLL_FREE_MONTH, day) for day in range(1, 32))
    return frozenset(dates)


def is_weekend(day: date) -> bool:
    return day.weekday() >= _SATURDAY


def is_exempt_date(day: date, *, holidays: HolidayLookup = holiday_set) -> bool:
    """Return True when no fee applies on ``day`` for any vehicle.

    ``holidays`` maps a year to its holiday set; pass a cached lookup to avoid
    rebuilding the set on every call.
    """
    day = as_date(day)
    if is_weekend(day):
        return True
    return day in holidays(day.year)
