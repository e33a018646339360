"""SINEX date fields (YY:DDD:SSSSS) and time-interval helpers."""

from __future__ import annotations

import calendar
import re
from datetime import datetime, timedelta

_DATE = re.compile(r" *(-?\d+)\D(-?\d+)\D(-?\d+)")


class SinexError(ValueError):
    """Raised when SINEX content cannot be parsed or is inconsistent."""


def parse_sinex_date(text: str, default: datetime) -> datetime:
    """Parse a SINEX ``YY:DDD:SSSSS`` date at the start of ``text``.

    The all-zero date ``00:000:00000`` resolves to ``default``. Two-digit years
    up to 50 are in the 2000s, the rest in the 1900s. Trailing text is ignored.
    """
    match = _DATE.match(text)
    if match is None:
        raise SinexError(f"failed to resolve SINEX date from string {text!r}")
    year, doy, sec = (int(g) for g in match.groups())
    if year == 0 and doy == 0 and sec == 0:
        return default
    year += 2000 if year <= 50 else 1900
    days_in_year = 366 if calendar.isleap(year) else 365
    if not 1 <= doy <= days_in_year or sec < 0:
        raise SinexError(f"invalid SINEX date in string {text!r}")
    return datetime(year, 1, 1) + timedelta(days=doy - 1, seconds=sec)


def intervals_overlap(
    start1: datetime,
    stop1: datetime,
    start2: datetime,
    stop2: datetime,
    strict: bool = True,
) -> bool:
    """Tell whether [start1, stop1] and [start2, stop2] overlap.

    With ``strict`` intervals that only touch at an edge do not overlap.
    """
    if strict:
        return start1 < stop2 and start2 < stop1
    return start1 <= stop2 and start2 <= stop1