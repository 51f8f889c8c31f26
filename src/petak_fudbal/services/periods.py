"""
Period Enumeration and Match Selection

Derives the selectable periods (years, and months within a year) from the
match dates, and maps a period to the ids of the matches it covers.

Matches are bucketed by calendar date. Naive datetimes are taken as already
local; timezone-aware ones are converted to ``tz`` first (the system local
zone when ``tz`` is None).
"""

from collections.abc import Iterable
from datetime import datetime, tzinfo

from petak_fudbal.models.match import MatchRow
from petak_fudbal.models.period import Period, YearPeriods


def pad2(n: int) -> str:
    return f"{n:02d}"


def pct(rate: float) -> str:
    """Format a 0..1 rate as a whole percentage, e.g. 0.666 -> '67%'."""
    return f"{int(rate * 100 + 0.5)}%"


def local_datetime(dt: datetime, tz: tzinfo | None = None) -> datetime:
    """Wall-clock datetime of a match in the bucketing zone, without tzinfo."""
    if dt.tzinfo is None:
        return dt
    return dt.astimezone(tz).replace(tzinfo=None)


def match_year_month(match: MatchRow, tz: tzinfo | None = None) -> tuple[str, str]:
    """Return the (year, two-digit month) bucket of a match."""
    local = local_datetime(match.date, tz)
    return str(local.year), pad2(local.month)


def list_years(matches: Iterable[MatchRow], tz: tzinfo | None = None) -> list[str]:
    """Distinct years with matches, most recent first."""
    years = {match_year_month(m, tz)[0] for m in matches}
    return sorted(years, key=int, reverse=True)


def list_periods_for_year(
    matches: Iterable[MatchRow], year: str | int, tz: tzinfo | None = None
) -> YearPeriods:
    """
    Get the month periods that have matches in a year, plus the year itself.

    The year period is always returned, even when the year has no matches;
    callers check ``match_ids_for_period`` before treating it as meaningful.
    """
    year = str(year)
    months: set[str] = set()
    for m in matches:
        y, mo = match_year_month(m, tz)
        if y == year:
            months.add(mo)

    return YearPeriods(
        month_periods=[Period.for_month(year, mo) for mo in sorted(months)],
        year_period=Period.for_year(year),
    )


def match_ids_for_period(
    matches: Iterable[MatchRow], period: Period, tz: tzinfo | None = None
) -> list[str]:
    """
    Get the ids of matches played within a period, in input order.

    An empty list means the period has no matches; it is not an error.
    """
    ids: list[str] = []
    for m in matches:
        y, mo = match_year_month(m, tz)
        if y != period.year:
            continue
        if period.is_year or mo == period.month:
            ids.append(m.id)
    return ids
