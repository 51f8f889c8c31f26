"""
Awards History Service

Views built on top of the awards engine without any new aggregation rules:
per-year award histories, a player's trophy cabinet across all periods, and
the dominance table of players winning several categories at once.
"""

from collections.abc import Iterable, Iterator
from datetime import tzinfo

from petak_fudbal.models.awards import (
    AwardsReport,
    DominanceEntry,
    PeriodAwards,
    TrophyCabinet,
    YearAwardsHistory,
)
from petak_fudbal.models.match import EventRow, MatchRow, TeamRow
from petak_fudbal.models.period import Period
from petak_fudbal.services.awards import (
    DEFAULT_MIN_MATCHES_EFF,
    DEFAULT_MIN_MATCHES_FORM,
    compute_awards,
    name_sort_key,
)
from petak_fudbal.services.periods import (
    list_periods_for_year,
    list_years,
    match_ids_for_period,
)

# Categories counted for dominance (everything except the per-match rates)
DOMINANCE_CATEGORIES = (
    "goals",
    "assists",
    "mvps",
    "ironman",
    "ga",
    "form",
    "least_losses",
    "stub",
)


def compute_dominance(
    report: AwardsReport, min_categories: int = 2
) -> list[DominanceEntry]:
    """
    Count, per player, how many non-rate categories they win.

    Args:
        report: Awards for one period
        min_categories: Minimum categories won to be listed

    Returns:
        Entries sorted by categories won (most first), then by name
    """
    by_player: dict[str, DominanceEntry] = {}

    for key in DOMINANCE_CATEGORIES:
        award = getattr(report, key)
        for w in award.winners:
            entry = by_player.get(w.id)
            if entry is None:
                entry = DominanceEntry(
                    id=w.id,
                    name=w.name,
                    slug=w.slug,
                    image_url=w.image_url,
                    count=0,
                    categories=[],
                )
                by_player[w.id] = entry
            entry.count += 1
            entry.categories.append(key)

    entries = [e for e in by_player.values() if e.count >= min_categories]
    entries.sort(key=lambda e: (-e.count, name_sort_key(e.name)))
    return entries


def iter_year_periods(
    matches: list[MatchRow], year: str, tz: tzinfo | None = None
) -> Iterator[tuple[Period, list[str]]]:
    """Yield (period, match ids) for the year and each of its months with matches."""
    periods = list_periods_for_year(matches, year, tz)
    for period in [periods.year_period, *periods.month_periods]:
        ids = match_ids_for_period(matches, period, tz)
        if ids:
            yield period, ids


def build_year_history(
    *,
    matches: Iterable[MatchRow],
    events: Iterable[EventRow],
    teams: Iterable[TeamRow],
    year: str | int,
    tz: tzinfo | None = None,
    min_matches_eff: int = DEFAULT_MIN_MATCHES_EFF,
    min_matches_form: int = DEFAULT_MIN_MATCHES_FORM,
) -> YearAwardsHistory:
    """
    Compute the awards for a year and for every month of it that has matches.

    Periods without matches are left out; the season card is absent when the
    whole year is empty.
    """
    matches = list(matches)
    events = list(events)
    teams = list(teams)
    year = str(year)

    history = YearAwardsHistory(year=year)
    for period, ids in iter_year_periods(matches, year, tz):
        card = PeriodAwards(
            period=period,
            label=period.label,
            match_count=len(ids),
            awards=compute_awards(
                matches=matches,
                events=events,
                teams=teams,
                match_ids=ids,
                min_matches_eff=min_matches_eff,
                min_matches_form=min_matches_form,
            ),
        )
        if period.is_year:
            history.season = card
        else:
            history.months.append(card)

    return history


def count_trophies(
    *,
    matches: Iterable[MatchRow],
    events: Iterable[EventRow],
    teams: Iterable[TeamRow],
    player_id: str,
    tz: tzinfo | None = None,
) -> TrophyCabinet:
    """
    Count the periods in which a player won each headline award.

    Every month with matches and every year counts as one period, so a
    player topping both March and the whole year collects two trophies.
    """
    matches = list(matches)
    events = list(events)
    teams = list(teams)

    cabinet = TrophyCabinet()
    for year in list_years(matches, tz):
        for _, ids in iter_year_periods(matches, year, tz):
            report = compute_awards(
                matches=matches, events=events, teams=teams, match_ids=ids
            )
            if _has_winner(report.goals.winners, player_id):
                cabinet.golden_boot += 1
            if _has_winner(report.assists.winners, player_id):
                cabinet.assist_king += 1
            if _has_winner(report.mvps.winners, player_id):
                cabinet.mvp += 1
            if _has_winner(report.ironman.winners, player_id):
                cabinet.ironman += 1

    return cabinet


def _has_winner(winners, player_id: str) -> bool:
    return any(w.id == player_id for w in winners)
