"""
Match List Service

The match list of a period, with the side A vs side B summary, full goal,
assist and MVP leaderboards, and the detail view of a single match.

Only visible players appear in leaderboards, lineups and event totals.
"""

from collections.abc import Iterable
from datetime import tzinfo

from petak_fudbal.models.match import EventRow, EventType, MatchRow, PlayerLite, Side, TeamRow
from petak_fudbal.models.scoreboard import (
    LeaderboardEntry,
    Leaderboards,
    MatchDetail,
    PeriodSummary,
)
from petak_fudbal.services.awards import event_totals, is_public, name_sort_key
from petak_fudbal.services.periods import local_datetime


def list_matches(
    matches: Iterable[MatchRow], match_ids: Iterable[str], tz: tzinfo | None = None
) -> list[MatchRow]:
    """Matches in the selection, most recent first."""
    ids = set(match_ids)
    selected = [m for m in matches if m.id in ids]
    selected.sort(key=lambda m: local_datetime(m.date, tz), reverse=True)
    return selected


def summarize_period(matches: Iterable[MatchRow], match_ids: Iterable[str]) -> PeriodSummary:
    """Wins, draws and goals of side A against side B."""
    ids = set(match_ids)
    summary = PeriodSummary()

    for m in matches:
        if m.id not in ids:
            continue
        summary.played += 1
        summary.goals_a += m.home_score
        summary.goals_b += m.away_score
        if m.home_score > m.away_score:
            summary.wins_a += 1
        elif m.home_score < m.away_score:
            summary.wins_b += 1
        else:
            summary.draws += 1

    return summary


def _ranked(rows: Iterable[tuple[PlayerLite, int]]) -> list[LeaderboardEntry]:
    entries = [
        LeaderboardEntry(
            id=player.id,
            name=player.name,
            slug=player.slug,
            image_url=player.image_url,
            value=total,
        )
        for player, total in rows
    ]
    entries.sort(key=lambda e: (-e.value, name_sort_key(e.name)))
    return entries


def compute_leaderboards(events: Iterable[EventRow], match_ids: Iterable[str]) -> Leaderboards:
    """
    Rank every player with at least one goal, assist or MVP row.

    Each list is ordered by total (highest first), then by name.
    """
    totals = event_totals(events, match_ids)
    return Leaderboards(
        goals=_ranked(totals[EventType.GOAL]),
        assists=_ranked(totals[EventType.ASSIST]),
        mvps=_ranked(totals[EventType.MVP]),
    )


def build_match_detail(
    *,
    match_id: str,
    matches: Iterable[MatchRow],
    events: Iterable[EventRow],
    teams: Iterable[TeamRow],
) -> MatchDetail | None:
    """
    Build the detail view of one match.

    Event totals are split by the side the player lined up on; events of
    players missing from both lineups are left out.

    Returns:
        MatchDetail, or None when no match has this id
    """
    match = next((m for m in matches if m.id == match_id), None)
    if match is None:
        return None

    side_of: dict[str, Side] = {}
    lineups: dict[Side, list[PlayerLite]] = {Side.A: [], Side.B: []}
    for tr in teams:
        if tr.match_id != match_id or not is_public(tr.players):
            continue
        if tr.players.id in side_of:
            continue
        side_of[tr.players.id] = tr.team
        lineups[tr.team].append(tr.players)

    totals = event_totals(events, [match_id])

    def on_side(event_type: EventType, side: Side) -> list[LeaderboardEntry]:
        return _ranked(
            (player, total)
            for player, total in totals[event_type]
            if side_of.get(player.id) == side
        )

    winner = None
    if match.home_score != match.away_score:
        winner = Side.A if match.home_score > match.away_score else Side.B

    return MatchDetail(
        id=match.id,
        date=match.date,
        home_score=match.home_score,
        away_score=match.away_score,
        winner=winner,
        lineup_a=sorted(lineups[Side.A], key=lambda p: name_sort_key(p.name)),
        lineup_b=sorted(lineups[Side.B], key=lambda p: name_sort_key(p.name)),
        scorers_a=on_side(EventType.GOAL, Side.A),
        scorers_b=on_side(EventType.GOAL, Side.B),
        assists_a=on_side(EventType.ASSIST, Side.A),
        assists_b=on_side(EventType.ASSIST, Side.B),
        mvps=sorted(
            (player for player, _ in totals[EventType.MVP]),
            key=lambda p: name_sort_key(p.name),
        ),
    )
