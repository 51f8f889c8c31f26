"""
Player Profile Service

All-time numbers for a single player: totals and record, the match log and
recent form, the trophy cabinet, and the opponents they fare worst and best
against.
"""

from collections.abc import Iterable
from datetime import tzinfo

from petak_fudbal.models.match import EventRow, EventType, MatchRow, Outcome, Side, TeamRow
from petak_fudbal.models.player import PlayerMatchEntry, PlayerProfile
from petak_fudbal.models.rivalry import RivalryMode
from petak_fudbal.services.awards import compute_player_stats, is_public
from petak_fudbal.services.history import count_trophies
from petak_fudbal.services.periods import local_datetime
from petak_fudbal.services.rivalries import DEFAULT_MIN_DUELS, compute_rivalries, rank_rivalries

RECENT_FORM_MATCHES = 5
PROFILE_RIVALS = 3


def player_match_log(
    player_id: str,
    matches: Iterable[MatchRow],
    events: Iterable[EventRow],
    teams: Iterable[TeamRow],
    tz: tzinfo | None = None,
) -> list[PlayerMatchEntry]:
    """
    Every match a visible player lined up in, most recent first.

    Each entry carries the score from the player's side and the player's own
    goals, assists and MVP in that match.
    """
    side_by_match: dict[str, Side] = {
        tr.match_id: tr.team
        for tr in teams
        if tr.player_id == player_id and is_public(tr.players)
    }

    entries: dict[str, PlayerMatchEntry] = {}
    for m in matches:
        side = side_by_match.get(m.id)
        if side is None:
            continue
        entries[m.id] = PlayerMatchEntry(
            match_id=m.id,
            date=m.date,
            side=side,
            goals_for=m.goals_for(side),
            goals_against=m.goals_against(side),
            outcome=m.outcome_for(side),
        )

    for ev in events:
        entry = entries.get(ev.match_id)
        if entry is None or ev.players is None or ev.players.id != player_id:
            continue
        if ev.type == EventType.GOAL:
            entry.goals += ev.amount
        elif ev.type == EventType.ASSIST:
            entry.assists += ev.amount
        elif ev.type == EventType.MVP:
            entry.mvp = True

    return sorted(entries.values(), key=lambda e: local_datetime(e.date, tz), reverse=True)


def recent_form(
    player_id: str,
    matches: Iterable[MatchRow],
    teams: Iterable[TeamRow],
    limit: int = RECENT_FORM_MATCHES,
    tz: tzinfo | None = None,
) -> list[Outcome]:
    """Results of a player's most recent matches, newest first."""
    log = player_match_log(player_id, matches, [], teams, tz)
    return [e.outcome for e in log[:limit]]


def build_player_profile(
    *,
    player_id: str,
    matches: Iterable[MatchRow],
    events: Iterable[EventRow],
    teams: Iterable[TeamRow],
    tz: tzinfo | None = None,
    min_duels: int = DEFAULT_MIN_DUELS,
) -> PlayerProfile | None:
    """
    Build a player's all-time profile.

    Returns:
        PlayerProfile, or None when the player has no visible rows
        (unknown id or a private player)
    """
    matches = list(matches)
    events = list(events)
    teams = list(teams)

    all_stats = compute_player_stats(
        matches=matches,
        events=events,
        teams=teams,
        match_ids=[m.id for m in matches],
    )
    stats = next((s for s in all_stats if s.id == player_id), None)
    if stats is None:
        return None

    log = player_match_log(player_id, matches, events, teams, tz)
    rivalries = compute_rivalries(matches=matches, teams=teams)

    return PlayerProfile(
        stats=stats,
        recent_form=[e.outcome for e in log[:RECENT_FORM_MATCHES]],
        trophies=count_trophies(
            matches=matches, events=events, teams=teams, player_id=player_id, tz=tz
        ),
        matches=log,
        nemeses=rank_rivalries(
            rivalries,
            RivalryMode.NEMESIS,
            min_duels=min_duels,
            limit=PROFILE_RIVALS,
            player_id=player_id,
        ),
        dominated=rank_rivalries(
            rivalries,
            RivalryMode.DOMINATION,
            min_duels=min_duels,
            limit=PROFILE_RIVALS,
            player_id=player_id,
        ),
    )
