"""
Awards Engine

Pure functions that turn match, team-membership and event rows into the
award categories (Golden Boot, Assist King, MVP, Ironman, G/A, per-match
rates, best form, fewest losses and fewest goals conceded).

Rules shared by every category:
- Only rows whose embedded player passes ``is_public`` are counted.
- Winners are the full tie-set at the best value, ordered by name.
- No eligible player means value 0 and no winners, never an error.

Nothing here performs I/O or mutates its inputs.
"""

import unicodedata
from collections.abc import Iterable

from petak_fudbal.models.awards import (
    AwardsReport,
    MaxAward,
    MinAward,
    PlayerStats,
    Winner,
)
from petak_fudbal.models.match import (
    EventRow,
    EventType,
    MatchRow,
    Outcome,
    PlayerLite,
    TeamRow,
)
from petak_fudbal.services.periods import pct

# Minimum matches played (inclusive) for rate-based and "fewest" awards
DEFAULT_MIN_MATCHES_EFF = 3
DEFAULT_MIN_MATCHES_FORM = 3

# Serbian Latin letters that sort as separate letters after their base
_SR_LETTERS = {
    "č": ("c", 1),
    "ć": ("c", 2),
    "đ": ("d", 1),
    "š": ("s", 1),
    "ž": ("z", 1),
}


def is_public(player: PlayerLite | None) -> bool:
    """Whether a player's rows may be counted. Missing player data never counts."""
    if player is None:
        return False
    return player.is_public is not False


def name_sort_key(name: str) -> tuple:
    """
    Case-insensitive collation key following the Serbian Latin alphabet.

    Accented letters without their own place in the alphabet sort with their
    base letter, just after it.
    """
    letters = []
    for ch in name.casefold():
        if ch in _SR_LETTERS:
            letters.append(_SR_LETTERS[ch])
            continue
        decomposed = unicodedata.normalize("NFKD", ch)
        base = "".join(c for c in decomposed if not unicodedata.combining(c)) or ch
        letters.append((base, 0 if base == ch else 1))
    return (tuple(letters), name)


def _winner(player: PlayerLite | PlayerStats, value: int | float, extra: str | None = None) -> Winner:
    return Winner(
        id=player.id,
        name=player.name,
        slug=player.slug,
        image_url=player.image_url,
        value=value,
        extra=extra,
    )


def winners_by_max(candidates: list[Winner]) -> MaxAward:
    """Every candidate holding the highest value wins."""
    if not candidates:
        return MaxAward()

    best = max(c.value for c in candidates)
    winners = sorted(
        (c for c in candidates if c.value == best),
        key=lambda w: name_sort_key(w.name),
    )
    return MaxAward(max=best, winners=winners)


def winners_by_min(candidates: list[Winner]) -> MinAward:
    """Every candidate holding the lowest value wins."""
    if not candidates:
        return MinAward()

    best = min(c.value for c in candidates)
    winners = sorted(
        (c for c in candidates if c.value == best),
        key=lambda w: name_sort_key(w.name),
    )
    return MinAward(min=best, winners=winners)


def compute_player_stats(
    *,
    matches: Iterable[MatchRow],
    events: Iterable[EventRow],
    teams: Iterable[TeamRow],
    match_ids: Iterable[str],
) -> list[PlayerStats]:
    """
    Build one stats record per visible player over the selected matches.

    Team rows give played, W/D/L and goals conceded; event rows give goals,
    assists and MVPs. Both sources merge on the player id, so a player found
    in only one of them still gets a single record.

    Args:
        matches: Match rows (only those in ``match_ids`` are used)
        events: Goal/assist/MVP rows
        teams: Team-membership rows
        match_ids: Ids of the matches to aggregate over

    Returns:
        Unordered list of PlayerStats, one per player
    """
    ids = set(match_ids)
    match_by_id = {m.id: m for m in matches if m.id in ids}

    acc: dict[str, PlayerStats] = {}

    def ensure(player: PlayerLite) -> PlayerStats:
        cur = acc.get(player.id)
        if cur is None:
            cur = PlayerStats(
                id=player.id,
                name=player.name,
                slug=player.slug,
                image_url=player.image_url,
            )
            acc[player.id] = cur
        return cur

    for tr in teams:
        if tr.player_id is None or tr.match_id not in ids:
            continue
        if not is_public(tr.players):
            continue
        match = match_by_id.get(tr.match_id)
        if match is None:
            continue

        cur = ensure(tr.players)
        cur.played += 1
        outcome = match.outcome_for(tr.team)
        if outcome == Outcome.WIN:
            cur.wins += 1
        elif outcome == Outcome.LOSS:
            cur.losses += 1
        else:
            cur.draws += 1
        cur.goals_conceded += match.goals_against(tr.team)

    for ev in events:
        if ev.match_id not in ids or not is_public(ev.players):
            continue

        cur = ensure(ev.players)
        if ev.type == EventType.GOAL:
            cur.goals += ev.amount
        elif ev.type == EventType.ASSIST:
            cur.assists += ev.amount
        elif ev.type == EventType.MVP:
            cur.mvps += 1

    return list(acc.values())


def event_totals(
    events: Iterable[EventRow], match_ids: Iterable[str]
) -> dict[EventType, list[tuple[PlayerLite, int]]]:
    """
    Sum goals, assists and MVPs per visible player straight from the event rows.

    MVP rows count one each whatever their value. Players without a row of a
    type are absent from that type's list.
    """
    ids = set(match_ids)
    totals: dict[EventType, dict[str, list]] = {t: {} for t in EventType}

    for ev in events:
        if ev.match_id not in ids or not is_public(ev.players):
            continue
        amount = 1 if ev.type == EventType.MVP else ev.amount
        entry = totals[ev.type].setdefault(ev.players.id, [ev.players, 0])
        entry[1] += amount

    return {
        event_type: [(player, total) for player, total in by_player.values()]
        for event_type, by_player in totals.items()
    }


def _event_leaders(events: Iterable[EventRow], ids: set[str]) -> dict[EventType, MaxAward]:
    return {
        event_type: winners_by_max([_winner(player, total) for player, total in rows])
        for event_type, rows in event_totals(events, ids).items()
    }


def compute_awards(
    *,
    matches: Iterable[MatchRow],
    events: Iterable[EventRow],
    teams: Iterable[TeamRow],
    match_ids: Iterable[str],
    min_matches_eff: int = DEFAULT_MIN_MATCHES_EFF,
    min_matches_form: int = DEFAULT_MIN_MATCHES_FORM,
) -> AwardsReport:
    """
    Compute every award category over one selection of matches.

    Args:
        matches: Match rows
        events: Goal/assist/MVP rows
        teams: Team-membership rows
        match_ids: Ids of the matches to consider (e.g. from a period)
        min_matches_eff: Minimum played for rate awards, fewest losses and
            fewest conceded
        min_matches_form: Minimum played for the best-form award

    Returns:
        AwardsReport with all eleven categories
    """
    matches = list(matches)
    events = list(events)
    teams = list(teams)
    ids = set(match_ids)

    leaders = _event_leaders(events, ids)
    stats = compute_player_stats(
        matches=matches, events=events, teams=teams, match_ids=ids
    )
    regulars = [p for p in stats if p.played >= min_matches_eff]
    in_form = [p for p in stats if p.played >= min_matches_form]

    def rate(count: int, played: int) -> float:
        return count / played if played else 0

    return AwardsReport(
        goals=leaders[EventType.GOAL],
        assists=leaders[EventType.ASSIST],
        mvps=leaders[EventType.MVP],
        ironman=winners_by_max(
            [_winner(p, p.played, f"{p.played} matches") for p in stats]
        ),
        ga=winners_by_max(
            [
                _winner(p, p.goals + p.assists, f"{p.goals}G • {p.assists}A")
                for p in stats
            ]
        ),
        goal_rate=winners_by_max(
            [
                _winner(p, rate(p.goals, p.played), f"{p.goals}G / {p.played} matches")
                for p in regulars
            ]
        ),
        assist_rate=winners_by_max(
            [
                _winner(p, rate(p.assists, p.played), f"{p.assists}A / {p.played} matches")
                for p in regulars
            ]
        ),
        mvp_rate=winners_by_max(
            [
                _winner(p, rate(p.mvps, p.played), f"{p.mvps} MVP / {p.played} matches")
                for p in regulars
            ]
        ),
        form=winners_by_max(
            [
                _winner(
                    p,
                    rate(p.wins, p.played),
                    f"{pct(rate(p.wins, p.played))} • {p.wins}/{p.played} wins",
                )
                for p in in_form
            ]
        ),
        least_losses=winners_by_min(
            [_winner(p, p.losses, f"{p.losses} losses • {p.record}") for p in regulars]
        ),
        stub=winners_by_min(
            [
                _winner(p, p.goals_conceded, f"{p.goals_conceded} conceded • {p.played} matches")
                for p in regulars
            ]
        ),
    )
