"""
Rivalries Service

Head-to-head records between players who lined up on opposite sides,
ranked as "nemesis" (the opponents a player struggles against) or
"domination" (the opponents a player beats most).
"""

from collections import defaultdict
from collections.abc import Iterable

from petak_fudbal.models.match import MatchRow, Outcome, PlayerLite, Side, TeamRow
from petak_fudbal.models.rivalry import RivalryMode, RivalryRecord
from petak_fudbal.services.awards import is_public, name_sort_key

DEFAULT_MIN_DUELS = 3
DEFAULT_LIMIT = 30


def compute_rivalries(
    *,
    matches: Iterable[MatchRow],
    teams: Iterable[TeamRow],
    match_ids: Iterable[str] | None = None,
) -> list[RivalryRecord]:
    """
    Build a record for every ordered pair of players who faced each other.

    Each pair appears twice, once from each player's side, so the wins of
    (a, b) are the losses of (b, a).

    Args:
        matches: Match rows
        teams: Team-membership rows
        match_ids: Restrict to these matches; all matches when None

    Returns:
        Records sorted by player name, then opponent name
    """
    matches = list(matches)
    ids = set(match_ids) if match_ids is not None else {m.id for m in matches}

    lineups: dict[str, dict[Side, dict[str, PlayerLite]]] = defaultdict(
        lambda: {Side.A: {}, Side.B: {}}
    )
    for tr in teams:
        if tr.player_id is None or tr.match_id not in ids:
            continue
        if not is_public(tr.players):
            continue
        lineups[tr.match_id][tr.team][tr.players.id] = tr.players

    acc: dict[tuple[str, str], RivalryRecord] = {}

    for match in matches:
        if match.id not in ids or match.id not in lineups:
            continue
        sides = lineups[match.id]
        for side, other in ((Side.A, Side.B), (Side.B, Side.A)):
            outcome = match.outcome_for(side)
            diff = match.goals_for(side) - match.goals_against(side)
            for a in sides[side].values():
                for b in sides[other].values():
                    rec = acc.get((a.id, b.id))
                    if rec is None:
                        rec = RivalryRecord(
                            player_a_id=a.id,
                            player_name=a.name,
                            player_slug=a.slug,
                            player_b_id=b.id,
                            opponent_name=b.name,
                            opponent_slug=b.slug,
                        )
                        acc[(a.id, b.id)] = rec
                    rec.duels += 1
                    rec.a_goal_diff += diff
                    if outcome == Outcome.WIN:
                        rec.a_wins += 1
                    elif outcome == Outcome.LOSS:
                        rec.a_losses += 1
                    else:
                        rec.draws += 1

    return sorted(
        acc.values(),
        key=lambda r: (name_sort_key(r.player_name), name_sort_key(r.opponent_name)),
    )


def rank_rivalries(
    records: Iterable[RivalryRecord],
    mode: RivalryMode = RivalryMode.NEMESIS,
    min_duels: int = DEFAULT_MIN_DUELS,
    limit: int | None = DEFAULT_LIMIT,
    player_id: str | None = None,
) -> list[RivalryRecord]:
    """
    Rank head-to-head records.

    Nemesis puts the worst net (wins minus losses) first, then the worst goal
    difference; domination is the reverse. Only pairs with at least
    ``min_duels`` meetings are ranked.
    """
    pool = [
        r
        for r in records
        if r.duels >= min_duels and (player_id is None or r.player_a_id == player_id)
    ]
    if mode == RivalryMode.NEMESIS:
        pool.sort(key=lambda r: (r.a_net, r.a_goal_diff))
    else:
        pool.sort(key=lambda r: (-r.a_net, -r.a_goal_diff))

    return pool if limit is None else pool[:limit]
