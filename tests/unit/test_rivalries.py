"""Unit tests for head-to-head rivalries."""

from __future__ import annotations

import pytest

from petak_fudbal.models import RivalryMode
from petak_fudbal.services.rivalries import compute_rivalries, rank_rivalries


@pytest.fixture
def duels(rows):
    """Ana and Boban meet four times; Cile faces Ana only twice."""
    ana, boban, cile = rows.player("ana", "Ana"), rows.player("boban", "Boban"), rows.player("cile", "Cile")
    matches = [
        rows.match("m1", "2025-03-07", 3, 1),
        rows.match("m2", "2025-03-14", 2, 2),
        rows.match("m3", "2025-03-21", 5, 0),
        rows.match("m4", "2025-03-28", 0, 1),
    ]
    teams = (
        rows.lineup("m1", [ana], [boban, cile])
        + rows.lineup("m2", [ana], [boban, cile])
        + rows.lineup("m3", [ana], [boban])
        + rows.lineup("m4", [ana], [boban])
    )
    return matches, teams


def _by_pair(records):
    return {(r.player_a_id, r.player_b_id): r for r in records}


class TestComputeRivalries:
    def test_records_are_symmetric(self, duels) -> None:
        matches, teams = duels
        pairs = _by_pair(compute_rivalries(matches=matches, teams=teams))

        ab, ba = pairs[("ana", "boban")], pairs[("boban", "ana")]
        assert ab.duels == ba.duels == 4
        assert (ab.a_wins, ab.draws, ab.a_losses) == (2, 1, 1)
        assert (ba.a_wins, ba.a_losses) == (ab.a_losses, ab.a_wins)
        assert ab.a_goal_diff == 6
        assert ba.a_goal_diff == -6
        assert ab.a_net == 1

    def test_teammates_are_not_rivals(self, duels) -> None:
        matches, teams = duels
        pairs = _by_pair(compute_rivalries(matches=matches, teams=teams))
        assert ("boban", "cile") not in pairs
        assert len(pairs) == 4

    def test_restricted_to_match_ids(self, duels) -> None:
        matches, teams = duels
        pairs = _by_pair(compute_rivalries(matches=matches, teams=teams, match_ids=["m3"]))
        assert set(pairs) == {("ana", "boban"), ("boban", "ana")}
        assert pairs[("ana", "boban")].a_goal_diff == 5

    def test_private_players_are_skipped(self, rows) -> None:
        ana, ghost = rows.player("ana"), rows.player("ghost", is_public=False)
        matches = [rows.match("m1", "2025-03-07", 1, 0)]
        assert compute_rivalries(matches=matches, teams=rows.lineup("m1", [ana], [ghost])) == []


class TestRankRivalries:
    def test_nemesis_worst_first(self, duels) -> None:
        matches, teams = duels
        ranked = rank_rivalries(
            compute_rivalries(matches=matches, teams=teams), RivalryMode.NEMESIS, min_duels=1
        )
        assert (ranked[0].player_a_id, ranked[0].player_b_id) == ("boban", "ana")
        assert [r.a_net for r in ranked] == sorted(r.a_net for r in ranked)

    def test_domination_best_first(self, duels) -> None:
        matches, teams = duels
        ranked = rank_rivalries(
            compute_rivalries(matches=matches, teams=teams), RivalryMode.DOMINATION, min_duels=1
        )
        assert (ranked[0].player_a_id, ranked[0].player_b_id) == ("ana", "boban")

    def test_min_duels_filter(self, duels) -> None:
        matches, teams = duels
        ranked = rank_rivalries(compute_rivalries(matches=matches, teams=teams), min_duels=3)
        assert {r.player_b_id for r in ranked} == {"ana", "boban"}
        assert all(r.duels >= 3 for r in ranked)

    def test_player_filter_and_limit(self, duels) -> None:
        matches, teams = duels
        records = compute_rivalries(matches=matches, teams=teams)
        ranked = rank_rivalries(records, min_duels=1, player_id="ana")
        assert {r.player_a_id for r in ranked} == {"ana"}
        assert len(rank_rivalries(records, min_duels=1, limit=1)) == 1
        assert len(rank_rivalries(records, min_duels=1, limit=None)) == 4

    def test_league_uses_configured_min_duels(self, sample_league) -> None:
        ranked = sample_league.rivalries()
        assert len(ranked) == 8
        assert all(r.duels == 4 for r in ranked)
