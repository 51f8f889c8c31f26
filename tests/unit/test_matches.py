"""Unit tests for match lists, period summaries, leaderboards and match detail."""

from __future__ import annotations

from petak_fudbal.models import Period, Side
from petak_fudbal.services.matches import (
    build_match_detail,
    compute_leaderboards,
    list_matches,
    summarize_period,
)


def _names(entries) -> list[str]:
    return [e.name for e in entries]


# ── Match list and summary ──────────────────────────────────────────────────


class TestListMatches:
    def test_most_recent_first(self, sample_league) -> None:
        ids = [m.id for m in list_matches(sample_league.matches, ["m1", "m3", "m2", "m4"])]
        assert ids == ["m4", "m3", "m2", "m1"]

    def test_only_selected(self, sample_league) -> None:
        rows = sample_league.matches_for(Period.for_month(2025, 3))
        assert [m.id for m in rows] == ["m4", "m3"]

    def test_empty_selection(self, sample_league) -> None:
        assert list_matches(sample_league.matches, []) == []


class TestSummarizePeriod:
    def test_all_time(self, sample_league) -> None:
        s = summarize_period(sample_league.matches, [m.id for m in sample_league.matches])
        assert (s.played, s.wins_a, s.draws, s.wins_b) == (4, 2, 1, 1)
        assert (s.goals_a, s.goals_b) == (10, 5)

    def test_year(self, sample_league) -> None:
        s = sample_league.period_summary(Period.for_year(2025))
        assert (s.played, s.wins_a, s.draws, s.wins_b) == (3, 1, 1, 1)
        assert (s.goals_a, s.goals_b) == (7, 4)

    def test_empty(self, sample_league) -> None:
        s = summarize_period(sample_league.matches, [])
        assert s.played == 0
        assert s.goals_a == s.goals_b == 0


# ── Leaderboards ─────────────────────────────────────────────────────────────


class TestComputeLeaderboards:
    def test_ranked_by_total(self, sample_league) -> None:
        boards = sample_league.leaderboards()
        assert _names(boards.goals) == ["Marko", "Ana", "Petar", "Đorđe"]
        assert [e.value for e in boards.goals] == [5, 4, 3, 2]

    def test_ties_broken_by_name(self, sample_league) -> None:
        boards = sample_league.leaderboards()
        assert _names(boards.assists) == ["Ana", "Marko"]
        assert _names(boards.mvps) == ["Ana", "Đorđe", "Marko", "Petar"]
        assert all(e.value == 1 for e in boards.mvps)

    def test_private_players_left_out(self, sample_league) -> None:
        boards = sample_league.leaderboards()
        assert "Skriveni" not in _names(boards.goals)

    def test_period(self, sample_league) -> None:
        boards = sample_league.leaderboards(Period.for_month(2025, 3))
        assert _names(boards.goals) == ["Ana", "Marko", "Petar"]
        assert [e.value for e in boards.goals] == [3, 2, 2]

    def test_missing_value_counts_as_one(self, rows) -> None:
        ana = rows.player("ana")
        boards = compute_leaderboards(
            [rows.event("m1", "goal", ana), rows.event("m1", "assist", ana, 0)], ["m1"]
        )
        assert boards.goals[0].value == 1
        assert boards.assists[0].value == 0

    def test_no_events(self) -> None:
        boards = compute_leaderboards([], ["m1"])
        assert boards.goals == boards.assists == boards.mvps == []


# ── Match detail ─────────────────────────────────────────────────────────────


class TestBuildMatchDetail:
    def test_draw(self, sample_league) -> None:
        detail = sample_league.match_detail("m2")

        assert detail is not None
        assert (detail.home_score, detail.away_score) == (2, 2)
        assert detail.winner is None
        assert _names(detail.lineup_a) == ["Ana", "Marko"]
        assert _names(detail.lineup_b) == ["Đorđe", "Petar"]
        assert [(e.name, e.value) for e in detail.scorers_a] == [("Marko", 1)]
        assert [(e.name, e.value) for e in detail.scorers_b] == [("Đorđe", 2)]
        assert [(e.name, e.value) for e in detail.assists_a] == [("Ana", 2)]
        assert detail.assists_b == []
        assert _names(detail.mvps) == ["Đorđe"]

    def test_winner_and_scorer_order(self, sample_league) -> None:
        detail = sample_league.match_detail("m3")
        assert detail.winner == Side.A
        assert [(e.name, e.value) for e in detail.scorers_a] == [("Ana", 3), ("Marko", 1)]
        assert detail.scorers_b == []

    def test_side_b_win(self, sample_league) -> None:
        assert sample_league.match_detail("m4").winner == Side.B

    def test_unknown_match(self, sample_league) -> None:
        assert sample_league.match_detail("m99") is None

    def test_events_outside_lineups_dropped(self, rows) -> None:
        ana, guest = rows.player("ana"), rows.player("gost")
        detail = build_match_detail(
            match_id="m1",
            matches=[rows.match("m1", "2025-03-07", 1, 0)],
            events=[rows.event("m1", "goal", ana), rows.event("m1", "goal", guest)],
            teams=rows.lineup("m1", [ana], []),
        )
        assert _names(detail.scorers_a) == ["Ana"]
        assert detail.scorers_b == []
        assert detail.lineup_b == []
