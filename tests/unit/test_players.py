"""Unit tests for player profiles."""

from __future__ import annotations

from petak_fudbal.models import Outcome, Side
from petak_fudbal.services.players import (
    RECENT_FORM_MATCHES,
    build_player_profile,
    player_match_log,
    recent_form,
)


class TestRecentForm:
    def test_newest_first_from_own_side(self, sample_league) -> None:
        marko = recent_form("marko", sample_league.matches, sample_league.teams)
        petar = recent_form("petar", sample_league.matches, sample_league.teams)
        assert marko == [Outcome.LOSS, Outcome.WIN, Outcome.DRAW, Outcome.WIN]
        assert petar == [Outcome.WIN, Outcome.LOSS, Outcome.DRAW, Outcome.LOSS]

    def test_limited_to_last_matches(self, rows) -> None:
        ana = rows.player("ana")
        matches = [rows.match(f"m{i}", f"2025-03-{i + 1:02d}", i % 2, 0) for i in range(7)]
        teams = [t for m in matches for t in rows.lineup(m.id, [ana], [])]

        form = recent_form("ana", matches, teams)
        assert len(form) == RECENT_FORM_MATCHES
        # m6 (0-0) is the newest
        assert form[0] == Outcome.DRAW
        assert form[1] == Outcome.WIN

    def test_unknown_player(self, sample_league) -> None:
        assert recent_form("nobody", sample_league.matches, sample_league.teams) == []


class TestPlayerMatchLog:
    def _log(self, league, player_id: str):
        return player_match_log(
            player_id, league.matches, league.events, league.teams, league.tz
        )

    def test_newest_first_with_own_numbers(self, sample_league) -> None:
        log = self._log(sample_league, "marko")

        assert [e.match_id for e in log] == ["m4", "m3", "m2", "m1"]
        last = log[0]
        assert last.side == Side.A
        assert last.score == "1:2"
        assert last.outcome == Outcome.LOSS
        assert (last.goals, last.assists, last.mvp) == (1, 0, False)
        assert (log[1].goals, log[1].assists) == (1, 2)
        assert log[3].mvp is True
        assert log[3].goals == 2

    def test_score_from_side_b(self, sample_league) -> None:
        log = self._log(sample_league, "petar")
        assert log[0].side == Side.B
        assert log[0].score == "2:1"
        assert (log[0].goals, log[0].mvp) == (2, True)

    def test_private_player_has_no_log(self, sample_league) -> None:
        assert self._log(sample_league, "skriveni") == []

    def test_without_events(self, sample_league) -> None:
        log = player_match_log("ana", sample_league.matches, [], sample_league.teams)
        assert len(log) == 4
        assert all(e.goals == 0 and e.assists == 0 and not e.mvp for e in log)


class TestBuildPlayerProfile:
    def test_profile(self, sample_league) -> None:
        profile = sample_league.player_profile("marko")

        assert profile is not None
        assert profile.stats.name == "Marko"
        assert profile.stats.played == 4
        assert profile.stats.record == "2-1-1"
        assert (profile.stats.goals, profile.stats.assists, profile.stats.mvps) == (5, 2, 1)
        assert profile.stats.goals_conceded == 5
        assert profile.recent_form[0] == Outcome.LOSS
        assert profile.trophies.ironman == 5

    def test_private_player_has_no_profile(self, sample_league) -> None:
        assert sample_league.player_profile("skriveni") is None

    def test_unknown_player_has_no_profile(self, sample_league) -> None:
        assert sample_league.player_profile("nobody") is None

    def test_serialises_form_as_letters(self, sample_league) -> None:
        dumped = sample_league.player_profile("ana").model_dump(mode="json")
        assert dumped["recent_form"] == ["L", "W", "D", "W"]
        assert dumped["trophies"]["total"] >= dumped["trophies"]["ironman"]

    def test_no_rows(self) -> None:
        assert build_player_profile(player_id="ana", matches=[], events=[], teams=[]) is None

    def test_profile_includes_match_log(self, sample_league) -> None:
        profile = sample_league.player_profile("marko")
        assert [e.match_id for e in profile.matches] == ["m4", "m3", "m2", "m1"]
        assert sum(e.goals for e in profile.matches) == profile.stats.goals

    def test_profile_rivals(self, sample_league) -> None:
        profile = sample_league.player_profile("marko")

        assert {r.opponent_name for r in profile.nemeses} == {"Petar", "Đorđe"}
        assert {r.opponent_name for r in profile.dominated} == {"Petar", "Đorđe"}
        assert all(r.player_a_id == "marko" for r in profile.nemeses)
        assert all(r.duels == 4 for r in profile.dominated)

    def test_profile_rivals_respect_min_duels(self, sample_league) -> None:
        profile = build_player_profile(
            player_id="marko",
            matches=sample_league.matches,
            events=sample_league.events,
            teams=sample_league.teams,
            min_duels=5,
        )
        assert profile.nemeses == []
        assert profile.dominated == []
