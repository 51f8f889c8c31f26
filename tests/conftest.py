"""Shared pytest fixtures for the petak_fudbal test suite.

Fixtures defined here are available to all tests without explicit imports.
Row builders mirror the shapes returned by the data store, with the player
summary embedded on team and event rows.
"""

from __future__ import annotations

import logging
from datetime import datetime

import pytest

from petak_fudbal.clients.supabase import LeagueData
from petak_fudbal.config import Settings
from petak_fudbal.models import EventRow, EventType, MatchRow, PlayerLite, Side, TeamRow


class RowFactory:
    """Build data-store rows with short, readable calls."""

    def player(
        self, player_id: str, name: str | None = None, is_public: bool | None = True
    ) -> PlayerLite:
        return PlayerLite(
            id=player_id,
            name=name or player_id.title(),
            slug=player_id,
            is_public=is_public,
        )

    def match(
        self, match_id: str, date: str | datetime, home: int = 0, away: int = 0
    ) -> MatchRow:
        return MatchRow(id=match_id, date=date, home_score=home, away_score=away)

    def team(self, match_id: str, side: Side | str, player: PlayerLite) -> TeamRow:
        return TeamRow(match_id=match_id, team=Side(side), player_id=player.id, players=player)

    def lineup(
        self, match_id: str, a: list[PlayerLite], b: list[PlayerLite]
    ) -> list[TeamRow]:
        return [self.team(match_id, Side.A, p) for p in a] + [
            self.team(match_id, Side.B, p) for p in b
        ]

    def event(
        self,
        match_id: str,
        kind: EventType | str,
        player: PlayerLite,
        value: int | None = None,
    ) -> EventRow:
        return EventRow(
            match_id=match_id,
            player_id=player.id,
            type=EventType(kind),
            value=value,
            players=player,
        )


@pytest.fixture
def rows() -> RowFactory:
    """Provide the row builder."""
    return RowFactory()


@pytest.fixture
def settings() -> Settings:
    """Settings with fixed thresholds and timezone, independent of the environment."""
    return Settings(
        supabase_url="http://supabase.test",
        supabase_anon_key="test-key",
        min_matches_eff=3,
        min_matches_form=3,
        min_duels=3,
        timezone="Europe/Belgrade",
    )


@pytest.fixture
def sample_league(rows: RowFactory, settings: Settings) -> LeagueData:
    """A small league spanning two years and three months.

    Marko and Ana play every match on side A against Petar and Đorđe; Skriveni
    is a private player who appears in every lineup and scores in every match.
    """
    marko = rows.player("marko", "Marko")
    ana = rows.player("ana", "Ana")
    petar = rows.player("petar", "Petar")
    djordje = rows.player("djordje", "Đorđe")
    hidden = rows.player("skriveni", "Skriveni", is_public=False)

    matches = [
        rows.match("m1", "2024-12-06", 3, 1),
        rows.match("m2", "2025-01-10", 2, 2),
        rows.match("m3", "2025-03-07", 4, 0),
        rows.match("m4", "2025-03-14", 1, 2),
    ]
    teams = []
    for m in matches:
        teams += rows.lineup(m.id, [marko, ana, hidden], [petar, djordje])

    events = [
        rows.event("m1", "goal", marko, 2),
        rows.event("m1", "goal", ana),
        rows.event("m1", "goal", petar),
        rows.event("m1", "mvp", marko),
        rows.event("m2", "goal", marko),
        rows.event("m2", "assist", ana, 2),
        rows.event("m2", "goal", djordje, 2),
        rows.event("m2", "mvp", djordje),
        rows.event("m3", "goal", ana, 3),
        rows.event("m3", "goal", marko),
        rows.event("m3", "assist", marko, 2),
        rows.event("m3", "mvp", ana),
        rows.event("m4", "goal", petar, 2),
        rows.event("m4", "goal", marko),
        rows.event("m4", "mvp", petar),
    ]
    events += [rows.event(m.id, "goal", hidden, 5) for m in matches]

    return LeagueData(matches=matches, events=events, teams=teams, settings=settings)


@pytest.fixture(autouse=True)
def _reset_package_logger():
    """Undo ``configure_logging`` so caplog keeps seeing package records."""
    yield
    root = logging.getLogger("petak_fudbal")
    for handler in root.handlers[:]:
        root.removeHandler(handler)
    root.setLevel(logging.NOTSET)
    root.propagate = True
