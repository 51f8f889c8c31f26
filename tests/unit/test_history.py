"""Unit tests for award histories, trophy counts and dominance."""

from __future__ import annotations

from petak_fudbal.models import AwardsReport, MaxAward, MinAward, Period, Winner
from petak_fudbal.services.history import (
    DOMINANCE_CATEGORIES,
    build_year_history,
    compute_dominance,
    count_trophies,
)


def _report(**awards: MaxAward | MinAward) -> AwardsReport:
    fields = {key: MaxAward() for key in AwardsReport.model_fields}
    fields["least_losses"] = MinAward()
    fields["stub"] = MinAward()
    fields.update(awards)
    return AwardsReport(**fields)


def _max(*names: str, value: int = 1) -> MaxAward:
    return MaxAward(
        max=value, winners=[Winner(id=n.lower(), name=n, value=value) for n in names]
    )


# ── Dominance ────────────────────────────────────────────────────────────────


class TestComputeDominance:
    def test_counts_categories_per_player(self) -> None:
        report = _report(goals=_max("Ana"), assists=_max("Ana", "Boban"), ironman=_max("Boban"))
        entries = compute_dominance(report)
        assert [(e.id, e.count) for e in entries] == [("ana", 2), ("boban", 2)]
        assert entries[0].categories == ["goals", "assists"]

    def test_rate_categories_do_not_count(self) -> None:
        report = _report(
            goal_rate=_max("Ana"), assist_rate=_max("Ana"), mvp_rate=_max("Ana"), goals=_max("Ana")
        )
        assert compute_dominance(report) == []
        assert compute_dominance(report, min_categories=1)[0].categories == ["goals"]

    def test_sorted_by_count_then_name(self) -> None:
        report = _report(
            goals=_max("Zoran", "Ćira"),
            assists=_max("Zoran", "Ćira", "Boban"),
            mvps=_max("Zoran"),
            ironman=_max("Boban"),
        )
        entries = compute_dominance(report)
        assert [e.name for e in entries] == ["Zoran", "Boban", "Ćira"]

    def test_sample_league(self, sample_league) -> None:
        entries = sample_league.dominance()
        assert [(e.id, e.count) for e in entries] == [
            ("marko", 8),
            ("ana", 6),
            ("djordje", 2),
            ("petar", 2),
        ]
        assert entries[0].categories == list(DOMINANCE_CATEGORIES)
        assert [e.id for e in sample_league.dominance(min_categories=3)] == ["marko", "ana"]

    def test_empty_report(self) -> None:
        assert compute_dominance(_report()) == []


# ── Year history ─────────────────────────────────────────────────────────────


class TestBuildYearHistory:
    def test_season_and_months(self, sample_league) -> None:
        history = sample_league.year_history("2025")

        assert history.year == "2025"
        assert history.season is not None
        assert history.season.period == Period.for_year(2025)
        assert history.season.match_count == 3
        assert [m.label for m in history.months] == ["2025 • January", "2025 • March"]
        assert [m.match_count for m in history.months] == [1, 2]

    def test_cards_carry_period_awards(self, sample_league) -> None:
        history = sample_league.year_history("2025")
        january, march = history.months

        assert [w.id for w in history.season.awards.goals.winners] == ["ana", "marko"]
        assert [w.id for w in january.awards.goals.winners] == ["djordje"]
        assert [w.id for w in march.awards.goals.winners] == ["ana"]
        assert march.awards == sample_league.awards_for(Period.for_month(2025, 3))

    def test_year_without_matches(self, sample_league) -> None:
        history = sample_league.year_history("2019")
        assert history.season is None
        assert history.months == []

    def test_no_rows(self) -> None:
        history = build_year_history(matches=[], events=[], teams=[], year=2025)
        assert history.season is None


# ── Trophy cabinet ───────────────────────────────────────────────────────────


class TestCountTrophies:
    def test_counts_months_and_years(self, sample_league) -> None:
        cabinet = count_trophies(
            matches=sample_league.matches,
            events=sample_league.events,
            teams=sample_league.teams,
            player_id="marko",
            tz=sample_league.tz,
        )
        # Periods: 2025, January, March, 2024, December
        assert cabinet.golden_boot == 3
        assert cabinet.assist_king == 2
        assert cabinet.mvp == 2
        assert cabinet.ironman == 5
        assert cabinet.total == 12

    def test_private_player_has_no_trophies(self, sample_league) -> None:
        cabinet = count_trophies(
            matches=sample_league.matches,
            events=sample_league.events,
            teams=sample_league.teams,
            player_id="skriveni",
        )
        assert cabinet.total == 0

    def test_total_is_serialised(self, sample_league) -> None:
        cabinet = count_trophies(
            matches=sample_league.matches,
            events=sample_league.events,
            teams=sample_league.teams,
            player_id="ana",
        )
        assert cabinet.model_dump()["total"] == cabinet.total
