"""
Petak Fudbal CLI

Command-line interface for the awards and stats without running the API
server.
"""

import argparse
import asyncio
import sys
from typing import Any

from petak_fudbal.clients.supabase import LeagueData, SupabaseAPIError, SupabaseClient
from petak_fudbal.config import Settings, get_settings
from petak_fudbal.models.awards import AwardsReport, MaxAward, MinAward
from petak_fudbal.models.match import MatchRow
from petak_fudbal.models.period import Period
from petak_fudbal.models.rivalry import RivalryMode
from petak_fudbal.models.scoreboard import Leaderboards, MatchDetail, PeriodSummary
from petak_fudbal.services.periods import pct
from petak_fudbal.utils.logger import configure_logging

# Category key -> (display name, shown as a per-match rate)
AWARD_LABELS: dict[str, tuple[str, bool]] = {
    "goals": ("Golden Boot", False),
    "assists": ("Assist King", False),
    "mvps": ("MVP", False),
    "ironman": ("Ironman", False),
    "ga": ("G/A", False),
    "goal_rate": ("Goals / match", True),
    "assist_rate": ("Assists / match", True),
    "mvp_rate": ("MVP / match", True),
    "form": ("Best form", True),
    "least_losses": ("Fewest losses", False),
    "stub": ("Stub (fewest conceded)", False),
}

# Shown on history cards
HEADLINE_AWARDS = ["goals", "assists", "mvps", "ironman"]

LEADERBOARD_LABELS = {"goals": "Scorers", "assists": "Assists", "mvps": "MVP"}
PLAYER_LOG_LINES = 10


class PetakAnalytics:
    """
    Main class for querying the league's awards and stats.

    Can be used as a library or via CLI.

    Example:
        async with PetakAnalytics() as analytics:
            print(analytics.years())
            report = analytics.get_awards(Period.for_year(2025))
    """

    def __init__(self, settings: Settings | None = None, data: LeagueData | None = None):
        self.settings = settings or get_settings()
        self.client: SupabaseClient | None = None
        self.data = data

    async def __aenter__(self):
        if self.data is None:
            self.client = SupabaseClient(self.settings)
            await self.client.__aenter__()
            self.data = await LeagueData.create(self.client)
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        if self.client:
            await self.client.__aexit__(exc_type, exc_val, exc_tb)

    def _require_data(self) -> LeagueData:
        if self.data is None:
            raise RuntimeError("Data not loaded. Use 'async with' context.")
        return self.data

    def years(self) -> list[str]:
        return self._require_data().years()

    def get_awards(self, period: Period | None = None) -> AwardsReport:
        return self._require_data().awards_for(period)

    def get_history(self, year: str) -> dict[str, Any]:
        return self._require_data().year_history(year).model_dump()

    def get_dominance(self, period: Period | None = None) -> list[dict[str, Any]]:
        return [e.model_dump() for e in self._require_data().dominance(period)]

    def get_player(self, player_id: str) -> dict[str, Any] | None:
        profile = self._require_data().player_profile(player_id)
        return profile.model_dump() if profile else None

    def get_matches(self, period: Period | None = None) -> list[MatchRow]:
        return self._require_data().matches_for(period)

    def get_summary(self, period: Period | None = None) -> PeriodSummary:
        return self._require_data().period_summary(period)

    def get_leaderboards(self, period: Period | None = None) -> Leaderboards:
        return self._require_data().leaderboards(period)

    def get_match(self, match_id: str) -> MatchDetail | None:
        return self._require_data().match_detail(match_id)

    def get_rivalries(
        self, mode: RivalryMode, min_duels: int | None = None
    ) -> list[dict[str, Any]]:
        records = self._require_data().rivalries(mode=mode, min_duels=min_duels)
        return [r.model_dump() for r in records]


def _format_value(value: int | float, is_rate: bool, key: str) -> str:
    if key == "form":
        return pct(value)
    if is_rate:
        return f"{value:.2f}"
    return str(value)


def format_awards(report: AwardsReport, keys: list[str] | None = None) -> list[str]:
    """Render an awards report (or some of its categories) as aligned text lines."""
    lines = [f"{'Award':<24} {'Best':<8} Winners", "-" * 70]
    for key in keys or AWARD_LABELS:
        label, is_rate = AWARD_LABELS[key]
        award: MaxAward | MinAward = getattr(report, key)
        if not award.winners:
            lines.append(f"{label:<24} {'—':<8} no data")
            continue
        best = award.max if isinstance(award, MaxAward) else award.min
        names = ", ".join(w.name for w in award.winners)
        lines.append(f"{label:<24} {_format_value(best, is_rate, key):<8} {names}")
    return lines


def parse_period(year: str | None, month: str | None) -> Period | None:
    """Build a period from CLI options; None means all-time."""
    if year is None:
        if month is not None:
            raise ValueError("--month requires --year")
        return None
    if month is None:
        return Period.for_year(year)
    return Period.for_month(year, month.zfill(2))


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="petak",
        description="Petak Fudbal awards and stats CLI",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Years with matches
  petak years

  # Awards for March 2025
  petak awards --year 2025 --month 03

  # Season and monthly winners for 2025
  petak history 2025

  # Top scorers of 2025
  petak leaders --year 2025 --by goals

  # Worst head-to-head records
  petak rivalries --mode nemesis --min-duels 5
        """,
    )

    parser.add_argument(
        "--log-level",
        default=None,
        help="QUIET, NORMAL, VERBOSE or DEBUG (default: PETAK_LOG_LEVEL or NORMAL)",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    subparsers.add_parser("years", help="List years with matches")

    periods_parser = subparsers.add_parser("periods", help="List periods of a year")
    periods_parser.add_argument("year", help="Year, e.g. 2025")

    awards_parser = subparsers.add_parser("awards", help="Show awards for a period")
    awards_parser.add_argument("--year", "-y", help="Year (omit for all-time)")
    awards_parser.add_argument("--month", "-m", help="Month 01..12 (requires --year)")

    history_parser = subparsers.add_parser("history", help="Season and monthly winners")
    history_parser.add_argument("year", help="Year, e.g. 2025")

    dominance_parser = subparsers.add_parser(
        "dominance", help="Players winning several categories"
    )
    dominance_parser.add_argument("--year", "-y", help="Year (omit for all-time)")
    dominance_parser.add_argument("--month", "-m", help="Month 01..12 (requires --year)")

    matches_parser = subparsers.add_parser("matches", help="List matches of a period")
    matches_parser.add_argument("--year", "-y", help="Year (omit for all-time)")
    matches_parser.add_argument("--month", "-m", help="Month 01..12 (requires --year)")

    leaders_parser = subparsers.add_parser("leaders", help="Full goal, assist or MVP rankings")
    leaders_parser.add_argument("--year", "-y", help="Year (omit for all-time)")
    leaders_parser.add_argument("--month", "-m", help="Month 01..12 (requires --year)")
    leaders_parser.add_argument(
        "--by",
        choices=LEADERBOARD_LABELS,
        default="goals",
        help="Ranking (default: goals)",
    )

    match_parser = subparsers.add_parser("match", help="Show one match")
    match_parser.add_argument("match_id", help="Match ID")

    player_parser = subparsers.add_parser("player", help="Show a player's profile")
    player_parser.add_argument("player_id", help="Player ID")

    rivalries_parser = subparsers.add_parser("rivalries", help="Head-to-head rankings")
    rivalries_parser.add_argument(
        "--mode",
        choices=[m.value for m in RivalryMode],
        default=RivalryMode.NEMESIS.value,
        help="Ranking mode (default: nemesis)",
    )
    rivalries_parser.add_argument(
        "--min-duels",
        type=int,
        default=None,
        help="Minimum meetings (default: configured value)",
    )

    subparsers.add_parser("serve", help="Run the API server")

    return parser


def cli_main(argv: list[str] | None = None) -> int:
    """CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 1

    try:
        configure_logging(args.log_level)
    except ValueError as e:
        print(f"❌ {e}")
        return 2

    if args.command == "serve":
        # uvicorn runs its own event loop
        from petak_fudbal.main import run

        run()
        return 0

    try:
        period = parse_period(getattr(args, "year", None), getattr(args, "month", None))
    except ValueError as e:
        print(f"❌ {e}")
        return 2

    return asyncio.run(run_command(args, period))


async def run_command(
    args: argparse.Namespace, period: Period | None, data: LeagueData | None = None
) -> int:
    """Load the league data and run one query command."""
    try:
        async with PetakAnalytics(data=data) as analytics:
            if args.command == "years":
                for year in analytics.years():
                    print(year)

            elif args.command == "periods":
                periods = analytics.data.periods_for_year(args.year)
                for p in periods.month_periods:
                    ids = analytics.data.match_ids_for(p)
                    print(f"{p.label:<22} {len(ids)} matches")
                count = len(analytics.data.match_ids_for(periods.year_period))
                print(f"{periods.year_period.label:<22} {count} matches")

            elif args.command == "awards":
                label = period.label if period else "All time"
                count = len(analytics.data.match_ids_for(period))
                print(f"🏆 Awards - {label} ({count} matches)\n")
                if count == 0:
                    print("No matches in this period.")
                    return 0
                for line in format_awards(analytics.get_awards(period)):
                    print(line)

            elif args.command == "history":
                history = analytics.data.year_history(args.year)
                if history.season is None:
                    print(f"No matches in {args.year}.")
                    return 0
                for card in [history.season, *history.months]:
                    print(f"📅 {card.label} ({card.match_count} matches)")
                    for line in format_awards(card.awards, HEADLINE_AWARDS)[2:]:
                        print(f"  {line}")
                    print()

            elif args.command == "dominance":
                entries = analytics.get_dominance(period)
                if not entries:
                    print("Nobody won two or more categories.")
                    return 0
                for e in entries:
                    print(f"{e['name']:<25} {e['count']}  ({', '.join(e['categories'])})")

            elif args.command == "player":
                profile = analytics.get_player(args.player_id)
                if profile is None:
                    print(f"Player not found: {args.player_id}")
                    return 1
                s = profile["stats"]
                t = profile["trophies"]
                print(f"👤 {s['name']}\n")
                print(f"  Played: {s['played']}  W-D-L: {s['wins']}-{s['draws']}-{s['losses']}")
                print(f"  Goals: {s['goals']}  Assists: {s['assists']}  MVP: {s['mvps']}")
                print(f"  Form: {' '.join(o.value for o in profile['recent_form']) or '—'}")
                print(
                    f"  Trophies: Golden Boot ×{t['golden_boot']}  "
                    f"Assist King ×{t['assist_king']}  MVP ×{t['mvp']}  "
                    f"Ironman ×{t['ironman']}"
                )
                for title, rivals in (("Nemeses", profile["nemeses"]),
                                      ("Dominated", profile["dominated"])):
                    if rivals:
                        names = ", ".join(
                            f"{r['opponent_name']} ({r['a_wins']}-{r['draws']}-{r['a_losses']})"
                            for r in rivals
                        )
                        print(f"  {title}: {names}")
                if profile["matches"]:
                    print("\n  Last matches:")
                    for m in profile["matches"][:PLAYER_LOG_LINES]:
                        extras = f"⚽{m['goals']} 🅰{m['assists']}" + (" ⭐" if m["mvp"] else "")
                        print(
                            f"   {m['date']:%Y-%m-%d}  {m['side'].value}  "
                            f"{m['goals_for']}:{m['goals_against']}  "
                            f"{m['outcome'].value}  {extras}"
                        )

            elif args.command == "matches":
                label = period.label if period else "All time"
                rows = analytics.get_matches(period)
                s = analytics.get_summary(period)
                print(f"📅 Matches - {label} ({s.played} matches)\n")
                if not rows:
                    print("No matches in this period.")
                    return 0
                print(
                    f"  A {s.wins_a} - {s.draws} - {s.wins_b} B   "
                    f"(goals {s.goals_a}:{s.goals_b})\n"
                )
                for m in rows:
                    print(f"  {m.date:%Y-%m-%d}  {m.home_score}:{m.away_score}  {m.id}")

            elif args.command == "leaders":
                board = getattr(analytics.get_leaderboards(period), args.by)
                print(f"{'#':<4} {LEADERBOARD_LABELS[args.by]:<25} Total")
                print("-" * 40)
                for i, entry in enumerate(board, 1):
                    print(f"{i:<4} {entry.name:<25} {entry.value}")

            elif args.command == "match":
                detail = analytics.get_match(args.match_id)
                if detail is None:
                    print(f"Match not found: {args.match_id}")
                    return 1
                print(f"⚽ {detail.date:%Y-%m-%d}   A {detail.home_score}:{detail.away_score} B\n")
                for side, lineup, scorers, assists in (
                    ("A", detail.lineup_a, detail.scorers_a, detail.assists_a),
                    ("B", detail.lineup_b, detail.scorers_b, detail.assists_b),
                ):
                    print(f"  {side}: {', '.join(p.name for p in lineup) or '—'}")
                    for e in scorers:
                        print(f"     goals   {e.name} ×{e.value}")
                    for e in assists:
                        print(f"     assists {e.name} ×{e.value}")
                print(f"  MVP: {', '.join(p.name for p in detail.mvps) or '—'}")

            elif args.command == "rivalries":
                rows = analytics.get_rivalries(RivalryMode(args.mode), args.min_duels)
                if not rows:
                    print("Not enough duels for this filter.")
                    return 0
                print(f"{'#':<4} {'Player':<20} {'Opponent':<20} {'Duels':<6} {'W-D-L':<9} {'GD'}")
                print("-" * 70)
                for i, r in enumerate(rows, 1):
                    record = f"{r['a_wins']}-{r['draws']}-{r['a_losses']}"
                    gd = f"{r['a_goal_diff']:+d}"
                    print(
                        f"{i:<4} {r['player_name']:<20} {r['opponent_name']:<20} "
                        f"{r['duels']:<6} {record:<9} {gd}"
                    )

    except SupabaseAPIError as e:
        print(f"❌ Could not load league data: {e.message}")
        return 1

    return 0


def run_cli():
    """Entry point for CLI."""
    sys.exit(cli_main())


if __name__ == "__main__":
    run_cli()
