"""
Fantasy Soccer CLI

Command-line interface for browsing players, scoring and validating
teams without running the API server.
"""

import argparse
import sys
from pathlib import Path

from fantasy_soccer.clients.players import PlayerSource
from fantasy_soccer.config import get_settings
from fantasy_soccer.errors import PlayerNotFoundError, TeamBuilderError
from fantasy_soccer.models import Player, TeamComposition
from fantasy_soccer.services.players import PlayerService
from fantasy_soccer.services.scoring import SORT_KEYS, validate_composition
from fantasy_soccer.services.team_builder import DEFAULT_TEAM_NAME, TeamBuilder
from fantasy_soccer.visualization import charts


def _print_players(players: list[Player]) -> None:
    print(f"{'Rank':<5} {'ID':<5} {'Player':<24} {'Club':<20} {'Pos':<4} {'G':>3} {'A':>3} {'CS':>3} {'Score':>7}")
    print("-" * 80)
    for i, p in enumerate(players, 1):
        print(
            f"{i:<5} {p.id:<5} {p.name:<24} {p.club:<20} {p.position:<4} "
            f"{p.stats.goals:>3} {p.stats.assists:>3} {p.stats.clean_sheets:>3} "
            f"{p.fantasy_score or 0:>7.1f}"
        )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="fantasy-soccer",
        description="Fantasy soccer scores and team validation",
    )
    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    # players command
    players_parser = subparsers.add_parser("players", help="List players")
    players_parser.add_argument("--position", choices=["GK", "DEF", "MID", "FWD"])
    players_parser.add_argument("--sort-by", choices=sorted(SORT_KEYS), default="fantasyScore")

    # top command
    top_parser = subparsers.add_parser("top", help="Show the top players leaderboard")
    top_parser.add_argument("--limit", type=int, default=10, help="Number of players (default: 10)")
    top_parser.add_argument("--position", choices=["GK", "DEF", "MID", "FWD"])

    # score command
    score_parser = subparsers.add_parser("score", help="Show a player's fantasy score")
    score_parser.add_argument("player_id", help="Player ID, e.g. p1")

    # validate command
    validate_parser = subparsers.add_parser("validate", help="Validate a team composition")
    validate_parser.add_argument("--gk", type=int, default=0, help="Number of goalkeepers")
    validate_parser.add_argument("--def", dest="defenders", type=int, default=0, help="Number of defenders")
    validate_parser.add_argument("--mid", type=int, default=0, help="Number of midfielders")
    validate_parser.add_argument("--fwd", type=int, default=0, help="Number of forwards")

    # team command
    team_parser = subparsers.add_parser("team", help="Build, score and save a team from player IDs")
    team_parser.add_argument("player_ids", nargs="+", help="Player IDs")
    team_parser.add_argument("--name", default=DEFAULT_TEAM_NAME, help="Team name")

    # chart command
    chart_parser = subparsers.add_parser("chart", help="Write the top players chart to HTML")
    chart_parser.add_argument("--limit", type=int, default=10)
    chart_parser.add_argument("--output", "-o", default="top_players.html", help="Output file path")

    # serve command
    subparsers.add_parser("serve", help="Run the API server")

    return parser


def main(argv: list[str] | None = None) -> int:
    """Run a CLI command and return the process exit code."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 1

    settings = get_settings()
    source = PlayerSource()
    service = PlayerService(source, settings.composition_rules())

    if args.command == "players":
        players = service.list_players(args.position, args.sort_by)
        print(f"⚽ {len(players)} player(s)\n")
        _print_players(players)

    elif args.command == "top":
        limit = min(args.limit, settings.top_players_max_limit)
        print(f"🏆 Top {limit} players\n")
        _print_players(service.get_top_players(limit, args.position))

    elif args.command == "score":
        try:
            player = service.get_player(args.player_id)
        except PlayerNotFoundError as e:
            print(f"❌ {e.message}")
            return 1
        score = service.get_player_score(args.player_id)
        print(f"{player.name} ({player.club}, {player.position_label})")
        print(f"  Fantasy score: {score.fantasy_score:.1f}")
        print(f"  Per appearance: {score.avg_score:.2f} ({player.stats.appearances} apps)")

    elif args.command == "validate":
        composition = TeamComposition(
            goalkeepers=args.gk,
            defenders=args.defenders,
            midfielders=args.mid,
            forwards=args.fwd,
        )
        result = validate_composition(composition, settings.composition_rules())
        if result.valid:
            print("✅ Valid team composition")
            return 0
        print("❌ Invalid team composition:")
        for error in result.errors:
            print(f"  - {error}")
        return 1

    elif args.command == "team":
        builder = TeamBuilder(name=args.name, rules=settings.composition_rules())
        for player_id in args.player_ids:
            player = source.find_player(player_id)
            if player is None:
                print(f"❌ Player not found: {player_id}")
                return 1
            if not builder.add_player(player):
                print(f"⚠️  Skipped {player.name}: already selected or team full")

        composition = builder.composition
        print(f"📋 {builder.name}: {builder.size} player(s), {builder.total_score:.1f} pts")
        print(
            f"   GK {composition.goalkeepers} / DEF {composition.defenders} / "
            f"MID {composition.midfielders} / FWD {composition.forwards}"
        )

        try:
            team = builder.save()
        except TeamBuilderError as e:
            print(f"❌ {e.message}")
            for error in e.errors:
                print(f"  - {error}")
            return 1
        print(f"✅ Saved team {team.name} ({team.id})")

    elif args.command == "chart":
        players = service.get_top_players(min(args.limit, settings.top_players_max_limit))
        html = charts.fantasy_score_chart(players)
        output_path = Path(args.output)
        output_path.write_text(html, encoding="utf-8")
        print(f"📊 Chart written to {output_path.absolute()}")

    elif args.command == "serve":
        from fantasy_soccer.main import run

        run()

    return 0


def run_cli():
    """Entry point for CLI."""
    sys.exit(main())


if __name__ == "__main__":
    run_cli()
