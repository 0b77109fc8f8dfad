#!/usr/bin/env python3
"""
Command-line interface for league exports.

Usage:
    league-hub stats --export league.json --category passing --limit 10
    league-hub stats --export league.json --category rushing --position HB
    league-hub standings --export league.json --conference AFC
    league-hub playoffs --export league.json
    league-hub schedule --export league.json --week 19
    league-hub summary --export league.json

All commands print JSON to stdout. When --export is omitted the path from
LEAGUE_HUB_EXPORT_PATH (default: league_export.json) is used.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import Any, Optional

from .core.config import get_settings
from .core.errors import InvalidStatEntryError, SnapshotLoadError
from .core.types import Conference, StatCategory
from .leaders import get_stat_table, line_payload, sortable_keys
from .services import LeagueService
from .snapshot import load_snapshot

logger = logging.getLogger("league_hub.cli")


def _emit(payload: Any) -> None:
    print(json.dumps(payload, indent=2, default=str))


def _load_service(args: argparse.Namespace) -> LeagueService:
    settings = get_settings()
    path = args.export or settings.export_path
    league_id = args.league or settings.league_id
    return LeagueService(load_snapshot(path, league_id=league_id))


def cmd_stats(args: argparse.Namespace) -> int:
    """Print the leader board for one stat category."""
    category = StatCategory.parse(args.category)
    if args.sort and args.sort not in sortable_keys(category):
        logger.error("Cannot sort %s stats by '%s'", category.value, args.sort)
        return 1

    league = _load_service(args)
    table = get_stat_table(category)
    lines = league.leaders(
        category,
        search=args.search,
        position=args.position,
        team_id=args.team,
        sort=args.sort,
        limit=args.limit,
    )
    _emit(
        {
            "leagueId": league.league_id,
            "category": category.value,
            "title": table.title,
            "sortKey": args.sort or table.default_sort_key,
            "lines": [line_payload(line) for line in lines],
        }
    )
    return 0


def cmd_standings(args: argparse.Namespace) -> int:
    """Print standings ordered by rank."""
    conference = Conference.match(args.conference) if args.conference else None
    if args.conference and conference is None:
        logger.error("Unknown conference: %s", args.conference)
        return 1

    league = _load_service(args)
    _emit({"leagueId": league.league_id, "standings": league.standings(conference)})
    return 0


def cmd_playoffs(args: argparse.Namespace) -> int:
    """Print the playoff seeds and bracket."""
    league = _load_service(args)
    picture = league.playoffs()
    if not picture.is_determined:
        logger.info("Playoff picture not determined yet for league %s", league.league_id)
    _emit(picture.model_dump(mode="json", by_alias=True))
    return 0


def cmd_schedule(args: argparse.Namespace) -> int:
    """Print the games of one week."""
    league = _load_service(args)
    try:
        schedule = league.schedule(args.week)
    except ValueError as e:
        logger.error("%s", e)
        return 1
    _emit({"leagueId": league.league_id, **schedule})
    return 0


def cmd_summary(args: argparse.Namespace) -> int:
    """Print record counts for the export."""
    league = _load_service(args)
    _emit(league.snapshot.summary())
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="league-hub",
        description="Season stats, standings and playoff picture from a league export",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")

    common = argparse.ArgumentParser(add_help=False)
    common.add_argument("--export", help="Path to the league export JSON")
    common.add_argument("--league", help="League id to report instead of the export's own")

    subparsers = parser.add_subparsers(dest="command", help="Commands")

    stats_parser = subparsers.add_parser("stats", parents=[common], help="Stat leaders for a category")
    stats_parser.add_argument(
        "--category",
        default=StatCategory.passing.value,
        help="Stat category (passing, rushing, receiving, defense, kicking, punting)",
    )
    stats_parser.add_argument("--search", help="Match on first or last name")
    stats_parser.add_argument("--position", help="Only players at this position")
    stats_parser.add_argument("--team", type=int, help="Only players on this team id")
    stats_parser.add_argument("--sort", help="Stat key to sort by (descending)")
    stats_parser.add_argument("--limit", type=int, help="Result limit")

    standings_parser = subparsers.add_parser("standings", parents=[common], help="League standings")
    standings_parser.add_argument("--conference", help="AFC or NFC")

    subparsers.add_parser("playoffs", parents=[common], help="Playoff seeds and bracket")
    schedule_parser = subparsers.add_parser("schedule", parents=[common], help="Games of one week")
    schedule_parser.add_argument(
        "--week", type=int, help="1-based week (19-21 and 23 are playoff rounds); latest by default"
    )
    subparsers.add_parser("summary", parents=[common], help="Record counts in the export")

    return parser


def main(argv: Optional[list[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    settings = get_settings()
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else settings.log_level.upper(),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    if not args.command:
        parser.print_help()
        return 0

    commands = {
        "stats": cmd_stats,
        "standings": cmd_standings,
        "playoffs": cmd_playoffs,
        "schedule": cmd_schedule,
        "summary": cmd_summary,
    }

    try:
        return commands[args.command](args)
    except SnapshotLoadError as e:
        logger.error("%s", e)
        return 1
    except InvalidStatEntryError as e:
        logger.error("Invalid stat entry: %s", e)
        return 1


if __name__ == "__main__":
    sys.exit(main())
