#!/usr/bin/env python3
"""
Group Standings CLI

Computes standings, qualification status and tiebreaker explanations for a
playdown loop or tournament pool stored as a group JSON file, or for every
pool of a tournament file.

Usage:
    python compute_standings.py --group data/groups/u15_playdown.json
    python compute_standings.py --group data/groups/u15_playdown.json --output web/data/standings.json
    python compute_standings.py --group data/groups/u15_playdown.json --excel standings.xlsx
    python compute_standings.py --tournament data/tournaments/spring_classic.json --excel pools.xlsx
"""

import argparse
import logging
import sys
from pathlib import Path

from leaguetable import (
    build_group_report,
    compute_qualification,
    compute_standings,
    detect_tiebreaker_resolutions,
    load_group,
    save_standings_json,
    validate_group,
)
from leaguetable.excel_export import export_standings_to_excel
from leaguetable.json_standings import build_tournament_report, load_tournament
from leaguetable.logging_config import setup_logging
from leaguetable.schemas import GroupFile, TournamentFile
from leaguetable.tournament import pool_games, pool_group_config
from leaguetable.utils import validate_json_file


def print_table(rows, title: str = "STANDINGS", quiet: bool = False) -> None:
    """Print qualification standings as a text table."""
    print("\n" + "="*60)
    print(title)
    print("="*60)
    print(f"  {'#':>2}  {'Team':<24} {'GP':>3} {'W':>3} {'L':>3} {'T':>3} {'PTS':>4} {'DIFF':>5}  Status")
    for rank, row in enumerate(rows, 1):
        marker = "*" if row.qualifies else " "
        tie = " (tied)" if row.tied_unresolved else ""
        print(
            f"{marker} {rank:>2}. {row.team_name[:24]:<24} {row.gp:>3} {row.w:>3} {row.l:>3} "
            f"{row.t:>3} {row.pts:>4} {row.diff:>+5}  {row.status.value}{tie}"
        )
    if not quiet:
        print("\n  * = currently in a qualifying spot")


def report_group(config, games, title: str, quiet: bool = False):
    """Print warnings, the table and tiebreakers for one group; return its rows."""
    warnings = validate_group(config, games)
    if warnings and not quiet:
        print(f"⚠️  {len(warnings)} warning(s):")
        for warning in warnings:
            print(f"   - {warning}")

    standings = compute_standings(config, games)
    rows = compute_qualification(standings, config)
    print_table(rows, title=title, quiet=quiet)

    if not quiet:
        resolutions = detect_tiebreaker_resolutions(standings, games, config.tiebreaker_order)
        if resolutions:
            print("\nTIEBREAKERS")
            for r in resolutions:
                print(f"  {r.team_names[0]} over {r.team_names[1]}: {r.resolved_by} ({r.detail})")

    return rows


def check_input(path: Path, schema, kind: str) -> None:
    """Exit with a message if an input file is missing or invalid."""
    if not path.exists():
        print(f"❌ {kind.capitalize()} file not found: {path}")
        sys.exit(1)

    is_valid, error = validate_json_file(path, schema)
    if not is_valid:
        print(f"❌ Invalid {kind} file: {error}")
        sys.exit(1)


def run_group(args) -> None:
    group_path = Path(args.group)
    check_input(group_path, GroupFile, "group")
    config, games = load_group(group_path)

    rows = report_group(config, games, "STANDINGS", quiet=args.quiet)

    if args.output:
        save_standings_json(args.output, build_group_report(config, games))
        print(f"Standings saved to {args.output}")

    if args.excel:
        export_standings_to_excel(args.excel, rows, sheet_name=args.sheet)
        print(f"Standings saved to {args.excel}")


def run_tournament(args) -> None:
    tournament_path = Path(args.tournament)
    check_input(tournament_path, TournamentFile, "tournament")
    tournament, games = load_tournament(tournament_path)

    if not args.quiet:
        print(f"🏒 {tournament.name or tournament.id}: {len(tournament.pools)} pool(s)")

    for pool in tournament.pools:
        config = pool_group_config(tournament, pool.id)
        title = f"{pool.name or pool.id} STANDINGS"
        rows = report_group(config, pool_games(games, pool.id), title, quiet=args.quiet)
        if args.excel:
            export_standings_to_excel(args.excel, rows, sheet_name=pool.name or pool.id)

    if args.excel:
        print(f"Standings saved to {args.excel}")

    if args.output:
        save_standings_json(args.output, build_tournament_report(tournament, games))
        print(f"Standings saved to {args.output}")


def main():
    parser = argparse.ArgumentParser(description="Round-robin group standings and qualification")
    source = parser.add_mutually_exclusive_group(required=True)
    source.add_argument(
        "--group", "-g",
        help="Path to group JSON file (config + games)",
    )
    source.add_argument(
        "--tournament", "-t",
        help="Path to tournament JSON file (tournament + games); reports every pool",
    )
    parser.add_argument(
        "--output", "-o",
        default=None,
        help="Write standings JSON to this path",
    )
    parser.add_argument(
        "--excel", "-x",
        default=None,
        help="Write standings to this .xlsx workbook (one sheet per pool for --tournament)",
    )
    parser.add_argument(
        "--sheet",
        default="Standings",
        help="Worksheet name for --group --excel (default: Standings)",
    )
    parser.add_argument(
        "--log-dir",
        default=None,
        help="Also write a log file to this directory",
    )
    parser.add_argument(
        "--quiet", "-q",
        action="store_true",
        help="Suppress detailed output",
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Show debug logging",
    )

    args = parser.parse_args()

    setup_logging(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        log_dir=Path(args.log_dir) if args.log_dir else None,
    )

    if args.tournament:
        run_tournament(args)
    else:
        run_group(args)


if __name__ == "__main__":
    main()
