"""JSON-based group loading and standings output."""

import logging
from dataclasses import asdict
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Iterable

from .models import StandingsRow
from .qualification import compute_qualification
from .resolution import detect_tiebreaker_resolutions
from .schemas import GameResult, GroupConfig, GroupFile, TournamentConfig, TournamentFile
from .standings import compute_standings
from .tournament import pool_games, pool_group_config
from .utils import load_json, save_json

logger = logging.getLogger('leaguetable.json_standings')


def load_group(group_path: str | Path) -> tuple[GroupConfig, list[GameResult]]:
    """Load a group's configuration and games from a group JSON file.

    Expected format:
        {
            "config": {"teams": [{"id": "a", "name": "Team A"}, ...],
                       "total_teams": 4, "qualifying_spots": 2, ...},
            "games": [{"home_team": "a", "away_team": "b",
                       "home_score": 3, "away_score": 1, "played": true}, ...]
        }

    Raises:
        FileNotFoundError: If the file doesn't exist
        ValueError: If the file doesn't match the GroupFile schema
    """
    group = load_json(group_path, schema=GroupFile)
    return group.config, group.games


def load_tournament(tournament_path: str | Path) -> tuple[TournamentConfig, list[GameResult]]:
    """Load a tournament and its games from a tournament JSON file."""
    data = load_json(tournament_path, schema=TournamentFile)
    return data.tournament, data.games


def _row_dict(row: StandingsRow) -> dict[str, Any]:
    data = asdict(row)
    if 'status' in data:
        data['status'] = row.status.value
    return data


def build_group_report(config: GroupConfig, games: Iterable[GameResult]) -> dict[str, Any]:
    """
    Compute standings, qualification and tiebreaker explanations for a group.

    Args:
        config: Group configuration
        games: Games for the group

    Returns:
        Dict with 'standings', 'qualification' and 'resolutions' lists of
        plain dicts, ready to serialize
    """
    games = list(games)
    standings = compute_standings(config, games)
    qualification = compute_qualification(standings, config)
    resolutions = detect_tiebreaker_resolutions(standings, games, config.tiebreaker_order)

    return {
        'standings': [_row_dict(row) for row in standings],
        'qualification': [_row_dict(row) for row in qualification],
        'resolutions': [
            {
                'teams': list(r.teams),
                'team_names': list(r.team_names),
                'resolved_by': r.resolved_by,
                'detail': r.detail,
                'tied_values': r.tied_values,
            }
            for r in resolutions
        ],
    }


def build_tournament_report(tournament: TournamentConfig, games: Iterable[GameResult]) -> dict[str, Any]:
    """
    Build a group report (see build_group_report) for every pool.

    Returns:
        Dict with the tournament id and name, and 'pools' mapping pool id
        to that pool's report
    """
    games = list(games)
    pools = {}
    for pool in tournament.pools:
        config = pool_group_config(tournament, pool.id)
        pools[pool.id] = build_group_report(config, pool_games(games, pool.id))

    return {
        'tournament': tournament.id,
        'name': tournament.name,
        'pools': pools,
    }


def save_standings_json(output_path: str | Path, report: dict[str, Any]) -> None:
    """Write a group or tournament report with an updated_at timestamp."""
    save_json(
        output_path,
        {
            'updated_at': datetime.now(timezone.utc).isoformat(),
            **report,
        },
    )
    logger.info(f'Standings saved to {output_path}')
