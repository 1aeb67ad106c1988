"""Tournament pool standings.

Each pool is an independent round-robin group. Only pool-round games for the
pool count; semifinal, final and consolation games never affect pool
standings.
"""

import datetime
from typing import Iterable, Optional

from .constants import POOL_ROUND
from .models import HeadToHeadGrouping, QualificationRow, StandingsRow, TiebreakerResolution
from .qualification import compute_qualification
from .resolution import detect_tiebreaker_resolutions
from .schedule import is_past_window, is_within_window
from .schemas import GameResult, GroupConfig, TeamEntry, TournamentConfig, TournamentPool
from .standings import compute_standings


def get_pool(tournament: TournamentConfig, pool_id: str) -> Optional[TournamentPool]:
    """Find a pool by id."""
    for pool in tournament.pools:
        if pool.id == pool_id:
            return pool
    return None


def pool_games(games: Iterable[GameResult], pool_id: str) -> list[GameResult]:
    """Pool-round games belonging to one pool."""
    return [g for g in games if g.round == POOL_ROUND and g.pool_id == pool_id]


def pool_group_config(tournament: TournamentConfig, pool_id: str) -> Optional[GroupConfig]:
    """
    Build the GroupConfig for one pool.

    Returns:
        GroupConfig, or None if the pool doesn't exist
    """
    pool = get_pool(tournament, pool_id)
    if pool is None:
        return None

    return GroupConfig(
        teams=[TeamEntry(id=t.id, name=t.name) for t in tournament.teams if t.pool_id == pool_id],
        total_teams=len(pool.team_ids),
        qualifying_spots=pool.qualifying_spots,
        games_per_matchup=tournament.games_per_matchup,
        tiebreaker_order=tournament.tiebreaker_order,
        head_to_head_grouping=HeadToHeadGrouping.POINTS,
    )


def compute_pool_standings(
    tournament: TournamentConfig, games: Iterable[GameResult], pool_id: str
) -> list[StandingsRow]:
    """Sorted standings for one pool (empty for an unknown pool)."""
    config = pool_group_config(tournament, pool_id)
    if config is None:
        return []
    return compute_standings(config, pool_games(games, pool_id))


def compute_all_pool_standings(
    tournament: TournamentConfig, games: Iterable[GameResult]
) -> dict[str, list[StandingsRow]]:
    """Standings for every pool, keyed by pool id."""
    games = list(games)
    return {pool.id: compute_pool_standings(tournament, games, pool.id) for pool in tournament.pools}


def compute_pool_qualification(
    tournament: TournamentConfig, games: Iterable[GameResult], pool_id: str
) -> list[QualificationRow]:
    """Locked / out / alive status for every team in a pool."""
    games = list(games)
    config = pool_group_config(tournament, pool_id)
    if config is None:
        return []
    standings = compute_pool_standings(tournament, games, pool_id)
    return compute_qualification(standings, config)


def detect_pool_resolutions(
    tournament: TournamentConfig, games: Iterable[GameResult], pool_id: str
) -> list[TiebreakerResolution]:
    """Tiebreaker explanations for a pool's standings."""
    games = list(games)
    standings = compute_pool_standings(tournament, games, pool_id)
    return detect_tiebreaker_resolutions(
        standings, pool_games(games, pool_id), tournament.tiebreaker_order
    )


def is_tournament_active(
    tournament: TournamentConfig, today: Optional[datetime.date] = None
) -> bool:
    """
    Check if a tournament should be shown on the dashboard.

    Shown from one month before start_date through one week after end_date.
    Without both dates, shown whenever teams have been entered.
    """
    if tournament.start_date is None or tournament.end_date is None:
        return bool(tournament.teams)
    return is_within_window(tournament.start_date, tournament.end_date, today)


def is_tournament_expired(
    tournament: TournamentConfig, today: Optional[datetime.date] = None
) -> bool:
    """Check if a tournament has moved to past events."""
    if tournament.end_date is None:
        return False
    return is_past_window(tournament.end_date, today)
