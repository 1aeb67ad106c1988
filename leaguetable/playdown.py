"""Playdown loops: fixed tiebreakers, standings and team context.

Tiebreakers, in order:
  1. Number of wins
  2. Head-to-head record among teams tied on points and wins
  3. Goal differential (GF - GA)
  4. Fewest goals allowed
"""

import datetime
import math
from typing import Iterable, Optional

from .config import get_default_games_per_matchup, get_playdown_tiebreaker_order
from .models import HeadToHeadGrouping, QualificationRow, TeamContext
from .qualification import compute_qualification
from .schedule import game_date_range, is_past_window, is_within_window
from .schemas import GameResult, GroupConfig, TeamEntry
from .standings import compute_standings


def build_playdown_config(
    teams: list[TeamEntry],
    total_teams: Optional[int] = None,
    qualifying_spots: Optional[int] = None,
    games_per_matchup: Optional[int] = None,
) -> GroupConfig:
    """
    Build a playdown GroupConfig with the league's fixed tiebreaker chain.

    Args:
        teams: Teams entered in the loop
        total_teams: Expected loop size (default: number of teams entered)
        qualifying_spots: Spots that advance (default: half the loop, rounded up)
        games_per_matchup: Games each pair plays (default: league default)

    Returns:
        GroupConfig using points-and-wins head-to-head grouping
    """
    if total_teams is None:
        total_teams = len(teams)
    if qualifying_spots is None:
        qualifying_spots = math.ceil(len(teams) / 2)
    if games_per_matchup is None:
        games_per_matchup = get_default_games_per_matchup()

    return GroupConfig(
        teams=teams,
        total_teams=total_teams,
        qualifying_spots=qualifying_spots,
        games_per_matchup=games_per_matchup,
        tiebreaker_order=get_playdown_tiebreaker_order(),
        head_to_head_grouping=HeadToHeadGrouping.POINTS_AND_WINS,
    )


def compute_playdown(config: GroupConfig, games: Iterable[GameResult]) -> list[QualificationRow]:
    """Standings and qualification status for a playdown loop."""
    return compute_qualification(compute_standings(config, games), config)


def get_team_context(
    config: GroupConfig, games: Iterable[GameResult], team_id: str
) -> Optional[TeamContext]:
    """
    Position, record and status of one team in its playdown loop.

    Returns:
        TeamContext, or None if the loop has no teams or the team isn't in it
    """
    if not config.teams:
        return None

    rows = compute_playdown(config, games)
    for position, row in enumerate(rows, 1):
        if row.team_id == team_id:
            return TeamContext(
                team_id=team_id,
                position=position,
                total=len(rows),
                record=(row.w, row.l, row.t),
                status=row.status,
            )
    return None


def is_playdown_active(
    config: GroupConfig,
    games: list[GameResult],
    today: Optional[datetime.date] = None,
) -> bool:
    """
    Check if a playdown should be shown on the dashboard.

    Shown from one month before the first game through one week after the
    last. A loop with teams but no dated games is always shown.
    """
    if not config.teams and not games:
        return False
    start, end = game_date_range(games)
    if start is None:
        return bool(config.teams)
    return is_within_window(start, end, today)


def is_playdown_expired(games: list[GameResult], today: Optional[datetime.date] = None) -> bool:
    """Check if a playdown has moved to past events."""
    _, end = game_date_range(games)
    if end is None:
        return False
    return is_past_window(end, today)
