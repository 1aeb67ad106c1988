"""Standings aggregation for a round-robin group.

Points: 2 for a win, 1 for a tie, 0 for a loss. Teams level on points are
separated by the group's tiebreaker chain (see tiebreakers.py).
"""

import logging
from functools import cmp_to_key
from itertools import groupby
from typing import Iterable

from .constants import TIE_POINTS, WIN_POINTS
from .models import HeadToHeadGrouping, StandingsRow
from .schemas import GameResult, GroupConfig
from .tiebreakers import TiebreakerResolver, counted_games

logger = logging.getLogger('leaguetable.standings')


def tally_games(config: GroupConfig, games: Iterable[GameResult]) -> list[StandingsRow]:
    """
    Build unsorted standings rows from played games.

    Playdown loops (points-and-wins grouping) only count games where both
    sides are in the loop. Tournament pools count a game for each side that
    belongs to the pool, and skip it only when neither side does.

    Args:
        config: Group configuration
        games: All known games (unplayed and half-scored games are ignored)

    Returns:
        One StandingsRow per team, in config.teams order
    """
    stats = {
        team.id: StandingsRow(team_id=team.id, team_name=team.name)
        for team in config.teams
    }

    both_sides_required = config.head_to_head_grouping == HeadToHeadGrouping.POINTS_AND_WINS

    for game in counted_games(games):
        home = stats.get(game.home_team)
        away = stats.get(game.away_team)
        if both_sides_required:
            skip = home is None or away is None
        else:
            skip = home is None and away is None
        if skip:
            logger.debug(f'Skipping game {game.home_team} vs {game.away_team}: not in group')
            continue

        hs = game.home_score
        as_ = game.away_score

        if home is not None:
            home.gp += 1
            home.gf += hs
            home.ga += as_
        if away is not None:
            away.gp += 1
            away.gf += as_
            away.ga += hs

        if hs > as_:
            if home is not None:
                home.w += 1
            if away is not None:
                away.l += 1
        elif hs < as_:
            if home is not None:
                home.l += 1
            if away is not None:
                away.w += 1
        else:
            if home is not None:
                home.t += 1
            if away is not None:
                away.t += 1

    rows = list(stats.values())
    for row in rows:
        row.pts = row.w * WIN_POINTS + row.t * TIE_POINTS
        row.diff = row.gf - row.ga
        row.win_pct = round(row.w / row.gp, 3) if row.gp > 0 else 0.0

    return rows


def sort_standings(rows: list[StandingsRow], resolver: TiebreakerResolver) -> list[StandingsRow]:
    """
    Order rows best-to-worst.

    Rows are first stably sorted on points, then each block of teams level on
    points is stably sorted on the tiebreaker chain. Pairs the chain cannot
    separate keep their incoming order.
    """
    by_points = sorted(rows, key=lambda r: r.pts, reverse=True)

    ordered = []
    for _pts, block in groupby(by_points, key=lambda r: r.pts):
        ordered.extend(sorted(block, key=cmp_to_key(resolver.compare_rows)))
    return ordered


def mark_unresolved_ties(rows: list[StandingsRow], resolver: TiebreakerResolver) -> None:
    """Flag adjacent rows level on points that no tiebreaker can separate."""
    for a, b in zip(rows, rows[1:]):
        if a.pts != b.pts:
            continue
        if a.gp == 0 and b.gp == 0:
            continue
        if not resolver.is_resolved(a, b):
            logger.debug(f'Unresolved tie: {a.team_name} / {b.team_name}')
            a.tied_unresolved = True
            b.tied_unresolved = True


def compute_standings(config: GroupConfig, games: Iterable[GameResult]) -> list[StandingsRow]:
    """
    Compute ranked standings for a group.

    Args:
        config: Group configuration (teams, qualifying spots, tiebreakers)
        games: Games for the group

    Returns:
        StandingsRow list sorted best-to-worst, with qualifies and
        tied_unresolved set
    """
    played = counted_games(games)
    rows = tally_games(config, played)

    resolver = TiebreakerResolver(
        rows, played, config.tiebreaker_order, config.head_to_head_grouping
    )
    rows = sort_standings(rows, resolver)
    mark_unresolved_ties(rows, resolver)

    for row in rows[: config.qualifying_spots]:
        row.qualifies = True

    return rows
