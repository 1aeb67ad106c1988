"""Sanity checks for group inputs and computed standings."""

from collections import Counter
from typing import Iterable

from .constants import TIE_POINTS, WIN_POINTS
from .models import StandingsRow
from .qualification import expected_games
from .schemas import GameResult, GroupConfig


def validate_group(config: GroupConfig, games: Iterable[GameResult]) -> list[str]:
    """
    Check a group's configuration and games for likely data-entry mistakes.

    None of these stop standings from being computed; the engine skips or
    clamps whatever it can't use.

    Checks:
    - total_teams not below the number of teams entered
    - qualifying spots not above total_teams
    - games naming teams outside the group
    - played games with a missing score
    - teams playing themselves
    - teams with more games than the round robin allows

    Args:
        config: Group configuration
        games: Games for the group

    Returns:
        List of warning messages (empty if no issues)
    """
    warnings = []
    team_ids = {team.id for team in config.teams}
    names = {team.id: team.name or team.id for team in config.teams}

    if config.total_teams < len(config.teams):
        warnings.append(
            f'total_teams is {config.total_teams} but {len(config.teams)} teams are entered'
        )

    if config.qualifying_spots > config.total_teams:
        warnings.append(
            f'{config.qualifying_spots} qualifying spots for a {config.total_teams}-team group'
        )

    games_played: Counter[str] = Counter()
    for game in games:
        label = f'{game.home_team} vs {game.away_team}'

        if game.home_team == game.away_team:
            warnings.append(f'{label}: team is playing itself')

        unknown = [t for t in (game.home_team, game.away_team) if t not in team_ids]
        if unknown:
            warnings.append(f'{label}: not in group: {", ".join(unknown)}')

        if game.played and (game.home_score is None) != (game.away_score is None):
            warnings.append(f'{label}: marked played with only one score (treated as unplayed)')
        elif game.played and game.home_score is None:
            warnings.append(f'{label}: marked played without a score (treated as unplayed)')

        if game.is_counted:
            for team_id in (game.home_team, game.away_team):
                if team_id in team_ids:
                    games_played[team_id] += 1

    limit = expected_games(config)
    for team_id, count in sorted(games_played.items()):
        if count > limit:
            warnings.append(f'{names[team_id]} has played {count} games (round robin is {limit})')

    return warnings


def validate_standings(rows: list[StandingsRow], games: Iterable[GameResult]) -> list[str]:
    """
    Check that computed standings are internally consistent.

    Checks:
    - w + l + t == gp for every row
    - pts == 2w + t and diff == gf - ga
    - points add up to 2 per game played inside the group
    - qualifying rows form a prefix of the order

    Args:
        rows: Sorted standings rows
        games: Games the standings were computed from

    Returns:
        List of error messages (empty if consistent)
    """
    errors = []
    games = list(games)

    for row in rows:
        if row.w + row.l + row.t != row.gp:
            errors.append(f'{row.team_name}: {row.record} does not add up to {row.gp} GP')
        if row.pts != row.w * WIN_POINTS + row.t * TIE_POINTS:
            errors.append(f'{row.team_name}: {row.pts} pts does not match record {row.record}')
        if row.diff != row.gf - row.ga:
            errors.append(f'{row.team_name}: diff {row.diff} != {row.gf} - {row.ga}')

    team_ids = {row.team_id for row in rows}
    in_group = [
        g for g in games
        if g.is_counted and g.home_team in team_ids and g.away_team in team_ids
    ]
    partial = [
        g for g in games
        if g.is_counted and (g.home_team in team_ids) != (g.away_team in team_ids)
    ]
    if not partial:
        expected_pts = WIN_POINTS * len(in_group)
        total_pts = sum(row.pts for row in rows)
        if total_pts != expected_pts:
            errors.append(f'Points total {total_pts} != {expected_pts} for {len(in_group)} games')

    qualifying = sum(1 for row in rows if row.qualifies)
    if not all(row.qualifies for row in rows[:qualifying]):
        errors.append('Qualifying teams are not at the top of the standings')

    return errors
