"""Human-readable explanations of how tied teams were separated.

Head-to-head here uses only the direct games between the two teams being
explained. The standings sort uses the whole tied group's mini-table, so
with three or more teams level on points the explanation can name
head-to-head for a pair whose order was actually set by the group table.
"""

from typing import Iterable

from .constants import TIEBREAKER_LABELS
from .models import StandingsRow, Tiebreaker, TiebreakerResolution
from .schemas import GameResult
from .tiebreakers import counted_games, pairwise_head_to_head, pairwise_record


def _signed(value: int) -> str:
    return f'+{value}' if value > 0 else str(value)


def tied_value(
    a: StandingsRow, b: StandingsRow, key: Tiebreaker, games: list[GameResult]
) -> str:
    """Display value two teams share on a tiebreaker that did not separate them."""
    if key == Tiebreaker.WINS:
        return str(a.w)
    if key == Tiebreaker.HEAD_TO_HEAD:
        w, l, t = pairwise_record(a.team_id, b.team_id, games)
        return f'{w}-{l}-{t}'
    if key == Tiebreaker.GOAL_DIFFERENTIAL:
        return _signed(a.diff)
    if key == Tiebreaker.GOALS_ALLOWED:
        return str(a.ga)
    if key == Tiebreaker.GOALS_FOR:
        return str(a.gf)
    return ''


def resolution_detail(
    a: StandingsRow, b: StandingsRow, key: Tiebreaker, games: list[GameResult]
) -> str | None:
    """Describe how a tiebreaker separates two teams, or None if it does not."""
    if key == Tiebreaker.WINS:
        if a.w != b.w:
            return f'{a.team_name} has {a.w} wins vs {b.team_name} with {b.w} wins'
    elif key == Tiebreaker.HEAD_TO_HEAD:
        h_a, h_b = pairwise_head_to_head(a.team_id, b.team_id, games)
        if h_a != h_b:
            return f'{a.team_name} has {h_a} h2h pts vs {b.team_name} with {h_b} h2h pts'
    elif key == Tiebreaker.GOAL_DIFFERENTIAL:
        if a.diff != b.diff:
            return f'{a.team_name} has {_signed(a.diff)} vs {b.team_name} with {_signed(b.diff)}'
    elif key == Tiebreaker.GOALS_ALLOWED:
        if a.ga != b.ga:
            return f'{a.team_name} has {a.ga} GA vs {b.team_name} with {b.ga} GA'
    elif key == Tiebreaker.GOALS_FOR:
        if a.gf != b.gf:
            return f'{a.team_name} has {a.gf} GF vs {b.team_name} with {b.gf} GF'
    return None


def detect_tiebreaker_resolutions(
    standings: list[StandingsRow],
    games: Iterable[GameResult],
    tiebreaker_order: list[Tiebreaker],
) -> list[TiebreakerResolution]:
    """
    Explain which tiebreaker decided each adjacent pair level on points.

    Args:
        standings: Sorted standings rows
        games: Games for the group
        tiebreaker_order: Tiebreaker chain to walk

    Returns:
        One TiebreakerResolution per adjacent pair that a tiebreaker
        separated; pairs the chain cannot separate produce no entry
    """
    played = counted_games(games)
    resolutions = []

    for a, b in zip(standings, standings[1:]):
        if a.pts != b.pts:
            continue
        if a.gp == 0 and b.gp == 0:
            continue

        tied_values: dict[str, str] = {}
        for key in tiebreaker_order:
            label = TIEBREAKER_LABELS[key.value]
            detail = resolution_detail(a, b, key, played)
            if detail is not None:
                resolutions.append(
                    TiebreakerResolution(
                        teams=(a.team_id, b.team_id),
                        team_names=(a.team_name, b.team_name),
                        resolved_by=label,
                        detail=detail,
                        tied_values=tied_values,
                    )
                )
                break
            tied_values[label] = tied_value(a, b, key, played)

    return resolutions
