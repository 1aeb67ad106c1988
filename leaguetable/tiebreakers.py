"""Tiebreaker comparisons shared by standings sorting and tie detection.

Every comparison returns a cmp-style integer: negative when the first team
ranks ahead, positive when the second does, and zero when the key cannot
separate them.

Head-to-head is computed over a *tied group*: every team level with the two
teams being compared on points (pools), or on points and wins (playdown
loops). The mini-table for each tied group is built once per standings
computation, so the comparator stays consistent for the whole sort.
"""

from collections import defaultdict
from typing import Iterable

from .constants import LOSS_POINTS, TIE_POINTS, WIN_POINTS
from .models import HeadToHeadGrouping, StandingsRow, Tiebreaker
from .schemas import GameResult


def counted_games(games: Iterable[GameResult]) -> list[GameResult]:
    """Return games that are played and have both scores."""
    return [g for g in games if g.is_counted]


def result_points(home_score: int, away_score: int) -> tuple[int, int]:
    """Return (home_points, away_points) for a final score."""
    if home_score > away_score:
        return WIN_POINTS, LOSS_POINTS
    if home_score < away_score:
        return LOSS_POINTS, WIN_POINTS
    return TIE_POINTS, TIE_POINTS


def head_to_head_points(team_ids: set[str], games: Iterable[GameResult]) -> dict[str, int]:
    """
    Points each team earned in games played only against other teams in the set.

    Args:
        team_ids: Teams forming the tied group
        games: Counted games (see counted_games)

    Returns:
        Dict of team_id -> head-to-head points (every id in team_ids is present)
    """
    h2h = {team_id: 0 for team_id in team_ids}
    for game in games:
        if game.home_team not in team_ids or game.away_team not in team_ids:
            continue
        home_pts, away_pts = result_points(game.home_score, game.away_score)
        h2h[game.home_team] += home_pts
        h2h[game.away_team] += away_pts
    return h2h


def pairwise_head_to_head(
    a_id: str, b_id: str, games: Iterable[GameResult]
) -> tuple[int, int]:
    """Head-to-head points from the direct games between two teams only."""
    pts = head_to_head_points({a_id, b_id}, games)
    return pts[a_id], pts[b_id]


def pairwise_record(a_id: str, b_id: str, games: Iterable[GameResult]) -> tuple[int, int, int]:
    """Return team A's (wins, losses, ties) in direct games against team B."""
    wins = losses = ties = 0
    for game in games:
        if {game.home_team, game.away_team} != {a_id, b_id}:
            continue
        if game.home_team == a_id:
            a_score, b_score = game.home_score, game.away_score
        else:
            a_score, b_score = game.away_score, game.home_score
        if a_score > b_score:
            wins += 1
        elif a_score < b_score:
            losses += 1
        else:
            ties += 1
    return wins, losses, ties


def tied_group_key(row: StandingsRow, grouping: HeadToHeadGrouping) -> tuple[int, ...]:
    """Key identifying which tied group a row belongs to."""
    if grouping == HeadToHeadGrouping.POINTS_AND_WINS:
        return (row.pts, row.w)
    return (row.pts,)


class TiebreakerResolver:
    """
    Pairwise comparator over a tiebreaker chain.

    Head-to-head mini-tables are precomputed for every tied group of two or
    more teams when the resolver is created.
    """

    def __init__(
        self,
        rows: list[StandingsRow],
        games: Iterable[GameResult],
        tiebreaker_order: list[Tiebreaker],
        grouping: HeadToHeadGrouping = HeadToHeadGrouping.POINTS,
    ):
        """
        Initialize resolver.

        Args:
            rows: Tallied standings rows for the group
            games: Counted games for the group
            tiebreaker_order: Tiebreaker chain, applied in order
            grouping: How tied groups are formed for head-to-head
        """
        self.tiebreaker_order = list(tiebreaker_order)
        self.grouping = grouping
        self.h2h_points: dict[str, int] = {}

        groups: dict[tuple[int, ...], set[str]] = defaultdict(set)
        for row in rows:
            groups[tied_group_key(row, grouping)].add(row.team_id)

        games = list(games)
        for team_ids in groups.values():
            if len(team_ids) > 1:
                self.h2h_points.update(head_to_head_points(team_ids, games))

    def compare(self, a: StandingsRow, b: StandingsRow, key: Tiebreaker) -> int:
        """Compare two rows on a single tiebreaker."""
        if key == Tiebreaker.WINS:
            return b.w - a.w
        if key == Tiebreaker.HEAD_TO_HEAD:
            # Teams in different tied groups share no mini-table
            if tied_group_key(a, self.grouping) != tied_group_key(b, self.grouping):
                return 0
            return self.h2h_points.get(b.team_id, 0) - self.h2h_points.get(a.team_id, 0)
        if key == Tiebreaker.GOAL_DIFFERENTIAL:
            return b.diff - a.diff
        if key == Tiebreaker.GOALS_ALLOWED:
            return a.ga - b.ga
        if key == Tiebreaker.GOALS_FOR:
            return b.gf - a.gf
        return 0

    def compare_rows(self, a: StandingsRow, b: StandingsRow) -> int:
        """Compare two rows on points, then on each tiebreaker in order."""
        if a.pts != b.pts:
            return b.pts - a.pts
        for key in self.tiebreaker_order:
            result = self.compare(a, b, key)
            if result != 0:
                return result
        return 0

    def is_resolved(self, a: StandingsRow, b: StandingsRow) -> bool:
        """True if any tiebreaker in the chain separates two rows."""
        return any(self.compare(a, b, key) != 0 for key in self.tiebreaker_order)
