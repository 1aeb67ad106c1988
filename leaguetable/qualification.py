"""Qualification status (locked / out / alive) for a group's standings.

LOCKED = mathematically guaranteed to finish in the qualifying spots
OUT = mathematically eliminated
ALIVE = still depends on remaining results

Statuses cascade: once a team is locked or out it counts as a team
guaranteed above or below the others, which can settle further teams on the
next pass. Passes repeat until nothing changes.
"""

import logging
from dataclasses import asdict

from .constants import WIN_POINTS
from .models import QualificationRow, QualificationStatus, StandingsRow
from .schemas import GroupConfig

logger = logging.getLogger('leaguetable.qualification')


def expected_games(config: GroupConfig) -> int:
    """Games each team plays in a complete round robin (never negative)."""
    return max(0, (config.total_teams - 1) * config.games_per_matchup)


def build_qualification_rows(
    standings: list[StandingsRow], config: GroupConfig
) -> list[QualificationRow]:
    """Attach games remaining and best-case points to each standings row."""
    expected = expected_games(config)
    rows = []
    for row in standings:
        games_remaining = max(0, expected - row.gp)
        rows.append(
            QualificationRow(
                **asdict(row),
                games_remaining=games_remaining,
                max_pts=row.pts + WIN_POINTS * games_remaining,
            )
        )
    return rows


def _teams_guaranteed_below(rows: list[QualificationRow], idx: int) -> int:
    row = rows[idx]
    count = 0
    for other_idx, other in enumerate(rows):
        if other_idx == idx:
            continue
        if other.status == QualificationStatus.OUT or other.max_pts < row.pts:
            count += 1
        elif (
            row.games_remaining == 0
            and other.games_remaining == 0
            and other.pts == row.pts
            and not other.tied_unresolved
            and other_idx > idx
        ):
            count += 1
    return count


def _teams_guaranteed_above(rows: list[QualificationRow], idx: int) -> int:
    row = rows[idx]
    count = 0
    for other_idx, other in enumerate(rows):
        if other_idx == idx:
            continue
        if other.status == QualificationStatus.LOCKED or other.pts > row.max_pts:
            count += 1
        elif (
            row.games_remaining == 0
            and other.pts >= row.pts
            and not other.tied_unresolved
            and other_idx < idx
        ):
            count += 1
    return count


def compute_qualification(
    standings: list[StandingsRow], config: GroupConfig
) -> list[QualificationRow]:
    """
    Classify every team in sorted standings as locked, out or alive.

    Args:
        standings: Output of compute_standings (sorted best-to-worst)
        config: Group configuration (qualifying_spots, total_teams,
            games_per_matchup)

    Returns:
        QualificationRow list in the same order as standings
    """
    k = config.qualifying_spots
    total_teams = config.total_teams
    rows = build_qualification_rows(standings, config)
    all_done = all(r.games_remaining == 0 for r in rows)

    max_passes = len(rows) + 1
    for pass_num in range(1, max_passes + 1):
        changed = False
        for idx, row in enumerate(rows):
            if row.status != QualificationStatus.ALIVE:
                continue

            if all_done and not row.tied_unresolved:
                row.status = QualificationStatus.LOCKED if idx < k else QualificationStatus.OUT
                changed = True
                continue

            # A team tied on every tiebreaker cannot be placed either way
            if row.tied_unresolved:
                continue

            # Departs from the general tests on purpose: with K == 0 the above
            # test (>= 0) would eliminate every team before a game is played.
            # Rows stay alive until the group is complete, then all are out.
            if k == 0:
                continue

            if _teams_guaranteed_below(rows, idx) >= total_teams - k:
                row.status = QualificationStatus.LOCKED
                changed = True
                continue

            if _teams_guaranteed_above(rows, idx) >= k:
                row.status = QualificationStatus.OUT
                changed = True

        logger.debug(f'Qualification pass {pass_num}: changed={changed}')
        if not changed:
            break
    else:
        logger.warning(f'Qualification still changing after {max_passes} passes')

    return rows
