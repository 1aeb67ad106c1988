"""Data models for standings results."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Tuple


class Tiebreaker(str, Enum):
    """Tiebreaker rules that can appear in a group's tiebreaker chain."""
    WINS = 'wins'
    HEAD_TO_HEAD = 'head-to-head'
    GOAL_DIFFERENTIAL = 'goal-differential'
    GOALS_ALLOWED = 'goals-allowed'
    GOALS_FOR = 'goals-for'


class HeadToHeadGrouping(str, Enum):
    """Which teams form the tied group for the head-to-head mini-table."""
    POINTS = 'points'  # tournament pools
    POINTS_AND_WINS = 'points-and-wins'  # playdown loops


class QualificationStatus(str, Enum):
    """Clinch state of a team with respect to the qualifying spots."""
    ALIVE = 'alive'
    LOCKED = 'locked'
    OUT = 'out'


@dataclass
class StandingsRow:
    """Container for one team's line in a group's standings."""
    team_id: str
    team_name: str
    gp: int = 0
    w: int = 0
    l: int = 0
    t: int = 0
    gf: int = 0
    ga: int = 0
    pts: int = 0
    diff: int = 0
    win_pct: float = 0.0  # display only, not used for ranking
    qualifies: bool = False
    tied_unresolved: bool = False

    @property
    def record(self) -> str:
        return f'{self.w}-{self.l}-{self.t}'


@dataclass
class QualificationRow(StandingsRow):
    """Standings row plus its mathematical qualification status."""
    games_remaining: int = 0
    max_pts: int = 0
    status: QualificationStatus = QualificationStatus.ALIVE


@dataclass
class TiebreakerResolution:
    """Explanation of which tiebreaker separated two adjacent teams."""
    teams: Tuple[str, str]
    team_names: Tuple[str, str]
    resolved_by: str  # tiebreaker label
    detail: str
    tied_values: Dict[str, str] = field(default_factory=dict)
    # tied_values[label] = value both teams shared before the deciding key


@dataclass
class TeamContext:
    """A single team's place in its group, for dashboard cards."""
    team_id: str
    position: int  # 1-based
    total: int
    record: Tuple[int, int, int]  # (w, l, t)
    status: QualificationStatus
