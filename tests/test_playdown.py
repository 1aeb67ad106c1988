"""Unit tests for playdown loops and event windows."""

import datetime

import pytest

from leaguetable.models import HeadToHeadGrouping, QualificationStatus, Tiebreaker
from leaguetable.playdown import (
    build_playdown_config,
    compute_playdown,
    get_team_context,
    is_playdown_active,
    is_playdown_expired,
)
from leaguetable.schedule import game_date_range, shift_months
from leaguetable.schemas import GameResult, TeamEntry


def teams(*ids):
    return [TeamEntry(id=t, name=f'Team {t}') for t in ids]


def game(home, away, home_score=None, away_score=None, date=None):
    return GameResult(
        home_team=home,
        away_team=away,
        home_score=home_score,
        away_score=away_score,
        played=home_score is not None,
        date=date,
    )


FULL_LOOP = [
    game('A', 'B', 3, 0),
    game('C', 'D', 2, 0),
    game('A', 'C', 4, 1),
    game('B', 'D', 2, 1),
    game('A', 'D', 5, 0),
    game('B', 'C', 3, 2),
]


class TestPlaydownConfig:
    """Tests for build_playdown_config."""

    def test_defaults(self):
        """Test half the loop (rounded up) qualifies by default."""
        config = build_playdown_config(teams('A', 'B', 'C', 'D', 'E'))
        assert config.total_teams == 5
        assert config.qualifying_spots == 3
        assert config.games_per_matchup == 1
        assert config.head_to_head_grouping == HeadToHeadGrouping.POINTS_AND_WINS
        assert config.tiebreaker_order == [
            Tiebreaker.WINS,
            Tiebreaker.HEAD_TO_HEAD,
            Tiebreaker.GOAL_DIFFERENTIAL,
            Tiebreaker.GOALS_ALLOWED,
        ]

    def test_overrides(self):
        """Test explicit sizes override the defaults."""
        config = build_playdown_config(
            teams('A', 'B', 'C'), total_teams=6, qualifying_spots=1, games_per_matchup=2
        )
        assert config.total_teams == 6
        assert config.qualifying_spots == 1
        assert config.games_per_matchup == 2


class TestTeamContext:
    """Tests for get_team_context."""

    def test_leader_and_last_place(self):
        """Test position, record and status for teams in a finished loop."""
        config = build_playdown_config(teams('A', 'B', 'C', 'D'))

        leader = get_team_context(config, FULL_LOOP, 'A')
        assert leader.position == 1
        assert leader.total == 4
        assert leader.record == (3, 0, 0)
        assert leader.status == QualificationStatus.LOCKED

        last = get_team_context(config, FULL_LOOP, 'D')
        assert last.position == 4
        assert last.record == (0, 3, 0)
        assert last.status == QualificationStatus.OUT

    def test_unknown_team(self):
        """Test a team outside the loop has no context."""
        config = build_playdown_config(teams('A', 'B'))
        assert get_team_context(config, [], 'Z') is None

    def test_empty_loop(self):
        """Test a loop with no teams has no context."""
        config = build_playdown_config([])
        assert get_team_context(config, [], 'A') is None

    def test_compute_playdown(self):
        """Test the loop's qualification rows in standings order."""
        config = build_playdown_config(teams('A', 'B', 'C', 'D'))
        rows = compute_playdown(config, FULL_LOOP)
        assert [r.team_id for r in rows] == ['A', 'B', 'C', 'D']
        assert [r.status for r in rows] == [
            QualificationStatus.LOCKED,
            QualificationStatus.LOCKED,
            QualificationStatus.OUT,
            QualificationStatus.OUT,
        ]


class TestPlaydownWindow:
    """Tests for playdown dashboard visibility."""

    @pytest.fixture
    def dated_games(self):
        return [
            game('A', 'B', date='2026-01-20'),
            game('A', 'C', date='2026-01-10'),
            game('B', 'C'),
        ]

    def test_date_range(self, dated_games):
        """Test undated games are ignored when finding the date range."""
        assert game_date_range(dated_games) == (
            datetime.date(2026, 1, 10),
            datetime.date(2026, 1, 20),
        )
        assert game_date_range([game('A', 'B')]) == (None, None)

    @pytest.mark.parametrize(
        'today,expected',
        [
            (datetime.date(2025, 12, 9), False),
            (datetime.date(2025, 12, 10), True),
            (datetime.date(2026, 1, 27), True),
            (datetime.date(2026, 1, 28), False),
        ],
    )
    def test_active_window(self, dated_games, today, expected):
        """Test a playdown is shown from a month before to a week after."""
        config = build_playdown_config(teams('A', 'B', 'C'))
        assert is_playdown_active(config, dated_games, today) is expected

    def test_expired(self, dated_games):
        """Test a playdown expires once the window closes."""
        assert is_playdown_expired(dated_games, datetime.date(2026, 1, 27)) is False
        assert is_playdown_expired(dated_games, datetime.date(2026, 1, 28)) is True
        assert is_playdown_expired([game('A', 'B')], datetime.date(2030, 1, 1)) is False

    def test_undated_loop(self):
        """Test a loop without dated games is shown while it has teams."""
        today = datetime.date(2026, 6, 1)
        assert is_playdown_active(build_playdown_config(teams('A', 'B')), [], today) is True
        assert is_playdown_active(build_playdown_config([]), [], today) is False


class TestShiftMonths:
    """Tests for month arithmetic."""

    @pytest.mark.parametrize(
        'day,months,expected',
        [
            (datetime.date(2026, 3, 14), -1, datetime.date(2026, 2, 14)),
            (datetime.date(2026, 1, 10), -1, datetime.date(2025, 12, 10)),
            (datetime.date(2026, 3, 31), -1, datetime.date(2026, 2, 28)),
            (datetime.date(2024, 3, 30), -1, datetime.date(2024, 2, 29)),
            (datetime.date(2026, 11, 5), 3, datetime.date(2027, 2, 5)),
        ],
    )
    def test_shift(self, day, months, expected):
        """Test months shift across years and clamp to the month's end."""
        assert shift_months(day, months) == expected
