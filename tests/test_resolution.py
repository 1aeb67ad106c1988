"""Unit tests for tiebreaker explanations."""

from leaguetable.models import StandingsRow, Tiebreaker
from leaguetable.resolution import detect_tiebreaker_resolutions, tied_value
from leaguetable.schemas import GameResult, GroupConfig, TeamEntry
from leaguetable.standings import compute_standings
from leaguetable.tiebreakers import TiebreakerResolver, counted_games

PLAYDOWN_ORDER = ['wins', 'head-to-head', 'goal-differential', 'goals-allowed']


def make_group(team_ids, order=None):
    return GroupConfig(
        teams=[TeamEntry(id=t, name=f'Team {t}') for t in team_ids],
        total_teams=len(team_ids),
        qualifying_spots=2,
        games_per_matchup=1,
        tiebreaker_order=order or PLAYDOWN_ORDER,
        head_to_head_grouping='points-and-wins',
    )


def game(home, away, home_score, away_score, played=True):
    return GameResult(
        home_team=home,
        away_team=away,
        home_score=home_score,
        away_score=away_score,
        played=played,
    )


class TestResolutions:
    """Tests for detect_tiebreaker_resolutions."""

    def test_resolved_by_goals_allowed(self):
        """Test earlier equal tiebreakers are recorded with their shared values."""
        config = make_group(['A', 'B', 'C', 'D'])
        games = [
            game('A', 'C', 2, 0),
            game('A', 'D', 2, 0),
            game('B', 'C', 3, 1),
            game('B', 'D', 3, 1),
            game('A', 'B', 1, 1),
            game('C', 'D', 1, 0),
        ]
        standings = compute_standings(config, games)
        assert [r.team_id for r in standings] == ['A', 'B', 'C', 'D']

        resolutions = detect_tiebreaker_resolutions(standings, games, config.tiebreaker_order)
        assert len(resolutions) == 1

        r = resolutions[0]
        assert r.teams == ('A', 'B')
        assert r.team_names == ('Team A', 'Team B')
        assert r.resolved_by == 'Fewest Goals Allowed'
        assert r.detail == 'Team A has 1 GA vs Team B with 3 GA'
        assert r.tied_values == {
            'Wins': '2',
            'Head-to-Head': '0-0-1',
            'Goal Differential': '+4',
        }

    def test_resolved_by_wins(self):
        """Test a pair level on points but not wins."""
        config = make_group(['A', 'B', 'C'], order=['wins', 'goals-for'])
        # A: W1 T1, B: T3, both on 3 points
        games = [
            game('A', 'C', 1, 0),
            game('B', 'C', 0, 0),
            game('B', 'A', 2, 2),
            game('C', 'B', 0, 0),
        ]
        standings = compute_standings(config, games)
        pairs = {r.teams: r for r in detect_tiebreaker_resolutions(standings, games, config.tiebreaker_order)}
        assert ('A', 'B') in pairs
        assert pairs[('A', 'B')].resolved_by == 'Wins'
        assert pairs[('A', 'B')].detail == 'Team A has 1 wins vs Team B with 0 wins'
        assert pairs[('A', 'B')].tied_values == {}

    def test_exhausted_chain_produces_no_entry(self):
        """Test an unresolved tie has no explanation."""
        config = make_group(['A', 'B'])
        games = [game('A', 'B', 2, 2)]
        standings = compute_standings(config, games)
        assert all(r.tied_unresolved for r in standings)
        assert detect_tiebreaker_resolutions(standings, games, config.tiebreaker_order) == []

    def test_pairs_without_games_skipped(self):
        """Test pairs where neither team has played are skipped."""
        config = make_group(['A', 'B', 'C'])
        standings = compute_standings(config, [])
        assert detect_tiebreaker_resolutions(standings, [], config.tiebreaker_order) == []

    def test_unplayed_games_not_used_for_head_to_head(self):
        """Test scores on unplayed games don't count toward head-to-head."""
        config = make_group(['A', 'B'], order=['head-to-head'])
        games = [game('A', 'B', 5, 0, played=False), game('A', 'B', 1, 1)]
        standings = compute_standings(config, games)
        assert detect_tiebreaker_resolutions(standings, games, config.tiebreaker_order) == []

    def test_pairwise_head_to_head_can_disagree_with_sort(self):
        """Test the explanation uses direct games while the sort uses the tied group.

        A, B and D all have 2 points and 1 win. In the three-team mini-table
        A and D both have 2 points, so the sort falls through to goal
        differential; the explanation looks only at D's direct win over A.
        """
        config = make_group(['A', 'B', 'C', 'D'])
        games = [game('A', 'B', 1, 0), game('B', 'C', 10, 0), game('A', 'D', 0, 1)]
        standings = compute_standings(config, games)
        assert [r.team_id for r in standings] == ['D', 'A', 'B', 'C']

        resolver = TiebreakerResolver(
            standings, counted_games(games), config.tiebreaker_order, config.head_to_head_grouping
        )
        d, a = standings[0], standings[1]
        assert resolver.compare(d, a, Tiebreaker.HEAD_TO_HEAD) == 0
        assert resolver.compare(d, a, Tiebreaker.GOAL_DIFFERENTIAL) < 0

        resolutions = detect_tiebreaker_resolutions(standings, games, config.tiebreaker_order)
        assert [(r.teams, r.resolved_by) for r in resolutions] == [
            (('D', 'A'), 'Head-to-Head'),
            (('A', 'B'), 'Head-to-Head'),
        ]
        assert resolutions[0].detail == 'Team D has 2 h2h pts vs Team A with 0 h2h pts'
        assert resolutions[0].tied_values == {'Wins': '1'}


class TestTiedValue:
    """Tests for tied value display strings."""

    def test_goal_differential_signs(self):
        """Test positive differentials carry a plus sign."""
        up = StandingsRow(team_id='A', team_name='A', diff=3)
        down = StandingsRow(team_id='B', team_name='B', diff=-2)
        even = StandingsRow(team_id='C', team_name='C', diff=0)
        assert tied_value(up, up, Tiebreaker.GOAL_DIFFERENTIAL, []) == '+3'
        assert tied_value(down, down, Tiebreaker.GOAL_DIFFERENTIAL, []) == '-2'
        assert tied_value(even, even, Tiebreaker.GOAL_DIFFERENTIAL, []) == '0'
