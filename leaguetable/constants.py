"""Constants and mappings for the standings engine."""

from pathlib import Path

# Standings points per game result
WIN_POINTS = 2
TIE_POINTS = 1
LOSS_POINTS = 0

# Tiebreaker key -> display label
TIEBREAKER_LABELS = {
    'wins': 'Wins',
    'head-to-head': 'Head-to-Head',
    'goal-differential': 'Goal Differential',
    'goals-allowed': 'Fewest Goals Allowed',
    'goals-for': 'Most Goals For',
}

# Tournament game rounds; only pool games count toward pool standings
POOL_ROUND = 'pool'
TOURNAMENT_ROUNDS = ('pool', 'semifinal', 'final', 'consolation')

# Spreadsheet export columns (header, StandingsRow/QualificationRow attribute)
EXPORT_COLUMNS = [
    ('Team', 'team_name'),
    ('GP', 'gp'),
    ('W', 'w'),
    ('L', 'l'),
    ('T', 't'),
    ('PTS', 'pts'),
    ('GF', 'gf'),
    ('GA', 'ga'),
    ('DIFF', 'diff'),
    ('GR', 'games_remaining'),
    ('MAX', 'max_pts'),
    ('Status', 'status'),
]

# Directories
PROJECT_DIR = Path(__file__).parent.parent
DATA_DIR = PROJECT_DIR / 'data'
