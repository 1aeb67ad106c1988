from .models import (
    HeadToHeadGrouping,
    QualificationRow,
    QualificationStatus,
    StandingsRow,
    TeamContext,
    Tiebreaker,
    TiebreakerResolution,
)
from .schemas import GameResult, GroupConfig, TeamEntry, TournamentConfig
from .standings import compute_standings
from .qualification import compute_qualification
from .resolution import detect_tiebreaker_resolutions
from .playdown import (
    build_playdown_config,
    compute_playdown,
    get_team_context,
    is_playdown_active,
    is_playdown_expired,
)
from .tournament import (
    compute_all_pool_standings,
    compute_pool_qualification,
    compute_pool_standings,
    detect_pool_resolutions,
    is_tournament_active,
    is_tournament_expired,
)
from .json_standings import (
    build_group_report,
    build_tournament_report,
    load_group,
    load_tournament,
    save_standings_json,
)
from .validators import validate_group, validate_standings

__all__ = [
    # Models
    'HeadToHeadGrouping',
    'QualificationRow',
    'QualificationStatus',
    'StandingsRow',
    'TeamContext',
    'Tiebreaker',
    'TiebreakerResolution',
    # Input schemas
    'GameResult',
    'GroupConfig',
    'TeamEntry',
    'TournamentConfig',
    # Engine
    'compute_standings',
    'compute_qualification',
    'detect_tiebreaker_resolutions',
    # Playdowns
    'build_playdown_config',
    'compute_playdown',
    'get_team_context',
    'is_playdown_active',
    'is_playdown_expired',
    # Tournaments
    'compute_all_pool_standings',
    'compute_pool_qualification',
    'compute_pool_standings',
    'detect_pool_resolutions',
    'is_tournament_active',
    'is_tournament_expired',
    # JSON
    'build_group_report',
    'build_tournament_report',
    'load_group',
    'load_tournament',
    'save_standings_json',
    # Validation
    'validate_group',
    'validate_standings',
]
