"""Pydantic schemas for group and tournament input files."""

import datetime

from pydantic import BaseModel, Field, field_validator, model_validator

from .config import (
    check_unique_tiebreakers,
    get_default_games_per_matchup,
    get_default_qualifying_spots_per_pool,
    get_default_tiebreaker_order,
)
from .constants import TOURNAMENT_ROUNDS
from .models import HeadToHeadGrouping, Tiebreaker


class TeamEntry(BaseModel):
    """Team entered into a group."""

    id: str = Field(..., min_length=1)
    name: str = ''

    class Config:
        extra = 'forbid'


class GameResult(BaseModel):
    """Result (or fixture) of a single game."""

    home_team: str
    away_team: str
    home_score: int | None = Field(None, ge=0)
    away_score: int | None = Field(None, ge=0)
    played: bool = False
    date: datetime.date | None = None
    pool_id: str | None = None
    round: str | None = None

    @field_validator('date', mode='before')
    @classmethod
    def blank_date_is_none(cls, v):
        """Treat empty date strings from forms as missing."""
        if v == '':
            return None
        return v

    @field_validator('round')
    @classmethod
    def validate_round(cls, v):
        """Ensure round is a known tournament round."""
        if v is not None and v not in TOURNAMENT_ROUNDS:
            raise ValueError(f'Invalid round: {v}')
        return v

    @property
    def is_counted(self) -> bool:
        """True when the game counts toward standings."""
        return self.played and self.home_score is not None and self.away_score is not None

    class Config:
        extra = 'forbid'


class GroupConfig(BaseModel):
    """Configuration of one round-robin group (playdown loop or pool)."""

    teams: list[TeamEntry] = Field(default_factory=list)
    total_teams: int | None = None  # defaults to len(teams)
    qualifying_spots: int = Field(0, ge=0)
    games_per_matchup: int = Field(default_factory=get_default_games_per_matchup)
    tiebreaker_order: list[Tiebreaker] = Field(default_factory=get_default_tiebreaker_order)
    head_to_head_grouping: HeadToHeadGrouping = HeadToHeadGrouping.POINTS

    @field_validator('teams')
    @classmethod
    def validate_unique_teams(cls, v):
        """Ensure team ids are unique within the group."""
        seen = set()
        for team in v:
            if team.id in seen:
                raise ValueError(f'Duplicate team id: {team.id}')
            seen.add(team.id)
        return v

    @field_validator('tiebreaker_order')
    @classmethod
    def validate_tiebreaker_order(cls, v):
        """Ensure no tiebreaker appears twice."""
        return check_unique_tiebreakers(v)

    @model_validator(mode='after')
    def default_total_teams(self):
        """A group without total_teams is as large as its entered roster."""
        if self.total_teams is None:
            self.total_teams = len(self.teams)
        return self

    class Config:
        extra = 'forbid'


class GroupFile(BaseModel):
    """Complete group JSON file structure."""

    config: GroupConfig
    games: list[GameResult] = Field(default_factory=list)

    class Config:
        extra = 'forbid'


class TournamentPool(BaseModel):
    """Pool within a tournament."""

    id: str = Field(..., min_length=1)
    name: str = ''
    team_ids: list[str] = Field(default_factory=list)
    qualifying_spots: int = Field(default_factory=get_default_qualifying_spots_per_pool, ge=0)

    class Config:
        extra = 'forbid'


class TournamentTeam(BaseModel):
    """Team entered into a tournament."""

    id: str = Field(..., min_length=1)
    name: str = ''
    pool_id: str | None = None

    class Config:
        extra = 'forbid'


class TournamentConfig(BaseModel):
    """Tournament with one or more round-robin pools."""

    id: str
    name: str = ''
    start_date: datetime.date | None = None
    end_date: datetime.date | None = None
    pools: list[TournamentPool] = Field(default_factory=list)
    teams: list[TournamentTeam] = Field(default_factory=list)
    games_per_matchup: int = Field(default_factory=get_default_games_per_matchup)
    tiebreaker_order: list[Tiebreaker] = Field(default_factory=get_default_tiebreaker_order)

    @field_validator('start_date', 'end_date', mode='before')
    @classmethod
    def blank_date_is_none(cls, v):
        """Treat empty date strings from forms as missing."""
        if v == '':
            return None
        return v

    @field_validator('tiebreaker_order')
    @classmethod
    def validate_tiebreaker_order(cls, v):
        """Ensure no tiebreaker appears twice."""
        return check_unique_tiebreakers(v)

    class Config:
        extra = 'forbid'


class TournamentFile(BaseModel):
    """Complete tournament JSON file structure."""

    tournament: TournamentConfig
    games: list[GameResult] = Field(default_factory=list)

    class Config:
        extra = 'forbid'

