"""League configuration management."""

from functools import lru_cache

from pydantic import BaseModel, Field, field_validator

from .constants import DATA_DIR
from .models import Tiebreaker
from .utils import load_json


def check_unique_tiebreakers(v):
    """Reject a tiebreaker chain that lists the same key twice."""
    seen = set()
    for key in v:
        if key in seen:
            raise ValueError(f'Duplicate tiebreaker: {key.value}')
        seen.add(key)
    return v


class LeagueConfig(BaseModel):
    """League-wide defaults (data/league_config.json)."""

    default_tiebreaker_order: list[Tiebreaker]
    playdown_tiebreaker_order: list[Tiebreaker]
    default_games_per_matchup: int = Field(1, ge=1, le=10)
    default_qualifying_spots_per_pool: int = Field(2, ge=0)
    visibility_months_before: int = Field(1, ge=0, le=12)
    visibility_days_after: int = Field(7, ge=0, le=365)

    @field_validator('default_tiebreaker_order', 'playdown_tiebreaker_order')
    @classmethod
    def validate_tiebreaker_order(cls, v):
        """Ensure no tiebreaker appears twice."""
        return check_unique_tiebreakers(v)

    class Config:
        extra = 'forbid'


@lru_cache(maxsize=1)
def get_config() -> LeagueConfig:
    """
    Load league configuration from data/league_config.json.

    Configuration is cached after first load for performance.

    Returns:
        LeagueConfig object with validated settings

    Raises:
        FileNotFoundError: If league_config.json doesn't exist
        ValueError: If config file has invalid structure

    Example:
        from leaguetable.config import get_config
        config = get_config()
        print(f"Default tiebreakers: {config.default_tiebreaker_order}")
    """
    config_path = DATA_DIR / 'league_config.json'
    return load_json(config_path, schema=LeagueConfig)


def get_default_tiebreaker_order() -> list[Tiebreaker]:
    """Get the tiebreaker chain used when a group or tournament sets none."""
    return list(get_config().default_tiebreaker_order)


def get_playdown_tiebreaker_order() -> list[Tiebreaker]:
    """Get the fixed tiebreaker chain used for playdown loops."""
    return list(get_config().playdown_tiebreaker_order)


def get_default_games_per_matchup() -> int:
    """Get the default number of games each pair plays."""
    return get_config().default_games_per_matchup


def get_default_qualifying_spots_per_pool() -> int:
    """Get the qualifying spots for a tournament pool that sets none."""
    return get_config().default_qualifying_spots_per_pool


def get_visibility_window() -> tuple[int, int]:
    """Get (months shown before an event, days shown after it ends)."""
    config = get_config()
    return config.visibility_months_before, config.visibility_days_after


def clear_config_cache() -> None:
    """
    Clear the configuration cache.

    Use this if the config file is modified during runtime
    and you need to reload it.

    Example:
        from leaguetable.config import clear_config_cache, get_config
        clear_config_cache()
        config = get_config()  # Reloads from file
    """
    get_config.cache_clear()
