"""
Configuration module using pydantic-settings.

Loads settings from environment variables with sensible defaults.
"""

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict

from fantasy_soccer.models.team import CompositionRules


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="FANTASY_SOCCER_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # API Configuration
    api_title: str = "Fantasy Soccer API"
    api_version: str = "0.1.0"
    api_description: str = "Fantasy scores and team validation for soccer players"
    debug: bool = False
    log_level: str = "INFO"

    # Cache Settings
    cache_ttl: int = 600  # 10 minutes in seconds

    # Leaderboard
    top_players_default_limit: int = 10
    top_players_max_limit: int = 50

    # Team composition rules
    team_size: int = 11
    min_goalkeepers: int = 1
    max_goalkeepers: int = 3
    min_defenders: int = 3
    max_defenders: int = 6
    min_midfielders: int = 2
    max_midfielders: int = 5
    min_forwards: int = 1
    max_forwards: int = 3

    # Server Configuration
    host: str = "0.0.0.0"
    port: int = 5000
    reload: bool = False

    def composition_rules(self) -> CompositionRules:
        """Build the team composition rules from the configured bounds."""
        return CompositionRules(
            team_size=self.team_size,
            min_goalkeepers=self.min_goalkeepers,
            max_goalkeepers=self.max_goalkeepers,
            min_defenders=self.min_defenders,
            max_defenders=self.max_defenders,
            min_midfielders=self.min_midfielders,
            max_midfielders=self.max_midfielders,
            min_forwards=self.min_forwards,
            max_forwards=self.max_forwards,
        )


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
