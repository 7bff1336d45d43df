"""Application configuration."""

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Board used by validation when the header leaves values out
    default_depth: int = 8
    default_width: int = 8
    default_start_x: int = 1
    default_start_y: int = 2

    # Print board dumps while validating
    verbose: bool = False

    # Logging
    log_level: str = "INFO"

    # HTTP API
    api_prefix: str = "/api"
    # Largest board (in cells) the API will search at all
    max_board_cells: int = 1_000_000
    # Largest board (in cells) the API will run an exhaustive search on
    max_exhaustive_cells: int = 64

    @property
    def default_start(self) -> tuple[int, int]:
        """Default knight start as (x, y)."""
        return (self.default_start_x, self.default_start_y)


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
