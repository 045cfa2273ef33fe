"""Application Configuration — environment-driven settings via pydantic-settings.

Invariants:
    - Defaults reproduce the fixed deployment: mongodb://mongodb:27017/nba, port 3000
    - get_settings() is cached (lru_cache) — single instance per process

Design Decisions:
    - pydantic-settings over raw os.environ: validation, type coercion, .env file support
    - mongo_fail_fast defaults to True: an unreachable database aborts startup
"""

from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

_MONGO_SCHEMES = ("mongodb://", "mongodb+srv://")


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    # MongoDB
    mongo_url: str = "mongodb://mongodb:27017/nba"
    mongo_database: str = "nba"
    players_collection: str = "players"
    mongo_timeout_ms: int = 5000
    mongo_fail_fast: bool = True

    @field_validator("mongo_url")
    @classmethod
    def require_mongo_scheme(cls, v: str) -> str:
        if not v.startswith(_MONGO_SCHEMES):
            raise ValueError(
                f"mongo_url must start with one of {', '.join(_MONGO_SCHEMES)}",
            )
        return v

    # HTTP
    host: str = "0.0.0.0"
    port: int = 3000

    # Observability
    log_level: str = "INFO"
    log_format: str = "json"


@lru_cache
def get_settings() -> Settings:
    return Settings()
