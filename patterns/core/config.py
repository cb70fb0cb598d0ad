"""Library configuration loaded from the environment."""

from functools import lru_cache
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Pattern matching settings loaded from environment."""

    # Logging
    debug: bool = False
    """Log every evaluation at DEBUG (checked on each call)."""

    log_level: str = "WARNING"

    # Accessor quoted in error hints
    optional_accessor: str = "Patterns.get_optionally"

    model_config = {
        "env_prefix": "PATTERNS_",
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "extra": "ignore",
    }


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
