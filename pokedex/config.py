# pokedex/config.py
from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Service settings, read from ``POKEDEX_*`` environment variables or ``.env``."""

    model_config = SettingsConfigDict(env_prefix="POKEDEX_", env_file=".env", case_sensitive=False)

    port: int = 3000
    log_level: str = "INFO"

    @property
    def base_url(self) -> str:
        return f"http://localhost:{self.port}"


@lru_cache
def get_settings() -> Settings:
    return Settings()
