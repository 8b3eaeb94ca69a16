from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    render_size: int = 64
    supersample: int = 8
    max_size: int = 1024
    host: str = "127.0.0.1"
    port: int = 8002
    allowed_origins: str = "*"

    model_config = SettingsConfigDict(env_prefix="DOTICON_", env_file=".env", case_sensitive=False, extra="ignore")


@lru_cache
def get_settings() -> Settings:
    return Settings()
