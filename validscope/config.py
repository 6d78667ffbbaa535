from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # Evaluation
    ROOT_PATH: str = "this"

    # Cache
    MAX_CACHED_DEFINITIONS: int = 1024  # 0 disables the limit

    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_JSON: bool = False  # True for structured JSON, False for colored console

    model_config = SettingsConfigDict(env_prefix="VALIDSCOPE_", env_file=".env", extra="ignore")


@lru_cache
def get_settings() -> Settings:
    return Settings()


settings = get_settings()
