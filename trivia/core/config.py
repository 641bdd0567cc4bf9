from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    app_env: str = Field(default="dev", alias="APP_ENV")
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")
    log_json: bool = Field(default=True, alias="LOG_JSON")

    database_url: str = Field(default="sqlite+aiosqlite:///./trivia.db", alias="DATABASE_URL")

    questions_path: str | None = Field(default=None, alias="QUESTIONS_PATH")
    quiz_difficulty: str = Field(default="Mixed", alias="QUIZ_DIFFICULTY")
    clock_tick_seconds: float = Field(default=1.0, gt=0, alias="CLOCK_TICK_SECONDS")


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()
