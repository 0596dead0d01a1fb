"""
Configuration settings for the Student Manager.

Uses Pydantic Settings to load environment variables for the database location,
logging, and the age policy applied when students are entered.
"""
from __future__ import annotations

from functools import lru_cache
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # Database
    db_path: str = Field("students.db", alias="STUDENTS_DB_PATH")

    # Application
    app_env: str = Field("development", alias="APP_ENV")
    log_level: str = Field("INFO", alias="LOG_LEVEL")
    log_json: bool = Field(False, alias="LOG_JSON")

    # Input policy
    min_age: int = Field(15, alias="STUDENT_MIN_AGE")
    max_age: int = Field(60, alias="STUDENT_MAX_AGE")

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
    )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """
    Retrieve a cached instance of Settings to avoid repeated env parsing.
    """
    return Settings()


__all__ = ["Settings", "get_settings"]
