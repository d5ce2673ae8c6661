"""Application configuration loaded from environment variables."""
from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # App
    APP_NAME: str = "Entrelinhas API"
    DEBUG: bool = False

    # Database
    MONGO_URI: str = "mongodb://localhost:27017"
    MONGO_DB_NAME: str = "entrelinhas"

    # JWT
    JWT_SECRET_KEY: str = "entrelinhas_secret"
    JWT_ALGORITHM: str = "HS256"
    ACCESS_TOKEN_EXPIRE_MINUTES: int | None = None  # None: tokens never expire

    # Passwords
    BCRYPT_ROUNDS: int = 12

    # CORS
    CORS_ORIGINS: list[str] = ["*"]

    # Day boundary for the one-post-per-day rule, e.g. "America/Sao_Paulo"; host zone when unset
    TIMEZONE: str | None = None

    # Content rules
    POST_MAX_LENGTH: int = 500
    COMMENT_MAX_LENGTH: int = 250

    # Moderation
    REPORT_THRESHOLD: int = 10
    REPORT_ACTION: Literal["hide", "delete"] = "hide"


settings = Settings()
