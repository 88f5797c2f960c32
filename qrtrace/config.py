"""Application configuration from environment variables."""

from __future__ import annotations

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    qrtrace_env: str = "development"
    qrtrace_log_level: str = "info"

    # CORS
    cors_origins: list[str] = ["http://localhost:3000"]

    # CLI default edge style
    default_style: str = "rounded"

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


settings = Settings()
