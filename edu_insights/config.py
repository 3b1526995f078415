"""Service configuration loaded from environment variables."""

from pathlib import Path
from typing import List

from pydantic_settings import BaseSettings

# Always resolve .env relative to this file, no matter where uvicorn is started from
_ENV_FILE = Path(__file__).resolve().parent.parent / ".env"


class Settings(BaseSettings):
    """Application settings — all values sourced from env / .env file."""

    # ── Server ──────────────────────────────────────────────────────────
    HOST: str = "0.0.0.0"
    PORT: int = 8000
    DEBUG: bool = False
    ENV: str = "development"

    # ── CORS ────────────────────────────────────────────────────────────
    CORS_ORIGINS: List[str] = ["*"]
    ALLOWED_HOSTS: List[str] = ["*"]

    # ── Statistics ──────────────────────────────────────────────────────
    # Placeholder for quizzes whose topic/chapter/subject link is missing
    UNKNOWN_LABEL: str = "Unknown"

    # ── Pagination ──────────────────────────────────────────────────────
    DEFAULT_PAGE_SIZE: int = 50
    MAX_PAGE_SIZE: int = 200

    model_config = {"env_file": str(_ENV_FILE), "case_sensitive": True, "extra": "ignore"}


settings = Settings()
