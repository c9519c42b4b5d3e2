# safecall/config.py
"""
Application configuration using Pydantic-Settings.
All settings can be overridden via environment variables or .env file.
"""

from pydantic_settings import BaseSettings
from typing import Optional


class Settings(BaseSettings):
    # ── Database ──────────────────────────────────────────────────────────
    DATABASE_URL: str = "sqlite:///./safecall.db"

    # ── Network ───────────────────────────────────────────────────────────
    BACKEND_HOST: str = "0.0.0.0"
    BACKEND_PORT: int = 4000
    CORS_ORIGINS: list[str] = ["*"]

    # ── Auth ──────────────────────────────────────────────────────────────
    JWT_SECRET: str = "dev-secret"      # Override in .env for anything but local dev
    JWT_ALGORITHM: str = "HS256"
    TOKEN_EXPIRE_DAYS: int = 7
    BCRYPT_ROUNDS: int = 10

    # ── ARS ───────────────────────────────────────────────────────────────
    # False = follow-up SMS only recorded for connected calls
    SMS_FOLLOWUP_ALWAYS: bool = True

    # ── Demo data ─────────────────────────────────────────────────────────
    SEED_DEMO_DATA: bool = True
    SEED_ADMIN_PHONE: str = "010-1234-5678"
    SEED_ADMIN_NAME: str = "Admin"
    SEED_ADMIN_PASSWORD: str = "admin1234"

    # ── Logging ───────────────────────────────────────────────────────────
    LOG_LEVEL: str = "INFO"
    LOG_DIR: Optional[str] = None          # Defaults to <project>/logs
    LOG_FILE: Optional[str] = "safecall.log"   # Empty = console only

    class Config:
        env_file = ".env"
        extra = "ignore"


settings = Settings()
