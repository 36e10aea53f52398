# app/core/config.py
import logging
import os
from dotenv import load_dotenv

load_dotenv()

logger = logging.getLogger(__name__)


def _env_bool(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


class Settings:
    PROJECT_NAME: str = "Restaurant Ordering API"
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")
    PORT: int = int(os.getenv("PORT", "4000"))

    DATABASE_URL: str = os.getenv("DATABASE_URL")

    # Comma separated, "*" allows everything (the SPA runs on another port)
    CORS_ORIGINS: list = [o.strip() for o in os.getenv("CORS_ORIGINS", "*").split(",") if o.strip()]

    # Auth
    JWT_SECRET: str = os.getenv("JWT_SECRET", "change-me")
    JWT_EXPIRE_MINUTES: int = int(os.getenv("JWT_EXPIRE_MINUTES", "720"))

    # Retention policy
    ORDER_RETENTION_HOURS: int = int(os.getenv("ORDER_RETENTION_HOURS", "24"))
    FEEDBACK_MAX_ENTRIES: int = int(os.getenv("FEEDBACK_MAX_ENTRIES", "30"))

    SEED_DEFAULT_MENU: bool = _env_bool("SEED_DEFAULT_MENU", True)

    # Telegram staff alerts for new orders
    TELEGRAM_BOT_TOKEN: str = os.getenv("TELEGRAM_BOT_TOKEN")
    OWNER_CHAT_ID: str = os.getenv("OWNER_CHAT_ID")

    # SMTP for thank-you mails
    SMTP_HOST: str = os.getenv("SMTP_HOST")
    SMTP_PORT: int = int(os.getenv("SMTP_PORT", "587"))
    SMTP_USER: str = os.getenv("SMTP_USER")
    SMTP_PASS: str = os.getenv("SMTP_PASS")
    SMTP_FROM: str = os.getenv("SMTP_FROM")


settings = Settings()

# Validation Check
if not settings.DATABASE_URL:
    # Fallback for local runs if .env is missing (Use SQLite)
    logger.warning("DATABASE_URL not found. Using SQLite at ./restaurant.db")
    settings.DATABASE_URL = "sqlite:///./restaurant.db"
