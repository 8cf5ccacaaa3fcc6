# app/core/config.py
import logging
import sys
from typing import List, Optional

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Server settings loaded from environment variables or a .env file.

    JWT_SECRET_KEY has no default, so the server refuses to start without a
    signing secret. It also accepts ACCESS_TOKEN_SECRET, the name older
    deployments of the client stack export.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Database
    MONGO_URL: str = "mongodb://localhost:27017"
    MONGO_DB_NAME: str = "bistroDB"

    # Tokens
    JWT_SECRET_KEY: str = Field(
        min_length=1,
        validation_alias=AliasChoices("JWT_SECRET_KEY", "ACCESS_TOKEN_SECRET"),
    )
    ALGORITHM: str = "HS256"
    ACCESS_TOKEN_EXPIRE_MINUTES: int = 60

    # Stripe
    STRIPE_SECRET_KEY: Optional[str] = None
    STRIPE_CURRENCY: str = "usd"

    # Server
    HOST: str = "0.0.0.0"
    PORT: int = 5000
    CORS_ORIGINS: List[str] = ["*"]
    DEBUG: bool = False


settings = Settings()


def setup_logging(level: int = logging.INFO) -> logging.Logger:
    """Configure root logging for the server process."""
    if settings.DEBUG:
        level = logging.DEBUG

    logging.basicConfig(
        level=level,
        format="%(asctime)s | %(levelname)-8s | %(name)-25s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        handlers=[logging.StreamHandler(sys.stdout)],
    )

    # Reduce noise from third-party libraries
    logging.getLogger("pymongo").setLevel(logging.WARNING)
    logging.getLogger("stripe").setLevel(logging.WARNING)

    return logging.getLogger("app")
