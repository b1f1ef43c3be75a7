"""
Environment-aware configuration.
Secrets (JWT_SECRET, POLKA_KEY) are read here once and handed to the auth
layer as an AuthSettings object; nothing else reads them from the app config.
"""
from __future__ import annotations

import os
from dataclasses import dataclass
from datetime import timedelta
from typing import Mapping

from dotenv import load_dotenv

load_dotenv()  # Read .env if present


def _env_bool(name: str, default: str = "false") -> bool:
    return os.getenv(name, default).lower() in ("1", "true", "yes")


class BaseConfig:
    SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")  # Set a strong key in production
    DEBUG = False
    TESTING = False
    # CORS: in dev we usually allow '*', in prod supply a comma-separated list in env
    CORS_ORIGINS = os.getenv("CORS_ORIGINS", "*")
    APP_ENV = os.getenv("APP_ENV", "dev")
    # Only "dev" enables POST /admin/reset
    PLATFORM = os.getenv("PLATFORM", "prod")

    DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///chirpy.db")
    SQL_ECHO = _env_bool("SQL_ECHO")

    JWT_SECRET = os.getenv("JWT_SECRET", "")
    POLKA_KEY = os.getenv("POLKA_KEY", "")
    ACCESS_TOKEN_EXPIRES = timedelta(seconds=int(os.getenv("ACCESS_TOKEN_EXPIRES_SECONDS", "3600")))
    REFRESH_TOKEN_EXPIRES = timedelta(days=int(os.getenv("REFRESH_TOKEN_EXPIRES_DAYS", "60")))

    CHIRP_MAX_LENGTH = int(os.getenv("CHIRP_MAX_LENGTH", "140"))

    ARGON2_TIME_COST = int(os.getenv("ARGON2_TIME_COST", "3"))
    ARGON2_MEMORY_COST = int(os.getenv("ARGON2_MEMORY_COST", "65536"))

    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
    LOG_FILE = os.getenv("LOG_FILE")


class DevelopmentConfig(BaseConfig):
    DEBUG = True
    PLATFORM = os.getenv("PLATFORM", "dev")
    JWT_SECRET = os.getenv("JWT_SECRET", "dev-secret-change-me-0123456789abcdef")


class TestingConfig(BaseConfig):
    TESTING = True
    PLATFORM = "dev"
    DATABASE_URL = "sqlite://"
    JWT_SECRET = "test-secret-0123456789abcdef0123456789"
    POLKA_KEY = "f271c81ff7084ee5b99a5091b42d486e"
    # cheap hashing keeps the suite fast
    ARGON2_TIME_COST = 1
    ARGON2_MEMORY_COST = 8192
    LOG_LEVEL = "WARNING"
    LOG_FILE = None


class ProductionConfig(BaseConfig):
    DEBUG = False


def get_config(name: str | None):
    """
    Select config class.
    - If name is provided, choose by name.
    - Else choose based on APP_ENV (dev/test/prod).
    """
    env = (name or os.getenv("APP_ENV", "dev")).lower()
    if env in ["prod", "production"]:
        return ProductionConfig
    if env in ["test", "testing"]:
        return TestingConfig
    return DevelopmentConfig


@dataclass(frozen=True)
class AuthSettings:
    """Everything the authorization gate and session manager need to know."""

    token_secret: str
    polka_key: str = ""
    access_token_ttl: timedelta = timedelta(hours=1)
    refresh_token_ttl: timedelta = timedelta(days=60)

    @classmethod
    def from_config(cls, config: Mapping) -> "AuthSettings":
        secret = config.get("JWT_SECRET")
        if not secret:
            raise RuntimeError("JWT_SECRET must be set")
        return cls(
            token_secret=secret,
            polka_key=config.get("POLKA_KEY") or "",
            access_token_ttl=config.get("ACCESS_TOKEN_EXPIRES", timedelta(hours=1)),
            refresh_token_ttl=config.get("REFRESH_TOKEN_EXPIRES", timedelta(days=60)),
        )
