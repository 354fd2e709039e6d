"""
Runtime configuration.

Every environment variable the API reads is resolved here, once, into a
frozen ``Settings``. Tests change the environment and then call
``get_settings.cache_clear()``.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path

_TRUTHY = frozenset({"1", "true", "yes", "on"})


def _env(name: str, default: str = "") -> str:
    return (os.getenv(name) or default).strip()


def _env_int(name: str, default: int) -> int:
    try:
        return int(_env(name, str(default)))
    except ValueError:
        return default


def _env_float(name: str, default: float) -> float:
    try:
        return float(_env(name, str(default)))
    except ValueError:
        return default


def _env_flag(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    return default if raw is None else raw.strip().lower() in _TRUTHY


def _env_dir(name: str, default: str) -> Path:
    return Path(_env(name, default)).expanduser().resolve()


@dataclass(frozen=True)
class Settings:
    app_env: str
    public_base_url: str
    # storage
    data_dir: Path
    uploads_dir: Path
    database_url: str
    seed_defaults: bool
    max_upload_bytes: int
    # admin
    admin_password: str
    admin_password_hash: str
    admin_token: str
    # github
    github_api_url: str
    github_raw_url: str
    github_token: str
    github_timeout_seconds: float
    # mail
    smtp_host: str
    smtp_port: int
    smtp_user: str
    smtp_password: str
    smtp_from: str
    contact_notify_email: str
    # logging
    log_level: str
    log_format: str

    @property
    def storage_backend(self) -> str:
        return "sql" if self.database_url else "json"


@lru_cache
def get_settings() -> Settings:
    admin_password = os.getenv("ADMIN_PASSWORD", "admin123")
    smtp_user = _env("SMTP_USER")
    return Settings(
        app_env=_env("APP_ENV", "dev").lower(),
        public_base_url=_env("PUBLIC_BASE_URL", "http://localhost:5000").rstrip("/"),
        data_dir=_env_dir("DATA_DIR", "data"),
        uploads_dir=_env_dir("UPLOADS_DIR", "uploads"),
        database_url=_env("DATABASE_URL"),
        seed_defaults=_env_flag("SEED_DEFAULTS", True),
        max_upload_bytes=_env_int("MAX_UPLOAD_BYTES", 10 * 1024 * 1024),
        admin_password=admin_password,
        admin_password_hash=_env("ADMIN_PASSWORD_HASH"),
        admin_token=os.getenv("ADMIN_TOKEN") or admin_password,
        github_api_url=_env("GITHUB_API_URL", "https://api.github.com").rstrip("/"),
        github_raw_url=_env("GITHUB_RAW_URL", "https://raw.githubusercontent.com").rstrip("/"),
        github_token=_env("GITHUB_TOKEN"),
        github_timeout_seconds=_env_float("GITHUB_TIMEOUT_SECONDS", 10.0),
        smtp_host=_env("SMTP_HOST"),
        smtp_port=_env_int("SMTP_PORT", 465),
        smtp_user=smtp_user,
        smtp_password=os.getenv("SMTP_PASSWORD", ""),
        smtp_from=_env("SMTP_FROM", smtp_user),
        contact_notify_email=_env("CONTACT_NOTIFY_EMAIL"),
        log_level=_env("LOG_LEVEL", "INFO").upper(),
        log_format=_env("LOG_FORMAT", "console").lower(),
    )
