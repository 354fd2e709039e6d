"""Admin login against the single shared secret."""

from __future__ import annotations

from portfolio.core.config import Settings
from portfolio.core.logging import get_logger
from portfolio.core.security import constant_time_equals, verify_password

log = get_logger(__name__)


class InvalidCredentialsError(Exception):
    pass


class AuthService:
    def __init__(self, settings: Settings) -> None:
        self.settings = settings

    def check_password(self, password: str) -> bool:
        if not password:
            return False
        if self.settings.admin_password_hash:
            return verify_password(password, self.settings.admin_password_hash)
        expected = self.settings.admin_password
        return bool(expected) and constant_time_equals(password, expected)

    def login(self, password: str) -> str:
        """Return the bearer token for admin requests, or raise InvalidCredentialsError."""
        if not self.check_password(password):
            log.warning("admin_login_failed")
            raise InvalidCredentialsError("Invalid password")
        log.info("admin_login")
        return self.settings.admin_token
