"""Admin credentials: Argon2 password hashes and the bearer-token guard."""

from __future__ import annotations

import hmac

from argon2 import PasswordHasher
from argon2.exceptions import InvalidHashError, VerificationError, VerifyMismatchError
from fastapi import HTTPException, Request

from .config import get_settings

HASH_PREFIX = "argon2$"
_hasher = PasswordHasher()


def hash_password(password: str) -> str:
    """Argon2 hash tagged with ``argon2$`` so stored values are self-describing."""
    return HASH_PREFIX + _hasher.hash(password)


def verify_password(password: str, stored_hash: str | None) -> bool:
    if not stored_hash or not stored_hash.startswith(HASH_PREFIX):
        return False
    try:
        return _hasher.verify(stored_hash[len(HASH_PREFIX):], password)
    except (VerifyMismatchError, VerificationError, InvalidHashError):
        return False


def constant_time_equals(given: str, expected: str) -> bool:
    return hmac.compare_digest(given.encode("utf-8"), expected.encode("utf-8"))


def bearer_token(request: Request) -> str:
    scheme, _, token = (request.headers.get("authorization") or "").strip().partition(" ")
    return token.strip() if scheme.lower() == "bearer" else ""


def require_admin(request: Request) -> None:
    """Dependency for every content mutation: the bearer token must equal ADMIN_TOKEN."""
    settings = getattr(request.app.state, "settings", None) or get_settings()
    token = bearer_token(request)
    if not (token and settings.admin_token and constant_time_equals(token, settings.admin_token)):
        raise HTTPException(401, "Unauthorized")
