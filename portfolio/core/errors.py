"""Exceptions raised by services and translated to JSON bodies by the app."""

from __future__ import annotations

from typing import Any


class ContentError(Exception):
    def __init__(self, message: str, code: str = "invalid", status_code: int = 400):
        super().__init__(message)
        self.message = message
        self.code = code
        self.status_code = status_code

    def to_body(self) -> dict[str, Any]:
        return {"error": self.message}


class NotFoundError(ContentError):
    def __init__(self, message: str):
        super().__init__(message, "not_found", 404)


class ValidationFailed(ContentError):
    """Raised when a request body does not satisfy the entity schema."""

    def __init__(self, message: str, details: list[dict] | None = None):
        super().__init__(message, "invalid", 400)
        self.details = details or []

    def to_body(self) -> dict[str, Any]:
        body = super().to_body()
        if self.details:
            body["details"] = self.details
        return body


class GitHubError(ContentError):
    def __init__(self, message: str, status_code: int = 502):
        super().__init__(message, "github", status_code)
