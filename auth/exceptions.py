"""Auth exceptions."""

from __future__ import annotations

from typing import Any


class AuthException(Exception):
    """Base auth exception with HTTP status."""

    default_status_code = 400

    def __init__(self, message: str, status_code: int | None = None, stage: Any = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code or self.default_status_code
        # Pipeline stage the failure happened in, when raised during registration
        self.stage = stage


class ValidationError(AuthException):
    """Missing fields or a malformed upload."""

    default_status_code = 400


class ConflictError(AuthException):
    """Username or email already taken."""

    default_status_code = 409


class AuthError(AuthException):
    """Bad credentials. Same for unknown usernames and wrong passwords."""

    default_status_code = 401


class NotFoundError(AuthException):
    default_status_code = 404


class InternalError(AuthException):
    """Hashing, filesystem or store failure not caused by the caller."""

    default_status_code = 500
