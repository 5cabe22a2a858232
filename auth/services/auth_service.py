"""Core auth service."""

from __future__ import annotations

import asyncio
import logging
from functools import lru_cache
from typing import Any

from auth.exceptions import AuthError, InternalError, ValidationError
from auth.interfaces.user_store import UserStore
from auth.security import hash_password, verify_password
from services.financial_profile import financial_summary, get_loan_history

logger = logging.getLogger(__name__)

INVALID_CREDENTIALS = "Invalid credentials."


@lru_cache(maxsize=1)
def _dummy_hash() -> str:
    # Verified against when the username is unknown so both failure paths cost the same
    return hash_password("not-a-real-password")


class AuthService:
    def __init__(self, user_store: UserStore) -> None:
        self._users = user_store

    async def login(self, username: str | None, password: str | None) -> dict[str, Any]:
        if not username or not password:
            raise ValidationError("Username and password are required.")

        try:
            user = await self._users.get_by_username(username)
        except Exception as exc:
            logger.exception("Error logging in username=%s", username)
            raise InternalError("Error logging in.") from exc

        hashed = user.get("hashed_password") if user else None
        if not await asyncio.to_thread(verify_password, password, hashed or _dummy_hash()):
            raise AuthError(INVALID_CREDENTIALS)
        if not user:
            raise AuthError(INVALID_CREDENTIALS)

        profile = user.get("financial_profile") or {}
        logger.info("Login successful username=%s", username)
        return {
            "user": {
                "username": user["username"],
                "email": user["email"],
            },
            "financial_info": financial_summary(profile),
            "loan_history": get_loan_history(profile),
        }
