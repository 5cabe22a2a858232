"""Profile read with the derived CIBIL score."""

from __future__ import annotations

import logging
from typing import Any

from auth.exceptions import InternalError, NotFoundError
from auth.interfaces.user_store import UserStore
from services.score_engine import ScoringPolicy, calculate_cibil_score

logger = logging.getLogger(__name__)


class ProfileService:
    def __init__(self, user_store: UserStore, policy: ScoringPolicy | None = None) -> None:
        self._users = user_store
        self._policy = policy or ScoringPolicy.from_config()

    async def read_profile(self, username: str) -> dict[str, Any]:
        """Return a user's public fields, stored profile and freshly computed score."""
        try:
            user = await self._users.get_by_username(username)
        except Exception as exc:
            logger.exception("Error fetching user data username=%s", username)
            raise InternalError("Server Error") from exc
        if not user:
            raise NotFoundError("User not found")

        profile = user.get("financial_profile") or {}
        return {
            "username": user["username"],
            "email": user["email"],
            "financial_profile": profile,
            "cibil_score": calculate_cibil_score(profile, self._policy),
        }
