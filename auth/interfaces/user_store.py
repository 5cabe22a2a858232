"""User store interface."""

from __future__ import annotations

from typing import Protocol


class UserStore(Protocol):
    """
    Persistence for onboarded users.

    ``create_user`` writes the whole record at once and raises
    ``auth.exceptions.ConflictError`` when the username or email is taken.
    Any other exception is treated as a store failure.
    """

    async def get_by_username(self, username: str) -> dict | None:
        ...

    async def get_by_email(self, email: str) -> dict | None:
        ...

    async def create_user(self, data: dict) -> dict:
        ...
