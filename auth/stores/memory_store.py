"""In-memory auth stores."""

from __future__ import annotations

import asyncio
import copy
import time
from typing import Any

from auth.exceptions import ConflictError


class MemoryUserStore:
    def __init__(self) -> None:
        self._lock = asyncio.Lock()
        self._users_by_username: dict[str, dict[str, Any]] = {}
        self._users_by_email: dict[str, dict[str, Any]] = {}
        self._next_id = 1

    async def get_by_username(self, username: str) -> dict | None:
        async with self._lock:
            user = self._users_by_username.get(username)
            return copy.deepcopy(user) if user else None

    async def get_by_email(self, email: str) -> dict | None:
        async with self._lock:
            user = self._users_by_email.get(email.lower())
            return copy.deepcopy(user) if user else None

    async def create_user(self, data: dict) -> dict:
        async with self._lock:
            payload = copy.deepcopy(data)
            payload["email"] = payload["email"].lower()
            if payload["username"] in self._users_by_username:
                raise ConflictError("Username already exists")
            if payload["email"] in self._users_by_email:
                raise ConflictError("Email already exists")

            payload["id"] = self._next_id
            self._next_id += 1
            payload["created_at"] = payload.get("created_at", int(time.time()))
            self._users_by_username[payload["username"]] = payload
            self._users_by_email[payload["email"]] = payload
            return copy.deepcopy(payload)

    async def count(self) -> int:
        async with self._lock:
            return len(self._users_by_username)
