"""SQLite auth stores."""

from __future__ import annotations

import json
import sqlite3
import time

from auth.exceptions import ConflictError


class SQLiteStoreBase:
    def __init__(self, db_path: str) -> None:
        self._db_path = db_path
        self._ensure_schema()

    def _connect(self) -> sqlite3.Connection:
        connection = sqlite3.connect(self._db_path, check_same_thread=False)
        connection.row_factory = sqlite3.Row
        return connection

    def _ensure_schema(self) -> None:
        with self._connect() as conn:
            conn.execute(
                """
                CREATE TABLE IF NOT EXISTS users (
                    id INTEGER PRIMARY KEY AUTOINCREMENT,
                    username TEXT UNIQUE NOT NULL,
                    email TEXT UNIQUE NOT NULL,
                    hashed_password TEXT NOT NULL,
                    financial_profile TEXT NOT NULL,
                    retained_file_path TEXT NOT NULL,
                    created_at INTEGER
                )
                """
            )


def _row_to_user(row: sqlite3.Row | None) -> dict | None:
    if not row:
        return None
    user = dict(row)
    user["financial_profile"] = json.loads(user["financial_profile"])
    return user


class SQLiteUserStore(SQLiteStoreBase):
    async def get_by_username(self, username: str) -> dict | None:
        with self._connect() as conn:
            row = conn.execute(
                "SELECT * FROM users WHERE username = ?",
                (username,),
            ).fetchone()
        return _row_to_user(row)

    async def get_by_email(self, email: str) -> dict | None:
        with self._connect() as conn:
            row = conn.execute(
                "SELECT * FROM users WHERE email = ?",
                (email.lower(),),
            ).fetchone()
        return _row_to_user(row)

    async def create_user(self, data: dict) -> dict:
        payload = dict(data)
        payload["email"] = payload["email"].lower()
        payload.setdefault("created_at", int(time.time()))
        try:
            with self._connect() as conn:
                conn.execute(
                    """
                    INSERT INTO users (username, email, hashed_password, financial_profile, retained_file_path, created_at)
                    VALUES (?, ?, ?, ?, ?, ?)
                    """,
                    (
                        payload["username"],
                        payload["email"],
                        payload["hashed_password"],
                        json.dumps(payload["financial_profile"]),
                        payload["retained_file_path"],
                        payload["created_at"],
                    ),
                )
                row = conn.execute(
                    "SELECT * FROM users WHERE username = ?",
                    (payload["username"],),
                ).fetchone()
        except sqlite3.IntegrityError as exc:
            raise ConflictError("Username or email already exists") from exc
        return _row_to_user(row)
