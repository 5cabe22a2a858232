"""PostgreSQL auth stores using SQLAlchemy."""

from __future__ import annotations

from typing import Any, Callable

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from auth.exceptions import ConflictError
from db.engine import SessionLocal
from db.models.user import User


def _to_dict(user: User) -> dict[str, Any]:
    return {
        "id": user.id,
        "username": user.username,
        "email": user.email,
        "hashed_password": user.hashed_password,
        "financial_profile": user.financial_profile,
        "retained_file_path": user.retained_file_path,
        "created_at": int(user.created_at.timestamp()) if user.created_at else None,
    }


class PostgresUserStore:
    """User store backed by PostgreSQL."""

    def __init__(self, session_factory: Callable[[], Session] | None = None) -> None:
        self._session_factory = session_factory or SessionLocal

    def _get_session(self) -> Session:
        return self._session_factory()

    async def get_by_username(self, username: str) -> dict | None:
        with self._get_session() as db:
            user = db.execute(
                select(User).where(User.username == username)
            ).scalar_one_or_none()
            if not user:
                return None
            return _to_dict(user)

    async def get_by_email(self, email: str) -> dict | None:
        with self._get_session() as db:
            user = db.execute(
                select(User).where(User.email == email.lower())
            ).scalar_one_or_none()
            if not user:
                return None
            return _to_dict(user)

    async def create_user(self, data: dict) -> dict:
        with self._get_session() as db:
            user = User(
                username=data["username"],
                email=data["email"].lower(),
                hashed_password=data["hashed_password"],
                financial_profile=data["financial_profile"],
                retained_file_path=data["retained_file_path"],
            )
            db.add(user)
            try:
                db.commit()
            except IntegrityError as exc:
                db.rollback()
                raise ConflictError("Username or email already exists") from exc
            db.refresh(user)
            return _to_dict(user)
