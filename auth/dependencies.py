"""Auth dependency helpers."""

from __future__ import annotations

from fastapi import Depends

from auth.config import AuthConfig
from auth.interfaces.user_store import UserStore
from auth.services.auth_service import AuthService
from auth.services.onboarding_service import OnboardingService
from auth.services.profile_service import ProfileService
from auth.stores.memory_store import MemoryUserStore
from auth.stores.sqlite_store import SQLiteUserStore
from config import Config
from services.file_storage import FileStorage


_memory_user_store = MemoryUserStore()
_sqlite_user_store: SQLiteUserStore | None = None
_postgres_user_store = None


def get_user_store() -> UserStore:
    """Get the user store based on AUTH_STORE config."""
    global _sqlite_user_store, _postgres_user_store
    if AuthConfig.AUTH_STORE == "postgres":
        if _postgres_user_store is None:
            # Imported lazily so the engine is only built when postgres is selected
            from auth.stores.postgres_store import PostgresUserStore

            _postgres_user_store = PostgresUserStore()
        return _postgres_user_store
    if AuthConfig.AUTH_STORE == "sqlite":
        if _sqlite_user_store is None:
            _sqlite_user_store = SQLiteUserStore(Config.get_db_path(AuthConfig.AUTH_DB_FILE))
        return _sqlite_user_store
    # Fallback to memory store for development/testing
    return _memory_user_store


def get_file_storage() -> FileStorage:
    return FileStorage.from_config()


def get_onboarding_service(
    user_store: UserStore = Depends(get_user_store),
    file_storage: FileStorage = Depends(get_file_storage),
) -> OnboardingService:
    return OnboardingService(user_store=user_store, file_storage=file_storage)


def get_auth_service(user_store: UserStore = Depends(get_user_store)) -> AuthService:
    return AuthService(user_store=user_store)


def get_profile_service(user_store: UserStore = Depends(get_user_store)) -> ProfileService:
    return ProfileService(user_store=user_store)
