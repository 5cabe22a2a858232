"""Auth configuration management."""

from __future__ import annotations

import os
from dataclasses import dataclass

# Importing the application config loads .env before anything below reads it
import config  # noqa: F401


@dataclass(frozen=True)
class AuthConfig:
    """Configuration values for auth flows."""

    # bcrypt work factor; 2**rounds iterations per hash
    BCRYPT_ROUNDS: int = int(os.getenv("BCRYPT_ROUNDS", "10"))

    # Auth store: "postgres" (production), "sqlite" (single host) or "memory" (testing)
    AUTH_STORE: str = os.getenv("AUTH_STORE", "postgres")
    AUTH_DB_FILE: str = os.getenv("AUTH_DB_FILE", "auth.db")
