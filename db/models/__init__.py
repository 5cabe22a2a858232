"""
SQLAlchemy models for the onboarding database.

All models inherit from db.engine.Base for Alembic migrations.
"""

from db.models.user import User

__all__ = ["User"]
