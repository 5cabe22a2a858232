"""
Database module for the onboarding server.

Provides the SQLAlchemy session factory and models for PostgreSQL persistence.
"""

from db.engine import SessionLocal, Base

__all__ = ["SessionLocal", "Base"]
