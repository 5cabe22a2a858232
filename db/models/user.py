"""
User model.

One row per onboarded user: identity, password hash, the parsed financial
profile and the path of the retained upload, written together in one insert.
"""

from datetime import datetime

from sqlalchemy import (
    JSON,
    Column,
    DateTime,
    Integer,
    String,
    Text,
)

from db.engine import Base


class User(Base):
    """User account with its uploaded financial profile."""
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, autoincrement=True)
    username = Column(String(255), unique=True, nullable=False, index=True)
    email = Column(String(255), unique=True, nullable=False, index=True)
    hashed_password = Column(Text, nullable=False)
    financial_profile = Column(JSON, nullable=False)
    retained_file_path = Column(String(1024), nullable=False)
    created_at = Column(DateTime, default=datetime.utcnow)

    def __repr__(self):
        return f"<User(id={self.id}, username={self.username})>"
