"""
User model — login accounts & role-based access control.
"""

from __future__ import annotations

from sqlalchemy import Column, Integer, String

from hrdesk.db.base import Base


class User(Base):
    __tablename__ = "users"

    id: int = Column(Integer, primary_key=True, index=True)  # type: ignore[assignment]
    username: str = Column(String(150), unique=True, nullable=False, index=True)  # type: ignore[assignment]
    password_hash: str = Column(String(128), nullable=False)  # type: ignore[assignment]
    role: str = Column(String(20), nullable=False, default="staff")  # type: ignore[assignment]  # admin | staff
