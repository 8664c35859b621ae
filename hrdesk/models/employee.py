"""
Employee model — the HR record table.
"""

from __future__ import annotations

from sqlalchemy import Column, Float, Integer, String

from hrdesk.db.base import Base

DEFAULT_ATTENDANCE = "Present"


class Employee(Base):
    __tablename__ = "employees"
    __table_args__ = {"sqlite_autoincrement": True}

    id: int = Column(Integer, primary_key=True, index=True)  # type: ignore[assignment]
    name: str = Column(String(200), nullable=False)  # type: ignore[assignment]
    email: str = Column(String(320), nullable=False)  # type: ignore[assignment]
    role: str = Column(String(100), nullable=False)  # type: ignore[assignment]  # job title
    department: str = Column(String(100), nullable=False)  # type: ignore[assignment]
    salary: float = Column(Float, nullable=False)  # type: ignore[assignment]
    attendance: str = Column(  # type: ignore[assignment]
        String(50),
        nullable=False,
        default=DEFAULT_ATTENDANCE,
        server_default=DEFAULT_ATTENDANCE,
    )  # free text: Present | Absent | ...
    photo: str = Column(String(255), nullable=False, default="", server_default="")  # type: ignore[assignment]
