"""Pydantic schemas for Employee records."""

from __future__ import annotations

from pydantic import BaseModel, Field, field_validator


class EmployeeCreate(BaseModel):
    name: str
    email: str
    role: str
    department: str
    salary: float = Field(allow_inf_nan=False)

    @field_validator("name", "email", "role", "department")
    @classmethod
    def _strip(cls, v: str) -> str:
        return v.strip()


class EmployeeRead(BaseModel):
    id: int
    name: str
    email: str
    role: str
    department: str
    salary: float
    attendance: str
    photo: str

    model_config = {"from_attributes": True}


class EmployeeCreated(BaseModel):
    success: bool = True
    id: int


class AttendanceUpdate(BaseModel):
    status: str


class HealthResponse(BaseModel):
    db: bool
