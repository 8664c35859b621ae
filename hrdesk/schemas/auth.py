"""Pydantic schemas for login / session endpoints."""

from __future__ import annotations

from pydantic import BaseModel


class LoginRequest(BaseModel):
    username: str = ""
    password: str = ""


class LoginResponse(BaseModel):
    success: bool
    role: str | None = None


class SuccessResponse(BaseModel):
    success: bool = True
