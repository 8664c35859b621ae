"""
Password hashing (bcrypt via passlib).

bcrypt is deliberately slow, so both hashing and verification run in the
threadpool and never block the event loop.
"""

from __future__ import annotations

from passlib.context import CryptContext
from starlette.concurrency import run_in_threadpool


class PasswordHasher:
    def __init__(self, rounds: int = 12) -> None:
        self._context = CryptContext(
            schemes=["bcrypt"],
            deprecated="auto",
            bcrypt__rounds=rounds,
        )

    async def hash(self, plain: str) -> str:
        return await run_in_threadpool(self._context.hash, plain)

    async def verify(self, plain: str, hashed: str) -> bool:
        return await run_in_threadpool(self._context.verify, plain, hashed)
