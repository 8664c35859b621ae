"""
Credential store — read access to login accounts plus startup seeding.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from hrdesk.core.security import PasswordHasher
from hrdesk.models.user import User

logger = logging.getLogger(__name__)


class CredentialStore:
    def __init__(self, db: AsyncSession) -> None:
        self.db = db

    async def find_by_username(self, username: str) -> User | None:
        result = await self.db.execute(select(User).where(User.username == username))
        return result.scalar_one_or_none()

    async def seed(
        self,
        accounts: Iterable[tuple[str, str, str]],
        hasher: PasswordHasher,
    ) -> int:
        """Insert each (username, password, role) that is not present yet.

        Existing accounts are never touched. Returns the number inserted.
        """
        created = 0
        for username, password, role in accounts:
            if await self.find_by_username(username) is not None:
                continue
            self.db.add(
                User(
                    username=username,
                    password_hash=await hasher.hash(password),
                    role=role,
                )
            )
            created += 1
            logger.info("Seeded %s account '%s' (password: <redacted>)", role, username)
        if created:
            await self.db.commit()
        return created
