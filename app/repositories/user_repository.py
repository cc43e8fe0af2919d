from typing import Optional

from sqlalchemy import select, func
from sqlalchemy.ext.asyncio import AsyncSession

from app.db.models.user import User


class UserRepository:
    """Access layer for the users table."""

    def __init__(self, db: AsyncSession) -> None:
        self._db = db

    async def find_by_email(self, email: str) -> Optional[User]:
        """Active (not deleted) user with the given email."""
        result = await self._db.execute(
            select(User).where(User.email == email, User.deleted_date.is_(None))
        )
        return result.scalars().first()

    async def save(self, user: User) -> User:
        self._db.add(user)
        await self._db.flush()
        return user

    async def count_active(self) -> int:
        result = await self._db.execute(
            select(func.count()).select_from(User).where(User.deleted_date.is_(None))
        )
        return result.scalar_one()
