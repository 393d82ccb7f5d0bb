"""User rows: the access contract the session and sign-up flows rely on.

Every method touches exactly one row of `users` and commits before it
returns, so a token written here is visible to the very next request.
"""
import logging

from sqlalchemy import select, update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from questkeeper.core.errors import DuplicateUsername, NotFound
from questkeeper.models.user import User

logger = logging.getLogger(__name__)


class CredentialStore:
    def __init__(self, db: AsyncSession):
        self.db = db

    async def create_user(self, username: str, password_hash: str, display_name: str) -> User:
        user = User(username=username, password_hash=password_hash, adventurer_name=display_name)
        self.db.add(user)
        try:
            await self.db.commit()
        except IntegrityError:
            await self.db.rollback()
            logger.info("Sign-up rejected: username already taken")
            raise DuplicateUsername()
        await self.db.refresh(user)
        return user

    async def find_by_username(self, username: str) -> User | None:
        result = await self.db.execute(select(User).where(User.username == username))
        return result.scalar_one_or_none()

    async def find_by_id(self, user_id: int) -> User | None:
        result = await self.db.execute(select(User).where(User.id == user_id))
        return result.scalar_one_or_none()

    async def get_token(self, user_id: int) -> str | None:
        """Read the stored token straight from the row, bypassing the identity map."""
        result = await self.db.execute(select(User.token).where(User.id == user_id))
        return result.scalar_one_or_none()

    async def set_token(self, user_id: int, token: str | None) -> None:
        await self.db.execute(
            update(User).where(User.id == user_id).values(token=token).execution_options(synchronize_session=False)
        )
        await self.db.commit()

    async def update_display_name(self, user_id: int, new_name: str) -> User:
        result = await self.db.execute(
            update(User)
            .where(User.id == user_id)
            .values(adventurer_name=new_name)
            .execution_options(synchronize_session=False)
        )
        await self.db.commit()
        if result.rowcount == 0:
            raise NotFound()
        user = await self.find_by_id(user_id)
        if user is None:
            raise NotFound()
        await self.db.refresh(user)
        return user
