"""Credential store: registration, login verification and user removal."""

import logging
from datetime import UTC, datetime

from fastapi import Depends
from sqlalchemy import delete, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from tinyblog.database import get_db
from tinyblog.models.user import User
from tinyblog.services.errors import (
    DuplicateUsernameError,
    InvalidCredentialsError,
    InvalidInputError,
    NotFoundError,
    UnknownUserError,
)
from tinyblog.utils.security import dummy_password_hash, hash_password, verify_password

logger = logging.getLogger(__name__)


class CredentialStore:
    """Persists user identities and checks their passwords."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def _find_by_username(self, username: str) -> User | None:
        result = await self.session.execute(select(User).where(User.username == username))
        return result.scalar_one_or_none()

    async def register(self, username: str, password: str) -> User:
        """Create a user with a bcrypt hash of the password.

        Raises:
            InvalidInputError: If username or password is empty
            DuplicateUsernameError: If the username is already taken
        """
        username = (username or "").strip()
        if not username or not password:
            raise InvalidInputError("Username and password are required")

        if await self._find_by_username(username) is not None:
            raise DuplicateUsernameError()

        user = User(
            username=username,
            password_hash=hash_password(password),
            created_at=datetime.now(UTC),
        )
        self.session.add(user)
        try:
            await self.session.flush()
        except IntegrityError:
            # Lost a race with a concurrent registration of the same name
            await self.session.rollback()
            raise DuplicateUsernameError() from None

        await self.session.commit()
        logger.info("Registered user %s (id=%d)", user.username, user.id)
        return user

    async def verify(self, username: str, password: str) -> User:
        """Return the user if the password matches.

        Raises:
            UnknownUserError: If no such username exists
            InvalidCredentialsError: If the password is wrong
        """
        user = await self._find_by_username((username or "").strip())

        if user is None:
            verify_password(password, dummy_password_hash())
            logger.info("Login failed: unknown user")
            raise UnknownUserError()

        if not verify_password(password, user.password_hash):
            logger.info("Login failed: wrong password for user id=%d", user.id)
            raise InvalidCredentialsError()

        return user

    async def delete(self, user_id: int) -> None:
        """Delete a user; the database removes all of their posts.

        Raises:
            NotFoundError: If the user does not exist
        """
        result = await self.session.execute(delete(User).where(User.id == user_id))
        if result.rowcount == 0:
            raise NotFoundError("User not found")

        await self.session.commit()
        logger.info("Deleted user id=%d and their posts", user_id)


async def get_credential_store(db: AsyncSession = Depends(get_db)) -> CredentialStore:
    """Factory function to create a credential store for the request's session.

    Can be used as a FastAPI dependency.
    """
    return CredentialStore(db)
