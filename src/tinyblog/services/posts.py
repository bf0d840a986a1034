"""Post service: CRUD over posts with ownership enforcement."""

import logging
from collections.abc import Sequence
from datetime import UTC, datetime

from fastapi import Depends
from sqlalchemy import delete, select, update
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import joinedload

from tinyblog.database import get_db
from tinyblog.models.post import Post
from tinyblog.services.errors import InvalidInputError, NotFoundError, NotFoundOrUnauthorizedError

logger = logging.getLogger(__name__)


def _require_text(title: str, content: str) -> None:
    if not (title or "").strip() or not (content or "").strip():
        raise InvalidInputError("Title and content are required")


class PostService:
    """Reads and writes posts on behalf of an authenticated subject.

    Mutations are single statements whose WHERE clause includes the ownership
    predicate, so the check and the write happen atomically in the database.
    """

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    def _select_with_author(self):
        return (
            select(Post)
            .options(joinedload(Post.author))
            .execution_options(populate_existing=True)
        )

    async def list_all(self) -> Sequence[Post]:
        """Return every post with its author, newest first."""
        query = self._select_with_author().order_by(Post.created_at.desc(), Post.id.desc())
        result = await self.session.execute(query)
        return result.scalars().all()

    async def get_by_id(self, post_id: int) -> Post:
        """Fetch a single post with its author.

        Raises:
            NotFoundError: If no post has this ID
        """
        result = await self.session.execute(self._select_with_author().where(Post.id == post_id))
        post = result.scalar_one_or_none()
        if post is None:
            raise NotFoundError("Post not found")
        return post

    async def create(self, subject_id: int, title: str, content: str) -> Post:
        """Create a post owned by the subject.

        Raises:
            InvalidInputError: If title or content is empty
        """
        _require_text(title, content)

        now = datetime.now(UTC)
        post = Post(
            title=title,
            content=content,
            author_id=subject_id,
            created_at=now,
            updated_at=now,
        )
        self.session.add(post)
        await self.session.flush()
        post_id = post.id
        await self.session.commit()

        logger.info("User id=%d created post id=%d", subject_id, post_id)
        return await self.get_by_id(post_id)

    async def update(self, subject_id: int, post_id: int, title: str, content: str) -> Post:
        """Replace the title and content of a post the subject owns.

        Raises:
            InvalidInputError: If title or content is empty
            NotFoundOrUnauthorizedError: If the post is missing or not the subject's
        """
        _require_text(title, content)

        stmt = (
            update(Post)
            .where(Post.id == post_id, Post.author_id == subject_id)
            .values(title=title, content=content, updated_at=datetime.now(UTC))
            .execution_options(synchronize_session=False)
        )
        result = await self.session.execute(stmt)
        if result.rowcount == 0:
            logger.info("User id=%d denied update of post id=%d", subject_id, post_id)
            raise NotFoundOrUnauthorizedError()

        await self.session.commit()
        logger.info("User id=%d updated post id=%d", subject_id, post_id)
        return await self.get_by_id(post_id)

    async def delete(self, subject_id: int, post_id: int) -> None:
        """Delete a post the subject owns.

        Raises:
            NotFoundOrUnauthorizedError: If the post is missing or not the subject's
        """
        stmt = (
            delete(Post)
            .where(Post.id == post_id, Post.author_id == subject_id)
            .execution_options(synchronize_session=False)
        )
        result = await self.session.execute(stmt)
        if result.rowcount == 0:
            logger.info("User id=%d denied delete of post id=%d", subject_id, post_id)
            raise NotFoundOrUnauthorizedError()

        await self.session.commit()
        logger.info("User id=%d deleted post id=%d", subject_id, post_id)


async def get_post_service(db: AsyncSession = Depends(get_db)) -> PostService:
    """Factory function to create a post service for the request's session.

    Can be used as a FastAPI dependency.
    """
    return PostService(db)
