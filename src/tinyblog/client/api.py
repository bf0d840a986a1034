"""Async client for the Tinyblog API."""

import logging
from typing import Any

from tinyblog.client.base import AuthenticationError, BaseAPIClient
from tinyblog.client.session import ClientSession
from tinyblog.schemas.post import MessageResponse, PostResponse
from tinyblog.schemas.user import Token, UserResponse

logger = logging.getLogger(__name__)

DEFAULT_API_URL = "http://localhost:8000/api"


class BlogClient(BaseAPIClient):
    """Client for registering, logging in, and managing posts.

    Every request carries the session's bearer token. A 401 from the server
    clears the session before the error is raised, so callers are sent back
    to the login step.
    """

    def __init__(
        self,
        base_url: str = DEFAULT_API_URL,
        session: ClientSession | None = None,
        timeout: float = 30.0,
    ) -> None:
        super().__init__(base_url=base_url, timeout=timeout)
        self.session = session if session is not None else ClientSession()

    async def _authorized(
        self, method: str, endpoint: str, json: dict[str, Any] | None = None
    ) -> Any:
        try:
            return await self._request(
                method,
                endpoint,
                json=json,
                headers=self.session.authorization_header(),
            )
        except AuthenticationError:
            logger.info("Session for %s rejected by server; clearing", self.session.username)
            self.session.clear()
            raise

    async def register(self, username: str, password: str) -> UserResponse:
        """Create an account. Does not log in."""
        data = await self._request(
            "POST", "/auth/register", json={"username": username, "password": password}
        )
        return UserResponse.model_validate(data)

    async def login(self, username: str, password: str) -> Token:
        """Log in and store the issued token in the session."""
        data = await self._request(
            "POST", "/auth/login", json={"username": username, "password": password}
        )
        token = Token.model_validate(data)
        self.session.set(token.token, token.username)
        return token

    def logout(self) -> None:
        """Drop the stored token. Tokens are not revoked server-side."""
        self.session.clear()

    async def list_posts(self) -> list[PostResponse]:
        data = await self._authorized("GET", "/posts")
        return [PostResponse.model_validate(item) for item in data]

    async def get_post(self, post_id: int) -> PostResponse:
        data = await self._authorized("GET", f"/posts/{post_id}")
        return PostResponse.model_validate(data)

    async def create_post(self, title: str, content: str) -> PostResponse:
        data = await self._authorized("POST", "/posts", json={"title": title, "content": content})
        return PostResponse.model_validate(data)

    async def update_post(self, post_id: int, title: str, content: str) -> PostResponse:
        data = await self._authorized(
            "PUT", f"/posts/{post_id}", json={"title": title, "content": content}
        )
        return PostResponse.model_validate(data)

    async def delete_post(self, post_id: int) -> MessageResponse:
        data = await self._authorized("DELETE", f"/posts/{post_id}")
        return MessageResponse.model_validate(data)
