"""Client-side session state: the token and username of the logged-in user."""

import logging
from pathlib import Path

from pydantic import BaseModel, ValidationError

logger = logging.getLogger(__name__)


class StoredSession(BaseModel):
    """On-disk form of a client session."""

    token: str
    username: str


class ClientSession:
    """Holds the bearer token issued at login.

    The token is only set by a successful login and only cleared by logout or
    by the server rejecting it. When ``path`` is given the session is written
    through to that file so it survives restarts.
    """

    def __init__(self, path: str | Path | None = None) -> None:
        self.path = Path(path) if path is not None else None
        self.token: str | None = None
        self.username: str | None = None

    @property
    def is_authenticated(self) -> bool:
        return self.token is not None

    def set(self, token: str, username: str) -> None:
        """Store the credentials returned by a successful login."""
        self.token = token
        self.username = username
        if self.path is not None:
            self.path.write_text(
                StoredSession(token=token, username=username).model_dump_json(),
                encoding="utf-8",
            )

    def clear(self) -> None:
        """Forget the current credentials."""
        self.token = None
        self.username = None
        if self.path is not None:
            self.path.unlink(missing_ok=True)

    def load(self) -> bool:
        """Restore a previously saved session, returning whether one was found."""
        if self.path is None or not self.path.exists():
            return False

        try:
            stored = StoredSession.model_validate_json(self.path.read_text(encoding="utf-8"))
        except (OSError, ValidationError) as e:
            logger.warning("Ignoring unreadable session file %s: %s", self.path, type(e).__name__)
            self.token = None
            self.username = None
            try:
                self.path.unlink(missing_ok=True)
            except OSError:
                logger.warning("Could not remove session file %s", self.path)
            return False

        self.token = stored.token
        self.username = stored.username
        return True

    def authorization_header(self) -> dict[str, str]:
        """Return the Authorization header for the held token, if any."""
        if self.token is None:
            return {}
        return {"Authorization": f"Bearer {self.token}"}
