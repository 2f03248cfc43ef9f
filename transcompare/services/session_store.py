"""In-memory store of comparison sessions."""

import logging

from transcompare.exceptions import SessionNotFoundError
from transcompare.models.session import ComparisonSession

logger = logging.getLogger(__name__)


class SessionStore:
    """Holds the sessions served by the API.

    A session is replaced wholesale when its folder is reloaded; sessions
    are never mutated record by record.
    """

    def __init__(self) -> None:
        """Initialize an empty store."""
        self.sessions: dict[str, ComparisonSession] = {}

    def add(self, session: ComparisonSession) -> ComparisonSession:
        """Store a session, replacing any session with the same id."""
        replaced = session.id in self.sessions
        self.sessions[session.id] = session
        logger.info(
            "%s session %s (%d languages)",
            "Replaced" if replaced else "Created",
            session.id,
            len(session.languages),
        )
        return session

    def get(self, session_id: str) -> ComparisonSession:
        """Get a session.

        Raises:
            SessionNotFoundError: If no session has this id

        """
        session = self.sessions.get(session_id)
        if session is None:
            raise SessionNotFoundError(session_id)
        return session

    def remove(self, session_id: str) -> None:
        """Delete a session.

        Raises:
            SessionNotFoundError: If no session has this id

        """
        if self.sessions.pop(session_id, None) is None:
            raise SessionNotFoundError(session_id)
        logger.info("Removed session %s", session_id)

    def clear(self) -> None:
        """Delete every session."""
        self.sessions.clear()


# Global session store
session_store = SessionStore()
