"""Tests for the in-memory session store."""

import pytest

from transcompare.exceptions import SessionNotFoundError
from transcompare.models.session import ComparisonSession
from transcompare.services.session_store import SessionStore


class TestSessionStore:
    """Test adding, replacing and removing sessions."""

    def test_add_and_get(self):
        """Stored sessions are found by id."""
        store = SessionStore()
        session = store.add(ComparisonSession(root="a"))
        assert store.get(session.id) is session

    def test_replace(self):
        """A session with the same id replaces the old one wholesale."""
        store = SessionStore()
        old = store.add(ComparisonSession(root="a", id="s1"))
        new = store.add(ComparisonSession(root="a", id="s1"))
        assert store.get("s1") is new
        assert store.get("s1") is not old
        assert len(store.sessions) == 1

    def test_remove(self):
        """Removed sessions are gone."""
        store = SessionStore()
        store.add(ComparisonSession(id="s1"))
        store.remove("s1")
        with pytest.raises(SessionNotFoundError):
            store.get("s1")

    def test_remove_unknown(self):
        """Removing an unknown session fails."""
        with pytest.raises(SessionNotFoundError, match="Session not found: nope"):
            SessionStore().remove("nope")
