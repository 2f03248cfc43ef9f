"""API routes."""

from typing import Annotated

from fastapi import APIRouter, HTTPException, Query

from transcompare.api.responses import (
    CreateSessionRequest,
    ErrorResponse,
    RecordInfo,
    RecordListResponse,
    SessionListResponse,
    SessionSummary,
    SetPrimaryRequest,
    StatusCounts,
    SubtreeResponse,
)
from transcompare.engine.classifier import count_statuses
from transcompare.exceptions import (
    KeyPathError,
    SessionNotFoundError,
    TranslationRootError,
    UnknownLanguageError,
)
from transcompare.models.enums import StatusFilter
from transcompare.models.session import ComparisonSession
from transcompare.services.loader import load_session
from transcompare.services.render import render_display, render_subtree
from transcompare.services.search import MatchEngine
from transcompare.services.session_store import session_store

router = APIRouter(responses={404: {"model": ErrorResponse}})


def _get_session(session_id: str) -> ComparisonSession:
    try:
        return session_store.get(session_id)
    except SessionNotFoundError as e:
        raise HTTPException(status_code=404, detail="Session not found") from e


def _load(
    root: str,
    primary_language: str | None,
    session_id: str | None = None,
) -> ComparisonSession:
    try:
        return load_session(root, primary_language=primary_language, session_id=session_id)
    except TranslationRootError as e:
        raise HTTPException(status_code=400, detail=str(e)) from e


@router.post("/sessions")
def create_session(request: CreateSessionRequest) -> SessionSummary:
    """Load a translation root folder into a new session.

    Plain ``def``: folder reading runs in the threadpool, not on the event loop.
    """
    session = session_store.add(_load(request.root, request.primary_language))
    return SessionSummary.from_session(session)


@router.get("/sessions")
async def list_sessions() -> SessionListResponse:
    """List all sessions."""
    summaries = [SessionSummary.from_session(s) for s in session_store.sessions.values()]
    return SessionListResponse(sessions=summaries, count=len(summaries))


@router.get("/sessions/{session_id}")
async def get_session(session_id: str) -> SessionSummary:
    """Get a session overview.

    Args:
        session_id: Session identifier

    """
    return SessionSummary.from_session(_get_session(session_id))


@router.delete("/sessions/{session_id}")
async def delete_session(session_id: str) -> dict[str, str]:
    """Delete a session."""
    _get_session(session_id)
    session_store.remove(session_id)
    return {"status": "deleted", "id": session_id}


@router.post("/sessions/{session_id}/reload")
def reload_session(session_id: str) -> SessionSummary:
    """Re-read the session's folder and replace the session wholesale.

    The primary language is kept if it still loads.
    """
    current = _get_session(session_id)
    session = _load(current.root, current.primary_language, session_id=current.id)
    return SessionSummary.from_session(session_store.add(session))


@router.put("/sessions/{session_id}/primary")
async def set_primary_language(session_id: str, request: SetPrimaryRequest) -> SessionSummary:
    """Change the primary language used for classification."""
    session = _get_session(session_id)
    try:
        session.set_primary_language(request.language)
    except UnknownLanguageError as e:
        raise HTTPException(status_code=400, detail=str(e)) from e
    return SessionSummary.from_session(session)


@router.get("/sessions/{session_id}/records")
async def get_records(
    session_id: str,
    query: Annotated[str, Query(description="Fuzzy search over keys and values")] = "",
    status: Annotated[StatusFilter, Query(description="Status filter")] = StatusFilter.ALL,
) -> RecordListResponse:
    """Search and filter the classified records of a session.

    Counts always cover every record, regardless of query and filter.
    """
    session = _get_session(session_id)
    records = session.records()
    results = MatchEngine(records, session.language_names).find(query, status)
    return RecordListResponse(
        records=[RecordInfo.from_record(record) for record in results],
        count=len(results),
        counts=StatusCounts.from_counts(count_statuses(records)),
    )


@router.get("/sessions/{session_id}/subtree")
async def get_subtree(
    session_id: str,
    key: Annotated[str, Query(description="Key path")],
) -> SubtreeResponse:
    """Get the minimal nested tree of one key for every language."""
    session = _get_session(session_id)
    record = session.get_record(key)
    if record is None:
        raise HTTPException(status_code=404, detail="Key not found")

    treat_empty = session.treat_empty_as_missing
    try:
        subtrees = {
            language: render_subtree(record, language, treat_empty)
            for language in session.language_names
        }
        display = {
            language: render_display(record, language, treat_empty)
            for language in session.language_names
        }
    except KeyPathError as e:
        raise HTTPException(status_code=400, detail=str(e)) from e

    return SubtreeResponse(
        key=record.key,
        status=record.status.value,
        subtrees=subtrees,
        display=display,
    )
