"""Request and response models."""

from typing import Any

from pydantic import BaseModel, Field

from transcompare.engine.classifier import count_statuses
from transcompare.models.enums import Status
from transcompare.models.record import Record
from transcompare.models.session import ComparisonSession, LanguageEntry

__all__ = [
    "CreateSessionRequest",
    "ErrorResponse",
    "LanguageInfo",
    "RecordInfo",
    "RecordListResponse",
    "SessionListResponse",
    "SessionSummary",
    "SetPrimaryRequest",
    "StatusCounts",
    "SubtreeResponse",
]


class CreateSessionRequest(BaseModel):
    """Request to load a translation root folder."""

    root: str = Field(description="Folder holding one subfolder per language")
    primary_language: str | None = Field(default=None, description="Preferred primary language")


class SetPrimaryRequest(BaseModel):
    """Request to change the primary language (None clears it)."""

    language: str | None


class LanguageInfo(BaseModel):
    """One language of a session."""

    id: int
    name: str
    key_count: int
    error: str

    @classmethod
    def from_entry(cls, entry: LanguageEntry) -> "LanguageInfo":
        """Build from a language entry."""
        return cls(id=entry.id, name=entry.name, key_count=len(entry.content), error=entry.error)


class StatusCounts(BaseModel):
    """Number of records per status."""

    translated: int = 0
    incomplete: int = 0
    error: int = 0
    unclassified: int = 0

    @classmethod
    def from_counts(cls, counts: dict[Status, int]) -> "StatusCounts":
        """Build from ``count_statuses`` output."""
        return cls(
            translated=counts.get(Status.TRANSLATED, 0),
            incomplete=counts.get(Status.INCOMPLETE, 0),
            error=counts.get(Status.ERROR, 0),
            unclassified=counts.get(Status.UNCLASSIFIED, 0),
        )


class SessionSummary(BaseModel):
    """Session overview."""

    id: str
    root: str
    primary_language: str | None
    languages: list[LanguageInfo]
    key_count: int
    counts: StatusCounts

    @classmethod
    def from_session(cls, session: ComparisonSession) -> "SessionSummary":
        """Build from a session (recomputes its records)."""
        records = session.records()
        return cls(
            id=session.id,
            root=session.root,
            primary_language=session.primary_language,
            languages=[LanguageInfo.from_entry(entry) for entry in session.languages.values()],
            key_count=len(records),
            counts=StatusCounts.from_counts(count_statuses(records)),
        )


class SessionListResponse(BaseModel):
    """All sessions in the store."""

    sessions: list[SessionSummary]
    count: int


class RecordInfo(BaseModel):
    """One key with its per-language values.

    Missing values are the empty string in ``values`` and listed in
    ``missing``.
    """

    key: str
    values: dict[str, Any]
    missing: list[str]
    status: str

    @classmethod
    def from_record(cls, record: Record) -> "RecordInfo":
        """Build from a classified record."""
        return cls(**record.to_dict())


class RecordListResponse(BaseModel):
    """Search results plus counts over all records."""

    records: list[RecordInfo]
    count: int
    counts: StatusCounts


class SubtreeResponse(BaseModel):
    """Per-language nested views of one key."""

    key: str
    status: str
    subtrees: dict[str, Any]
    display: dict[str, Any]


class ErrorResponse(BaseModel):
    """Error body produced by ``HTTPException``."""

    detail: str
