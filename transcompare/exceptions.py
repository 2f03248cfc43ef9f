"""Exceptions raised by transcompare."""


class TranscompareError(Exception):
    """Base class for all transcompare errors."""


class KeyPathError(TranscompareError, ValueError):
    """A key path cannot be parsed or applied to a tree."""


class TranslationRootError(TranscompareError, OSError):
    """The translation root folder does not exist or is not a directory."""


class UnknownLanguageError(TranscompareError, LookupError):
    """A language identifier is not part of the current language set."""

    def __init__(self, language: str) -> None:
        """Store the offending language identifier."""
        super().__init__(f"Unknown language: {language}")
        self.language = language


class SessionNotFoundError(TranscompareError, LookupError):
    """No comparison session exists with the given identifier."""

    def __init__(self, session_id: str) -> None:
        """Store the offending session identifier."""
        super().__init__(f"Session not found: {session_id}")
        self.session_id = session_id
