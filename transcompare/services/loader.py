"""Load language folders into a comparison session.

Expected layout::

    <root>/
        en/translation.json
        fr/translation.json

A language whose file cannot be read or parsed keeps an error message and
an empty flat map; the other languages load normally.
"""

import json
import logging
from pathlib import Path
from typing import Any

from transcompare.config import settings
from transcompare.engine.path_codec import flatten
from transcompare.exceptions import TranslationRootError
from transcompare.models.enums import EmptyContainerPolicy
from transcompare.models.session import ComparisonSession, LanguageEntry

logger = logging.getLogger(__name__)


def read_translation_file(path: Path) -> Any:
    """Read and parse one translation document.

    Raises:
        OSError: If the file cannot be read
        ValueError: If it is not valid JSON, or its root is not an object/array

    """
    with open(path, encoding="utf-8") as f:
        data = json.load(f)
    if not isinstance(data, dict | list):
        msg = f"expected a JSON object or array, got {type(data).__name__}"
        raise ValueError(msg)
    return data


def list_language_dirs(root: Path) -> list[Path]:
    """List language folders under the root, sorted by name."""
    if not root.is_dir():
        msg = f"Translation root is not a directory: {root}"
        raise TranslationRootError(msg)
    return sorted((entry for entry in root.iterdir() if entry.is_dir()), key=lambda p: p.name)


def load_language(
    index: int,
    directory: Path,
    filename: str,
    policy: EmptyContainerPolicy,
) -> LanguageEntry:
    """Load one language folder, capturing any failure on the entry."""
    path = directory / filename
    try:
        content = flatten(read_translation_file(path), policy)
    except (OSError, ValueError, RecursionError) as e:
        logger.warning("Failed to load %s: %s", path, e)
        return LanguageEntry(
            id=index,
            name=directory.name,
            error=f"Error reading {filename}: {e}",
        )
    return LanguageEntry(id=index, name=directory.name, content=content)


def load_session(  # noqa: PLR0913
    root: str | Path,
    primary_language: str | None = None,
    filename: str | None = None,
    policy: EmptyContainerPolicy | None = None,
    treat_empty_as_missing: bool | None = None,
    session_id: str | None = None,
) -> ComparisonSession:
    """Build a session from every language folder under ``root``.

    Args:
        root: Folder holding one subfolder per language
        primary_language: Preferred primary language; ignored with a warning
            if it did not load
        filename: Translation file name inside each folder
        policy: Empty container policy for flattening
        treat_empty_as_missing: Whether ``""`` counts as absent
        session_id: Identifier to reuse when replacing an existing session

    Raises:
        TranslationRootError: If ``root`` is not a directory

    """
    root_path = Path(root)
    filename = filename or settings.translation_filename
    policy = policy or settings.empty_container_policy
    if treat_empty_as_missing is None:
        treat_empty_as_missing = settings.treat_empty_as_missing

    session = ComparisonSession(root=str(root_path), treat_empty_as_missing=treat_empty_as_missing)
    if session_id:
        session.id = session_id

    for index, directory in enumerate(list_language_dirs(root_path), start=1):
        session.add_language(load_language(index, directory, filename, policy))

    if primary_language:
        entry = session.languages.get(primary_language)
        if entry and not entry.has_error:
            session.primary_language = primary_language
        else:
            logger.warning(
                "Primary language %s not available, using %s",
                primary_language,
                session.primary_language,
            )

    failed = [entry.name for entry in session.languages.values() if entry.has_error]
    logger.info(
        "Loaded %d languages from %s (%d failed), primary=%s",
        len(session.languages),
        root_path,
        len(failed),
        session.primary_language,
    )
    return session
