"""Shared fixtures: a translation root on disk."""

import json
from pathlib import Path

import pytest

EN = {
    "greeting": "Hello",
    "menu": {"open": "Open", "items": ["First", "Second"]},
    "empty": "",
}

FR = {
    "greeting": "Bonjour",
    "menu": {"open": "Ouvrir", "items": ["Premier"]},
    "extra": "Seulement en français",
}


def write_translation(root: Path, language: str, content: object) -> Path:
    """Write <root>/<language>/translation.json."""
    directory = root / language
    directory.mkdir(parents=True, exist_ok=True)
    path = directory / "translation.json"
    path.write_text(json.dumps(content, ensure_ascii=False), encoding="utf-8")
    return path


@pytest.fixture
def locales_root(tmp_path: Path) -> Path:
    """Root with en and fr, plus a de folder holding invalid JSON."""
    write_translation(tmp_path, "en", EN)
    write_translation(tmp_path, "fr", FR)
    broken = tmp_path / "de"
    broken.mkdir()
    (broken / "translation.json").write_text("{not json", encoding="utf-8")
    return tmp_path
