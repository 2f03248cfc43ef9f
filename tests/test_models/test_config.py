"""Tests for settings loaded from the environment."""

from transcompare.config import Settings
from transcompare.models.enums import EmptyContainerPolicy


class TestSettings:
    """Test defaults and environment overrides."""

    def test_defaults(self, monkeypatch):
        """Empty containers are dropped and empty strings count as missing."""
        monkeypatch.delenv("TRANSCOMPARE_TREAT_EMPTY_AS_MISSING", raising=False)
        settings = Settings(_env_file=None)
        assert settings.translation_filename == "translation.json"
        assert settings.treat_empty_as_missing is True
        assert settings.empty_container_policy is EmptyContainerPolicy.DROP
        assert settings.search_threshold == 0.3

    def test_environment_overrides(self, monkeypatch):
        """Prefixed environment variables override defaults."""
        monkeypatch.setenv("TRANSCOMPARE_EMPTY_CONTAINER_POLICY", "keep")
        monkeypatch.setenv("TRANSCOMPARE_TREAT_EMPTY_AS_MISSING", "false")
        monkeypatch.setenv("TRANSCOMPARE_PRIMARY_LANGUAGE", "fr")

        settings = Settings(_env_file=None)
        assert settings.empty_container_policy is EmptyContainerPolicy.KEEP
        assert settings.treat_empty_as_missing is False
        assert settings.primary_language == "fr"
