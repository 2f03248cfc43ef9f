"""Application configuration using Pydantic settings."""

from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from transcompare.constants import DEFAULT_SEARCH_THRESHOLD, TRANSLATION_FILENAME
from transcompare.models.enums import EmptyContainerPolicy


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="TRANSCOMPARE_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Server Configuration
    host: str = Field(default="127.0.0.1", description="Server host")
    port: int = Field(default=8000, description="Server port")
    environment: str = Field(default="development", description="Environment")
    frontend_url: str = Field(default="http://localhost:5173", description="Frontend URL")

    # Input
    translation_filename: str = Field(
        default=TRANSLATION_FILENAME, description="File read inside each language folder"
    )
    default_root: Optional[str] = Field(default=None, description="Folder loaded on startup")
    primary_language: Optional[str] = Field(default=None, description="Preferred primary language")

    # Comparison
    treat_empty_as_missing: bool = Field(
        default=True, description="Count empty-string values as missing"
    )
    empty_container_policy: EmptyContainerPolicy = Field(
        default=EmptyContainerPolicy.DROP, description="Drop or keep empty objects/arrays"
    )

    # Search
    search_threshold: float = Field(
        default=DEFAULT_SEARCH_THRESHOLD, ge=0.0, le=1.0, description="Fuzzy match threshold"
    )


# Global settings instance
settings = Settings()
