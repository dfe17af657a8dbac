"""
Application configuration loaded from environment variables.
"""

from __future__ import annotations

import logging
from typing import Any, Dict

from pydantic import BaseModel, ConfigDict, Field, SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Centralised application settings."""

    model_config = SettingsConfigDict(
        env_file=(".env",),
        env_file_encoding="utf-8",
        extra="ignore",
    )

    ollama_base_url: str = Field(default="http://localhost:11434", alias="OLLAMA_BASE_URL")
    ollama_timeout_sec: float | None = Field(default=None, gt=0, alias="OLLAMA_TIMEOUT_SEC")
    embedding_model: str = Field(default="", alias="EMBEDDING_MODEL")
    chat_model: str = Field(default="", alias="CHAT_MODEL")

    max_number_of_notes: int = Field(default=5, gt=0, alias="MAX_NUMBER_OF_NOTES")

    vector_store_backend: str = Field(default="memory", alias="VECTOR_STORE_BACKEND")
    vault_dir: str = Field(default="./vault", alias="VAULT_DIR")
    reindex_on_startup: bool = Field(default=False, alias="REINDEX_ON_STARTUP")

    admin_token: SecretStr | None = Field(default=None, alias="ADMIN_TOKEN")

    app_host: str = Field(default="0.0.0.0", alias="APP_HOST")
    app_port: int = Field(default=8000, alias="APP_PORT")


settings = Settings()


class SearchConfig(BaseModel):
    """Validated values the search core runs with."""

    model_config = ConfigDict(frozen=True)

    embedding_model: str = ""
    max_number_of_notes: int = Field(default=5, gt=0)

    @property
    def is_configured(self) -> bool:
        return bool(self.embedding_model.strip())

    @classmethod
    def from_settings(cls, source: Settings | None = None) -> "SearchConfig":
        source = source or settings
        return cls(
            embedding_model=source.embedding_model,
            max_number_of_notes=source.max_number_of_notes,
        )


def setup_logging() -> logging.Logger:
    """
    Configure base logging for the app.
    """
    logging.basicConfig(
        level=logging.INFO,
        format="[%(asctime)s] [%(levelname)s] %(name)s - %(message)s",
    )
    return logging.getLogger("vault_search")


def public_settings() -> Dict[str, Any]:
    """
    Return settings without secrets for safe logging/inspection.
    """
    return settings.model_dump(
        exclude={"admin_token"},
        exclude_none=True,
    )


__all__ = ["Settings", "SearchConfig", "settings", "setup_logging", "public_settings"]
