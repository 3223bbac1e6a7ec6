from pathlib import Path
from typing import Optional

from pydantic import AliasChoices, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


PROJECT_ROOT = Path(__file__).resolve().parents[2]
ROOT_ENV = PROJECT_ROOT / ".env"
ROOT_ENV_LOCAL = PROJECT_ROOT / ".env.local"


class Settings(BaseSettings):
    """
    Thandi - Curriculum Guidance Configuration Registry
    Centralizes all environment variables using Pydantic Settings.
    """

    model_config = SettingsConfigDict(
        env_file=(str(ROOT_ENV), str(ROOT_ENV_LOCAL)),
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
    )

    # Infrastructure
    SUPABASE_URL: Optional[str] = Field(
        None, validation_alias=AliasChoices("SUPABASE_URL", "NEXT_PUBLIC_SUPABASE_URL")
    )
    SUPABASE_SERVICE_KEY: Optional[str] = Field(
        None,
        validation_alias=AliasChoices("SUPABASE_SERVICE_KEY", "SUPABASE_SERVICE_ROLE_KEY"),
    )

    # AI Models & Services
    OPENAI_API_KEY: Optional[str] = None
    EMBEDDING_MODEL: str = "text-embedding-ada-002"

    # Runtime
    LOG_LEVEL: str = "INFO"

    # Curriculum gates
    GATE_TABLE: str = "knowledge_chunks"
    GATE_CATEGORY: str = "curriculum_gates"
    GATE_FETCH_LIMIT: int = 50

    # Knowledge search
    KNOWLEDGE_SEARCH_ENABLED: bool = True
    KNOWLEDGE_SEARCH_RPC: str = "search_knowledge_chunks"
    KNOWLEDGE_MATCH_THRESHOLD: float = 0.3
    KNOWLEDGE_MATCH_COUNT: int = 3

    @field_validator("LOG_LEVEL", mode="before")
    @classmethod
    def _normalize_log_level(cls, value: str | None) -> str:
        return str(value or "INFO").strip().upper()


settings = Settings()  # type: ignore[call-arg]
