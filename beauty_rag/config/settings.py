"""Engine Settings - Environment-based configuration.

Uses Pydantic Settings for validation and type coercion. Every field has a
default, so the engine runs with no environment at all; variables only
override the defaults (prefix ``BEAUTY_RAG_``).
"""

from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from beauty_rag.exceptions import InvalidConfigError


class Settings(BaseSettings):
    """Engine settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="BEAUTY_RAG_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Logging
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(
        default="INFO", description="Logging level"
    )
    log_json: bool = Field(default=True, description="Render logs as JSON")

    # Static knowledge store
    knowledge_data_dir: Path | None = Field(
        default=None,
        description="Directory holding the four datasets (None = bundled data)",
    )

    # Brand documents
    max_brand_documents: int = Field(
        default=7, ge=1, le=50, description="Top-N brand documents kept"
    )
    brand_document_min_length: int = Field(
        default=30, ge=0, description="Minimum content length for eligibility"
    )
    brand_document_max_chars: int = Field(
        default=2000, ge=100, description="Content truncation length"
    )
    full_context_threshold: int = Field(
        default=5,
        ge=0,
        description="Eligible-document count at or below which every document is kept",
    )

    # Catalog
    max_relevant_products: int = Field(
        default=3, ge=1, le=20, description="Size of the most-relevant product block"
    )
    product_description_chars: int = Field(
        default=250, ge=20, description="Product description truncation length"
    )
    currency: str = Field(default="FCFA", description="Price suffix in catalog sections")

    def model_post_init(self, __context) -> None:
        """Validate values the field constraints cannot express."""
        if not self.currency.strip():
            raise InvalidConfigError("currency", self.currency, "must not be blank")


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
