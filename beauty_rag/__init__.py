"""Beauty RAG v1.0 - Knowledge retrieval and prompt assembly for beauty sales agents."""

__version__ = "1.0.0"

# Export exception hierarchy for easy importing
from beauty_rag.exceptions import (
    BeautyRAGError,
    ConfigurationError,
    InvalidConfigError,
    KnowledgeStoreError,
    KnowledgeDataNotFoundError,
    KnowledgeDataInvalidError,
    InvalidInputError,
)
from beauty_rag.prompts import AgentProfile, build_expert_prompt
from beauty_rag.retrieval import BrandDocument, CatalogItem, get_relevant_context

__all__ = [
    "__version__",
    # Public API
    "get_relevant_context",
    "build_expert_prompt",
    "AgentProfile",
    "BrandDocument",
    "CatalogItem",
    # Base
    "BeautyRAGError",
    # Configuration
    "ConfigurationError",
    "InvalidConfigError",
    # Knowledge store
    "KnowledgeStoreError",
    "KnowledgeDataNotFoundError",
    "KnowledgeDataInvalidError",
    # Input
    "InvalidInputError",
]
