"""Configuration module."""

from beauty_rag.config.constants import RAG, RAGConstants
from beauty_rag.config.settings import Settings, get_settings

__all__ = ["Settings", "get_settings", "RAGConstants", "RAG"]
