"""Retrieval module.

Selects the facts relevant to one user message from tenant documents,
the tenant catalog and the static knowledge store, and assembles them
into a single context block.

Usage:
    from beauty_rag.retrieval import get_relevant_context

    context = get_relevant_context(
        "karité pour peau sèche",
        catalog_items=products,
        brand_documents=documents,
    )
"""

from beauty_rag.retrieval.catalog import (
    CatalogSearchResult,
    catalog_sections,
    search_catalog,
)
from beauty_rag.retrieval.context import get_relevant_context
from beauty_rag.retrieval.documents import (
    ScoredDocument,
    rank_documents,
    render_documents,
    select_documents,
)
from beauty_rag.retrieval.matchers import (
    match_concerns,
    match_cosmetic_ingredients,
    match_hair_topics,
    match_regional_ingredients,
)
from beauty_rag.retrieval.records import BrandDocument, CatalogItem

__all__ = [
    "BrandDocument",
    "CatalogItem",
    "CatalogSearchResult",
    "ScoredDocument",
    "catalog_sections",
    "get_relevant_context",
    "match_concerns",
    "match_cosmetic_ingredients",
    "match_hair_topics",
    "match_regional_ingredients",
    "rank_documents",
    "render_documents",
    "search_catalog",
    "select_documents",
]
