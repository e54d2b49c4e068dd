"""Context Assembler.

Builds the retrieved-context block for one request. Sections are appended
in fixed priority order, each only when non-empty:

1. Brand documents (tenant knowledge)
2. Regional ingredients
3. Cosmetic ingredients
4. Concerns
5. Hair topics
6. Catalog (relevant products + remainder, or the full listing)

Sections are joined with ``RAG.SECTION_SEPARATOR``. When nothing matched
at all the fixed ``RAG.FALLBACK_CONTEXT`` sentence is returned instead.
"""

from __future__ import annotations

import time
from typing import Any, Iterable

from beauty_rag.config.constants import RAG
from beauty_rag.config.settings import Settings, get_settings
from beauty_rag.exceptions import InvalidInputError
from beauty_rag.knowledge.store import KnowledgeStore, get_knowledge_store
from beauty_rag.observability.logging import RetrievalLogger
from beauty_rag.observability.metrics import record_context, record_stage_matches
from beauty_rag.retrieval.catalog import catalog_sections, search_catalog
from beauty_rag.retrieval.documents import render_documents, select_documents
from beauty_rag.retrieval.matchers import (
    match_concerns,
    match_cosmetic_ingredients,
    match_hair_topics,
    match_regional_ingredients,
)
from beauty_rag.retrieval.records import coerce_documents, coerce_items


def get_relevant_context(
    user_message: str,
    catalog_items: Iterable[Any] | None = None,
    brand_documents: Iterable[Any] | None = None,
    *,
    store: KnowledgeStore | None = None,
    settings: Settings | None = None,
) -> str:
    """Assemble the context block for one user message.

    Args:
        user_message: Current user utterance
        catalog_items: Tenant catalog (instances, mappings or objects)
        brand_documents: Tenant knowledge documents
        store: Static knowledge (default: process-wide store)
        settings: Limits to apply (default: process settings)

    Returns:
        Non-empty sections joined by the separator, or the fallback sentence

    Raises:
        InvalidInputError: If user_message is None or not a string
    """
    if not isinstance(user_message, str):
        raise InvalidInputError(
            "user_message",
            f"expected string, got {type(user_message).__name__}",
        )
    start = time.perf_counter()
    store = store or get_knowledge_store()
    settings = settings or get_settings()

    documents = coerce_documents(brand_documents)
    items = coerce_items(catalog_items)
    log = RetrievalLogger(user_message)
    log.search_started(documents=len(documents), catalog_items=len(items))

    sections: list[str] = []

    selected = select_documents(user_message, documents, settings)
    if selected:
        sections.extend(render_documents(selected, settings))
        log.documents_selected(
            selected=len(selected),
            supplied=len(documents),
            titles_with_scores=[(s.document.display_title, s.score) for s in selected],
        )
        record_stage_matches("brand_documents", len(selected))

    for stage, matcher in (
        ("regional_ingredients", match_regional_ingredients),
        ("cosmetic_ingredients", match_cosmetic_ingredients),
        ("concerns", match_concerns),
        ("hair_topics", match_hair_topics),
    ):
        found = matcher(user_message, store)
        log.matched(stage, len(found))
        record_stage_matches(stage, len(found))
        sections.extend(found)

    if items:
        result = search_catalog(user_message, items, settings.max_relevant_products)
        log.catalog_searched(relevant=len(result.relevant), remainder=len(result.remainder))
        catalog = catalog_sections(result, settings)
        record_stage_matches("catalog", len(catalog))
        sections.extend(catalog)

    if not sections:
        log.context_fallback()
        record_context("fallback", 0, _elapsed_ms(start))
        return RAG.FALLBACK_CONTEXT

    context = RAG.SECTION_SEPARATOR.join(sections)
    log.context_assembled(sections=len(sections), chars=len(context))
    record_context("assembled", len(sections), _elapsed_ms(start))
    return context


def _elapsed_ms(start: float) -> float:
    return (time.perf_counter() - start) * 1000
