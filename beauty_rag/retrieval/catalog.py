"""Catalog Searcher.

Scores each catalog item by how many significant utterance words (length
> 3) occur in its name + description, and splits the catalog into the top
matches and everything else.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Iterable

from beauty_rag.config.constants import RAG
from beauty_rag.config.settings import Settings, get_settings
from beauty_rag.retrieval.formatting import (
    format_catalog_listing,
    format_relevant_products,
)
from beauty_rag.retrieval.records import CatalogItem, coerce_items
from beauty_rag.retrieval.text import normalize, significant_words


@dataclass(frozen=True)
class CatalogSearchResult:
    """Catalog split into best matches and the rest, input order kept in ``remainder``."""

    relevant: list[CatalogItem] = field(default_factory=list)
    remainder: list[CatalogItem] = field(default_factory=list)

    @property
    def is_empty(self) -> bool:
        return not self.relevant and not self.remainder


def score_item(keywords: list[str], item: CatalogItem) -> int:
    """Number of keywords found in the item text (repeated keywords count again)."""
    text = normalize(item.search_text)
    return sum(1 for keyword in keywords if keyword in text)


def search_catalog(
    user_message: str,
    items: Iterable[Any] | None,
    max_relevant: int | None = None,
) -> CatalogSearchResult:
    """Split the catalog into relevant items and the remainder.

    Args:
        user_message: Current user utterance
        items: CatalogItem instances, mappings or attribute objects
        max_relevant: Size of the relevant list (default: settings)

    Returns:
        CatalogSearchResult; ``relevant`` is empty when nothing scored
    """
    if max_relevant is None:
        max_relevant = get_settings().max_relevant_products
    catalog = coerce_items(items)
    keywords = significant_words(normalize(user_message), RAG.CATALOG_TOKEN_MIN_LENGTH)

    scored: list[tuple[int, int]] = []
    for index, item in enumerate(catalog):
        score = score_item(keywords, item)
        if score > 0:
            scored.append((score, index))
    scored.sort(key=lambda pair: pair[0], reverse=True)
    top = [index for _, index in scored[:max_relevant]]

    chosen = set(top)
    return CatalogSearchResult(
        relevant=[catalog[i] for i in top],
        remainder=[item for i, item in enumerate(catalog) if i not in chosen],
    )


def catalog_sections(
    result: CatalogSearchResult,
    settings: Settings | None = None,
) -> list[str]:
    """Render a search result as zero, one or two context sections.

    With relevant items: the detailed block, then a compact listing of the
    remainder if any. Without: a compact listing of the whole catalog.
    """
    settings = settings or get_settings()
    if not result.relevant:
        if not result.remainder:
            return []
        return [format_catalog_listing(result.remainder, settings.currency)]

    sections = [
        format_relevant_products(
            result.relevant,
            settings.currency,
            settings.product_description_chars,
        )
    ]
    if result.remainder:
        sections.append(
            format_catalog_listing(result.remainder, settings.currency, remainder=True)
        )
    return sections
