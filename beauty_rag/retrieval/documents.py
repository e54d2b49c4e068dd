"""Brand Document Ranker.

Scores tenant-authored documents against the utterance and keeps the best
ones. Scoring, per significant word of the utterance (length > 2):

    +3 per occurrence in the title (uncapped)
    +1 per occurrence in the content, at most 5 occurrences counted

Eligible documents are active and at least 30 characters long. When a
tenant has few eligible documents (5 or fewer by default) every one of
them is kept, zero-score documents with a floor score of 1; otherwise
zero-score documents are dropped. Survivors are sorted by descending score
with ties kept in input order (``list.sort`` is stable), then cut to the
top 7 and rendered with their content truncated to 2000 characters.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable

from beauty_rag.config.constants import RAG
from beauty_rag.config.settings import Settings, get_settings
from beauty_rag.retrieval.formatting import format_brand_document
from beauty_rag.retrieval.records import BrandDocument, coerce_documents
from beauty_rag.retrieval.text import normalize, significant_words


@dataclass(frozen=True)
class ScoredDocument:
    """A brand document with its relevance score."""

    document: BrandDocument
    score: int


def score_document(words: list[str], document: BrandDocument) -> int:
    """Lexical relevance of one document for the given normalized words."""
    title = normalize(document.title or "")
    content = normalize(document.content)
    score = 0
    for word in words:
        score += RAG.TITLE_HIT_WEIGHT * title.count(word)
        score += RAG.CONTENT_HIT_WEIGHT * min(content.count(word), RAG.CONTENT_HITS_CAP)
    return score


def select_documents(
    user_message: str,
    documents: Iterable[Any] | None,
    settings: Settings | None = None,
) -> list[ScoredDocument]:
    """Score, filter and order brand documents.

    Args:
        user_message: Current user utterance
        documents: BrandDocument instances, mappings or attribute objects
        settings: Limits to apply (default: process settings)

    Returns:
        At most ``settings.max_brand_documents`` scored documents, best first
    """
    settings = settings or get_settings()
    eligible = [
        doc for doc in coerce_documents(documents)
        if doc.is_eligible(settings.brand_document_min_length)
    ]
    if not eligible:
        return []

    words = significant_words(normalize(user_message), RAG.DOCUMENT_TOKEN_MIN_LENGTH)
    keep_all = len(eligible) <= settings.full_context_threshold

    scored: list[ScoredDocument] = []
    for doc in eligible:
        score = score_document(words, doc)
        if score > 0:
            scored.append(ScoredDocument(doc, score))
        elif keep_all:
            scored.append(ScoredDocument(doc, RAG.ZERO_SCORE_FLOOR))

    scored.sort(key=lambda s: s.score, reverse=True)
    return scored[: settings.max_brand_documents]


def render_documents(
    selected: Iterable[ScoredDocument],
    settings: Settings | None = None,
) -> list[str]:
    """Scored documents rendered as context sections, content truncated."""
    settings = settings or get_settings()
    return [
        format_brand_document(s.document, settings.brand_document_max_chars)
        for s in selected
    ]


def rank_documents(
    user_message: str,
    documents: Iterable[Any] | None,
    settings: Settings | None = None,
) -> list[str]:
    """Selected brand documents rendered as context sections."""
    settings = settings or get_settings()
    return render_documents(select_documents(user_message, documents, settings), settings)
