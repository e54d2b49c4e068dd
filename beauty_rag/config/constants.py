"""Retrieval Constants - Fixed literals of the context and prompt contract.

Values here are part of the output format consumed by the downstream
model and by callers that parse it. Tunable limits live in settings.py.
"""

from dataclasses import dataclass
from typing import Final


@dataclass(frozen=True)
class RAGConstants:
    """Immutable retrieval and prompt contract values."""

    # Context assembly
    SECTION_SEPARATOR: Final[str] = "\n\n---\n\n"
    TRUNCATION_MARKER: Final[str] = "..."
    FALLBACK_CONTEXT: Final[str] = (
        "Aucun produit ni information spécifique trouvé pour cette requête. "
        "Donne des conseils beauté généraux basés sur tes connaissances en "
        "cosmétologie, sans inventer de produit."
    )

    # Tokenization floors (strictly greater than)
    DOCUMENT_TOKEN_MIN_LENGTH: Final[int] = 2  # Brand documents keep words of length > 2
    CATALOG_TOKEN_MIN_LENGTH: Final[int] = 3  # Catalog search keeps words of length > 3

    # Brand document scoring
    TITLE_HIT_WEIGHT: Final[int] = 3  # Per occurrence in title, uncapped
    CONTENT_HIT_WEIGHT: Final[int] = 1  # Per occurrence in content
    CONTENT_HITS_CAP: Final[int] = 5  # Max content occurrences counted per token
    ZERO_SCORE_FLOOR: Final[int] = 1  # Score assigned to kept zero-score docs
    DEFAULT_DOCUMENT_TITLE: Final[str] = "Document"

    # Regional ingredient formatting
    MAX_LISTED_BENEFITS: Final[int] = 5
    MAX_LISTED_ACTIVES: Final[int] = 4

    # Action markers understood by the downstream tool-calling layer
    RECOMMEND_ACTION: Final[str] = "recommend_product"
    ADD_TO_CART_ACTION: Final[str] = "add_to_cart"

    # Logging
    MESSAGE_PREVIEW_CHARS: Final[int] = 50


# Singleton instance for import convenience
RAG = RAGConstants()
