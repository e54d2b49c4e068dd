"""Knowledge module.

Static reference data used by the lexical matchers:

1. Regional ingredients (African botanicals and their local names)
2. Cosmetic ingredients (general actives)
3. Concerns (skin problems with causes and routines)
4. Hair types (3C to 4C)

Usage:
    from beauty_rag.knowledge import get_knowledge_store

    store = get_knowledge_store()
"""

from beauty_rag.knowledge.models import (
    Concern,
    CosmeticIngredient,
    HairType,
    RegionalIngredient,
)
from beauty_rag.knowledge.store import (
    KnowledgeStore,
    get_knowledge_store,
    load_knowledge_store,
)

__all__ = [
    "Concern",
    "CosmeticIngredient",
    "HairType",
    "KnowledgeStore",
    "RegionalIngredient",
    "get_knowledge_store",
    "load_knowledge_store",
]
