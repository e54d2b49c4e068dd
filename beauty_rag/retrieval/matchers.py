"""Lexical matchers over the static knowledge store.

Four independent passes, each a pure function of the utterance and the
store. Every hit produces one formatted section; there is no cap and no
ranking, and sections come out in dataset order.
"""

from __future__ import annotations

from typing import Iterator

from beauty_rag.knowledge.models import RegionalIngredient
from beauty_rag.knowledge.store import KnowledgeStore, get_knowledge_store
from beauty_rag.knowledge.triggers import (
    BREAKAGE_SECTION,
    BREAKAGE_TRIGGERS,
    HAIR_LOSS_SECTION,
    HAIR_LOSS_TRIGGERS,
    HAIR_TRIGGERS,
    concern_triggers,
    contains_any,
    cosmetic_triggers,
)
from beauty_rag.retrieval.formatting import (
    format_concern,
    format_cosmetic_ingredient,
    format_hair_type,
    format_regional_ingredient,
)
from beauty_rag.retrieval.text import normalize


def regional_aliases(key: str, ingredient: RegionalIngredient) -> Iterator[str]:
    """Normalized aliases of a regional ingredient, in test order.

    1. key with underscores as spaces
    2. scientific name
    3. each comma-separated common name
    4. each local name without its parenthetical suffix, e.g.
       "Nkuto (Twi)" -> "nkuto"

    Empty aliases are skipped; an empty string would match every utterance.
    """
    yield normalize(key.replace("_", " "))
    if ingredient.scientific_name:
        yield normalize(ingredient.scientific_name)
    for name in ingredient.common_names.split(","):
        if name.strip():
            yield normalize(name.strip())
    for local in ingredient.local_names:
        bare = local.split("(")[0].strip()
        if bare:
            yield normalize(bare)


def match_regional_ingredients(
    user_message: str,
    store: KnowledgeStore | None = None,
) -> list[str]:
    store = store or get_knowledge_store()
    text = normalize(user_message)
    return [
        format_regional_ingredient(ingredient)
        for key, ingredient in store.regional_ingredients.items()
        if any(alias in text for alias in regional_aliases(key, ingredient))
    ]


def match_cosmetic_ingredients(
    user_message: str,
    store: KnowledgeStore | None = None,
) -> list[str]:
    store = store or get_knowledge_store()
    text = normalize(user_message)
    return [
        format_cosmetic_ingredient(ingredient)
        for key, ingredient in store.cosmetic_ingredients.items()
        if contains_any(text, cosmetic_triggers(key, ingredient.name))
    ]


def match_concerns(
    user_message: str,
    store: KnowledgeStore | None = None,
) -> list[str]:
    store = store or get_knowledge_store()
    text = normalize(user_message)
    return [
        format_concern(concern)
        for key, concern in store.concerns.items()
        if contains_any(text, concern_triggers(key))
    ]


def match_hair_topics(
    user_message: str,
    store: KnowledgeStore | None = None,
) -> list[str]:
    """Hair sections, only when the utterance is hair-related at all.

    Order: breakage section, hair-loss section, then matching hair types.
    """
    store = store or get_knowledge_store()
    text = normalize(user_message)
    if not contains_any(text, HAIR_TRIGGERS):
        return []

    sections: list[str] = []
    if contains_any(text, BREAKAGE_TRIGGERS):
        sections.append(BREAKAGE_SECTION)
    if contains_any(text, HAIR_LOSS_TRIGGERS):
        sections.append(HAIR_LOSS_SECTION)
    sections.extend(
        format_hair_type(label, hair_type)
        for label, hair_type in store.hair_types.items()
        if normalize(label) in text
    )
    return sections
