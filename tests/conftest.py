"""Pytest configuration and shared fixtures."""

import pytest
import structlog

from beauty_rag.config.settings import Settings
from beauty_rag.knowledge.store import KnowledgeStore


@pytest.fixture(autouse=True)
def reset_structlog():
    """Restore default structlog configuration after each test."""
    yield
    structlog.reset_defaults()


@pytest.fixture
def test_settings():
    """Provide settings with defaults only (no .env, no environment)."""
    return Settings(_env_file=None)


@pytest.fixture
def mini_store() -> KnowledgeStore:
    """Small fixture store, independent of the bundled datasets."""
    return KnowledgeStore.from_mappings(
        regional_ingredients={
            "karite": {
                "common_names": "Beurre de karité, Karité",
                "scientific_name": "Vitellaria paradoxa",
                "origin": "Afrique de l'Ouest",
                "local_names": ["Nkuto (Twi)", "(Inconnu)"],
                "skin_benefits": ["b1", "b2", "b3", "b4", "b5", "b6"],
                "hair_benefits": ["Nourrit les cheveux crépus"],
                "primary_actives": ["a1", "a2", "a3", "a4", "a5"],
                "traditional_usage": "Soin du corps",
                "contraindications": "Allergie au latex",
                "recommended_skin_types": ["Sèche"],
                "usage_forms": ["Beurre"],
            },
            "ricin_noir": {
                "common_names": "Huile de ricin",
                "scientific_name": "Ricinus communis",
                "origin": "Afrique de l'Est",
                "local_names": ["Laraa (Haoussa)"],
                "primary_actives": ["Acide ricinoléique"],
            },
        },
        cosmetic_ingredients={
            "retinol": {
                "name": "Rétinol",
                "function": "Anti-âge",
                "skin_types": ["Mature"],
                "contraindications": "Grossesse",
                "usage": "Le soir",
                "ideal_concentration": "0,3 %",
            },
            "acide_azelaique": {
                "name": "Acide azélaïque",
                "function": "Anti-taches",
                "skin_types": ["Sensible"],
                "contraindications": "Aucune",
                "usage": "Matin et soir",
            },
        },
        concerns={
            "secheresse": {
                "description": "Sécheresse cutanée",
                "causes": ["Climat sec"],
                "recommended_ingredients": ["Beurre de karité"],
                "routine": "Crème riche",
                "results_timeline": "2 semaines",
            },
            "rides": {
                "description": "Rides et perte de fermeté",
                "causes": ["Âge"],
                "recommended_ingredients": ["Rétinol"],
                "routine": "Rétinol le soir",
            },
        },
        hair_types={
            "4C": {
                "description": "Cheveux crépus très serrés",
                "needs": ["Hydratation"],
                "key_products": ["Leave-in"],
                "wash_frequency": "Tous les 10 jours",
                "techniques": ["Méthode LOC"],
            },
            "4A": {
                "description": "Boucles serrées",
                "needs": ["Définition"],
                "key_products": ["Gel"],
                "wash_frequency": "1 fois par semaine",
            },
        },
    )


@pytest.fixture
def empty_store() -> KnowledgeStore:
    """Store with no static knowledge at all."""
    return KnowledgeStore.from_mappings()


@pytest.fixture
def demo_catalog() -> list[dict]:
    """Five-product catalog used across catalog and assembler tests."""
    return [
        {
            "id": "1",
            "title": "Sérum Éclaircissant au Bissap",
            "price": 15000,
            "description": "Sérum anti-taches à base d'hibiscus. Éclaircit le teint.",
            "category": "Visage",
            "url": "https://shop.test/serum-bissap",
        },
        {
            "id": "2",
            "title": "Beurre de Karité Pur",
            "price": 8000,
            "description": "Hydrate intensément peau et cheveux.",
            "category": "Corps",
            "url": "https://shop.test/karite",
        },
        {
            "id": "3",
            "title": "Huile Capillaire Ricin Noir",
            "price": 12000.0,
            "description": "Stimule la pousse des cheveux.",
            "category": "Cheveux",
        },
        {
            "id": "4",
            "name": "Masque Argile Neem",
            "price": 6500,
            "description": "Purifie les peaux grasses.",
        },
        {
            "id": "5",
            "title": "Crème Cacao Baobab",
            "price": None,
            "description": "Prévient les vergetures.",
        },
    ]


@pytest.fixture
def make_document():
    """Factory for brand document mappings, padding content past the eligibility floor."""

    def _make(title: str, content: str, **extra) -> dict:
        if len(content) < 30:
            content = content + " " + "." * (30 - len(content))
        return {"title": title, "content": content, **extra}

    return _make
