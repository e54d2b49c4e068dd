"""Tests for the Context Assembler.

Tests cover:
- Fallback sentence when nothing matches
- Section order and separators
- End-to-end requests against the bundled knowledge
- Input validation and retrieval logging
"""

from types import SimpleNamespace

import pytest
from structlog.testing import capture_logs

from beauty_rag.config.constants import RAG
from beauty_rag.exceptions import InvalidInputError
from beauty_rag.knowledge.store import load_knowledge_store
from beauty_rag.retrieval.context import get_relevant_context
from beauty_rag.retrieval.records import BrandDocument

SEP = "\n\n---\n\n"


@pytest.fixture(scope="module")
def bundled_store():
    return load_knowledge_store()


class TestFallback:
    """Tests for the no-match case."""

    def test_fallback_sentence(self, mini_store, test_settings):
        """Nothing relevant returns the fixed advice sentence."""
        inactive = {"title": "Old", "content": "x" * 100, "is_active": False}
        context = get_relevant_context(
            "bonjour", [], [inactive], store=mini_store, settings=test_settings
        )
        assert context == (
            "Aucun produit ni information spécifique trouvé pour cette requête. "
            "Donne des conseils beauté généraux basés sur tes connaissances en "
            "cosmétologie, sans inventer de produit."
        )
        assert context == RAG.FALLBACK_CONTEXT

    def test_fallback_bundled(self, bundled_store, test_settings):
        """A greeting matches nothing in the bundled knowledge."""
        context = get_relevant_context("bonjour", store=bundled_store, settings=test_settings)
        assert context == RAG.FALLBACK_CONTEXT

    def test_empty_message(self, empty_store, test_settings):
        """An empty message is valid and falls back."""
        assert get_relevant_context("", store=empty_store, settings=test_settings) == (
            RAG.FALLBACK_CONTEXT
        )

    def test_fallback_logged(self, empty_store, test_settings):
        """The fallback is logged as a warning."""
        with capture_logs() as logs:
            get_relevant_context("bonjour", store=empty_store, settings=test_settings)
        fallback = [e for e in logs if e["event"] == "context_fallback"]
        assert fallback and fallback[0]["log_level"] == "warning"


class TestAssembly:
    """Tests for joining sections."""

    def test_karite_dry_skin(self, bundled_store, test_settings):
        """Shea and dry-skin sections, in that order, and nothing else."""
        context = get_relevant_context(
            "karité pour peau sèche", store=bundled_store, settings=test_settings
        )
        sections = context.split(SEP)
        assert len(sections) == 2
        assert sections[0].startswith("🌍 INGRÉDIENT AFRICAIN : Beurre de karité")
        assert sections[1].startswith("🎯 PROBLÉMATIQUE : Sécheresse cutanée")

    def test_no_outer_separators(self, mini_store, test_settings, demo_catalog):
        """Separators only appear between sections."""
        context = get_relevant_context(
            "karité", demo_catalog, store=mini_store, settings=test_settings
        )
        assert not context.startswith(SEP)
        assert not context.endswith(SEP)
        assert SEP + SEP not in context

    def test_section_order(self, mini_store, test_settings, demo_catalog, make_document):
        """Documents, regional, cosmetic, concern, hair, then catalog."""
        context = get_relevant_context(
            "karité et rétinol pour peau sèche et cheveux 4c",
            demo_catalog,
            [make_document("Notre marque", "Fabriqué à Lomé depuis 2015.")],
            store=mini_store,
            settings=test_settings,
        )
        markers = [
            "📖 CONNAISSANCE MARQUE",
            "🌍 INGRÉDIENT AFRICAIN",
            "💄 INGRÉDIENT COSMÉTIQUE",
            "🎯 PROBLÉMATIQUE",
            "💇 TYPE DE CHEVEUX",
            "🎯 PRODUITS LES PLUS PERTINENTS",
            "📋 AUTRES PRODUITS DISPONIBLES",
        ]
        positions = [context.index(marker) for marker in markers]
        assert positions == sorted(positions)
        assert len(context.split(SEP)) == len(markers)

    def test_catalog_only(self, empty_store, test_settings, demo_catalog):
        """A catalog alone always yields a listing, never the fallback."""
        context = get_relevant_context(
            "bonjour", demo_catalog, store=empty_store, settings=test_settings
        )
        assert context.startswith("📋 CATALOGUE COMPLET (5 produits) :")

    def test_catalog_relevant_and_rest(self, empty_store, test_settings, demo_catalog):
        """Relevant products come first, the rest is listed after."""
        context = get_relevant_context(
            "karité pour peau sèche", demo_catalog, store=empty_store, settings=test_settings
        )
        relevant, listing = context.split(SEP)
        assert "**Beurre de Karité Pur**" in relevant
        assert "**Masque Argile Neem**" in relevant
        assert listing.startswith("📋 AUTRES PRODUITS DISPONIBLES (3 produits) :")

    def test_idempotent(self, mini_store, test_settings, demo_catalog, make_document):
        """The same inputs always give the same context."""
        docs = [make_document("Livraison", "Livraison offerte dès 20000 FCFA.")]
        first = get_relevant_context(
            "karité", demo_catalog, docs, store=mini_store, settings=test_settings
        )
        second = get_relevant_context(
            "karité", demo_catalog, docs, store=mini_store, settings=test_settings
        )
        assert first == second

    def test_object_inputs(self, empty_store, test_settings):
        """Attribute objects work for documents and products."""
        doc = SimpleNamespace(title="Histoire", content="Une marque née à Abidjan en 2018.")
        item = SimpleNamespace(name="Savon noir", price=3000, category="Corps")
        context = get_relevant_context(
            "savon", [item], [doc], store=empty_store, settings=test_settings
        )
        sections = context.split(SEP)
        assert sections[0] == "📖 CONNAISSANCE MARQUE — Histoire\nUne marque née à Abidjan en 2018."
        assert "**Savon noir**\n  Prix : 3000 FCFA\n" in sections[1]

    def test_malformed_document_instance_skipped(self, empty_store, test_settings):
        """A document instance without content is skipped, not raised."""
        docs = [BrandDocument(content=None, title="Vide")]
        context = get_relevant_context("bonjour", None, docs, store=empty_store, settings=test_settings)
        assert context == RAG.FALLBACK_CONTEXT

    def test_inputs_not_mutated(self, mini_store, test_settings, demo_catalog):
        """Caller lists are left as they were."""
        before = [dict(item) for item in demo_catalog]
        get_relevant_context("karité", demo_catalog, store=mini_store, settings=test_settings)
        assert demo_catalog == before


class TestValidation:
    """Tests for invalid arguments."""

    @pytest.mark.parametrize("message", [None, 42, b"karite"])
    def test_non_string_message(self, message, empty_store, test_settings):
        """A non-string message is rejected."""
        with pytest.raises(InvalidInputError) as exc_info:
            get_relevant_context(message, store=empty_store, settings=test_settings)
        assert exc_info.value.argument == "user_message"


class TestLogging:
    """Tests for retrieval log events."""

    def test_stage_counts(self, mini_store, test_settings, demo_catalog):
        """Matched stages and the catalog split are logged."""
        with capture_logs() as logs:
            get_relevant_context(
                "karité pour peau sèche", demo_catalog, store=mini_store, settings=test_settings
            )
        events = {e["event"]: e for e in logs}
        assert events["regional_ingredients_matched"]["count"] == 1
        assert events["concerns_matched"]["count"] == 1
        assert "hair_topics_matched" not in events
        assert events["catalog_searched"]["relevant"] == 2
        assert events["context_assembled"]["sections"] == 4

    def test_document_scores(self, empty_store, test_settings, make_document):
        """Selected documents are logged with their titles and scores."""
        docs = [make_document("Livraison", "Sous 48h."), make_document("Retours", "Sous 7 jours.")]
        with capture_logs() as logs:
            get_relevant_context("livraison", None, docs, store=empty_store, settings=test_settings)
        selected = next(e for e in logs if e["event"] == "brand_documents_selected")
        assert selected["scores"] == [
            {"title": "Livraison", "score": 3},
            {"title": "Retours", "score": 1},
        ]
