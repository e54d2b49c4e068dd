"""Tests for the Expert Prompt Builder.

Tests cover:
- First-turn greeting vs follow-up no-greeting rule
- Agent and tenant defaults
- Verbatim context insertion and block order
"""

from types import SimpleNamespace

from beauty_rag.config.constants import RAG
from beauty_rag.prompts import AgentProfile, build_expert_prompt
from beauty_rag.prompts import templates


class TestGreeting:
    """Tests for the first-turn branch."""

    def test_first_message_uses_welcome(self):
        """First turn opens with the configured welcome message."""
        agent = AgentProfile(name="Amina", welcome_message="Akwaba ! Je suis Amina.")
        prompt = build_expert_prompt(agent, "CTX", "Ahovi", is_first_message=True)
        assert 'Commence ta réponse par : "Akwaba ! Je suis Amina."' in prompt
        assert "INTERDIT DE SALUER" not in prompt

    def test_follow_up_forbids_greeting(self):
        """Later turns must not greet."""
        prompt = build_expert_prompt(AgentProfile(name="Amina"), "CTX", "Ahovi", is_first_message=False)
        assert "**INTERDIT DE SALUER.**" in prompt
        assert "Cette conversation COMMENCE" not in prompt

    def test_default_welcome_uses_name(self):
        """Without a welcome message the default one names the agent."""
        prompt = build_expert_prompt(AgentProfile(name="Amina"), "CTX")
        assert "Bonjour ! Je suis Amina, comment puis-je t'aider aujourd'hui ?" in prompt

    def test_first_message_default(self):
        """The first-turn branch is the default."""
        assert "Cette conversation COMMENCE" in build_expert_prompt(None, "CTX")


class TestDefaults:
    """Tests for missing agent and tenant fields."""

    def test_all_defaults(self):
        """An empty profile falls back to every default."""
        prompt = build_expert_prompt(AgentProfile(), "CTX")
        assert prompt.startswith("Tu es Conseillère, Vendeuse IA pour notre marque.")
        assert "## CATALOGUE ET CONNAISSANCES NOTRE MARQUE" in prompt
        assert "Ton : chaleureuse et professionnelle." in prompt
        assert "Bonjour ! Je suis Conseillère" in prompt

    def test_custom_profile(self):
        """Every profile field reaches the prompt."""
        agent = AgentProfile(name="Amina", title="Experte Beauté", personality="douce et rassurante")
        prompt = build_expert_prompt(agent, "CTX", "Ahovi Cosmetics", is_first_message=False)
        assert prompt.startswith("Tu es Amina, Experte Beauté pour Ahovi Cosmetics.")
        assert "## CATALOGUE ET CONNAISSANCES AHOVI COSMETICS" in prompt
        assert "Ton : douce et rassurante." in prompt

    def test_mapping_with_camel_case_welcome(self):
        """Mappings are accepted, including the welcomeMessage key."""
        agent = {"name": "Amina", "welcomeMessage": "Salut, c'est Amina !"}
        prompt = build_expert_prompt(agent, "CTX")
        assert 'Commence ta réponse par : "Salut, c\'est Amina !"' in prompt

    def test_empty_strings_use_defaults(self):
        """Blank fields behave like missing ones."""
        agent = SimpleNamespace(name="", title=None, personality="")
        profile = AgentProfile.coerce(agent)
        assert profile.resolved_name == templates.DEFAULT_AGENT_NAME
        assert profile.resolved_title == templates.DEFAULT_AGENT_TITLE
        assert profile.resolved_personality == templates.DEFAULT_PERSONALITY


class TestLayout:
    """Tests for block order and content."""

    def test_context_verbatim(self):
        """Context is inserted exactly as given, right after its header."""
        context = "📋 CATALOGUE COMPLET (1 produit) :\n• Savon noir"
        prompt = build_expert_prompt(AgentProfile(), context, "Ahovi")
        assert "## CATALOGUE ET CONNAISSANCES AHOVI\n\n" + context + "\n\n## EXPERTISE BEAUTÉ" in prompt

    def test_block_order(self):
        """Identity, context, expertise, rules, greeting, sales guide, style."""
        prompt = build_expert_prompt(AgentProfile(), "CTX")
        headers = [
            "## CATALOGUE ET CONNAISSANCES",
            "## EXPERTISE BEAUTÉ",
            "## RÈGLES ABSOLUES",
            "## RÈGLE CRITIQUE — SALUTATIONS",
            "## GUIDE DE VENTE",
            "## STYLE",
        ]
        positions = [prompt.index(h) for h in headers]
        assert positions == sorted(positions)
        assert prompt.index("## STYLE") > prompt.index("Cette conversation COMMENCE")

    def test_action_markers(self):
        """The sales guide names both action markers."""
        prompt = build_expert_prompt(AgentProfile(), "CTX")
        assert f"`{RAG.RECOMMEND_ACTION}`" in prompt
        assert f"`{RAG.ADD_TO_CART_ACTION}`" in prompt

    def test_fallback_context(self):
        """The fallback sentence is inserted like any other context."""
        prompt = build_expert_prompt(AgentProfile(), RAG.FALLBACK_CONTEXT)
        assert RAG.FALLBACK_CONTEXT in prompt
