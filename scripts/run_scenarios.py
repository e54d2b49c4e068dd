#!/usr/bin/env python3
"""
Beauty RAG Scenario Runner

Replays canonical customer messages against a demo catalog and prints the
retrieved context and/or the assembled system prompt, with a check that the
expected knowledge and products show up.

Usage:
    python scripts/run_scenarios.py                 # Run all scenarios, context only
    python scripts/run_scenarios.py --scenario 2    # Run one scenario
    python scripts/run_scenarios.py --prompt        # Also print the full prompt
    python scripts/run_scenarios.py --follow-up     # Build follow-up (no greeting) prompts
"""

import argparse
import sys
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from beauty_rag import AgentProfile, __version__, build_expert_prompt, get_relevant_context
from beauty_rag.knowledge import get_knowledge_store
from beauty_rag.observability import bind_tenant, init_logging, set_build_info, unbind_tenant


DEMO_AGENT = AgentProfile(
    name="Amina",
    title="Experte Beauté",
    personality="chaleureuse, professionnelle et empathique",
    welcome_message="Bonjour ! Je suis Amina, votre experte beauté. Comment puis-je vous aider aujourd'hui ?",
)

DEMO_SHOP = "Ahovi Cosmetics"

DEMO_CATALOG = [
    {
        "id": "1",
        "title": "Sérum Éclaircissant au Bissap et Vitamine C",
        "price": 15000,
        "description": "Sérum anti-taches à base d'hibiscus (bissap) et vitamine C. Éclaircit le teint naturellement.",
        "url": "https://ahovi.com/serum-bissap",
    },
    {
        "id": "2",
        "title": "Beurre de Karité Pur Bio",
        "price": 8000,
        "description": "Beurre de karité 100% pur du Burkina Faso. Hydrate intensément peau et cheveux.",
        "url": "https://ahovi.com/karite-pur",
    },
    {
        "id": "3",
        "title": "Huile Capillaire Croissance Ricin Noir",
        "price": 12000,
        "description": "Huile de ricin noir jamaïcain enrichie au moringa. Stimule la pousse des cheveux.",
        "url": "https://ahovi.com/huile-ricin",
    },
    {
        "id": "4",
        "title": "Masque Visage Purifiant Argile & Neem",
        "price": 6500,
        "description": "Masque à l'argile africaine et neem. Purifie les peaux grasses et acnéiques.",
        "url": "https://ahovi.com/masque-argile",
    },
    {
        "id": "5",
        "title": "Crème Anti-Vergetures Cacao & Baobab",
        "price": 18000,
        "description": "Crème riche au beurre de cacao et huile de baobab. Prévient et atténue les vergetures.",
        "url": "https://ahovi.com/creme-vergetures",
    },
]

SCENARIOS = [
    {
        "name": "Peau sèche",
        "message": "J'ai la peau sèche, que me conseillez-vous ?",
        "expected": ["Sécheresse cutanée", "Acide hyaluronique", "Beurre de karité"],
    },
    {
        "name": "Taches de grossesse",
        "message": "J'ai des taches depuis ma grossesse",
        "expected": ["Mélasma", "Hyperpigmentation", "Niacinamide"],
    },
    {
        "name": "Casse après tresses",
        "message": "Mes cheveux sont cassants après les tresses",
        "expected": ["Alopécie de Traction", "Ricin noir", "Protéines"],
    },
    {
        "name": "Boutons",
        "message": "J'ai beaucoup de boutons, c'est de l'acné ?",
        "expected": ["Acné et imperfections", "Acide salicylique", "Neem"],
    },
    {
        "name": "Vergetures",
        "message": "Comment atténuer mes vergetures ?",
        "expected": ["Vergetures", "Beurre de cacao", "Anti-Vergetures"],
    },
]


def run_scenario(index: int, scenario: dict, show_prompt: bool, first_message: bool) -> bool:
    context = get_relevant_context(scenario["message"], catalog_items=DEMO_CATALOG)
    missing = [e for e in scenario["expected"] if e.lower() not in context.lower()]

    print("=" * 70)
    print(f"[{index}] {scenario['name']}: {scenario['message']}")
    print("-" * 70)
    print(context)
    if show_prompt:
        print("-" * 70)
        print(build_expert_prompt(DEMO_AGENT, context, DEMO_SHOP, first_message))
    print("-" * 70)
    if missing:
        print(f"MISSING: {', '.join(missing)}")
    else:
        print("OK: all expected elements present")
    return not missing


def main():
    parser = argparse.ArgumentParser(description="Beauty RAG Scenario Runner")
    parser.add_argument(
        "--scenario", type=int, choices=range(1, len(SCENARIOS) + 1),
        help="Run a single scenario by number",
    )
    parser.add_argument(
        "--prompt", action="store_true",
        help="Also print the assembled system prompt",
    )
    parser.add_argument(
        "--follow-up", action="store_true",
        help="Build prompts for a conversation already in progress",
    )
    parser.add_argument(
        "--log-level", default="WARNING",
        help="Log level for retrieval events",
    )
    args = parser.parse_args()

    init_logging(json_format=False, level=args.log_level)
    set_build_info(__version__)
    get_knowledge_store()

    selected = (
        [(args.scenario, SCENARIOS[args.scenario - 1])]
        if args.scenario
        else list(enumerate(SCENARIOS, 1))
    )
    bind_tenant(DEMO_SHOP)
    try:
        passed = sum(
            run_scenario(i, s, args.prompt, not args.follow_up) for i, s in selected
        )
    finally:
        unbind_tenant()

    print("=" * 70)
    print(f"{passed}/{len(selected)} scenario(s) passed")
    sys.exit(0 if passed == len(selected) else 1)


if __name__ == "__main__":
    main()
