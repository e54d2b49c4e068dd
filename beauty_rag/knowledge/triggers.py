"""Hand-authored trigger tables for the lexical matchers.

Each table maps a dataset key to the phrases that select it. Lookups go
through ``triggers_for``, which applies one fallback rule per table when a
key has no entry:

- cosmetic ingredients: the key with underscores as spaces, plus the
  record's display name
- concerns: the bare key

All phrases are compared lower-cased against the lower-cased utterance.
"""

from types import MappingProxyType
from typing import Mapping, Sequence

COSMETIC_SYNONYMS: Mapping[str, tuple[str, ...]] = MappingProxyType({
    "retinol": ("rétinol", "retinol", "vitamine a"),
    "acide_hyaluronique": ("acide hyaluronique", "hyaluronic", "ah"),
    "niacinamide": ("niacinamide", "vitamine b3", "nicotinamide"),
    "vitamine_c": ("vitamine c", "acide ascorbique", "ascorbic"),
    "acide_salicylique": ("acide salicylique", "bha", "salicylic"),
    "acide_glycolique": ("acide glycolique", "aha", "glycolic"),
})

CONCERN_KEYWORDS: Mapping[str, tuple[str, ...]] = MappingProxyType({
    "hyperpigmentation": (
        "tache", "taches", "hyperpigmentation", "pigmentation", "marque", "marques",
    ),
    "acne": (
        "acné", "acne", "bouton", "boutons", "imperfection", "imperfections",
        "point noir", "comédon",
    ),
    "secheresse": ("sèche", "seche", "sécheresse", "tiraille", "déshydraté", "deshydrate"),
    "vergetures": ("vergeture", "vergetures", "strie", "stries"),
    "melasma": (
        "mélasma", "melasma", "masque de grossesse", "grossesse", "tache brune",
        "taches brunes",
    ),
    "peau_sensible": (
        "sensible", "réactive", "reactive", "rougeur", "rougeurs", "irritation",
        "irritée",
    ),
})

# Any of these opens the hair-topic matcher. Includes the 4A/4B/4C codes.
HAIR_TRIGGERS: tuple[str, ...] = (
    "cheveux", "cheveu", "capillaire", "4a", "4b", "4c", "crépu", "frisé",
    "tresse", "chute", "casse", "cassant", "alopécie", "perte",
)

BREAKAGE_TRIGGERS: tuple[str, ...] = ("cassant", "casse", "tresse", "alopécie")
HAIR_LOSS_TRIGGERS: tuple[str, ...] = ("chute", "tombe", "perte")

BREAKAGE_SECTION = """💇 PROBLÉMATIQUE CAPILLAIRE : Casse et Alopécie de Traction
Description : Cheveux cassants et fragilisés suite aux coiffures protectrices (tresses, vanilles, tissages)
Causes : Tension excessive, manipulation répétée, manque d'hydratation, carence en protéines
Besoins : Hydratation profonde, protéines pour renforcer, scellage, repos capillaire
Ingrédients recommandés : Ricin noir, Fenugrec, Aloe vera, Protéines de soie, Beurre de karité
Routine suggérée : Pre-poo huile chaude + Shampoing doux + Masque protéiné 1x/semaine + Leave-in riche + Huile scellante
Timeline résultats : 4-8 semaines avec manipulation minimale
Conseils : Éviter coiffures trop serrées, espacer les tresses, protéger la nuit (bonnet satin)"""

HAIR_LOSS_SECTION = """💇 PROBLÉMATIQUE CAPILLAIRE : Chute de Cheveux
Description : Perte excessive de cheveux
Causes : Stress, hormones, carence nutritionnelle, manipulation excessive, produits agressifs
Ingrédients stimulants : Ricin noir, Fenugrec, Moringa, Bissap, Neem, Romarin
Routine : Massage cuir chevelu + Huile stimulante + Alimentation riche en fer/protéines
Timeline : 3-6 mois minimum pour voir résultats"""


def triggers_for(
    key: str,
    table: Mapping[str, Sequence[str]],
    default: Sequence[str],
) -> tuple[str, ...]:
    """Lower-cased trigger phrases for a key, or ``default`` when the table has none."""
    phrases = table.get(key, default)
    return tuple(p.lower() for p in phrases if p)


def cosmetic_triggers(key: str, display_name: str) -> tuple[str, ...]:
    return triggers_for(key, COSMETIC_SYNONYMS, (key.replace("_", " "), display_name))


def concern_triggers(key: str) -> tuple[str, ...]:
    return triggers_for(key, CONCERN_KEYWORDS, (key,))


def contains_any(text: str, phrases: Sequence[str]) -> bool:
    """True if any phrase occurs in ``text`` as a substring."""
    return any(phrase in text for phrase in phrases)
