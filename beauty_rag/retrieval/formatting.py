"""Section renderers for the context block.

Every renderer returns one self-contained text section. Section headers
carry an emoji and an upper-case label so the downstream model can tell
the knowledge sources apart.
"""

from typing import Any, Sequence

from beauty_rag.config.constants import RAG
from beauty_rag.knowledge.models import (
    Concern,
    CosmeticIngredient,
    HairType,
    RegionalIngredient,
)
from beauty_rag.retrieval.records import BrandDocument, CatalogItem
from beauty_rag.retrieval.text import truncate


def format_brand_document(document: BrandDocument, max_chars: int) -> str:
    content = truncate(document.content, max_chars, RAG.TRUNCATION_MARKER)
    return f"📖 CONNAISSANCE MARQUE — {document.display_title}\n{content}"


def format_regional_ingredient(ingredient: RegionalIngredient) -> str:
    lines = [
        f"🌍 INGRÉDIENT AFRICAIN : {ingredient.common_names}",
        f"Nom scientifique : {ingredient.scientific_name}",
        f"Origine : {ingredient.origin}",
        f"Noms locaux : {', '.join(ingredient.local_names)}",
        "",
    ]
    if ingredient.skin_benefits:
        lines.append("Bienfaits peau :")
        lines.extend(f"  • {b}" for b in ingredient.skin_benefits[: RAG.MAX_LISTED_BENEFITS])
    if ingredient.hair_benefits:
        lines.append("")
        lines.append("Bienfaits cheveux :")
        lines.extend(f"  • {b}" for b in ingredient.hair_benefits[: RAG.MAX_LISTED_BENEFITS])
    lines.extend([
        "",
        f"Actifs principaux : {', '.join(ingredient.primary_actives[: RAG.MAX_LISTED_ACTIVES])}",
        f"Usage traditionnel : {ingredient.traditional_usage}",
        f"Contre-indications : {ingredient.contraindications}",
        f"Types de peau recommandés : {', '.join(ingredient.recommended_skin_types)}",
    ])
    return "\n".join(lines)


def format_cosmetic_ingredient(ingredient: CosmeticIngredient) -> str:
    lines = [
        f"💄 INGRÉDIENT COSMÉTIQUE : {ingredient.name}",
        f"Fonction : {ingredient.function}",
        f"Usage : {ingredient.usage}",
    ]
    if ingredient.ideal_concentration:
        lines.append(f"Concentration idéale : {ingredient.ideal_concentration}")
    lines.append(f"Types de peau : {', '.join(ingredient.skin_types)}")
    lines.append(f"Contre-indications : {ingredient.contraindications}")
    return "\n".join(lines)


def format_concern(concern: Concern) -> str:
    lines = [
        f"🎯 PROBLÉMATIQUE : {concern.description}",
        f"Causes possibles : {', '.join(concern.causes)}",
        f"Ingrédients recommandés : {', '.join(concern.recommended_ingredients)}",
        f"Routine suggérée : {concern.routine}",
    ]
    if concern.results_timeline:
        lines.append(f"Timeline résultats : {concern.results_timeline}")
    if concern.specific_advice:
        lines.append(f"Conseils spécifiques : {concern.specific_advice}")
    return "\n".join(lines)


def format_hair_type(label: str, hair_type: HairType) -> str:
    lines = [
        f"💇 TYPE DE CHEVEUX : {label}",
        f"Description : {hair_type.description}",
        f"Besoins : {', '.join(hair_type.needs)}",
        f"Produits clés : {', '.join(hair_type.key_products)}",
        f"Fréquence lavage : {hair_type.wash_frequency}",
    ]
    if hair_type.techniques:
        lines.append(f"Techniques recommandées : {', '.join(hair_type.techniques)}")
    return "\n".join(lines)


def format_price(price: Any, currency: str) -> str | None:
    """Render a price with its currency, or None when the item has no price.

    Example:
        >>> format_price(15000.0, "FCFA")
        '15000 FCFA'
    """
    if price is None or price == "" or price == 0:
        return None
    if isinstance(price, float) and price.is_integer():
        price = int(price)
    return f"{price} {currency}"


def format_relevant_products(
    items: Sequence[CatalogItem],
    currency: str,
    description_chars: int,
) -> str:
    """Detailed block for the products that best match the request."""
    lines = ["🎯 PRODUITS LES PLUS PERTINENTS POUR CETTE DEMANDE :"]
    for item in items:
        lines.append("")
        lines.append(f"**{item.name}**")
        price = format_price(item.price, currency)
        if price:
            lines.append(f"  Prix : {price}")
        if item.description:
            short = truncate(item.description, description_chars, RAG.TRUNCATION_MARKER)
            lines.append(f"  Description : {short}")
        if item.url:
            lines.append(f"  Lien : {item.url}")
    return "\n".join(lines) + "\n"


def format_catalog_listing(
    items: Sequence[CatalogItem],
    currency: str,
    remainder: bool = False,
) -> str:
    """Compact one-line-per-product listing, followed by the action notes.

    Args:
        items: Products to list
        currency: Price suffix
        remainder: True when listed after the relevant-products block
    """
    count = len(items)
    label = "AUTRES PRODUITS DISPONIBLES" if remainder else "CATALOGUE COMPLET"
    plural = "s" if count > 1 else ""
    lines = [f"📋 {label} ({count} produit{plural}) :"]
    for item in items:
        price = format_price(item.price, currency)
        price_part = f" — {price}" if price else ""
        category_part = f" ({item.category})" if item.category else ""
        lines.append(f"• {item.name}{price_part}{category_part}")
    lines.append("")
    lines.append(
        f"Note : Utilise {RAG.RECOMMEND_ACTION} avec le nom exact pour recommander "
        "un produit visuellement (carte produit)."
    )
    lines.append(
        f"Note : Utilise {RAG.ADD_TO_CART_ACTION} quand le client demande explicitement "
        "d'ajouter un produit à son panier/commande (ex: \"ajoutez aussi...\", "
        "\"je veux aussi...\", \"mettez dans mon panier\")."
    )
    return "\n".join(lines)
