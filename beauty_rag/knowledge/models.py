"""Static knowledge records.

Each dataset is a JSON object mapping an internal key to a record. Records
are frozen pydantic models with tuple-valued lists, so nothing reachable
from a loaded store can be mutated.
"""

from pydantic import BaseModel, ConfigDict, Field


class _Record(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")


class RegionalIngredient(_Record):
    """A traditional African ingredient with its local names."""

    common_names: str = Field(min_length=1, description="Comma-separated display names")
    scientific_name: str = ""
    origin: str
    local_names: tuple[str, ...] = ()
    skin_benefits: tuple[str, ...] = ()
    hair_benefits: tuple[str, ...] = ()
    primary_actives: tuple[str, ...] = ()
    traditional_usage: str = ""
    contraindications: str = ""
    recommended_skin_types: tuple[str, ...] = ()
    usage_forms: tuple[str, ...] = ()


class CosmeticIngredient(_Record):
    """A general cosmetic active."""

    name: str = Field(min_length=1)
    function: str
    skin_types: tuple[str, ...] = ()
    contraindications: str = ""
    usage: str = ""
    ideal_concentration: str | None = None


class Concern(_Record):
    """A skin concern with its causes and remedies."""

    description: str = Field(min_length=1)
    causes: tuple[str, ...] = ()
    recommended_ingredients: tuple[str, ...] = ()
    routine: str = ""
    results_timeline: str | None = None
    specific_advice: str | None = None


class HairType(_Record):
    """A hair type, keyed by its label (e.g. ``4C``)."""

    description: str = Field(min_length=1)
    needs: tuple[str, ...] = ()
    key_products: tuple[str, ...] = ()
    wash_frequency: str = ""
    techniques: tuple[str, ...] | None = None
