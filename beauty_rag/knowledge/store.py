"""Static Knowledge Store.

Loads the four bundled reference datasets once and exposes them read-only:

1. Regional ingredients - regional_ingredients.json
2. Cosmetic ingredients - cosmetic_ingredients.json
3. Concerns             - concerns.json
4. Hair types           - hair_types.json

Any missing or malformed dataset raises a KnowledgeStoreError. The store is
never refreshed in-process; new data requires a restart.

Usage:
    from beauty_rag.knowledge import get_knowledge_store

    store = get_knowledge_store()      # bundled data, loaded once
    store.concerns["acne"].description

    # Tests and tools can build their own store
    store = KnowledgeStore.from_mappings(regional_ingredients={...}, ...)
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from types import MappingProxyType
from typing import Any, Mapping, TypeVar

from pydantic import BaseModel, TypeAdapter, ValidationError

from beauty_rag.config.settings import get_settings
from beauty_rag.exceptions import KnowledgeDataInvalidError, KnowledgeDataNotFoundError
from beauty_rag.knowledge.models import (
    Concern,
    CosmeticIngredient,
    HairType,
    RegionalIngredient,
)
from beauty_rag.observability.logging import StoreLogger
from beauty_rag.observability.metrics import record_load_error, update_knowledge_records

BUNDLED_DATA_DIR = Path(__file__).resolve().parent / "data"

# Dataset name -> (file name, record model)
DATASETS: dict[str, tuple[str, type[BaseModel]]] = {
    "regional_ingredients": ("regional_ingredients.json", RegionalIngredient),
    "cosmetic_ingredients": ("cosmetic_ingredients.json", CosmeticIngredient),
    "concerns": ("concerns.json", Concern),
    "hair_types": ("hair_types.json", HairType),
}

R = TypeVar("R", bound=BaseModel)


def _freeze(records: dict[str, R]) -> Mapping[str, R]:
    return MappingProxyType(dict(records))


@dataclass(frozen=True)
class KnowledgeStore:
    """The four immutable reference datasets.

    Key order follows the source file order, which is also the order
    in which matches are emitted.
    """

    regional_ingredients: Mapping[str, RegionalIngredient]
    cosmetic_ingredients: Mapping[str, CosmeticIngredient]
    concerns: Mapping[str, Concern]
    hair_types: Mapping[str, HairType]

    @classmethod
    def from_mappings(
        cls,
        regional_ingredients: Mapping[str, Any] | None = None,
        cosmetic_ingredients: Mapping[str, Any] | None = None,
        concerns: Mapping[str, Any] | None = None,
        hair_types: Mapping[str, Any] | None = None,
    ) -> KnowledgeStore:
        """Validate raw mappings into a store.

        Raises:
            KnowledgeDataInvalidError: If any record fails validation
        """
        raw = {
            "regional_ingredients": regional_ingredients,
            "cosmetic_ingredients": cosmetic_ingredients,
            "concerns": concerns,
            "hair_types": hair_types,
        }
        parsed = {
            name: _freeze(_validate(name, model, {} if raw[name] is None else raw[name]))
            for name, (_, model) in DATASETS.items()
        }
        return cls(**parsed)

    def counts(self) -> dict[str, int]:
        """Record count per dataset."""
        return {
            "regional_ingredients": len(self.regional_ingredients),
            "cosmetic_ingredients": len(self.cosmetic_ingredients),
            "concerns": len(self.concerns),
            "hair_types": len(self.hair_types),
        }


def _validate(name: str, model: type[R], data: Any) -> dict[str, R]:
    try:
        return TypeAdapter(dict[str, model]).validate_python(data)
    except ValidationError as exc:
        raise KnowledgeDataInvalidError(
            name, f"{exc.error_count()} validation error(s): {exc.errors()[0]['msg']}"
        ) from exc


def _read_dataset(name: str, path: Path) -> Any:
    if not path.is_file():
        raise KnowledgeDataNotFoundError(name, str(path))
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        raise KnowledgeDataInvalidError(name, f"unreadable JSON: {exc}") from exc
    if not isinstance(data, dict):
        raise KnowledgeDataInvalidError(
            name, f"top-level value must be an object, got {type(data).__name__}"
        )
    return data


def load_knowledge_store(data_dir: Path | str | None = None) -> KnowledgeStore:
    """Load and validate the four datasets from a directory.

    Args:
        data_dir: Directory holding the dataset files (default: bundled data)

    Returns:
        Immutable KnowledgeStore

    Raises:
        KnowledgeDataNotFoundError: If a dataset file is missing
        KnowledgeDataInvalidError: If a dataset is not valid JSON or fails validation
    """
    directory = Path(data_dir) if data_dir is not None else BUNDLED_DATA_DIR
    log = StoreLogger(str(directory))

    raw: dict[str, Any] = {}
    for name, (filename, _) in DATASETS.items():
        try:
            raw[name] = _read_dataset(name, directory / filename)
        except (KnowledgeDataNotFoundError, KnowledgeDataInvalidError) as exc:
            log.load_failed(name, exc.message)
            record_load_error(name)
            raise

    try:
        store = KnowledgeStore.from_mappings(**raw)
    except KnowledgeDataInvalidError as exc:
        log.load_failed(exc.dataset, exc.message)
        record_load_error(exc.dataset)
        raise

    counts = store.counts()
    log.loaded(counts)
    update_knowledge_records(counts)
    return store


@lru_cache(maxsize=1)
def get_knowledge_store() -> KnowledgeStore:
    """Get the process-wide store, loading it on first call.

    Call this once at application startup so a broken dataset stops the
    process before any request is served.
    """
    return load_knowledge_store(get_settings().knowledge_data_dir)
