"""Per-call tenant records.

Callers hand over documents and catalog items as dataclass instances,
plain mappings (e.g. rows from the database layer) or arbitrary objects
exposing the same attribute names. Fields are resolved in this order:

BrandDocument
    title        ``title``, else "Document" when rendered
    content      ``content`` (non-string values become empty, so ineligible)
    is_active    ``is_active``, then ``active``; missing or None means active;
                 "false", "0", "no" and "off" in any case mean inactive

CatalogItem
    name         ``title``, then ``name``
    description, price, category, url, id   same-named field, else None

``None`` entries in input lists are dropped.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable, Mapping

from beauty_rag.config.constants import RAG

_MISSING = object()


def resolve_field(source: Any, *names: str, default: Any = None) -> Any:
    """First field among ``names`` that is present, not None and not empty."""
    for name in names:
        if isinstance(source, Mapping):
            value = source.get(name, _MISSING)
        else:
            value = getattr(source, name, _MISSING)
        if value is not _MISSING and value is not None and value != "":
            return value
    return default


def optional_str(value: Any) -> str | None:
    if value is None:
        return None
    text = str(value)
    return text or None


_FALSE_FLAGS = frozenset({"false", "0", "no", "off"})


def parse_flag(value: Any) -> bool:
    """Boolean from a stored flag; strings such as "false" or "0" are false."""
    if isinstance(value, str):
        return value.strip().lower() not in _FALSE_FLAGS
    return bool(value)


@dataclass(frozen=True)
class BrandDocument:
    """A tenant-authored knowledge document."""

    content: str
    title: str | None = None
    id: str | None = None
    is_active: bool = True

    @property
    def display_title(self) -> str:
        return self.title or RAG.DEFAULT_DOCUMENT_TITLE

    def is_eligible(self, min_length: int) -> bool:
        """Active, textual and long enough to be worth ranking."""
        return (
            parse_flag(self.is_active)
            and isinstance(self.content, str)
            and len(self.content) >= min_length
        )

    @classmethod
    def coerce(cls, source: Any) -> BrandDocument:
        if isinstance(source, cls):
            return source
        content = resolve_field(source, "content", default="")
        active = resolve_field(source, "is_active", "active", default=True)
        return cls(
            content=content if isinstance(content, str) else "",
            title=optional_str(resolve_field(source, "title")),
            id=optional_str(resolve_field(source, "id")),
            is_active=parse_flag(active),
        )


@dataclass(frozen=True)
class CatalogItem:
    """A sellable product from the tenant catalog."""

    name: str
    description: str | None = None
    price: Any = None
    category: str | None = None
    url: str | None = None
    id: str | None = None

    @property
    def search_text(self) -> str:
        """Name and description joined, as scored by the catalog searcher."""
        return f"{self.name or ''} {self.description or ''}"

    @classmethod
    def coerce(cls, source: Any) -> CatalogItem:
        if isinstance(source, cls):
            return source
        return cls(
            name=str(resolve_field(source, "title", "name", default="")),
            description=optional_str(resolve_field(source, "description")),
            price=resolve_field(source, "price"),
            category=optional_str(resolve_field(source, "category")),
            url=optional_str(resolve_field(source, "url")),
            id=optional_str(resolve_field(source, "id")),
        )


def coerce_documents(documents: Iterable[Any] | None) -> list[BrandDocument]:
    return [BrandDocument.coerce(d) for d in documents or () if d is not None]


def coerce_items(items: Iterable[Any] | None) -> list[CatalogItem]:
    return [CatalogItem.coerce(i) for i in items or () if i is not None]
