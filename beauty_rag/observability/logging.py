"""Structured Logging - JSON logs with tenant correlation.

Provides structured logging for:
- Knowledge store loading
- Per-stage retrieval counts (documents, ingredients, concerns, hair, catalog)
- Context fallback

Logs carry counts and short previews only, never full tenant documents.
"""

import logging
import sys

import structlog

from beauty_rag.config.constants import RAG
from beauty_rag.config.settings import get_settings


def configure_logging(
    level: str = "INFO",
    json_format: bool = True,
) -> None:
    """Configure structured logging.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR)
        json_format: If True, output JSON; else human-readable
    """
    processors = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]

    if json_format:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=True))

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(
            getattr(logging, level.upper())
        ),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=True,
    )

    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=getattr(logging, level.upper()),
    )


def get_logger(name: str | None = None) -> structlog.BoundLogger:
    """Get a structured logger.

    Args:
        name: Logger name (usually __name__)

    Returns:
        Bound structlog logger
    """
    return structlog.get_logger(name)


def bind_tenant(tenant: str) -> None:
    """Bind tenant name to all logs in current context."""
    structlog.contextvars.bind_contextvars(tenant=tenant)


def unbind_tenant() -> None:
    """Remove tenant from log context."""
    structlog.contextvars.unbind_contextvars("tenant")


def message_preview(text: str) -> str:
    """Shorten a user message for log output."""
    if len(text) <= RAG.MESSAGE_PREVIEW_CHARS:
        return text
    return text[: RAG.MESSAGE_PREVIEW_CHARS] + RAG.TRUNCATION_MARKER


class RetrievalLogger:
    """Logger for one context retrieval call."""

    def __init__(self, user_message: str) -> None:
        self._log = get_logger("retrieval").bind(
            message_preview=message_preview(user_message)
        )

    def search_started(self, documents: int, catalog_items: int) -> None:
        self._log.debug(
            "context_search_started",
            event_type="retrieval.started",
            documents=documents,
            catalog_items=catalog_items,
        )

    def documents_selected(
        self,
        selected: int,
        supplied: int,
        titles_with_scores: list[tuple[str, int]],
    ) -> None:
        """Log the brand documents kept by the ranker."""
        self._log.info(
            "brand_documents_selected",
            event_type="retrieval.documents",
            selected=selected,
            supplied=supplied,
            scores=[{"title": t, "score": s} for t, s in titles_with_scores],
        )

    def matched(self, stage: str, count: int) -> None:
        """Log a static-knowledge matcher hit count (only when non-zero)."""
        if count:
            self._log.info(
                f"{stage}_matched",
                event_type=f"retrieval.{stage}",
                count=count,
            )

    def catalog_searched(self, relevant: int, remainder: int) -> None:
        self._log.info(
            "catalog_searched",
            event_type="retrieval.catalog",
            relevant=relevant,
            remainder=remainder,
        )

    def context_assembled(self, sections: int, chars: int) -> None:
        self._log.info(
            "context_assembled",
            event_type="retrieval.assembled",
            sections=sections,
            chars=chars,
        )

    def context_fallback(self) -> None:
        """Log that nothing matched and the fallback sentence is returned."""
        self._log.warning(
            "context_fallback",
            event_type="retrieval.fallback",
        )


class StoreLogger:
    """Logger for static knowledge store events."""

    def __init__(self, source: str) -> None:
        self._log = get_logger("knowledge_store").bind(source=source)

    def loaded(self, counts: dict[str, int]) -> None:
        """Log successful load with per-dataset record counts."""
        self._log.info(
            "knowledge_store_loaded",
            event_type="store.loaded",
            **counts,
        )

    def load_failed(self, dataset: str, reason: str) -> None:
        self._log.error(
            "knowledge_store_load_failed",
            event_type="store.load_failed",
            dataset=dataset,
            reason=reason,
        )


def init_logging(json_format: bool | None = None, level: str | None = None) -> None:
    """Initialize logging from settings, with optional overrides.

    Call this once at application startup.
    """
    settings = get_settings()
    configure_logging(
        level=level or settings.log_level,
        json_format=settings.log_json if json_format is None else json_format,
    )
