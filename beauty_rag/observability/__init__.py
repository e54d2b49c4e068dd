"""Observability module."""

from beauty_rag.observability.logging import (
    RetrievalLogger,
    StoreLogger,
    bind_tenant,
    configure_logging,
    get_logger,
    init_logging,
    unbind_tenant,
)
from beauty_rag.observability.metrics import (
    record_context,
    record_load_error,
    record_stage_matches,
    set_build_info,
    update_knowledge_records,
)

__all__ = [
    "RetrievalLogger",
    "StoreLogger",
    "bind_tenant",
    "configure_logging",
    "get_logger",
    "init_logging",
    "record_context",
    "record_load_error",
    "record_stage_matches",
    "set_build_info",
    "unbind_tenant",
    "update_knowledge_records",
]
