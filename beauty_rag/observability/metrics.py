"""Prometheus Metrics - retrieval observability.

Exports:
- Context assembly latency and section counts
- Requests by outcome (assembled vs fallback)
- Static-knowledge hits per matcher stage
- Loaded record counts and load failures per dataset

The host application exposes the default registry; nothing here starts
an HTTP server.
"""

from prometheus_client import Counter, Gauge, Histogram, Info

# -----------------------------------------------------------------------------
# Histograms
# -----------------------------------------------------------------------------

CONTEXT_LATENCY = Histogram(
    "beauty_rag_context_assembly_seconds",
    "Time to assemble the context block for one message",
    buckets=[0.0005, 0.001, 0.0025, 0.005, 0.01, 0.025, 0.05, 0.1, 0.25],
)

CONTEXT_SECTIONS = Histogram(
    "beauty_rag_context_sections",
    "Sections in an assembled context block",
    buckets=[0, 1, 2, 3, 5, 8, 12, 20],
)

# -----------------------------------------------------------------------------
# Counters
# -----------------------------------------------------------------------------

CONTEXT_REQUESTS = Counter(
    "beauty_rag_context_requests_total",
    "Context requests by outcome",
    ["outcome"],  # assembled, fallback
)

STAGE_MATCHES = Counter(
    "beauty_rag_stage_matches_total",
    "Sections produced per retrieval stage",
    ["stage"],  # brand_documents, regional_ingredients, ..., catalog
)

KNOWLEDGE_LOAD_ERRORS = Counter(
    "beauty_rag_knowledge_load_errors_total",
    "Static knowledge load failures",
    ["dataset"],
)

# -----------------------------------------------------------------------------
# Gauges
# -----------------------------------------------------------------------------

KNOWLEDGE_RECORDS = Gauge(
    "beauty_rag_knowledge_records",
    "Records loaded per static dataset",
    ["dataset"],
)

# -----------------------------------------------------------------------------
# Info
# -----------------------------------------------------------------------------

BUILD_INFO = Info(
    "beauty_rag_build",
    "Build information",
)


# -----------------------------------------------------------------------------
# Helper functions
# -----------------------------------------------------------------------------


def record_context(outcome: str, sections: int, latency_ms: float) -> None:
    """Record one context request."""
    CONTEXT_REQUESTS.labels(outcome=outcome).inc()
    CONTEXT_SECTIONS.observe(sections)
    CONTEXT_LATENCY.observe(latency_ms / 1000.0)


def record_stage_matches(stage: str, count: int) -> None:
    """Record sections produced by a stage (no-op for zero)."""
    if count:
        STAGE_MATCHES.labels(stage=stage).inc(count)


def update_knowledge_records(counts: dict[str, int]) -> None:
    """Update record gauges after a successful load."""
    for dataset, count in counts.items():
        KNOWLEDGE_RECORDS.labels(dataset=dataset).set(count)


def record_load_error(dataset: str) -> None:
    KNOWLEDGE_LOAD_ERRORS.labels(dataset=dataset).inc()


def set_build_info(version: str) -> None:
    """Set build information."""
    BUILD_INFO.info({"version": version})
