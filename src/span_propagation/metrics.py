"""
Prometheus Metrics — span propagation observability.

Exposes counters and a histogram for:
- Documents processed, by outcome
- Annotations created
- Candidates suppressed because the span was already annotated
- Stage processing latency

Usage
-----
    from src.span_propagation.metrics import record_document, timed_stage

    with timed_stage("discovery"):
        candidates = scan_all_sources(...)

    record_document("ok")
"""
from __future__ import annotations

from contextlib import contextmanager
from typing import Generator

from prometheus_client import Counter, Histogram

# ---------------------------------------------------------------------------
# Metric definitions
# ---------------------------------------------------------------------------

# Documents processed, labelled by outcome ("ok" or an error class name).
DOCUMENTS_PROCESSED: Counter = Counter(
    "span_propagation_documents_total",
    "Documents processed by the span propagator, by outcome",
    ["outcome"],
)

# New annotations committed, labelled by source type.
ANNOTATIONS_CREATED: Counter = Counter(
    "span_propagation_annotations_created_total",
    "Annotations created at newly discovered occurrence sites",
    ["source_type"],
)

# Candidates dropped because a source-type annotation already exists there.
DUPLICATES_SUPPRESSED: Counter = Counter(
    "span_propagation_duplicates_suppressed_total",
    "Match candidates dropped because the span is already annotated",
    ["source_type"],
)

# Processing latency per stage (seconds).
STAGE_LATENCY: Histogram = Histogram(
    "span_propagation_stage_seconds",
    "Processing time per propagation stage in seconds",
    ["stage"],
    buckets=(0.001, 0.005, 0.01, 0.05, 0.1, 0.5, 1.0, 5.0),
)


# ---------------------------------------------------------------------------
# Convenience helpers
# ---------------------------------------------------------------------------

def record_document(outcome: str) -> None:
    """Increment the processed-documents counter for *outcome*."""
    DOCUMENTS_PROCESSED.labels(outcome=outcome).inc()


def record_created(source_type: str, count: int) -> None:
    """Add *count* created annotations for *source_type*."""
    ANNOTATIONS_CREATED.labels(source_type=source_type).inc(count)


def record_suppressed(source_type: str, count: int) -> None:
    """Add *count* suppressed candidates for *source_type*."""
    DUPLICATES_SUPPRESSED.labels(source_type=source_type).inc(count)


@contextmanager
def timed_stage(stage: str) -> Generator[None, None, None]:
    """
    Context manager that records stage processing latency.

    Usage::

        with timed_stage("commit"):
            created = commit_new_annotations(...)
    """
    with STAGE_LATENCY.labels(stage=stage).time():
        yield
