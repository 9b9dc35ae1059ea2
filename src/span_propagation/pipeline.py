"""
Span Propagation Pipeline — orchestrates Collect + Build + Scan + Merge.

Pipeline (per document):
    1. Resolve source/target types and the source-type factory
    2. Discovery (read-only): collect sources, build patterns, scan targets
    3. Commit: drop already-annotated spans, dedup, add new annotations

Configuration and construction errors are raised before the commit phase,
so a failed document is left unchanged.
"""
import logging
import time
from typing import Iterable, List

from src.config.constants import STAGE_COMMIT, STAGE_DISCOVERY
from src.models.document import AnnotatedDocument
from src.models.propagation_result import PropagationResult
from src.models.propagator_config import PropagatorConfig
from src.span_propagation.candidate_scanner import scan_all_sources
from src.span_propagation.dedup_merger import commit_new_annotations, merge_candidates
from src.span_propagation.errors import PropagationError
from src.span_propagation.metrics import (
    record_created,
    record_document,
    record_suppressed,
    timed_stage,
)
from src.span_propagation.source_collector import collect_source_annotations

logger = logging.getLogger(__name__)


def propagate_similar_spans(
    document: AnnotatedDocument,
    config: PropagatorConfig,
) -> PropagationResult:
    """
    Annotate unannotated occurrences of source-type covered text.

    Args:
        document: Document whose annotation store is read and extended.
        config: Source/target types and matching options.

    Returns:
        PropagationResult with the annotations created in this pass.

    Raises:
        ConfigurationError: If a configured type is not declared.
        AnnotationConstructionError: If the source type cannot be instantiated.
    """
    start_time = time.monotonic()

    try:
        type_system = document.type_system
        type_system.resolve_type(config.source_type)
        type_system.resolve_type(config.target_type)
        factory = type_system.annotation_factory(config.source_type)

        # ==================================================================
        # Discovery (read-only)
        # ==================================================================
        with timed_stage(STAGE_DISCOVERY):
            given = collect_source_annotations(document, config.source_type)
            sources = document.iter_annotations(config.source_type)
            targets = document.iter_annotations(config.target_type)
            candidates = scan_all_sources(document, sources, targets, config)

        # ==================================================================
        # Commit
        # ==================================================================
        with timed_stage(STAGE_COMMIT):
            accepted, suppressed = merge_candidates(candidates, given)
            created = commit_new_annotations(document, accepted, factory)

    except PropagationError as e:
        logger.error("Span propagation failed for %s: %s", document.document_id, e)
        record_document(type(e).__name__)
        raise

    record_document("ok")
    record_created(config.source_type, len(created))
    record_suppressed(config.source_type, suppressed)

    elapsed_ms = int((time.monotonic() - start_time) * 1000)
    logger.info(
        "%s: %d %s sources, %d %s targets, %d candidates, %d suppressed, %d created (%d ms)",
        document.document_id,
        len(sources), config.source_type,
        len(targets), config.target_type,
        len(candidates), suppressed, len(created), elapsed_ms,
    )

    return PropagationResult(
        document_id=document.document_id,
        created=created,
        sources_scanned=len(sources),
        targets_scanned=len(targets),
        candidates_found=len(candidates),
        duplicates_suppressed=suppressed,
        duration_ms=elapsed_ms,
    )


def propagate_corpus(
    documents: Iterable[AnnotatedDocument],
    config: PropagatorConfig,
) -> List[PropagationResult]:
    """
    Run ``propagate_similar_spans`` on each document in turn.

    Documents are independent: a PropagationError aborts only the failing
    document, whose store is left unchanged, and is reported as a failed
    result. Processing continues with the next document.
    """
    results: List[PropagationResult] = []

    for document in documents:
        try:
            results.append(propagate_similar_spans(document, config))
        except PropagationError as e:
            results.append(PropagationResult.failed(document.document_id, e))

    failures = sum(1 for r in results if not r.succeeded)
    if failures:
        logger.warning("%d of %d documents failed span propagation", failures, len(results))

    return results
