"""
Dedup Merger — keeps candidates not already annotated and commits them.

The only stage that writes to the annotation store.
"""
import logging
from typing import Dict, Iterable, List, Mapping, Tuple

from src.models.annotation import Annotation, MatchCandidate, OffsetKey
from src.models.document import AnnotatedDocument
from src.models.type_system import AnnotationFactory

logger = logging.getLogger(__name__)


def merge_candidates(
    candidates: Iterable[MatchCandidate],
    existing: Mapping[OffsetKey, Annotation],
) -> Tuple[Dict[OffsetKey, MatchCandidate], int]:
    """
    Drop candidates at existing source-type offsets and collapse by offset key.

    Args:
        candidates: Match candidates in generation order.
        existing: Offset key map from the source collector.

    Returns:
        (accepted candidates keyed by offset, number suppressed as existing).
        Among candidates sharing a key the last generated one is kept.
    """
    accepted: Dict[OffsetKey, MatchCandidate] = {}
    suppressed = 0

    for candidate in candidates:
        key = candidate.offset_key
        if key in existing:
            suppressed += 1
            continue
        accepted[key] = candidate

    return accepted, suppressed


def commit_new_annotations(
    document: AnnotatedDocument,
    accepted: Mapping[OffsetKey, MatchCandidate],
    factory: AnnotationFactory,
) -> List[Annotation]:
    """
    Add one annotation per accepted offset key to *document*.

    Every annotation is built before the first one is added, so a
    construction failure leaves the store untouched.

    Raises:
        AnnotationConstructionError: If the factory cannot build an annotation.
    """
    created = [factory(begin, end) for begin, end in sorted(accepted)]

    for annotation in created:
        document.add_annotation(annotation)

    logger.debug("Committed %d annotations to %s", len(created), document.document_id)
    return created
