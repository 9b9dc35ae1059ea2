"""
Source Collector — indexes existing source-type annotations by offset key.
"""
import logging
from typing import Dict

from src.models.annotation import Annotation, OffsetKey
from src.models.document import AnnotatedDocument

logger = logging.getLogger(__name__)


def collect_source_annotations(
    document: AnnotatedDocument,
    source_type: str,
) -> Dict[OffsetKey, Annotation]:
    """
    Map every (begin, end) pair to the source-type annotation found there.

    Annotations of subtypes of *source_type* are included. When several
    annotations share a key, the last one in index order is kept.

    Raises:
        UnknownTypeError: If *source_type* is not declared.
    """
    given: Dict[OffsetKey, Annotation] = {}
    for annotation in document.iter_annotations(source_type):
        given[annotation.offset_key] = annotation

    logger.debug(
        "Collected %d %s offset keys in %s",
        len(given), source_type, document.document_id,
    )
    return given
