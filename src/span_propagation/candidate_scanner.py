"""
Candidate Scanner — finds source-text occurrences inside target annotations.

This is the hot path: O(sources x targets x target text length) in the
worst case.
"""
import logging
import re
from typing import Dict, List, Optional, Sequence

from src.models.annotation import Annotation, MatchCandidate
from src.models.document import AnnotatedDocument
from src.models.propagator_config import PropagatorConfig
from src.span_propagation.pattern_builder import PatternKey, build_source_pattern

logger = logging.getLogger(__name__)


def is_excluded_target(source: Annotation, target: Annotation) -> bool:
    """
    True if *target* shares its begin or its end offset with *source*.

    Looser than an identity check: any target sharing one boundary with the
    source is skipped for that source.
    """
    return target.begin == source.begin or target.end == source.end


def scan_target(
    pattern: re.Pattern,
    target_text: str,
    target: Annotation,
    source: Annotation,
) -> List[MatchCandidate]:
    """
    All non-overlapping matches of *pattern* in *target_text*, left to right.

    Match positions are translated to absolute document offsets by adding
    ``target.begin``.
    """
    return [
        MatchCandidate(
            begin=target.begin + match.start(),
            end=target.begin + match.end(),
            source_begin=source.begin,
            source_end=source.end,
            target_begin=target.begin,
            target_end=target.end,
        )
        for match in pattern.finditer(target_text)
    ]


def scan_candidates(
    document: AnnotatedDocument,
    source: Annotation,
    pattern: Optional[re.Pattern],
    targets: Sequence[Annotation],
) -> List[MatchCandidate]:
    """Scan every target not excluded for *source*."""
    if pattern is None:
        return []

    candidates: List[MatchCandidate] = []
    for target in targets:
        if is_excluded_target(source, target):
            continue
        candidates.extend(
            scan_target(pattern, document.covered_text(target), target, source)
        )
    return candidates


def scan_all_sources(
    document: AnnotatedDocument,
    sources: Sequence[Annotation],
    targets: Sequence[Annotation],
    config: PropagatorConfig,
) -> List[MatchCandidate]:
    """
    Scan *targets* with the pattern of every source, in source order.

    *targets* must be a snapshot taken before scanning; nothing found here
    becomes a target within the same pass.
    """
    cache: Dict[PatternKey, Optional[re.Pattern]] = {}
    candidates: List[MatchCandidate] = []

    for source in sources:
        pattern = build_source_pattern(document, source, config, cache)
        found = scan_candidates(document, source, pattern, targets)
        if found:
            logger.debug(
                "Source %r (%r) matched %d times",
                source, document.covered_text(source), len(found),
            )
        candidates.extend(found)

    return candidates
