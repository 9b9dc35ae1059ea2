"""
Pattern Builder — literal-match patterns from source annotations' covered text.

The covered text is escaped in full: no regex metacharacter in a source span
is honoured.
"""
import re
from typing import Dict, Optional, Tuple

from src.models.annotation import Annotation
from src.models.document import AnnotatedDocument
from src.models.propagator_config import PropagatorConfig

PatternKey = Tuple[str, bool, bool]


def build_literal_pattern(
    text: str,
    respect_word_boundaries: bool,
    case_sensitive: bool,
) -> Optional[re.Pattern]:
    """
    Compile a pattern matching *text* literally.

    Args:
        text: Covered text of a source annotation.
        respect_word_boundaries: Anchor the match with ``\\b`` on both sides.
        case_sensitive: When False, compile with ``re.IGNORECASE``.

    Returns:
        Compiled pattern, or None for empty text (zero-length sources
        produce no candidates).
    """
    if not text:
        return None

    literal = re.escape(text)
    if respect_word_boundaries:
        literal = rf"\b{literal}\b"

    flags = 0 if case_sensitive else re.IGNORECASE
    return re.compile(literal, flags)


def build_source_pattern(
    document: AnnotatedDocument,
    source: Annotation,
    config: PropagatorConfig,
    cache: Optional[Dict[PatternKey, Optional[re.Pattern]]] = None,
) -> Optional[re.Pattern]:
    """
    Pattern for *source*'s covered text under *config*.

    A *cache* shared across one pass compiles each distinct text once.
    """
    text = document.covered_text(source)
    key: PatternKey = (text, config.respect_word_boundaries, config.case_sensitive)

    if cache is not None and key in cache:
        return cache[key]

    pattern = build_literal_pattern(text, config.respect_word_boundaries, config.case_sensitive)
    if cache is not None:
        cache[key] = pattern
    return pattern
