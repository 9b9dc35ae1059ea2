"""
Constants used across the span propagator.
"""
from typing import List

# =============================================================================
# Configuration parameter names
# =============================================================================
PARAM_NAME_SOURCE_TYPE: str = "SourceType"
PARAM_NAME_TARGET_TYPE: str = "TargetType"
PARAM_NAME_RESPECT_WORD_BOUNDARIES: str = "RespectWordBoundaries"
PARAM_NAME_CASE_SENSITIVE: str = "CaseSensitive"

PROPAGATOR_PARAM_NAMES: List[str] = [
    PARAM_NAME_SOURCE_TYPE,
    PARAM_NAME_TARGET_TYPE,
    PARAM_NAME_RESPECT_WORD_BOUNDARIES,
    PARAM_NAME_CASE_SENSITIVE,
]

# =============================================================================
# Type system
# =============================================================================
ROOT_TYPE_NAME: str = "Annotation"

# Types declared by the spaCy loader
TOKEN_TYPE_NAME: str = "Token"
SENTENCE_TYPE_NAME: str = "Sentence"
ENTITY_TYPE_NAME: str = "Entity"
ENTITY_LABEL_SEPARATOR: str = "."

# =============================================================================
# Metrics
# =============================================================================
STAGE_DISCOVERY: str = "discovery"
STAGE_COMMIT: str = "commit"
