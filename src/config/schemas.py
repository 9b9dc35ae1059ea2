"""
JSON Schemas for propagator parameters and propagation output.

Two schemas:
1. PROPAGATOR_PARAMS_SCHEMA   — the four mandatory component parameters
2. PROPAGATION_OUTPUT_SCHEMA  — per-document result written by the batch runner
"""
from src.config.constants import (
    PARAM_NAME_CASE_SENSITIVE,
    PARAM_NAME_RESPECT_WORD_BOUNDARIES,
    PARAM_NAME_SOURCE_TYPE,
    PARAM_NAME_TARGET_TYPE,
)

# =============================================================================
# 1. Propagator parameters
# =============================================================================
PROPAGATOR_PARAMS_SCHEMA: dict = {
    "$schema": "http://json-schema.org/draft-07/schema#",
    "title": "SimilarTextSpanPropagatorParams",
    "type": "object",
    "required": [
        PARAM_NAME_SOURCE_TYPE,
        PARAM_NAME_TARGET_TYPE,
        PARAM_NAME_RESPECT_WORD_BOUNDARIES,
        PARAM_NAME_CASE_SENSITIVE,
    ],
    "properties": {
        PARAM_NAME_SOURCE_TYPE: {
            "type": "string",
            "minLength": 1,
            "description": "Type of the annotations supplying patterns, and of the new annotations",
        },
        PARAM_NAME_TARGET_TYPE: {
            "type": "string",
            "minLength": 1,
            "description": "Type of the annotations whose covered text is scanned",
        },
        PARAM_NAME_RESPECT_WORD_BOUNDARIES: {
            "type": "boolean",
            "description": "Require a word boundary before and after each match",
        },
        PARAM_NAME_CASE_SENSITIVE: {
            "type": "boolean",
            "description": "Match letter case exactly",
        },
    },
}

# =============================================================================
# 2. Propagation output
# =============================================================================
_ANNOTATION_SCHEMA: dict = {
    "type": "object",
    "required": ["type", "begin", "end"],
    "properties": {
        "type": {"type": "string"},
        "begin": {"type": "integer", "minimum": 0},
        "end": {"type": "integer", "minimum": 0},
    },
}

PROPAGATION_OUTPUT_SCHEMA: dict = {
    "$schema": "http://json-schema.org/draft-07/schema#",
    "title": "PropagationOutput",
    "type": "object",
    "required": ["document_id", "created", "processing_metadata"],
    "properties": {
        "document_id": {"type": "string"},
        "created": {"type": "array", "items": _ANNOTATION_SCHEMA},
        "error": {"type": ["string", "null"]},
        "processing_metadata": {
            "type": "object",
            "required": [
                "sources_scanned",
                "targets_scanned",
                "candidates_found",
                "duplicates_suppressed",
                "annotations_created",
                "propagation_duration_ms",
            ],
            "properties": {
                "sources_scanned": {"type": "integer", "minimum": 0},
                "targets_scanned": {"type": "integer", "minimum": 0},
                "candidates_found": {"type": "integer", "minimum": 0},
                "duplicates_suppressed": {"type": "integer", "minimum": 0},
                "annotations_created": {"type": "integer", "minimum": 0},
                "propagation_duration_ms": {"type": "integer", "minimum": 0},
            },
        },
    },
}
