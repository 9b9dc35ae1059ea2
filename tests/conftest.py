"""
Shared test fixtures for the span propagation test suite.
"""
import pytest

from src.models.annotation import Annotation
from src.models.document import AnnotatedDocument
from src.models.propagator_config import PropagatorConfig
from src.models.type_system import TypeSystem


# ==========================================================================
# Type System
# ==========================================================================

@pytest.fixture
def type_system():
    """Mention/Sentence/Token plus an abstract Concept and a Mention subtype."""
    ts = TypeSystem()
    ts.declare("Mention")
    ts.declare("Mention.Person", supertype="Mention")
    ts.declare("Sentence")
    ts.declare("Token")
    ts.declare("Concept", abstract=True)
    return ts


@pytest.fixture
def make_document(type_system):
    """Factory: make_document(text, [(type, begin, end), ...])."""

    def _make(text, spans=(), document_id="doc-001"):
        return AnnotatedDocument(
            document_id,
            text,
            type_system,
            [Annotation(t, b, e) for t, b, e in spans],
        )

    return _make


# ==========================================================================
# Configuration
# ==========================================================================

@pytest.fixture
def make_config():
    """Factory for Mention -> Sentence configs with overridable options."""

    def _make(
        source_type="Mention",
        target_type="Sentence",
        respect_word_boundaries=True,
        case_sensitive=True,
    ):
        return PropagatorConfig(
            source_type=source_type,
            target_type=target_type,
            respect_word_boundaries=respect_word_boundaries,
            case_sensitive=case_sensitive,
        )

    return _make


@pytest.fixture
def default_params():
    return {
        "SourceType": "Mention",
        "TargetType": "Sentence",
        "RespectWordBoundaries": True,
        "CaseSensitive": True,
    }


# ==========================================================================
# Documents
# ==========================================================================

@pytest.fixture
def paris_document(make_document):
    """'Paris' annotated in the first sentence only."""
    return make_document(
        "Paris is big. I love Paris.",
        [
            ("Mention", 0, 5),
            ("Sentence", 0, 13),
            ("Sentence", 14, 27),
        ],
    )


@pytest.fixture
def paris_payload():
    return {
        "document_id": "payload-001",
        "text": "Paris is big. I love Paris.",
        "types": [
            {"name": "Mention"},
            {"name": "Sentence"},
        ],
        "annotations": [
            {"type": "Mention", "begin": 0, "end": 5},
            {"type": "Sentence", "begin": 0, "end": 13},
            {"type": "Sentence", "begin": 14, "end": 27},
        ],
    }
