"""
Unit tests for the spaCy document loader.
Uses a blank English pipeline so no trained model download is needed.
"""
import pytest
import spacy
from spacy.tokens import Span

from src.document_io.spacy_loader import (
    annotate_text,
    document_from_spacy,
    entity_type_name,
)
from src.models.annotation import Annotation
from src.models.propagator_config import PropagatorConfig
from src.span_propagation.pipeline import propagate_similar_spans


@pytest.fixture
def nlp():
    pipeline = spacy.blank("en")
    pipeline.add_pipe("sentencizer")
    return pipeline


@pytest.fixture
def acme_doc(nlp):
    doc = nlp("Acme hired Bob. Acme is big.")
    doc.ents = [Span(doc, 0, 1, label="ORG")]
    return doc


class TestDocumentFromSpacy:
    """Tests for document_from_spacy."""

    def test_tokens(self, acme_doc):
        document = document_from_spacy(acme_doc, "spacy-001")
        tokens = document.iter_annotations("Token")
        assert len(tokens) == len(acme_doc)
        assert document.covered_text(tokens[0]) == "Acme"

    def test_sentences(self, acme_doc):
        document = document_from_spacy(acme_doc, "spacy-001")
        sentences = document.iter_annotations("Sentence")
        assert [s.offset_key for s in sentences] == [(0, 15), (16, 28)]

    def test_entities_get_label_subtype(self, acme_doc):
        document = document_from_spacy(acme_doc, "spacy-001")

        assert entity_type_name("ORG") == "Entity.ORG"
        assert document.type_system.is_subtype("Entity.ORG", "Entity")
        assert document.iter_annotations("Entity") == [Annotation("Entity.ORG", 0, 4)]

    def test_no_sentence_boundaries(self):
        doc = spacy.blank("en")("Acme hired Bob.")
        document = document_from_spacy(doc, "spacy-002")
        assert document.iter_annotations("Sentence") == []

    def test_annotate_text_with_model(self, nlp):
        document = annotate_text("One sentence. Another one.", "spacy-003", nlp_model=nlp)
        assert len(document.iter_annotations("Sentence")) == 2


class TestPropagationOverSpacy:
    """Entity mentions recognised once are tagged where they recur."""

    def test_entity_propagated_to_second_sentence(self, acme_doc):
        document = document_from_spacy(acme_doc, "spacy-001")
        config = PropagatorConfig("Entity", "Sentence", True, True)

        result = propagate_similar_spans(document, config)

        assert result.created == [Annotation("Entity", 16, 20)]

    def test_single_label_as_source(self, acme_doc):
        document = document_from_spacy(acme_doc, "spacy-001")
        config = PropagatorConfig("Entity.ORG", "Token", True, True)

        result = propagate_similar_spans(document, config)

        assert result.created == [Annotation("Entity.ORG", 16, 20)]
