"""
Unit tests for Annotation and AnnotatedDocument.
"""
import pytest

from src.models.annotation import Annotation, MatchCandidate
from src.models.document import AnnotatedDocument
from src.span_propagation.errors import UnknownTypeError


class TestAnnotation:
    """Tests for the Annotation dataclass."""

    def test_offset_key(self):
        assert Annotation("Mention", 3, 8).offset_key == (3, 8)

    def test_covered_text(self):
        assert Annotation("Mention", 4, 7).covered_text("The cat sat") == "cat"

    def test_zero_length_allowed(self):
        assert Annotation("Mention", 3, 3).span_length() == 0

    def test_negative_begin_rejected(self):
        with pytest.raises(ValueError):
            Annotation("Mention", -1, 3)

    def test_end_before_begin_rejected(self):
        with pytest.raises(ValueError):
            Annotation("Mention", 5, 4)

    def test_to_dict(self):
        assert Annotation("Mention", 0, 5).to_dict() == {"type": "Mention", "begin": 0, "end": 5}

    def test_match_candidate_offset_key(self):
        assert MatchCandidate(21, 26, 0, 5, 14, 27).offset_key == (21, 26)


class TestAnnotatedDocument:
    """Tests for the in-memory annotation store."""

    def test_index_order(self, make_document):
        doc = make_document(
            "Paris is big.",
            [("Token", 6, 8), ("Sentence", 0, 13), ("Mention", 0, 5), ("Token", 0, 5)],
        )
        assert [(a.type_name, a.begin, a.end) for a in doc.annotations] == [
            ("Sentence", 0, 13),
            ("Mention", 0, 5),
            ("Token", 0, 5),
            ("Token", 6, 8),
        ]

    def test_iter_annotations_filters_by_type(self, paris_document):
        sentences = paris_document.iter_annotations("Sentence")
        assert [a.offset_key for a in sentences] == [(0, 13), (14, 27)]

    def test_iter_annotations_is_snapshot(self, paris_document):
        snapshot = paris_document.iter_annotations("Mention")
        paris_document.add_annotation(Annotation("Mention", 21, 26))

        assert len(snapshot) == 1
        assert len(paris_document.iter_annotations("Mention")) == 2

    def test_iter_unknown_type(self, paris_document):
        with pytest.raises(UnknownTypeError):
            paris_document.iter_annotations("NoSuchType")

    def test_add_undeclared_type(self, paris_document):
        with pytest.raises(UnknownTypeError):
            paris_document.add_annotation(Annotation("Paragraph", 0, 5))

    def test_add_beyond_text(self, paris_document):
        with pytest.raises(ValueError, match="beyond"):
            paris_document.add_annotation(Annotation("Mention", 20, 40))
        assert len(paris_document) == 3

    def test_covered_text(self, paris_document):
        assert paris_document.covered_text(Annotation("Mention", 21, 26)) == "Paris"

    def test_default_type_system(self):
        doc = AnnotatedDocument("doc-empty", "text")
        assert doc.type_system.type_names == ["Annotation"]
        assert len(doc) == 0
