"""
spaCy loader — builds an AnnotatedDocument from a spaCy Doc.

Declares Token, Sentence and Entity types, plus one Entity subtype per
entity label (``Entity.ORG``, ``Entity.PERSON``, ...), so propagation can be
configured either for all entities or for a single label.
"""
import logging
from typing import Optional

from src.config import settings
from src.config.constants import (
    ENTITY_LABEL_SEPARATOR,
    ENTITY_TYPE_NAME,
    SENTENCE_TYPE_NAME,
    TOKEN_TYPE_NAME,
)
from src.models.annotation import Annotation
from src.models.document import AnnotatedDocument
from src.models.type_system import TypeSystem

logger = logging.getLogger(__name__)

# Lazy-loaded spaCy model
_nlp_model = None


def _get_nlp_model():
    """Lazy-load spaCy model to avoid import-time cost."""
    global _nlp_model
    if _nlp_model is None:
        import spacy  # type: ignore[import-untyped]
        _nlp_model = spacy.load(settings.SPACY_MODEL)
        logger.info("Loaded spaCy model: %s", settings.SPACY_MODEL)
    return _nlp_model


def entity_type_name(label: str) -> str:
    """Type name declared for entities carrying *label*."""
    return f"{ENTITY_TYPE_NAME}{ENTITY_LABEL_SEPARATOR}{label}"


def build_spacy_type_system() -> TypeSystem:
    type_system = TypeSystem()
    type_system.declare(TOKEN_TYPE_NAME)
    type_system.declare(SENTENCE_TYPE_NAME)
    type_system.declare(ENTITY_TYPE_NAME)
    return type_system


def document_from_spacy(doc, document_id: str) -> AnnotatedDocument:
    """
    Convert a processed spaCy Doc into an AnnotatedDocument.

    Sentences are only added when the pipeline set sentence boundaries
    (parser, senter or sentencizer).

    Args:
        doc: A spaCy ``Doc``.
        document_id: Identifier of the resulting document.
    """
    type_system = build_spacy_type_system()
    document = AnnotatedDocument(document_id, doc.text, type_system)

    for token in doc:
        document.add_annotation(
            Annotation(TOKEN_TYPE_NAME, token.idx, token.idx + len(token.text))
        )

    if doc.has_annotation("SENT_START"):
        for sent in doc.sents:
            document.add_annotation(
                Annotation(SENTENCE_TYPE_NAME, sent.start_char, sent.end_char)
            )
    else:
        logger.warning("%s: no sentence boundaries set, skipping Sentence annotations", document_id)

    for ent in doc.ents:
        type_name = entity_type_name(ent.label_)
        type_system.declare(type_name, supertype=ENTITY_TYPE_NAME)
        document.add_annotation(Annotation(type_name, ent.start_char, ent.end_char))

    return document


def annotate_text(text: str, document_id: str, nlp_model=None) -> AnnotatedDocument:
    """
    Run spaCy over *text* and convert the result.

    Args:
        text: Raw document text.
        document_id: Identifier of the resulting document.
        nlp_model: Optional pre-loaded spaCy model. If None, loads
            ``settings.SPACY_MODEL``.
    """
    if nlp_model is None:
        nlp_model = _get_nlp_model()
    return document_from_spacy(nlp_model(text), document_id)
