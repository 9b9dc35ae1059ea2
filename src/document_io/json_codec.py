"""
Typed Pydantic models for the JSON document payload.

A payload carries the document text, its declared annotation types and its
annotations. The batch runner reads and writes documents in this shape.
"""
from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, Field, model_validator

from src.config.constants import ROOT_TYPE_NAME
from src.models.annotation import Annotation
from src.models.document import AnnotatedDocument
from src.models.type_system import TypeSystem


class TypeDeclarationPayload(BaseModel):
    """A declared annotation type."""

    name: str = Field(..., min_length=1)
    supertype: Optional[str] = Field(ROOT_TYPE_NAME, description="Defaults to the root type.")
    abstract: bool = False


class AnnotationPayload(BaseModel):
    """A typed span; ``end`` is exclusive."""

    type: str = Field(..., min_length=1)
    begin: int = Field(..., ge=0)
    end: int = Field(..., ge=0)

    @model_validator(mode="after")
    def validate_offsets(self) -> "AnnotationPayload":
        if self.end < self.begin:
            raise ValueError(f"end ({self.end}) must be >= begin ({self.begin})")
        return self


class DocumentPayload(BaseModel):
    """A document with its type declarations and annotations."""

    document_id: str
    text: str
    types: List[TypeDeclarationPayload] = Field(default_factory=list)
    annotations: List[AnnotationPayload] = Field(default_factory=list)


def document_from_payload(payload: dict | str) -> AnnotatedDocument:
    """
    Build an AnnotatedDocument from a payload dict or JSON string.

    Raises:
        pydantic.ValidationError: If the payload is malformed, invalid JSON included.
        ConfigurationError: If a type declaration is inconsistent.
        UnknownTypeError: If an annotation uses an undeclared type.
        ValueError: If an annotation ends beyond the text.
    """
    if isinstance(payload, str):
        parsed = DocumentPayload.model_validate_json(payload)
    else:
        parsed = DocumentPayload.model_validate(payload)

    type_system = TypeSystem.from_dict([t.model_dump() for t in parsed.types])

    return AnnotatedDocument(
        document_id=parsed.document_id,
        text=parsed.text,
        type_system=type_system,
        annotations=[Annotation(a.type, a.begin, a.end) for a in parsed.annotations],
    )


def document_to_payload(document: AnnotatedDocument) -> dict:
    """Serialize *document* to a payload dict, annotations in index order."""
    return DocumentPayload(
        document_id=document.document_id,
        text=document.text,
        types=[TypeDeclarationPayload(**t) for t in document.type_system.to_dict()],
        annotations=[AnnotationPayload(**a.to_dict()) for a in document.annotations],
    ).model_dump()
