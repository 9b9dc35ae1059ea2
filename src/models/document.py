"""
AnnotatedDocument — document text plus its in-memory annotation index.
"""
from typing import Iterable, List, Optional

from src.models.annotation import Annotation
from src.models.type_system import TypeSystem


def index_order(annotation: Annotation) -> tuple:
    """Natural index order: begin ascending, longest span first, then type name."""
    return (annotation.begin, -annotation.end, annotation.type_name)


class AnnotatedDocument:
    """A single document with its own type system and annotation store."""

    def __init__(
        self,
        document_id: str,
        text: str,
        type_system: Optional[TypeSystem] = None,
        annotations: Iterable[Annotation] = (),
    ) -> None:
        self.document_id = document_id
        self.text = text
        self.type_system = type_system if type_system is not None else TypeSystem()
        self._annotations: List[Annotation] = []

        for annotation in annotations:
            self.add_annotation(annotation)

    def add_annotation(self, annotation: Annotation) -> None:
        """
        Append *annotation* to the index.

        Raises:
            UnknownTypeError: If the annotation's type is not declared.
            ValueError: If the annotation ends beyond the document text.
        """
        self.type_system.resolve_type(annotation.type_name)
        if annotation.end > len(self.text):
            raise ValueError(
                f"{annotation!r} ends beyond document text of length {len(self.text)}"
            )
        self._annotations.append(annotation)

    def iter_annotations(self, type_name: str) -> List[Annotation]:
        """
        Snapshot of annotations of *type_name* and its subtypes, in index order.

        The returned list is independent of later additions to the store.
        """
        type_names = self.type_system.subtypes_of(type_name)
        return sorted(
            (a for a in self._annotations if a.type_name in type_names),
            key=index_order,
        )

    def covered_text(self, annotation: Annotation) -> str:
        return annotation.covered_text(self.text)

    @property
    def annotations(self) -> List[Annotation]:
        return sorted(self._annotations, key=index_order)

    def __len__(self) -> int:
        return len(self._annotations)

    def __repr__(self) -> str:
        return f"AnnotatedDocument('{self.document_id}', {len(self._annotations)} annotations)"
