"""
PropagationResult — outcome of one propagation pass over a document.
"""
from dataclasses import dataclass, field
from typing import List, Optional

from src.models.annotation import Annotation


@dataclass
class PropagationResult:
    """Annotations created for one document, with pass statistics."""

    document_id: str
    created: List[Annotation] = field(default_factory=list)
    sources_scanned: int = 0
    targets_scanned: int = 0
    candidates_found: int = 0
    duplicates_suppressed: int = 0
    duration_ms: int = 0
    error: Optional[str] = None     # set when the pass was aborted

    @property
    def succeeded(self) -> bool:
        return self.error is None

    @classmethod
    def failed(cls, document_id: str, error: Exception) -> "PropagationResult":
        """Result for a document whose pass raised *error*."""
        return cls(document_id=document_id, error=f"{type(error).__name__}: {error}")

    def to_dict(self) -> dict:
        return {
            "document_id": self.document_id,
            "created": [a.to_dict() for a in self.created],
            "error": self.error,
            "processing_metadata": {
                "sources_scanned": self.sources_scanned,
                "targets_scanned": self.targets_scanned,
                "candidates_found": self.candidates_found,
                "duplicates_suppressed": self.duplicates_suppressed,
                "annotations_created": len(self.created),
                "propagation_duration_ms": self.duration_ms,
            },
        }
