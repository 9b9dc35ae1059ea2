"""
Annotation and MatchCandidate — typed spans over document text.
"""
from dataclasses import dataclass
from typing import Tuple

OffsetKey = Tuple[int, int]


@dataclass(frozen=True)
class Annotation:
    """A typed span over document text. ``end`` is exclusive."""

    type_name: str
    begin: int
    end: int

    def __post_init__(self) -> None:
        if self.begin < 0:
            raise ValueError(f"begin must be >= 0, got {self.begin}")
        if self.end < self.begin:
            raise ValueError(
                f"end ({self.end}) must be >= begin ({self.begin})"
            )

    @property
    def offset_key(self) -> OffsetKey:
        return (self.begin, self.end)

    def span_length(self) -> int:
        return self.end - self.begin

    def covered_text(self, text: str) -> str:
        """Return the substring of *text* delimited by this annotation."""
        return text[self.begin : self.end]

    def to_dict(self) -> dict:
        return {
            "type": self.type_name,
            "begin": self.begin,
            "end": self.end,
        }

    def __repr__(self) -> str:
        return f"Annotation({self.type_name}, [{self.begin},{self.end}])"


@dataclass(frozen=True)
class MatchCandidate:
    """
    A proposed source-type span found inside a target annotation.

    Offsets are absolute document offsets; the source/target offsets record
    which annotation produced the pattern and which one was scanned.
    """

    begin: int
    end: int
    source_begin: int
    source_end: int
    target_begin: int
    target_end: int

    @property
    def offset_key(self) -> OffsetKey:
        return (self.begin, self.end)

    def __repr__(self) -> str:
        return (
            f"MatchCandidate([{self.begin},{self.end}] "
            f"from [{self.source_begin},{self.source_end}] "
            f"in [{self.target_begin},{self.target_end}])"
        )
