"""
TypeSystem — registry of declared annotation types.

Annotation types are data: a type name is resolved against the registry and
new annotations are built through a constructor closure resolved once per
pass, never by reflecting on the name at scan time.
"""
from dataclasses import dataclass
from typing import Callable, Dict, List, Optional, Set

from src.config.constants import ROOT_TYPE_NAME
from src.models.annotation import Annotation
from src.span_propagation.errors import (
    AnnotationConstructionError,
    ConfigurationError,
    UnknownTypeError,
)

AnnotationFactory = Callable[[int, int], Annotation]


@dataclass(frozen=True)
class AnnotationType:
    """A declared annotation type."""

    name: str
    supertype: Optional[str] = ROOT_TYPE_NAME
    abstract: bool = False

    def to_dict(self) -> dict:
        return {
            "name": self.name,
            "supertype": self.supertype,
            "abstract": self.abstract,
        }


class TypeSystem:
    """Declared annotation types with single inheritance from ``Annotation``."""

    def __init__(self) -> None:
        self._types: Dict[str, AnnotationType] = {
            ROOT_TYPE_NAME: AnnotationType(ROOT_TYPE_NAME, supertype=None, abstract=True),
        }

    def declare(
        self,
        name: str,
        supertype: Optional[str] = ROOT_TYPE_NAME,
        abstract: bool = False,
    ) -> AnnotationType:
        """
        Declare a new type, or return the existing one if identical.

        Raises:
            ConfigurationError: If the supertype is unknown or *name* is
                already declared with a different definition.
        """
        if supertype is None:
            supertype = ROOT_TYPE_NAME
        if supertype not in self._types:
            raise ConfigurationError(
                f"Supertype {supertype} of {name} is not defined in the type system.",
                type_name=supertype,
            )

        declared = AnnotationType(name, supertype=supertype, abstract=abstract)
        existing = self._types.get(name)
        if existing is not None:
            if existing != declared:
                raise ConfigurationError(
                    f"Type {name} is already declared as {existing}.",
                    type_name=name,
                )
            return existing

        self._types[name] = declared
        return declared

    def resolve_type(self, name: str) -> AnnotationType:
        try:
            return self._types[name]
        except KeyError:
            raise UnknownTypeError(name) from None

    def has_type(self, name: str) -> bool:
        return name in self._types

    def is_subtype(self, name: str, ancestor: str) -> bool:
        """True if *name* is *ancestor* or inherits from it."""
        current: Optional[str] = self.resolve_type(name).name
        while current is not None:
            if current == ancestor:
                return True
            current = self._types[current].supertype
        return False

    def subtypes_of(self, name: str) -> Set[str]:
        """All declared types inheriting from *name*, *name* included."""
        self.resolve_type(name)
        return {t for t in self._types if self.is_subtype(t, name)}

    def annotation_factory(self, name: str) -> AnnotationFactory:
        """
        Resolve a constructor closure for annotations of type *name*.

        Raises:
            UnknownTypeError: If *name* is not declared.
            AnnotationConstructionError: If the type is abstract.
        """
        annotation_type = self.resolve_type(name)
        if annotation_type.abstract:
            raise AnnotationConstructionError(name, "The type is abstract.")

        def create(begin: int, end: int) -> Annotation:
            try:
                return Annotation(annotation_type.name, begin, end)
            except ValueError as e:
                raise AnnotationConstructionError(annotation_type.name, str(e)) from e

        return create

    @property
    def type_names(self) -> List[str]:
        return sorted(self._types)

    def to_dict(self) -> List[dict]:
        """Declared types except the root, supertypes before subtypes."""
        ordered: List[dict] = []
        seen: Set[str] = {ROOT_TYPE_NAME}

        def visit(name: str) -> None:
            if name in seen:
                return
            annotation_type = self._types[name]
            if annotation_type.supertype is not None:
                visit(annotation_type.supertype)
            seen.add(name)
            ordered.append(annotation_type.to_dict())

        for name in sorted(self._types):
            visit(name)
        return ordered

    @classmethod
    def from_dict(cls, declarations: List[dict]) -> "TypeSystem":
        """
        Build a type system from a list of ``{"name", "supertype", "abstract"}``.

        Declarations may appear in any order as long as every supertype is
        declared somewhere in the list.
        """
        type_system = cls()
        pending = list(declarations)

        while pending:
            remaining = [
                d for d in pending
                if (d.get("supertype") or ROOT_TYPE_NAME) not in type_system._types
            ]
            if len(remaining) == len(pending):
                missing = remaining[0].get("supertype")
                raise ConfigurationError(
                    f"Supertype {missing} of {remaining[0]['name']} is not defined in the type system.",
                    type_name=missing,
                )
            for d in pending:
                if d not in remaining:
                    type_system.declare(
                        d["name"],
                        supertype=d.get("supertype"),
                        abstract=d.get("abstract", False),
                    )
            pending = remaining

        return type_system

    def __contains__(self, name: object) -> bool:
        return name in self._types

    def __repr__(self) -> str:
        return f"TypeSystem({self.type_names})"
