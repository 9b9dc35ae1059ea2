"""
Propagation errors.

Both error kinds abort the current document before the commit phase, so a
failed pass never leaves partial annotations behind.
"""
from typing import Optional


class PropagationError(Exception):
    """Base class for span propagation failures."""


class ConfigurationError(PropagationError):
    """Raised when propagator parameters or type names are invalid."""

    def __init__(self, message: str, type_name: Optional[str] = None) -> None:
        self.type_name = type_name
        super().__init__(message)


class UnknownTypeError(ConfigurationError):
    """Raised when a type name is not declared in the document's type system."""

    def __init__(self, type_name: str) -> None:
        super().__init__(
            f"Type {type_name} is not defined in the type system.",
            type_name=type_name,
        )


class AnnotationConstructionError(PropagationError):
    """Raised when annotations of the source type cannot be instantiated."""

    def __init__(self, type_name: str, reason: str = "") -> None:
        self.type_name = type_name
        self.reason = reason
        message = f"Unable to create {type_name} annotation."
        if reason:
            message = f"{message} {reason}"
        super().__init__(message)
