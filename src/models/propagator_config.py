"""
PropagatorConfig — frozen, validated component parameters.
"""
from dataclasses import dataclass

from jsonschema import ValidationError, validate

from src.config import settings
from src.config.constants import (
    PARAM_NAME_CASE_SENSITIVE,
    PARAM_NAME_RESPECT_WORD_BOUNDARIES,
    PARAM_NAME_SOURCE_TYPE,
    PARAM_NAME_TARGET_TYPE,
)
from src.config.schemas import PROPAGATOR_PARAMS_SCHEMA
from src.span_propagation.errors import ConfigurationError


@dataclass(frozen=True)
class PropagatorConfig:
    """Parameters of one span propagator instance."""

    source_type: str
    target_type: str
    respect_word_boundaries: bool
    case_sensitive: bool

    @classmethod
    def from_params(cls, params: dict) -> "PropagatorConfig":
        """
        Build a config from a parameter dict keyed by parameter name.

        Raises:
            ConfigurationError: If a parameter is missing or has the wrong type.
        """
        try:
            validate(instance=params, schema=PROPAGATOR_PARAMS_SCHEMA)
        except ValidationError as e:
            raise ConfigurationError(f"Invalid propagator parameters: {e.message}") from e

        return cls(
            source_type=params[PARAM_NAME_SOURCE_TYPE],
            target_type=params[PARAM_NAME_TARGET_TYPE],
            respect_word_boundaries=params[PARAM_NAME_RESPECT_WORD_BOUNDARIES],
            case_sensitive=params[PARAM_NAME_CASE_SENSITIVE],
        )

    @classmethod
    def from_settings(cls) -> "PropagatorConfig":
        """Build a config from the environment (see src.config.settings)."""
        return cls.from_params({
            PARAM_NAME_SOURCE_TYPE: settings.SPAN_SOURCE_TYPE,
            PARAM_NAME_TARGET_TYPE: settings.SPAN_TARGET_TYPE,
            PARAM_NAME_RESPECT_WORD_BOUNDARIES: settings.SPAN_RESPECT_WORD_BOUNDARIES,
            PARAM_NAME_CASE_SENSITIVE: settings.SPAN_CASE_SENSITIVE,
        })

    def to_params(self) -> dict:
        return {
            PARAM_NAME_SOURCE_TYPE: self.source_type,
            PARAM_NAME_TARGET_TYPE: self.target_type,
            PARAM_NAME_RESPECT_WORD_BOUNDARIES: self.respect_word_boundaries,
            PARAM_NAME_CASE_SENSITIVE: self.case_sensitive,
        }
