"""
Graph configuration.

This module defines the options that control how graphs copy user data between
each other and whether they publish change events. A configuration can be built
directly, from a mapping validated against a JSON schema, or from environment
variables.
"""

import logging
import os
from dataclasses import asdict, dataclass
from typing import Any, Dict, Mapping, Optional

from jsonschema import ValidationError as JsonSchemaError
from jsonschema import validate

from ..utils.validation import ChoiceRule, TypeRule, check_rules
from .exceptions import ConfigurationError, ValidationError

logger = logging.getLogger(__name__)

USER_DATA_COPY_MODES = ("shallow", "deep")

CONFIG_SCHEMA: Dict[str, Any] = {
    "type": "object",
    "properties": {
        "include_user_data": {"type": "boolean"},
        "user_data_copy": {"type": "string", "enum": list(USER_DATA_COPY_MODES)},
        "emit_events": {"type": "boolean"},
    },
    "additionalProperties": False,
}

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off"}


@dataclass(frozen=True)
class GraphConfig:
    """
    Options shared by a graph and every graph derived from it.

    Attributes:
        include_user_data (bool): Default for copying user data in union,
            disjoint union and copy operations
        user_data_copy (str): "shallow" copies value references, so mutable
            values are shared between graphs; "deep" clones them
        emit_events (bool): Whether mutations notify registered listeners
    """

    include_user_data: bool = True
    user_data_copy: str = "shallow"
    emit_events: bool = True

    def __post_init__(self):
        """Validate option values after initialization."""
        for name in ("include_user_data", "emit_events"):
            result = check_rules(
                getattr(self, name), [TypeRule(bool, f"{name} must be a boolean")]
            )
            if not result.is_valid:
                raise ValidationError(result.errors[0])

        result = check_rules(
            self.user_data_copy,
            [
                ChoiceRule(
                    USER_DATA_COPY_MODES,
                    f"user_data_copy must be one of: {', '.join(USER_DATA_COPY_MODES)}",
                )
            ],
        )
        if not result.is_valid:
            raise ValidationError(result.errors[0])

    @property
    def deep_copy_user_data(self) -> bool:
        return self.user_data_copy == "deep"

    def to_dict(self) -> Dict[str, Any]:
        """Return the configuration as a plain dictionary."""
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "GraphConfig":
        """
        Build a configuration from a mapping.

        Args:
            data: Mapping with any subset of the configuration keys

        Returns:
            GraphConfig: The validated configuration

        Raises:
            ConfigurationError: If the mapping violates the configuration schema
        """
        try:
            validate(instance=dict(data), schema=CONFIG_SCHEMA)
        except JsonSchemaError as e:
            raise ConfigurationError(f"Invalid graph configuration: {e.message}") from e
        return cls(**data)

    @classmethod
    def from_env(
        cls, prefix: str = "KNOTWORK_", environ: Optional[Mapping[str, str]] = None
    ) -> "GraphConfig":
        """
        Build a configuration from environment variables.

        Reads ``<prefix>INCLUDE_USER_DATA``, ``<prefix>USER_DATA_COPY`` and
        ``<prefix>EMIT_EVENTS``. Unset variables keep their defaults.

        Args:
            prefix: Variable name prefix
            environ: Mapping to read instead of ``os.environ``

        Returns:
            GraphConfig: The validated configuration

        Raises:
            ConfigurationError: If a boolean variable cannot be parsed or a
                value is rejected by the schema
        """
        environ = os.environ if environ is None else environ
        data: Dict[str, Any] = {}

        for key in ("include_user_data", "emit_events"):
            raw = environ.get(prefix + key.upper())
            if raw is not None:
                data[key] = _parse_bool(prefix + key.upper(), raw)

        raw_mode = environ.get(prefix + "USER_DATA_COPY")
        if raw_mode is not None:
            data["user_data_copy"] = raw_mode.strip().lower()

        config = cls.from_dict(data)
        logger.debug("Loaded graph configuration from environment: %s", config)
        return config


def _parse_bool(name: str, raw: str) -> bool:
    value = raw.strip().lower()
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    raise ConfigurationError(f"{name} must be a boolean value, got {raw!r}")


DEFAULT_CONFIG = GraphConfig()
