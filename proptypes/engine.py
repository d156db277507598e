"""
The recursive validation driver.

Provides the Engine class plus validate(), check_props() and
apply_defaults() for callers that validate a whole set of properties.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from . import messages
from .context import Settings, current_settings
from .descriptor import TypeDescriptor
from .errors import ConfigurationError
from .paths import PropertyPath
from .registry import ValidatorRegistry, default_registry
from .types import MISSING, Err, Ok, ValidationErrors

logger = logging.getLogger(__name__)


class Engine:
    """
    Validates values against descriptors using a registry and settings.

    The registry is only read during validation. Settings default to the
    ones active in ``validation_context`` when the engine is created.
    """

    def __init__(
        self,
        registry: ValidatorRegistry | None = None,
        settings: Settings | None = None,
    ):
        self.registry = default_registry if registry is None else registry
        self.settings = current_settings() if settings is None else settings

    def validate(
        self,
        value: Any,
        descriptor: TypeDescriptor,
        path: str | PropertyPath,
    ) -> ValidationErrors:
        """
        Validate one value.

        Returns:
            Errors in encounter order; an empty list when the value is valid.

        Raises:
            ConfigurationError: descriptor is not a TypeDescriptor, its
                type tag is not registered, or path is empty.
        """
        if not isinstance(descriptor, TypeDescriptor):
            raise ConfigurationError(
                f"Expected a TypeDescriptor, got {type(descriptor).__name__}"
            )
        path = PropertyPath.root(path, self.settings.separator)
        if not path.segments:
            raise ConfigurationError("Property path must not be empty")

        if value is MISSING:
            if descriptor.required:
                return [messages.missing_required(path)]
            return []

        validator = self.registry.get(descriptor.type)
        try:
            errors = list(validator(self, value, descriptor, path))
        except ConfigurationError:
            raise
        except Exception as e:
            logger.warning(
                "Validator for type '%s' failed on property %s",
                descriptor.type,
                path,
                exc_info=True,
            )
            return [messages.validator_fault(path, e)]

        return errors

    def check_props(
        self, props: Mapping[str, Any], schema: Mapping[str, TypeDescriptor]
    ) -> Ok[Mapping[str, Any]] | Err[ValidationErrors]:
        """Validate every property declared in schema, in declaration order."""
        if not isinstance(props, Mapping):
            raise TypeError(f"Props must be a mapping, got {type(props).__name__}")

        errors: ValidationErrors = []
        for name, descriptor in schema.items():
            prop_errors = self.validate(props.get(name, MISSING), descriptor, name)
            if prop_errors:
                logger.debug("Property %s failed with %d error(s)", name, len(prop_errors))
            errors.extend(prop_errors)

        return Err(errors) if errors else Ok(props)


def validate(
    value: Any,
    descriptor: TypeDescriptor,
    path: str | PropertyPath,
    *,
    registry: ValidatorRegistry | None = None,
) -> ValidationErrors:
    """
    Validate a value against a descriptor.

    Pass ``MISSING`` as the value for an absent property.

    Usage:
        validate(["alpha", False], PropTypes.array_of(PropTypes.string), "bar")
        # [ValidationError("bar[1]", "Expected property bar[1] to be a string"),
        #  ValidationError("bar", "Expected property bar to be an array of type string")]
    """
    return Engine(registry).validate(value, descriptor, path)


def check_props(
    props: Mapping[str, Any],
    schema: Mapping[str, TypeDescriptor],
    *,
    engine: Engine | None = None,
) -> Ok[Mapping[str, Any]] | Err[ValidationErrors]:
    """
    Validate a mapping of properties against a schema of descriptors.

    Returns:
        Ok(props) if every property passes
        Err([ValidationError, ...]) otherwise

    Usage:
        schema = {
            "name": PropTypes.string.is_required,
            "tags": PropTypes.array_of(PropTypes.string),
        }
        result = check_props({"name": "Alice"}, schema)
    """
    return (engine or Engine()).check_props(props, schema)


def apply_defaults(
    props: Mapping[str, Any], schema: Mapping[str, TypeDescriptor]
) -> dict[str, Any]:
    """Return a copy of props with descriptor defaults filled in for absent keys."""
    result = dict(props)
    for name, descriptor in schema.items():
        if name not in result and descriptor.has_default:
            result[name] = descriptor.resolve_default()
    return result
