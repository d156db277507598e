"""
proptypes - declarative runtime type checking with path-tagged diagnostics.

Usage:
    from proptypes import PropTypes, check_props, validate

    schema = {
        "name": PropTypes.string.is_required,
        "tags": PropTypes.array_of(PropTypes.string),
    }

    validate(["alpha", False], schema["tags"], "tags")
    # [ValidationError(path='tags[1]', message='Expected property tags[1] to be a string'),
    #  ValidationError(path='tags', message='Expected property tags to be an array of type string')]

    result = check_props({"name": "Alice"}, schema)
"""

from .builders import (
    PropTypes,
    array_of,
    custom,
    instance_of,
    one_of,
    one_of_type,
    primitive,
    shape,
    to_descriptor,
)
from .context import ArrayFailures, Settings, current_settings, validation_context
from .descriptor import TypeDescriptor
from .engine import Engine, apply_defaults, check_props, validate
from .errors import ConfigurationError
from .paths import PropertyPath
from .registry import ValidatorRegistry, default_registry, register_type
from .schema import to_pydantic
from .types import MISSING, Err, Ok, ValidationError

__all__ = [
    # Result types
    "Ok",
    "Err",
    "MISSING",
    "ValidationError",
    "ConfigurationError",
    # Descriptors
    "TypeDescriptor",
    "PropTypes",
    "primitive",
    "array_of",
    "shape",
    "one_of",
    "one_of_type",
    "instance_of",
    "custom",
    "to_descriptor",
    # Validation
    "Engine",
    "validate",
    "check_props",
    "apply_defaults",
    "PropertyPath",
    # Registry
    "ValidatorRegistry",
    "default_registry",
    "register_type",
    # Settings
    "ArrayFailures",
    "Settings",
    "current_settings",
    "validation_context",
    # Schema
    "to_pydantic",
]
