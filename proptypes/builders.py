"""
Descriptor builders.

Provides factory functions that return TypeDescriptor instances, plus the
PropTypes namespace:

    from proptypes import PropTypes

    schema = {
        "name": PropTypes.string.is_required,
        "tags": PropTypes.array_of(PropTypes.string),
        "owner": PropTypes.shape({
            "id": PropTypes.number.is_required,
            "email": PropTypes.string,
        }),
    }
"""

from __future__ import annotations

import datetime
from collections.abc import Mapping
from typing import Any, Callable, Iterable

from .descriptor import TypeDescriptor
from .errors import ConfigurationError
from .registry import ValidatorRegistry, default_registry


def _build(**kwargs: Any) -> TypeDescriptor:
    descriptor = TypeDescriptor(**kwargs)
    descriptor.is_required  # warm the cache
    return descriptor


def _check_descriptor(value: Any, where: str) -> TypeDescriptor:
    if not isinstance(value, TypeDescriptor):
        raise ConfigurationError(
            f"{where} must be a TypeDescriptor, got {type(value).__name__}"
        )
    return value


def primitive(tag: str, registry: ValidatorRegistry | None = None) -> TypeDescriptor:
    """
    Descriptor for a type that needs no payload.

    Works for the built-in primitives and for any tag registered with
    ``register_type``.

    Usage:
        primitive("string")
        primitive("uuid").is_required   # after register_type("uuid", ...)
    """
    registry = default_registry if registry is None else registry
    if tag not in registry:
        raise ConfigurationError(f"Unknown type: {tag}")
    return _build(type=tag)


def array_of(type_def: TypeDescriptor) -> TypeDescriptor:
    """Sequence whose every element matches type_def."""
    _check_descriptor(type_def, "array_of() element")
    return _build(type="arrayOf", type_def=type_def)


def shape(type_defs: Mapping[str, TypeDescriptor]) -> TypeDescriptor:
    """
    Mapping with exactly the given keys.

    Keys not declared in type_defs are reported as unknown.
    """
    if not isinstance(type_defs, Mapping):
        raise ConfigurationError(
            f"shape() needs a mapping of descriptors, got {type(type_defs).__name__}"
        )
    if not type_defs:
        raise ConfigurationError("shape() needs at least one key")
    for key, value in type_defs.items():
        _check_descriptor(value, f"shape() key '{key}'")
    return _build(type="shape", type_defs=type_defs)


def one_of(values: Iterable[Any]) -> TypeDescriptor:
    """
    Value must equal one of the given literals.

    Usage:
        one_of(["active", "inactive", "pending"])
    """
    if isinstance(values, (str, bytes)):
        raise ConfigurationError("one_of() needs a list of values, not a string")
    options = tuple(values)
    if not options:
        raise ConfigurationError("one_of() needs at least one value")
    return _build(type="oneOf", values=options)


def one_of_type(types: Iterable[TypeDescriptor]) -> TypeDescriptor:
    """Value must match at least one of the given descriptors."""
    alternatives = tuple(types)
    if not alternatives:
        raise ConfigurationError("one_of_type() needs at least one descriptor")
    for i, alternative in enumerate(alternatives):
        _check_descriptor(alternative, f"one_of_type() alternative {i}")
    return _build(type="oneOfType", types=alternatives)


def instance_of(cls: type) -> TypeDescriptor:
    if not isinstance(cls, type):
        raise ConfigurationError(
            f"instance_of() needs a class, got {type(cls).__name__}"
        )
    return _build(type="instanceOf", expected_class=cls)


def custom(predicate: Callable[[Any], Any], message: str | None = None) -> TypeDescriptor:
    """
    Descriptor checked by an arbitrary predicate.

    A falsy result is a violation. ``{path}`` in message is replaced with
    the property path.

    Usage:
        custom(lambda x: x > 0, "Property {path} must be positive")
    """
    if not callable(predicate):
        raise ConfigurationError(
            f"custom() needs a callable, got {type(predicate).__name__}"
        )
    return _build(type="custom", validator=predicate, message=message)


def to_descriptor(v: Any) -> TypeDescriptor:
    """
    Coerce a shorthand to a descriptor.

    Conversion rules:
        TypeDescriptor -> pass through
        str, int, float, bool, dict, list classes -> primitive
        any other class -> instance_of
        dict instance -> shape with recursive conversion
        list of one item -> array_of that item
        list of several items -> array_of(one_of_type(items))
        callable -> custom
    """
    if isinstance(v, TypeDescriptor):
        return v

    if isinstance(v, type):
        return _TYPE_SHORTHANDS.get(v) or instance_of(v)

    if isinstance(v, Mapping):
        return shape({k: to_descriptor(val) for k, val in v.items()})

    if isinstance(v, list):
        if len(v) == 0:
            raise ConfigurationError("Empty list cannot be converted to a descriptor")
        if len(v) == 1:
            return array_of(to_descriptor(v[0]))
        return array_of(one_of_type(to_descriptor(item) for item in v))

    if callable(v):
        return custom(v)

    raise ConfigurationError(f"Cannot convert {type(v).__name__} to a descriptor")


class PropTypes:
    """Namespace of ready-made descriptors and builders."""

    string = primitive("string")
    number = primitive("number")
    bool = primitive("boolean")
    func = primitive("function")
    object = primitive("object")
    array = primitive("array")
    null = primitive("null")
    date = primitive("date")
    any = primitive("any")

    array_of = staticmethod(array_of)
    shape = staticmethod(shape)
    one_of = staticmethod(one_of)
    one_of_type = staticmethod(one_of_type)
    instance_of = staticmethod(instance_of)
    custom = staticmethod(custom)


_TYPE_SHORTHANDS: dict[type, TypeDescriptor] = {
    str: PropTypes.string,
    int: PropTypes.number,
    float: PropTypes.number,
    bool: PropTypes.bool,
    dict: PropTypes.object,
    list: PropTypes.array,
    type(None): PropTypes.null,
    datetime.date: PropTypes.date,
}
