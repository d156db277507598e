"""
Built-in validator functions.

Each validator has the signature ``(engine, value, descriptor, path)`` and
returns a list of ValidationError. Validators are only called with present
values; absence is handled by the engine. Container validators recurse
through ``engine.validate``.
"""

from __future__ import annotations

import datetime
import numbers
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any, Callable

from . import messages
from .context import ArrayFailures
from .types import MISSING

if TYPE_CHECKING:
    from .descriptor import TypeDescriptor
    from .engine import Engine
    from .paths import PropertyPath
    from .types import ValidationErrors


def _is_number(x: Any) -> bool:
    return isinstance(x, numbers.Real) and not isinstance(x, bool)


def _is_array(x: Any) -> bool:
    return isinstance(x, (list, tuple))


def type_check(name: str, check: Callable[[Any], bool]):
    """Build a validator that emits a single type mismatch when check fails."""

    def validate_(
        engine: Engine, value: Any, descriptor: TypeDescriptor, path: PropertyPath
    ) -> ValidationErrors:
        if check(value):
            return []
        return [messages.type_mismatch(path, name)]

    validate_.__name__ = f"validate_{name}"
    return validate_


def validate_any(
    engine: Engine, value: Any, descriptor: TypeDescriptor, path: PropertyPath
) -> ValidationErrors:
    return []


def validate_array_of(
    engine: Engine, value: Any, descriptor: TypeDescriptor, path: PropertyPath
) -> ValidationErrors:
    if not _is_array(value):
        return [messages.type_mismatch(path, "array")]

    item_def = descriptor.type_def
    keep_all = engine.settings.array_failures == ArrayFailures.ALL

    errors: ValidationErrors = []
    failed = False
    for i, item in enumerate(value):
        item_errors = engine.validate(item, item_def, path.index(i))
        if not item_errors:
            continue
        if keep_all or not failed:
            errors.extend(item_errors)
        failed = True

    if failed:
        errors.append(messages.array_mismatch(path, item_def.type))
    return errors


def validate_shape(
    engine: Engine, value: Any, descriptor: TypeDescriptor, path: PropertyPath
) -> ValidationErrors:
    if not isinstance(value, Mapping):
        return [messages.type_mismatch(path, "object")]

    type_defs = descriptor.type_defs

    errors: ValidationErrors = []
    for key, field_def in type_defs.items():
        field_value = value.get(key, MISSING)
        errors.extend(engine.validate(field_value, field_def, path.key(key)))

    for key in value:
        if key not in type_defs:
            errors.append(messages.unknown_key(path, key))

    if errors:
        errors.append(messages.shape_mismatch(path))
    return errors


def validate_one_of(
    engine: Engine, value: Any, descriptor: TypeDescriptor, path: PropertyPath
) -> ValidationErrors:
    options = descriptor.values or ()
    for option in options:
        # True == 1 in Python
        if isinstance(option, bool) != isinstance(value, bool):
            continue
        if option == value:
            return []
    return [messages.not_one_of(path, options)]


def validate_one_of_type(
    engine: Engine, value: Any, descriptor: TypeDescriptor, path: PropertyPath
) -> ValidationErrors:
    alternatives = descriptor.types or ()
    for alternative in alternatives:
        if not engine.validate(value, alternative, path):
            return []
    return [messages.no_matching_type(path, [alt.type for alt in alternatives])]


def validate_instance_of(
    engine: Engine, value: Any, descriptor: TypeDescriptor, path: PropertyPath
) -> ValidationErrors:
    cls = descriptor.expected_class
    if isinstance(value, cls):
        return []
    return [messages.not_instance(path, cls)]


def validate_custom(
    engine: Engine, value: Any, descriptor: TypeDescriptor, path: PropertyPath
) -> ValidationErrors:
    predicate = descriptor.validator
    if predicate(value):
        return []
    return [messages.custom_failed(path, descriptor.message)]


BUILTINS: dict[str, Callable[..., ValidationErrors]] = {
    "string": type_check("string", lambda x: isinstance(x, str)),
    "number": type_check("number", _is_number),
    "boolean": type_check("boolean", lambda x: isinstance(x, bool)),
    "function": type_check("function", callable),
    "object": type_check("object", lambda x: isinstance(x, Mapping)),
    "array": type_check("array", _is_array),
    "null": type_check("null", lambda x: x is None),
    "date": type_check("date", lambda x: isinstance(x, datetime.date)),
    "any": validate_any,
    "arrayOf": validate_array_of,
    "shape": validate_shape,
    "oneOf": validate_one_of,
    "oneOfType": validate_one_of_type,
    "instanceOf": validate_instance_of,
    "custom": validate_custom,
}
