"""
Pydantic interop for descriptor schemas.

Provides to_pydantic().
"""

from __future__ import annotations

import datetime
from collections.abc import Mapping
from typing import Annotated, Any, Callable, Literal, Union
from typing import Optional as TypingOptional

from pydantic import (
    AfterValidator,
    BaseModel,
    ConfigDict,
    Field,
    Strict,
    StrictBool,
    StrictFloat,
    StrictInt,
    StrictStr,
    create_model,
)

from .descriptor import TypeDescriptor


def to_pydantic(name: str, schema: Mapping[str, TypeDescriptor]) -> type[BaseModel]:
    """
    Compile a descriptor schema to a Pydantic model.

    Args:
        name: Name of the generated model class
        schema: Mapping of property name to descriptor

    Returns:
        A Pydantic BaseModel subclass. Nested shapes become nested models
        that reject unknown keys.

    Usage:
        User = to_pydantic("User", {
            "name": PropTypes.string.is_required,
            "tags": PropTypes.array_of(PropTypes.string),
        })
        user = User(name="Alice")
    """
    if not isinstance(schema, Mapping):
        raise TypeError("Schema must be a mapping of descriptors")
    return _model(name, schema, extra="ignore")


def _model(
    name: str, type_defs: Mapping[str, TypeDescriptor], extra: str
) -> type[BaseModel]:
    fields: dict[str, Any] = {}
    for key, descriptor in type_defs.items():
        fields[key] = _extract_pydantic_field(descriptor, f"{name}_{key}")

    config = ConfigDict(arbitrary_types_allowed=True, extra=extra)  # type: ignore[typeddict-item]
    return create_model(name, __config__=config, **fields)


def _extract_pydantic_field(d: TypeDescriptor, model_name: str) -> tuple[Any, Any]:
    """Extract Pydantic field type and default from a descriptor."""
    field_type = _python_type(d, model_name)
    if d.required:
        return (field_type, ...)
    if d.has_default:
        if callable(d.default):
            return (TypingOptional[field_type], Field(default_factory=d.default))
        return (TypingOptional[field_type], d.default)
    return (TypingOptional[field_type], None)


def _python_type(d: TypeDescriptor, model_name: str) -> Any:
    match d:
        case TypeDescriptor(type="string"):
            return StrictStr
        case TypeDescriptor(type="number"):
            return Union[StrictInt, StrictFloat]
        case TypeDescriptor(type="boolean"):
            return StrictBool
        case TypeDescriptor(type="function"):
            return Callable[..., Any]
        case TypeDescriptor(type="object"):
            return dict[str, Any]
        case TypeDescriptor(type="array"):
            return list[Any]
        case TypeDescriptor(type="null"):
            return type(None)
        case TypeDescriptor(type="date"):
            return Union[
                Annotated[datetime.datetime, Strict()],
                Annotated[datetime.date, Strict()],
            ]
        case TypeDescriptor(type="arrayOf", type_def=item):
            return list[_python_type(item, model_name)]  # type: ignore[misc]
        case TypeDescriptor(type="shape", type_defs=type_defs):
            return _model(model_name, type_defs, extra="forbid")
        case TypeDescriptor(type="oneOf", values=values):
            return Literal[values]  # type: ignore[valid-type]
        case TypeDescriptor(type="oneOfType", types=types):
            alternatives = tuple(_python_type(t, model_name) for t in types)
            return Union[alternatives]  # type: ignore[valid-type]
        case TypeDescriptor(type="instanceOf", expected_class=cls):
            return cls
        case TypeDescriptor(type="custom", validator=predicate, message=message):
            return Annotated[Any, AfterValidator(_custom_check(predicate, message))]

    return Any


def _custom_check(predicate: Callable[[Any], Any], message: str | None):
    def check(value: Any) -> Any:
        try:
            passed = predicate(value)
        except Exception as e:
            raise ValueError(f"custom validator raised {type(e).__name__}: {e}") from e
        if not passed:
            raise ValueError(message or "failed custom validation")
        return value

    return check
