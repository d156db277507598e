"""
The TypeDescriptor record.

A descriptor is plain, immutable data: a type tag, a requiredness flag and
the payload that tag needs. Descriptors are built with the functions in
``proptypes.builders`` rather than instantiated directly.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from functools import cached_property
from types import MappingProxyType
from typing import Any, Callable, Mapping

from .errors import ConfigurationError
from .types import MISSING

# Payload field each built-in container tag needs
_PAYLOADS = {
    "arrayOf": "type_def",
    "shape": "type_defs",
    "oneOf": "values",
    "oneOfType": "types",
    "instanceOf": "expected_class",
    "custom": "validator",
}


@dataclass(frozen=True, eq=False)
class TypeDescriptor:
    """
    Declarative description of an expected value.

    Only the payload fields belonging to ``type`` are populated:

    - ``arrayOf``: type_def
    - ``shape``: type_defs
    - ``oneOf``: values
    - ``oneOfType``: types
    - ``instanceOf``: expected_class
    - ``custom``: validator (and optionally message)
    """

    type: str
    required: bool = False
    type_def: TypeDescriptor | None = None
    type_defs: Mapping[str, TypeDescriptor] | None = None
    values: tuple[Any, ...] | None = None
    types: tuple[TypeDescriptor, ...] | None = None
    expected_class: type | None = None
    validator: Callable[[Any], Any] | None = None
    message: str | None = None
    default: Any = field(default=MISSING, repr=False)

    def __post_init__(self) -> None:
        self._check_payload()
        if self.type_defs is not None and not isinstance(
            self.type_defs, MappingProxyType
        ):
            object.__setattr__(
                self, "type_defs", MappingProxyType(dict(self.type_defs))
            )

    @cached_property
    def is_required(self) -> TypeDescriptor:
        """The same descriptor with ``required=True``; cached per instance."""
        if self.required:
            return self
        return replace(self, required=True)

    @property
    def has_default(self) -> bool:
        return self.default is not MISSING

    def with_default(self, value: Any) -> TypeDescriptor:
        """Return a copy carrying a default used by ``apply_defaults``."""
        return replace(self, default=value)

    def resolve_default(self) -> Any:
        if callable(self.default):
            return self.default()
        return self.default

    def _check_payload(self) -> None:
        field_name = _PAYLOADS.get(self.type)
        if field_name is None:
            return

        for other in _PAYLOADS.values():
            if other != field_name and getattr(self, other) is not None:
                raise ConfigurationError(
                    f"'{self.type}' descriptor cannot carry '{other}'"
                )

        payload = getattr(self, field_name)
        if payload is None:
            raise ConfigurationError(f"'{self.type}' descriptor needs '{field_name}'")

        match self.type:
            case "arrayOf" if not isinstance(payload, TypeDescriptor):
                raise ConfigurationError("'arrayOf' type_def must be a TypeDescriptor")
            case "shape" if not isinstance(payload, Mapping) or not all(
                isinstance(d, TypeDescriptor) for d in payload.values()
            ):
                raise ConfigurationError(
                    "'shape' type_defs must map keys to TypeDescriptors"
                )
            case "oneOfType" if not all(isinstance(d, TypeDescriptor) for d in payload):
                raise ConfigurationError(
                    "'oneOfType' types must all be TypeDescriptors"
                )
            case "instanceOf" if not isinstance(payload, type):
                raise ConfigurationError("'instanceOf' expected_class must be a class")
            case "custom" if not callable(payload):
                raise ConfigurationError("'custom' validator must be callable")
