"""
Registry mapping type tags to validator functions.

Registration is a configuration-time operation: finish registering before
validation starts, and freeze the registry if nothing should change it
afterwards.
"""

from __future__ import annotations

import logging
from typing import Iterator

from .errors import ConfigurationError
from .types import ValidatorFn
from .validators import BUILTINS

logger = logging.getLogger(__name__)


class ValidatorRegistry:
    """Tag -> validator table, seeded with the built-in types."""

    def __init__(self, builtins: bool = True):
        self._validators: dict[str, ValidatorFn] = dict(BUILTINS) if builtins else {}
        self._frozen = False

    def register(self, tag: str, validator: ValidatorFn) -> None:
        """
        Register a validator for a tag. An existing tag is overwritten.

        Raises:
            ConfigurationError: if the registry is frozen, the tag is not a
                non-empty string, or the validator is not callable.
        """
        if self._frozen:
            raise ConfigurationError(f"Cannot register '{tag}': registry is frozen")
        if not isinstance(tag, str) or not tag:
            raise ConfigurationError(f"Type tag must be a non-empty string, got {tag!r}")
        if not callable(validator):
            raise ConfigurationError(
                f"Validator for '{tag}' must be callable, got {type(validator).__name__}"
            )

        if tag in self._validators:
            logger.debug("Overwriting validator for type '%s'", tag)
        else:
            logger.debug("Registering validator for type '%s'", tag)
        self._validators[tag] = validator

    def unregister(self, tag: str) -> None:
        if self._frozen:
            raise ConfigurationError(f"Cannot unregister '{tag}': registry is frozen")
        self._validators.pop(tag, None)

    def get(self, tag: str) -> ValidatorFn:
        try:
            return self._validators[tag]
        except KeyError:
            raise ConfigurationError(f"Unknown type: {tag}") from None

    def freeze(self) -> ValidatorRegistry:
        self._frozen = True
        return self

    @property
    def frozen(self) -> bool:
        return self._frozen

    def copy(self) -> ValidatorRegistry:
        """Return an unfrozen copy with the same validators."""
        other = ValidatorRegistry(builtins=False)
        other._validators = dict(self._validators)
        return other

    def tags(self) -> list[str]:
        return list(self._validators)

    def __contains__(self, tag: object) -> bool:
        return tag in self._validators

    def __iter__(self) -> Iterator[str]:
        return iter(self._validators)

    def __len__(self) -> int:
        return len(self._validators)


default_registry = ValidatorRegistry()


def register_type(tag: str, validator: ValidatorFn) -> None:
    """Register a validator on the default registry."""
    default_registry.register(tag, validator)
