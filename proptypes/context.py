"""
Context manager for validation settings (array reporting, path separator).
"""

from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass, replace
from enum import Enum


class ArrayFailures(Enum):
    """Which failing array elements keep their own diagnostics."""

    FIRST = "first"
    ALL = "all"


@dataclass(frozen=True, slots=True)
class Settings:
    array_failures: ArrayFailures = ArrayFailures.FIRST
    separator: str = "."


# Context variable for the active settings
_settings: ContextVar[Settings] = ContextVar("proptypes_settings", default=Settings())


def current_settings() -> Settings:
    """Return the settings active in the current context."""
    return _settings.get()


@contextmanager
def validation_context(
    *,
    array_failures: ArrayFailures | str | None = None,
    separator: str | None = None,
):
    """
    Context manager for validation settings.

    Args:
        array_failures: ``ArrayFailures.FIRST`` (default) keeps the errors of
            the first failing element only; ``ArrayFailures.ALL`` keeps every
            failing element. Every element is validated either way.
        separator: String placed between a path and a shape key.

    Example:
        from proptypes import PropTypes, validate, validation_context

        tags = PropTypes.array_of(PropTypes.string)

        validate([1, 2], tags, "tags")
        # ['Expected property tags[0] to be a string', ...]

        with validation_context(array_failures="all"):
            validate([1, 2], tags, "tags")
            # tags[0] and tags[1] both reported
    """
    settings = _settings.get()
    if array_failures is not None:
        settings = replace(settings, array_failures=ArrayFailures(array_failures))
    if separator is not None:
        settings = replace(settings, separator=separator)

    token = _settings.set(settings)
    try:
        yield settings
    finally:
        _settings.reset(token)
