"""
Exceptions raised for programmer errors.

Mismatches between a value and its descriptor are never raised; they are
returned as ValidationError records.
"""


class ConfigurationError(ValueError):
    """A descriptor or registry was set up incorrectly."""
