"""
Canonical diagnostic messages.
"""

from __future__ import annotations

from typing import Any, Iterable

from .paths import PropertyPath
from .types import ValidationError


def _article(word: str) -> str:
    return "an" if word[:1].lower() in "aeiou" else "a"


def missing_required(path: PropertyPath) -> ValidationError:
    return ValidationError(str(path), f"Missing required property {path}")


def type_mismatch(path: PropertyPath, type_name: str) -> ValidationError:
    if type_name == "null":
        return ValidationError(str(path), f"Expected property {path} to be null")
    return ValidationError(
        str(path), f"Expected property {path} to be {_article(type_name)} {type_name}"
    )


def array_mismatch(path: PropertyPath, element_type: str) -> ValidationError:
    return ValidationError(
        str(path), f"Expected property {path} to be an array of type {element_type}"
    )


def shape_mismatch(path: PropertyPath) -> ValidationError:
    return ValidationError(str(path), f"Expected property {path} to match given shape")


def unknown_key(path: PropertyPath, key: Any) -> ValidationError:
    return ValidationError(str(path), f"Property {path} has an unknown key: {key}")


def not_one_of(path: PropertyPath, values: Iterable[Any]) -> ValidationError:
    options = ", ".join(str(v) for v in values)
    return ValidationError(str(path), f"Property {path} is not one of: {options}")


def no_matching_type(path: PropertyPath, type_names: Iterable[str]) -> ValidationError:
    names = ", ".join(type_names)
    return ValidationError(
        str(path), f"Expected property {path} to match one of the given types: {names}"
    )


def not_instance(path: PropertyPath, cls: type) -> ValidationError:
    return ValidationError(
        str(path), f"Expected property {path} to be an instance of {cls.__name__}"
    )


def custom_failed(path: PropertyPath, message: str | None = None) -> ValidationError:
    if message:
        return ValidationError(str(path), message.replace("{path}", str(path)))
    return ValidationError(str(path), f"Property {path} failed custom validation")


def validator_fault(path: PropertyPath, exc: BaseException) -> ValidationError:
    return ValidationError(
        str(path),
        f"Validator for property {path} raised {type(exc).__name__}: {exc}",
    )
