"""Type checks applied to raw response fields.

Every check raises :class:`SchemaError` naming the offending field, before
any typed result is constructed.
"""
from __future__ import annotations

from typing import Any

from .errors import SchemaError


def is_string(value: Any, name: str, *, optional: bool = False) -> None:
    if optional and value is None:
        return
    if not isinstance(value, str):
        raise SchemaError(f"{name} must be a string")


def is_integer(value: Any, name: str, *, optional: bool = False) -> None:
    if optional and value is None:
        return
    # bool is an int subclass but never a valid integer field
    if isinstance(value, bool) or not isinstance(value, int):
        raise SchemaError(f"{name} must be an integer")


def is_number(value: Any, name: str, *, optional: bool = False) -> None:
    if optional and value is None:
        return
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise SchemaError(f"{name} must be a number")


def is_boolean(value: Any, name: str, *, optional: bool = False) -> None:
    if optional and value is None:
        return
    if not isinstance(value, bool):
        raise SchemaError(f"{name} must be a boolean")


def is_array(value: Any, name: str, *, optional: bool = False) -> None:
    if optional and value is None:
        return
    if not isinstance(value, list):
        raise SchemaError(f"{name} must be an array")


def is_array_of_strings(value: Any, name: str, *, optional: bool = False) -> None:
    if optional and value is None:
        return
    is_array(value, name)
    if not all(isinstance(item, str) for item in value):
        raise SchemaError(f"all values in {name} must be a string")


def is_object(value: Any, name: str, *, optional: bool = False) -> None:
    if optional and value is None:
        return
    if not isinstance(value, dict):
        raise SchemaError(f"{name} must be an object")
