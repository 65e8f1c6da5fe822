"""Readers for primitive fields of decoded JSON payloads.

The transit API is inconsistent about quoting: numbers and booleans often
arrive as strings. These helpers accept both forms and raise
``MalformedPayload`` for anything else.
"""

import math
import re
from collections.abc import Callable, Mapping
from datetime import datetime
from enum import Enum
from typing import Any, TypeVar

from transit_trail.domain.errors import DecodeError, MalformedPayload

T = TypeVar("T")
E = TypeVar("E", bound=Enum)

DATETIME_FORMAT = "%Y-%m-%dT%H:%M:%S"

# ASCII only: no underscores, no other unicode digits
_INTEGER = re.compile(r"[-+]?[0-9]+")
_NUMBER = re.compile(r"[-+]?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?:[eE][-+]?[0-9]+)?")


def expect_mapping(value: Any, what: str = "object") -> Mapping[str, Any]:
    """Return ``value`` if it is a JSON object."""
    if not isinstance(value, Mapping):
        raise MalformedPayload(f"expected {what}, got {type(value).__name__}")
    return value


def is_present(obj: Mapping[str, Any], key: str) -> bool:
    """A field counts as present when the key exists and is not null."""
    return obj.get(key) is not None


def require(obj: Mapping[str, Any], key: str) -> Any:
    if not is_present(obj, key):
        raise MalformedPayload("required field is missing", key)
    return obj[key]


def is_integer_literal(value: Any) -> bool:
    """True for an integer or a string of ASCII digits with an optional sign."""
    if isinstance(value, bool):
        return False
    if isinstance(value, int):
        return True
    return isinstance(value, str) and _INTEGER.fullmatch(value.strip()) is not None


def as_int(value: Any) -> int:
    """Convert an integer or an integer string; booleans and floats are rejected."""
    if isinstance(value, bool):
        raise MalformedPayload(f"expected integer, got boolean {value!r}")
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        if not is_integer_literal(value):
            raise MalformedPayload(f"expected integer, got {value!r}")
        try:
            return int(value.strip())
        except ValueError:
            raise MalformedPayload(f"integer {value!r} is too long") from None
    raise MalformedPayload(f"expected integer, got {type(value).__name__}")


def as_float(value: Any) -> float:
    """Convert a number or a numeric string to a finite float."""
    if isinstance(value, bool):
        raise MalformedPayload(f"expected number, got boolean {value!r}")
    if isinstance(value, (int, float)):
        try:
            result = float(value)
        except OverflowError:
            raise MalformedPayload("number is out of range") from None
    elif isinstance(value, str):
        if _NUMBER.fullmatch(value.strip()) is None:
            raise MalformedPayload(f"expected number, got {value!r}")
        result = float(value.strip())
    else:
        raise MalformedPayload(f"expected number, got {type(value).__name__}")
    if not math.isfinite(result):
        raise MalformedPayload(f"expected finite number, got {value!r}")
    return result


def as_str(value: Any) -> str:
    if not isinstance(value, str):
        raise MalformedPayload(f"expected string, got {type(value).__name__}")
    return value


def as_datetime(value: Any) -> datetime:
    """Parse the API's local timestamp form, ``YYYY-MM-DDTHH:MM:SS``."""
    text = as_str(value)
    try:
        return datetime.strptime(text, DATETIME_FORMAT)
    except ValueError:
        raise MalformedPayload(f"expected YYYY-MM-DDTHH:MM:SS, got {text!r}") from None


def as_enum(enum_cls: type[E]) -> Callable[[Any], E]:
    """Build a converter from a wire string to a member of ``enum_cls``."""

    def convert(value: Any) -> E:
        try:
            return enum_cls(as_str(value))
        except ValueError:
            raise MalformedPayload(
                f"{value!r} is not a valid {enum_cls.__name__.lower()}"
            ) from None

    return convert


def as_bool(value: Any) -> bool:
    """Convert a boolean or the strings "true"/"false"."""
    if isinstance(value, bool):
        return value
    if isinstance(value, str) and value.strip().lower() in ("true", "false"):
        return value.strip().lower() == "true"
    raise MalformedPayload(f"expected boolean, got {value!r}")


def as_list(value: Any) -> list[Any]:
    if not isinstance(value, list):
        raise MalformedPayload(f"expected list, got {type(value).__name__}")
    return value


def field(obj: Mapping[str, Any], key: str, convert: Callable[[Any], T]) -> T:
    """Read a required field and convert it, prefixing errors with the field name."""
    value = require(obj, key)
    try:
        return convert(value)
    except DecodeError as e:
        raise e.at(key)


def optional_field(obj: Mapping[str, Any], key: str, convert: Callable[[Any], T]) -> T | None:
    """Read an optional field; absent and null both yield None."""
    if not is_present(obj, key):
        return None
    return field(obj, key, convert)


def list_field(obj: Mapping[str, Any], key: str, convert: Callable[[Any], T]) -> list[T]:
    """Read a required list field, converting each item."""
    items = field(obj, key, as_list)
    result = []
    for index, item in enumerate(items):
        try:
            result.append(convert(item))
        except DecodeError as e:
            raise e.at(f"{key}[{index}]")
    return result
