"""Deep clone of plain nested values (mappings, sequences and scalars)."""

from __future__ import annotations

import copy
import datetime
import enum
import logging
import numbers
import types
from collections.abc import Callable, Mapping
from typing import Any


logger = logging.getLogger(__name__)


class ValueCategory(enum.Enum):
    """Closed set of value categories handled by :func:`clone`."""

    ABSENT = "absent"
    BOOLEAN = "boolean"
    NUMBER = "number"
    STRING = "string"
    TIMESTAMP = "timestamp"
    MAPPING = "mapping"
    SEQUENCE = "sequence"
    CALLABLE = "callable"
    UNKNOWN = "unknown"


def categorize(value: Any) -> ValueCategory:
    """Return the category used to pick a clone strategy for ``value``."""
    if value is None:
        return ValueCategory.ABSENT
    if isinstance(value, bool):
        return ValueCategory.BOOLEAN
    if isinstance(value, numbers.Number):
        return ValueCategory.NUMBER
    if isinstance(value, (str, bytes)):
        return ValueCategory.STRING
    if isinstance(value, (datetime.date, datetime.time)):
        return ValueCategory.TIMESTAMP
    if isinstance(value, Mapping):
        return ValueCategory.MAPPING
    if isinstance(value, (list, tuple)):
        return ValueCategory.SEQUENCE
    if callable(value):
        return ValueCategory.CALLABLE
    return ValueCategory.UNKNOWN


def _same(value: Any) -> Any:
    return value


def _clone_timestamp(value: datetime.date | datetime.time) -> datetime.date | datetime.time:
    cls = type(value)
    if isinstance(value, datetime.datetime):
        return cls(
            value.year,
            value.month,
            value.day,
            value.hour,
            value.minute,
            value.second,
            value.microsecond,
            value.tzinfo,
            fold=value.fold,
        )
    if isinstance(value, datetime.date):
        return cls(value.year, value.month, value.day)
    return cls(value.hour, value.minute, value.second, value.microsecond, value.tzinfo, fold=value.fold)


def _clone_mapping(value: Mapping[Any, Any]) -> dict[Any, Any]:
    if type(value) is dict or not isinstance(value, dict):
        return {key: clone(item) for key, item in value.items()}

    # dict subclasses keep their type and extra state (e.g. default_factory)
    output = copy.copy(value)
    for key, item in value.items():
        output[key] = clone(item)
    for name, attribute in getattr(value, "__dict__", {}).items():
        setattr(output, name, clone(attribute))
    return output


def _clone_sequence(value: list[Any] | tuple[Any, ...]) -> list[Any] | tuple[Any, ...]:
    if isinstance(value, tuple):
        items = [clone(item) for item in value]
        if hasattr(type(value), "_make"):
            return type(value)._make(items)
        if type(value) is tuple:
            return tuple(items)
        return type(value)(items)

    if type(value) is list:
        return [clone(item) for item in value]

    # list subclasses may carry named attributes next to the indexed slots
    output = copy.copy(value)
    output[:] = [clone(item) for item in value]
    for name, attribute in getattr(value, "__dict__", {}).items():
        setattr(output, name, clone(attribute))
    return output


def _clone_callable(value: Callable[..., Any]) -> Callable[..., Any]:
    if not isinstance(value, types.FunctionType):
        return value

    function = types.FunctionType(
        value.__code__,
        value.__globals__,
        value.__name__,
        value.__defaults__,
        value.__closure__,
    )
    function.__kwdefaults__ = copy.copy(value.__kwdefaults__)
    function.__qualname__ = value.__qualname__
    function.__doc__ = value.__doc__
    function.__module__ = value.__module__
    function.__dict__.update(value.__dict__)
    return function


def _clone_unknown(value: Any) -> Any:
    logger.warning("Unhandled input type %r; returning it uncloned", type(value).__name__)
    return value


_HANDLERS: dict[ValueCategory, Callable[[Any], Any]] = {
    ValueCategory.ABSENT: _same,
    ValueCategory.BOOLEAN: _same,
    ValueCategory.NUMBER: _same,
    ValueCategory.STRING: _same,
    ValueCategory.TIMESTAMP: _clone_timestamp,
    ValueCategory.MAPPING: _clone_mapping,
    ValueCategory.SEQUENCE: _clone_sequence,
    ValueCategory.CALLABLE: _clone_callable,
    ValueCategory.UNKNOWN: _clone_unknown,
}


def clone(value: Any) -> Any:
    """Return a deep copy of ``value`` that shares no mutable container with it.

    Scalars are returned as-is, timestamps are rebuilt from their fields and
    plain functions are copied into new function objects. Values of an unknown
    category are logged and returned unchanged. Cyclic structures are not
    supported and recurse without bound.
    """
    return _HANDLERS[categorize(value)](value)
