"""Null-safe navigation over cloned nested values.

``wrap`` clones a value and returns a :class:`WrappedValue`. Attribute and
item access on a wrapped value always succeeds and records one more path
segment; only :func:`unwrap` walks the recorded path against the clone and
reports :data:`ABSENT` when a segment does not exist.
"""

from __future__ import annotations

import enum
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Final

from objectutil.cloning import clone


class Absent(enum.Enum):
    """Marker for a navigation path that passed through a missing key."""

    ABSENT = "ABSENT"

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "ABSENT"


ABSENT: Final = Absent.ABSENT


@dataclass(frozen=True, slots=True)
class _Box:
    """Holds the cloned root so scalars and containers are navigated alike."""

    value: Any


def _step(current: Any, key: Any) -> Any:
    """Resolve one path segment, returning ABSENT when it does not exist."""
    if isinstance(current, Mapping):
        try:
            return current[key] if key in current else ABSENT
        except TypeError:
            # unhashable key
            return ABSENT
    if isinstance(current, (list, tuple)):
        if isinstance(key, int) and not isinstance(key, bool):
            return current[key] if 0 <= key < len(current) else ABSENT
        extras = getattr(current, "__dict__", None)
        if isinstance(key, str) and extras is not None and key in extras:
            return extras[key]
    return ABSENT


class WrappedValue:
    """Proxy that records navigation over a boxed clone without ever failing.

    Every non-dunder attribute name is a navigation step, so the box and the
    recorded path live in a single mangled slot read through ``object``.
    """

    __slots__ = ("__state",)

    def __init__(self, box: _Box, path: tuple[Any, ...] = ()) -> None:
        object.__setattr__(self, "_WrappedValue__state", (box, path))

    def __getattribute__(self, name: str) -> Any:
        if name.startswith("__") and name.endswith("__"):
            return object.__getattribute__(self, name)
        return _child(self, name)

    def __getitem__(self, key: Any) -> WrappedValue:
        return _child(self, key)

    def __setattr__(self, name: str, value: Any) -> None:
        msg = "wrapped values are read-only; unwrap before mutating"
        raise AttributeError(msg)

    def __delattr__(self, name: str) -> None:
        msg = "wrapped values are read-only; unwrap before mutating"
        raise AttributeError(msg)

    def __repr__(self) -> str:
        _, path = _state(self)
        rendered = "".join(f"[{key!r}]" for key in path)
        return f"WrappedValue(<root>{rendered})"


def _state(wrapped: WrappedValue) -> tuple[_Box, tuple[Any, ...]]:
    return object.__getattribute__(wrapped, "_WrappedValue__state")


def _child(wrapped: WrappedValue, key: Any) -> WrappedValue:
    box, path = _state(wrapped)
    return WrappedValue(box, (*path, key))


def _resolve(wrapped: WrappedValue) -> Any:
    box, path = _state(wrapped)
    current = box.value
    for key in path:
        current = _step(current, key)
        if current is ABSENT:
            return ABSENT
    return current


def wrap(value: Any) -> WrappedValue:
    """Clone ``value`` and wrap it for null-safe navigation.

    Wrapping an already wrapped value returns it unchanged.
    """
    if isinstance(value, WrappedValue):
        return value
    return WrappedValue(_Box(clone(value)))


def unwrap(wrapped: WrappedValue, default: Any = ABSENT) -> Any:
    """Return the value ``wrapped`` points at, or ``default`` when the path is missing."""
    if not isinstance(wrapped, WrappedValue):
        msg = f"expected a WrappedValue, got {type(wrapped).__name__}"
        raise TypeError(msg)
    resolved = _resolve(wrapped)
    if resolved is ABSENT:
        return default
    return resolved
