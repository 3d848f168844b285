"""Mapping/sequence helpers: key filtering and shape conversion."""

from __future__ import annotations

from collections.abc import Callable, Mapping, Sequence
from typing import Any


def filter_keys(mapping: Mapping[Any, Any], predicate: Callable[[Any], bool]) -> dict[Any, Any]:
    """Return a new dict with the entries whose key satisfies ``predicate``.

    Values are kept by reference, not cloned.
    """
    return {key: mapping[key] for key in mapping if predicate(key)}


def to_list(mapping: Mapping[Any, Any], mapper: Callable[[Any, Any], Any] | None = None) -> list[Any]:
    """Return the mapping's values in order, passed through ``mapper(value, key)`` when given."""
    if not isinstance(mapping, Mapping):
        msg = f"to_list requires a mapping, got {type(mapping).__name__}"
        raise TypeError(msg)
    if mapper is None:
        return list(mapping.values())
    return [mapper(value, key) for key, value in mapping.items()]


def to_dict(
    sequence: Sequence[Any],
    mapper: Callable[[Any, int], tuple[Any, Any]] | None = None,
) -> dict[Any, Any]:
    """Convert a sequence into a dict.

    Without ``mapper`` each element is stored under its index as a string.
    With ``mapper``, ``mapper(element, index)`` must return a ``(key, value)``
    pair.
    """
    if not isinstance(sequence, Sequence) or isinstance(sequence, (str, bytes)):
        msg = f"to_dict requires a sequence, got {type(sequence).__name__}"
        raise TypeError(msg)

    output: dict[Any, Any] = {}
    for index, element in enumerate(sequence):
        if mapper is None:
            output[str(index)] = element
            continue
        pair = mapper(element, index)
        if not isinstance(pair, tuple) or len(pair) != 2:
            msg = f"mapper must return a (key, value) pair, got {pair!r}"
            raise ValueError(msg)
        key, value = pair
        output[key] = value
    return output
