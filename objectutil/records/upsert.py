"""Update-or-append merging for lists of keyed records."""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any, NamedTuple

from objectutil.cloning import clone
from objectutil.config import DEFAULT_IDENTITY_KEY
from objectutil.navigation import ABSENT


if TYPE_CHECKING:
    from collections.abc import Sequence


_MISSING = object()


class _UpdateResult(NamedTuple):
    updated: bool
    records: list[Any]


def _same_identity(left: Any, right: Any) -> bool:
    # booleans only match booleans, so True is not the identity 1
    if isinstance(left, bool) or isinstance(right, bool):
        return type(left) is type(right) and left == right
    return left == right


def _update_in(
    records: Sequence[Any] | None,
    candidate: Mapping[str, Any] | None,
    identity_key: str,
) -> _UpdateResult:
    if records is None or records is ABSENT:
        cloned: list[Any] = []
    elif isinstance(records, list):
        cloned = clone(records)
    elif isinstance(records, tuple):
        cloned = list(clone(records))
    else:
        cloned = [clone(record) for record in records]
    if candidate is None or candidate is ABSENT:
        return _UpdateResult(updated=False, records=cloned)

    identity = candidate.get(identity_key, _MISSING)
    for index, record in enumerate(cloned):
        if not isinstance(record, Mapping):
            continue
        if _same_identity(record.get(identity_key, _MISSING), identity):
            cloned[index] = {**record, **clone(candidate)}
            return _UpdateResult(updated=True, records=cloned)
    return _UpdateResult(updated=False, records=cloned)


def update_in(
    records: Sequence[Any] | None,
    candidate: Mapping[str, Any] | None,
    identity_key: str = DEFAULT_IDENTITY_KEY,
) -> list[Any]:
    """Clone ``records`` and merge ``candidate`` into the first record sharing its identity.

    Nothing is appended when no record matches.
    """
    return _update_in(records, candidate, identity_key).records


def upsert_merge(
    records: Sequence[Any] | None,
    candidate: Mapping[str, Any] | None,
    identity_key: str = DEFAULT_IDENTITY_KEY,
) -> list[Any]:
    """Clone ``records`` and update-or-append ``candidate`` by ``identity_key``.

    The first record whose identity value equals the candidate's is replaced
    by the union of both records, with the candidate's values winning on
    collisions. Later duplicates are left untouched. When no record matches,
    a clone of the candidate is appended. Neither argument is mutated.
    """
    result = _update_in(records, candidate, identity_key)
    if not result.updated and candidate is not None and candidate is not ABSENT:
        result.records.append(clone(candidate))
    return result.records


def upsert_merge_by_id(records: Sequence[Any] | None, candidate: Mapping[str, Any] | None) -> list[Any]:
    """Shortcut for :func:`upsert_merge` keyed on ``"id"``."""
    return upsert_merge(records, candidate, "id")
