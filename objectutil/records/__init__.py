"""Keyed record list merging."""

from .upsert import update_in, upsert_merge, upsert_merge_by_id


__all__ = ["update_in", "upsert_merge", "upsert_merge_by_id"]
