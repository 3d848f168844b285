"""objectutil - deep clone, null-safe navigation and keyed upserts for plain nested data"""

from ._version import version as __version__
from .cloning import ValueCategory, categorize, clone
from .mappings import filter_keys, to_dict, to_list
from .navigation import ABSENT, Absent, WrappedValue, unwrap, wrap
from .records import update_in, upsert_merge, upsert_merge_by_id


__all__ = [
    "ABSENT",
    "Absent",
    "ValueCategory",
    "WrappedValue",
    "__version__",
    "categorize",
    "clone",
    "filter_keys",
    "to_dict",
    "to_list",
    "unwrap",
    "update_in",
    "upsert_merge",
    "upsert_merge_by_id",
    "wrap",
]
