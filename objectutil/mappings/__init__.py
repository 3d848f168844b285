"""Mapping filtering and mapping/sequence conversion."""

from .convert import filter_keys, to_dict, to_list


__all__ = ["filter_keys", "to_dict", "to_list"]
