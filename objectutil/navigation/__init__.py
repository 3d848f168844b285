"""Null-safe navigation wrapper."""

from .wrapper import ABSENT, Absent, WrappedValue, unwrap, wrap


__all__ = ["ABSENT", "Absent", "WrappedValue", "unwrap", "wrap"]
