"""Deep clone engine."""

from .engine import ValueCategory, categorize, clone


__all__ = ["ValueCategory", "categorize", "clone"]
