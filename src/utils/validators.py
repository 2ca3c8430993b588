"""Lightweight validation helpers."""

from typing import Any


def is_positive_int(value: Any) -> bool:
    """True for ints greater than zero. Booleans are not counted as ints."""
    return isinstance(value, int) and not isinstance(value, bool) and value > 0


def has_attributes(obj: Any, *names: str) -> bool:
    """True if obj is not None and exposes every attribute in names."""
    return obj is not None and all(hasattr(obj, name) for name in names)
