"""
Helper functions for classifying and normalizing source values.
"""

from collections.abc import Mapping
from typing import Any

from ..context import is_strict
from .model_helpers import is_model_instance, to_dict


def is_mapping_like(value: Any) -> bool:
    """Check if a value can be traversed as a keyed mapping."""
    return isinstance(value, Mapping) or is_model_instance(value)


def is_sequence_like(value: Any) -> bool:
    """Check if a value is an ordered, integer-indexed sequence."""
    return isinstance(value, (list, tuple))


def as_mapping(value: Any) -> dict:
    """
    Normalize a mapping-shaped value into a plain dict.

    Dicts are returned as-is (never mutated by callers). `None` becomes an
    empty dict, models are dumped and other mappings are copied.

    Raises:
        TypeError: In strict mode, if the value is not mapping-like
    """
    if isinstance(value, dict):
        return value
    if value is None:
        return {}
    if is_model_instance(value):
        return to_dict(value)
    if isinstance(value, Mapping):
        return dict(value)
    if is_strict():
        raise TypeError(f"Expected a mapping but got {type(value).__name__}")
    return {}


def as_sequence(value: Any) -> list:
    """Normalize a sequence-shaped value into a plain list."""
    if isinstance(value, list):
        return value
    if value is None:
        return []
    if isinstance(value, tuple):
        return list(value)
    if is_strict():
        raise TypeError(f"Expected a sequence but got {type(value).__name__}")
    return []
