"""
Capability dispatch: pick the operation set that fits a value's shape.

    from immuta import immutable

    old = {"key": "val"}
    new = immutable(old).set("key2", "val2")

A list or tuple is a sequence and gets a `SequenceView`; anything else is
treated as a keyed mapping and gets a `MappingView`. Each view method
returns the raw result of the underlying library function.
"""

import logging
from enum import Enum
from typing import Any, Hashable, Union

from . import objects, paths, sequences
from .accessor import AccessorSpec, Identity
from .lib.core_helpers import is_sequence_like

logger = logging.getLogger(__name__)


class Shape(Enum):
    """Runtime shape of a value."""

    MAPPING = "mapping"
    SEQUENCE = "sequence"


def classify(value: Any) -> Shape:
    """Classify a value as a sequence (list/tuple) or, by default, a mapping."""
    return Shape.SEQUENCE if is_sequence_like(value) else Shape.MAPPING


class MappingView:
    """Operations available on a keyed mapping."""

    shape = Shape.MAPPING
    operations = (
        "get",
        "get_in",
        "set",
        "set_in",
        "remove",
        "remove_in",
        "merge",
        "merge_deep",
        "map",
        "filter",
        "to_array",
        "pick",
        "omit",
    )

    __slots__ = ("source",)

    def __init__(self, source: Any):
        self.source = source

    def get(self, key: Hashable, default: Any = None) -> Any:
        return objects.get(self.source, key, default)

    def get_in(self, path: paths.PathSpec, default: Any = None) -> Any:
        return paths.get_in(self.source, path, default)

    def set(self, key: Hashable, value: Any) -> dict:
        return objects.set_(self.source, key, value)

    def set_in(self, path: paths.PathSpec, value: Any) -> Any:
        return paths.set_in(self.source, path, value)

    def remove(self, key: Hashable) -> dict:
        return objects.remove(self.source, key)

    def remove_in(self, path: paths.PathSpec) -> Any:
        return paths.remove_in(self.source, path)

    def merge(self, data: Any) -> dict:
        return objects.merge(self.source, data)

    def merge_deep(self, data: Any) -> dict:
        return objects.merge_deep(self.source, data)

    def map(self, fn: AccessorSpec) -> dict:
        return objects.map_(self.source, fn)

    def filter(self, predicate: AccessorSpec) -> dict:
        return objects.filter_(self.source, predicate)

    def to_array(self, accessor: AccessorSpec = Identity) -> list:
        return objects.to_array(self.source, accessor)

    def pick(self, fields: Any) -> dict:
        return objects.pick(self.source, fields)

    def omit(self, fields: Any) -> dict:
        return objects.omit(self.source, fields)

    def __repr__(self) -> str:
        return f"MappingView({self.source!r})"


class SequenceView:
    """Operations available on an ordered sequence of mappings."""

    shape = Shape.SEQUENCE
    operations = ("to_object", "group_by")

    __slots__ = ("source",)

    def __init__(self, source: Any):
        self.source = source

    def to_object(
        self, key_accessor: AccessorSpec, value_accessor: AccessorSpec = Identity
    ) -> dict:
        return sequences.to_object(self.source, key_accessor, value_accessor)

    def group_by(
        self, key_accessor: AccessorSpec, value_accessor: AccessorSpec = Identity
    ) -> dict[Any, list]:
        return sequences.group_by(self.source, key_accessor, value_accessor)

    def __repr__(self) -> str:
        return f"SequenceView({self.source!r})"


View = Union[MappingView, SequenceView]

_VIEWS: dict[Shape, type] = {
    Shape.MAPPING: MappingView,
    Shape.SEQUENCE: SequenceView,
}


def immutable(source: Any) -> View:
    """
    Bind the shape-appropriate operations to `source`.

    Operations on a scalar `source` treat it as an empty mapping, or raise
    TypeError in strict mode.
    """
    shape = classify(source)
    logger.debug("Dispatching %s value to %s", type(source).__name__, shape.value)
    return _VIEWS[shape](source)
