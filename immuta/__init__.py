import logging

from .accessor import ByField, ByFunction, Identity, to_accessor
from .chain import Chain, chain
from .context import immutable_context, is_strict
from .dispatch import MappingView, SequenceView, Shape, classify, immutable
from .objects import (
    create_object,
    filter_,
    get,
    map_,
    merge,
    merge_deep,
    omit,
    pick,
    remove,
    set_,
    to_array,
)
from .paths import get_in, remove_in, set_in
from .sequences import group_by, to_object

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    # Chaining
    "chain",
    "Chain",
    # Dispatch
    "immutable",
    "classify",
    "Shape",
    "MappingView",
    "SequenceView",
    # Paths
    "get_in",
    "set_in",
    "remove_in",
    # Mappings
    "get",
    "set_",
    "remove",
    "merge",
    "merge_deep",
    "map_",
    "filter_",
    "to_array",
    "pick",
    "omit",
    "create_object",
    # Sequences
    "to_object",
    "group_by",
    # Accessors
    "ByField",
    "ByFunction",
    "Identity",
    "to_accessor",
    # Configuration
    "immutable_context",
    "is_strict",
]
