"""
Immutable transformations over a single keyed mapping.

Every function returns a new dict and leaves its input untouched, e.g.

    from immuta import set_

    old = {"key": "val"}
    new = set_(old, "key2", "val2")   # old is still {"key": "val"}

Mapping-shaped inputs other than dicts (None, pydantic models, other
Mapping types) are accepted and normalized to dicts first.
"""

from typing import Any, Hashable, Iterable

from .accessor import AccessorSpec, Identity, to_accessor
from .lib.core_helpers import as_mapping, is_mapping_like


def _to_fields(fields: Any) -> list:
    if isinstance(fields, (list, tuple, set, frozenset)):
        return list(fields)
    return [fields]


def create_object(pairs: Iterable[tuple[Hashable, Any]]) -> dict:
    """Build a dict from (key, value) pairs; later pairs win."""
    return {key: value for key, value in pairs}


def get(source: Any, key: Hashable, default: Any = None) -> Any:
    return as_mapping(source).get(key, default)


def set_(source: Any, key: Hashable, value: Any) -> dict:
    """Return a copy of `source` with `key` set to `value`."""
    return {**as_mapping(source), key: value}


def remove(source: Any, key: Hashable) -> dict:
    """
    Return a copy of `source` without `key`.

    Keys are compared by equality, so 1 and "1" are different keys.
    Removing an absent key returns an equal copy.
    """
    return {k: v for k, v in as_mapping(source).items() if k != key}


def merge(source: Any, data: Any) -> dict:
    """
    Shallow merge: keys in `data` override the same keys in `source`.
    """
    return {**as_mapping(source), **as_mapping(data)}


def merge_deep(source: Any, data: Any) -> dict:
    """
    Recursive merge of `data` into `source`.

    When the incoming value is a mapping it is merged into the existing
    value (or into an empty dict if the existing value is not a mapping);
    any other incoming value replaces the existing one. Keys present only
    in `source` are preserved at every depth.

    Example:
        merge_deep({"a": {"x": 1, "y": 2}}, {"a": {"y": 9}})
        # {"a": {"x": 1, "y": 9}}
    """
    result = dict(as_mapping(source))

    for key, value in as_mapping(data).items():
        if is_mapping_like(value):
            existing = result.get(key)
            value = merge_deep(existing if is_mapping_like(existing) else {}, value)
        result[key] = value

    return result


def map_(source: Any, fn: AccessorSpec) -> dict:
    """
    Transform every value of `source`, keeping its keys.

    The callback takes its arguments in the following order:
    value, key, index, source

    e.g.
        employees = {
            1: {"first": "Nick", "last": "Coronado"},
            2: {"first": "Steven", "last": "Milov"},
        }
        map_(employees, lambda v: set_(v, "display", f"{v['first']} {v['last']}"))
    """
    node = as_mapping(source)
    getter = to_accessor(fn)
    return {
        key: getter(value, key, i, node) for i, (key, value) in enumerate(node.items())
    }


def filter_(source: Any, predicate: AccessorSpec) -> dict:
    """
    Keep the key/value pairs of `source` for which `predicate` is truthy.

    The predicate receives the same (value, key, index, source) arguments as
    `map_`.

    e.g.
        employees = {
            1: {"name": "Nick", "admin": True},
            2: {"name": "Steven", "admin": False},
        }
        filter_(employees, lambda v: v["admin"])   # {1: {...Nick...}}
        filter_(employees, "admin")                # same, by field name
    """
    node = as_mapping(source)
    check = to_accessor(predicate)
    return {
        key: value
        for i, (key, value) in enumerate(node.items())
        if check(value, key, i, node)
    }


def to_array(source: Any, accessor: AccessorSpec = Identity) -> list:
    """
    Convert the values of `source` into a list, in insertion order.

    The accessor (optional) can be:
    - a function taking (value, key, index, source) and returning the list
      element for that entry
    - a field name to read from each value

    e.g.
        employees = {
            1: {"name": "Steven", "admin": False},
            2: {"name": "Nick", "admin": True},
        }
        to_array(employees)            # [{"name": "Steven", ...}, {"name": "Nick", ...}]
        to_array(employees, "name")    # ["Steven", "Nick"]
        to_array(employees, lambda v, k: {**v, "id": k})
    """
    node = as_mapping(source)
    getter = to_accessor(accessor)
    return [
        getter(value, key, i, node) for i, (key, value) in enumerate(node.items())
    ]


def pick(source: Any, fields: Any) -> dict:
    """
    Return only the requested `fields` of `source`.

    Requested fields that are not present are silently left out.

    e.g.
        pick({"first": "Nick", "last": "Coronado", "id": 1}, ["first", "last"])
        # {"first": "Nick", "last": "Coronado"}
    """
    node = as_mapping(source)
    return {field: node[field] for field in _to_fields(fields) if field in node}


def omit(source: Any, fields: Any) -> dict:
    """
    Return every field of `source` except `fields` (a list or a single key).
    """
    excluded = set(_to_fields(fields))
    return filter_(source, lambda _value, key: key not in excluded)
