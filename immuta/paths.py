"""
Deep get/set/remove through nested mappings by a path of keys.
"""

from typing import Any, Hashable, Sequence, Union

from .context import is_strict
from .lib.core_helpers import as_mapping, is_mapping_like, is_sequence_like
from .objects import remove, set_

PathSpec = Union[str, Sequence[Hashable]]


def to_keys(path: PathSpec) -> list[Hashable]:
    """
    Normalize a path into a list of keys.

    Lists and tuples are taken as-is, a dotted string is split on "." and
    any other value is a single-key path.
    """
    if isinstance(path, str):
        return path.split(".") if path else []
    if isinstance(path, (list, tuple)):
        return list(path)
    return [path]


def get_in(source: Any, path: PathSpec, default: Any = None) -> Any:
    """
    Retrieve a value nested in `source` by following `path` key by key.

    Args:
        source: Mapping to traverse (None, models and other mappings allowed)
        path: Keys to follow, e.g. ["user", "name"] or "user.name"
        default: Value returned when the path cannot be followed

    Returns:
        Value at path, `source` itself for an empty path, or `default`

    Raises:
        KeyError: In strict mode, if a key is not found
        TypeError: In strict mode, if an intermediate value is not traversable

    Note:
        Integer keys also index into lists and tuples along the way:
        get_in({"items": [{"id": 1}]}, ["items", 0, "id"]) -> 1
    """
    strict = is_strict()
    current = source

    for key in to_keys(path):
        if is_sequence_like(current) and _is_index(key):
            if -len(current) <= key < len(current):
                current = current[key]
                continue
            if strict:
                raise KeyError(f"Index {key} out of range")
            return default

        if not is_mapping_like(current):
            if strict:
                raise TypeError(
                    f"Cannot traverse {type(current).__name__} with key {key!r}"
                )
            return default

        node = as_mapping(current)
        if key not in node:
            if strict:
                raise KeyError(f"Key {key!r} not found")
            return default
        current = node[key]

    return current


def _is_index(key: Any) -> bool:
    return isinstance(key, int) and not isinstance(key, bool)


def _child_node(value: Any, next_key: Any) -> Any:
    """
    Container to descend into for `next_key`.

    Lists and tuples are kept when indexed by an integer, mappings are kept
    as dicts and anything else is replaced by an empty dict.
    """
    if is_sequence_like(value) and _is_index(next_key):
        return value
    return as_mapping(value) if is_mapping_like(value) else {}


def _with_items(original: Any, items: list) -> Any:
    return tuple(items) if isinstance(original, tuple) else items


def _set_index(items: Any, index: int, remaining: list, value: Any) -> Any:
    result = list(items)
    if index < 0:
        if index < -len(result):
            if is_strict():
                raise IndexError(f"Index {index} out of range")
            return items
        index += len(result)

    # Positive indexes past the end pad the copy with None
    result.extend([None] * (index + 1 - len(result)))
    if remaining:
        value = set_in(_child_node(result[index], remaining[0]), remaining, value)
    result[index] = value
    return _with_items(items, result)


def set_in(source: Any, path: PathSpec, value: Any) -> Any:
    """
    Return a copy of `source` with `value` stored at `path`.

    Missing (or non-container) intermediates are created as empty dicts.
    Integer keys into a list or tuple replace that element in a copy, padding
    with None past the end; other elements are kept. Only the containers
    along the path are copied; `source` is never mutated.

    Examples:
        set_in({"a": {"b": 1}}, ["a", "c"], 9)   # {"a": {"b": 1, "c": 9}}
        set_in({}, "x.y.z", True)                # {"x": {"y": {"z": True}}}
        set_in({"items": [{"id": 1}, {"id": 2}]}, ["items", 0, "id"], 5)
        # {"items": [{"id": 5}, {"id": 2}]}

    Raises:
        IndexError: In strict mode, if a negative index is out of range
    """
    keys = to_keys(path)
    if not keys:
        return value

    key, *remaining = keys
    if is_sequence_like(source) and _is_index(key):
        return _set_index(source, key, remaining, value)

    node = as_mapping(source)

    if not remaining:
        return set_(node, key, value)

    child = _child_node(node.get(key), remaining[0])
    return {**node, key: set_in(child, remaining, value)}


def _remove_index(items: Any, index: int, remaining: list) -> Any:
    if not -len(items) <= index < len(items):
        return items
    index %= len(items)

    if not remaining:
        kept = [item for i, item in enumerate(items) if i != index]
        return _with_items(items, kept)

    child = items[index]
    if not (is_mapping_like(child) or is_sequence_like(child)):
        return items

    updated = remove_in(child, remaining)
    if updated is child:
        return items
    result = list(items)
    result[index] = updated
    return _with_items(items, result)


def remove_in(source: Any, path: PathSpec) -> Any:
    """
    Return a copy of `source` with the value at the end of `path` removed.

    If any key along the path is missing, `source` is returned unchanged.
    Only the final key is deleted; the containers wrapping it are rebuilt.
    Lists along the path are copied with the one element updated; a final
    integer key into a list drops that element, shifting the ones after it.
    """
    keys = to_keys(path)
    if not keys:
        return source

    key, *remaining = keys
    if is_sequence_like(source) and _is_index(key):
        return _remove_index(source, key, remaining)
    if is_sequence_like(source):
        return source

    node = as_mapping(source)

    if key not in node:
        return source
    if not remaining:
        return remove(node, key)

    child = node[key]
    if not (is_mapping_like(child) or is_sequence_like(child)):
        return source

    updated = remove_in(child, remaining)
    if updated is child:
        return source
    return {**node, key: updated}
