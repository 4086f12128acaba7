"""
Conversions from an ordered sequence of mappings to a keyed mapping.
"""

from typing import Any, Hashable

from .accessor import Accessor, AccessorSpec, Identity, to_accessor
from .lib.core_helpers import as_sequence


def _key_for(item: Any, get_key: Accessor) -> Hashable:
    key = get_key(item)
    try:
        hash(key)
    except TypeError:
        raise TypeError(
            f"Key accessor {get_key!r} returned unhashable {type(key).__name__} "
            f"{key!r}; keys must be hashable"
        ) from None
    return key


def to_object(
    sequence: Any, key_accessor: AccessorSpec, value_accessor: AccessorSpec = Identity
) -> dict:
    """
    Turn a list of mappings into a dict keyed on `key_accessor`.

    Very helpful for quickly finding something in a list:

        things = [{"id": "one", "name": "Nick"}, {"id": "two", "name": "Not Nick"}]

        lookup = to_object(things, "id")
        lookup["one"]["name"] == "Nick"

        lookup = to_object(things, "id", "name")
        lookup["one"] == "Nick"

    Both accessors can also be functions taking the element, for keys or
    values that are not a plain field:

        to_object(things, lambda t: t["employee"]["id"], lambda t: t["roles"]["view"])

    When two elements produce the same key, the later one wins.
    Keys must be hashable: an accessor returning a list or dict raises
    TypeError naming the accessor.
    """
    get_key = to_accessor(key_accessor)
    get_value = to_accessor(value_accessor)

    results = {}
    for item in as_sequence(sequence):
        results[_key_for(item, get_key)] = get_value(item)
    return results


def group_by(
    sequence: Any, key_accessor: AccessorSpec, value_accessor: AccessorSpec = Identity
) -> dict[Any, list]:
    """
    Group the elements of a list into lists keyed on `key_accessor`.

    e.g.
        things = [
            {"group": 1, "name": "Nick"},
            {"group": 2, "name": "Steven"},
            {"group": 1, "name": "Michael"},
        ]
        group_by(things, "group", "name")
        # {1: ["Nick", "Michael"], 2: ["Steven"]}

    Elements sharing a key keep their relative order from `sequence`.
    Keys must be hashable, as for `to_object`.
    """
    get_key = to_accessor(key_accessor)
    get_value = to_accessor(value_accessor)

    groups: dict[Any, list] = {}
    for item in as_sequence(sequence):
        groups.setdefault(_key_for(item, get_key), []).append(get_value(item))
    return groups
