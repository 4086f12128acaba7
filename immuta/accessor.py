"""
Accessors: literal field names or derivation functions.

Every operation that takes "a key" or "a value getter" accepts either form.
`to_accessor` resolves the argument once at the call boundary so that the
per-element loop only ever calls a single callable.

Callers pass as many positional arguments as they have (for example
`(value, key, index, source)` from `map_`); a function accessor only
receives as many of them as its signature accepts, so `lambda v: ...`
and `lambda v, k, i, src: ...` both work.
"""

from __future__ import annotations

import inspect
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, Callable, Hashable, Union

from .lib.model_helpers import is_model_instance


def _positional_arity(fn: Callable[..., Any]) -> int | None:
    """Number of positional arguments `fn` accepts, or None if unbounded."""
    try:
        params = inspect.signature(fn).parameters.values()
    except (TypeError, ValueError):
        return 1

    count = 0
    for param in params:
        if param.kind is inspect.Parameter.VAR_POSITIONAL:
            return None
        if param.kind in (
            inspect.Parameter.POSITIONAL_ONLY,
            inspect.Parameter.POSITIONAL_OR_KEYWORD,
        ):
            count += 1
    return count


@dataclass(frozen=True, slots=True)
class ByField:
    """Look up a literal field on an element."""

    name: Hashable

    def __call__(self, item: Any, *_: Any) -> Any:
        if isinstance(item, Mapping):
            return item.get(self.name)
        if is_model_instance(item) and isinstance(self.name, str):
            return getattr(item, self.name, None)
        return None


@dataclass(frozen=True, slots=True)
class ByFunction:
    """
    Derive a value from an element with a function.

    The function is called with only as many positional arguments as its
    signature accepts. When no signature can be read (some builtins and C
    extensions), it is called with the element alone; wrap such functions
    in a lambda, or pass `arity` explicitly, to receive more arguments.
    """

    fn: Callable[..., Any]
    arity: int | None = field(default=None, compare=False, repr=False)

    def __post_init__(self) -> None:
        if self.arity is None:
            object.__setattr__(self, "arity", _positional_arity(self.fn))

    def __call__(self, *args: Any) -> Any:
        if self.arity is None:
            return self.fn(*args)
        return self.fn(*args[: self.arity])


@dataclass(frozen=True, slots=True)
class _Identity:
    def __call__(self, item: Any, *_: Any) -> Any:
        return item

    def __repr__(self) -> str:
        return "Identity"


Identity = _Identity()

Accessor = Union[ByField, ByFunction, _Identity]
AccessorSpec = Union[Hashable, Callable[..., Any], Accessor]


def to_accessor(spec: AccessorSpec) -> Accessor:
    """Resolve a literal key, a function or an accessor into an accessor."""
    if isinstance(spec, (ByField, ByFunction, _Identity)):
        return spec
    if callable(spec):
        return ByFunction(spec)
    return ByField(spec)
