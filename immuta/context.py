"""
Run-time configuration for transformations.

The only setting is strict mode. By default the library is total: missing
keys read as the default value, and a scalar where a mapping is expected
is treated as an empty mapping. Strict mode turns both into exceptions for
callers who would rather fail loudly on malformed data. Removing or
picking missing keys stays silent in either mode.
"""

from contextlib import contextmanager
from contextvars import ContextVar

_strict: ContextVar[bool] = ContextVar("immuta_strict", default=False)


def is_strict() -> bool:
    """Check if strict mode is currently enabled."""
    return _strict.get()


@contextmanager
def immutable_context(*, strict: bool = False):
    """
    Context manager for transformation configuration.

    The setting is held in a ContextVar, so it is scoped to the current
    thread or task and restored on exit, including when an error escapes.

    Args:
        strict: If True:
            - operations on a scalar source raise TypeError instead of
              treating it as an empty mapping
            - get_in() raises KeyError for a missing key or list index and
              TypeError when an intermediate value cannot be traversed
            - set_in() raises IndexError for a negative index before the
              start of a list

    Example:
        from immuta import chain, get_in, immutable_context

        get_in({"a": {}}, ["a", "b"])  # None

        # Strict: raises KeyError on missing keys
        with immutable_context(strict=True):
            get_in({"a": {}}, ["a", "b"])  # KeyError!

        # Strict: scalars are no longer silently empty mappings
        with immutable_context(strict=True):
            chain(42).merge({"a": 1})  # TypeError!
    """
    token = _strict.set(strict)
    try:
        yield
    finally:
        _strict.reset(token)
