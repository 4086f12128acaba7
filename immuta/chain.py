"""
Fluent chaining over immutable transformations.

Each call returns a new `Chain` around the result. When the data is in the
right state, call `.done()` to get it back:

    new_data = (
        chain(data)
        .remove("some_key")
        .set("key", 9834895)
        .merge({"some_other_key": "some_string"})
        .done()
    )

The operations a chain exposes are decided by the shape of the value it
currently wraps, so a chain can move between mapping and sequence
operations as often as needed:

    chain(employees).to_array().group_by("team").done()
"""

import logging
from functools import wraps
from typing import Any, Callable, Optional, Type

from pydantic import BaseModel

from .dispatch import Shape, View, immutable
from .lib.model_helpers import validate_output

logger = logging.getLogger(__name__)


class Chain:
    """Immutable holder of one value and the operations its shape allows."""

    __slots__ = ("_value", "_view")

    def __init__(self, value: Any):
        self._value = value
        self._view: View = immutable(value)

    @property
    def shape(self) -> Shape:
        return self._view.shape

    def __getattr__(self, name: str) -> Callable[..., "Chain"]:
        if name.startswith("_"):
            raise AttributeError(name)

        view = self._view
        if name not in view.operations:
            raise AttributeError(
                f"'{name}' is not available on a {view.shape.value} chain; "
                f"available operations: {', '.join(view.operations)}, done"
            )

        operation = getattr(view, name)

        @wraps(operation)
        def step(*args: Any, **kwargs: Any) -> "Chain":
            result = operation(*args, **kwargs)
            logger.debug("Chain step %s on %s value", name, view.shape.value)
            return Chain(result)

        return step

    def __dir__(self) -> list[str]:
        return sorted(["done", "shape", *self._view.operations])

    def done(self, schema: Optional[Type[BaseModel]] = None) -> Any:
        """
        Return the wrapped value.

        Args:
            schema: Optional Pydantic model to validate the value into

        Raises:
            pydantic.ValidationError: If the value does not fit `schema`
        """
        if schema is None:
            return self._value
        return validate_output(self._value, schema)

    def __repr__(self) -> str:
        return f"Chain({self._value!r})"


def chain(value: Any) -> Chain:
    """Start a chain of transformations on `value`."""
    return Chain(value)
