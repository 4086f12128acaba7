"""
Helper functions for pydantic model interop.
"""

from typing import Any, Type, TypeVar

from pydantic import BaseModel

# Define generic type variable bounded to BaseModel
_OutModel = TypeVar("_OutModel", bound=BaseModel)


def is_pydantic_model(model_class: Type) -> bool:
    """Check if a class is a Pydantic BaseModel."""
    try:
        return (
            isinstance(model_class, type)
            and issubclass(model_class, BaseModel)
            and hasattr(model_class, "model_fields")
        )
    except TypeError:
        return False


def is_model_instance(value: Any) -> bool:
    """Check if a value is an instance of a Pydantic BaseModel."""
    return isinstance(value, BaseModel)


def to_dict(model: BaseModel) -> dict[str, Any]:
    """Convert Pydantic model to dictionary."""
    return model.model_dump()


def validate_output(data: Any, output_schema: Type[_OutModel]) -> _OutModel:
    """Validate output data against output schema."""
    if not is_pydantic_model(output_schema):
        raise TypeError(
            f"Output schema must be a pydantic model class, got {output_schema!r}"
        )
    return output_schema.model_validate(data)
