# utils/base_model.py
from typing import TypeVar, Any, cast
from pydantic import BaseModel, ConfigDict

T = TypeVar('T', bound='ImmutableModel')


class ImmutableModel(BaseModel):
    """
    Base class for value types.

    Instances are frozen after creation; arithmetic and transformations always
    build new instances. Use with_changes() to derive a copy with some fields
    replaced.
    """
    model_config = ConfigDict(frozen=True)

    def with_changes(self: T, **changes: Any) -> T:
        """
        Create a new instance with specified changes.

        Args:
            **changes: Keyword arguments with field values to change

        Returns:
            New validated instance with updated values

        Raises:
            ValueError: If an invalid field name is provided
        """
        data = {name: getattr(self, name) for name in type(self).model_fields}

        for key, value in changes.items():
            if key not in data:
                raise ValueError(f"Invalid field: {key}")
            data[key] = value

        return cast(T, type(self).model_validate(data))
