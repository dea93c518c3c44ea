# utils/base_model.py
from typing import TypeVar, Any, cast
from pydantic import BaseModel

T = TypeVar('T', bound='ImmutableModel')


class ImmutableModel(BaseModel):
    """
    Base class for the geometric value types.

    Instances are frozen after validation, so points and rectangles can be
    shared freely between point sets, query results and copied trees.
    Modified copies are made with with_changes(), which re-runs validation.
    """
    model_config = {
        "frozen": True,
    }

    def with_changes(self: T, **changes: Any) -> T:
        """
        Create a new validated instance with some fields replaced.

        Raises:
            ValueError: If an unknown field name is given or the new
                values fail validation
        """
        current_data = {name: getattr(self, name) for name in type(self).model_fields}
        unknown = set(changes) - set(current_data)
        if unknown:
            raise ValueError(f"Invalid field: {', '.join(sorted(unknown))}")
        current_data.update(changes)
        return cast(T, self.__class__.model_validate(current_data))
