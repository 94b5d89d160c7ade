# geomkernel/utils/base_model.py
from typing import TypeVar, Any, cast
from pydantic import BaseModel

M = TypeVar('M', bound='ImmutableModel')


class ImmutableModel(BaseModel):
    """
    Frozen pydantic base shared by every geometric value and quantity.

    Instances cannot be mutated; equal fields mean equal (and equally hashed)
    values. Type parameters such as units or coordinate systems live only in
    the type signature and are absent from model_dump() output.
    """
    model_config = {
        "frozen": True,
    }

    def with_changes(self: M, **changes: Any) -> M:
        """
        Copy of this value with some fields replaced.

        The copy goes through validation, so field validators (unit length,
        absolute radii, ...) apply to the replaced values.

        Raises:
            ValueError: If a keyword does not name a field of this model
        """
        fields = {name: getattr(self, name) for name in type(self).model_fields}
        unknown = [name for name in changes if name not in fields]
        if unknown:
            raise ValueError(f"Invalid field: {unknown[0]}")
        fields.update(changes)
        return cast(M, type(self).model_validate(fields))

    @classmethod
    def unsafe(cls: type[M], **fields: Any) -> M:
        """Build an instance with model_construct, skipping every validator."""
        return cls.model_construct(**fields)
