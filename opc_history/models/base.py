"""Base model shared by every history API wire model."""

from typing import Any, ClassVar, Self

from pydantic import (
    BaseModel,
    ConfigDict,
    SerializerFunctionWrapHandler,
    model_serializer,
)


class ApiModel(BaseModel):
    """
    Base for wire models.

    Fields declare their wire key as an explicit alias. Models can be
    built with either Python field names or wire keys, unknown keys are
    ignored, and assignment is not re-validated.

    Serialization leaves out fields that are ``None``. Fields named in
    ``keep_null`` carry literal values where ``null`` is meaningful; for
    those an explicitly set ``None`` is kept.
    """

    model_config = ConfigDict(
        validate_by_alias=True,
        validate_by_name=True,
        serialize_by_alias=True,
        extra="ignore",
    )

    keep_null: ClassVar[frozenset[str]] = frozenset()

    @model_serializer(mode="wrap")
    def _drop_unset(
        self, handler: SerializerFunctionWrapHandler
    ) -> dict[str, Any]:
        data = handler(self)
        for name, info in type(self).model_fields.items():
            if getattr(self, name) is not None:
                continue
            if name in self.keep_null and name in self.model_fields_set:
                continue
            data.pop(name, None)
            if info.alias:
                data.pop(info.alias, None)
        return data

    def _with(self, name: str, value: Any) -> Self:
        """Assign one field and return this instance for chaining."""
        setattr(self, name, value)
        return self
