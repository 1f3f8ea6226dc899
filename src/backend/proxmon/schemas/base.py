"""Shared pydantic base classes.

The dashboard client speaks camelCase JSON, so every schema aliases its
snake_case fields to camelCase. Input is accepted under either name.
"""

from typing import Any, ClassVar

from pydantic import BaseModel, ConfigDict, model_validator
from pydantic.alias_generators import to_camel


class ApiModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


def check_choice(field: str, value: str | None, allowed: frozenset[str]) -> str | None:
    if value is not None and value not in allowed:
        msg = f"{field} must be one of {sorted(allowed)}"
        raise ValueError(msg)
    return value


class PartialUpdate(ApiModel):
    """Base for PATCH bodies.

    Keys missing from the body are left untouched. An explicit null is only
    accepted for fields listed in ``nullable_fields``; the other columns are
    NOT NULL in the database.
    """

    nullable_fields: ClassVar[frozenset[str]] = frozenset()

    @model_validator(mode="after")
    def reject_nulls(self) -> "PartialUpdate":
        for name in self.model_fields_set:
            if name not in self.nullable_fields and getattr(self, name) is None:
                msg = f"{name} may not be null"
                raise ValueError(msg)
        return self

    def changes(self) -> dict[str, Any]:
        return self.model_dump(exclude_unset=True)
