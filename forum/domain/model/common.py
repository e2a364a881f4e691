"""Base models for all domain entities."""

from datetime import datetime, timezone
from typing import Annotated, Any, ClassVar, Mapping, Self

from pydantic import BaseModel, ConfigDict, Field
from pydantic import ValidationError as PydanticValidationError
from pydantic.alias_generators import to_camel

from forum.domain.error import ErrorKind, ValidationError

# A required string: empty values count as missing.
RequiredStr = Annotated[str, Field(min_length=1)]


def utc_now() -> datetime:
    """Timezone-aware current time, used for all stored timestamps."""
    return datetime.now(timezone.utc)


class DomainModel(BaseModel):
    """Base class for all domain models.

    Provides common configuration for immutability and camelCase aliases
    (``thread_id`` is exposed as ``threadId`` at the API boundary).
    """

    model_config = ConfigDict(
        frozen=True,  # All domain models are immutable
        alias_generator=to_camel,
        populate_by_name=True,
        arbitrary_types_allowed=True,
    )


def _is_absent(value: Any) -> bool:
    """Falsy scalars count as missing; empty collections do not."""
    if isinstance(value, (list, tuple, dict)):
        return False
    return not value


class Entity(DomainModel):
    """Payload entity validated on construction.

    Construction either succeeds and exposes exactly the declared fields
    (unknown keys are dropped) or raises ``ValidationError``:

    - ``NOT_CONTAIN_NEEDED_PROPERTY`` when a required field is absent or falsy
    - ``NOT_MEET_DATA_TYPE_SPECIFICATION`` when a field has the wrong type

    Validation is strict, so ``123`` is never accepted as a string.
    """

    __entity_name__: ClassVar[str] = "ENTITY"

    model_config = ConfigDict(
        frozen=True,
        strict=True,
        extra="ignore",
        alias_generator=to_camel,
        populate_by_name=True,
        arbitrary_types_allowed=True,
    )

    def __init__(self, /, **data: Any) -> None:
        try:
            super().__init__(**data)
        except PydanticValidationError as e:
            raise ValidationError(self.__entity_name__, _error_kind(e)) from None

    @classmethod
    def from_payload(cls, payload: Mapping[str, Any]) -> Self:
        """Build the entity from a raw payload mapping."""
        return cls(**dict(payload))


def _error_kind(error: PydanticValidationError) -> ErrorKind:
    """Missing properties take precedence over type mismatches."""
    for detail in error.errors():
        if detail["type"] == "missing" or _is_absent(detail.get("input")):
            return ErrorKind.NOT_CONTAIN_NEEDED_PROPERTY
    return ErrorKind.NOT_MEET_DATA_TYPE_SPECIFICATION
