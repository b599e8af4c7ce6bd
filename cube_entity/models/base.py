"""
Dual-Shape Serializable Contract and Base Entity.

Every model serializes to two JSON shapes:

- full: every declared field, nested models in their full shape; lossless.
- compact: the model's own reduction of the full shape, nested models in
  their compact shape.

The compact request travels in the pydantic serialization context, so every
nested model sees it and applies its own reduction. A compact document can
therefore never contain a nested full-shaped sub-document.
"""

import random
import time
from enum import Enum
from typing import Any, ClassVar, Dict, Optional, Tuple

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    SerializationInfo,
    SerializerFunctionWrapHandler,
    ValidationError,
    model_serializer,
)
from pydantic.alias_generators import to_camel

from cube_entity.errors import EntityError, MalformedDocument, UnknownVariant


class Shape(str, Enum):
    FULL = "full"
    COMPACT = "compact"


def current_millis() -> int:
    return int(time.time() * 1000)


def generate_serial_number() -> int:
    """Time-ordered numeric id: milliseconds followed by three random digits."""
    return current_millis() * 1000 + random.randint(0, 999)


def is_compact(info: Optional[SerializationInfo]) -> bool:
    if info is None:
        return False
    context = info.context or {}
    return context.get("shape") == Shape.COMPACT


class JSONModel(BaseModel):
    """Base of every serializable model."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
    )

    # Wire names dropped from the compact shape.
    compact_exclude: ClassVar[Tuple[str, ...]] = ()

    @model_serializer(mode="wrap")
    def _serialize_shape(
        self, handler: SerializerFunctionWrapHandler, info: SerializationInfo
    ) -> Dict[str, Any]:
        data = handler(self)
        if is_compact(info):
            data = self.compact_shape(data)
        return data

    def compact_shape(self, data: Dict[str, Any]) -> Dict[str, Any]:
        """Reduce a serialized full shape. Nested values are already compact."""
        for name in self.compact_exclude:
            data.pop(name, None)
        return data

    def to_json(self) -> Dict[str, Any]:
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)

    def to_compact_json(self) -> Dict[str, Any]:
        return self.model_dump(
            mode="json",
            by_alias=True,
            exclude_none=True,
            context={"shape": Shape.COMPACT},
        )

    def dump(self, shape: Shape = Shape.FULL) -> Dict[str, Any]:
        return self.to_compact_json() if shape == Shape.COMPACT else self.to_json()

    @classmethod
    def from_json(cls, data: Any):
        """Parse a full-shape document, raising MalformedDocument on bad structure."""
        if isinstance(data, cls):
            return data
        if not isinstance(data, dict):
            raise MalformedDocument("$", f"expected an object, got {type(data).__name__}", cls.__name__)
        try:
            return cls.model_validate(data)
        except ValidationError as exc:
            raise malformed_from(exc, cls.__name__) from exc


def malformed_from(exc: ValidationError, model: str) -> EntityError:
    """
    Convert the first pydantic error into an EntityError.

    Errors raised by nested resolvers keep their type; a nested
    MalformedDocument has its field prefixed with the enclosing location.
    """
    errors = exc.errors()
    if not errors:
        return MalformedDocument("$", str(exc), model)
    first = errors[0]
    field = ".".join(str(part) for part in first.get("loc", ()))
    cause = (first.get("ctx") or {}).get("error")
    if isinstance(cause, UnknownVariant):
        return cause
    if isinstance(cause, MalformedDocument):
        nested = cause.field if cause.field != "$" else ""
        return MalformedDocument(".".join(p for p in (field, nested) if p) or "$", cause.reason, cause.model)
    return MalformedDocument(field or "$", first.get("msg"), model)


class ValueModel(JSONModel):
    """Immutable record with structural equality. Compact equals full."""

    model_config = ConfigDict(frozen=True)


class Entity(JSONModel):
    """
    Abstract root of every identified entity.

    ``id`` is generated when absent and cannot be reassigned. Two entities are
    equal when they share ``id`` and ``domain``.
    """

    id: int = Field(default_factory=generate_serial_number, frozen=True)
    domain: str = ""
    timestamp: Optional[int] = Field(default_factory=current_millis)

    @property
    def unique_key(self) -> str:
        return f"{self.id}_{self.domain}"

    def reset_timestamp(self) -> None:
        self.timestamp = current_millis()

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, Entity):
            return NotImplemented
        return self.id == other.id and self.domain == other.domain

    def __hash__(self) -> int:
        return hash(self.unique_key)
