"""Structural decoding failures raised by entity parsing and resolvers."""

from typing import Optional


class EntityError(ValueError):
    """Base class for documents that cannot be turned into an entity."""


class MalformedDocument(EntityError):
    """A required field is absent or has the wrong shape."""

    def __init__(self, field: str, reason: Optional[str] = None, model: Optional[str] = None):
        self.field = field
        self.reason = reason
        self.model = model
        message = f"malformed document: field '{field}'"
        if model:
            message = f"{message} of {model}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)


class UnknownVariant(EntityError):
    """A discriminator names no registered variant of a polymorphic family."""

    def __init__(self, family: str, tag: Optional[str]):
        self.family = family
        self.tag = tag
        if tag is None:
            message = f"{family} document carries no discriminator"
        else:
            message = f"unknown {family} variant: {tag!r}"
        super().__init__(message)
