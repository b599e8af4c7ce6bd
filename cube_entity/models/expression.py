"""Facial expression recognition results."""

from typing import List, Optional

from pydantic import Field

from cube_entity.models.base import Entity, ValueModel
from cube_entity.models.enums import Expression, lenient
from cube_entity.models.file import FileLabel
from cube_entity.models.geometry import BoundingBox


class ExpressionItem(ValueModel):
    """One detected face and the expression read from it."""

    expression: lenient(Expression)
    rect: BoundingBox
    confidence: float = Field(ge=0.0, le=1.0, default=0.0)


class FacialExpressionResult(Entity):
    """Expressions found in one image file."""

    file: FileLabel
    items: List[ExpressionItem] = Field(default_factory=list)
    elapsed: int = 0                        # Inference time, ms

    def dominant(self) -> Optional[ExpressionItem]:
        """The most confident item, if any."""
        if not self.items:
            return None
        return max(self.items, key=lambda item: item.confidence)

