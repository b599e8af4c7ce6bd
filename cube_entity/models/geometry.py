"""Planar primitives used by vision annotations."""

from cube_entity.models.base import ValueModel


class Point(ValueModel):
    """A 2-D coordinate in image pixel space."""

    x: float
    y: float


class BoundingBox(ValueModel):
    """Axis-aligned rectangle anchored at its top-left corner."""

    x: int
    y: int
    width: int
    height: int

    @property
    def center(self) -> Point:
        return Point(x=self.x + self.width / 2, y=self.y + self.height / 2)

    @property
    def area(self) -> int:
        return self.width * self.height
