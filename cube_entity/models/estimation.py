"""Pose and hand keypoint estimations and the recognition results carrying them."""

from typing import Any, ClassVar, Dict, List, Optional, Type

from pydantic import Field, FieldSerializationInfo, field_serializer, field_validator

from cube_entity.codec import keyed_map
from cube_entity.models.base import Entity, JSONModel, is_compact
from cube_entity.models.enums import CodedEnum, HandKeypoint, PoseKeypoint
from cube_entity.models.file import FileLabel
from cube_entity.models.geometry import BoundingBox, Point


class KeypointEstimation(JSONModel):
    """
    Keypoint enum -> Point mapping. On the wire ``keypoints`` is an object
    keyed by each keypoint's symbol; unknown names land on the enum's
    fallback key.
    """

    keypoint_enum: ClassVar[Type[CodedEnum]]

    keypoints: Dict[Any, Point] = Field(default_factory=dict)
    confidence: float = Field(ge=0.0, le=1.0, default=0.0)

    @field_validator("keypoints", mode="before")
    @classmethod
    def _decode_keypoints(cls, value: Any) -> Any:
        if isinstance(value, dict):
            return keyed_map.decode(value, cls.keypoint_enum.parse, Point.from_json)
        return value

    @field_serializer("keypoints")
    def _encode_keypoints(self, value: Dict[Any, Point], info: FieldSerializationInfo) -> Dict[str, Any]:
        compact = is_compact(info)
        return keyed_map.encode(value, lambda point: point.to_compact_json() if compact else point.to_json())

    def get(self, keypoint: Any) -> Optional[Point]:
        return self.keypoints.get(self.keypoint_enum.parse(keypoint))


class PoseEstimation(KeypointEstimation):
    """Body keypoints of one detected person."""

    keypoint_enum = PoseKeypoint

    keypoints: Dict[PoseKeypoint, Point] = Field(default_factory=dict)
    bbox: Optional[BoundingBox] = None


class HandEstimation(KeypointEstimation):
    """Landmarks of one detected hand."""

    keypoint_enum = HandKeypoint

    keypoints: Dict[HandKeypoint, Point] = Field(default_factory=dict)
    handedness: str = "Unknown"             # "Left" | "Right" | "Unknown"


class PoseRecognitionResult(Entity):
    """Pose estimation over one image file."""

    file: FileLabel
    poses: List[PoseEstimation] = Field(default_factory=list)
    elapsed: int = 0                        # Inference time, ms


class HandRecognitionResult(Entity):
    """Hand landmark estimation over one image file."""

    file: FileLabel
    hands: List[HandEstimation] = Field(default_factory=list)
    elapsed: int = 0
