"""Enum Registry — closed code sets with total, default-valued parsing."""

import logging
from enum import Enum
from typing import Annotated, Any, Dict, Optional, Tuple

from pydantic import BeforeValidator

logger = logging.getLogger(__name__)


class CodedEnum(Enum):
    """
    Base for every wire enum.

    A member's value is its wire code (int or str). Its symbol is the
    canonical name used when the member keys a JSON object. ``parse`` never
    raises: anything that matches neither a code nor a symbol resolves to the
    enum's declared default.
    """

    @property
    def code(self) -> Any:
        return self.value

    @property
    def symbol(self) -> str:
        return self.name

    @classmethod
    def default(cls) -> "CodedEnum":
        raise NotImplementedError(f"{cls.__name__} declares no fallback")

    @classmethod
    def match(cls, value: Any) -> Optional["CodedEnum"]:
        """Exact lookup by member, code or symbol. Returns None on no match."""
        if isinstance(value, cls):
            return value
        if isinstance(value, bool):
            return None
        for member in cls:
            if member.value == value or member.symbol == value:
                return member
        return None

    @classmethod
    def parse(cls, value: Any) -> "CodedEnum":
        member = cls.match(value)
        if member is None:
            member = cls.default()
            logger.debug("%s: %r falls back to %s", cls.__name__, value, member.symbol)
        return member


def lenient(enum_cls):
    """Pydantic field type that parses through ``enum_cls.parse``."""
    return Annotated[enum_cls, BeforeValidator(enum_cls.parse)]


# --- Keypoints ---

class HandKeypoint(CodedEnum):
    """21-point hand landmark set."""

    Wrist = 0
    ThumbCmc = 1
    ThumbMcp = 2
    ThumbIp = 3
    ThumbTip = 4
    IndexFingerMcp = 5
    IndexFingerPip = 6
    IndexFingerDip = 7
    IndexFingerTip = 8
    MiddleFingerMcp = 9
    MiddleFingerPip = 10
    MiddleFingerDip = 11
    MiddleFingerTip = 12
    RingFingerMcp = 13
    RingFingerPip = 14
    RingFingerDip = 15
    RingFingerTip = 16
    PinkyMcp = 17
    PinkyPip = 18
    PinkyDip = 19
    PinkyTip = 20
    Unknown = -1

    @classmethod
    def default(cls) -> "HandKeypoint":
        return cls.Unknown


# Wire names as emitted by the pose estimator. The mixed casing is part of
# the contract and must not be normalized.
_POSE_WIRE_NAMES: Dict[str, str] = {
    "Nose": "Nose",
    "LeftEye": "LeftEye",
    "RightEye": "RightEye",
    "LeftEar": "left_ear",
    "RightEar": "right_ear",
    "LeftShoulder": "LeftShoulder",
    "RightShoulder": "RightShoulder",
    "LeftElbow": "left_elbow",
    "RightElbow": "right_elbow",
    "LeftWrist": "LeftWrist",
    "RightWrist": "RightWrist",
    "LeftHip": "left_hip",
    "RightHip": "right_hip",
    "LeftKnee": "LeftKnee",
    "RightKnee": "RightKnee",
    "LeftAnkle": "left_ankle",
    "RightAnkle": "right_ankle",
    "Unknown": "Unknown",
}


class PoseKeypoint(CodedEnum):
    """17-point body landmark set."""

    Nose = 0
    LeftEye = 1
    RightEye = 2
    LeftEar = 3
    RightEar = 4
    LeftShoulder = 5
    RightShoulder = 6
    LeftElbow = 7
    RightElbow = 8
    LeftWrist = 9
    RightWrist = 10
    LeftHip = 11
    RightHip = 12
    LeftKnee = 13
    RightKnee = 14
    LeftAnkle = 15
    RightAnkle = 16
    Unknown = -1

    @property
    def symbol(self) -> str:
        return _POSE_WIRE_NAMES[self.name]

    @classmethod
    def default(cls) -> "PoseKeypoint":
        return cls.Unknown


# --- Expressions ---

_EXPRESSION_LABELS: Dict[str, Tuple[str, str]] = {
    "Other": ("其他", "Other"),
    "Happy": ("高兴", "Happiness"),
    "Sad": ("悲伤", "Sadness"),
    "Angry": ("愤怒", "Anger"),
    "Fear": ("恐惧", "Fear"),
    "Surprise": ("惊讶", "Surprised"),
    "Disgust": ("厌恶", "Disgusted"),
    "Neutral": ("平静", "Calm"),
    "Contempt": ("轻蔑", "Contemptuous"),
}


class Expression(CodedEnum):
    """Facial expression classes with Chinese and English display labels."""

    Other = 0
    Happy = 1
    Sad = 2
    Angry = 3
    Fear = 4
    Surprise = 5
    Disgust = 6
    Neutral = 7
    Contempt = 8

    @property
    def primary_label(self) -> str:
        return _EXPRESSION_LABELS[self.name][0]

    @property
    def secondary_label(self) -> str:
        return _EXPRESSION_LABELS[self.name][1]

    def label(self, lang: str = "zh") -> str:
        return self.primary_label if lang.lower().startswith("zh") else self.secondary_label

    @classmethod
    def match(cls, value: Any) -> Optional["Expression"]:
        member = super().match(value)
        if member is not None or not isinstance(value, str):
            return member
        needle = value.strip().lower()
        for member in cls:
            if needle in (
                member.name.lower(),
                member.primary_label.lower(),
                member.secondary_label.lower(),
            ):
                return member
        return None

    @classmethod
    def default(cls) -> "Expression":
        return cls.Other


# --- Contact zones ---

class ContactZoneState(CodedEnum):
    Normal = 0
    Deleted = 1

    @classmethod
    def default(cls) -> "ContactZoneState":
        return cls.Deleted


class ContactZoneParticipantType(CodedEnum):
    Other = 0
    Contact = 1
    Group = 2
    Organization = 3

    @classmethod
    def default(cls) -> "ContactZoneParticipantType":
        return cls.Other


class ContactZoneParticipantState(CodedEnum):
    Normal = 0
    Pending = 1        # Waiting for the invitee to accept
    Reject = 2

    @classmethod
    def default(cls) -> "ContactZoneParticipantState":
        return cls.Normal


class ZoneAction(CodedEnum):
    """Participant change carried by a zone notification. Codes are wire-fixed."""

    Remove = 0
    Add = 1
    Update = 9

    @classmethod
    def default(cls) -> "ZoneAction":
        return cls.Update


# --- Groups, knowledge, resources ---

class GroupState(CodedEnum):
    Normal = 0
    Dismissed = 1
    Forbidden = 2
    HighRisk = 3
    Disabled = 9

    @classmethod
    def default(cls) -> "GroupState":
        return cls.Normal


class KnowledgeScope(CodedEnum):
    Private = "private"
    Organization = "organization"
    Public = "public"

    @classmethod
    def default(cls) -> "KnowledgeScope":
        return cls.Private


class Subject(CodedEnum):
    """Payload kind of a complex resource."""

    File = "file"
    Widget = "widget"
    Hyperlink = "hyperlink"
    Unknown = "unknown"

    @classmethod
    def default(cls) -> "Subject":
        return cls.Unknown


# --- Speech ---

class SpeechEmotion(CodedEnum):
    Angry = "Angry"
    Fearful = "Fearful"
    Happy = "Happy"
    Neutral = "Neutral"
    Sad = "Sad"
    Surprise = "Surprise"

    @classmethod
    def default(cls) -> "SpeechEmotion":
        return cls.Neutral


class Sentiment(CodedEnum):
    Positive = "Positive"
    Negative = "Negative"
    Neutral = "Neutral"
    Undefined = "Undefined"

    @classmethod
    def default(cls) -> "Sentiment":
        return cls.Undefined
