"""Cube entity data models."""

from cube_entity.models.base import Entity, JSONModel, Shape, ValueModel
from cube_entity.models.behavior import ContactBehavior
from cube_entity.models.config import CodecConfig
from cube_entity.models.contact import (
    AbstractContact,
    AnonymousContact,
    Contact,
    Device,
    Group,
    MutableGroup,
)
from cube_entity.models.enums import (
    CodedEnum,
    ContactZoneParticipantState,
    ContactZoneParticipantType,
    ContactZoneState,
    Expression,
    GroupState,
    HandKeypoint,
    KnowledgeScope,
    PoseKeypoint,
    Sentiment,
    SpeechEmotion,
    Subject,
    ZoneAction,
)
from cube_entity.models.estimation import (
    HandEstimation,
    HandRecognitionResult,
    PoseEstimation,
    PoseRecognitionResult,
)
from cube_entity.models.expression import ExpressionItem, FacialExpressionResult
from cube_entity.models.file import FileLabel
from cube_entity.models.geometry import BoundingBox, Point
from cube_entity.models.knowledge import KnowledgeArticle
from cube_entity.models.network import IceServer
from cube_entity.models.resource import (
    ComplexResource,
    FileResource,
    Hyperlink,
    HyperlinkResource,
    WidgetResource,
)
from cube_entity.models.speech import (
    EmotionRatio,
    SpeakerIndicator,
    SpeechRecognitionInfo,
    SpeechRecognitionResult,
    VoiceSegment,
)
from cube_entity.models.widget import ButtonWidget, ListWidget, TextWidget, Widget
from cube_entity.models.zone import ContactZone, ContactZoneBundle, ContactZoneParticipant

__all__ = [
    "AbstractContact",
    "AnonymousContact",
    "BoundingBox",
    "ButtonWidget",
    "CodecConfig",
    "CodedEnum",
    "ComplexResource",
    "Contact",
    "ContactBehavior",
    "ContactZone",
    "ContactZoneBundle",
    "ContactZoneParticipant",
    "ContactZoneParticipantState",
    "ContactZoneParticipantType",
    "ContactZoneState",
    "Device",
    "EmotionRatio",
    "Entity",
    "Expression",
    "ExpressionItem",
    "FacialExpressionResult",
    "FileLabel",
    "FileResource",
    "Group",
    "GroupState",
    "HandEstimation",
    "HandKeypoint",
    "HandRecognitionResult",
    "Hyperlink",
    "HyperlinkResource",
    "IceServer",
    "JSONModel",
    "KnowledgeArticle",
    "KnowledgeScope",
    "ListWidget",
    "MutableGroup",
    "Point",
    "PoseEstimation",
    "PoseKeypoint",
    "PoseRecognitionResult",
    "Sentiment",
    "Shape",
    "SpeakerIndicator",
    "SpeechEmotion",
    "SpeechRecognitionInfo",
    "SpeechRecognitionResult",
    "Subject",
    "TextWidget",
    "ValueModel",
    "VoiceSegment",
    "Widget",
    "WidgetResource",
    "ZoneAction",
]
