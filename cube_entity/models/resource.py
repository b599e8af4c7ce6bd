"""
Complex resources — a subject tag plus exactly one payload.

The subject is fixed by the concrete class: ``FileResource.from_json`` reads
the document's ``subject`` and rejects any other subject as malformed. There
is no auto-detection across subjects.
"""

from typing import Annotated, ClassVar, Optional

from pydantic import BeforeValidator, Field, SerializeAsAny, field_validator

from cube_entity.models.base import Entity, ValueModel
from cube_entity.models.enums import Subject, lenient
from cube_entity.models.file import FileLabel
from cube_entity.models.widget import Widget


class ComplexResource(Entity):
    """Abstract tagged resource. Subclasses pin ``expected_subject``."""

    expected_subject: ClassVar[Subject] = Subject.Unknown

    subject: lenient(Subject)

    @field_validator("subject")
    @classmethod
    def _subject_matches(cls, value: Subject) -> Subject:
        if value != cls.expected_subject:
            raise ValueError(
                f"{cls.__name__} expects subject '{cls.expected_subject.code}', got '{value.code}'"
            )
        return value


class FileResource(ComplexResource):
    """A stored file. Full shape embeds the full label, compact the compact label."""

    expected_subject = Subject.File

    subject: lenient(Subject) = Subject.File
    file: FileLabel = Field(alias="payload")


class WidgetResource(ComplexResource):
    expected_subject = Subject.Widget

    subject: lenient(Subject) = Subject.Widget
    widget: Annotated[SerializeAsAny[Widget], BeforeValidator(Widget.from_json)] = Field(alias="payload")


class Hyperlink(ValueModel):
    """Metadata scraped from a web page."""

    compact_exclude = ("path",)

    url: str = ""
    meta_type: str                          # e.g., "article", "image"
    mime_type: str = "text/plain"
    site: Optional[str] = None
    title: Optional[str] = None
    content: Optional[str] = None
    illustration: Optional[str] = None
    path: Optional[str] = None              # Local cache path, never shared
    size: int = 0
    num_words: int = 0
    width: int = 0
    height: int = 0
    format: Optional[str] = None
    thumbnail: Optional[str] = None
    raw_text: Optional[str] = None


class HyperlinkResource(ComplexResource):
    expected_subject = Subject.Hyperlink

    subject: lenient(Subject) = Subject.Hyperlink
    link: Hyperlink = Field(alias="payload")
