"""Knowledge base articles."""

from pydantic import Field

from cube_entity.models.base import Entity
from cube_entity.models.enums import KnowledgeScope, lenient


class KnowledgeArticle(Entity):
    """A document imported into a contact's knowledge base."""

    compact_exclude = ("content",)

    contact_id: int
    base: str                               # Knowledge base name
    category: str
    title: str
    content: str = ""
    summarization: str = ""
    author: str = "Anonymity"
    year: int
    month: int = Field(ge=1, le=12)
    date: int = Field(ge=1, le=31)
    scope: lenient(KnowledgeScope) = KnowledgeScope.Private
    activated: bool = False
    num_segments: int = 0
