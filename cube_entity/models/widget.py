"""UI widget payloads, tagged by ``widgetType``."""

from typing import Any, List, Literal, Optional

from pydantic import Field

from cube_entity.factory.registry import TagRegistry
from cube_entity.models.base import Entity

widget_registry: TagRegistry["Widget"] = TagRegistry("widget", "widgetType")


class Widget(Entity):
    """
    Base of every widget. Concrete widgets pin ``widget_type`` to their tag
    and register with ``widget_registry``; ``Widget.from_json`` dispatches on
    the tag and fails with UnknownVariant for anything unregistered.
    """

    widget_type: str

    @classmethod
    def from_json(cls, data: Any):
        if cls is Widget and not isinstance(data, Widget):
            return widget_registry.resolve(data)
        return super().from_json(data)


@widget_registry.variant("Text")
class TextWidget(Widget):
    widget_type: Literal["Text"] = "Text"
    text: str
    color: Optional[str] = None             # CSS color, e.g. "#333333"
    font_size: Optional[int] = None


@widget_registry.variant("Button")
class ButtonWidget(Widget):
    widget_type: Literal["Button"] = "Button"
    label: str
    action: str                             # Command sent back when pressed
    payload: Optional[dict] = None


@widget_registry.variant("List")
class ListWidget(Widget):
    """An optional title over a list of text rows."""

    widget_type: Literal["List"] = "List"
    title: Optional[str] = None
    items: List[str] = Field(default_factory=list)
