"""
Factory resolvers for the polymorphic entity families.

Contact resolution probes the document's shape, in this fixed order:

1. group: carries "members" or "memberContacts", or the group header
   fields "tag", "ownerId" and "state" together
2. anonymous: carries "anonymous": true
3. contact: fallback, always succeeds

First match wins. A document that looks like both a group and an anonymous
contact is a Group.

Widget resolution dispatches on the explicit "widgetType" tag and never
defaults.
"""

from typing import Any, Mapping

from cube_entity.factory.registry import ProbeChain
from cube_entity.models.contact import AbstractContact, AnonymousContact, Contact, Group
from cube_entity.models.widget import Widget, widget_registry

GROUP_MEMBER_FIELDS = ("members", "memberContacts")
GROUP_HEADER_FIELDS = ("tag", "ownerId", "state")


def is_group(data: Mapping[str, Any]) -> bool:
    if any(name in data for name in GROUP_MEMBER_FIELDS):
        return True
    return all(name in data for name in GROUP_HEADER_FIELDS)


def is_anonymous(data: Mapping[str, Any]) -> bool:
    return data.get("anonymous") is True


contact_chain: ProbeChain[AbstractContact] = (
    ProbeChain("contact", fallback=Contact.from_json)
    .add("group", is_group, Group.from_json)
    .add("anonymous", is_anonymous, AnonymousContact.from_json)
)


def resolve_contact(data: Any) -> AbstractContact:
    """Build the contact variant a document describes."""
    if isinstance(data, AbstractContact):
        return data
    return contact_chain.resolve(data)


def resolve_widget(data: Any) -> Widget:
    """Build the widget named by the document's ``widgetType``."""
    if isinstance(data, Widget):
        return data
    return widget_registry.resolve(data)
